"""Command-line interface for the mixed-methods analysis engine."""

import click
import sys
import yaml
from pathlib import Path
from typing import Optional

from . import __version__
from .analyzer import CorrelationAnalyzer
from .exceptions import ConfigurationError, MixedInsightsError
from .profiling.profile_loader import load_column_profiles, load_document_profile, load_json
from .reporting.report_generator import ReportGenerator, SUPPORTED_FORMATS
from .utils.config_loader import ConfigLoader
from .utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__)
def cli():
    """Mixed-Methods Correlation Analysis."""
    pass


@cli.command('analyze')
@click.argument('dataset_profile', type=click.Path(exists=True, dir_okay=False))
@click.option('--document', '-d', 'document_profile', type=click.Path(exists=True, dir_okay=False),
              help='Path to analyzed document JSON (themes, sentiment, keywords, summary)')
@click.option('--name', '-n', 'dataset_name', help='Dataset name (default: profile file name)')
@click.option('--document-name', help='Document name (default: document file name)')
@click.option('--config', '-c', help='Path to config YAML file')
@click.option('--env', '-e', help='Path to .env file')
@click.option('--significance', '-s', type=float, help='Override insight significance threshold')
@click.option('--min-samples', type=int, help='Override minimum non-null values per column')
@click.option('--output-dir', '-o', help='Output directory for reports')
@click.option('--formats', '-f', multiple=True, type=click.Choice(SUPPORTED_FORMATS),
              help='Report formats (json, html, csv, xlsx)')
@click.option('--no-reports', is_flag=True, help='Print results without writing report files')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def analyze(
    dataset_profile: str,
    document_profile: Optional[str],
    dataset_name: Optional[str],
    document_name: Optional[str],
    config: Optional[str],
    env: Optional[str],
    significance: Optional[float],
    min_samples: Optional[int],
    output_dir: Optional[str],
    formats: tuple,
    no_reports: bool,
    verbose: bool
):
    """
    Correlate a dataset profile with an analyzed document.

    Examples:
        # Dataset with document
        mixed-insights analyze sales_profile.json --document interviews.json -n "Q3 Sales"

        # Lower the significance threshold and write an Excel report
        mixed-insights analyze sales_profile.json -d interviews.json -s 0.25 -f xlsx
    """
    # Setup logging
    logger = setup_logging(verbose=verbose)

    try:
        click.echo("\nMixed-Methods Correlation Analysis")
        click.echo(f"{'='*60}\n")

        # Load configuration
        click.echo("Loading configuration...")
        config_loader = ConfigLoader(config_path=config, env_path=env)
        app_config = config_loader.get_all()

        if significance is not None:
            app_config.setdefault('insights', {})['significance'] = significance
        if min_samples is not None:
            app_config.setdefault('correlation', {})['min_samples'] = min_samples

        # Load profiles
        click.echo(f"Loading dataset profile: {dataset_profile}")
        columns = load_column_profiles(load_json(dataset_profile))
        dataset_name = dataset_name or Path(dataset_profile).stem

        document = None
        if document_profile:
            click.echo(f"Loading document profile: {document_profile}")
            document = load_document_profile(load_json(document_profile))
            document_name = document_name or Path(document_profile).stem

        # Run analysis
        analyzer = CorrelationAnalyzer(app_config)
        result = analyzer.analyze(dataset_name, columns, document, document_name)

        click.echo(f"\nColumns: {len(columns)}  Correlations: {len(result.correlations)}  "
                   f"Insights: {len(result.insights)}")

        click.echo("\nNarrative:")
        click.echo(f"  {result.narrative}")

        if result.insights:
            click.echo("\nInsights:")
            for insight in result.insights:
                click.echo(f"  [{insight.confidence.value.upper()}] {insight.statement}")

        if no_reports:
            sys.exit(0)

        # Generate reports
        reporting = config_loader.get_reporting_config()
        click.echo("\nGenerating reports...")
        report_gen = ReportGenerator(output_dir or reporting['output_dir'])
        report_files = report_gen.generate_report(result, formats=list(formats) or reporting['formats'])

        click.echo("\nReports generated:")
        for fmt, path in report_files.items():
            click.echo(f"  {fmt.upper()}: {path}")

        sys.exit(0)

    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        click.echo(f"\nConfiguration error: {str(e)}", err=True)
        sys.exit(1)

    except MixedInsightsError as e:
        logger.error(f"Analysis rejected: {e}")
        click.echo(f"\nInvalid input: {str(e)}", err=True)
        sys.exit(1)

    except (FileNotFoundError, ValueError) as e:
        click.echo(f"\nError: {str(e)}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


@cli.command('show-config')
@click.option('--config', '-c', help='Path to config YAML file')
@click.option('--env', '-e', help='Path to .env file')
def show_config(config: Optional[str], env: Optional[str]):
    """Print the effective analysis policy."""
    try:
        config_loader = ConfigLoader(config_path=config, env_path=env)
        analyzer = CorrelationAnalyzer(config_loader.get_all())
    except (MixedInsightsError, FileNotFoundError) as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)

    click.echo(yaml.safe_dump(analyzer.settings(), sort_keys=False).rstrip())


if __name__ == '__main__':
    cli()
