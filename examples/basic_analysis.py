"""
Basic usage example for Mixed Insights.

This script demonstrates how to:
1. Load configuration
2. Load a dataset profile and an analyzed document
3. Run a correlation analysis
4. Generate reports
"""

from pathlib import Path

from mixed_insights import (
    ConfigLoader,
    CorrelationAnalyzer,
    ReportGenerator,
    load_column_profiles,
    load_document_profile,
)
from mixed_insights.profiling import load_json

HERE = Path(__file__).parent


def main():
    # Load configuration
    config = ConfigLoader()

    # Load pre-computed profiles
    columns = load_column_profiles(load_json(HERE / 'sales_profile.json'))
    document = load_document_profile(load_json(HERE / 'customer_interviews.json'))

    # Run analysis
    analyzer = CorrelationAnalyzer(config.get_all())
    print(f"Analyzing {len(columns)} columns against customer interviews...")
    result = analyzer.analyze('Q3 Sales', columns, document, 'customer interviews')

    # Generate reports
    report_gen = ReportGenerator(output_dir="./reports")
    report_files = report_gen.generate_report(result, formats=['json', 'html', 'xlsx'])

    print(f"\n✅ Analysis complete!")
    print(f"\n{result.narrative}")
    print(f"\nReports generated:")
    for fmt, path in report_files.items():
        print(f"  - {fmt.upper()}: {path}")

    # Access individual records
    print(f"\nTop correlations:")
    for record in result.correlations[:5]:
        print(f"  - {record.column_name} ~ {record.signal_kind.value} '{record.signal_label}': "
              f"{record.strength:+.2f} ({record.basis.value})")


if __name__ == '__main__':
    main()
