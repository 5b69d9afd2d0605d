"""Report generation for correlation analysis results."""

import csv
import html
import json
import os
import re
from datetime import datetime
from typing import Dict, List

from ..analyzer import CorrelationAnalysisResult
from ..utils.logger import get_logger
from .excel_generator import ExcelGenerator


logger = get_logger('report_generator')

SUPPORTED_FORMATS = ('json', 'html', 'csv', 'xlsx')


def _slug(name: str) -> str:
    slug = re.sub(r'[^A-Za-z0-9]+', '_', name).strip('_')
    return slug or 'dataset'


class ReportGenerator:
    """Generates reports in multiple formats (JSON, HTML, CSV, Excel)."""

    def __init__(self, output_dir: str = './reports'):
        """
        Initialize report generator.

        Args:
            output_dir: Directory to save reports
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        logger.info(f"Report generator initialized. Output dir: {output_dir}")

    def generate_report(
        self,
        result: CorrelationAnalysisResult,
        formats: List[str] = None
    ) -> Dict[str, str]:
        """
        Generate reports in specified formats.

        Args:
            result: Analysis result
            formats: List of formats to generate ['json', 'html', 'csv', 'xlsx']

        Returns:
            Dictionary mapping format to file path
        """
        if formats is None:
            formats = ['json', 'html']

        unknown = [fmt for fmt in formats if fmt not in SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(f"Unsupported report formats: {unknown}")

        report_files = {}

        # One timestamp for every file of this run
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        filename_prefix = f"analysis_{_slug(result.dataset_name)}_{timestamp}"

        logger.info(f"Generating reports in formats: {formats}")

        if 'json' in formats:
            report_files['json'] = self._generate_json(result, filename_prefix)

        if 'html' in formats:
            report_files['html'] = self._generate_html_report(result, filename_prefix)

        if 'csv' in formats:
            report_files['csv'] = self._generate_csv(result, filename_prefix)

        if 'xlsx' in formats:
            xlsx_path = os.path.join(self.output_dir, f"{filename_prefix}.xlsx")
            ExcelGenerator().generate_analysis_report(xlsx_path, result)
            report_files['xlsx'] = xlsx_path

        logger.info(f"Reports generated successfully: {list(report_files.keys())}")
        return report_files

    def _generate_json(self, result: CorrelationAnalysisResult, filename_prefix: str) -> str:
        """Generate JSON report."""
        filepath = os.path.join(self.output_dir, f"{filename_prefix}.json")

        with open(filepath, 'w') as f:
            json.dump(result.to_dict(), f, indent=2, default=str)

        logger.info(f"JSON report generated: {filepath}")
        return filepath

    def _generate_html_report(self, result: CorrelationAnalysisResult, filename_prefix: str) -> str:
        """Generate HTML report file."""
        filepath = os.path.join(self.output_dir, f"{filename_prefix}.html")

        with open(filepath, 'w') as f:
            f.write(self._generate_html(result))

        logger.info(f"HTML report generated: {filepath}")
        return filepath

    def _generate_html(self, result: CorrelationAnalysisResult) -> str:
        """Generate HTML report with insight and correlation tables."""
        confidence_colors = {
            'high': '#28a745',
            'medium': '#ffc107',
            'low': '#17a2b8'
        }

        summary = result.to_dict()['summary']
        document = html.escape(result.document_name) if result.document_name else 'None supplied'
        generated_at = datetime.now().strftime('%Y-%m-%d %H:%M:%S')

        page = f"""
<!DOCTYPE html>
<html>
<head>
    <title>Correlation Analysis - {html.escape(result.dataset_name)}</title>
    <style>
        body {{
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            margin: 20px;
            background-color: #f5f5f5;
        }}
        .container {{
            max-width: 1400px;
            margin: 0 auto;
            background: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }}
        h1 {{
            color: #333;
            border-bottom: 3px solid #667eea;
            padding-bottom: 10px;
        }}
        .info-section {{
            background: #f8f9fa;
            padding: 20px;
            border-radius: 6px;
            margin: 20px 0;
        }}
        .info-row {{
            display: flex;
            justify-content: space-between;
            padding: 8px 0;
            border-bottom: 1px solid #dee2e6;
        }}
        .info-label {{
            font-weight: bold;
            color: #495057;
        }}
        .narrative {{
            background: #e9ecef;
            padding: 20px;
            border-radius: 6px;
            margin: 20px 0;
            line-height: 1.6;
        }}
        .summary-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
            gap: 15px;
            margin: 20px 0;
        }}
        .summary-card {{
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 20px;
            border-radius: 8px;
            text-align: center;
        }}
        .summary-number {{
            font-size: 36px;
            font-weight: bold;
            margin: 10px 0;
        }}
        .summary-label {{
            font-size: 14px;
            opacity: 0.9;
        }}
        table {{
            width: 100%;
            border-collapse: collapse;
            margin: 20px 0;
            background: white;
        }}
        th {{
            background: #343a40;
            color: white;
            padding: 12px;
            text-align: left;
            font-weight: 600;
        }}
        td {{
            padding: 12px;
            border-bottom: 1px solid #dee2e6;
        }}
        tr:hover {{
            background-color: #f8f9fa;
        }}
        .confidence-cell {{
            font-weight: bold;
            padding: 6px 12px;
            border-radius: 4px;
            display: inline-block;
            min-width: 80px;
            text-align: center;
            color: white;
        }}
        .footer {{
            margin-top: 40px;
            padding-top: 20px;
            border-top: 2px solid #dee2e6;
            text-align: center;
            color: #6c757d;
            font-size: 12px;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h1>Mixed-Methods Correlation Analysis</h1>

        <div class="info-section">
            <div class="info-row">
                <span class="info-label">Dataset:</span>
                <span>{html.escape(result.dataset_name)}</span>
            </div>
            <div class="info-row">
                <span class="info-label">Document:</span>
                <span>{document}</span>
            </div>
            <div class="info-row">
                <span class="info-label">Generated:</span>
                <span>{generated_at}</span>
            </div>
        </div>

        <h2>Narrative</h2>
        <div class="narrative">{html.escape(result.narrative)}</div>

        <h2>Summary</h2>
        <div class="summary-grid">
            <div class="summary-card">
                <div class="summary-label">Columns</div>
                <div class="summary-number">{summary['columns']}</div>
            </div>
            <div class="summary-card">
                <div class="summary-label">Eligible Columns</div>
                <div class="summary-number">{summary['eligible_columns']}</div>
            </div>
            <div class="summary-card">
                <div class="summary-label">Signals</div>
                <div class="summary-number">{summary['signals']}</div>
            </div>
            <div class="summary-card">
                <div class="summary-label">Correlations</div>
                <div class="summary-number">{summary['correlations']}</div>
            </div>
            <div class="summary-card">
                <div class="summary-label">Insights</div>
                <div class="summary-number">{summary['insights']}</div>
            </div>
        </div>

        <h2>Insights</h2>
        <table>
            <thead>
                <tr>
                    <th>Confidence</th>
                    <th>Category</th>
                    <th>Statement</th>
                    <th>Signals</th>
                </tr>
            </thead>
            <tbody>
"""

        for insight in result.insights:
            color = confidence_colors.get(insight.confidence.value, '#6c757d')
            signals = ', '.join(html.escape(s) for s in sorted(insight.related_signals))
            page += f"""
                <tr>
                    <td><span class="confidence-cell" style="background: {color};">{insight.confidence.value.upper()}</span></td>
                    <td>{insight.category.value}</td>
                    <td>{html.escape(insight.statement)}</td>
                    <td>{signals}</td>
                </tr>
"""

        page += """
            </tbody>
        </table>

        <h2>Correlations</h2>
        <table>
            <thead>
                <tr>
                    <th>Column</th>
                    <th>Signal Kind</th>
                    <th>Signal</th>
                    <th>Strength</th>
                    <th>Basis</th>
                </tr>
            </thead>
            <tbody>
"""

        for record in result.correlations:
            page += f"""
                <tr>
                    <td>{html.escape(record.column_name)}</td>
                    <td>{record.signal_kind.value}</td>
                    <td>{html.escape(record.signal_label)}</td>
                    <td>{record.strength:+.4f}</td>
                    <td>{record.basis.value}</td>
                </tr>
"""

        page += """
            </tbody>
        </table>

        <div class="footer">
            Generated by Mixed Insights
        </div>
    </div>
</body>
</html>
"""

        return page

    def _generate_csv(self, result: CorrelationAnalysisResult, filename_prefix: str) -> str:
        """Generate CSV report of correlation records."""
        filepath = os.path.join(self.output_dir, f"{filename_prefix}.csv")

        with open(filepath, 'w', newline='') as f:
            writer = csv.writer(f)

            writer.writerow(['column_name', 'signal_kind', 'signal_label', 'strength', 'basis'])

            for record in result.correlations:
                writer.writerow([
                    record.column_name,
                    record.signal_kind.value,
                    record.signal_label,
                    record.strength,
                    record.basis.value
                ])

        logger.info(f"CSV report generated: {filepath}")
        return filepath
