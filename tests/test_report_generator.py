"""Tests for report generation."""

import csv
import json
from pathlib import Path

import pytest
from openpyxl import load_workbook

from mixed_insights.analyzer import CorrelationAnalyzer
from mixed_insights.reporting.report_generator import ReportGenerator


@pytest.fixture
def result(revenue_column, churn_column, sales_document):
    return CorrelationAnalyzer().analyze('Q3 Sales', [revenue_column, churn_column],
                                         sales_document, 'interviews')


@pytest.fixture
def report_generator(tmp_path):
    return ReportGenerator(str(tmp_path / 'reports'))


class TestReportGenerator:
    """Tests for JSON, HTML, CSV and Excel reports."""

    def test_all_formats(self, report_generator, result):
        files = report_generator.generate_report(result, formats=['json', 'html', 'csv', 'xlsx'])

        assert set(files) == {'json', 'html', 'csv', 'xlsx'}
        for path in files.values():
            assert Path(path).exists()
            assert Path(path).name.startswith('analysis_Q3_Sales_')

    def test_default_formats(self, report_generator, result):
        assert set(report_generator.generate_report(result)) == {'json', 'html'}

    def test_json_report(self, report_generator, result):
        path = report_generator.generate_report(result, formats=['json'])['json']

        with open(path) as f:
            data = json.load(f)
        assert data == result.to_dict()

    def test_csv_report(self, report_generator, result):
        path = report_generator.generate_report(result, formats=['csv'])['csv']

        with open(path, newline='') as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == len(result.correlations)
        assert rows[0]['column_name'] == result.correlations[0].column_name
        assert rows[0]['basis'] == result.correlations[0].basis.value

    def test_html_report_escapes_text(self, report_generator, result):
        path = report_generator.generate_report(result, formats=['html'])['html']

        page = Path(path).read_text()
        assert 'Mixed-Methods Correlation Analysis' in page
        assert '&quot;revenue&quot; tends to rise with' in page
        assert '<td>revenue growth</td>' in page

    def test_excel_report(self, report_generator, result):
        path = report_generator.generate_report(result, formats=['xlsx'])['xlsx']

        wb = load_workbook(path)
        assert wb.sheetnames == ['Summary', 'Insights', 'Correlations']
        assert wb['Summary']['B3'].value == 'Q3 Sales'
        assert wb['Insights']['A1'].value == 'confidence'
        assert wb['Correlations'].max_row == len(result.correlations) + 1

    def test_excel_report_without_insights(self, report_generator, revenue_column):
        empty = CorrelationAnalyzer().analyze('Q3 Sales', [revenue_column], None)
        path = report_generator.generate_report(empty, formats=['xlsx'])['xlsx']

        wb = load_workbook(path)
        assert wb['Insights'].max_row == 1

    def test_unknown_format(self, report_generator, result):
        with pytest.raises(ValueError, match='Unsupported'):
            report_generator.generate_report(result, formats=['pdf'])
