"""
Excel Report Generator Module

Generates an Excel workbook with summary, insight and correlation sheets.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils.dataframe import dataframe_to_rows

logger = logging.getLogger(__name__)


HEADER_FILL = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF", size=11)
BORDER = Border(
    left=Side(style='thin'),
    right=Side(style='thin'),
    top=Side(style='thin'),
    bottom=Side(style='thin')
)
CONFIDENCE_FILLS = {
    'high': PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid"),
    'medium': PatternFill(start_color="FFEB9C", end_color="FFEB9C", fill_type="solid"),
    'low': PatternFill(start_color="DDEBF7", end_color="DDEBF7", fill_type="solid"),
}


class ExcelGenerator:
    """Generator for Excel analysis reports."""

    def generate_analysis_report(self, output_path: Union[str, Path], result) -> None:
        """
        Generate Excel report with Summary, Insights and Correlations sheets.

        Args:
            output_path: Path to save the Excel file
            result: CorrelationAnalysisResult
        """
        logger.info(f"Generating Excel report: {output_path}")

        wb = Workbook()
        wb.remove(wb.active)  # Remove default sheet

        self._add_summary_sheet(wb, result)

        insights = pd.DataFrame(
            [insight.to_dict() for insight in result.insights],
            columns=['confidence', 'category', 'statement', 'strength',
                     'supporting_records', 'related_columns', 'related_signals']
        )
        if not insights.empty:
            insights['related_columns'] = insights['related_columns'].apply(', '.join)
            insights['related_signals'] = insights['related_signals'].apply(', '.join)
        self._add_table_sheet(wb, 'Insights', insights, widths=[12, 14, 90, 10, 10, 25, 40])

        correlations = pd.DataFrame(
            [record.to_dict() for record in result.correlations],
            columns=['column_name', 'signal_kind', 'signal_label', 'strength', 'basis']
        )
        self._add_table_sheet(wb, 'Correlations', correlations, widths=[30, 12, 40, 10, 16])

        wb.save(output_path)
        logger.info(f"Excel report saved: {output_path}")

    def _add_summary_sheet(self, wb: Workbook, result) -> None:
        """Add summary sheet with dataset, document and narrative."""
        ws = wb.create_sheet("Summary", 0)

        ws['A1'] = "MIXED-METHODS CORRELATION ANALYSIS"
        ws['A1'].font = Font(bold=True, size=14)
        ws.merge_cells('A1:D1')

        summary = result.to_dict()['summary']
        ws['A3'] = "Dataset"
        ws['B3'] = result.dataset_name
        ws['A4'] = "Document"
        ws['B4'] = result.document_name or 'None supplied'
        ws['A5'] = "Columns"
        ws['B5'] = summary['columns']
        ws['A6'] = "Eligible columns"
        ws['B6'] = summary['eligible_columns']
        ws['A7'] = "Correlations"
        ws['B7'] = summary['correlations']
        ws['A8'] = "Insights"
        ws['B8'] = summary['insights']

        for row in range(3, 9):
            ws.cell(row=row, column=1).font = Font(bold=True)

        ws['A10'] = "Narrative"
        ws['A10'].font = Font(bold=True)
        ws['A11'] = result.narrative
        ws['A11'].alignment = Alignment(wrap_text=True, vertical='top')
        ws.merge_cells('A11:D20')

        ws.column_dimensions['A'].width = 20
        ws.column_dimensions['B'].width = 40
        ws.column_dimensions['C'].width = 30
        ws.column_dimensions['D'].width = 30

    def _add_table_sheet(
        self,
        wb: Workbook,
        title: str,
        frame: pd.DataFrame,
        widths: List[int]
    ) -> None:
        """Add a sheet holding one table with a styled header row."""
        ws = wb.create_sheet(title)

        for row in dataframe_to_rows(frame, index=False, header=True):
            ws.append(row)

        for col_idx in range(1, len(frame.columns) + 1):
            cell = ws.cell(row=1, column=col_idx)
            cell.fill = HEADER_FILL
            cell.font = HEADER_FONT
            cell.border = BORDER
            cell.alignment = Alignment(horizontal='center', vertical='center')

        confidence_col = list(frame.columns).index('confidence') + 1 if 'confidence' in frame.columns else None
        for row_idx in range(2, ws.max_row + 1):
            for col_idx in range(1, len(frame.columns) + 1):
                ws.cell(row=row_idx, column=col_idx).border = BORDER
            if confidence_col:
                cell = ws.cell(row=row_idx, column=confidence_col)
                fill = CONFIDENCE_FILLS.get(cell.value)
                if fill:
                    cell.fill = fill

        for col_idx, width in enumerate(widths, start=1):
            ws.column_dimensions[chr(ord('A') + col_idx - 1)].width = width

        # Freeze header row
        ws.freeze_panes = ws['A2']
