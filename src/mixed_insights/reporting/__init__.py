"""Report generation modules."""

from .report_generator import ReportGenerator
from .excel_generator import ExcelGenerator

__all__ = ['ReportGenerator', 'ExcelGenerator']
