"""
Mixed Insights - Mixed-Methods Correlation Analysis

Correlates profiled dataset columns with the themes, keywords and sentiment
of an analyzed document, and turns the associations into ranked insights and
a short narrative.
"""

__version__ = '1.0.0'
__author__ = 'Your Team'

from .analyzer import CorrelationAnalyzer, CorrelationAnalysisResult
from .correlation import CorrelationEngine, CorrelationRecord
from .exceptions import ConfigurationError, InvalidInputError, MixedInsightsError
from .insights import Insight, InsightGenerator, NarrativeComposer
from .profiling import ColumnProfile, DocumentProfile, load_column_profiles, load_document_profile
from .reporting import ReportGenerator
from .utils import ConfigLoader, setup_logging

__all__ = [
    'CorrelationAnalyzer',
    'CorrelationAnalysisResult',
    'CorrelationEngine',
    'CorrelationRecord',
    'Insight',
    'InsightGenerator',
    'NarrativeComposer',
    'ColumnProfile',
    'DocumentProfile',
    'load_column_profiles',
    'load_document_profile',
    'ReportGenerator',
    'ConfigLoader',
    'setup_logging',
    'MixedInsightsError',
    'InvalidInputError',
    'ConfigurationError',
]
