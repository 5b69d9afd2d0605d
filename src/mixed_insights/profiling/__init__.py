"""Column and document profiles consumed by the correlation engine."""

from .column_profile import (
    ColumnKind,
    ColumnProfile,
    NumericStats,
    StringStats,
    BooleanStats,
    DateStats,
    TopValue
)
from .document_profile import DocumentProfile, Sentiment, Theme
from .profile_loader import load_column_profiles, load_document_profile, load_json

__all__ = [
    'ColumnKind',
    'ColumnProfile',
    'NumericStats',
    'StringStats',
    'BooleanStats',
    'DateStats',
    'TopValue',
    'DocumentProfile',
    'Sentiment',
    'Theme',
    'load_column_profiles',
    'load_document_profile',
    'load_json'
]
