"""Shared pytest fixtures for all tests."""

import pytest

from mixed_insights.correlation.engine import CorrelationEngine
from mixed_insights.profiling.column_profile import (
    BooleanStats,
    ColumnKind,
    ColumnProfile,
    NumericStats,
    StringStats,
    TopValue,
)
from mixed_insights.profiling.document_profile import DocumentProfile, Sentiment, Theme


ENV_OVERRIDES = (
    'MIN_SAMPLES',
    'LEXICAL_WEIGHT',
    'DISTRIBUTIONAL_WEIGHT',
    'DEDUPE_KEYWORDS',
    'SIGNIFICANCE_THRESHOLD',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep policy overrides from the host environment out of the tests."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


def numeric_column(name, mean=5000, median=4800, std_dev=1200, count=100, null_count=0,
                   kind=ColumnKind.INTEGER):
    return ColumnProfile(
        name=name,
        kind=kind,
        count=count,
        null_count=null_count,
        stats=NumericStats(min=100, max=20000, mean=mean, median=median, std_dev=std_dev, sum=500000),
    )


@pytest.fixture
def revenue_column() -> ColumnProfile:
    return numeric_column('revenue')


@pytest.fixture
def rating_column() -> ColumnProfile:
    return ColumnProfile(
        name='customer_rating',
        kind=ColumnKind.FLOAT,
        count=50,
        null_count=2,
        stats=NumericStats(min=1.0, max=5.0, mean=4.5, median=4.2, std_dev=0.6),
    )


@pytest.fixture
def churn_column() -> ColumnProfile:
    return ColumnProfile(
        name='churned',
        kind=ColumnKind.BOOLEAN,
        count=100,
        null_count=0,
        stats=BooleanStats(true_count=80, false_count=20),
    )


@pytest.fixture
def region_column() -> ColumnProfile:
    return ColumnProfile(
        name='region',
        kind=ColumnKind.STRING,
        count=100,
        null_count=0,
        stats=StringStats(max_length=5, min_length=4, unique=2,
                          top_values=(TopValue('north', 60, 60.0), TopValue('south', 40, 40.0))),
    )


@pytest.fixture
def sales_document() -> DocumentProfile:
    return DocumentProfile(
        themes=(Theme('revenue growth'),),
        sentiment=Sentiment('positive', 0.6),
        keywords=('revenue',),
        summary='Quarterly interviews describe steady revenue growth.',
    )


@pytest.fixture
def engine() -> CorrelationEngine:
    return CorrelationEngine()


@pytest.fixture
def dataset_payload():
    """Dataset shape stored by the web application."""
    return {
        'columns': ['revenue', 'region'],
        'types': {'revenue': 'integer', 'region': 'string'},
        'stats': {
            'revenue': {
                'count': 100, 'nullCount': 0, 'min': 100, 'max': 20000,
                'mean': 5000, 'median': 4800, 'stdDev': 1200, 'sum': 500000,
            },
            'region': {
                'count': 100, 'nullCount': 0, 'maxLength': 5, 'minLength': 4, 'unique': 2,
                'topValues': [
                    {'value': 'north', 'count': 60, 'percentage': 60.0},
                    {'value': 'south', 'count': 40, 'percentage': 40.0},
                ],
            },
        },
    }


@pytest.fixture
def document_payload():
    return {
        'themes': ['revenue growth'],
        'sentiment': {'label': 'positive', 'polarity': 0.6},
        'keywords': ['revenue'],
        'summary': 'Quarterly interviews describe steady revenue growth.',
    }
