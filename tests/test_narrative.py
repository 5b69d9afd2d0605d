"""Tests for narrative composition."""

import pytest

from mixed_insights.correlation.records import Basis, CorrelationRecord, SignalKind
from mixed_insights.exceptions import ConfigurationError, InvalidInputError
from mixed_insights.insights.generator import InsightGenerator
from mixed_insights.insights.narrative import RECOMMENDATION, NarrativeComposer


def _sentences(text):
    return [s for s in text.split('. ') if s]


@pytest.fixture
def composer():
    return NarrativeComposer()


@pytest.fixture
def insights():
    records = [
        CorrelationRecord(column, SignalKind.THEME, label, strength, Basis.LEXICAL_MATCH)
        for column, label, strength in [
            ('revenue', 'growth', 0.9),
            ('churn', 'retention', -0.6),
            ('spend', 'budget', 0.4),
            ('age', 'youth', 0.36),
        ]
    ]
    return InsightGenerator().derive(records)


class TestEmptyNarrative:
    """Tests for analyses without significant insights."""

    def test_without_document(self, composer):
        narrative = composer.compose('Q3 Sales', None, [])

        assert narrative.startswith('This analysis covers the dataset "Q3 Sales" and no document was supplied.')
        assert 'Without qualitative signals, no strong mixed-methods associations were found.' in narrative
        assert narrative.endswith('Gather more data by attaching a related text document, then rerun the analysis.')

    def test_with_document(self, composer):
        narrative = composer.compose('Q3 Sales', 'interviews', [])

        assert narrative.startswith('This analysis links the dataset "Q3 Sales" with the document "interviews".')
        assert 'No strong mixed-methods associations were found' in narrative
        assert 'Gather more data' in narrative

    def test_blank_document_name_counts_as_absent(self, composer):
        assert composer.compose('Q3 Sales', '   ', []) == composer.compose('Q3 Sales', None, [])


class TestNarrative:
    """Tests for narratives with insights."""

    def test_structure(self, composer, insights):
        narrative = composer.compose('Q3 Sales', 'interviews', insights)

        assert 'Found 4 significant associations, 1 with high confidence.' in narrative
        assert 'Most notably, "revenue" tends to rise with the theme "growth"' in narrative
        assert 'In addition, "churn" tends to fall with the theme "retention"' in narrative
        assert 'Finally, "spend"' in narrative
        assert '"age"' not in narrative
        assert narrative.endswith(RECOMMENDATION)

    def test_sentence_count_is_bounded(self, composer, insights):
        for subset in (insights[:1], insights[:2], insights):
            count = len(_sentences(composer.compose('Q3 Sales', 'interviews', subset)))
            assert 3 <= count <= 6

    def test_max_insights(self, insights):
        narrative = NarrativeComposer(max_insights=1).compose('Q3 Sales', 'interviews', insights)

        assert 'Most notably, ' in narrative
        assert 'In addition, ' not in narrative

    def test_single_insight_wording(self, composer, insights):
        narrative = composer.compose('Q3 Sales', 'interviews', insights[:1])
        assert 'Found 1 significant association, 1 with high confidence.' in narrative

    def test_deterministic(self, composer, insights):
        first = composer.compose('Q3 Sales', 'interviews', insights)
        assert first == composer.compose('Q3 Sales', 'interviews', list(reversed(insights)))
        assert first == NarrativeComposer().compose('Q3 Sales', 'interviews', insights)


class TestValidation:
    """Tests for composer input validation."""

    def test_blank_dataset_name(self, composer):
        with pytest.raises(InvalidInputError):
            composer.compose('  ', None, [])

    def test_insights_must_be_insights(self, composer):
        with pytest.raises(InvalidInputError):
            composer.compose('Q3 Sales', None, ['revenue rises'])

    @pytest.mark.parametrize('max_insights', [0, 4, True])
    def test_invalid_max_insights(self, max_insights):
        with pytest.raises(ConfigurationError):
            NarrativeComposer(max_insights=max_insights)
