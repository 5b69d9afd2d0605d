"""Tests for building profiles from JSON payloads."""

import json

import pytest

from mixed_insights.exceptions import InvalidInputError
from mixed_insights.profiling.column_profile import (
    BooleanStats,
    ColumnKind,
    DateStats,
    NumericStats,
    StringStats,
)
from mixed_insights.profiling.profile_loader import (
    column_from_dict,
    load_column_profiles,
    load_document_profile,
    load_json,
    sentiment_from_payload,
)


class TestLoadColumnProfiles:
    """Tests for dataset payload shapes."""

    def test_types_and_stats_shape(self, dataset_payload):
        columns = load_column_profiles(dataset_payload)

        assert [c.name for c in columns] == ['revenue', 'region']
        revenue, region = columns
        assert revenue.kind == ColumnKind.INTEGER
        assert isinstance(revenue.stats, NumericStats)
        assert revenue.stats.std_dev == 1200
        assert region.kind == ColumnKind.STRING
        assert isinstance(region.stats, StringStats)
        assert region.stats.unique == 2
        assert region.stats.top_values[0].value == 'north'

    def test_list_of_entries(self):
        columns = load_column_profiles([
            {'name': 'active', 'type': 'bool', 'count': 10, 'null_count': 1,
             'stats': {'trueCount': 6, 'falseCount': 3}},
            {'name': 'signup', 'type': 'timestamp', 'count': 10,
             'stats': {'earliest': '2024-01-01', 'latest': '2024-06-30'}},
        ])

        active, signup = columns
        assert active.kind == ColumnKind.BOOLEAN
        assert active.stats == BooleanStats(true_count=6, false_count=3)
        assert active.non_null_count == 9
        assert signup.kind == ColumnKind.DATE
        assert isinstance(signup.stats, DateStats)

    def test_columns_key_with_entries(self):
        columns = load_column_profiles({'columns': [
            {'name': 'price', 'kind': 'numeric', 'count': 4, 'mean': 2.5, 'median': 2.5, 'std_dev': 1.1},
        ]})
        assert columns[0].kind == ColumnKind.FLOAT
        assert columns[0].stats.mean == 2.5

    def test_stats_without_types_skips_non_column_entries(self):
        payload = {'stats': {
            'revenue': {'type': 'integer', 'count': 3, 'mean': 1, 'median': 1},
            'aiAnalysis': {'summary': 'merged result'},
        }}
        columns = load_column_profiles(payload)
        assert [c.name for c in columns] == ['revenue']

    def test_missing_type(self):
        with pytest.raises(InvalidInputError, match='no declared type'):
            column_from_dict({'name': 'revenue', 'count': 3})

    def test_missing_count(self):
        with pytest.raises(InvalidInputError, match='no count'):
            column_from_dict({'name': 'revenue', 'type': 'integer'})

    def test_missing_stats_for_listed_column(self):
        with pytest.raises(InvalidInputError, match="No stats for column 'region'"):
            load_column_profiles({'columns': ['region'], 'stats': {}})

    def test_unknown_type(self):
        with pytest.raises(InvalidInputError):
            column_from_dict({'name': 'shape', 'type': 'geometry', 'count': 1})

    def test_payload_must_be_list_or_object(self):
        with pytest.raises(InvalidInputError):
            load_column_profiles('revenue')


class TestSentimentFromPayload:
    """Tests for sentiment payload shapes."""

    def test_plain_label(self):
        sentiment = sentiment_from_payload('negative')
        assert sentiment.label == 'negative'
        assert sentiment.polarity is None
        assert sentiment.direction == -1

    def test_score_is_signed_by_label(self):
        sentiment = sentiment_from_payload({'overall': 'negative', 'score': 0.8})
        assert sentiment.polarity == -0.8
        assert sentiment.direction == -1

    def test_neutral_score_has_no_direction(self):
        sentiment = sentiment_from_payload({'overall': 'neutral', 'score': 0.9})
        assert sentiment.polarity == 0.0
        assert sentiment.direction == 0

    def test_breakdown_derives_polarity_and_label(self):
        sentiment = sentiment_from_payload({'breakdown': {'positive': 0.6, 'neutral': 0.3, 'negative': 0.1}})
        assert sentiment.polarity == pytest.approx(0.5)
        assert sentiment.label == 'positive'

    def test_none(self):
        assert sentiment_from_payload(None) is None

    def test_invalid_score(self):
        with pytest.raises(InvalidInputError):
            sentiment_from_payload({'overall': 'positive', 'score': 'high'})


class TestLoadDocumentProfile:
    """Tests for document payloads."""

    def test_basic_document(self, document_payload):
        document = load_document_profile(document_payload)

        assert document.theme_labels == ('revenue growth',)
        assert document.keywords == ('revenue',)
        assert document.sentiment.polarity == 0.6

    def test_duplicates_keep_first_occurrence(self):
        document = load_document_profile({
            'themes': ['pricing', {'name': 'pricing', 'relevance': 0.9}, {'label': 'support', 'weight': 0.4}],
            'keywords': ['price', {'keyword': 'price'}, {'text': 'refund'}],
        })

        assert document.theme_labels == ('pricing', 'support')
        assert document.themes[0].weight is None
        assert document.themes[1].weight == 0.4
        assert document.keywords == ('price', 'refund')

    def test_absent_document(self):
        assert load_document_profile(None) is None

    def test_blank_keyword(self):
        with pytest.raises(InvalidInputError):
            load_document_profile({'keywords': ['  ']})


class TestLoadJson:
    """Tests for reading payload files."""

    def test_reads_payload(self, tmp_path, document_payload):
        path = tmp_path / 'document.json'
        path.write_text(json.dumps(document_payload))
        assert load_json(path) == document_payload

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{"themes": [')
        with pytest.raises(InvalidInputError, match='not valid JSON'):
            load_json(path)
