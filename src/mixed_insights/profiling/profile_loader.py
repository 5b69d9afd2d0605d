"""
Profile Loader Module

Builds typed ColumnProfile and DocumentProfile objects from JSON-like
payloads. Accepts both camelCase keys (as stored by the web application)
and snake_case keys, and both a list of column entries and the dataset
shape ``{"types": {...}, "stats": {...}}``.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..exceptions import InvalidInputError
from .column_profile import (
    BooleanStats,
    ColumnKind,
    ColumnProfile,
    DateStats,
    NumericStats,
    StringStats,
    TopValue,
)
from .document_profile import DocumentProfile, Sentiment, Theme


KIND_ALIASES = {
    'int': 'integer',
    'bigint': 'integer',
    'number': 'float',
    'numeric': 'float',
    'double': 'float',
    'decimal': 'float',
    'bool': 'boolean',
    'datetime': 'date',
    'timestamp': 'date',
    'text': 'string',
    'categorical': 'string',
}


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key among aliases."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _as_count(value: Any, label: str) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{label} must be an integer, got {value!r}")
    return value


def _parse_kind(value: Any) -> ColumnKind:
    if isinstance(value, str):
        value = KIND_ALIASES.get(value.strip().lower(), value)
    return ColumnKind.parse(value)


def _build_stats(kind: ColumnKind, stats: Dict[str, Any]):
    """Build the stats variant matching the column kind."""
    if kind.is_numeric:
        return NumericStats(
            min=_pick(stats, 'min'),
            max=_pick(stats, 'max'),
            mean=_pick(stats, 'mean', 'avg'),
            median=_pick(stats, 'median'),
            std_dev=_pick(stats, 'stdDev', 'std_dev', 'std'),
            sum=_pick(stats, 'sum'),
        )

    if kind == ColumnKind.BOOLEAN:
        return BooleanStats(
            true_count=_as_count(_pick(stats, 'trueCount', 'true_count', default=0), 'trueCount'),
            false_count=_as_count(_pick(stats, 'falseCount', 'false_count', default=0), 'falseCount'),
        )

    if kind == ColumnKind.DATE:
        return DateStats(
            earliest=_pick(stats, 'earliest', 'min_date'),
            latest=_pick(stats, 'latest', 'max_date'),
        )

    top_values = []
    for entry in _pick(stats, 'topValues', 'top_values', default=None) or []:
        if not isinstance(entry, dict):
            raise InvalidInputError(f"topValues entries must be objects, got {entry!r}")
        top_values.append(TopValue(
            value=None if entry.get('value') is None else str(entry.get('value')),
            count=_as_count(entry.get('count', 0), 'topValues.count'),
            percentage=float(entry.get('percentage', 0.0)),
        ))

    unique = _pick(stats, 'unique', 'unique_count')
    max_length = _pick(stats, 'maxLength', 'max_length')
    min_length = _pick(stats, 'minLength', 'min_length')
    return StringStats(
        max_length=None if max_length is None else _as_count(max_length, 'maxLength'),
        min_length=None if min_length is None else _as_count(min_length, 'minLength'),
        unique=None if unique is None else _as_count(unique, 'unique'),
        top_values=tuple(top_values),
    )


def column_from_dict(data: Dict[str, Any], name: Optional[str] = None) -> ColumnProfile:
    """
    Build a ColumnProfile from one column entry.

    Args:
        data: Column entry; stats may be flat or nested under ``stats``
        name: Column name when it is not part of the entry

    Returns:
        ColumnProfile

    Raises:
        InvalidInputError: If the entry is malformed
    """
    if not isinstance(data, dict):
        raise InvalidInputError(f"Column entry must be an object, got {type(data).__name__}")

    column_name = name if name is not None else data.get('name')
    kind_value = _pick(data, 'kind', 'type')
    if kind_value is None:
        raise InvalidInputError(f"Column '{column_name}' has no declared type")
    kind = _parse_kind(kind_value)

    nested = data.get('stats')
    stats = nested if isinstance(nested, dict) else data

    count = _pick(data, 'count', default=_pick(stats, 'count'))
    null_count = _pick(data, 'nullCount', 'null_count', default=_pick(stats, 'nullCount', 'null_count', default=0))
    if count is None:
        raise InvalidInputError(f"Column '{column_name}' has no count")

    return ColumnProfile(
        name=column_name,
        kind=kind,
        count=_as_count(count, f"Column '{column_name}' count"),
        null_count=_as_count(null_count, f"Column '{column_name}' nullCount"),
        stats=_build_stats(kind, stats),
    )


def load_column_profiles(payload: Union[List[Dict[str, Any]], Dict[str, Any]]) -> List[ColumnProfile]:
    """
    Build column profiles from a dataset payload.

    Supported shapes:
        - ``[{"name": ..., "type": ..., "count": ..., ...}, ...]``
        - ``{"columns": [{...}, ...]}``
        - ``{"columns": ["a", "b"], "types": {"a": "integer"}, "stats": {"a": {...}}}``

    Args:
        payload: Parsed JSON payload

    Returns:
        List of ColumnProfile in payload order
    """
    if isinstance(payload, list):
        return [column_from_dict(entry) for entry in payload]

    if not isinstance(payload, dict):
        raise InvalidInputError(f"Dataset payload must be a list or object, got {type(payload).__name__}")

    columns = payload.get('columns')
    if isinstance(columns, list) and all(isinstance(c, dict) for c in columns):
        return [column_from_dict(entry) for entry in columns]

    stats = payload.get('stats')
    if not isinstance(stats, dict):
        raise InvalidInputError("Dataset payload needs a 'columns' list or a 'stats' mapping")
    types = payload.get('types') or {}
    if not isinstance(types, dict):
        raise InvalidInputError("Dataset 'types' must be a mapping of column name to type")

    if isinstance(columns, list):
        names = columns
    elif types:
        names = list(types.keys())
    else:
        # Stats blobs may carry non-column entries (e.g. merged AI results)
        names = [k for k, v in stats.items() if isinstance(v, dict) and 'count' in v]

    profiles = []
    for column_name in names:
        entry = stats.get(column_name)
        if not isinstance(entry, dict):
            raise InvalidInputError(f"No stats for column '{column_name}'")
        entry = dict(entry)
        if column_name in types:
            entry['type'] = types[column_name]
        profiles.append(column_from_dict(entry, name=column_name))
    return profiles


def _theme_from_entry(entry: Any) -> Theme:
    if isinstance(entry, str):
        return Theme(label=entry.strip())
    if isinstance(entry, dict):
        label = _pick(entry, 'label', 'name', 'theme')
        weight = _pick(entry, 'weight', 'relevance')
        return Theme(label=label.strip() if isinstance(label, str) else label, weight=weight)
    raise InvalidInputError(f"Theme entries must be strings or objects, got {entry!r}")


def _keyword_from_entry(entry: Any) -> str:
    if isinstance(entry, dict):
        entry = _pick(entry, 'keyword', 'text', 'name')
    if not isinstance(entry, str) or not entry.strip():
        raise InvalidInputError(f"Keyword entries must be non-empty strings, got {entry!r}")
    return entry.strip()


def _label_for_polarity(polarity: Optional[float]) -> str:
    if polarity is None or polarity == 0:
        return 'neutral'
    return 'positive' if polarity > 0 else 'negative'


def sentiment_from_payload(data: Any) -> Optional[Sentiment]:
    """
    Build a Sentiment from a label or an object.

    Objects may carry ``polarity`` directly, or the ``overall``/``score``
    pair with an optional ``breakdown`` of positive/neutral/negative shares.
    A score is an unsigned strength, so the label supplies its sign.
    """
    if data is None:
        return None
    if isinstance(data, str):
        return Sentiment(label=data.strip())
    if not isinstance(data, dict):
        raise InvalidInputError(f"Sentiment must be a string or object, got {data!r}")

    label = _pick(data, 'label', 'overall', 'overall_sentiment')
    polarity = _pick(data, 'polarity')

    if polarity is None and _pick(data, 'score') is not None:
        score = data['score']
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise InvalidInputError(f"Sentiment score must be a number, got {score!r}")
        direction = (label or '').strip().lower()
        if direction == 'positive':
            polarity = abs(score)
        elif direction == 'negative':
            polarity = -abs(score)
        else:
            polarity = 0.0

    if polarity is None:
        breakdown = _pick(data, 'breakdown', 'sentiment_scores')
        if isinstance(breakdown, dict) and 'positive' in breakdown and 'negative' in breakdown:
            polarity = round(float(breakdown['positive']) - float(breakdown['negative']), 4)

    if label is None:
        label = _label_for_polarity(polarity)

    return Sentiment(label=label.strip() if isinstance(label, str) else label, polarity=polarity)


def load_document_profile(payload: Optional[Dict[str, Any]]) -> Optional[DocumentProfile]:
    """
    Build a DocumentProfile from an analyzed-document payload.

    Duplicate themes and keywords are dropped, keeping the first occurrence.

    Args:
        payload: Parsed JSON payload, or None when no document was supplied

    Returns:
        DocumentProfile, or None
    """
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise InvalidInputError(f"Document payload must be an object, got {type(payload).__name__}")

    themes = []
    seen_themes = set()
    for entry in payload.get('themes') or []:
        theme = _theme_from_entry(entry)
        if theme.label not in seen_themes:
            seen_themes.add(theme.label)
            themes.append(theme)

    keywords = []
    seen_keywords = set()
    for entry in payload.get('keywords') or []:
        keyword = _keyword_from_entry(entry)
        if keyword not in seen_keywords:
            seen_keywords.add(keyword)
            keywords.append(keyword)

    return DocumentProfile(
        themes=tuple(themes),
        sentiment=sentiment_from_payload(payload.get('sentiment')),
        keywords=tuple(keywords),
        summary=payload.get('summary') or '',
    )


def load_json(path: Union[str, Path]) -> Any:
    """Read a JSON payload from disk."""
    with open(path, 'r', encoding='utf-8') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"{path} is not valid JSON: {e}") from e
