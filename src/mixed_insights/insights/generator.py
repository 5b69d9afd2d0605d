"""Derive ranked insights from correlation records."""

from collections import OrderedDict
from typing import Dict, Iterable, List, Tuple

from ..correlation.records import KIND_ORDER, CorrelationRecord, SignalKind, ranking_key
from ..exceptions import ConfigurationError, InvalidInputError
from .models import Confidence, Insight, InsightCategory


DEFAULT_SIGNIFICANCE = 0.35

_SIGNAL_NOUNS = {
    SignalKind.THEME: 'theme',
    SignalKind.KEYWORD: 'keyword',
    SignalKind.SENTIMENT: 'sentiment signal',
}


def direction_phrase(strength: float) -> str:
    return 'tends to rise with' if strength > 0 else 'tends to fall with'


def render_statement(lead: CorrelationRecord, confidence: Confidence, others: int) -> str:
    """
    Render the sentence for an insight led by one record.

    Args:
        lead: Strongest record of the group
        confidence: Tier assigned to the group
        others: Number of further signals of the same kind in the group

    Returns:
        Statement text
    """
    phrase = direction_phrase(lead.strength)
    if lead.signal_kind == SignalKind.SENTIMENT:
        target = 'the overall document sentiment'
    else:
        target = f'the {_SIGNAL_NOUNS[lead.signal_kind]} "{lead.signal_label}"'

    statement = f'"{lead.column_name}" {phrase} {target}'
    if others:
        noun = _SIGNAL_NOUNS[lead.signal_kind]
        statement += f' and {others} other {noun}{"s" if others > 1 else ""}'
    return f'{statement} (strength {lead.strength:+.2f}, {confidence.value} confidence).'


def insight_ranking_key(insight: Insight) -> tuple:
    """Sort key: tier, |strength| desc, supporting records desc, column, signal."""
    return (
        insight.confidence.rank,
        -abs(insight.strength),
        -insight.supporting_records,
        min(insight.related_columns),
        insight.primary_signal,
        KIND_ORDER[insight.signal_kind],
    )


def categorize(lead: CorrelationRecord) -> InsightCategory:
    if lead.strength < 0:
        return InsightCategory.RISK
    if lead.signal_kind == SignalKind.SENTIMENT:
        return InsightCategory.PATTERN
    return InsightCategory.OPPORTUNITY


class InsightGenerator:
    """Filters records by significance and renders one insight per column and signal kind."""

    def __init__(self, high_confidence: float = 0.7, medium_confidence: float = 0.5):
        """
        Initialize insight generator.

        Args:
            high_confidence: Minimum |strength| for a high-confidence insight (default: 0.7)
            medium_confidence: Minimum |strength| for a medium-confidence insight (default: 0.5)
        """
        if not 0.0 < medium_confidence <= high_confidence <= 1.0:
            raise ConfigurationError(
                f"Confidence cut-offs must satisfy 0 < medium <= high <= 1, "
                f"got medium={medium_confidence}, high={high_confidence}"
            )
        self.high_confidence = high_confidence
        self.medium_confidence = medium_confidence

    def confidence_for(self, strength: float) -> Confidence:
        magnitude = abs(strength)
        if magnitude >= self.high_confidence:
            return Confidence.HIGH
        if magnitude >= self.medium_confidence:
            return Confidence.MEDIUM
        return Confidence.LOW

    def derive(
        self,
        records: Iterable[CorrelationRecord],
        significance: float = DEFAULT_SIGNIFICANCE
    ) -> List[Insight]:
        """
        Derive insights from correlation records.

        Records with |strength| >= significance survive. Survivors are grouped
        by (column, signal kind); each group yields one insight led by its
        strongest record.

        Args:
            records: Correlation records in any order; any iterable
            significance: Inclusive |strength| threshold (default: 0.35)

        Returns:
            Insights ranked by confidence tier, |strength| desc, supporting
            records desc, then column name and signal label
        """
        if isinstance(significance, bool) or not isinstance(significance, (int, float)) \
                or not 0.0 <= significance <= 1.0:
            raise InvalidInputError(f"significance must be in [0, 1], got {significance!r}")

        records = list(records)
        for record in records:
            if not isinstance(record, CorrelationRecord):
                raise InvalidInputError(f"Expected CorrelationRecord, got {type(record).__name__}")

        survivors = sorted(
            (r for r in records if r.magnitude >= significance),
            key=ranking_key
        )

        groups: Dict[Tuple[str, SignalKind], List[CorrelationRecord]] = OrderedDict()
        for record in survivors:
            groups.setdefault((record.column_name, record.signal_kind), []).append(record)

        insights = []
        for (column_name, kind), group in groups.items():
            lead = group[0]
            confidence = self.confidence_for(lead.strength)
            insights.append(Insight(
                statement=render_statement(lead, confidence, len(group) - 1),
                confidence=confidence,
                related_columns=frozenset([column_name]),
                related_signals=frozenset(r.signal_label for r in group),
                primary_signal=lead.signal_label,
                signal_kind=kind,
                strength=lead.strength,
                supporting_records=len(group),
                category=categorize(lead)
            ))

        insights.sort(key=insight_ranking_key)
        return insights
