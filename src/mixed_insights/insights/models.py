"""Insight value objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet

from ..correlation.records import SignalKind


class Confidence(Enum):
    """Confidence tiers, monotone in |strength|."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK = {
    Confidence.HIGH: 0,
    Confidence.MEDIUM: 1,
    Confidence.LOW: 2,
}


class InsightCategory(Enum):
    """Business framing of an insight."""
    OPPORTUNITY = "opportunity"
    RISK = "risk"
    PATTERN = "pattern"


@dataclass(frozen=True)
class Insight:
    """Human-readable finding derived from significant correlation records."""
    statement: str
    confidence: Confidence
    related_columns: FrozenSet[str]
    related_signals: FrozenSet[str]
    primary_signal: str
    signal_kind: SignalKind
    strength: float
    supporting_records: int
    category: InsightCategory

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'statement': self.statement,
            'confidence': self.confidence.value,
            'related_columns': sorted(self.related_columns),
            'related_signals': sorted(self.related_signals),
            'primary_signal': self.primary_signal,
            'signal_kind': self.signal_kind.value,
            'strength': self.strength,
            'supporting_records': self.supporting_records,
            'category': self.category.value,
        }
