"""Correlation records produced by the engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from ..exceptions import InvalidInputError


SENTIMENT_LABEL = 'overall'


class SignalKind(Enum):
    """Qualitative signal families paired against columns."""
    THEME = "theme"
    SENTIMENT = "sentiment"
    KEYWORD = "keyword"


class Basis(Enum):
    """How a record's strength was derived."""
    LEXICAL_MATCH = "lexical-match"
    DISTRIBUTIONAL = "distributional"
    COMBINED = "combined"


# Final tie-break when column and label are equal
KIND_ORDER = {
    SignalKind.THEME: 0,
    SignalKind.SENTIMENT: 1,
    SignalKind.KEYWORD: 2,
}


@dataclass(frozen=True)
class CorrelationRecord:
    """Scored association between one column and one signal."""
    column_name: str
    signal_kind: SignalKind
    signal_label: str
    strength: float
    basis: Basis

    def __post_init__(self):
        if not -1.0 <= self.strength <= 1.0:
            raise InvalidInputError(f"Correlation strength must be in [-1, 1], got {self.strength}")

    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.column_name, self.signal_kind.value, self.signal_label)

    @property
    def magnitude(self) -> float:
        return abs(self.strength)

    @property
    def direction(self) -> str:
        return 'positive' if self.strength > 0 else 'negative'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'column_name': self.column_name,
            'signal_kind': self.signal_kind.value,
            'signal_label': self.signal_label,
            'strength': self.strength,
            'basis': self.basis.value,
        }


def ranking_key(record: CorrelationRecord) -> tuple:
    """Sort key: |strength| desc, then column name, signal label, signal kind."""
    return (-record.magnitude, record.column_name, record.signal_label, KIND_ORDER[record.signal_kind])
