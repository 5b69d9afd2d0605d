"""
Column Profile Module

Typed, per-kind column statistics as produced by the dataset profiler.
Each ColumnProfile carries exactly one stats variant, and the variant must
match the declared column kind, so numeric statistics can only ever be read
from integer and float columns.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from numbers import Real
from typing import Optional, Tuple, Union

from ..exceptions import InvalidInputError


class ColumnKind(Enum):
    """Declared column data types."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DATE = "date"
    BOOLEAN = "boolean"

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnKind.INTEGER, ColumnKind.FLOAT)

    @classmethod
    def parse(cls, value: Union[str, 'ColumnKind']) -> 'ColumnKind':
        """
        Resolve a kind from its name.

        Args:
            value: Kind name (case-insensitive) or ColumnKind

        Returns:
            Matching ColumnKind

        Raises:
            InvalidInputError: If the name is not a known kind
        """
        if isinstance(value, ColumnKind):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidInputError(f"Unknown column kind: {value!r}")


def _check_optional_number(owner: str, name: str, value) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidInputError(f"{owner}.{name} must be a finite number, got {value!r}")


def _check_count(owner: str, name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{owner}.{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{owner}.{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class NumericStats:
    """Statistics for integer and float columns."""
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    median: Optional[float] = None
    std_dev: Optional[float] = None
    sum: Optional[float] = None

    def __post_init__(self):
        for name in ('min', 'max', 'mean', 'median', 'std_dev', 'sum'):
            _check_optional_number('NumericStats', name, getattr(self, name))
        if self.std_dev is not None and self.std_dev < 0:
            raise InvalidInputError(f"NumericStats.std_dev must be >= 0, got {self.std_dev}")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise InvalidInputError(f"NumericStats.min ({self.min}) exceeds max ({self.max})")


@dataclass(frozen=True)
class TopValue:
    """One entry of a categorical frequency table."""
    value: Optional[str]
    count: int
    percentage: float = 0.0


@dataclass(frozen=True)
class StringStats:
    """Statistics for string (categorical) columns."""
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    unique: Optional[int] = None
    top_values: Tuple[TopValue, ...] = field(default_factory=tuple)

    def __post_init__(self):
        for name in ('max_length', 'min_length', 'unique'):
            value = getattr(self, name)
            if value is not None:
                _check_count('StringStats', name, value)
        if not isinstance(self.top_values, tuple):
            object.__setattr__(self, 'top_values', tuple(self.top_values))


@dataclass(frozen=True)
class BooleanStats:
    """Statistics for boolean columns."""
    true_count: int = 0
    false_count: int = 0

    def __post_init__(self):
        _check_count('BooleanStats', 'true_count', self.true_count)
        _check_count('BooleanStats', 'false_count', self.false_count)

    @property
    def true_ratio(self) -> Optional[float]:
        """Share of true values among non-null values."""
        total = self.true_count + self.false_count
        if total == 0:
            return None
        return self.true_count / total


@dataclass(frozen=True)
class DateStats:
    """Statistics for date columns."""
    earliest: Optional[Union[str, date, datetime]] = None
    latest: Optional[Union[str, date, datetime]] = None


ColumnStats = Union[NumericStats, StringStats, BooleanStats, DateStats]

_STATS_FOR_KIND = {
    ColumnKind.STRING: StringStats,
    ColumnKind.INTEGER: NumericStats,
    ColumnKind.FLOAT: NumericStats,
    ColumnKind.DATE: DateStats,
    ColumnKind.BOOLEAN: BooleanStats,
}


def stats_type_for(kind: ColumnKind) -> type:
    """Return the stats variant a column of this kind must carry."""
    return _STATS_FOR_KIND[kind]


@dataclass(frozen=True)
class ColumnProfile:
    """Pre-computed statistical summary of one dataset column."""
    name: str
    kind: ColumnKind
    count: int
    null_count: int
    stats: ColumnStats

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError(f"Column name must be a non-empty string, got {self.name!r}")

        if not isinstance(self.kind, ColumnKind):
            raise InvalidInputError(f"Column '{self.name}' has invalid kind {self.kind!r}")

        _check_count(f"Column '{self.name}'", 'count', self.count)
        _check_count(f"Column '{self.name}'", 'null_count', self.null_count)

        if self.null_count > self.count:
            raise InvalidInputError(
                f"Column '{self.name}': null_count ({self.null_count}) exceeds count ({self.count})"
            )

        expected = stats_type_for(self.kind)
        if self.stats is None:
            raise InvalidInputError(
                f"Column '{self.name}' of kind {self.kind.value} is missing {expected.__name__}"
            )
        if not isinstance(self.stats, expected):
            raise InvalidInputError(
                f"Column '{self.name}' of kind {self.kind.value} requires {expected.__name__}, "
                f"got {type(self.stats).__name__}"
            )

    @property
    def non_null_count(self) -> int:
        return self.count - self.null_count

    @property
    def is_numeric(self) -> bool:
        return self.kind.is_numeric
