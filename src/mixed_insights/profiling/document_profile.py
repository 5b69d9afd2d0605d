"""Qualitative summary of one analyzed text document."""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Optional, Tuple

from ..exceptions import InvalidInputError


# Sign used by scoring when a sentiment carries only a label
LABEL_DIRECTIONS = {
    'positive': 1,
    'negative': -1,
    'neutral': 0,
    'mixed': 0,
}


@dataclass(frozen=True)
class Theme:
    """A labelled topic extracted from the document."""
    label: str
    weight: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.label, str) or not self.label.strip():
            raise InvalidInputError(f"Theme label must be a non-empty string, got {self.label!r}")
        if self.weight is not None:
            if isinstance(self.weight, bool) or not isinstance(self.weight, Real) \
                    or not math.isfinite(self.weight) or not 0.0 <= self.weight <= 1.0:
                raise InvalidInputError(
                    f"Theme '{self.label}' weight must be in [0, 1], got {self.weight!r}"
                )


@dataclass(frozen=True)
class Sentiment:
    """Overall document tone."""
    label: str
    polarity: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.label, str) or not self.label.strip():
            raise InvalidInputError(f"Sentiment label must be a non-empty string, got {self.label!r}")
        if self.polarity is not None:
            if isinstance(self.polarity, bool) or not isinstance(self.polarity, Real) \
                    or not math.isfinite(self.polarity) or not -1.0 <= self.polarity <= 1.0:
                raise InvalidInputError(
                    f"Sentiment polarity must be in [-1, 1], got {self.polarity!r}"
                )

    @property
    def direction(self) -> int:
        """
        Sign of the sentiment: +1, -1 or 0.

        The numeric polarity wins when present; otherwise the label decides,
        and unknown labels count as neutral.
        """
        if self.polarity is not None:
            if self.polarity > 0:
                return 1
            if self.polarity < 0:
                return -1
            return 0
        return LABEL_DIRECTIONS.get(self.label.strip().lower(), 0)


@dataclass(frozen=True)
class DocumentProfile:
    """Themes, sentiment and keywords of one document."""
    themes: Tuple[Theme, ...] = field(default_factory=tuple)
    sentiment: Optional[Sentiment] = None
    keywords: Tuple[str, ...] = field(default_factory=tuple)
    summary: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'themes', tuple(self.themes))
        object.__setattr__(self, 'keywords', tuple(self.keywords))

        seen = set()
        for theme in self.themes:
            if not isinstance(theme, Theme):
                raise InvalidInputError(f"Expected Theme, got {type(theme).__name__}")
            if theme.label in seen:
                raise InvalidInputError(f"Duplicate theme label: '{theme.label}'")
            seen.add(theme.label)

        seen = set()
        for keyword in self.keywords:
            if not isinstance(keyword, str) or not keyword.strip():
                raise InvalidInputError(f"Keywords must be non-empty strings, got {keyword!r}")
            if keyword in seen:
                raise InvalidInputError(f"Duplicate keyword: '{keyword}'")
            seen.add(keyword)

        if self.sentiment is not None and not isinstance(self.sentiment, Sentiment):
            raise InvalidInputError(f"Expected Sentiment, got {type(self.sentiment).__name__}")

        if self.summary is None:
            object.__setattr__(self, 'summary', '')
        elif not isinstance(self.summary, str):
            raise InvalidInputError(f"Document summary must be a string, got {type(self.summary).__name__}")

    @property
    def theme_labels(self) -> Tuple[str, ...]:
        return tuple(theme.label for theme in self.themes)
