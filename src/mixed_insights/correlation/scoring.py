"""
Scoring heuristics for column/signal pairs.

Lexical evidence compares the tokens of a column name with the tokens of a
theme or keyword. Distributional evidence compares the skew of a column's
distribution with the sign of the document sentiment. Neither is a
statistical test: both are bounded proxies over pre-computed profiles.
"""

import math
import unicodedata
from typing import FrozenSet, Iterable, List, Optional, Tuple

import numpy as np

from ..profiling.column_profile import BooleanStats, ColumnKind, ColumnProfile, NumericStats
from .records import Basis


# Token character classes
_DIGIT, _UPPER, _LOWER, _UNCASED = 'digit', 'upper', 'lower', 'uncased'

ROUND_DIGITS = 4


def _fold_accents(text: str) -> str:
    """NFKC-compatible form with accents stripped from Latin letters only."""
    decomposed = unicodedata.normalize('NFKD', text)
    kept = []
    for ch in decomposed:
        if unicodedata.combining(ch) and kept and unicodedata.name(kept[-1], '').startswith('LATIN'):
            continue
        kept.append(ch)
    return unicodedata.normalize('NFKC', ''.join(kept))


def _char_class(ch: str) -> Optional[str]:
    if ch.isdigit():
        return _DIGIT
    if ch.isalpha():
        if ch.isupper():
            return _UPPER
        if ch.islower():
            return _LOWER
        return _UNCASED
    return None


def _split_words(text: str) -> List[str]:
    words = []
    current = ''
    previous = None
    for ch in text:
        if current and unicodedata.category(ch).startswith('M'):
            current += ch
            continue

        kind = _char_class(ch)
        if kind is None:
            if current:
                words.append(current)
            current, previous = '', None
            continue

        if not current:
            current = ch
        elif previous == _UPPER and kind == _LOWER and len(current) > 1:
            # "NPSScore": the last capital starts the next word
            words.append(current[:-1])
            current = current[-1] + ch
        elif (previous == _DIGIT) != (kind == _DIGIT) \
                or (previous == _UNCASED) != (kind == _UNCASED) \
                or (previous == _LOWER and kind == _UPPER):
            words.append(current)
            current = ch
        else:
            current += ch
        previous = kind

    if current:
        words.append(current)
    return words


def tokenize(text: str) -> FrozenSet[str]:
    """
    Split text on case, script and word boundaries into casefolded tokens.

    ``customerRating``, ``customer_rating`` and ``Customer Rating`` all
    produce ``{'customer', 'rating'}``. Accents on Latin letters are
    dropped, so ``café`` and ``cafe`` share a token; letters without case
    (CJK, for example) stay together as one token.
    """
    return frozenset(word.casefold() for word in _split_words(_fold_accents(text or '')))


def token_overlap(left: FrozenSet[str], right: FrozenSet[str]) -> float:
    """Shared tokens over the union of tokens, in [0, 1]."""
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)


def lexical_score(column_name: str, label: str) -> float:
    """Token-overlap ratio between a column name and a signal label."""
    return round(token_overlap(tokenize(column_name), tokenize(label)), ROUND_DIGITS)


def vocabulary_score(column_name: str, vocabulary: Iterable[str]) -> float:
    """Best token-overlap ratio between a column name and any vocabulary term."""
    column_tokens = tokenize(column_name)
    best = 0.0
    for term in vocabulary:
        best = max(best, token_overlap(column_tokens, tokenize(term)))
    return round(best, ROUND_DIGITS)


def _boolean_moments(stats: BooleanStats) -> Optional[Tuple[float, float, float]]:
    p = stats.true_ratio
    if p is None:
        return None
    if p > 0.5:
        median = 1.0
    elif p < 0.5:
        median = 0.0
    else:
        median = 0.5
    return p, median, math.sqrt(p * (1.0 - p))


def skew_proxy(column: ColumnProfile) -> Optional[float]:
    """
    ``(mean - median) / (std_dev or 1)`` for numeric and boolean columns.

    Boolean columns are treated as 0/1 values. Returns None when the column
    has no usable central tendency.
    """
    if column.kind.is_numeric and isinstance(column.stats, NumericStats):
        mean, median, std_dev = column.stats.mean, column.stats.median, column.stats.std_dev
    elif column.kind == ColumnKind.BOOLEAN and isinstance(column.stats, BooleanStats):
        moments = _boolean_moments(column.stats)
        if moments is None:
            return None
        mean, median, std_dev = moments
    else:
        return None

    if mean is None or median is None:
        return None
    return (mean - median) / (std_dev or 1.0)


def distributional_score(column: ColumnProfile, sentiment_direction: int) -> float:
    """
    Signed agreement between a column's skew and the document tone.

    Same sign gives a positive association, opposite sign a negative one;
    the magnitude is ``min(1, |skew proxy|)``.
    """
    if sentiment_direction == 0:
        return 0.0
    skew = skew_proxy(column)
    if skew is None or skew == 0:
        return 0.0
    magnitude = min(1.0, abs(skew))
    return round(float(np.sign(skew)) * sentiment_direction * magnitude, ROUND_DIGITS)


def combine(
    lexical: float,
    distributional: float,
    lexical_weight: float = 0.5,
    distributional_weight: float = 0.5
) -> Tuple[float, Optional[Basis]]:
    """
    Merge both kinds of evidence into one strength.

    Args:
        lexical: Lexical evidence (signed for the sentiment signal)
        distributional: Distributional evidence
        lexical_weight: Weight of lexical evidence when both exist
        distributional_weight: Weight of distributional evidence when both exist

    Returns:
        Tuple of (strength, basis); basis is None when there is no evidence
    """
    if lexical and distributional:
        value = lexical * lexical_weight + distributional * distributional_weight
        return round(float(np.clip(value, -1.0, 1.0)), ROUND_DIGITS), Basis.COMBINED
    if lexical:
        return round(float(np.clip(lexical, -1.0, 1.0)), ROUND_DIGITS), Basis.LEXICAL_MATCH
    if distributional:
        return round(float(np.clip(distributional, -1.0, 1.0)), ROUND_DIGITS), Basis.DISTRIBUTIONAL
    return 0.0, None
