"""Correlation engine: pairs dataset columns with document signals."""

from collections.abc import Sequence
from typing import Iterable, List, Optional, Tuple

from ..exceptions import ConfigurationError, InvalidInputError
from ..profiling.column_profile import ColumnProfile
from ..profiling.document_profile import DocumentProfile
from ..utils.logger import get_logger
from .records import SENTIMENT_LABEL, CorrelationRecord, SignalKind, ranking_key
from .scoring import combine, distributional_score, lexical_score, tokenize, vocabulary_score

logger = get_logger('correlation_engine')


DEFAULT_SENTIMENT_VOCABULARY = (
    'rating',
    'score',
    'satisfaction',
    'nps',
    'sentiment',
    'feedback',
    'review',
    'csat',
)


class CorrelationEngine:
    """
    Scores every eligible column against every qualitative signal.

    Signals are the document themes, its keywords and its overall sentiment.
    Theme and keyword pairs are scored lexically. The sentiment signal is
    scored distributionally for numeric and boolean columns, and lexically
    against a vocabulary of sentiment-bearing column names; when both exist
    they are combined with the configured weights.
    """

    def __init__(
        self,
        min_samples: int = 3,
        lexical_weight: float = 0.5,
        distributional_weight: float = 0.5,
        dedupe_keywords: bool = False,
        sentiment_vocabulary: Iterable[str] = DEFAULT_SENTIMENT_VOCABULARY
    ):
        """
        Initialize correlation engine.

        Args:
            min_samples: Minimum non-null values for a column to be paired (default: 3)
            lexical_weight: Weight of lexical evidence in combined scores (default: 0.5)
            distributional_weight: Weight of distributional evidence in combined scores (default: 0.5)
            dedupe_keywords: Skip keywords whose tokens equal a theme label's tokens (default: False)
            sentiment_vocabulary: Column-name terms that count as sentiment evidence
        """
        if isinstance(min_samples, bool) or not isinstance(min_samples, int) or min_samples < 1:
            raise ConfigurationError(f"min_samples must be a positive integer, got {min_samples!r}")
        for name, weight in (('lexical_weight', lexical_weight), ('distributional_weight', distributional_weight)):
            if not isinstance(weight, (int, float)) or not 0.0 <= weight <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {weight!r}")

        self.min_samples = min_samples
        self.lexical_weight = float(lexical_weight)
        self.distributional_weight = float(distributional_weight)
        self.dedupe_keywords = bool(dedupe_keywords)
        self.sentiment_vocabulary = tuple(sentiment_vocabulary)

    def is_eligible(self, column: ColumnProfile) -> bool:
        """A column needs at least min_samples non-null values."""
        return column.non_null_count >= self.min_samples

    def compute(
        self,
        columns: Sequence,
        document: Optional[DocumentProfile]
    ) -> List[CorrelationRecord]:
        """
        Compute correlation records for all column/signal pairs.

        Args:
            columns: Column profiles of the dataset
            document: Document profile, or None

        Returns:
            Records ranked by |strength| desc, then column name, then signal label

        Raises:
            InvalidInputError: If columns or document are malformed
        """
        self._validate(columns, document)

        if document is None or not columns:
            return []

        signals = self.signals_for(document)
        direction = document.sentiment.direction if document.sentiment is not None else 0

        records = []
        skipped = 0
        for column in columns:
            if not self.is_eligible(column):
                skipped += 1
                continue
            records.extend(self._score_column(column, signals, direction))

        records.sort(key=ranking_key)
        logger.debug(
            f"Scored {len(columns) - skipped} columns against {len(signals)} signals: "
            f"{len(records)} records, {skipped} columns ineligible"
        )
        return records

    def _validate(self, columns, document) -> None:
        if isinstance(columns, (str, bytes)) or not isinstance(columns, Sequence):
            raise InvalidInputError(f"columns must be a sequence of ColumnProfile, got {type(columns).__name__}")

        names = set()
        for column in columns:
            if not isinstance(column, ColumnProfile):
                raise InvalidInputError(f"Expected ColumnProfile, got {type(column).__name__}")
            if column.name in names:
                raise InvalidInputError(f"Duplicate column name: '{column.name}'")
            names.add(column.name)

        if document is not None and not isinstance(document, DocumentProfile):
            raise InvalidInputError(f"Expected DocumentProfile, got {type(document).__name__}")

    def signals_for(self, document: DocumentProfile) -> List[Tuple[SignalKind, str]]:
        """Signals paired with each column: themes, keywords, then sentiment."""
        signals = [(SignalKind.THEME, label) for label in document.theme_labels]

        theme_tokens = {tokenize(label) for label in document.theme_labels}
        for keyword in document.keywords:
            if self.dedupe_keywords and tokenize(keyword) in theme_tokens:
                continue
            signals.append((SignalKind.KEYWORD, keyword))

        if document.sentiment is not None:
            signals.append((SignalKind.SENTIMENT, SENTIMENT_LABEL))
        return signals

    def _score_column(
        self,
        column: ColumnProfile,
        signals: List[Tuple[SignalKind, str]],
        direction: int
    ) -> List[CorrelationRecord]:
        records = []
        for kind, label in signals:
            if kind == SignalKind.SENTIMENT:
                lexical = vocabulary_score(column.name, self.sentiment_vocabulary) * direction
                distributional = distributional_score(column, direction)
            else:
                lexical = lexical_score(column.name, label)
                distributional = 0.0

            strength, basis = combine(
                lexical,
                distributional,
                self.lexical_weight,
                self.distributional_weight
            )
            if strength == 0 or basis is None:
                continue

            records.append(CorrelationRecord(
                column_name=column.name,
                signal_kind=kind,
                signal_label=label,
                strength=strength,
                basis=basis
            ))
        return records
