"""Mixed-methods analysis pipeline: correlations -> insights -> narrative."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from .correlation.engine import CorrelationEngine
from .correlation.records import CorrelationRecord
from .exceptions import ConfigurationError
from .insights.generator import DEFAULT_SIGNIFICANCE, InsightGenerator
from .insights.models import Insight
from .insights.narrative import NarrativeComposer
from .profiling.column_profile import ColumnProfile
from .profiling.document_profile import DocumentProfile
from .utils.logger import get_logger

logger = get_logger('analyzer')


@dataclass(frozen=True)
class CorrelationAnalysisResult:
    """Output of one analysis, handed unmodified to the persistence layer."""
    correlations: Tuple[CorrelationRecord, ...]
    insights: Tuple[Insight, ...]
    narrative: str
    dataset_name: str = ''
    document_name: Optional[str] = None
    column_count: int = 0
    eligible_column_count: int = 0
    signal_count: int = 0
    settings: Dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'dataset_name': self.dataset_name,
            'document_name': self.document_name,
            'summary': {
                'columns': self.column_count,
                'eligible_columns': self.eligible_column_count,
                'signals': self.signal_count,
                'correlations': len(self.correlations),
                'insights': len(self.insights),
            },
            'settings': dict(self.settings),
            'correlations': [record.to_dict() for record in self.correlations],
            'insights': [insight.to_dict() for insight in self.insights],
            'narrative': self.narrative,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


class CorrelationAnalyzer:
    """
    Runs the correlation engine, insight generator and narrative composer.

    The analyzer is stateless between calls; every call builds fresh value
    objects from the two input profiles.
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize analyzer.

        Args:
            config: Configuration dictionary from ConfigLoader

        Raises:
            ConfigurationError: If a policy value is out of range
        """
        self.config = config or {}

        correlation_config = self.config.get('correlation', {})
        insights_config = self.config.get('insights', {})
        narrative_config = self.config.get('narrative', {})

        engine_kwargs = {
            'min_samples': correlation_config.get('min_samples', 3),
            'lexical_weight': correlation_config.get('lexical_weight', 0.5),
            'distributional_weight': correlation_config.get('distributional_weight', 0.5),
            'dedupe_keywords': correlation_config.get('dedupe_keywords', False),
        }
        if correlation_config.get('sentiment_vocabulary'):
            engine_kwargs['sentiment_vocabulary'] = correlation_config['sentiment_vocabulary']

        self.engine = CorrelationEngine(**engine_kwargs)
        self.insight_generator = InsightGenerator(
            high_confidence=insights_config.get('high_confidence', 0.7),
            medium_confidence=insights_config.get('medium_confidence', 0.5)
        )
        self.narrative_composer = NarrativeComposer(
            max_insights=narrative_config.get('max_insights', 3)
        )
        significance = insights_config.get('significance', DEFAULT_SIGNIFICANCE)
        if isinstance(significance, bool) or not isinstance(significance, (int, float)) \
                or not 0.0 <= significance <= 1.0:
            raise ConfigurationError(f"significance must be in [0, 1], got {significance!r}")
        self.significance = significance

    def settings(self) -> Dict[str, Any]:
        """Effective policy values, as recorded in every result."""
        return {
            'min_samples': self.engine.min_samples,
            'lexical_weight': self.engine.lexical_weight,
            'distributional_weight': self.engine.distributional_weight,
            'dedupe_keywords': self.engine.dedupe_keywords,
            'sentiment_vocabulary': list(self.engine.sentiment_vocabulary),
            'significance': self.significance,
            'high_confidence': self.insight_generator.high_confidence,
            'medium_confidence': self.insight_generator.medium_confidence,
            'max_insights': self.narrative_composer.max_insights,
        }

    def analyze(
        self,
        dataset_name: str,
        columns: Sequence[ColumnProfile],
        document: Optional[DocumentProfile] = None,
        document_name: Optional[str] = None
    ) -> CorrelationAnalysisResult:
        """
        Run the full analysis.

        Args:
            dataset_name: Name of the dataset, used in the narrative
            columns: Column profiles of the dataset
            document: Analyzed document profile, or None
            document_name: Name of the document, used in the narrative

        Returns:
            CorrelationAnalysisResult

        Raises:
            InvalidInputError: If any input profile is malformed
        """
        logger.info(f"Starting correlation analysis for dataset: {dataset_name}")

        correlations = self.engine.compute(columns, document)
        logger.info(f"Computed {len(correlations)} correlation records")

        insights = self.insight_generator.derive(correlations, self.significance)
        logger.info(f"Derived {len(insights)} insights (significance >= {self.significance})")

        narrative = self.narrative_composer.compose(
            dataset_name,
            document_name if document is not None else None,
            insights
        )

        signal_count = 0
        if document is not None:
            signal_count = len(self.engine.signals_for(document))

        return CorrelationAnalysisResult(
            correlations=tuple(correlations),
            insights=tuple(insights),
            narrative=narrative,
            dataset_name=dataset_name,
            document_name=document_name if document is not None else None,
            column_count=len(columns),
            eligible_column_count=sum(1 for c in columns if self.engine.is_eligible(c)),
            signal_count=signal_count,
            settings=self.settings()
        )
