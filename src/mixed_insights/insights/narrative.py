"""Narrative composition for mixed-methods analyses.

Rule-based and deterministic: the same dataset name, document name and
insights always produce the same text, so narratives can be cached and
compared byte for byte.
"""

from typing import List, Optional, Sequence

from ..exceptions import ConfigurationError, InvalidInputError
from .generator import insight_ranking_key
from .models import Confidence, Insight


_LEADS = ('Most notably, ', 'In addition, ', 'Finally, ')

RECOMMENDATION = (
    'Validate these associations with domain experts and targeted follow-up data '
    'before acting on them.'
)


def _plural(count: int, word: str) -> str:
    return f'{count} {word}' if count == 1 else f'{count} {word}s'


def opening_sentence(dataset_name: str, document_name: Optional[str]) -> str:
    if document_name:
        return f'This analysis links the dataset "{dataset_name}" with the document "{document_name}".'
    return f'This analysis covers the dataset "{dataset_name}" and no document was supplied.'


def empty_sentences(document_name: Optional[str]) -> List[str]:
    """Explicit outcome when nothing cleared the significance threshold."""
    if document_name:
        return [
            'No strong mixed-methods associations were found between the dataset columns '
            'and the document themes, keywords or sentiment.',
            'Gather more data, such as additional rows or a longer related document, '
            'and rerun the analysis.',
        ]
    return [
        'Without qualitative signals, no strong mixed-methods associations were found.',
        'Gather more data by attaching a related text document, then rerun the analysis.',
    ]


def summary_sentence(insights: Sequence[Insight]) -> str:
    high = sum(1 for i in insights if i.confidence == Confidence.HIGH)
    return f'Found {_plural(len(insights), "significant association")}, {high} with high confidence.'


class NarrativeComposer:
    """Composes a short prose summary from ranked insights."""

    def __init__(self, max_insights: int = 3):
        """
        Initialize narrative composer.

        Args:
            max_insights: Number of top insights summarized in prose (1-3, default: 3)
        """
        if isinstance(max_insights, bool) or not isinstance(max_insights, int) \
                or not 1 <= max_insights <= len(_LEADS):
            raise ConfigurationError(f"max_insights must be between 1 and {len(_LEADS)}, got {max_insights!r}")
        self.max_insights = max_insights

    def compose(
        self,
        dataset_name: str,
        document_name: Optional[str],
        insights: Sequence[Insight]
    ) -> str:
        """
        Compose the narrative.

        Args:
            dataset_name: Name of the analyzed dataset
            document_name: Name of the analyzed document, or None
            insights: Insights to summarize

        Returns:
            Narrative of three to six sentences
        """
        if not isinstance(dataset_name, str) or not dataset_name.strip():
            raise InvalidInputError(f"dataset_name must be a non-empty string, got {dataset_name!r}")
        if document_name is not None and not isinstance(document_name, str):
            raise InvalidInputError(f"document_name must be a string, got {type(document_name).__name__}")
        for insight in insights:
            if not isinstance(insight, Insight):
                raise InvalidInputError(f"Expected Insight, got {type(insight).__name__}")

        document_name = (document_name or '').strip() or None
        sentences = [opening_sentence(dataset_name.strip(), document_name)]

        if not insights:
            sentences.extend(empty_sentences(document_name))
            return ' '.join(sentences)

        ranked = sorted(insights, key=insight_ranking_key)
        sentences.append(summary_sentence(ranked))
        for lead, insight in zip(_LEADS, ranked[:self.max_insights]):
            sentences.append(f'{lead}{insight.statement}')
        sentences.append(RECOMMENDATION)
        return ' '.join(sentences)
