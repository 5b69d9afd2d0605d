"""Insight derivation and narrative composition."""

from .models import Insight, Confidence, InsightCategory
from .generator import InsightGenerator
from .narrative import NarrativeComposer

__all__ = ['Insight', 'Confidence', 'InsightCategory', 'InsightGenerator', 'NarrativeComposer']
