"""Correlation scoring between dataset columns and document signals."""

from .engine import CorrelationEngine
from .records import CorrelationRecord, SignalKind, Basis

__all__ = ['CorrelationEngine', 'CorrelationRecord', 'SignalKind', 'Basis']
