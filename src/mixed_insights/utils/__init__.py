"""Utility modules for the analysis engine."""

from .config_loader import ConfigLoader
from .logger import setup_logging, get_logger

__all__ = ['ConfigLoader', 'setup_logging', 'get_logger']
