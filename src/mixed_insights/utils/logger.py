"""Logging setup for the mixed-methods analysis engine."""

import logging
import logging.config
import yaml
from pathlib import Path
from typing import Optional


def setup_logging(
    config_path: Optional[str] = None,
    default_level: int = logging.INFO,
    verbose: bool = False
) -> logging.Logger:
    """
    Setup logging configuration.

    The file handler always keeps its configured level; ``verbose`` lowers
    the package logger and every stream handler to DEBUG.

    Args:
        config_path: Path to logging YAML config
        default_level: Default logging level if config not found
        verbose: Show DEBUG records on the console

    Returns:
        Logger instance
    """
    if config_path is None:
        # Find logging config
        possible_paths = [
            Path(__file__).parent.parent.parent.parent / 'config' / 'logging.yaml',
            Path('config/logging.yaml'),
        ]

        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break

    if config_path and Path(config_path).exists():
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)

        # File handlers keep their level, stream handlers follow verbose
        for handler in config.get('handlers', {}).values():
            filename = handler.get('filename')
            if filename:
                Path(filename).parent.mkdir(parents=True, exist_ok=True)
            elif verbose:
                handler['level'] = 'DEBUG'

        if verbose:
            config.setdefault('loggers', {}).setdefault('mixed_insights', {})['level'] = 'DEBUG'

        logging.config.dictConfig(config)
    else:
        logging.basicConfig(
            level=logging.DEBUG if verbose else default_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    return logging.getLogger('mixed_insights')


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f'mixed_insights.{name}')
