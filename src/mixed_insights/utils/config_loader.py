"""Configuration loader for YAML and environment variables."""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from ..exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger('config_loader')


DEFAULT_CONFIG: Dict[str, Any] = {
    'correlation': {
        'min_samples': 3,
        'lexical_weight': 0.5,
        'distributional_weight': 0.5,
        'dedupe_keywords': False,
    },
    'insights': {
        'significance': 0.35,
        'high_confidence': 0.7,
        'medium_confidence': 0.5,
    },
    'narrative': {
        'max_insights': 3,
    },
    'reporting': {
        'output_dir': './reports',
        'formats': ['json', 'html'],
    },
}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class ConfigLoader:
    """Loads and manages configuration from YAML and environment variables."""

    def __init__(self, config_path: Optional[str] = None, env_path: Optional[str] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML config file (default: config/config.yaml)
            env_path: Path to .env file (default: .env in project root)
        """
        # Load environment variables
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()  # Load from default .env location

        self.config = copy.deepcopy(DEFAULT_CONFIG)

        # Load YAML config
        if config_path is None:
            config_path = self._find_config_file()
        elif not Path(config_path).exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        if config_path:
            self._merge(self.config, self._load_yaml(config_path))
            logger.debug(f"Loaded configuration from {config_path}")
        else:
            logger.debug("No config.yaml found, using built-in defaults")

        self._merge_env_overrides()

    def _find_config_file(self) -> Optional[str]:
        """Find config.yaml in project structure."""
        possible_paths = [
            Path(__file__).parent.parent.parent.parent / 'config' / 'config.yaml',
            Path('config/config.yaml'),
            Path('../config/config.yaml'),
        ]

        for path in possible_paths:
            if path.exists():
                return str(path)

        return None

    def _load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping at top level")
        return data

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override into base."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _merge_env_overrides(self):
        """Override config values with environment variables if present."""
        try:
            if os.getenv('MIN_SAMPLES'):
                self.config.setdefault('correlation', {})['min_samples'] = int(os.getenv('MIN_SAMPLES'))

            if os.getenv('LEXICAL_WEIGHT'):
                self.config.setdefault('correlation', {})['lexical_weight'] = float(os.getenv('LEXICAL_WEIGHT'))

            if os.getenv('DISTRIBUTIONAL_WEIGHT'):
                self.config.setdefault('correlation', {})['distributional_weight'] = float(os.getenv('DISTRIBUTIONAL_WEIGHT'))

            if os.getenv('DEDUPE_KEYWORDS'):
                self.config.setdefault('correlation', {})['dedupe_keywords'] = _parse_bool(os.getenv('DEDUPE_KEYWORDS'))

            if os.getenv('SIGNIFICANCE_THRESHOLD'):
                self.config.setdefault('insights', {})['significance'] = float(os.getenv('SIGNIFICANCE_THRESHOLD'))
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment override: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Example: config.get('insights.significance')
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

            if value is None:
                return default

        return value

    def get_reporting_config(self) -> Dict[str, Any]:
        """Get report output settings."""
        return {
            'output_dir': self.get('reporting.output_dir', './reports'),
            'formats': list(self.get('reporting.formats', ['json', 'html'])),
        }

    def get_all(self) -> Dict[str, Any]:
        """Get entire configuration dictionary."""
        return self.config
