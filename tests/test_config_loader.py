"""Tests for configuration loading."""

import pytest
import yaml

from mixed_insights.exceptions import ConfigurationError
from mixed_insights.utils.config_loader import ConfigLoader


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / 'config.yaml'
    with open(path, 'w') as f:
        yaml.dump({
            'correlation': {'min_samples': 5, 'dedupe_keywords': True},
            'reporting': {'formats': ['csv']},
        }, f)
    return str(path)


class TestConfigLoader:
    """Tests for YAML and environment configuration."""

    def test_yaml_merged_over_defaults(self, config_file):
        loader = ConfigLoader(config_path=config_file)

        assert loader.get('correlation.min_samples') == 5
        assert loader.get('correlation.dedupe_keywords') is True
        assert loader.get('correlation.lexical_weight') == 0.5
        assert loader.get('insights.significance') == 0.35

    def test_reporting_config(self, config_file):
        assert ConfigLoader(config_path=config_file).get_reporting_config() == {
            'output_dir': './reports',
            'formats': ['csv'],
        }

    def test_get_default(self, config_file):
        loader = ConfigLoader(config_path=config_file)
        assert loader.get('correlation.missing', 'fallback') == 'fallback'
        assert loader.get('insights.significance.deeper', 'fallback') == 'fallback'

    def test_bundled_config(self):
        loader = ConfigLoader()
        assert 'rating' in loader.get('correlation.sentiment_vocabulary')
        assert loader.get('narrative.max_insights') == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(config_path=str(tmp_path / 'absent.yaml'))

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('- min_samples\n- 3\n')
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_path=str(path))

    def test_environment_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv('MIN_SAMPLES', '7')
        monkeypatch.setenv('LEXICAL_WEIGHT', '0.8')
        monkeypatch.setenv('DISTRIBUTIONAL_WEIGHT', '0.2')
        monkeypatch.setenv('DEDUPE_KEYWORDS', 'false')
        monkeypatch.setenv('SIGNIFICANCE_THRESHOLD', '0.25')

        loader = ConfigLoader(config_path=config_file)

        assert loader.get('correlation.min_samples') == 7
        assert loader.get('correlation.lexical_weight') == 0.8
        assert loader.get('correlation.distributional_weight') == 0.2
        assert loader.get('correlation.dedupe_keywords') is False
        assert loader.get('insights.significance') == 0.25

    def test_invalid_environment_override(self, config_file, monkeypatch):
        monkeypatch.setenv('MIN_SAMPLES', 'three')
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_path=config_file)
