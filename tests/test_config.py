"""
Tests for configuration loading, saving and validation.
"""

import pytest
import toml

import config_manager
from core.config import DEFAULT_RECORDS_URL, Config
from core.exceptions import ConfigurationError, ValidationError


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "test_config.toml")


class TestConfig:
    """Config file handling"""

    def test_missing_file_is_created_with_defaults(self, config_path):
        config = Config(config_file_path=config_path)

        assert config.source.records_url == DEFAULT_RECORDS_URL
        assert config.state.backend == 'location'
        saved = toml.load(config_path)
        assert saved['source']['records_url'] == DEFAULT_RECORDS_URL
        assert saved['ui']['page_title'] == config.ui.page_title

    def test_values_are_loaded(self, config_path):
        with open(config_path, 'w') as f:
            toml.dump({
                'source': {'records_url': "https://example.org/doctors.json", 'request_timeout': 3},
                'ui': {'page_title': "Doctors"},
                'state': {'backend': 'memory', 'log_level': 'DEBUG'},
            }, f)

        config = Config(config_file_path=config_path)
        assert config.source.records_url == "https://example.org/doctors.json"
        assert config.source.request_timeout == 3
        assert config.ui.page_title == "Doctors"
        assert config.state.backend == 'memory'
        assert config.state.log_level == 'DEBUG'

    def test_partial_file_keeps_defaults(self, config_path):
        with open(config_path, 'w') as f:
            toml.dump({'ui': {'page_title': "Doctors"}}, f)

        config = Config(config_file_path=config_path)
        assert config.source.records_url == DEFAULT_RECORDS_URL
        assert config.ui.page_title == "Doctors"

    def test_invalid_toml_raises(self, config_path):
        with open(config_path, 'w') as f:
            f.write("this is [not toml")

        with pytest.raises(ConfigurationError) as exc_info:
            Config(config_file_path=config_path)
        assert exc_info.value.context['config_file'] == config_path

    def test_non_numeric_timeout_raises(self, config_path):
        with open(config_path, 'w') as f:
            toml.dump({'source': {'request_timeout': "soon"}}, f)

        with pytest.raises(ValidationError) as exc_info:
            Config(config_file_path=config_path)
        assert exc_info.value.context == {'field': 'request_timeout', 'value': "soon"}

    def test_save_round_trip(self, config_path):
        config = Config(config_file_path=config_path)
        config.ui.page_title = "Specialists"
        config.save_config()

        assert Config(config_file_path=config_path).ui.page_title == "Specialists"


class TestValidation:
    """Section validation"""

    def test_defaults_are_valid(self, config_path):
        config = Config(config_file_path=config_path)
        assert config.validate() == []

    def test_errors_are_collected(self, config_path):
        config = Config(config_file_path=config_path)
        config.source.records_url = "ftp://example.org"
        config.source.request_timeout = 0
        config.state.backend = 'redis'
        config.state.log_level = 'LOUD'

        errors = config.validate()
        assert len(errors) == 4
        assert "backend must be one of ['location', 'memory']" in errors


class TestConfigManager:
    """Global config accessors"""

    def test_state_manager_config_reflects_config(self, config_path, monkeypatch):
        config = Config(config_file_path=config_path)
        config.state.backend = 'memory'
        config.source.request_timeout = 2.5
        monkeypatch.setattr(config_manager, '_config_instance', config)

        sm_config = config_manager.get_state_manager_config()
        assert sm_config.backend_type == 'memory'
        assert sm_config.request_timeout == 2.5
        assert sm_config.records_url == DEFAULT_RECORDS_URL

    def test_get_config_is_cached(self, config_path, monkeypatch):
        config = Config(config_file_path=config_path)
        monkeypatch.setattr(config_manager, '_config_instance', config)
        assert config_manager.get_config() is config

    def test_refresh_config_reloads(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        stale = Config(config_file_path=str(tmp_path / "stale.toml"))
        monkeypatch.setattr(config_manager, '_config_instance', stale)

        fresh = config_manager.refresh_config()
        assert fresh is not stale
        assert fresh.config_file_path == "config.toml"
        assert (tmp_path / "config.toml").exists()
