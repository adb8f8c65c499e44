"""
Configuration management for Provider Directory.

Settings are split into focused sections (record source, UI, state) that
are persisted together in a single TOML file.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import toml

from .exceptions import ConfigurationError, ValidationError

DEFAULT_RECORDS_URL = "https://srijandubey.github.io/campus-api-mock/SRM-C1-25.json"

logger = logging.getLogger(__name__)


def _as_seconds(value, field_name: str) -> float:
    """Coerce a TOML value to a number of seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number of seconds", field=field_name, value=value)
    return float(value)


@dataclass
class SourceConfig:
    """Configuration for the provider record source."""

    records_url: str = DEFAULT_RECORDS_URL
    request_timeout: float = 10.0  # seconds

    def validate(self) -> List[str]:
        """Validate the source configuration and return any errors."""
        errors = []

        if not self.records_url:
            errors.append("records_url cannot be empty")
        elif not self.records_url.startswith(('http://', 'https://')):
            errors.append("records_url must be an http(s) URL")

        if self.request_timeout <= 0:
            errors.append("request_timeout must be positive")

        return errors


@dataclass
class UIConfig:
    """Configuration for user interface settings."""

    page_title: str = "Find a Doctor"
    search_placeholder: str = "Search Symptoms, Doctors, Specialists, Clinics"

    def validate(self) -> List[str]:
        """Validate the UI configuration and return any errors."""
        errors = []

        if not self.page_title:
            errors.append("page_title cannot be empty")

        return errors


@dataclass
class StateConfig:
    """Configuration for query-string state management."""

    backend: str = 'location'  # 'location', 'memory'
    log_level: str = 'INFO'
    log_file: str = ''  # empty: console only

    def validate(self) -> List[str]:
        """Validate the state configuration and return any errors."""
        errors = []

        valid_backends = ['location', 'memory']
        if self.backend not in valid_backends:
            errors.append(f"backend must be one of {valid_backends}")

        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            errors.append("log_level must be a standard logging level name")

        return errors


@dataclass
class Config:
    """Main configuration class that combines all configuration sections."""

    config_file_path: str = "config.toml"

    source: SourceConfig = field(default_factory=SourceConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    state: StateConfig = field(default_factory=StateConfig)

    def __post_init__(self):
        """Load configuration when an instance is created."""
        self.load_config()

    def to_dict(self) -> dict:
        """Return the configuration as the nested mapping written to TOML."""
        return {
            'source': {
                'records_url': self.source.records_url,
                'request_timeout': self.source.request_timeout,
            },
            'ui': {
                'page_title': self.ui.page_title,
                'search_placeholder': self.ui.search_placeholder,
            },
            'state': {
                'backend': self.state.backend,
                'log_level': self.state.log_level,
                'log_file': self.state.log_file,
            }
        }

    def save_config(self) -> None:
        """Save current configuration to TOML file."""
        try:
            with open(self.config_file_path, 'w') as f:
                toml.dump(self.to_dict(), f)
            logger.info(f"Configuration saved to {self.config_file_path}")
        except OSError as e:
            error_msg = f"Error saving configuration: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

    def load_config(self) -> None:
        """Load configuration from TOML file, creating it with defaults if missing."""
        try:
            with open(self.config_file_path) as f:
                config_data = toml.load(f)
        except FileNotFoundError:
            logger.info(f"{self.config_file_path} not found. Creating with default values.")
            self.save_config()
            return
        except toml.TomlDecodeError as e:
            error_msg = f"Error decoding {self.config_file_path}: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)
        except OSError as e:
            error_msg = f"Error loading configuration: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

        if 'source' in config_data:
            source_config = config_data['source']
            self.source.records_url = source_config.get('records_url', self.source.records_url)
            if 'request_timeout' in source_config:
                self.source.request_timeout = _as_seconds(source_config['request_timeout'], 'request_timeout')

        if 'ui' in config_data:
            ui_config = config_data['ui']
            self.ui.page_title = ui_config.get('page_title', self.ui.page_title)
            self.ui.search_placeholder = ui_config.get('search_placeholder', self.ui.search_placeholder)

        if 'state' in config_data:
            state_config = config_data['state']
            self.state.backend = state_config.get('backend', self.state.backend)
            self.state.log_level = state_config.get('log_level', self.state.log_level)
            self.state.log_file = state_config.get('log_file', self.state.log_file)

        logger.info(f"Configuration loaded from {self.config_file_path}")

    def validate(self) -> List[str]:
        """Validate all configuration sections and return any errors."""
        errors = []
        errors.extend(self.source.validate())
        errors.extend(self.ui.validate())
        errors.extend(self.state.validate())
        return errors
