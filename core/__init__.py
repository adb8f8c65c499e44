"""
Core infrastructure module for Provider Directory.

This module provides the foundational components including configuration
management, logging setup, and custom exceptions.
"""

from .config import SourceConfig, UIConfig, StateConfig, Config
from .exceptions import DirectoryError, ConfigurationError, RecordSourceError, ValidationError
from .logging_config import setup_logging

__all__ = [
    # Configuration
    'SourceConfig',
    'UIConfig',
    'StateConfig',
    'Config',

    # Exceptions
    'DirectoryError',
    'ConfigurationError',
    'RecordSourceError',
    'ValidationError',

    # Logging
    'setup_logging',
]

# Version info
__version__ = "1.0.0"
