"""
Process-wide access to the Provider Directory configuration.

app.py, the StateManager and tests all read the same Config instance so
config.toml is parsed once per process.
"""
from core.config import Config

_config_instance = None


def get_config() -> Config:
    """Return the shared Config, loading config.toml on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def refresh_config() -> Config:
    """Drop the shared Config and load config.toml again."""
    global _config_instance
    _config_instance = None
    return get_config()


def get_state_manager_config():
    """Build the StateManager settings from the [state] and [source] sections."""
    from state_manager import StateManagerConfig

    config = get_config()
    return StateManagerConfig(
        backend_type=config.state.backend,
        records_url=config.source.records_url,
        request_timeout=config.source.request_timeout,
    )
