"""
StateManager - wires the provider listing together for a page session.

Owns the configured query store, the record store, the selection
controller and the derived listing view, and exposes them through a
global accessor the Dash callbacks share.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.config import DEFAULT_RECORDS_URL
from directory.controller import SelectionController
from directory.records import RecordStore
from directory.source import DEFAULT_TIMEOUT, load_into
from directory.view import ListingView
from state_backends import LocationQueryStore, MemoryQueryStore, QueryStore

# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class StateManagerConfig:
    """Configuration for StateManager"""
    backend_type: str = 'location'  # 'location', 'memory'
    records_url: str = DEFAULT_RECORDS_URL
    request_timeout: float = DEFAULT_TIMEOUT


class StateManager:
    """
    Session-level container for the listing's stores, controller and view.
    """

    def __init__(self, config: Optional[StateManagerConfig] = None,
                 query_store: Optional[QueryStore] = None):
        self.config = config or StateManagerConfig()
        self.query_store = query_store or self._create_store()
        self.record_store = RecordStore()
        self.controller = SelectionController(self.query_store)
        self.view = ListingView(self.record_store, self.query_store)

        logger.info(f"StateManager initialized with {self.config.backend_type} query store")

    def _create_store(self) -> QueryStore:
        """Create the query store based on configuration"""
        if self.config.backend_type == 'location':
            return LocationQueryStore()
        elif self.config.backend_type == 'memory':
            return MemoryQueryStore()
        else:
            logger.warning(f"Unknown backend type: {self.config.backend_type}, falling back to location")
            return LocationQueryStore()

    def load_records(self, session=None) -> bool:
        """Fetch the provider records once; later calls are no-ops."""
        return load_into(self.record_store, self.config.records_url,
                         self.config.request_timeout, session)

    def get_stats(self) -> Dict[str, Any]:
        return {
            'backend_type': self.config.backend_type,
            'records_loaded': self.record_store.is_loaded,
            'total_records': len(self.record_store),
            'visible_records': len(self.view.records),
            'query': self.query_store.read(),
        }

    def close(self) -> None:
        self.view.close()


# Global StateManager instance
_state_manager_instance: Optional[StateManager] = None


def get_state_manager(config: Optional[StateManagerConfig] = None) -> StateManager:
    """
    Get the global StateManager instance (singleton pattern).

    Args:
        config: Optional configuration for the StateManager

    Returns:
        The global StateManager instance
    """
    global _state_manager_instance

    if _state_manager_instance is None:
        _state_manager_instance = StateManager(config)
        logger.info("Created global StateManager instance")
    elif config is not None:
        logger.warning("StateManager already initialized, ignoring new config")

    return _state_manager_instance


def refresh_state_manager(config: Optional[StateManagerConfig] = None) -> StateManager:
    """
    Force refresh of the global StateManager instance.
    Useful for testing or configuration changes.
    """
    global _state_manager_instance
    if _state_manager_instance is not None:
        _state_manager_instance.close()
    _state_manager_instance = None
    return get_state_manager(config)
