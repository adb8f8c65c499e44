"""
Query-string store implementations for the StateManager system.

A query store is the external key-value substrate behind the listing's
view state. The engine only reads its contents, requests additive merges
and listens for changes; where the values actually persist (a dict in
memory, the browser's address bar) is up to the implementation.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from directory.query_state import QUERY_KEYS

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Dict[str, Any]], None]


class QueryStore(ABC):
    """Abstract base class for query-string stores with change notification."""

    def __init__(self):
        self._listeners: List[ChangeCallback] = []

    @abstractmethod
    def read(self) -> Dict[str, Any]:
        """Return a copy of the current contents"""
        pass

    @abstractmethod
    def _store(self, contents: Dict[str, Any]) -> None:
        """Persist the complete new contents"""
        pass

    def write(self, partial: Mapping[str, Any]) -> bool:
        """
        Merge a partial update into the current contents.

        Keys not named in the update are left untouched.

        Returns:
            True if the contents changed (listeners were notified)
        """
        current = self.read()
        merged = dict(current)
        merged.update(partial)
        return self._commit(current, merged)

    def replace(self, contents: Mapping[str, Any]) -> bool:
        """Replace the whole contents. Only 'clear all' is meant to use this."""
        return self._commit(self.read(), dict(contents))

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        """
        Register a listener called with the new contents after every change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _commit(self, current: Dict[str, Any], new: Dict[str, Any]) -> bool:
        self._store(new)
        if self.read() == current:
            return False
        self._notify()
        return True

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.read())
            except Exception as e:
                logger.error(f"Query store listener failed: {e}")


class MemoryQueryStore(QueryStore):
    """
    In-memory query store for tests and headless use.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__()
        self._contents: Dict[str, Any] = dict(initial or {})

    def read(self) -> Dict[str, Any]:
        return dict(self._contents)

    def _store(self, contents: Dict[str, Any]) -> None:
        self._contents = contents


class LocationQueryStore(QueryStore):
    """
    Query store backed by a URL search string such as '?search=an&mode=video'.

    Keys are kept in insertion order and foreign keys keep every value they
    were given, so a parameter repeated in the address bar survives updates
    to the listing's own keys. Recognised keys set to an empty value are
    dropped so shared links stay short; parsing treats a missing key and an
    empty one alike.
    """

    def __init__(self, search: str = ''):
        super().__init__()
        self._params: Dict[str, List[str]] = self._parse(search)

    @staticmethod
    def _parse(search: str) -> Dict[str, List[str]]:
        params: Dict[str, List[str]] = {}
        for key, value in parse_qsl((search or '').lstrip('?'), keep_blank_values=True):
            if key in QUERY_KEYS and value == '':
                continue
            params.setdefault(key, []).append(value)
        return params

    @staticmethod
    def _as_values(value: Any) -> List[str]:
        if value is None:
            return ['']
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return [str(value)]

    def read(self) -> Dict[str, Any]:
        return {
            key: values[0] if len(values) == 1 else list(values)
            for key, values in self._params.items()
        }

    def _store(self, contents: Dict[str, Any]) -> None:
        params = {key: self._as_values(value) for key, value in contents.items()}
        self._params = {
            key: values for key, values in params.items()
            if not (key in QUERY_KEYS and values == [''])
        }

    def pairs(self) -> List[Tuple[str, str]]:
        return [
            (key, value)
            for key, values in self._params.items()
            for value in values
        ]

    @property
    def search_string(self) -> str:
        """The contents rendered as a URL search string, '' when there is nothing to show."""
        encoded = urlencode(self.pairs())
        return f"?{encoded}" if encoded else ''

    def sync_from_search(self, search: str) -> bool:
        """
        Adopt a search string coming from the address bar.

        Returns:
            True if the parsed contents differ from the current ones
        """
        current = self.read()
        self._params = self._parse(search)
        new = self.read()
        if new == current:
            return False
        logger.debug(f"Query store synced from address bar: {search!r}")
        self._notify()
        return True
