"""
Derived listing view.

The view is recomputed synchronously, from the latest record set and
query-store contents, every time either of them changes. Nothing is
cached between changes.
"""

import logging
from typing import Any, Callable, List, Mapping

from .filtering import filter_records
from .query_state import QueryState
from .records import Record, RecordStore
from .sorting import sort_for_query

logger = logging.getLogger(__name__)

ViewListener = Callable[[List[Record]], None]


def derive_view(records, raw_query: Mapping[str, Any]) -> List[Record]:
    """Filter then sort the records for the given raw store contents."""
    query = QueryState.from_mapping(raw_query)
    return sort_for_query(filter_records(records, query), query)


class ListingView:
    """
    Keeps the rendered record list in step with the record and query stores.

    Listeners are called with the new list after every recompute.
    """

    def __init__(self, record_store: RecordStore, query_store):
        self.record_store = record_store
        self.query_store = query_store
        self._records: List[Record] = []
        self._listeners: List[ViewListener] = []
        self._unsubscribers = [
            query_store.on_change(lambda _contents: self.refresh()),
            record_store.on_load(lambda _records: self.refresh()),
        ]
        self.refresh()

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    @property
    def query(self) -> QueryState:
        return QueryState.from_mapping(self.query_store.read())

    def refresh(self) -> List[Record]:
        self._records = derive_view(self.record_store.records, self.query_store.read())
        logger.debug(f"Listing view refreshed: {len(self._records)} of {len(self.record_store)} records")
        for listener in list(self._listeners):
            try:
                listener(self.records)
            except Exception as e:
                logger.error(f"Listing view listener failed: {e}")
        return self.records

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Stop reacting to store changes."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._listeners = []
