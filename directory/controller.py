"""
SelectionController - turns UI control events into query-store updates.

Each handler performs exactly one additive update of the query store and
nothing else; the rendered view only changes by reacting to the store.
The controller also owns the purely cosmetic UI caches (what is typed in
the search box, the specialty-list search text) that 'clear all' resets.
"""

import logging
from typing import Iterable, List, Tuple

from .query_state import QueryState, cleared_mapping, serialize_fields

logger = logging.getLogger(__name__)


class SelectionController:
    """One handler per listing control, all writing through the query store."""

    def __init__(self, store):
        self.store = store
        self.search_text = QueryState.from_mapping(store.read()).search
        self.category_search = ''

    @property
    def query(self) -> QueryState:
        return QueryState.from_mapping(self.store.read())

    @property
    def selected_specialties(self) -> Tuple[str, ...]:
        """Checked specialty labels; always re-derived from the store."""
        return self.query.specialties

    def _update(self, **fields) -> bool:
        partial = serialize_fields(**fields)
        changed = self.store.write(partial)
        logger.debug(f"Query update {partial} ({'changed' if changed else 'no change'})")
        return changed

    def on_search_change(self, text: str) -> bool:
        self.search_text = text or ''
        return self._update(search=self.search_text)

    def on_toggle_category(self, label: str) -> bool:
        """Add the label to the selected specialties, or remove it if already selected."""
        if not label:
            return False
        selected = list(self.selected_specialties)
        if label in selected:
            selected.remove(label)
        else:
            selected.append(label)
        return self._update(specialties=selected)

    def on_mode_change(self, mode: str) -> bool:
        return self._update(mode=mode)

    def on_sort_change(self, key: str) -> bool:
        return self._update(sort=key)

    def on_sort_order_change(self, direction: str) -> bool:
        return self._update(sort_order=direction)

    def on_category_search_change(self, text: str) -> None:
        """Narrow the specialty checklist. Never touches the query store."""
        self.category_search = text or ''

    def on_clear_all(self) -> bool:
        """Drop every query parameter and reset the UI caches."""
        self.search_text = ''
        self.category_search = ''
        changed = self.store.replace(cleared_mapping())
        logger.debug("Cleared all query parameters")
        return changed

    def visible_categories(self, labels: Iterable[str]) -> List[str]:
        return filter_category_labels(labels, self.category_search)


def filter_category_labels(labels: Iterable[str], text: str) -> List[str]:
    """Case-insensitive substring filter over category labels, order preserved."""
    needle = (text or '').casefold()
    return [label for label in labels if needle in label.casefold()]
