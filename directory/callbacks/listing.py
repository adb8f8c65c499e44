"""
Listing callbacks: derive the rendered provider list from the URL.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from dash import Input, Output

from state_backends import LocationQueryStore
from state_manager import get_state_manager

from ..controller import filter_category_labels
from ..records import Record
from ..ui.components import create_provider_cards
from ..view import derive_view

logger = logging.getLogger(__name__)


def result_count_text(shown: int, total: int) -> str:
    if shown == total:
        return f"{total} doctors"
    return f"Showing {shown} of {total} doctors"


def build_listing(records: Sequence[Record], category_labels: Iterable[str],
                  url_search: Optional[str], specialty_search: Optional[str]):
    """
    Compute the checklist options, card list and result count for a URL.

    Returns:
        Tuple of (checklist options, card components, result count text)
    """
    view = derive_view(records, LocationQueryStore(url_search or '').read())
    labels = filter_category_labels(category_labels, specialty_search or '')
    options: List[dict] = [{'label': label, 'value': label} for label in labels]
    return options, create_provider_cards(view), result_count_text(len(view), len(records))


def render_listing(url_search, specialty_search):
    manager = get_state_manager()
    # First render under a WSGI server that never ran app.py's main block
    if not manager.record_store.is_loaded:
        manager.load_records()
    record_store = manager.record_store
    return build_listing(record_store.records, record_store.category_labels(), url_search, specialty_search)


def register_callbacks(app):
    app.callback(
        [Output('specialty-checklist', 'options'),
         Output('provider-list', 'children'),
         Output('result-count', 'children')],
        [Input('url', 'search'),
         Input('specialty-search-input', 'value')]
    )(render_listing)
