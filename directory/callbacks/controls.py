"""
Control callbacks for the listing page.

The page's query string (dcc.Location 'url') is the single source of truth.
Every control writes through a SelectionController bound to a store built
from the current search string, and every control's displayed value is
re-derived from the search string. Because controls both feed and mirror
the URL, all of them live in one circular callback.
"""

import logging
from typing import Any, List, Optional, Tuple

import dash
from dash import Input, Output, no_update

from state_backends import LocationQueryStore

from ..controller import SelectionController
from ..query_state import QueryState

logger = logging.getLogger(__name__)

SEARCH_INPUT = 'search-input'
SORT_RADIO = 'sort-radio'
SORT_ORDER_RADIO = 'sort-order-radio'
MODE_RADIO = 'mode-radio'
SPECIALTY_CHECKLIST = 'specialty-checklist'
CLEAR_ALL = 'clear-all-link'

CONTROL_IDS = (SEARCH_INPUT, SORT_RADIO, SORT_ORDER_RADIO, MODE_RADIO, SPECIALTY_CHECKLIST, CLEAR_ALL)


def apply_control_event(triggered_id: str, url_search: Optional[str], value: Any = None) -> LocationQueryStore:
    """
    Apply one control event to the query string.

    Args:
        triggered_id: Id of the control that changed
        url_search: Current search string of the page ('?a=b' or '')
        value: The control's new value

    Returns:
        The query store holding the updated parameters
    """
    store = LocationQueryStore(url_search or '')
    controller = SelectionController(store)

    if triggered_id == SEARCH_INPUT:
        controller.on_search_change(value or '')
    elif triggered_id == SORT_RADIO:
        controller.on_sort_change(value or '')
    elif triggered_id == SORT_ORDER_RADIO:
        controller.on_sort_order_change(value or '')
    elif triggered_id == MODE_RADIO:
        controller.on_mode_change(value or '')
    elif triggered_id == SPECIALTY_CHECKLIST:
        # The checklist reports its whole new value; replay the difference as toggles
        requested = list(value or [])
        selected = controller.selected_specialties
        toggled = [label for label in requested if label not in selected]
        toggled += [label for label in selected if label not in requested]
        for label in toggled:
            controller.on_toggle_category(label)
    elif triggered_id == CLEAR_ALL:
        controller.on_clear_all()
    else:
        logger.warning(f"Ignoring event from unknown control: {triggered_id}")

    return store


def control_values(query: QueryState) -> Tuple[str, Optional[str], str, str, List[str]]:
    """Displayed values for (search box, sort radio, order radio, mode radio, checklist)."""
    return (
        query.search,
        query.sort or None,
        query.sort_order,
        query.mode,
        list(query.specialties),
    )


def sync_listing_controls(url_search, search_value, sort_value, order_value, mode_value,
                          checklist_value, clear_clicks):
    """Write control changes into the URL and mirror the URL back into the controls."""
    triggered_id = dash.callback_context.triggered_id
    values = {
        SEARCH_INPUT: search_value,
        SORT_RADIO: sort_value,
        SORT_ORDER_RADIO: order_value,
        MODE_RADIO: mode_value,
        SPECIALTY_CHECKLIST: checklist_value,
        CLEAR_ALL: clear_clicks,
    }

    url_output = no_update
    specialty_search_output = no_update
    if triggered_id in CONTROL_IDS:
        store = apply_control_event(triggered_id, url_search, values[triggered_id])
        if store.search_string != LocationQueryStore(url_search or '').search_string:
            url_output = store.search_string
        if triggered_id == CLEAR_ALL:
            specialty_search_output = ''
    else:
        store = LocationQueryStore(url_search or '')

    search_text, sort, sort_order, mode, selected = control_values(QueryState.from_mapping(store.read()))
    if triggered_id == SEARCH_INPUT:
        # Leave the box alone while the user is typing in it
        search_text = no_update

    return url_output, search_text, sort, sort_order, mode, selected, specialty_search_output


def register_callbacks(app):
    app.callback(
        [Output('url', 'search'),
         Output(SEARCH_INPUT, 'value'),
         Output(SORT_RADIO, 'value'),
         Output(SORT_ORDER_RADIO, 'value'),
         Output(MODE_RADIO, 'value'),
         Output(SPECIALTY_CHECKLIST, 'value'),
         Output('specialty-search-input', 'value')],
        [Input('url', 'search'),
         Input(SEARCH_INPUT, 'value'),
         Input(SORT_RADIO, 'value'),
         Input(SORT_ORDER_RADIO, 'value'),
         Input(MODE_RADIO, 'value'),
         Input(SPECIALTY_CHECKLIST, 'value'),
         Input(CLEAR_ALL, 'n_clicks')],
    )(sync_listing_controls)
