"""
Provider listing module for Provider Directory.

This module provides the listing engine (record normalisation, query-string
state, filtering, sorting, control handling and the derived view) together
with the Dash callbacks and UI components that drive it.
"""

from .controller import SelectionController, filter_category_labels
from .filtering import filter_records, matches_mode, matches_search, matches_specialties
from .query_state import QueryState, cleared_mapping, merge_update, parse_query, serialize_query
from .records import Location, Record, RecordStore, records_from_payload
from .sorting import sort_records
from .view import ListingView, derive_view

__all__ = [
    # Records
    'Location',
    'Record',
    'RecordStore',
    'records_from_payload',

    # Query state
    'QueryState',
    'parse_query',
    'serialize_query',
    'merge_update',
    'cleared_mapping',

    # Engines
    'filter_records',
    'matches_search',
    'matches_mode',
    'matches_specialties',
    'sort_records',

    # Interaction and view
    'SelectionController',
    'filter_category_labels',
    'ListingView',
    'derive_view',
]
