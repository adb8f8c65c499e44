"""
Record filtering for the provider listing.

Three independent predicates (name search, consultation mode, categories)
are AND-combined. A predicate is only active when its query field is
non-empty. Filtering keeps the input order of the surviving records.
"""

import logging
from typing import Callable, Iterable, List

from .query_state import QueryState
from .records import Record

logger = logging.getLogger(__name__)

Predicate = Callable[[Record], bool]


def matches_search(record: Record, search: str) -> bool:
    """Case-insensitive substring match on the provider name."""
    if not search:
        return True
    return search.casefold() in record.name.casefold()


def matches_mode(record: Record, mode: str) -> bool:
    """Exact consultation-mode match; records without a mode never match an active filter."""
    if not mode:
        return True
    return record.mode == mode


def matches_specialties(record: Record, specialties: Iterable[str]) -> bool:
    """Every requested category must be present on the record."""
    requested = set(specialties)
    if not requested:
        return True
    return requested.issubset(record.categories)


def active_predicates(query: QueryState) -> List[Predicate]:
    """
    Build the predicates that are active for a query.

    Mode is checked first since it is the cheapest comparison; the order
    does not change the result.
    """
    predicates = []
    if query.mode:
        predicates.append(lambda record: matches_mode(record, query.mode))
    if query.specialties:
        requested = frozenset(query.specialties)
        predicates.append(lambda record: requested.issubset(record.categories))
    if query.search:
        needle = query.search.casefold()
        predicates.append(lambda record: needle in record.name.casefold())
    return predicates


def filter_records(records: Iterable[Record], query: QueryState) -> List[Record]:
    """
    Apply every active predicate of the query to the records.

    Args:
        records: Records in display order
        query: Parsed query parameters

    Returns:
        New list of matching records in their original relative order
    """
    records = list(records)
    predicates = active_predicates(query)
    if not predicates:
        return records

    filtered = [record for record in records if all(predicate(record) for predicate in predicates)]
    logger.debug(f"Filtered {len(records)} records to {len(filtered)} with {len(predicates)} active predicates")
    return filtered
