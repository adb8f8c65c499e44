"""
Record ordering for the provider listing.
"""

import logging
from typing import Callable, Dict, Iterable, List

from .query_state import ORDER_DESC, SORT_EXPERIENCE, SORT_FEES, QueryState
from .records import Record

logger = logging.getLogger(__name__)

SORT_FIELDS: Dict[str, Callable[[Record], float]] = {
    SORT_FEES: lambda record: record.fees,
    SORT_EXPERIENCE: lambda record: record.experience_years,
}


def sort_records(records: Iterable[Record], key: str, direction: str = 'asc') -> List[Record]:
    """
    Order records by a numeric field.

    The sort is stable in both directions: descending order negates the
    sort key instead of reversing, so records with equal values keep their
    incoming relative order either way. An empty or unknown key returns a
    copy in the incoming order. The input is never mutated.
    """
    records = list(records)
    field_getter = SORT_FIELDS.get(key)
    if field_getter is None:
        return records

    logger.debug(f"Sorting {len(records)} records by {key} ({direction})")
    if direction == ORDER_DESC:
        return sorted(records, key=lambda record: -field_getter(record))
    return sorted(records, key=field_getter)


def sort_for_query(records: Iterable[Record], query: QueryState) -> List[Record]:
    return sort_records(records, query.sort, query.sort_order)
