"""
Typed view over the query-string key-value store.

The store holds raw string values keyed by query parameter name. QueryState
parses the recognised keys into typed fields and serialises typed updates
back. Malformed values normalise to the field's empty value and never raise.

Recognised keys:
    search       free text, '' means no text filter
    mode         '', 'video' or 'in-clinic'
    specialties  comma-joined labels, empty means no category filter
    sort         '', 'fees' or 'experience'
    sortOrder    'asc' (default) or 'desc', only meaningful when sort is set
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple

from .records import RECORD_MODES

logger = logging.getLogger(__name__)

SEARCH_KEY = 'search'
MODE_KEY = 'mode'
SPECIALTIES_KEY = 'specialties'
SORT_KEY = 'sort'
SORT_ORDER_KEY = 'sortOrder'

QUERY_KEYS = (SEARCH_KEY, MODE_KEY, SPECIALTIES_KEY, SORT_KEY, SORT_ORDER_KEY)

SORT_FEES = 'fees'
SORT_EXPERIENCE = 'experience'
SORT_KEYS = (SORT_FEES, SORT_EXPERIENCE)

ORDER_ASC = 'asc'
ORDER_DESC = 'desc'
SORT_ORDERS = (ORDER_ASC, ORDER_DESC)

SPECIALTY_SEPARATOR = ','

# Typed field name -> query-string key
_FIELD_KEYS = {
    'search': SEARCH_KEY,
    'mode': MODE_KEY,
    'specialties': SPECIALTIES_KEY,
    'sort': SORT_KEY,
    'sort_order': SORT_ORDER_KEY,
}


def _raw_value(raw: Mapping[str, Any], key: str) -> str:
    """Fetch one raw value as a string; multi-valued entries use their first value."""
    value = raw.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def _choice(value: str, allowed: Tuple[str, ...], default: str, key: str) -> str:
    if value in allowed:
        return value
    if value and value != default:
        logger.debug(f"Ignoring unrecognised {key}={value!r}")
    return default


def normalize_mode(value: Any) -> str:
    return _choice(value if isinstance(value, str) else '', RECORD_MODES, '', MODE_KEY)


def normalize_sort(value: Any) -> str:
    return _choice(value if isinstance(value, str) else '', SORT_KEYS, '', SORT_KEY)


def normalize_sort_order(value: Any) -> str:
    return _choice(value if isinstance(value, str) else '', SORT_ORDERS, ORDER_ASC, SORT_ORDER_KEY)


def normalize_specialties(labels: Iterable[Any]) -> Tuple[str, ...]:
    """De-duplicate labels keeping first-seen order; drop empty or non-string ones."""
    seen = []
    for label in labels or ():
        if isinstance(label, str) and label and label not in seen:
            seen.append(label)
    return tuple(seen)


def parse_specialties(value: str) -> Tuple[str, ...]:
    """Split a comma-joined value; leading, trailing or doubled commas yield no empty labels."""
    return normalize_specialties(value.split(SPECIALTY_SEPARATOR)) if value else ()


def serialize_specialties(labels: Iterable[str]) -> str:
    return SPECIALTY_SEPARATOR.join(normalize_specialties(labels))


@dataclass(frozen=True)
class QueryState:
    """
    Typed snapshot of every recognised filter and sort parameter.

    specialties behaves as a set but keeps selection order so the
    serialised query string is stable across round trips.
    """
    search: str = ''
    mode: str = ''
    specialties: Tuple[str, ...] = field(default_factory=tuple)
    sort: str = ''
    sort_order: str = ORDER_ASC

    @property
    def is_empty(self) -> bool:
        return self == QueryState()

    @property
    def specialty_set(self) -> frozenset:
        return frozenset(self.specialties)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> 'QueryState':
        """Parse the recognised keys out of the raw store contents."""
        raw = raw or {}
        return cls(
            search=_raw_value(raw, SEARCH_KEY),
            mode=normalize_mode(_raw_value(raw, MODE_KEY)),
            specialties=parse_specialties(_raw_value(raw, SPECIALTIES_KEY)),
            sort=normalize_sort(_raw_value(raw, SORT_KEY)),
            sort_order=normalize_sort_order(_raw_value(raw, SORT_ORDER_KEY)),
        )

    def to_mapping(self) -> Dict[str, str]:
        """Serialise every recognised field to its query-string value."""
        return serialize_fields(
            search=self.search,
            mode=self.mode,
            specialties=self.specialties,
            sort=self.sort,
            sort_order=self.sort_order,
        )

    def updated(self, **fields) -> 'QueryState':
        """Return a copy with the named fields replaced (values normalised)."""
        return QueryState.from_mapping({**self.to_mapping(), **serialize_fields(**fields)})


def serialize_fields(**fields) -> Dict[str, str]:
    """
    Serialise a partial update.

    Only the named typed fields appear in the result, keyed by their
    query-string names. Values are normalised on the way out so the store
    only ever receives values that parse back to themselves.

    Raises:
        TypeError: if a field name is not a QueryState field
    """
    partial = {}
    for name, value in fields.items():
        if name not in _FIELD_KEYS:
            raise TypeError(f"Unknown query field: {name}")
        key = _FIELD_KEYS[name]
        if name == 'search':
            partial[key] = value if isinstance(value, str) else ''
        elif name == 'mode':
            partial[key] = normalize_mode(value)
        elif name == 'specialties':
            if isinstance(value, str):
                value = parse_specialties(value)
            partial[key] = serialize_specialties(value)
        elif name == 'sort':
            partial[key] = normalize_sort(value)
        else:
            partial[key] = normalize_sort_order(value)
    return partial


def merge_update(current: Mapping[str, Any], **fields) -> Dict[str, Any]:
    """
    Produce the full store contents after an additive update.

    Every existing key, recognised or not, is carried over unchanged except
    the ones named in the update.
    """
    merged = dict(current or {})
    merged.update(serialize_fields(**fields))
    return merged


def cleared_mapping() -> Dict[str, Any]:
    """Store contents after 'clear all': nothing at all."""
    return {}


def parse_query(raw: Mapping[str, Any]) -> QueryState:
    return QueryState.from_mapping(raw)


def serialize_query(state: QueryState) -> Dict[str, str]:
    return state.to_mapping()
