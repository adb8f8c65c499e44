"""
Provider records and the in-memory record store.

Raw payload entries from the record source are normalised into immutable
Record instances. Optional fields that are missing or malformed become
explicit empty values, so matching logic never has to probe dicts.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
from typing_extensions import TypedDict

logger = logging.getLogger(__name__)

MODE_VIDEO = 'video'
MODE_IN_CLINIC = 'in-clinic'
RECORD_MODES = (MODE_VIDEO, MODE_IN_CLINIC)

_NUMBER_PATTERN = re.compile(r'\d+(?:\.\d+)?')


# Shapes of the raw payload as served by the mock provider API
class RawAddress(TypedDict, total=False):
    locality: str
    city: str


class RawClinic(TypedDict, total=False):
    name: str
    address: RawAddress


class RawSpeciality(TypedDict, total=False):
    name: str


class RawRecord(TypedDict, total=False):
    id: Any
    name: str
    photo: str
    fees: Any
    experience: Any
    experienceYears: Any
    mode: str
    video_consult: bool
    in_clinic: bool
    categories: List[str]
    specialties: List[str]
    specialities: List[RawSpeciality]
    location: RawAddress
    clinic: RawClinic


@dataclass(frozen=True)
class Location:
    """Where a provider practises."""
    locality: str = ''
    city: str = ''

    @property
    def label(self) -> str:
        return ', '.join(part for part in (self.locality, self.city) if part)

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Location']:
        if not isinstance(data, dict):
            return None
        locality = _clean_text(data.get('locality'))
        city = _clean_text(data.get('city'))
        if not locality and not city:
            return None
        return cls(locality=locality, city=city)


@dataclass(frozen=True)
class Record:
    """A single provider entry. Instances are immutable once loaded."""
    id: str
    name: str
    photo: str = ''
    experience_years: int = 0
    fees: float = 0
    mode: Optional[str] = None
    categories: Tuple[str, ...] = field(default_factory=tuple)
    location: Optional[Location] = None

    @property
    def primary_category(self) -> str:
        return self.categories[0] if self.categories else ''

    @property
    def location_label(self) -> str:
        return self.location.label if self.location else ''

    @classmethod
    def from_dict(cls, data: RawRecord, index: int = 0) -> Optional['Record']:
        """
        Build a Record from one raw payload entry.

        Args:
            data: Raw entry as decoded from the record source
            index: Position in the batch, used as the id when none is given

        Returns:
            The normalised Record, or None when the entry has no usable name
        """
        if not isinstance(data, dict):
            logger.warning(f"Skipping record #{index}: expected an object, got {type(data).__name__}")
            return None

        name = _clean_text(data.get('name'))
        if not name:
            logger.warning(f"Skipping record #{index}: missing name")
            return None

        raw_id = data.get('id')
        record_id = str(raw_id) if raw_id not in (None, '') else str(index)

        location = Location.from_dict(data.get('location'))
        if location is None:
            clinic = data.get('clinic')
            if isinstance(clinic, dict):
                location = Location.from_dict(clinic.get('address'))

        return cls(
            id=record_id,
            name=name,
            photo=_clean_text(data.get('photo')),
            experience_years=int(_parse_number(_first_present(
                data, ('experienceYears', 'experience_years', 'experience')))),
            fees=_parse_number(data.get('fees')),
            mode=_parse_mode(data),
            categories=_parse_categories(data),
            location=location,
        )


def _clean_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ''


def _first_present(data: Dict[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _parse_number(value: Any) -> float:
    """Read a non-negative number from an int/float or a display string like '₹ 500'."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, float):
        # json decodes overflowing literals such as 1e999 to inf
        return value if math.isfinite(value) and value >= 0 else 0
    if isinstance(value, str):
        match = _NUMBER_PATTERN.search(value.replace(',', ''))
        if match:
            number = float(match.group())
            if not math.isfinite(number):
                return 0
            return int(number) if number.is_integer() else number
    return 0


def _parse_mode(data: Dict[str, Any]) -> Optional[str]:
    mode = data.get('mode')
    if mode in RECORD_MODES:
        return mode

    video = data.get('video_consult') is True
    in_clinic = data.get('in_clinic') is True
    if video and not in_clinic:
        return MODE_VIDEO
    if in_clinic and not video:
        return MODE_IN_CLINIC
    return None


def _parse_categories(data: Dict[str, Any]) -> Tuple[str, ...]:
    """Collect category labels from whichever spelling the payload uses."""
    raw = _first_present(data, ('categories', 'specialties', 'specialities'))
    if not isinstance(raw, (list, tuple)):
        return ()

    labels = []
    for entry in raw:
        if isinstance(entry, dict):
            entry = entry.get('name')
        label = _clean_text(entry)
        if label and label not in labels:
            labels.append(label)
    return tuple(labels)


def records_from_payload(payload: Any) -> List[Record]:
    """Normalise a decoded payload batch, skipping unusable entries."""
    if not isinstance(payload, list):
        logger.warning(f"Record payload is not a list ({type(payload).__name__}); ignoring it")
        return []

    records = []
    for index, entry in enumerate(payload):
        record = Record.from_dict(entry, index)
        if record is not None:
            records.append(record)

    skipped = len(payload) - len(records)
    if skipped:
        logger.info(f"Normalised {len(records)} records ({skipped} skipped)")
    else:
        logger.debug(f"Normalised {len(records)} records")
    return records


class RecordStore:
    """
    Holds the provider record set for the page session.

    The store starts empty and is populated exactly once; later loads are
    ignored so the set never changes underneath a rendered view.
    """

    def __init__(self):
        self._records: Tuple[Record, ...] = ()
        self._loaded = False
        self._listeners: List[Callable[[Tuple[Record, ...]], None]] = []

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def load(self, records: Iterable[Record]) -> bool:
        """
        Populate the store.

        Returns:
            True if the records were accepted, False if the store was already loaded
        """
        if self._loaded:
            logger.warning("RecordStore already loaded; ignoring new record set")
            return False

        self._records = tuple(records)
        self._loaded = True
        logger.info(f"RecordStore loaded with {len(self._records)} records")

        for listener in list(self._listeners):
            try:
                listener(self._records)
            except Exception as e:
                logger.error(f"RecordStore listener failed: {e}")
        return True

    def on_load(self, callback: Callable[[Tuple[Record, ...]], None]) -> Callable[[], None]:
        """Register a callback fired once the records arrive. Returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def category_labels(self) -> List[str]:
        """All distinct category labels, in first-seen order."""
        labels: Dict[str, None] = {}
        for record in self._records:
            for label in record.categories:
                labels.setdefault(label, None)
        return list(labels)
