"""
Provider record source.

The record set is fetched once, as a single JSON array, with one plain GET.
There is no retry and no pagination: any failure leaves the listing empty.
"""

import logging
from typing import Any, List, Optional

import requests

from core.config import DEFAULT_RECORDS_URL
from core.exceptions import RecordSourceError

from .records import Record, RecordStore, records_from_payload

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _download_payload(url: str, timeout: float, session: Optional[requests.Session] = None) -> Any:
    """
    GET the payload and decode it as JSON.

    Raises:
        RecordSourceError: on network errors, non-2xx responses or invalid JSON
    """
    http = session or requests
    try:
        response = http.get(url, timeout=timeout, headers={'Accept': 'application/json'})
    except requests.RequestException as e:
        raise RecordSourceError(f"Request failed: {e}", url=url)

    if not response.ok:
        raise RecordSourceError(
            f"Unexpected response: {response.reason or 'HTTP error'}",
            url=url,
            status_code=response.status_code
        )

    try:
        return response.json()
    except ValueError as e:
        raise RecordSourceError(f"Response is not valid JSON: {e}", url=url)


def fetch_records(url: str = DEFAULT_RECORDS_URL, timeout: float = DEFAULT_TIMEOUT,
                  session: Optional[requests.Session] = None) -> List[Record]:
    """
    Fetch and normalise the provider record batch.

    Args:
        url: Location of the JSON array of provider entries
        timeout: Request timeout in seconds
        session: Optional requests session to issue the GET with

    Returns:
        The normalised records, or an empty list if anything went wrong
    """
    try:
        payload = _download_payload(url, timeout, session)
    except RecordSourceError as e:
        logger.error(f"Could not load provider records: {e}")
        return []

    records = records_from_payload(payload)
    logger.info(f"Fetched {len(records)} provider records from {url}")
    return records


def load_into(store: RecordStore, url: str = DEFAULT_RECORDS_URL, timeout: float = DEFAULT_TIMEOUT,
              session: Optional[requests.Session] = None) -> bool:
    """Fetch the records and populate the store. Returns False if the store was already loaded."""
    if store.is_loaded:
        logger.debug("RecordStore already loaded; skipping fetch")
        return False
    return store.load(fetch_records(url, timeout, session))
