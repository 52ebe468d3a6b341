"""Single-shot fetch of masjid rows from the spreadsheet API."""

import json
import urllib.request
from http.client import HTTPException
from urllib.error import HTTPError, URLError

import config


class FetchFailure(Exception):
    """Raised when the record source cannot be fetched or decoded."""


def extract_rows(payload) -> list:
    """Accept either a bare JSON array or an object wrapping it under 'data'.

    An object without a 'data' list counts as no rows, not as a failure.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        rows = payload.get("data")
        return rows if isinstance(rows, list) else []
    raise FetchFailure(f"Unexpected payload shape: {type(payload).__name__}")


def fetch_records(url: str = config.API_URL, timeout: float = config.FETCH_TIMEOUT) -> list:
    """GET the endpoint once and return the list of raw rows.

    Raises FetchFailure on network errors, non-2xx status or a malformed body.
    No retries.
    """
    req = urllib.request.Request(
        url,
        headers={"Accept": "application/json", "User-Agent": "masjid-jummah-directory/1.0"},
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                raise FetchFailure(f"HTTP {status} from {url}")
            body = resp.read()
    except HTTPError as e:
        raise FetchFailure(f"HTTP {e.code} from {url}") from e
    except (URLError, TimeoutError, OSError, HTTPException) as e:
        raise FetchFailure(f"Network error fetching {url}: {e}") from e

    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FetchFailure(f"Invalid JSON from {url}: {e}") from e

    return extract_rows(payload)
