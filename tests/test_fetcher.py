import json
import urllib.request
from http.client import IncompleteRead
from urllib.error import HTTPError, URLError

import pytest

from fetcher import FetchFailure, extract_rows, fetch_records
from live import LOAD_FAILED, NO_DATA, load, page_skeleton


class FakeResponse:
    def __init__(self, body, status: int = 200, read_error=None):
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status = status
        self.read_error = read_error

    def read(self):
        if self.read_error is not None:
            raise self.read_error
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _serve(monkeypatch, body="", status=200, error=None, read_error=None):
    calls = []

    def fake_urlopen(req, timeout=None):
        calls.append(req.full_url)
        if error is not None:
            raise error
        return FakeResponse(body, status, read_error)

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
    return calls


def test_fetch_accepts_bare_array(monkeypatch):
    calls = _serve(monkeypatch, json.dumps([{"name": "a"}, {"name": "b"}]))
    rows = fetch_records("https://example.test/api")
    assert [r["name"] for r in rows] == ["a", "b"]
    assert calls == ["https://example.test/api"]


def test_fetch_accepts_wrapped_array(monkeypatch):
    _serve(monkeypatch, json.dumps({"data": [{"name": "a"}]}))
    assert fetch_records("https://example.test/api") == [{"name": "a"}]


def test_fetch_bad_json_is_failure(monkeypatch):
    _serve(monkeypatch, "<html>oops</html>")
    with pytest.raises(FetchFailure):
        fetch_records("https://example.test/api")


def test_fetch_non_2xx_is_failure(monkeypatch):
    _serve(monkeypatch, "[]", status=504)
    with pytest.raises(FetchFailure, match="HTTP 504"):
        fetch_records("https://example.test/api")


def test_fetch_http_error_is_failure(monkeypatch):
    _serve(monkeypatch, error=HTTPError("https://example.test/api", 503, "Unavailable", {}, None))
    with pytest.raises(FetchFailure, match="HTTP 503"):
        fetch_records("https://example.test/api")


def test_fetch_network_error_is_failure_and_single_attempt(monkeypatch):
    calls = _serve(monkeypatch, error=URLError("connection refused"))
    with pytest.raises(FetchFailure):
        fetch_records("https://example.test/api")
    assert len(calls) == 1


def test_fetch_truncated_body_is_failure(monkeypatch):
    _serve(monkeypatch, read_error=IncompleteRead(b"[{", 100))
    with pytest.raises(FetchFailure):
        fetch_records("https://example.test/api")


def test_live_load_survives_truncated_body(monkeypatch):
    _serve(monkeypatch, read_error=IncompleteRead(b"[{", 100))
    page = page_skeleton()
    assert load(page, "https://example.test/api") is False
    assert page.get_element_by_id("timings-list").text == LOAD_FAILED


def test_fetch_invalid_utf8_is_failure(monkeypatch):
    _serve(monkeypatch, b'[{"name": "\xff\xfe"}]')
    with pytest.raises(FetchFailure, match="Invalid JSON"):
        fetch_records("https://example.test/api")


@pytest.mark.parametrize("payload", [{"rows": []}, {"data": None}, {"data": "x"}, {}])
def test_extract_rows_wrapper_without_data_list_is_empty(payload):
    assert extract_rows(payload) == []


def test_live_load_wrapper_without_data_shows_no_data(monkeypatch):
    _serve(monkeypatch, json.dumps({"rows": []}))
    page = page_skeleton()
    assert load(page, "https://example.test/api") is True
    assert page.get_element_by_id("timings-list").text == NO_DATA


@pytest.mark.parametrize("payload", ["text", 3, None])
def test_extract_rows_rejects_other_shapes(payload):
    with pytest.raises(FetchFailure):
        extract_rows(payload)
