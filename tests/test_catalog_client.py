from unittest.mock import MagicMock

import pytest
import requests

from advising import CatalogRecord, ConfigurationError, TermCatalogClient
from advising.data import create_retry_session

BASE = "http://catalog.test/outlines"


def _response(payload, status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return resp


def _client(routes):
    """Client whose session answers from {query: response-or-exception}."""
    session = MagicMock()

    def get(url, timeout=None):
        query = url.split("?", 1)[1]
        outcome = routes[query]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    session.get.side_effect = get
    return TermCatalogClient(session=session, base_url=BASE), session


def test_unions_courses_across_departments():
    client, session = _client({
        "2024/fall": _response([{"value": "cmpt", "text": "CMPT"}, {"text": "MATH"}]),
        "2024/fall/cmpt": _response([{"value": "225"}, {"value": "295"}]),
        "2024/fall/math": _response([{"text": "240"}, {"value": "240"}]),
    })
    assert client.fetch_offerings(2024, "fall") == ["CMPT 225", "CMPT 295", "MATH 240"]
    assert session.get.call_args_list[0].kwargs["timeout"] == client.departments_timeout
    assert session.get.call_args_list[1].kwargs["timeout"] == client.courses_timeout


def test_failed_department_is_skipped():
    client, _ = _client({
        "2024/fall": _response([{"value": "cmpt"}, {"value": "math"}]),
        "2024/fall/cmpt": requests.Timeout("slow"),
        "2024/fall/math": _response([{"value": "240"}]),
    })
    assert client.fetch_offerings(2024, "fall") == ["MATH 240"]


def test_http_error_on_department_is_skipped():
    client, _ = _client({
        "2024/fall": _response([{"value": "cmpt"}, {"value": "math"}]),
        "2024/fall/cmpt": _response(None, status=503),
        "2024/fall/math": _response([{"value": "151"}]),
    })
    assert client.fetch_offerings(2024, "fall") == ["MATH 151"]


def test_department_list_failure_returns_empty(caplog):
    client, _ = _client({"2024/fall": requests.ConnectionError("down")})
    with caplog.at_level("WARNING"):
        assert client.fetch_offerings(2024, "fall") == []
    assert any(getattr(r, "event", None) == "catalog_departments_failed"
               for r in caplog.records)


def test_unparseable_body_returns_empty():
    bad = MagicMock()
    bad.json.side_effect = ValueError("not json")
    client, _ = _client({"2024/fall": bad})
    assert client.fetch_offerings(2024, "fall") == []


def test_non_list_body_and_bad_records_are_ignored():
    client, _ = _client({
        "2024/fall": _response([{"value": "cmpt"}, "junk", {"value": "  "}, {}]),
        "2024/fall/cmpt": _response({"error": "nope"}),
    })
    assert client.fetch_offerings(2024, "fall") == []


def test_bad_term_is_not_swallowed():
    client, _ = _client({})
    with pytest.raises(ConfigurationError):
        client.fetch_offerings(2024, "winter")


def test_catalog_record_prefers_value_over_text():
    assert CatalogRecord.from_raw({"value": "cmpt", "text": "CMPT"}).resolved == "cmpt"
    assert CatalogRecord.from_raw({"text": " MATH "}).resolved == "MATH"
    assert CatalogRecord.from_raw({"value": 225}).resolved == "225"
    assert CatalogRecord.from_raw({}).resolved == ""
    assert CatalogRecord.from_raw(["cmpt"]) is None


def test_retry_session_does_not_retry_timeouts_or_connection_errors():
    session = create_retry_session(retries=2)
    for prefix in ("http://", "https://"):
        retry = session.get_adapter(prefix).max_retries
        assert retry.read == 0
        assert retry.connect == 0
        assert retry.status == 2
        assert 503 in retry.status_forcelist
