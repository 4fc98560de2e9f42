import logging

import httpx
import respx
from httpx import Response

from edd.logging import configure_logging
from edd.services.fetch import dig, safe_get_json


@respx.mock
def test_invalid_url_is_not_ok():
    result = safe_get_json("https://ipinfo.io/1.2.3.4\x7f/json")
    assert result.ok is False
    assert result.json is None


def test_invalid_url_error_from_client_is_not_ok(monkeypatch):
    def raise_invalid(*_args, **_kwargs):
        raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

    monkeypatch.setattr("edd.services.fetch.httpx.get", raise_invalid)
    assert safe_get_json("https://example.test/geo").ok is False


@respx.mock
def test_json_body_with_error_status():
    respx.get("https://example.test/geo").mock(return_value=Response(429, json={"error": "slow down"}))
    result = safe_get_json("https://example.test/geo")
    assert result.ok is False
    assert result.status_code == 429
    assert result.json == {"error": "slow down"}


def test_dig():
    doc = {"data": {"geo": {"postal_code": "400001"}}}
    assert dig(doc, "data", "geo", "postal_code") == "400001"
    assert dig(doc, "data", "missing", "postal_code") is None
    assert dig(["data"], "data") is None


def test_configure_logging_quiets_httpx_when_root_has_handlers():
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    httpx_logger = logging.getLogger("httpx")
    previous = httpx_logger.level
    root_level = root.level
    try:
        httpx_logger.setLevel(logging.NOTSET)
        configure_logging("INFO")
        assert httpx_logger.level == logging.WARNING
    finally:
        root.removeHandler(handler)
        httpx_logger.setLevel(previous)
        root.setLevel(root_level)
