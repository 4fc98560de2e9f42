"""Outbound GET that never raises: upstream HTML/text or transport errors become ok=False."""

import json
from typing import Any, NamedTuple

import httpx

from edd.logging import get_logger

logger = get_logger(__name__)


class FetchResult(NamedTuple):
    ok: bool
    json: Any = None
    status_code: int | None = None


def safe_get_json(
    url: str,
    *,
    params: dict | None = None,
    headers: dict | None = None,
    timeout: float = 5.0,
    label: str = "http",
) -> FetchResult:
    try:
        resp = httpx.get(url, params=params, headers=headers, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("%s.request_failed error=%s", label, type(e).__name__)
        return FetchResult(ok=False)

    # Read as text first so a provider's HTML error page degrades to "no result"
    text = resp.text
    try:
        doc = json.loads(text)
    except ValueError:
        logger.info("%s.non_json status=%s", label, resp.status_code)
        return FetchResult(ok=False, status_code=resp.status_code)

    if not resp.is_success:
        logger.info("%s.bad_status status=%s", label, resp.status_code)
        return FetchResult(ok=False, json=doc, status_code=resp.status_code)
    return FetchResult(ok=True, json=doc, status_code=resp.status_code)


def dig(doc: Any, *path: str) -> Any:
    """Walk nested dict keys; any missing key or non-dict level yields None."""
    cur = doc
    for key in path:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(key)
    return cur
