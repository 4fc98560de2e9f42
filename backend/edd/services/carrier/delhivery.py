import math
from collections.abc import Callable
from typing import Any

from edd.config import Settings
from edd.logging import get_logger
from edd.services.fetch import dig, safe_get_json

logger = get_logger(__name__)

# The expected_tat response shape is undocumented; seen at top level and
# nested under "data" or "response". Checked in this order.
TAT_ACCESSORS: list[Callable[[Any], Any]] = [
    lambda doc: dig(doc, "tat"),
    lambda doc: dig(doc, "data", "tat"),
    lambda doc: dig(doc, "response", "tat"),
]


def _as_days(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        days = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(days) or days < 0:
        return None
    return math.ceil(days)


def parse_tat(doc: Any) -> int | None:
    """First numeric transit-day value found in doc, or None."""
    for accessor in TAT_ACCESSORS:
        days = _as_days(accessor(doc))
        if days is not None:
            return days
    return None


class DelhiveryClient:
    def __init__(self, settings: Settings) -> None:
        self._url = settings.delhivery_tat_url
        self._token = settings.delhivery_token
        self._origin_pin = settings.origin_pin
        self._mot = settings.mot
        self._timeout = settings.http_timeout_s

    def is_configured(self) -> bool:
        return bool(self._token) and bool(self._origin_pin)

    def _headers(self) -> dict:
        return {
            "Accept": "application/json",
            "Authorization": f"Token {self._token}",
        }

    def expected_tat(self, destination_pin: str) -> int | None:
        """Transit days origin -> destination, or None when unavailable for any reason."""
        if not self.is_configured():
            logger.warning("delhivery.not_configured")
            return None
        logger.info(
            "delhivery.expected_tat origin=%s destination=%s mot=%s",
            self._origin_pin,
            destination_pin,
            self._mot,
        )
        result = safe_get_json(
            self._url,
            params={
                "origin_pin": self._origin_pin,
                "destination_pin": destination_pin,
                "mot": self._mot,
            },
            headers=self._headers(),
            timeout=self._timeout,
            label="delhivery",
        )
        if not result.ok:
            return None
        tat = parse_tat(result.json)
        if tat is None:
            logger.info("delhivery.no_tat destination=%s", destination_pin)
        return tat
