"""IP -> pincode geolocation providers, tried in a configured order."""

from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from edd.config import Settings
from edd.logging import get_logger
from edd.services.fetch import dig, safe_get_json
from edd.services.pincode import clean_pin

logger = get_logger(__name__)


class GeoProvider:
    """One lookup strategy. Subclasses set ``name`` and implement ``_request``/``_extract``."""

    name = "base"

    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout

    def is_configured(self) -> bool:
        return True

    def _request(self, ip: str) -> tuple[str, dict, dict]:
        raise NotImplementedError

    def _extract(self, doc: Any) -> Any:
        raise NotImplementedError

    def lookup(self, ip: str) -> str | None:
        url, params, headers = self._request(ip)
        result = safe_get_json(
            url,
            params=params,
            headers=headers,
            timeout=self.timeout,
            label=f"geo.{self.name}",
        )
        if not result.ok or result.json is None:
            return None
        pin = clean_pin(self._extract(result.json))
        if pin is None:
            logger.info("geo.%s.no_pincode ip=%s", self.name, ip)
        return pin


class IpInfoProvider(GeoProvider):
    name = "ipinfo"
    url = "https://ipinfo.io"

    def __init__(self, token: str, timeout: float = 5.0) -> None:
        super().__init__(timeout)
        self._token = token

    def is_configured(self) -> bool:
        return bool(self._token)

    def _request(self, ip: str) -> tuple[str, dict, dict]:
        return (
            f"{self.url}/{quote(ip, safe='')}/json",
            {},
            {"Accept": "application/json", "Authorization": f"Bearer {self._token}"},
        )

    def _extract(self, doc: Any) -> Any:
        return dig(doc, "postal")


class KeyCdnProvider(GeoProvider):
    name = "keycdn"
    url = "https://tools.keycdn.com/geo.json"

    def __init__(self, site: str = "https://google.com", timeout: float = 5.0) -> None:
        super().__init__(timeout)
        self._site = site

    def _request(self, ip: str) -> tuple[str, dict, dict]:
        # KeyCDN rejects requests without a "keycdn-tools:<site>" user agent
        return (
            self.url,
            {"host": ip},
            {"Accept": "application/json", "User-Agent": f"keycdn-tools:{self._site}"},
        )

    def _extract(self, doc: Any) -> Any:
        return dig(doc, "data", "geo", "postal_code")


class IpApiProvider(GeoProvider):
    name = "ipapi"
    url = "http://ip-api.com/json"

    def _request(self, ip: str) -> tuple[str, dict, dict]:
        return (
            f"{self.url}/{quote(ip, safe='')}",
            {"fields": "status,message,countryCode,zip"},
            {"Accept": "application/json"},
        )

    def _extract(self, doc: Any) -> Any:
        if dig(doc, "status") != "success":
            return None
        return dig(doc, "zip")


def build_providers(settings: Settings) -> list[GeoProvider]:
    timeout = settings.http_timeout_s
    factories = {
        "ipinfo": lambda: IpInfoProvider(settings.ipinfo_token, timeout=timeout),
        "keycdn": lambda: KeyCdnProvider(settings.keycdn_site, timeout=timeout),
        "ipapi": lambda: IpApiProvider(timeout=timeout),
    }
    providers = []
    for name in settings.geo_providers:
        factory = factories.get(name.strip().lower())
        if factory is None:
            logger.warning("geo.unknown_provider name=%s", name)
            continue
        providers.append(factory())
    return providers


def resolve_pincode(ip: str, providers: Iterable[GeoProvider]) -> str | None:
    """First valid pincode from the providers in order; None when all miss."""
    for provider in providers:
        if not provider.is_configured():
            logger.debug("geo.skip provider=%s reason=not_configured", provider.name)
            continue
        pin = provider.lookup(ip)
        if pin:
            logger.info("geo.resolved provider=%s ip=%s pin=%s", provider.name, ip, pin)
            return pin
    logger.info("geo.miss ip=%s", ip)
    return None
