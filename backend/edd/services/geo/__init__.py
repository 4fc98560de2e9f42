"""IP geolocation: ordered provider fallback returning a validated pincode."""

from edd.services.geo.providers import (
    GeoProvider,
    IpApiProvider,
    IpInfoProvider,
    KeyCdnProvider,
    build_providers,
    resolve_pincode,
)

__all__ = [
    "GeoProvider",
    "IpApiProvider",
    "IpInfoProvider",
    "KeyCdnProvider",
    "build_providers",
    "resolve_pincode",
]
