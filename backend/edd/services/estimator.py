"""
Delivery-date estimation for one request:
pincode (query or IP geolocation) -> carrier TAT -> cutoff rule -> EDD.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime

from edd.config import Settings
from edd.logging import get_logger
from edd.schemas.edd import EddSuccess, ResolutionOutcome
from edd.services.carrier.delhivery import DelhiveryClient
from edd.services.client_ip import detect_client_ip, is_private_ip
from edd.services.delivery_date import compute_delivery_window, format_label
from edd.services.errors import EddError, FailureReason
from edd.services.geo.providers import GeoProvider, build_providers, resolve_pincode
from edd.services.pincode import clean_pin

logger = get_logger(__name__)


def resolve_destination(
    pin: str | None,
    headers: Mapping[str, str],
    peer: str | None,
    settings: Settings,
    providers: Sequence[GeoProvider],
) -> tuple[str, ResolutionOutcome]:
    explicit = clean_pin(pin)
    if explicit:
        return explicit, ResolutionOutcome.EXPLICIT

    if pin:
        logger.info("edd.pin_rejected reason=%s", FailureReason.INPUT_INVALID.value)

    ip = detect_client_ip(headers, peer, settings.client_ip_headers)
    if is_private_ip(ip):
        raise EddError(FailureReason.ADDRESS_UNRESOLVABLE, f"ip={ip or '-'}")

    inferred = resolve_pincode(ip, providers)
    if not inferred:
        raise EddError(FailureReason.GEOLOCATION_MISS, f"ip={ip}")
    return inferred, ResolutionOutcome.INFERRED


def estimate_delivery(
    pin: str | None,
    headers: Mapping[str, str],
    peer: str | None,
    settings: Settings,
    now: datetime,
    providers: Sequence[GeoProvider] | None = None,
    carrier: DelhiveryClient | None = None,
) -> EddSuccess:
    if providers is None:
        providers = build_providers(settings)
    if carrier is None:
        carrier = DelhiveryClient(settings)

    destination, resolved_from = resolve_destination(pin, headers, peer, settings, providers)
    logger.info("edd.resolved pin=%s from=%s", destination, resolved_from.value)

    tat_days = carrier.expected_tat(destination)
    if tat_days is None:
        raise EddError(FailureReason.CARRIER_UNAVAILABLE, f"pin={destination}")

    window = compute_delivery_window(now, tat_days, settings.cutoff_hour)
    return EddSuccess(
        pincode=destination,
        resolved_from=resolved_from,
        tat_days=tat_days,
        edd=window.delivery_date.isoformat(),
        label=format_label(window.delivery_date),
    )
