"""
GET /edd: expected delivery date for a pincode.
  /edd?pin=411005  (pincode entered by the shopper)
  /edd             (pincode geolocated from the client IP)
Every failure answers 200 with the same "enter pincode" body.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request

from edd.config import Settings, get_settings
from edd.logging import get_logger
from edd.schemas.edd import DebugInfo, EddFailure, EddSuccess
from edd.services.client_ip import detect_client_ip, is_private_ip
from edd.services.delivery_date import local_now
from edd.services.errors import EddError, FailureReason
from edd.services.estimator import estimate_delivery

router = APIRouter()
logger = get_logger(__name__)


def get_now(settings: Settings = Depends(get_settings)) -> datetime:
    return local_now(settings.timezone)


def _peer(request: Request) -> str | None:
    return request.client.host if request.client else None


@router.get("/edd", response_model=EddSuccess | EddFailure)
def get_edd(
    request: Request,
    pin: str | None = None,
    settings: Settings = Depends(get_settings),
    now: datetime = Depends(get_now),
) -> EddSuccess | EddFailure:
    try:
        result = estimate_delivery(
            pin=pin,
            headers=request.headers,
            peer=_peer(request),
            settings=settings,
            now=now,
        )
    except EddError as e:
        logger.info("edd.failed reason=%s detail=%s", e.reason.value, e.detail)
        return EddFailure()
    except Exception:
        logger.exception("edd.failed reason=%s", FailureReason.UNEXPECTED.value)
        return EddFailure()

    logger.info(
        "edd.ok pin=%s from=%s tat_days=%s edd=%s",
        result.pincode,
        result.resolved_from.value,
        result.tat_days,
        result.edd,
    )
    return result


@router.get("/edd/debug", response_model=DebugInfo)
def get_edd_debug(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> DebugInfo:
    """Development aid: what the service sees as the client IP. Only the configured IP headers are echoed."""
    if not settings.debug_endpoint:
        raise HTTPException(status_code=404, detail="Not Found")

    peer = _peer(request)
    ip = detect_client_ip(request.headers, peer, settings.client_ip_headers)
    return DebugInfo(
        headers={name: request.headers.get(name) for name in settings.client_ip_headers},
        peer=peer,
        detected_ip=ip,
        is_private=is_private_ip(ip),
    )
