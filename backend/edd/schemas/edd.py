from enum import Enum
from typing import Literal

from pydantic import BaseModel

from edd.services.errors import FAILURE_MESSAGE


class ResolutionOutcome(str, Enum):
    EXPLICIT = "query"  # pincode supplied by the caller
    INFERRED = "ip"  # pincode geolocated from the client IP


class EddSuccess(BaseModel):
    ok: Literal[True] = True
    pincode: str
    resolved_from: ResolutionOutcome
    tat_days: int
    edd: str  # YYYY-MM-DD
    label: str


class EddFailure(BaseModel):
    ok: Literal[False] = False
    message: str = FAILURE_MESSAGE


class DebugInfo(BaseModel):
    headers: dict[str, str | None]
    peer: str | None
    detected_ip: str
    is_private: bool
