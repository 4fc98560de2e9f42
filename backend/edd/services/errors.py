"""Failure classes for delivery-date estimation.

Callers only ever see ``FAILURE_MESSAGE``; the reason is kept for logs.
"""

from enum import Enum

FAILURE_MESSAGE = "Please enter pincode."


class FailureReason(str, Enum):
    INPUT_INVALID = "input_invalid"
    ADDRESS_UNRESOLVABLE = "address_unresolvable"
    GEOLOCATION_MISS = "geolocation_miss"
    CARRIER_UNAVAILABLE = "carrier_unavailable"
    UNEXPECTED = "unexpected"


class EddError(Exception):
    def __init__(self, reason: FailureReason, detail: str = "") -> None:
        super().__init__(f"{reason.value}: {detail}" if detail else reason.value)
        self.reason = reason
        self.detail = detail
