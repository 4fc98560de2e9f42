"""Indian postal code (pincode) validation."""

import re
from typing import Any

_PIN_RE = re.compile(r"[0-9]{6}")


def is_valid_pin(value: Any) -> bool:
    """True when value, as trimmed text, is exactly six ASCII digits."""
    if value is None:
        return False
    return _PIN_RE.fullmatch(str(value).strip()) is not None


def clean_pin(value: Any) -> str | None:
    if not is_valid_pin(value):
        return None
    return str(value).strip()
