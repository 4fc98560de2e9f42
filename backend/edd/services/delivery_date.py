"""Pickup cutoff rule and delivery-date arithmetic."""

from datetime import date, datetime, timedelta
from typing import NamedTuple

import pytz

DEFAULT_CUTOFF_HOUR = 15

# Fixed English names; strftime %a/%b follow the process locale
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class DeliveryWindow(NamedTuple):
    pickup_date: date
    delivery_date: date


def local_now(tz_name: str) -> datetime:
    return datetime.now(pytz.timezone(tz_name))


def pickup_date(now: datetime, cutoff_hour: int = DEFAULT_CUTOFF_HOUR) -> date:
    """Same-day pickup before the cutoff hour, next day at or after it."""
    if now.hour >= cutoff_hour:
        return now.date() + timedelta(days=1)
    return now.date()


def compute_delivery_window(
    now: datetime,
    tat_days: int,
    cutoff_hour: int = DEFAULT_CUTOFF_HOUR,
) -> DeliveryWindow:
    # Calendar days: the carrier's TAT already reflects its own working days
    pickup = pickup_date(now, cutoff_hour)
    return DeliveryWindow(pickup_date=pickup, delivery_date=pickup + timedelta(days=tat_days))


def format_label(d: date) -> str:
    """'Delivers by Wed, 21 Oct'."""
    return f"Delivers by {_WEEKDAYS[d.weekday()]}, {d.day:02d} {_MONTHS[d.month - 1]}"
