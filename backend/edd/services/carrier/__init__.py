"""Carrier transit-time (TAT) clients."""

from edd.services.carrier.delhivery import DelhiveryClient, parse_tat

__all__ = ["DelhiveryClient", "parse_tat"]
