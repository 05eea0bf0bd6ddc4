"""Rentable tool record."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Tool:
    """A tool available for rental and the day classes it bills for."""

    code: str
    type: str
    brand: str
    daily_charge: Decimal
    weekday_charge: bool
    weekend_charge: bool
    holiday_charge: bool
