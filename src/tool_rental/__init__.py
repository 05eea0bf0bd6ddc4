"""Tool rental checkout: charge-day calculation and rental agreements."""

from .catalog import DEFAULT_TOOLS, ToolCatalog, default_catalog
from .engine import CheckoutEngine, CheckoutResult, checkout
from .exceptions import (
    InvalidDateFormat,
    InvalidDateRange,
    InvalidDiscountPercent,
    InvalidRentalDays,
    RentalError,
    RentalErrorKind,
    UnknownToolCode,
)
from .formatting import render_agreement
from .models import RentalAgreement, Tool

__all__ = [
    "DEFAULT_TOOLS",
    "ToolCatalog",
    "default_catalog",
    "CheckoutEngine",
    "CheckoutResult",
    "checkout",
    "RentalError",
    "RentalErrorKind",
    "InvalidRentalDays",
    "InvalidDiscountPercent",
    "UnknownToolCode",
    "InvalidDateFormat",
    "InvalidDateRange",
    "render_agreement",
    "RentalAgreement",
    "Tool",
]
