"""Checkout validation errors.

The checkout engine does not raise these for bad input; it returns them
inside a ``CheckoutResult``. ``CheckoutResult.unwrap()`` raises the carried
error for callers that prefer exceptions.
"""

import enum


class RentalErrorKind(str, enum.Enum):
    """Which checkout precondition failed."""

    INVALID_RENTAL_DAYS = "invalid_rental_days"
    INVALID_DISCOUNT_PERCENT = "invalid_discount_percent"
    UNKNOWN_TOOL_CODE = "unknown_tool_code"
    INVALID_DATE_FORMAT = "invalid_date_format"
    INVALID_DATE_RANGE = "invalid_date_range"


class RentalError(Exception):
    """Base exception for all checkout validation failures."""

    kind: RentalErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __eq__(self, other):
        if not isinstance(other, RentalError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))


class InvalidRentalDays(RentalError):
    """Rental day count is below 1 or above the configured maximum."""

    kind = RentalErrorKind.INVALID_RENTAL_DAYS


class InvalidDiscountPercent(RentalError):
    """Discount percent is outside 0-100."""

    kind = RentalErrorKind.INVALID_DISCOUNT_PERCENT


class UnknownToolCode(RentalError):
    """Tool code is not in the catalog."""

    kind = RentalErrorKind.UNKNOWN_TOOL_CODE

    def __init__(self, message: str, tool_code: str = ""):
        self.tool_code = tool_code
        super().__init__(message)


class InvalidDateFormat(RentalError):
    """Checkout date string does not parse as MM/DD/YY."""

    kind = RentalErrorKind.INVALID_DATE_FORMAT


class InvalidDateRange(RentalError):
    """Due date falls outside the representable calendar."""

    kind = RentalErrorKind.INVALID_DATE_RANGE
