"""Date parsing and text rendering for rental agreements."""

import re
from datetime import date
from decimal import Decimal

from .exceptions import InvalidDateFormat
from .models.agreement import RentalAgreement

DATE_FORMAT = "%m/%d/%y"

_DATE_RE = re.compile(r"^([0-9]{2})/([0-9]{2})/([0-9]{2})$")


def parse_date(value: str) -> date:
    """Parse a ``MM/DD/YY`` string. Two-digit years fall in 2000-2099.

    Only ASCII digits are accepted and surrounding whitespace is rejected.
    """
    match = _DATE_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidDateFormat(f"Checkout date must be in MM/DD/YY format, got {value!r}.")
    month, day, year = (int(part) for part in match.groups())
    try:
        return date(2000 + year, month, day)
    except ValueError as e:
        raise InvalidDateFormat(f"Checkout date {value!r} is not a valid date: {e}.") from e


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def render_agreement(agreement: RentalAgreement) -> str:
    """Render an agreement as the printable rental agreement text."""
    tool = agreement.tool
    lines = [
        f"Tool code: {tool.code}",
        f"Tool type: {tool.type}",
        f"Brand: {tool.brand}",
        f"Rental days: {agreement.rental_days}",
        f"Checkout date: {format_date(agreement.checkout_date)}",
        f"Due date: {format_date(agreement.due_date)}",
        f"Daily rental charge: {format_money(tool.daily_charge)}",
        f"Charge days: {agreement.charge_days}",
        f"Pre-discount charge: {format_money(agreement.pre_discount_charge)}",
        f"Discount percent: {agreement.discount_percent}%",
        f"Discount amount: {format_money(agreement.discount_amount)}",
        f"Final charge: {format_money(agreement.final_charge)}",
    ]
    return "\n".join(lines) + "\n"
