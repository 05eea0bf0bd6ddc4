"""Checkout engine: validates a rental request and builds the agreement.

``CheckoutEngine.checkout()`` is a pure function of its inputs and the
injected catalog. Validation failures come back as a ``CheckoutResult``
carrying a ``RentalError``; nothing is raised for bad user input.

Preconditions are checked in order, before any computation:
1. rental_days within 1..max_rental_days
2. discount_percent within 0..100
3. tool code known to the catalog
4. checkout date parses as MM/DD/YY
5. due date is representable (not past date.max)
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from .catalog import ToolCatalog, default_catalog
from .config import get_settings
from .exceptions import (
    InvalidDateFormat,
    InvalidDateRange,
    InvalidDiscountPercent,
    InvalidRentalDays,
    RentalError,
    UnknownToolCode,
)
from .formatting import parse_date
from .holidays import is_holiday, is_weekend
from .models.agreement import RentalAgreement
from .models.tool import Tool

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class CheckoutResult:
    """Either a rental agreement or the validation error that prevented it."""

    agreement: Optional[RentalAgreement] = None
    error: Optional[RentalError] = None

    @property
    def ok(self) -> bool:
        return self.agreement is not None

    def unwrap(self) -> RentalAgreement:
        """Return the agreement, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.agreement


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def is_chargeable_day(day: date, tool: Tool) -> bool:
    """Whether *tool* bills for *day*. Holidays take precedence over weekends."""
    if is_holiday(day):
        return tool.holiday_charge
    if is_weekend(day):
        return tool.weekend_charge
    return tool.weekday_charge


def count_charge_days(checkout_date: date, due_date: date, tool: Tool) -> int:
    """Count chargeable days after *checkout_date* up to and including *due_date*."""
    charge_days = 0
    for offset in range(1, (due_date - checkout_date).days + 1):
        if is_chargeable_day(checkout_date + timedelta(days=offset), tool):
            charge_days += 1
    return charge_days


class CheckoutEngine:
    """Computes rental agreements against a fixed tool catalog."""

    def __init__(self, catalog: ToolCatalog, max_rental_days: Optional[int] = None):
        self.catalog = catalog
        if max_rental_days is None:
            max_rental_days = get_settings().max_rental_days
        self.max_rental_days = max_rental_days

    def checkout(
        self,
        tool_code: str,
        rental_days: int,
        discount_percent: int,
        checkout_date: Union[date, str],
    ) -> CheckoutResult:
        """Check out *tool_code* for *rental_days* starting on *checkout_date*."""
        try:
            tool, start = self._validate(tool_code, rental_days, discount_percent, checkout_date)
            due_date = self._due_date(start, rental_days)
        except RentalError as e:
            logger.info("Checkout rejected (%s): %s", e.kind.value, e.message)
            return CheckoutResult(error=e)

        charge_days = count_charge_days(start, due_date, tool)

        pre_discount_charge = round_money(tool.daily_charge * charge_days)
        discount_amount = round_money(pre_discount_charge * discount_percent / Decimal(100))
        final_charge = pre_discount_charge - discount_amount

        agreement = RentalAgreement(
            tool=tool,
            rental_days=rental_days,
            checkout_date=start,
            due_date=due_date,
            charge_days=charge_days,
            pre_discount_charge=pre_discount_charge,
            discount_percent=discount_percent,
            discount_amount=discount_amount,
            final_charge=final_charge,
        )
        logger.debug(
            "Checked out %s for %d days (%d chargeable), final charge %s",
            tool.code, rental_days, charge_days, final_charge,
        )
        return CheckoutResult(agreement=agreement)

    def _due_date(self, start, rental_days):
        try:
            return start + timedelta(days=rental_days)
        except OverflowError as e:
            raise InvalidDateRange(
                f"Due date for a {rental_days}-day rental from {start.isoformat()} "
                "is past the end of the supported calendar."
            ) from e

    def _validate(self, tool_code, rental_days, discount_percent, checkout_date):
        if rental_days < 1:
            raise InvalidRentalDays("Rental day count must be 1 or greater.")
        if rental_days > self.max_rental_days:
            raise InvalidRentalDays(
                f"Rental day count must not exceed {self.max_rental_days}."
            )
        if discount_percent < 0 or discount_percent > 100:
            raise InvalidDiscountPercent("Discount percent must be between 0 and 100.")

        tool = self.catalog.lookup(tool_code)
        if tool is None:
            raise UnknownToolCode(f"Unknown tool code: {tool_code!r}.", tool_code=tool_code)

        if isinstance(checkout_date, datetime):
            return tool, checkout_date.date()
        if isinstance(checkout_date, date):
            return tool, checkout_date
        if isinstance(checkout_date, str):
            return tool, parse_date(checkout_date)
        raise InvalidDateFormat(
            f"Checkout date must be a date or MM/DD/YY string, got {type(checkout_date).__name__}."
        )


_default_engine: Optional[CheckoutEngine] = None


def get_default_engine() -> CheckoutEngine:
    """Engine bound to the standard catalog and current settings."""
    global _default_engine
    if _default_engine is None:
        _default_engine = CheckoutEngine(default_catalog())
    return _default_engine


def checkout(
    tool_code: str,
    rental_days: int,
    discount_percent: int,
    checkout_date: Union[date, str],
) -> CheckoutResult:
    """Check out against the standard catalog."""
    return get_default_engine().checkout(tool_code, rental_days, discount_percent, checkout_date)
