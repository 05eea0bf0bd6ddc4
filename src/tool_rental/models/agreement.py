"""Rental agreement value produced by a successful checkout."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .tool import Tool


@dataclass(frozen=True, slots=True)
class RentalAgreement:
    """Itemized snapshot of one checkout computation.

    Monetary fields are quantized to cents. ``final_charge`` is always
    ``pre_discount_charge - discount_amount``.
    """

    tool: Tool
    rental_days: int
    checkout_date: date
    due_date: date
    charge_days: int
    pre_discount_charge: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_charge: Decimal

    @property
    def tool_code(self) -> str:
        return self.tool.code

    @property
    def daily_rental_charge(self) -> Decimal:
        return self.tool.daily_charge
