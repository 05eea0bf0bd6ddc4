"""Checkout endpoint."""

import logging
import uuid

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..engine import CheckoutEngine
from ..exceptions import RentalErrorKind
from ..formatting import format_date, render_agreement
from ..models.agreement import RentalAgreement
from ..observability.logging import clear_log_context, set_log_context
from .dependencies import get_engine

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_STATUS = {
    RentalErrorKind.INVALID_RENTAL_DAYS: 400,
    RentalErrorKind.INVALID_DISCOUNT_PERCENT: 400,
    RentalErrorKind.INVALID_DATE_FORMAT: 400,
    RentalErrorKind.INVALID_DATE_RANGE: 400,
    RentalErrorKind.UNKNOWN_TOOL_CODE: 404,
}


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------


class CheckoutRequest(BaseModel):
    tool_code: str
    rental_days: int
    discount_percent: int
    checkout_date: str  # MM/DD/YY


class RentalAgreementResponse(BaseModel):
    tool_code: str
    tool_type: str
    tool_brand: str
    rental_days: int
    checkout_date: str
    due_date: str
    daily_rental_charge: str
    charge_days: int
    pre_discount_charge: str
    discount_percent: int
    discount_amount: str
    final_charge: str
    text: str

    @classmethod
    def from_agreement(cls, agreement: RentalAgreement) -> "RentalAgreementResponse":
        return cls(
            tool_code=agreement.tool.code,
            tool_type=agreement.tool.type,
            tool_brand=agreement.tool.brand,
            rental_days=agreement.rental_days,
            checkout_date=format_date(agreement.checkout_date),
            due_date=format_date(agreement.due_date),
            daily_rental_charge=f"{agreement.tool.daily_charge:.2f}",
            charge_days=agreement.charge_days,
            pre_discount_charge=f"{agreement.pre_discount_charge:.2f}",
            discount_percent=agreement.discount_percent,
            discount_amount=f"{agreement.discount_amount:.2f}",
            final_charge=f"{agreement.final_charge:.2f}",
            text=render_agreement(agreement),
        )


@router.post(
    "/checkout",
    response_model=RentalAgreementResponse,
    responses={400: {"description": "Invalid checkout input"}, 404: {"description": "Unknown tool code"}},
)
async def create_checkout(
    request_data: CheckoutRequest,
    response: Response,
    engine: CheckoutEngine = Depends(get_engine),
):
    """Check out a tool and return the rental agreement."""
    request_id = str(uuid.uuid4())
    response.headers["X-Request-ID"] = request_id
    set_log_context(tool_code=request_data.tool_code, request_id=request_id)
    try:
        result = engine.checkout(
            request_data.tool_code,
            request_data.rental_days,
            request_data.discount_percent,
            request_data.checkout_date,
        )
    finally:
        clear_log_context()

    if not result.ok:
        error = result.error
        return JSONResponse(
            status_code=_ERROR_STATUS[error.kind],
            content={"error": error.kind.value, "message": error.message},
            headers={"X-Request-ID": request_id},
        )

    return RentalAgreementResponse.from_agreement(result.agreement)
