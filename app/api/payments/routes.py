from typing import Optional

import requests
from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core import InvalidRequestError, ServiceError, log_error
from app.payments import PaymentVerification, verify_transaction

router = APIRouter()


class VerifyPaymentRequest(BaseModel):
    reference: Optional[str] = None


class VerifiedPayment(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reference: str
    amount: float
    currency: Optional[str] = None
    plan: Optional[str] = None
    billing_cycle: Optional[str] = None
    user_id: Optional[str] = None
    paid_at: Optional[str] = None


class VerifyPaymentResponse(BaseModel):
    success: bool = True
    message: str = "Payment verified successfully"
    data: VerifiedPayment


def _verify(reference: str) -> PaymentVerification:
    with requests.Session() as session:
        return verify_transaction(reference, session=session)


@router.post("/verify", response_model=VerifyPaymentResponse)
async def verify_payment(body: VerifyPaymentRequest) -> VerifyPaymentResponse:
    """
    Server-side check of a checkout transaction reference.
    """
    reference = (body.reference or "").strip()
    if not reference:
        raise InvalidRequestError(error="Payment reference is required")

    try:
        verification = await run_in_threadpool(_verify, reference)
    except ServiceError:
        raise
    except Exception as exc:  # noqa: BLE001
        log_error("Error verifying payment", exc_info=True)
        raise ServiceError(error="Failed to verify payment") from exc

    return VerifyPaymentResponse(
        data=VerifiedPayment(
            reference=verification.reference,
            amount=verification.amount,
            currency=verification.currency,
            plan=verification.plan,
            billing_cycle=verification.billing_cycle,
            user_id=verification.user_id,
            paid_at=verification.paid_at,
        )
    )
