from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import quote

import requests

from app import config
from app.core import (
    PaymentVerificationError,
    ServiceConfigurationError,
    UpstreamServiceError,
    log_step,
    log_success,
    log_warning,
)

from .schemas import PaystackMetadata, PaystackTransaction, PaystackVerifyPayload


@dataclass(frozen=True)
class PaymentVerification:
    """
    Verified Paystack transaction.

    - amount : major currency units (Paystack reports minor units, e.g. kobo)
    - plan / billing_cycle / user_id : custom fields attached at checkout
    """

    reference: str
    amount: float
    currency: Optional[str]
    plan: Optional[str]
    billing_cycle: Optional[str]
    user_id: Optional[str]
    paid_at: Optional[str]


def _custom_fields(transaction: PaystackTransaction) -> Dict[str, str]:
    if not isinstance(transaction.metadata, PaystackMetadata):
        return {}
    return {
        field.variable_name: str(field.value)
        for field in transaction.metadata.custom_fields
        if field.variable_name and field.value is not None
    }


def verify_transaction(
    reference: str,
    secret_key: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> PaymentVerification:
    """
    Ask Paystack whether the transaction behind `reference` was paid.

    Raises:
      - ServiceConfigurationError : no secret key configured
      - UpstreamServiceError      : Paystack unreachable or unreadable
      - PaymentVerificationError  : Paystack says the payment did not succeed
    """
    secret_key = secret_key or config.PAYSTACK_SECRET_KEY
    if not secret_key:
        raise ServiceConfigurationError(error="Payment service not configured")

    http = session or requests.Session()
    verify_url = (
        f"{config.PAYSTACK_API_BASE}/transaction/verify/{quote(reference, safe='')}"
    )
    log_step(f"Verifying Paystack transaction {reference}...")
    try:
        r = http.get(
            verify_url,
            headers={
                "Authorization": f"Bearer {secret_key}",
                "Content-Type": "application/json",
            },
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        payload = PaystackVerifyPayload.model_validate(r.json())
    except (requests.RequestException, ValueError) as exc:
        raise UpstreamServiceError(
            "Payment gateway is unavailable, try again later"
        ) from exc

    transaction = payload.data
    if not payload.status or transaction is None or transaction.status != "success":
        log_warning(f"Paystack refused transaction {reference}: {payload.message}")
        raise PaymentVerificationError(payload.message)

    fields = _custom_fields(transaction)
    log_success(f"Transaction {reference} verified.")
    return PaymentVerification(
        reference=transaction.reference or reference,
        amount=(transaction.amount or 0) / 100,
        currency=transaction.currency,
        plan=fields.get("plan"),
        billing_cycle=fields.get("billing_cycle"),
        user_id=fields.get("user_id"),
        paid_at=transaction.paid_at,
    )
