"""Pydantic models for the Paystack transaction verification payload.

Fields are optional (Paystack omits or nulls them depending on the
transaction state); app.payments.paystack converts them right away.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class PaystackPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class PaystackCustomField(PaystackPayload):
    display_name: Optional[str] = None
    variable_name: Optional[str] = None
    value: Optional[Any] = None


class PaystackMetadata(PaystackPayload):
    custom_fields: List[PaystackCustomField] = []


class PaystackTransaction(PaystackPayload):
    reference: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    paid_at: Optional[str] = None
    # Paystack sends "" instead of an object when no metadata was attached
    metadata: Union[PaystackMetadata, str, None] = None


class PaystackVerifyPayload(PaystackPayload):
    status: bool = False
    message: Optional[str] = None
    data: Optional[PaystackTransaction] = None
