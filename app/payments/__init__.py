"""Public façade for the app.payments package.

Server-side verification of checkout payments with the Paystack gateway.
"""

from .paystack import PaymentVerification, verify_transaction

__all__ = [
    "PaymentVerification",
    "verify_transaction",
]
