"""
Models package for the Systempay integration.

Exports signing models, payment status codes and the transaction contract.
"""
from .signing import HashMethod, SigningContext, VerificationResult
from .payment_status import PaymentStatus, PAID_STATUSES
from .transactions import AbstractTransaction

__all__ = [
    "HashMethod",
    "SigningContext",
    "VerificationResult",
    "PaymentStatus",
    "PAID_STATUSES",
    "AbstractTransaction",
]
