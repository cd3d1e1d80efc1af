"""Gateway transaction status codes (vads_trans_status)."""
from enum import Enum
from typing import Optional


class PaymentStatus(str, Enum):
    ABANDONED = "ABANDONED"
    ACCEPTED = "ACCEPTED"
    AUTHORISED = "AUTHORISED"
    AUTHORISED_TO_VALIDATE = "AUTHORISED_TO_VALIDATE"
    CANCELLED = "CANCELLED"
    CAPTURED = "CAPTURED"
    CAPTURE_FAILED = "CAPTURE_FAILED"
    EXPIRED = "EXPIRED"
    REFUSED = "REFUSED"
    SUSPENDED = "SUSPENDED"
    UNDER_VERIFICATION = "UNDER_VERIFICATION"
    WAITING_AUTHORISATION = "WAITING_AUTHORISATION"
    WAITING_AUTHORISATION_TO_VALIDATE = "WAITING_AUTHORISATION_TO_VALIDATE"

    @classmethod
    def is_valid_status(cls, status: Optional[str]) -> bool:
        """True when the status means the customer has paid."""
        return status in PAID_STATUSES


PAID_STATUSES = frozenset({
    PaymentStatus.ACCEPTED.value,
    PaymentStatus.AUTHORISED.value,
    PaymentStatus.AUTHORISED_TO_VALIDATE.value,
    PaymentStatus.CAPTURED.value,
})
