"""
Payment Service

Prepares the payment form for one transaction and applies a verified gateway
response back onto it.

Flow:
- init(transaction) sets the mandatory fields (amount, currency, trans_id, trans_date)
- set_fields() adds or overrides optional fields (cust_email, ship_to_city, ...)
- get_payment_form_fields() returns the signed vads_* fields to POST to PAYMENT_URL
- handle_response() verifies the gateway callback and updates the transaction
"""
import base64
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from ..config import Settings
from ..exceptions import ResponseFieldMissingError, TransactionIdMissingError
from ..models.payment_status import PaymentStatus
from ..models.signing import SigningContext
from ..models.transactions import AbstractTransaction
from .signature_service import (
    STATUS_FIELD,
    TRANSACTION_ID_FIELD,
    build_form_fields,
    verify_response,
)

logger = logging.getLogger(__name__)

PAYMENT_URL = "https://paiement.systempay.fr/vads-payment/"

TRANS_DATE_FORMAT = "%Y%m%d%H%M%S"


class SystempayService:
    """
    Form builder and response handler for a single payment attempt.

    Holds a mutable copy of the default fields; the signing context is shared
    and never modified. Create one service per payment.
    """

    def __init__(self, config: Settings, context: SigningContext):
        self.context = context
        self.fields: Dict[str, Any] = config.default_fields()

    @property
    def payment_url(self) -> str:
        return PAYMENT_URL

    def init(self, transaction: AbstractTransaction, now: Optional[datetime] = None) -> None:
        """
        Set the mandatory fields from the transaction.

        Args:
            transaction: Transaction with a gateway transaction id assigned
            now: Override for the transaction date (defaults to current UTC time)

        Raises:
            TransactionIdMissingError: No gateway transaction id yet
        """
        transaction_id = transaction.systempay_transaction_id
        if transaction_id is None:
            raise TransactionIdMissingError(
                "systempay_transaction_id must be set before calling init()"
            )

        trans_date = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)

        self.fields["amount"] = transaction.amount
        self.fields["currency"] = transaction.currency
        self.fields["trans_id"] = f"{int(transaction_id):06d}"
        self.fields["trans_date"] = trans_date.strftime(TRANS_DATE_FORMAT)

        logger.debug(f"Payment initialised: trans_id={self.fields['trans_id']}")

    def set_fields(self, fields: Mapping[str, Any]) -> None:
        """Add or change fields, keys without the vads_ prefix (cust_email=...)."""
        self.fields.update(fields)

    def get_payment_form_fields(self) -> Dict[str, Any]:
        return build_form_fields(self.fields, self.context)

    def handle_response(
        self,
        transaction: AbstractTransaction,
        response_fields: Mapping[str, str]
    ) -> AbstractTransaction:
        """
        Verify a gateway response and update the transaction.

        Args:
            transaction: Transaction the response belongs to
            response_fields: Fields posted by the gateway

        Returns:
            The updated transaction

        Raises:
            SignatureMissingError / SignatureMismatchError: Untrusted response,
                the transaction is left untouched
            ResponseFieldMissingError: No vads_trans_status in the response
        """
        result = verify_response(response_fields, self.context)

        status = result.status
        if status is None:
            raise ResponseFieldMissingError(
                f"Verified response has no {STATUS_FIELD}",
                details={"trans_id": result.transaction_id}
            )

        transaction.change_status(status)
        transaction.set_log_response(
            base64.b64encode(json.dumps(result.fields, separators=(",", ":")).encode("utf-8")).decode("ascii")
        )

        if PaymentStatus.is_valid_status(status):
            transaction.pay()
            logger.info(f"Transaction {result.transaction_id} paid (status={status})")

        # Cancelled by the merchant
        if status == PaymentStatus.CANCELLED.value:
            transaction.refund()
            logger.info(f"Transaction {result.transaction_id} refunded")

        return transaction

    @staticmethod
    def get_transaction_id_from_request(request_fields: Mapping[str, str]) -> Optional[str]:
        """Get vads_trans_id from posted gateway fields."""
        return request_fields.get(TRANSACTION_ID_FIELD)
