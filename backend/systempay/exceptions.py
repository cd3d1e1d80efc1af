"""
Systempay Exception Hierarchy

Stable error codes for every failure the signature protocol can report.
All errors use the systempay: prefix so callers can route on them.
"""
from typing import Optional, Dict, Any


class SystempayError(Exception):
    """
    Base exception for all Systempay integration errors.

    Callers must treat any SystempayError raised while handling a gateway
    response as an untrusted response and apply no state change.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """JSON body returned to the gateway caller or logged on rejection."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(SystempayError):
    """
    Signing configuration is unusable.

    Examples:
    - Hash method is not sha1 or hmac_sha256
    - No secret key configured for the active mode
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("systempay:config:invalid", message, details)


class SignatureMissingError(SystempayError):
    """Gateway response carries no signature field."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("systempay:signature:missing", message, details)


class SignatureMismatchError(SystempayError):
    """
    Signature verification failed.

    Raised whenever the recomputed signature differs from the one sent,
    including differences of case or encoding.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("systempay:signature:mismatch", message, details)


class TransactionIdMissingError(SystempayError):
    """Transaction has no gateway transaction id assigned yet."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("systempay:transaction:id_missing", message, details)


class ResponseFieldMissingError(SystempayError):
    """
    Verified response lacks a field needed to update the transaction.

    Example:
    - No vads_trans_status in an otherwise valid callback
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("systempay:response:field_missing", message, details)
