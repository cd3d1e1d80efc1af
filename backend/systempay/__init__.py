"""
Systempay - signed payment forms and callback verification

Builds the vads_* form posted to the Systempay payment page and verifies the
signature of the gateway's callbacks (SHA-1 or HMAC-SHA256 over the sorted
field values and the shop certificate).

Files in this package:
- config.py: pydantic-settings configuration (SYSTEMPAY_* variables)
- exceptions.py: error hierarchy with systempay:* error codes
- models/: signing context, payment status codes, transaction contract
- services/signature_service.py: canonicalization, signing, verification
- services/payment_service.py: per-payment form builder and response handler
- api/callbacks.py: FastAPI request parsing and error handlers
"""
from .exceptions import (
    ConfigurationError,
    ResponseFieldMissingError,
    SignatureMismatchError,
    SignatureMissingError,
    SystempayError,
    TransactionIdMissingError,
)
from .models import HashMethod, SigningContext, VerificationResult
from .services import (
    PAYMENT_URL,
    SystempayService,
    build_form_fields,
    compute_signature,
    create_signing_context,
    verify_response,
)

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ResponseFieldMissingError",
    "SignatureMismatchError",
    "SignatureMissingError",
    "SystempayError",
    "TransactionIdMissingError",
    "HashMethod",
    "SigningContext",
    "VerificationResult",
    "PAYMENT_URL",
    "SystempayService",
    "build_form_fields",
    "compute_signature",
    "create_signing_context",
    "verify_response",
]
