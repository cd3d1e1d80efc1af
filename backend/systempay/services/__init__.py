"""
Services package for the Systempay integration.

signature_service holds the signature protocol; payment_service wraps it for
one payment attempt.
"""
from .signature_service import (
    FIELD_PREFIX,
    SIGNATURE_FIELD,
    build_form_fields,
    compute_signature,
    create_canonical_string,
    create_signing_context,
    prefix_fields,
    signing_context_from_settings,
    verify_response,
)
from .payment_service import PAYMENT_URL, SystempayService

__all__ = [
    "FIELD_PREFIX",
    "SIGNATURE_FIELD",
    "build_form_fields",
    "compute_signature",
    "create_canonical_string",
    "create_signing_context",
    "prefix_fields",
    "signing_context_from_settings",
    "verify_response",
    "PAYMENT_URL",
    "SystempayService",
]
