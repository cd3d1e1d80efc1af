"""
Signature Service for Systempay Forms

Implements the gateway signature: sorted vads_* values joined with '+',
followed by the secret key, hashed with SHA-1 (hex) or HMAC-SHA256 (base64).

Interoperability Notes:
- Field order is byte-wise ascending on the prefixed key; the gateway sorts
  the same way, any deviation breaks verification
- Values are joined unescaped, a '+' inside a value passes through as-is
- The signature field is never part of its own input
"""
import base64
import hashlib
import hmac
import logging
from typing import Any, Dict, Mapping

from ..config import Settings
from ..exceptions import ConfigurationError, SignatureMismatchError, SignatureMissingError
from ..models.signing import HashMethod, SigningContext, VerificationResult

logger = logging.getLogger(__name__)

FIELD_PREFIX = "vads_"
SIGNATURE_FIELD = "signature"
SEPARATOR = "+"
TEST_MODE = "TEST"

STATUS_FIELD = "vads_trans_status"
TRANSACTION_ID_FIELD = "vads_trans_id"


# ============================================================================
# Signing Context
# ============================================================================

def create_signing_context(
    hash_method: str,
    key_test: str,
    key_production: str,
    mode: str
) -> SigningContext:
    """
    Build the signing context for the active gateway mode.

    Args:
        hash_method: "sha1" or "hmac_sha256"
        key_test: Certificate used when mode is TEST
        key_production: Certificate used in every other mode
        mode: Gateway context mode (vads_ctx_mode), case-sensitive

    Returns:
        Immutable SigningContext

    Raises:
        ConfigurationError: Unsupported hash method or no key for the mode
    """
    # Fail on the hash method before looking at keys
    algorithm = HashMethod.parse(hash_method)

    secret_key = key_test if mode == TEST_MODE else key_production
    if not secret_key:
        key_name = "test" if mode == TEST_MODE else "production"
        raise ConfigurationError(
            f"No {key_name} key configured for mode '{mode}'",
            details={"mode": mode, "key": key_name}
        )

    logger.info(f"Signing context ready: hash_method={hash_method}, mode={mode}")
    return SigningContext(algorithm=algorithm, secret_key=secret_key)


def signing_context_from_settings(config: Settings) -> SigningContext:
    """Build the signing context from settings, using vads_ctx_mode as the mode."""
    return create_signing_context(
        config.hash_method,
        config.key_dev,
        config.key_prod,
        config.vads_ctx_mode
    )


# ============================================================================
# Canonicalization
# ============================================================================

def prefix_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Rewrite every key as vads_<key>, values untouched."""
    return {f"{FIELD_PREFIX}{name}": value for name, value in fields.items()}


def _field_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def create_canonical_string(fields: Mapping[str, Any], context: SigningContext) -> str:
    """
    Create the string the signature is computed over.

    Sorts by key (UTF-8 byte order), keeps only vads_* entries, joins their
    values with '+' and appends the secret key as the last token.
    """
    values = [
        _field_value(fields[name])
        for name in sorted(fields, key=lambda key: key.encode("utf-8"))
        if name.startswith(FIELD_PREFIX)
    ]
    values.append(context.secret_key)
    return SEPARATOR.join(values)


def compute_signature(fields: Mapping[str, Any], context: SigningContext) -> str:
    """
    Compute the signature of a prefixed field set.

    Args:
        fields: Prefixed field set (non-prefixed entries are ignored)
        context: Signing context

    Returns:
        SHA-1 hex digest, or base64 of the raw HMAC-SHA256 digest
    """
    message = create_canonical_string(fields, context).encode("utf-8")

    if context.algorithm is HashMethod.HMAC_SHA256:
        digest = hmac.new(
            context.secret_key.encode("utf-8"),
            message,
            hashlib.sha256
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    return hashlib.sha1(message).hexdigest()


# ============================================================================
# Outbound / Inbound
# ============================================================================

def build_form_fields(fields: Mapping[str, Any], context: SigningContext) -> Dict[str, Any]:
    """
    Prefix and sign merchant fields for the payment form.

    Args:
        fields: Unprefixed field set (amount, currency, trans_id, ...)
        context: Signing context

    Returns:
        Prefixed fields plus the unprefixed "signature" entry
    """
    form_fields = prefix_fields(fields)
    form_fields[SIGNATURE_FIELD] = compute_signature(form_fields, context)

    logger.debug(f"Built payment form with {len(form_fields)} fields")
    return form_fields


def verify_response(
    response_fields: Mapping[str, str],
    context: SigningContext
) -> VerificationResult:
    """
    Verify the signature of a gateway response.

    Args:
        response_fields: Fields as posted by the gateway, signature included
        context: Signing context

    Returns:
        VerificationResult with the raw status and verified fields

    Raises:
        SignatureMissingError: No signature field
        SignatureMismatchError: Signature does not match the fields
    """
    fields = dict(response_fields)
    signature = fields.pop(SIGNATURE_FIELD, None)
    transaction_id = fields.get(TRANSACTION_ID_FIELD)

    if signature is None:
        logger.warning(f"Gateway response without signature (trans_id={transaction_id})")
        raise SignatureMissingError(
            "Signature is missing from the gateway response",
            details={"trans_id": transaction_id}
        )

    expected = compute_signature(fields, context)

    # Constant-time comparison, exact byte equality
    if not hmac.compare_digest(str(signature).encode("utf-8"), expected.encode("utf-8")):
        logger.warning(f"Gateway response with invalid signature (trans_id={transaction_id})")
        raise SignatureMismatchError(
            "Signature is not valid",
            details={"trans_id": transaction_id}
        )

    status = fields.get(STATUS_FIELD)
    if status is not None:
        status = _field_value(status)
    if transaction_id is not None:
        transaction_id = _field_value(transaction_id)
    logger.info(f"Gateway response verified: trans_id={transaction_id}, status={status}")

    return VerificationResult(
        valid=True,
        status=status,
        transaction_id=transaction_id,
        fields={name: _field_value(value) for name, value in fields.items()}
    )
