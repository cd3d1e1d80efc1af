"""
Pydantic Signing Models

SigningContext holds the algorithm and secret used for every signature.
VerificationResult is what a successfully verified gateway response yields.
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ..exceptions import ConfigurationError


class HashMethod(str, Enum):
    """Signature algorithms accepted by the gateway."""

    SHA1 = "sha1"
    HMAC_SHA256 = "hmac_sha256"

    @classmethod
    def parse(cls, value: Any) -> "HashMethod":
        """
        Resolve a configured hash method name.

        Raises:
            ConfigurationError: Value is not one of the accepted names
        """
        if isinstance(value, cls):
            return value
        accepted = [method.value for method in cls]
        if value not in accepted:
            raise ConfigurationError(
                f"Hash method '{value}' is not supported. "
                f"Possible values are : {', '.join(accepted)}",
                details={"hash_method": value, "accepted": accepted}
            )
        return cls(value)


class SigningContext(BaseModel):
    """
    Immutable algorithm and secret pair for one gateway mode.

    Notes:
    - Built once at startup and passed explicitly to sign/verify calls
    - secret_key is excluded from repr so it never ends up in logs
    """

    algorithm: HashMethod = Field(
        description="Hash method used to compute signatures"
    )
    secret_key: Optional[str] = Field(
        default=None,
        repr=False,
        validate_default=True,
        description="Test or production certificate, depending on mode"
    )

    @field_validator("algorithm", mode="before")
    @classmethod
    def algorithm_supported(cls, v: Any) -> HashMethod:
        """Reject anything outside the HashMethod enum."""
        return HashMethod.parse(v)

    @field_validator("secret_key", mode="before")
    @classmethod
    def secret_not_empty(cls, v: Any) -> str:
        """Missing, empty or non-string secrets are configuration errors."""
        if not isinstance(v, str) or not v:
            raise ConfigurationError(
                "Secret key must be a non-empty string",
                details={"secret_key_type": type(v).__name__}
            )
        return v

    model_config = {
        "frozen": True,
    }


class VerificationResult(BaseModel):
    """
    Outcome of a successful response verification.

    A result only exists for a valid signature; invalid responses raise.
    status carries the raw vads_trans_status so the caller can route to its
    own domain actions.
    """

    valid: bool = True
    status: Optional[str] = None
    transaction_id: Optional[str] = None
    fields: Dict[str, str] = Field(
        default_factory=dict,
        description="Verified response fields, signature removed"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "valid": True,
                "status": "AUTHORISED",
                "transaction_id": "000042",
                "fields": {
                    "vads_trans_status": "AUTHORISED",
                    "vads_trans_id": "000042",
                    "vads_amount": "1000"
                }
            }
        }
    }
