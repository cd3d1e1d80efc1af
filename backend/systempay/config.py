"""
Systempay Configuration Module

Loads gateway settings from SYSTEMPAY_* environment variables (or a .env file).
"""
import logging
from typing import Any, Dict, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_FIELD_NAMES = (
    "language",
    "return_mode",
    "action_mode",
    "ctx_mode",
    "page_action",
    "payment_config",
    "site_id",
    "version",
    "url_return",
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """
    Gateway settings loaded from environment variables.

    Notes:
    - hash_method is kept as a plain string; it is checked when the signing
      context is built so a bad value surfaces as a ConfigurationError
    - key_dev is used when vads_ctx_mode is TEST, key_prod otherwise
    - vads_* values are the default form fields sent with every payment
    """

    # Signature
    hash_method: str = "sha1"
    key_dev: str = ""
    key_prod: str = ""

    # Default form fields
    vads_language: str = "fr"
    vads_return_mode: str = "POST"
    vads_action_mode: str = "INTERACTIVE"
    vads_ctx_mode: str = "TEST"
    vads_page_action: str = "PAYMENT"
    vads_payment_config: str = "SINGLE"
    vads_site_id: str = ""
    vads_version: str = "V2"
    vads_url_return: str = ""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SYSTEMPAY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def default_fields(self) -> Dict[str, Any]:
        """Default form fields keyed without the vads_ prefix."""
        return {name: getattr(self, f"vads_{name}") for name in DEFAULT_FIELD_NAMES}


def configure_logging(config: Settings) -> None:
    """Configure root logging at the configured level."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=LOG_FORMAT
    )
