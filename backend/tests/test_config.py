import importlib
import logging

import pytest
from pydantic import ValidationError

from systempay import config as config_module
from systempay.config import DEFAULT_FIELD_NAMES, LOG_FORMAT, Settings, configure_logging
from systempay.exceptions import ConfigurationError
from systempay.models.signing import HashMethod
from systempay.services.signature_service import signing_context_from_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HASH_METHOD", "KEY_DEV", "KEY_PROD", "VADS_CTX_MODE", "VADS_SITE_ID", "LOG_LEVEL"):
        monkeypatch.delenv(f"SYSTEMPAY_{name}", raising=False)


def test_defaults():
    config = Settings(_env_file=None)

    assert config.hash_method == "sha1"
    assert config.vads_ctx_mode == "TEST"
    assert config.log_level == "INFO"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("SYSTEMPAY_HASH_METHOD", "hmac_sha256")
    monkeypatch.setenv("SYSTEMPAY_KEY_PROD", "prod-key")
    monkeypatch.setenv("systempay_vads_ctx_mode", "PRODUCTION")
    monkeypatch.setenv("SYSTEMPAY_VADS_SITE_ID", "87654321")

    config = Settings(_env_file=None)

    assert config.hash_method == "hmac_sha256"
    assert config.key_prod == "prod-key"
    assert config.vads_ctx_mode == "PRODUCTION"
    assert config.vads_site_id == "87654321"


def test_default_fields():
    fields = Settings(_env_file=None, vads_site_id="12345678").default_fields()

    assert tuple(fields) == DEFAULT_FIELD_NAMES
    assert fields["site_id"] == "12345678"
    assert fields["action_mode"] == "INTERACTIVE"


def test_context_from_settings_in_test_mode():
    config = Settings(_env_file=None, key_dev="dev-key", key_prod="prod-key", vads_ctx_mode="TEST")

    context = signing_context_from_settings(config)

    assert context.secret_key == "dev-key"
    assert context.algorithm is HashMethod.SHA1


def test_context_from_settings_in_production_mode():
    config = Settings(
        _env_file=None,
        hash_method="hmac_sha256",
        key_dev="dev-key",
        key_prod="prod-key",
        vads_ctx_mode="PRODUCTION",
    )

    context = signing_context_from_settings(config)

    assert context.secret_key == "prod-key"
    assert context.algorithm is HashMethod.HMAC_SHA256


def test_context_from_settings_rejects_bad_hash_method():
    config = Settings(_env_file=None, hash_method="md5", key_dev="dev-key")

    with pytest.raises(ConfigurationError):
        signing_context_from_settings(config)


def test_context_from_settings_requires_key():
    with pytest.raises(ConfigurationError):
        signing_context_from_settings(Settings(_env_file=None))


def test_configure_logging_uses_configured_level(monkeypatch):
    calls = []
    monkeypatch.setattr(config_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(Settings(_env_file=None, log_level="DEBUG"))

    assert calls == [{"level": logging.DEBUG, "format": LOG_FORMAT}]


def test_import_does_not_load_settings(monkeypatch):
    monkeypatch.setenv("SYSTEMPAY_LOG_LEVEL", "TRACE")

    reloaded = importlib.reload(config_module)

    assert not hasattr(reloaded, "settings")
    with pytest.raises(ValidationError):
        reloaded.Settings(_env_file=None)
