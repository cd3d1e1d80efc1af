"""Shared fixtures for the Systempay tests."""
from typing import Optional

import pytest

from systempay.config import Settings
from systempay.models.transactions import AbstractTransaction
from systempay.services.signature_service import create_signing_context


TEST_KEY = "secret123"
PRODUCTION_KEY = "prod-secret-456"


class FakeTransaction(AbstractTransaction):
    """In-memory transaction recording every write accessor call."""

    def __init__(self, systempay_transaction_id: Optional[int] = 42, amount: int = 1000, currency: str = "978"):
        self._systempay_transaction_id = systempay_transaction_id
        self._amount = amount
        self._currency = currency
        self.status: Optional[str] = None
        self.log_response: Optional[str] = None
        self.paid = False
        self.refunded = False

    @property
    def systempay_transaction_id(self) -> Optional[int]:
        return self._systempay_transaction_id

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def currency(self) -> str:
        return self._currency

    def change_status(self, status: str) -> None:
        self.status = status

    def set_log_response(self, log_response: str) -> None:
        self.log_response = log_response

    def pay(self) -> None:
        self.paid = True

    def refund(self) -> None:
        self.refunded = True


@pytest.fixture
def sha1_context():
    return create_signing_context("sha1", TEST_KEY, PRODUCTION_KEY, "TEST")


@pytest.fixture
def hmac_context():
    return create_signing_context("hmac_sha256", TEST_KEY, PRODUCTION_KEY, "TEST")


@pytest.fixture(params=["sha1", "hmac_sha256"])
def any_context(request):
    return create_signing_context(request.param, TEST_KEY, PRODUCTION_KEY, "TEST")


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        key_dev=TEST_KEY,
        key_prod=PRODUCTION_KEY,
        vads_site_id="12345678",
        vads_url_return="https://shop.example.com/payment/return",
    )


@pytest.fixture
def transaction():
    return FakeTransaction()
