"""
Transaction Accessor Contract

The merchant's transaction model lives outside this package. Anything passed
to SystempayService must implement these accessors; persistence is up to the
implementer.
"""
from abc import ABC, abstractmethod
from typing import Optional


class AbstractTransaction(ABC):
    """
    Read/write accessors the payment service needs from a transaction.

    Read side feeds the outbound form (amount, currency, gateway id).
    Write side is driven by a verified gateway response.
    """

    @property
    @abstractmethod
    def systempay_transaction_id(self) -> Optional[int]:
        """Gateway transaction number (0-899999), None until assigned."""

    @property
    @abstractmethod
    def amount(self) -> int:
        """Amount in the currency's smallest unit (cents)."""

    @property
    @abstractmethod
    def currency(self) -> str:
        """ISO 4217 numeric currency code, e.g. "978" for EUR."""

    @abstractmethod
    def change_status(self, status: str) -> None:
        ...

    @abstractmethod
    def set_log_response(self, log_response: str) -> None:
        """Store the base64 encoded JSON of the verified response."""

    @abstractmethod
    def pay(self) -> None:
        ...

    @abstractmethod
    def refund(self) -> None:
        ...
