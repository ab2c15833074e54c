from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from .settings import settings

REQUEST_PREFIX = "monero-request"

# wire keys, in serialization order
FIELDS = (
    "custom_label",
    "sellers_wallet",
    "currency",
    "amount",
    "payment_id",
    "start_date",
    "days_per_billing_cycle",
    "number_of_payments",
    "change_indicator_url",
)

INTEGER_FIELDS = ("days_per_billing_cycle", "number_of_payments")

# values the canonical codec can carry
Value = Union[None, bool, int, float, str]
Fields = Dict[str, Any]


class Currency(Enum):
    XMR = "XMR"
    USD = "USD"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class WalletCapabilities:
    """Which Monero address forms a wallet field may take."""

    allow_standard: bool = True
    allow_integrated: bool = True
    allow_subaddress: bool = False

    @classmethod
    def from_settings(cls) -> "WalletCapabilities":
        return cls(
            allow_standard=settings.wallet_allow_standard,
            allow_integrated=settings.wallet_allow_integrated,
            allow_subaddress=settings.wallet_allow_subaddress,
        )


class PaymentRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    custom_label: str
    sellers_wallet: str
    currency: str
    amount: str
    payment_id: str = ""
    start_date: str = ""
    days_per_billing_cycle: int = 0
    number_of_payments: int = 0
    change_indicator_url: str = ""

    def serialize(
        self,
        version: Optional[str] = None,
        capabilities: Optional[WalletCapabilities] = None,
    ) -> str:
        """
        Encodes the request as "monero-request:<version>:<payload>". Empty
        payment_id and start_date are filled in by the encoder.
        """
        from .codec import encode

        return encode(
            **self.model_dump(),
            version=version,
            capabilities=capabilities,
        )

    @classmethod
    def deserialize(
        cls,
        request: str,
        capabilities: Optional[WalletCapabilities] = None,
    ) -> "PaymentRequest":
        """
        Decodes a request string in strict mode and runs every field check
        over the result, so the returned model is always valid.
        """
        from .check import check_fields
        from .codec import decode

        fields = decode(request, strict=True)
        check_fields(fields, capabilities or WalletCapabilities.from_settings())
        return cls(**{name: fields[name] for name in FIELDS})
