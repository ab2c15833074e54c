from .core.base import Currency, PaymentRequest, WalletCapabilities
from .core.codec import decode, encode
from .core.errors import (
    CanonicalFormatError,
    CoercionError,
    DecodeFailureError,
    InvalidFieldError,
    MalformedInputError,
    MoneroRequestError,
    UnsupportedVersionError,
)
from .core.settings import VERSION

__version__ = VERSION

__all__ = [
    "CanonicalFormatError",
    "CoercionError",
    "Currency",
    "DecodeFailureError",
    "InvalidFieldError",
    "MalformedInputError",
    "MoneroRequestError",
    "PaymentRequest",
    "UnsupportedVersionError",
    "WalletCapabilities",
    "decode",
    "encode",
]
