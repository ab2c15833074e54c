import random
import re
from typing import Any, Dict, Optional, Union

from loguru import logger

from .base import (
    FIELDS,
    INTEGER_FIELDS,
    REQUEST_PREFIX,
    Currency,
    Fields,
    WalletCapabilities,
)
from .check import check_fields
from .errors import CoercionError, MalformedInputError, UnsupportedVersionError
from .helpers import Clock, make_random_payment_id, to_truncated_rfc3339, utc_now
from .settings import settings
from .versions import VERSIONS

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def encode(
    custom_label: str,
    sellers_wallet: str,
    currency: Union[str, Currency],
    amount: str,
    payment_id: Optional[str] = "",
    start_date: Optional[str] = "",
    days_per_billing_cycle: int = 0,
    number_of_payments: int = 0,
    change_indicator_url: str = "",
    *,
    version: Optional[str] = None,
    capabilities: Optional[WalletCapabilities] = None,
    rng: Optional[random.Random] = None,
    clock: Optional[Clock] = None,
) -> str:
    """
    Creates a Monero payment request string "monero-request:<version>:<payload>".

    An empty payment_id is replaced by a random one and an empty start_date
    by the current time. Every field is checked before anything is
    serialized and the first invalid field raises InvalidFieldError.

    Args:
        version: version token, defaults to settings.request_version.
        capabilities: allowed wallet address forms, defaults to the settings.
        rng: randomness source for the default payment id.
        clock: callable returning the current time for the default start date.
    """
    version = version or settings.request_version
    if version not in VERSIONS:
        raise UnsupportedVersionError(version)
    encoder, _ = VERSIONS[version]

    if not payment_id:
        payment_id = make_random_payment_id(rng)
    if not start_date:
        start_date = to_truncated_rfc3339((clock or utc_now)())
    if isinstance(currency, Currency):
        currency = currency.value

    fields: Fields = dict(
        zip(
            FIELDS,
            (
                custom_label,
                sellers_wallet,
                currency,
                amount,
                payment_id,
                start_date,
                days_per_billing_cycle,
                number_of_payments,
                change_indicator_url,
            ),
        )
    )
    check_fields(fields, capabilities or WalletCapabilities.from_settings())

    request = f"{REQUEST_PREFIX}:{version}:{encoder(fields)}"
    logger.debug(f"Created payment request {payment_id} (version {version})")
    return request


def decode(request: str, *, strict: Optional[bool] = None) -> Dict[str, Any]:
    """
    Reads a Monero payment request string back into its fields.

    days_per_billing_cycle and number_of_payments are coerced to integers. A
    value that cannot be coerced becomes 0, or raises CoercionError when
    strict (defaults to settings.strict_decode). Other fields are returned
    as parsed and are not checked.
    """
    if strict is None:
        strict = settings.strict_decode

    parts = request.split(":")
    if len(parts) != 3:
        raise MalformedInputError(
            f"expected 3 colon separated parts, got {len(parts)}"
        )
    prefix, version, payload = parts
    if prefix != REQUEST_PREFIX:
        raise MalformedInputError(f"invalid prefix, expected '{REQUEST_PREFIX}'")
    if version not in VERSIONS:
        raise UnsupportedVersionError(version)
    _, decoder = VERSIONS[version]

    fields = decoder(payload)
    for name in INTEGER_FIELDS:
        if fields.get(name) is not None:
            fields[name] = coerce_integer(name, fields[name], strict)
    logger.debug(f"Read payment request {fields.get('payment_id')} (version {version})")
    return fields


def coerce_integer(field: str, value: Any, strict: bool = False) -> int:
    result: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        result = value
    elif isinstance(value, float) and value.is_integer():
        result = int(value)
    elif isinstance(value, str) and INTEGER_PATTERN.fullmatch(value):
        result = int(value)

    if result is not None:
        return result
    if strict:
        raise CoercionError(field, value)
    logger.warning(f"Could not read {field}={value!r} as an integer, using 0.")
    return 0
