import re
from datetime import datetime
from typing import Any, Callable, Dict, Tuple
from urllib.parse import urlsplit

from .base import FIELDS, Currency, Fields, WalletCapabilities
from .errors import InvalidFieldError

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
HEX_ALPHABET = "0123456789abcdef"

STANDARD_ADDRESS_LENGTH = 95
INTEGRATED_ADDRESS_LENGTH = 106
PAYMENT_ID_LENGTH = 16

AMOUNT_PATTERN = re.compile(r"[0-9,.]+")
START_DATE_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}Z"
)
# registered name, IPv4 or bracketless IPv6 as returned by urlsplit().hostname
HOST_PATTERN = re.compile(r"[0-9A-Za-z._~%:-]+")
START_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def is_label(value: Any) -> bool:
    return isinstance(value, str)


def is_currency(value: Any) -> bool:
    return isinstance(value, str) and value in Currency._value2member_map_


def is_wallet(
    value: Any,
    allow_standard: bool = True,
    allow_integrated: bool = True,
    allow_subaddress: bool = False,
) -> bool:
    """
    Checks the shape of a Monero address. Standard and integrated addresses
    both start with 4 and differ only in length, subaddresses start with 8.
    The checksum is not verified.
    """
    if not isinstance(value, str) or not value:
        return False

    first_characters = set()
    if allow_standard or allow_integrated:
        first_characters.add("4")
    if allow_subaddress:
        first_characters.add("8")
    if value[0] not in first_characters:
        return False

    lengths = set()
    if allow_standard or allow_subaddress:
        lengths.add(STANDARD_ADDRESS_LENGTH)
    if allow_integrated:
        lengths.add(INTEGRATED_ADDRESS_LENGTH)
    if len(value) not in lengths:
        return False

    return all(c in BASE58_ALPHABET for c in value)


def is_payment_id(value: Any) -> bool:
    return (
        isinstance(value, str)
        and len(value) == PAYMENT_ID_LENGTH
        and all(c in HEX_ALPHABET for c in value)
    )


def is_start_date(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    if value == "":
        return True
    if not START_DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, START_DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_amount(value: Any) -> bool:
    return isinstance(value, str) and AMOUNT_PATTERN.fullmatch(value) is not None


def _is_non_negative_int(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def is_days_per_billing_cycle(value: Any) -> bool:
    return _is_non_negative_int(value)


def is_number_of_payments(value: Any) -> bool:
    return _is_non_negative_int(value)


def is_change_indicator_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    if value == "":
        return True
    if any(c.isspace() for c in value):
        return False
    try:
        parsed = urlsplit(value)
        hostname = parsed.hostname
        # raises for a non-numeric or out of range port
        parsed.port
    except ValueError:
        return False
    return (
        bool(parsed.scheme)
        and bool(hostname)
        and HOST_PATTERN.fullmatch(hostname) is not None
    )


FIELD_CHECKS: Dict[str, Tuple[Callable[[Any], bool], str]] = {
    "custom_label": (is_label, "custom_label is not a string."),
    "currency": (
        is_currency,
        "currency is not a string, or is not supported.",
    ),
    "amount": (
        is_amount,
        "amount is not a string, or contains invalid characters. Amount can only"
        " contain ',', '.', and numbers.",
    ),
    "payment_id": (
        is_payment_id,
        "payment_id is not a string, is not exactly 16 characters long, or"
        " contains invalid character(s).",
    ),
    "start_date": (
        is_start_date,
        "start_date is not a string, or is not in the correct format.",
    ),
    "days_per_billing_cycle": (
        is_days_per_billing_cycle,
        "days_per_billing_cycle is not an integer, or is lower than 0.",
    ),
    "number_of_payments": (
        is_number_of_payments,
        "number_of_payments is not an integer, or is lower than 0.",
    ),
    "change_indicator_url": (
        is_change_indicator_url,
        "change_indicator_url is not a string, or is not a valid URL.",
    ),
}


def check_fields(fields: Fields, capabilities: WalletCapabilities) -> None:
    """Raises InvalidFieldError for the first field that fails its check."""
    for name in FIELDS:
        value = fields.get(name)
        if name == "sellers_wallet":
            valid = is_wallet(
                value,
                capabilities.allow_standard,
                capabilities.allow_integrated,
                capabilities.allow_subaddress,
            )
            detail = "sellers_wallet is not valid."
        else:
            check, detail = FIELD_CHECKS[name]
            valid = check(value)
        if not valid:
            raise InvalidFieldError(name, detail)
