from monerorequest.core import canonical
from monerorequest.core.compression import compress_and_encode

STANDARD_ADDRESS = (
    "4At3X5rvVypTofgmueN9s9QtrzdRe5BueFrskAZi17BoYbhzysozzoMFB6zWnTKdGC6AxEAbEE5czFR3hbEEJbsm4hCeX2S"
)
INTEGRATED_ADDRESS = STANDARD_ADDRESS + "Ab12CdEfGhJ"
SUBADDRESS = "8" + STANDARD_ADDRESS[1:]

# created by the original reference client
EXAMPLE_REQUEST = (
    "monero-request:1:H4sIAAAAAAACEy2OYUvDMBCG/4rk8zaytunWfWtHKygTrEPrvoSkua3BNBlJqrbifzcdwsHd"
    "+z7H3fuDWG8G7dEOrVcYE7RAbcf0BajUQrbMG0sHqwKeyWAt6HYMqjnUN8N501PFOMwrXnoFd76T+hKgYKOjV7CU"
    "S6WCRduxVYB2eIH00PMAzJle2diD9u5m/wsqRTgmOGSbNCVbzgkQcg4XHSgF1tEvFvocOcl93BD7+Tpej+Z86Qd4"
    "ylz27O0kaiDFAJV1H/lJrjeFeefdNDozTeZQFen0po+P4n6f5t9lzsuStFNVx12YHrjrk24PTfQyv/TMeiqYD8FR"
    "hKNkiaNlhI8425FQ2xWO8Qn9/gGlA0vcRwEAAA=="
)


def make_request(**overrides) -> str:
    """Builds a version 1 request from raw field values, skipping all checks."""
    data = {
        "custom_label": "title thing",
        "sellers_wallet": STANDARD_ADDRESS,
        "currency": "XMR",
        "amount": "1.005",
        "payment_id": "dbe976658bb5e55f",
        "start_date": "2024-02-20T09:59:58.030Z",
        "days_per_billing_cycle": 0,
        "number_of_payments": 0,
        "change_indicator_url": "",
    }
    data.update(overrides)
    return "monero-request:1:" + compress_and_encode(canonical.serialize(data))
