from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from monerorequest import PaymentRequest, WalletCapabilities
from monerorequest.core.base import Currency
from monerorequest.core.errors import CoercionError, InvalidFieldError
from monerorequest.core.helpers import make_random_payment_id, to_truncated_rfc3339
from tests.helpers import EXAMPLE_REQUEST, STANDARD_ADDRESS, SUBADDRESS, make_request


def test_serialize_deserialize():
    request = PaymentRequest(
        custom_label="Coffee",
        sellers_wallet=STANDARD_ADDRESS,
        currency=Currency.USD.value,
        amount="4.50",
        days_per_billing_cycle=7,
        number_of_payments=4,
    )
    serialized = request.serialize()
    assert serialized.startswith("monero-request:1:")

    decoded = PaymentRequest.deserialize(serialized)
    assert decoded.custom_label == "Coffee"
    assert decoded.amount == "4.50"
    assert decoded.days_per_billing_cycle == 7
    assert decoded.number_of_payments == 4
    assert len(decoded.payment_id) == 16
    assert decoded.start_date.endswith("Z")


def test_deserialize_example_request():
    request = PaymentRequest.deserialize(EXAMPLE_REQUEST)
    assert request.custom_label == "title thing"
    assert request.payment_id == "dbe976658bb5e55f"
    assert request.start_date == "2024-02-20T09:59:58.030Z"


def test_deserialize_rejects_invalid_fields():
    with pytest.raises(InvalidFieldError) as exc:
        PaymentRequest.deserialize(make_request(currency="EUR"))
    assert exc.value.field == "currency"


def test_deserialize_is_strict():
    with pytest.raises(CoercionError):
        PaymentRequest.deserialize(make_request(number_of_payments="abc"))


def test_deserialize_capabilities():
    request = make_request(sellers_wallet=SUBADDRESS)
    with pytest.raises(InvalidFieldError):
        PaymentRequest.deserialize(request)
    decoded = PaymentRequest.deserialize(
        request, capabilities=WalletCapabilities(allow_subaddress=True)
    )
    assert decoded.sellers_wallet == SUBADDRESS


def test_model_is_frozen():
    request = PaymentRequest(
        custom_label="", sellers_wallet=STANDARD_ADDRESS, currency="XMR", amount="1"
    )
    with pytest.raises(ValidationError):
        request.amount = "2"


def test_serialize_checks_fields():
    request = PaymentRequest(
        custom_label="", sellers_wallet="4abc", currency="XMR", amount="1"
    )
    with pytest.raises(InvalidFieldError):
        request.serialize()


def test_make_random_payment_id(rng):
    payment_id = make_random_payment_id(rng)
    assert len(payment_id) == 16
    assert set(payment_id) <= set("0123456789abcdef")


def test_to_truncated_rfc3339():
    moment = datetime(2024, 2, 20, 11, 59, 58, 30999, tzinfo=timezone(timedelta(hours=2)))
    assert to_truncated_rfc3339(moment) == "2024-02-20T09:59:58.030Z"
    assert to_truncated_rfc3339(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"
