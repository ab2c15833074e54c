import random
from datetime import datetime, timezone

import pytest

from monerorequest.core.settings import settings
from tests.helpers import STANDARD_ADDRESS

settings.debug = False
settings.log_level = "TRACE"
settings.request_version = "1"
settings.strict_decode = False
settings.wallet_allow_standard = True
settings.wallet_allow_integrated = True
settings.wallet_allow_subaddress = False


@pytest.fixture
def fields():
    return dict(
        custom_label="Unlabeled Monero Payment Request",
        sellers_wallet=STANDARD_ADDRESS,
        currency="USD",
        amount="25.99",
        payment_id="",
        start_date="",
        days_per_billing_cycle=30,
        number_of_payments=1,
        change_indicator_url="",
    )


@pytest.fixture
def rng():
    return random.Random(1337)


@pytest.fixture
def clock():
    return lambda: datetime(2024, 2, 20, 9, 59, 58, 30123, tzinfo=timezone.utc)
