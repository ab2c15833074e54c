import random
from datetime import datetime, timezone
from typing import Callable, Optional

from .check import HEX_ALPHABET, PAYMENT_ID_LENGTH

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_random_payment_id(rng: Optional[random.Random] = None) -> str:
    """16 random lowercase hex characters. A correlation id, not a secret."""
    rng = rng or random.SystemRandom()
    return "".join(rng.choice(HEX_ALPHABET) for _ in range(PAYMENT_ID_LENGTH))


def to_truncated_rfc3339(moment: datetime) -> str:
    """Formats as YYYY-MM-DDTHH:MM:SS.mmmZ in UTC. Naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
