"""Version 1: flat JSON-subset text, gzip compressed, standard base64."""

from loguru import logger

from .. import canonical
from ..base import Fields
from ..compression import compress_and_encode, decode_and_decompress


def encode(fields: Fields) -> str:
    text = canonical.serialize(fields)
    logger.trace(f"v1 payload: {text}")
    return compress_and_encode(text)


def decode(payload: str) -> Fields:
    text = decode_and_decompress(payload)
    logger.trace(f"v1 payload: {text}")
    return canonical.parse(text)
