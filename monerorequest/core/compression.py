import base64
import binascii
import gzip
import zlib

from loguru import logger

from .errors import DecodeFailureError


def compress_and_encode(text: str) -> str:
    """gzip the UTF-8 text and encode it as padded standard base64."""
    compressed = gzip.compress(text.encode("utf-8"), mtime=0)
    return base64.b64encode(compressed).decode("ascii")


def decode_and_decompress(token: str) -> str:
    try:
        compressed = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Invalid base64 payload: {e}")
        raise DecodeFailureError(f"payload is not valid base64: {e}")
    try:
        data = gzip.decompress(compressed)
    except (OSError, EOFError, zlib.error) as e:
        logger.debug(f"Invalid gzip payload: {e}")
        raise DecodeFailureError(f"payload could not be decompressed: {e}")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeFailureError(f"payload is not valid UTF-8: {e}")
