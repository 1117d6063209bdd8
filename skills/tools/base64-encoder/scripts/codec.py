#!/usr/bin/env python3
"""
Base64 Encoder/Decoder - Codec
Based on Python's base64: https://github.com/python/cpython
"""

import base64
import string

try:
    from .exceptions import DecodeError
    from .models import Alphabet
    from .logger import get_logger
except ImportError:
    from exceptions import DecodeError
    from models import Alphabet
    from logger import get_logger


logger = get_logger("codec")

# Alphanumerics, the two alphabet symbols and padding
_ALLOWED = {
    alphabet: frozenset(string.ascii_letters + string.digits + alphabet.value + "=")
    for alphabet in Alphabet
}


def clean_input(data: bytes) -> str:
    """Drop all whitespace so wrapped or indented base-64 still decodes.

    Invalid UTF-8 becomes U+FFFD and is rejected later by the decoder.
    """
    text = data.decode("utf-8", errors="replace")
    cleaned = "".join(ch for ch in text if not ch.isspace())
    if len(cleaned) != len(text):
        logger.debug("Stripped %d whitespace characters", len(text) - len(cleaned))
    return cleaned


def encode_data(data: bytes, alphabet: Alphabet = Alphabet.STANDARD) -> str:
    """Encode bytes to padded Base64."""
    return base64.b64encode(data, altchars=alphabet.altchars).decode("ascii")


def decode_data(data: str, alphabet: Alphabet = Alphabet.STANDARD) -> bytes:
    """Decode padded Base64, rejecting anything outside ``alphabet``.

    Raises:
        DecodeError: on a foreign character or bad padding
    """
    allowed = _ALLOWED[alphabet]
    for position, ch in enumerate(data):
        if ch not in allowed:
            raise DecodeError(
                f"illegal base64 data at input byte {position}",
                alphabet=alphabet.name,
            )

    try:
        return base64.b64decode(data, altchars=alphabet.altchars, validate=True)
    except ValueError as e:
        # binascii.Error for bad padding
        raise DecodeError(str(e), alphabet=alphabet.name) from e
