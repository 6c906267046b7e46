"""
Salt normalization.

A salt is a uint256. Callers pass it as an int, a hex string of up to 32
bytes (``"0x04D2"``, ``"0004d2"``) or raw big-endian bytes; every form of the
same value normalizes to the same 32-byte word.
"""

from __future__ import annotations

import string
from typing import Union

from deterministic_aa.common.errors import InvalidSalt

Salt = Union[int, str, bytes]

UINT256_MAX = 2**256 - 1

_HEX_DIGITS = frozenset(string.hexdigits)


def normalize_to_uint(salt: Salt) -> int:
    """Return the salt as an unsigned 256-bit integer."""
    if isinstance(salt, bool):
        raise InvalidSalt(salt, "booleans are not salts")

    if isinstance(salt, int):
        value = salt
    elif isinstance(salt, str):
        text = salt.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        if not set(text) <= _HEX_DIGITS:
            raise InvalidSalt(salt, "not a hex string")
        value = int(text, 16) if text else 0
    elif isinstance(salt, (bytes, bytearray)):
        value = int.from_bytes(salt, "big")
    else:
        raise InvalidSalt(salt, f"unsupported type {type(salt).__name__}")

    if value < 0:
        raise InvalidSalt(salt, "negative value")
    if value > UINT256_MAX:
        raise InvalidSalt(salt, "exceeds 2**256 - 1")
    return value


def normalize_to_bytes32(salt: Salt) -> bytes:
    """Return the salt as a 32-byte big-endian word."""
    return normalize_to_uint(salt).to_bytes(32, "big")
