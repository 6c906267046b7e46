"""
ABI helpers on top of eth-abi.

Function signatures are written the way Solidity prints them
(``"transferOwnership(address)"``); argument types are read from the
signature, so a call is encoded from the signature and its arguments alone.
"""

from __future__ import annotations

from typing import Any, Sequence

from eth_abi import encode
from eth_abi.packed import encode_packed
from eth_utils import function_signature_to_4byte_selector


def argument_types(signature: str) -> list[str]:
    """Return the argument types of a flat (tuple-free) function signature."""
    start = signature.index("(")
    if not signature.endswith(")"):
        raise ValueError(f"Malformed function signature: {signature!r}")
    inner = signature[start + 1:-1]
    return [t.strip() for t in inner.split(",")] if inner else []


def function_selector(signature: str) -> bytes:
    return function_signature_to_4byte_selector(signature)


def encode_call(signature: str, args: Sequence[Any] = ()) -> bytes:
    """Encode call-data: 4-byte selector followed by the ABI-encoded arguments."""
    return function_selector(signature) + encode(argument_types(signature), list(args))


def encode_params(types: Sequence[str], args: Sequence[Any]) -> bytes:
    """Canonical (padded, length-prefixed) encoding, ``abi.encode``."""
    return encode(list(types), list(args))


def pack(types: Sequence[str], args: Sequence[Any]) -> bytes:
    """Packed encoding, ``abi.encodePacked``."""
    return encode_packed(list(types), list(args))
