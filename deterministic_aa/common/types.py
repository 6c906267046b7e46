"""Core types: account factory kinds and address handling."""

from __future__ import annotations

from enum import Enum
from typing import Union

from eth_utils import is_hex_address, to_canonical_address

from deterministic_aa.common.errors import UnsupportedFactory

AddressLike = Union[bytes, str]


def to_address(value: AddressLike) -> bytes:
    """Convert a 20-byte value or a hex address string to canonical bytes."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 20:
            raise ValueError(f"Address must be 20 bytes, got {len(value)}")
        return bytes(value)
    if isinstance(value, str) and is_hex_address(value):
        return to_canonical_address(value)
    raise ValueError(f"Not an address: {value!r}")


class AccountFactoryKind(Enum):
    """Supported account factories.

    The value is the factory contract address, which is both the CREATE2
    deployer of the account proxies and the ``factory`` field of the signed
    CreateAccount message.
    """

    LIGHT_ACCOUNT = "0x00004ec70002a32400f8ae005a26081065620d20"
    MULTI_OWNER_MODULAR_ACCOUNT = "0x000000e92d78d90000007f0082006fda09bd5f11"
    KERNEL_V2_4 = "0x5de4839a76cf55d0c90e2061ef4386d962e15ae3"

    @property
    def address(self) -> bytes:
        return to_canonical_address(self.value)

    @property
    def cli_name(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def parse(cls, value: "AccountFactoryKind | AddressLike") -> "AccountFactoryKind":
        """Resolve a kind from the enum itself, its name, or its factory address."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_").replace(".", "_")
            if name in cls.__members__:
                return cls[name]
        try:
            address = to_address(value)
        except ValueError:
            raise UnsupportedFactory(value, "not a factory name or address") from None
        for kind in cls:
            if kind.address == address:
                return kind
        raise UnsupportedFactory(address)
