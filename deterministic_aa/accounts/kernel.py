"""
Kernel v2.4.

The proxy creation code carries no constructor arguments. The factory
derives the CREATE2 salt from the initializer call and the index:

    bytes32 salt = bytes32(uint256(keccak256(abi.encodePacked(_data, _index))) & type(uint96).max);

The mask keeps only the low 96 bits; predictions must apply it exactly the
same way or they land on a different address.
"""

from __future__ import annotations

from typing import Optional

from deterministic_aa.accounts.base import AccountAdapter
from deterministic_aa.common.abi import encode_call, pack
from deterministic_aa.common.config import KERNEL_ECDSA_VALIDATOR
from deterministic_aa.common.crypto import keccak256
from deterministic_aa.common.types import AccountFactoryKind

UINT96_MAX = 2**96 - 1

# Kernel v2.4 minimal proxy creation code
PROXY_CREATION_CODE = bytes.fromhex(
    "607f3d8160093d39f33d3d33735de4839a76cf55d0c90e2061ef4386d962e15ae314605757363d3d37363d7f360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc545af43d6000803e6052573d6000fd5b3d6000f35b3d356020355560408036111560525736038060403d373d3d355af43d6000803e6052573d6000fd00"
)

OPERATION_CALL = 0


def initialize_call(authorizing_factory: bytes) -> bytes:
    """``initialize(validator, data)`` enabling the factory as ECDSA owner."""
    return encode_call(
        "initialize(address,bytes)",
        [KERNEL_ECDSA_VALIDATOR, pack(["address"], [authorizing_factory])],
    )


def mask_salt(salt_hash: bytes) -> bytes:
    """Keep the low 96 bits of a 32-byte hash, re-encoded as a 32-byte word."""
    return (int.from_bytes(salt_hash, "big") & UINT96_MAX).to_bytes(32, "big")


class KernelV24Adapter(AccountAdapter):
    kind = AccountFactoryKind.KERNEL_V2_4

    def init_code(self, authorizing_factory: bytes) -> bytes:
        return PROXY_CREATION_CODE

    def deployment_salt(self, wrapped_salt: bytes, authorizing_factory: bytes) -> bytes:
        index = int.from_bytes(wrapped_salt, "big")
        salt_hash = keccak256(
            pack(["bytes", "uint256"], [initialize_call(authorizing_factory), index])
        )
        return mask_salt(salt_hash)

    def transfer_ownership_code(
        self, owner: bytes, authorizing_factory: Optional[bytes] = None
    ) -> bytes:
        # Re-enable the ECDSA validator with the new owner from the account itself
        enable = encode_call("enable(bytes)", [pack(["address"], [owner])])
        return encode_call(
            "execute(address,uint256,bytes,uint8)",
            [KERNEL_ECDSA_VALIDATOR, 0, enable, OPERATION_CALL],
        )
