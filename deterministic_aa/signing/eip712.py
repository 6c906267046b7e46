"""
EIP-712 typed-data hashing for account creation.

The deterministic account factory accepts a third party's
``createAccountWithSignature`` only with a signature of the securing
identity over

    CreateAccount(address factory,uint256 salt,bytes transferOwnershipCode)

under the factory's own EIP-712 domain. Delegate signer contracts verify
against their own domain instead and only see the resulting digest, wrapped
as ``DelegateMessage(bytes32 hash)``.

Encoding and hashing are left to eth-account, fed the ``eth_signTypedData_v4``
payload built here.

Reference: https://eips.ethereum.org/EIPS/eip-712
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_account.messages import SignableMessage, encode_typed_data
from eth_utils import to_checksum_address

from deterministic_aa.common.crypto import keccak256
from deterministic_aa.common.salt import Salt, normalize_to_uint
from deterministic_aa.common.types import AccountFactoryKind, AddressLike, to_address

EIP712_DOMAIN_FIELDS = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]


@dataclass(frozen=True)
class TypedDataDomain:
    name: str
    version: str
    chain_id: int
    verifying_contract: bytes

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chain_id,
            "verifyingContract": to_checksum_address(self.verifying_contract),
        }


@dataclass(frozen=True)
class CreateAccountMessage:
    """The payload a securing identity signs to authorize account creation."""

    factory: bytes
    salt: int
    transfer_ownership_code: bytes

    primary_type = "CreateAccount"
    type_fields = [
        {"name": "factory", "type": "address"},
        {"name": "salt", "type": "uint256"},
        {"name": "transferOwnershipCode", "type": "bytes"},
    ]

    def as_dict(self) -> dict[str, Any]:
        return {
            "factory": to_checksum_address(self.factory),
            "salt": self.salt,
            "transferOwnershipCode": self.transfer_ownership_code,
        }


@dataclass(frozen=True)
class DelegateMessage:
    """Wrapper a delegate key signs under the delegate signer's own domain."""

    hash: bytes

    primary_type = "DelegateMessage"
    type_fields = [{"name": "hash", "type": "bytes32"}]

    def as_dict(self) -> dict[str, Any]:
        return {"hash": self.hash}


def build_create_account_message(
    kind: AccountFactoryKind | AddressLike,
    salt: Salt,
    transfer_ownership_code: bytes,
) -> CreateAccountMessage:
    return CreateAccountMessage(
        factory=AccountFactoryKind.parse(kind).address,
        salt=normalize_to_uint(salt),
        transfer_ownership_code=bytes(transfer_ownership_code),
    )


def to_typed_data(domain: TypedDataDomain, message: Any) -> dict[str, Any]:
    """Full ``eth_signTypedData_v4`` payload for a message of this module."""
    return {
        "types": {
            "EIP712Domain": EIP712_DOMAIN_FIELDS,
            message.primary_type: message.type_fields,
        },
        "primaryType": message.primary_type,
        "domain": domain.as_dict(),
        "message": message.as_dict(),
    }


def signable_message(domain: TypedDataDomain, message: Any) -> SignableMessage:
    return encode_typed_data(full_message=to_typed_data(domain, message))


def typed_data_digest(domain: TypedDataDomain, message: Any) -> bytes:
    """keccak256(0x19 0x01 ++ domainSeparator ++ hashStruct(message))"""
    signable = signable_message(domain, message)
    return keccak256(b"\x19" + signable.version + signable.header + signable.body)


def create_account_digest(domain: TypedDataDomain, message: CreateAccountMessage) -> bytes:
    return typed_data_digest(domain, message)


def domain_from_values(
    name: str, version: str, chain_id: int, verifying_contract: AddressLike
) -> TypedDataDomain:
    return TypedDataDomain(name, version, int(chain_id), to_address(verifying_contract))
