"""
Delegate signer registry, interface only.

A registry deploys one signer contract per (owner, key) pair at a
deterministic address. The signer contract keeps ``delegate -> expiry`` and
accepts a delegate's signature only while ``block.timestamp < expiry``.
Expiry is checked on-chain; the signature builder does not look at it, and a
signature from an expired or unknown delegate is rejected on submission
without any retry making it valid.
"""

from __future__ import annotations

import time
from typing import Optional

from deterministic_aa.common.abi import encode_call
from deterministic_aa.common.types import AddressLike, to_address
from deterministic_aa.rpc.client import ContractReader, call_function

GET_SIGNER_SIGNATURE = "getSigner(address,bytes32)"
ADD_DELEGATE_SIGNATURE = "addDelegate(address,uint256)"
DELEGATE_EXPIRY_SIGNATURE = "delegateExpiry(address)"


async def get_registry_signer(
    reader: ContractReader,
    registry: AddressLike,
    owner: AddressLike,
    key: bytes,
) -> bytes:
    """Deterministic signer contract address of ``owner`` under ``key``."""
    if len(key) != 32:
        raise ValueError(f"Registry key must be 32 bytes, got {len(key)}")
    (signer,) = await call_function(
        reader,
        to_address(registry),
        GET_SIGNER_SIGNATURE,
        [to_address(owner), key],
        ["address"],
    )
    return to_address(signer)


def encode_add_delegate(delegate: AddressLike, expiry: int) -> bytes:
    """Call-data for the principal to grant ``delegate`` signing rights until ``expiry``."""
    if expiry < 0:
        raise ValueError(f"Expiry must be a unix timestamp, got {expiry}")
    return encode_call(ADD_DELEGATE_SIGNATURE, [to_address(delegate), expiry])


async def get_delegate_expiry(
    reader: ContractReader,
    signer_contract: AddressLike,
    delegate: AddressLike,
) -> int:
    """Expiry timestamp of ``delegate`` on the signer contract (0 if never added)."""
    (expiry,) = await call_function(
        reader,
        to_address(signer_contract),
        DELEGATE_EXPIRY_SIGNATURE,
        [to_address(delegate)],
        ["uint256"],
    )
    return expiry


def is_delegate_active(expiry: int, now: Optional[int] = None) -> bool:
    if now is None:
        now = int(time.time())
    return now < expiry
