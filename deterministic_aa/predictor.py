"""
Address prediction.

The caller's salt is first bound to the securing identity,

    wrapped_salt = keccak256(abi.encodePacked(securedBy, bytes32(salt)))

so that the same nominal salt gives a different account for every identity
that can authorize its creation. The wrapped salt is then handed to the
adapter of the chosen account factory, which applies its own salt rules and
the CREATE2 formula.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from eth_utils import to_checksum_address

from deterministic_aa.accounts import get_adapter
from deterministic_aa.common.abi import pack
from deterministic_aa.common.config import DEFAULT_CONFIG, NetworkConfig
from deterministic_aa.common.crypto import keccak256
from deterministic_aa.common.salt import Salt, normalize_to_bytes32
from deterministic_aa.common.types import AccountFactoryKind, AddressLike, to_address

logger = logging.getLogger(__name__)

FactoryKindLike = Union[AccountFactoryKind, AddressLike]


def wrap_salt(salt: Salt, secured_by: AddressLike) -> bytes:
    """Bind a salt to the identity whose signature authorizes the account."""
    return keccak256(
        pack(["address", "bytes32"], [to_address(secured_by), normalize_to_bytes32(salt)])
    )


def predict_address_bytes(
    kind: FactoryKindLike,
    salt: Salt,
    secured_by: AddressLike,
    authorizing_factory: Optional[AddressLike] = None,
    deployer: Optional[AddressLike] = None,
    config: NetworkConfig = DEFAULT_CONFIG,
) -> bytes:
    """Predict the 20-byte address of the account for (kind, salt, secured_by).

    ``deployer`` overrides the account factory address used as CREATE2
    sender; it is only useful against forks or test deployments.
    """
    adapter = get_adapter(kind)
    factory = config.resolve_authorizing_factory(authorizing_factory)
    address = adapter.predict(
        wrap_salt(salt, secured_by),
        factory,
        deployer=to_address(deployer) if deployer is not None else None,
    )
    logger.debug(
        "Predicted %s account for %s: %s",
        adapter.kind.name,
        to_checksum_address(to_address(secured_by)),
        to_checksum_address(address),
    )
    return address


def predict_address(
    kind: FactoryKindLike,
    salt: Salt,
    secured_by: AddressLike,
    authorizing_factory: Optional[AddressLike] = None,
    deployer: Optional[AddressLike] = None,
    config: NetworkConfig = DEFAULT_CONFIG,
) -> str:
    """Same as predict_address_bytes, returned as an EIP-55 checksummed string."""
    return to_checksum_address(
        predict_address_bytes(kind, salt, secured_by, authorizing_factory, deployer, config)
    )


def get_transfer_ownership_code(
    kind: FactoryKindLike,
    owner: AddressLike,
    authorizing_factory: Optional[AddressLike] = None,
    config: NetworkConfig = DEFAULT_CONFIG,
) -> bytes:
    """Call-data that hands a freshly deployed account of ``kind`` to ``owner``."""
    adapter = get_adapter(kind)
    factory = (
        to_address(authorizing_factory)
        if authorizing_factory is not None
        else config.authorizing_factory
    )
    return adapter.transfer_ownership_code(to_address(owner), factory)
