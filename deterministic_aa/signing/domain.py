"""
EIP-712 domain resolution (ERC-5267).

Contracts expose their domain through

    eip712Domain() returns (bytes1 fields, string name, string version,
                            uint256 chainId, address verifyingContract,
                            bytes32 salt, uint256[] extensions)

Only name, version, chainId and verifyingContract take part in the domains
used here, but the whole tuple is decoded so that a truncated or misaligned
response is rejected instead of half-read. The domain is read on every call;
it lives in contract state and is not cached.
"""

from __future__ import annotations

import logging

from eth_utils import to_checksum_address

from deterministic_aa.common.errors import ContractCallError, DomainResolutionError
from deterministic_aa.common.types import AddressLike, to_address
from deterministic_aa.rpc.client import ContractReader, call_function
from deterministic_aa.signing.eip712 import TypedDataDomain, domain_from_values

logger = logging.getLogger(__name__)

EIP712_DOMAIN_SIGNATURE = "eip712Domain()"
EIP712_DOMAIN_OUTPUTS = [
    "bytes1",
    "string",
    "string",
    "uint256",
    "address",
    "bytes32",
    "uint256[]",
]


async def resolve_domain(reader: ContractReader, contract: AddressLike) -> TypedDataDomain:
    """Read the EIP-712 domain of ``contract``.

    Raises DomainResolutionError if the call fails or the response is malformed.
    """
    address = to_address(contract)
    try:
        (
            _fields,
            name,
            version,
            chain_id,
            verifying_contract,
            _salt,
            _extensions,
        ) = await call_function(
            reader, address, EIP712_DOMAIN_SIGNATURE, (), EIP712_DOMAIN_OUTPUTS
        )
    except ContractCallError as exc:
        raise DomainResolutionError(address, EIP712_DOMAIN_SIGNATURE, exc.reason) from exc

    domain = domain_from_values(name, version, chain_id, verifying_contract)
    logger.debug(
        "Resolved EIP-712 domain of %s: %s v%s chain %d",
        to_checksum_address(address),
        domain.name,
        domain.version,
        domain.chain_id,
    )
    return domain
