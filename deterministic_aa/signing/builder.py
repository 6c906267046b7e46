"""
CreateAccount signature builder.

All signer kinds end up with a 65-byte ``r || s || v`` signature
(``v`` in {27, 28}) over a hash derived from the same CreateAccount digest:

* EOA: the digest itself.
* DelegateSigner: ``DelegateMessage{hash: digest}`` under the delegate
  signer contract's own EIP-712 domain, read from that contract.
* ContractAccountSigner: whatever ``getMessageHash(abi.encode(digest))``
  returns on the account, asked only once the key is known to be one
  of the account's recorded owners.
"""

from __future__ import annotations

import logging
from typing import Optional

from eth_utils import to_checksum_address

from deterministic_aa.accounts import get_adapter
from deterministic_aa.common.abi import encode_params
from deterministic_aa.common.config import DEFAULT_CONFIG, NetworkConfig
from deterministic_aa.common.crypto import private_key_to_address, recover_address, sign_hash
from deterministic_aa.common.errors import (
    OwnerMismatch,
    UnsupportedSignerKind,
    WalletUnavailable,
)
from deterministic_aa.common.salt import Salt
from deterministic_aa.common.types import AccountFactoryKind, AddressLike, to_address
from deterministic_aa.rpc.client import ContractReader
from deterministic_aa.signing.domain import resolve_domain
from deterministic_aa.signing.eip712 import (
    CreateAccountMessage,
    DelegateMessage,
    TypedDataDomain,
    build_create_account_message,
    create_account_digest,
    typed_data_digest,
)
from deterministic_aa.signing.signers import (
    ContractAccountSigner,
    DelegateSigner,
    EOASigner,
    Signer,
)

logger = logging.getLogger(__name__)


def _key_address(private_key: bytes, claimed: bytes) -> bytes:
    """Address of ``private_key``; WalletUnavailable if the key is unusable."""
    if not isinstance(private_key, (bytes, bytearray)) or len(private_key) != 32:
        raise WalletUnavailable(claimed, "private key must be 32 bytes")
    try:
        return private_key_to_address(bytes(private_key))
    except ValueError as exc:
        raise WalletUnavailable(claimed, f"invalid private key: {exc}") from exc


def _require_key_for(private_key: bytes, address: bytes) -> None:
    derived = _key_address(private_key, address)
    if derived != address:
        raise WalletUnavailable(
            address, f"key belongs to {to_checksum_address(derived)}"
        )


def _sign_as_eoa(
    domain: TypedDataDomain, message: CreateAccountMessage, signer: EOASigner
) -> bytes:
    _require_key_for(signer.private_key, signer.address)
    return sign_hash(create_account_digest(domain, message), bytes(signer.private_key))


async def _sign_as_delegate(
    reader: ContractReader,
    domain: TypedDataDomain,
    message: CreateAccountMessage,
    signer: DelegateSigner,
) -> bytes:
    _require_key_for(signer.private_key, signer.delegate)
    digest = create_account_digest(domain, message)
    delegate_domain = await resolve_domain(reader, signer.address)
    return sign_hash(
        typed_data_digest(delegate_domain, DelegateMessage(hash=digest)),
        bytes(signer.private_key),
    )


async def _sign_as_contract_account(
    reader: ContractReader,
    domain: TypedDataDomain,
    message: CreateAccountMessage,
    signer: ContractAccountSigner,
) -> bytes:
    adapter = get_adapter(signer.kind)
    key_address = _key_address(signer.private_key, signer.address)
    digest = create_account_digest(domain, message)

    owners = await adapter.read_owners(reader, signer.address)
    if key_address not in owners:
        raise OwnerMismatch(signer.address, owners, key_address)
    message_hash = await adapter.read_message_hash(
        reader, signer.address, encode_params(["bytes32"], [digest])
    )
    return sign_hash(message_hash, bytes(signer.private_key))


async def sign(
    reader: ContractReader,
    domain: TypedDataDomain,
    message: CreateAccountMessage,
    signer: Signer,
) -> bytes:
    """Sign ``message`` under ``domain`` the way ``signer``'s kind requires."""
    logger.debug("Signing CreateAccount with %s", type(signer).__name__)
    if isinstance(signer, EOASigner):
        return _sign_as_eoa(domain, message, signer)
    if isinstance(signer, DelegateSigner):
        return await _sign_as_delegate(reader, domain, message, signer)
    if isinstance(signer, ContractAccountSigner):
        return await _sign_as_contract_account(reader, domain, message, signer)
    raise UnsupportedSignerKind(signer)


async def get_create_account_signature(
    reader: ContractReader,
    kind: AccountFactoryKind | AddressLike,
    salt: Salt,
    owner: AddressLike,
    signer: Signer,
    authorizing_factory: Optional[AddressLike] = None,
    config: NetworkConfig = DEFAULT_CONFIG,
) -> bytes:
    """Signature authorizing a third party to create the account of ``signer``.

    The account is the one predicted for (kind, salt, signer.address); after
    deployment it is handed over to ``owner``.
    """
    adapter = get_adapter(kind)
    factory = config.resolve_authorizing_factory(authorizing_factory)
    transfer_code = adapter.transfer_ownership_code(to_address(owner), factory)
    domain = await resolve_domain(reader, factory)
    message = build_create_account_message(adapter.kind, salt, transfer_code)
    return await sign(reader, domain, message, signer)


def recover_signer(digest: bytes, signature: bytes) -> bytes:
    """Address that produced ``signature`` over ``digest``."""
    return recover_address(digest, signature)
