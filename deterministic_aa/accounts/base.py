"""Capability interface shared by every account-type adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from deterministic_aa.common.create2 import compute_create2_address_with_code_hash
from deterministic_aa.common.crypto import keccak256
from deterministic_aa.common.errors import UnsupportedSignerKind
from deterministic_aa.common.types import AccountFactoryKind
from deterministic_aa.rpc.client import ContractReader


class AccountAdapter(ABC):
    """Knows how one account factory derives addresses and hands over ownership.

    ``authorizing_factory`` is always the deterministic account factory that
    calls the account factory; it is the first owner of every account it
    deploys and transfers ownership right after deployment.
    """

    kind: AccountFactoryKind

    @abstractmethod
    def init_code(self, authorizing_factory: bytes) -> bytes:
        """Proxy creation code with constructor arguments appended."""

    def init_code_hash(self, authorizing_factory: bytes) -> bytes:
        return keccak256(self.init_code(authorizing_factory))

    @abstractmethod
    def deployment_salt(self, wrapped_salt: bytes, authorizing_factory: bytes) -> bytes:
        """The 32-byte salt the account factory passes to CREATE2."""

    def predict(
        self,
        wrapped_salt: bytes,
        authorizing_factory: bytes,
        deployer: Optional[bytes] = None,
    ) -> bytes:
        """Predict the 20-byte account address for an already wrapped salt."""
        return compute_create2_address_with_code_hash(
            deployer if deployer is not None else self.kind.address,
            self.deployment_salt(wrapped_salt, authorizing_factory),
            self.init_code_hash(authorizing_factory),
        )

    @abstractmethod
    def transfer_ownership_code(
        self, owner: bytes, authorizing_factory: Optional[bytes] = None
    ) -> bytes:
        """Call-data the new account executes to hand control to ``owner``."""

    # -- contract signer support -------------------------------------------

    async def read_owners(self, reader: ContractReader, account: bytes) -> list[bytes]:
        """Owners the deployed account currently records."""
        raise UnsupportedSignerKind(
            self.kind, f"{self.kind.name} accounts cannot sign as contract signers"
        )

    async def read_message_hash(
        self, reader: ContractReader, account: bytes, message: bytes
    ) -> bytes:
        """Hash the account's owner must sign so the account accepts ``message``."""
        raise UnsupportedSignerKind(
            self.kind, f"{self.kind.name} accounts cannot sign as contract signers"
        )
