"""
Signer kinds that can secure an account.

* ``EOASigner``: the securing identity is a plain key.
* ``DelegateSigner``: the securing identity is a registry-governed signer
  contract; a time-bound delegate key signs on its behalf.
* ``ContractAccountSigner``: the securing identity is itself a deployed
  smart-contract account whose owner key signs.

Each kind carries exactly what its signing procedure needs. Key material is
kept out of ``repr`` and is only read inside a signing call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from deterministic_aa.common.types import AccountFactoryKind, to_address


@dataclass(frozen=True)
class EOASigner:
    address: bytes
    private_key: bytes = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", to_address(self.address))


@dataclass(frozen=True)
class DelegateSigner:
    # Signer contract the registry deployed for the principal
    address: bytes
    delegate: bytes
    private_key: bytes = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", to_address(self.address))
        object.__setattr__(self, "delegate", to_address(self.delegate))


@dataclass(frozen=True)
class ContractAccountSigner:
    # Deployed account acting as securing identity
    address: bytes
    private_key: bytes = field(repr=False)
    kind: AccountFactoryKind = AccountFactoryKind.LIGHT_ACCOUNT

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", to_address(self.address))
        object.__setattr__(self, "kind", AccountFactoryKind.parse(self.kind))


Signer = Union[EOASigner, DelegateSigner, ContractAccountSigner]
