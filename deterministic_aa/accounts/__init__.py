"""Account-type adapters, one per supported account factory."""

from __future__ import annotations

from typing import Union

from deterministic_aa.accounts.base import AccountAdapter
from deterministic_aa.accounts.kernel import KernelV24Adapter
from deterministic_aa.accounts.light_account import LightAccountAdapter
from deterministic_aa.accounts.multi_owner import MultiOwnerModularAccountAdapter
from deterministic_aa.common.errors import UnsupportedFactory
from deterministic_aa.common.types import AccountFactoryKind

ADAPTERS: dict[AccountFactoryKind, AccountAdapter] = {
    adapter.kind: adapter
    for adapter in (
        LightAccountAdapter(),
        MultiOwnerModularAccountAdapter(),
        KernelV24Adapter(),
    )
}


def get_adapter(kind: Union[AccountFactoryKind, bytes, str]) -> AccountAdapter:
    """Return the adapter for a factory kind, its name, or its address."""
    resolved = AccountFactoryKind.parse(kind)
    adapter = ADAPTERS.get(resolved)
    if adapter is None:
        raise UnsupportedFactory(resolved)
    return adapter


__all__ = [
    "ADAPTERS",
    "AccountAdapter",
    "KernelV24Adapter",
    "LightAccountAdapter",
    "MultiOwnerModularAccountAdapter",
    "get_adapter",
]
