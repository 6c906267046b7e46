"""
Well-known contract addresses and network configuration.

The addresses below are the canonical deployments that the account
factories embed in their proxies; they are identical on every chain where
the factories are deployed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from eth_utils import to_canonical_address

from deterministic_aa.common.errors import ConfigurationError
from deterministic_aa.common.types import AddressLike, to_address


# ---------------------------------------------------------------------------
# Account implementations
# ---------------------------------------------------------------------------

# Light Account v1.1.0 implementation behind the ERC-1967 proxy
LIGHT_ACCOUNT_IMPLEMENTATION = to_canonical_address(
    "0xae8c656ad28f2b59a196ab61815c16a0ae1c3cba"
)

# UpgradeableModularAccount implementation used by the multi-owner factory
MODULAR_ACCOUNT_IMPLEMENTATION = to_canonical_address(
    "0x0046000000000151008789797b54fdb500e2a61e"
)

# Plugin that keeps the owner set of a multi-owner modular account
MULTI_OWNER_PLUGIN = to_canonical_address(
    "0xce0000007b008f50d762d155002600004cd6c647"
)

# Kernel v2 ECDSA validator installed as default validator
KERNEL_ECDSA_VALIDATOR = to_canonical_address(
    "0xd9ab5096a832b9ce79914329daee236f8eea0390"
)


# ---------------------------------------------------------------------------
# Network configuration
# ---------------------------------------------------------------------------

@dataclass
class NetworkConfig:
    rpc_url: Optional[str] = None
    # Deterministic account factory that authorizes creation and is the
    # temporary owner of every freshly deployed account
    authorizing_factory: Optional[bytes] = None
    chain_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.authorizing_factory is not None:
            self.authorizing_factory = to_address(self.authorizing_factory)

    def resolve_authorizing_factory(self, override: Optional[AddressLike] = None) -> bytes:
        """Return the explicit override, else the configured factory."""
        if override is not None:
            return to_address(override)
        if self.authorizing_factory is None:
            raise ConfigurationError(
                "No authorizing factory address given and none configured"
            )
        return self.authorizing_factory

    def require_rpc_url(self) -> str:
        if not self.rpc_url:
            raise ConfigurationError("No RPC URL configured")
        return self.rpc_url


DEFAULT_CONFIG = NetworkConfig()
