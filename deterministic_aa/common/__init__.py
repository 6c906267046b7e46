"""Hashing, CREATE2, salts, ABI helpers, errors and configuration."""

from .crypto import keccak256, sign_hash, recover_address, private_key_to_address
from .create2 import compute_create2_address, compute_create2_address_with_code_hash
from .salt import Salt, normalize_to_bytes32, normalize_to_uint
from .types import AccountFactoryKind, to_address
from .config import NetworkConfig, DEFAULT_CONFIG
from .errors import (
    DeterministicAAError,
    InvalidSalt,
    UnsupportedFactory,
    UnsupportedSignerKind,
    ContractCallError,
    DomainResolutionError,
    OwnerMismatch,
    WalletUnavailable,
    ConfigurationError,
)

__all__ = [
    "keccak256",
    "sign_hash",
    "recover_address",
    "private_key_to_address",
    "compute_create2_address",
    "compute_create2_address_with_code_hash",
    "Salt",
    "normalize_to_bytes32",
    "normalize_to_uint",
    "AccountFactoryKind",
    "to_address",
    "NetworkConfig",
    "DEFAULT_CONFIG",
    "DeterministicAAError",
    "InvalidSalt",
    "UnsupportedFactory",
    "UnsupportedSignerKind",
    "ContractCallError",
    "DomainResolutionError",
    "OwnerMismatch",
    "WalletUnavailable",
    "ConfigurationError",
]
