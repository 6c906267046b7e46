"""
deterministic-aa: counterfactual account addresses and CreateAccount signatures.

Predicts the CREATE2 address a deterministic account factory deploys an
account to, and builds the EIP-712 signature with which the securing
identity authorizes someone else to deploy it.
"""

from .common import AccountFactoryKind, NetworkConfig, normalize_to_bytes32, normalize_to_uint
from .predictor import get_transfer_ownership_code, predict_address, wrap_salt
from .signing import (
    ContractAccountSigner,
    DelegateSigner,
    EOASigner,
    get_create_account_signature,
    resolve_domain,
    sign,
)

__version__ = "0.1.0"

__all__ = [
    "AccountFactoryKind",
    "NetworkConfig",
    "normalize_to_bytes32",
    "normalize_to_uint",
    "get_transfer_ownership_code",
    "predict_address",
    "wrap_salt",
    "ContractAccountSigner",
    "DelegateSigner",
    "EOASigner",
    "get_create_account_signature",
    "resolve_domain",
    "sign",
]
