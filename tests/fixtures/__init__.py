"""Test fixtures for account prediction and signing tests."""

from .addresses import (
    CHAIN_ID,
    CONTRACT_ACCOUNT,
    DA_FACTORY,
    DELEGATE_SIGNER_CONTRACT,
    OTHER_DA_FACTORY,
    SIGNER_REGISTRY,
    ZERO_ADDRESS,
)
from .keys import (
    ALICE_ADDRESS,
    ALICE_PRIVATE_KEY,
    BOB_ADDRESS,
    BOB_PRIVATE_KEY,
    CHARLIE_ADDRESS,
    CHARLIE_PRIVATE_KEY,
    derive_address,
)
from .reader import FakeContractReader, serve_domain

__all__ = [
    # Addresses
    "CHAIN_ID",
    "CONTRACT_ACCOUNT",
    "DA_FACTORY",
    "DELEGATE_SIGNER_CONTRACT",
    "OTHER_DA_FACTORY",
    "SIGNER_REGISTRY",
    "ZERO_ADDRESS",
    # Keys
    "ALICE_ADDRESS",
    "ALICE_PRIVATE_KEY",
    "BOB_ADDRESS",
    "BOB_PRIVATE_KEY",
    "CHARLIE_ADDRESS",
    "CHARLIE_PRIVATE_KEY",
    "derive_address",
    # Reader
    "FakeContractReader",
    "serve_domain",
]
