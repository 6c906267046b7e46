"""Pytest configuration and shared fixtures for all tests."""

import pytest

from deterministic_aa.common.config import NetworkConfig
from deterministic_aa.common.crypto import keccak256
from deterministic_aa.signing.eip712 import TypedDataDomain

from tests.fixtures.addresses import (
    CHAIN_ID,
    CONTRACT_ACCOUNT,
    DA_FACTORY,
    DELEGATE_SIGNER_CONTRACT,
)
from tests.fixtures.keys import (
    ALICE_ADDRESS,
    ALICE_PRIVATE_KEY,
    BOB_ADDRESS,
    BOB_PRIVATE_KEY,
)
from tests.fixtures.reader import FakeContractReader, serve_domain


# =============================================================================
# Keys and Addresses
# =============================================================================

@pytest.fixture
def alice_key():
    """Alice's private key (0x01...01)."""
    return ALICE_PRIVATE_KEY


@pytest.fixture
def alice_address():
    """Alice's address derived from her private key."""
    return ALICE_ADDRESS


@pytest.fixture
def bob_key():
    """Bob's private key (0x02...02)."""
    return BOB_PRIVATE_KEY


@pytest.fixture
def bob_address():
    """Bob's address."""
    return BOB_ADDRESS


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture
def config():
    """Network config with the test deterministic account factory."""
    return NetworkConfig(authorizing_factory=DA_FACTORY, chain_id=CHAIN_ID)


@pytest.fixture
def factory_domain():
    """EIP-712 domain the deterministic account factory reports."""
    return TypedDataDomain(
        name="DeterministicAccountFactory",
        version="0.1.0",
        chain_id=CHAIN_ID,
        verifying_contract=DA_FACTORY,
    )


@pytest.fixture
def delegate_domain():
    """EIP-712 domain of the delegate signer contract."""
    return TypedDataDomain(
        name="DelegateSigner",
        version="1",
        chain_id=CHAIN_ID,
        verifying_contract=DELEGATE_SIGNER_CONTRACT,
    )


# =============================================================================
# Contract Reader
# =============================================================================

@pytest.fixture
def reader(factory_domain, delegate_domain):
    """Fake node serving the factory and delegate signer domains."""
    fake = FakeContractReader()
    for domain in (factory_domain, delegate_domain):
        serve_domain(
            fake,
            domain.verifying_contract,
            domain.name,
            domain.version,
            domain.chain_id,
        )
    return fake


@pytest.fixture
def light_account_reader(reader):
    """Fake node where CONTRACT_ACCOUNT is a Light Account owned by Alice.

    getMessageHash wraps the message the way a contract would: hashing it
    together with the account address.
    """
    reader.on(CONTRACT_ACCOUNT, "owner()", ["address"], (ALICE_ADDRESS,))
    reader.on(
        CONTRACT_ACCOUNT,
        "getMessageHash(bytes)",
        ["bytes32"],
        lambda message: (keccak256(CONTRACT_ACCOUNT + message),),
    )
    return reader
