"""Predicted addresses checked against real CREATE2 execution in py-evm.

The account factories are replaced by a minimal CREATE2 deployer placed at
each factory's address, fed with the salt and init code the adapters
produce. The implementations are one-byte stand-ins so the proxy
constructors find code where they expect it.
"""

import pytest

from deterministic_aa.accounts import get_adapter
from deterministic_aa.common.config import (
    LIGHT_ACCOUNT_IMPLEMENTATION,
    MODULAR_ACCOUNT_IMPLEMENTATION,
    NetworkConfig,
)
from deterministic_aa.common.types import AccountFactoryKind
from deterministic_aa.predictor import predict_address_bytes, wrap_salt
from tests.fixtures.addresses import DA_FACTORY
from tests.fixtures.contracts import IMPLEMENTATION_STUB
from tests.fixtures.evm import EVMHarness
from tests.fixtures.keys import ALICE_ADDRESS, BOB_ADDRESS

CONFIG = NetworkConfig(authorizing_factory=DA_FACTORY)


@pytest.fixture(scope="module")
def harness():
    return EVMHarness(
        deployers=[kind.address for kind in AccountFactoryKind],
        extra_code={
            LIGHT_ACCOUNT_IMPLEMENTATION: IMPLEMENTATION_STUB,
            MODULAR_ACCOUNT_IMPLEMENTATION: IMPLEMENTATION_STUB,
        },
    )


def _deploy(harness, kind, salt, secured_by):
    adapter = get_adapter(kind)
    deployment_salt = adapter.deployment_salt(wrap_salt(salt, secured_by), DA_FACTORY)
    return harness.deploy(kind.address, deployment_salt, adapter.init_code(DA_FACTORY))


@pytest.mark.parametrize("kind", list(AccountFactoryKind))
class TestDeploymentMatchesPrediction:
    """Test predictions against CREATE2 run in the EVM."""

    def test_deployed_at_predicted_address(self, harness, kind):
        """Test deployment at the predicted address."""
        result = _deploy(harness, kind, 1234, ALICE_ADDRESS)

        assert result.success
        assert result.address == predict_address_bytes(kind, 1234, ALICE_ADDRESS, config=CONFIG)
        assert len(result.runtime_code) > 0

    def test_other_identity_other_address(self, harness, kind):
        """Test that another identity deploys elsewhere."""
        result = _deploy(harness, kind, 1234, BOB_ADDRESS)

        assert result.success
        assert result.address == predict_address_bytes(kind, 1234, BOB_ADDRESS, config=CONFIG)
        assert result.address != predict_address_bytes(kind, 1234, ALICE_ADDRESS, config=CONFIG)

    def test_redeploy_fails(self, harness, kind):
        """Test that a second deployment at the same address fails."""
        first = _deploy(harness, kind, 99, ALICE_ADDRESS)
        second = _deploy(harness, kind, 99, ALICE_ADDRESS)

        assert first.success
        assert not second.success
