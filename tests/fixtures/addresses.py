"""Contract addresses used across tests.

None of these hold real contracts; the fake reader and the py-evm harness
give them whatever behaviour a test needs.
"""

# Deterministic account factory (authorizing factory, EIP-712 verifying contract)
DA_FACTORY = bytes.fromhex("5fbdb2315678afecb367f032d93f642f64180aa3")

# Alternative authorizing factory
OTHER_DA_FACTORY = bytes.fromhex("e7f1725e7734ce288f8367e1bb143e90bb3f0512")

# Delegate signer contract deployed by a registry for some principal
DELEGATE_SIGNER_CONTRACT = bytes.fromhex("9fe46736679d2d9a65f0992f2272de9f3c7fa6e0")

# Delegate signer registry
SIGNER_REGISTRY = bytes.fromhex("cf7ed3acca5a467e9e704c703e8d87f634fb0fc9")

# Deployed smart account acting as securing identity
CONTRACT_ACCOUNT = bytes.fromhex("dc64a140aa3e981100a9beca4e685f962f0cf6c9")

ZERO_ADDRESS = bytes(20)

CHAIN_ID = 31337
