"""Standard test private keys and their addresses.

All keys are 32 bytes; addresses are 20-byte canonical form.
"""

from eth_keys import keys

ALICE_PRIVATE_KEY = bytes.fromhex("01" * 32)
BOB_PRIVATE_KEY = bytes.fromhex("02" * 32)
CHARLIE_PRIVATE_KEY = bytes.fromhex("03" * 32)

# Known keypair from Ethereum tests
KNOWN_TEST_KEY = bytes.fromhex(
    "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
)


def derive_address(private_key: bytes) -> bytes:
    """Derive the 20-byte address of a private key with eth-keys."""
    return keys.PrivateKey(private_key).public_key.to_canonical_address()


ALICE_ADDRESS = derive_address(ALICE_PRIVATE_KEY)
BOB_ADDRESS = derive_address(BOB_PRIVATE_KEY)
CHARLIE_ADDRESS = derive_address(CHARLIE_PRIVATE_KEY)
KNOWN_TEST_ADDRESS = derive_address(KNOWN_TEST_KEY)
