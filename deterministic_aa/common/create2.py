"""CREATE2 address computation utilities (EIP-1014).

Every account factory deploys its proxies with CREATE2, so the address of an
account is known before it exists:
    address = keccak256(0xff ++ deployer ++ salt ++ keccak256(init_code))[12:]

Reference: https://eips.ethereum.org/EIPS/eip-1014
"""

from deterministic_aa.common.crypto import keccak256


def compute_create2_address(
    sender: bytes,
    salt: bytes,
    init_code: bytes,
) -> bytes:
    """
    Compute CREATE2 contract address.

    Args:
        sender: 20-byte deployer address (the account factory)
        salt: 32-byte deployment salt
        init_code: Proxy creation code with its constructor arguments appended

    Returns:
        20-byte predicted contract address

    Raises:
        ValueError: If sender is not 20 bytes or salt is not 32 bytes

    Example:
        >>> sender = bytes(20)
        >>> salt = bytes(32)
        >>> compute_create2_address(sender, salt, b"\\x00").hex()
        '4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38'
    """
    return compute_create2_address_with_code_hash(sender, salt, keccak256(init_code))


def compute_create2_address_with_code_hash(
    sender: bytes,
    salt: bytes,
    init_code_hash: bytes,
) -> bytes:
    """
    Compute CREATE2 address with pre-computed init_code hash.

    Args:
        sender: 20-byte deployer address
        salt: 32-byte salt value
        init_code_hash: 32-byte keccak256 hash of init_code

    Returns:
        20-byte predicted contract address

    Raises:
        ValueError: If lengths are incorrect
    """
    if len(sender) != 20:
        raise ValueError(f"Sender must be 20 bytes, got {len(sender)}")
    if len(salt) != 32:
        raise ValueError(f"Salt must be 32 bytes, got {len(salt)}")
    if len(init_code_hash) != 32:
        raise ValueError(f"Init code hash must be 32 bytes, got {len(init_code_hash)}")

    preimage = b'\xff' + sender + salt + init_code_hash
    return keccak256(preimage)[12:]
