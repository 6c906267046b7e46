"""Exceptions raised by address prediction and signature building."""

from __future__ import annotations

from typing import Any, Sequence

from eth_utils import to_checksum_address


def _format_address(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)) and len(value) == 20:
        return to_checksum_address(bytes(value))
    return repr(value)


class DeterministicAAError(Exception):
    """Base class for all errors of this package."""


class InvalidSalt(DeterministicAAError):
    """Salt is not a uint256 (out of range, negative, or not parseable)."""

    def __init__(self, value: Any, reason: str = "out of uint256 range") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid salt {value!r}: {reason}")


class UnsupportedFactory(DeterministicAAError):
    """Account factory kind has no registered adapter."""

    def __init__(self, kind: Any, reason: str = "no adapter registered") -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Unsupported factory {_format_address(kind)}: {reason}")


class UnsupportedSignerKind(DeterministicAAError):
    """Signer is not one of the supported signer variants."""

    def __init__(self, signer: Any, reason: str = "unknown signer kind") -> None:
        self.signer = signer
        self.reason = reason
        super().__init__(f"Unsupported signer {type(signer).__name__}: {reason}")


class ContractCallError(DeterministicAAError):
    """A read-only contract call failed or returned undecodable data."""

    def __init__(self, address: bytes, function: str, reason: str) -> None:
        self.address = address
        self.function = function
        self.reason = reason
        super().__init__(
            f"Call to {function} on {_format_address(address)} failed: {reason}"
        )


class DomainResolutionError(ContractCallError):
    """The EIP-712 domain of a contract could not be read."""


class OwnerMismatch(DeterministicAAError):
    """Key-derived address is not an owner recorded by the account on-chain."""

    def __init__(self, account: bytes, expected: Sequence[bytes], actual: bytes) -> None:
        self.account = account
        self.expected = tuple(expected)
        self.actual = actual
        owners = ", ".join(_format_address(owner) for owner in self.expected) or "<none>"
        super().__init__(
            f"Account {_format_address(account)} is owned by [{owners}], "
            f"but the signing key belongs to {_format_address(actual)}"
        )


class WalletUnavailable(DeterministicAAError):
    """Signer has no usable key bound to the address it claims."""

    def __init__(self, address: Any, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"No usable key for {_format_address(address)}: {reason}")


class ConfigurationError(DeterministicAAError):
    """Required configuration value is missing."""
