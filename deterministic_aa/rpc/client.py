"""
Read-only contract calls.

Everything this package needs from a chain is an ``eth_call``: the EIP-712
domain of a contract, the owners of an account, an account's message hash.
A ``ContractReader`` is any object with an async ``call(to, data)`` that
returns the raw return data; ``Web3ContractReader`` is the JSON-RPC one.
Retries and timeouts belong to the transport, not to this package.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence, Union

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import to_checksum_address
from web3 import AsyncHTTPProvider, AsyncWeb3

from deterministic_aa.common.abi import encode_call
from deterministic_aa.common.errors import ContractCallError

logger = logging.getLogger(__name__)


class ContractReader(Protocol):
    async def call(self, to: bytes, data: bytes) -> bytes:
        """Execute an eth_call against the latest block and return its output."""
        ...


class Web3ContractReader:
    """ContractReader backed by web3's async JSON-RPC provider."""

    def __init__(self, endpoint: Union[str, AsyncWeb3]) -> None:
        if isinstance(endpoint, str):
            endpoint = AsyncWeb3(AsyncHTTPProvider(endpoint))
        self.w3 = endpoint

    async def call(self, to: bytes, data: bytes) -> bytes:
        result = await self.w3.eth.call(
            {"to": to_checksum_address(to), "data": "0x" + data.hex()},
            "latest",
        )
        return bytes(result)


async def call_function(
    reader: ContractReader,
    to: bytes,
    signature: str,
    args: Sequence[Any] = (),
    output_types: Sequence[str] = (),
) -> tuple:
    """Call ``signature`` on ``to`` and decode the result as ``output_types``.

    Raises ContractCallError when the call fails or its output does not
    decode; the original exception is chained.
    """
    data = encode_call(signature, args)
    logger.debug("eth_call %s on %s", signature, to_checksum_address(to))
    try:
        output = await reader.call(to, data)
    except Exception as exc:
        raise ContractCallError(to, signature, f"call failed: {exc}") from exc

    try:
        return tuple(decode(list(output_types), output))
    except (DecodingError, ValueError) as exc:
        raise ContractCallError(
            to, signature, f"malformed return data ({len(output)} bytes): {exc}"
        ) from exc
