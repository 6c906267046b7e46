"""
deterministic-aa command-line interface.

Sub-commands:
  predict        Predict the address of an account (offline)
  transfer-code  Print the ownership-transfer call-data of an account kind
  domain         Read the EIP-712 domain of a contract
  sign           Build a CreateAccount signature for a securing identity
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from eth_utils import to_checksum_address

from deterministic_aa.common.config import NetworkConfig
from deterministic_aa.common.errors import ConfigurationError, DeterministicAAError
from deterministic_aa.common.types import AccountFactoryKind
from deterministic_aa.predictor import get_transfer_ownership_code, predict_address
from deterministic_aa.rpc.client import Web3ContractReader
from deterministic_aa.signing.builder import get_create_account_signature
from deterministic_aa.signing.domain import resolve_domain
from deterministic_aa.signing.signers import (
    ContractAccountSigner,
    DelegateSigner,
    EOASigner,
    Signer,
)

logger = logging.getLogger("deterministic_aa")

KIND_CHOICES = [kind.cli_name for kind in AccountFactoryKind]


def _parse_private_key(value: str) -> bytes:
    try:
        key = bytes.fromhex(value.removeprefix("0x"))
    except ValueError:
        raise argparse.ArgumentTypeError("private key must be hex") from None
    if len(key) != 32:
        raise argparse.ArgumentTypeError("private key must be 32 bytes")
    return key


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deterministic-aa",
        description="Counterfactual account addresses and CreateAccount signatures",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    predict = sub.add_parser("predict", help="Predict an account address")
    predict.add_argument("--kind", choices=KIND_CHOICES, required=True)
    predict.add_argument("--salt", required=True, help="uint256 as decimal or 0x-hex")
    predict.add_argument("--secured-by", required=True, help="Securing identity address")
    predict.add_argument("--factory", required=True, help="Authorizing factory address")
    predict.add_argument("--deployer", default=None, help="Override CREATE2 deployer")

    transfer = sub.add_parser("transfer-code", help="Print ownership-transfer call-data")
    transfer.add_argument("--kind", choices=KIND_CHOICES, required=True)
    transfer.add_argument("--owner", required=True)
    transfer.add_argument("--factory", default=None, help="Authorizing factory address")

    domain = sub.add_parser("domain", help="Read the EIP-712 domain of a contract")
    domain.add_argument("--rpc-url", required=True)
    domain.add_argument("--contract", required=True)

    sign = sub.add_parser("sign", help="Build a CreateAccount signature")
    sign.add_argument("--rpc-url", required=True)
    sign.add_argument("--kind", choices=KIND_CHOICES, required=True)
    sign.add_argument("--salt", required=True)
    sign.add_argument("--owner", required=True, help="Owner after deployment")
    sign.add_argument("--factory", required=True, help="Authorizing factory address")
    sign.add_argument(
        "--signer-type", choices=["eoa", "delegate", "contract"], default="eoa"
    )
    sign.add_argument("--signer-address", required=True, help="Securing identity")
    sign.add_argument("--delegate", default=None, help="Delegate key address")
    sign.add_argument(
        "--account-kind",
        choices=KIND_CHOICES,
        default=AccountFactoryKind.LIGHT_ACCOUNT.cli_name,
        help="Account kind of a contract signer",
    )
    sign.add_argument("--private-key", type=_parse_private_key, required=True)
    return parser


def parse_salt(value: str) -> int | str:
    """Decimal salts become ints; anything else is left to the salt normalizer."""
    return int(value) if value.isdigit() else value


def build_signer(args: argparse.Namespace) -> Signer:
    if args.signer_type == "eoa":
        return EOASigner(args.signer_address, args.private_key)
    if args.signer_type == "delegate":
        if args.delegate is None:
            raise ConfigurationError("--delegate is required for delegate signers")
        return DelegateSigner(args.signer_address, args.delegate, args.private_key)
    return ContractAccountSigner(
        args.signer_address, args.private_key, AccountFactoryKind.parse(args.account_kind)
    )


async def _run_sign(args: argparse.Namespace) -> str:
    config = NetworkConfig(rpc_url=args.rpc_url, authorizing_factory=args.factory)
    reader = Web3ContractReader(config.require_rpc_url())
    signature = await get_create_account_signature(
        reader,
        AccountFactoryKind.parse(args.kind),
        parse_salt(args.salt),
        args.owner,
        build_signer(args),
        config=config,
    )
    return "0x" + signature.hex()


async def _run_domain(args: argparse.Namespace) -> str:
    reader = Web3ContractReader(args.rpc_url)
    domain = await resolve_domain(reader, args.contract)
    return (
        f"name={domain.name} version={domain.version} chainId={domain.chain_id} "
        f"verifyingContract={to_checksum_address(domain.verifying_contract)}"
    )


def run(args: argparse.Namespace) -> str:
    if args.command == "predict":
        return predict_address(
            AccountFactoryKind.parse(args.kind),
            parse_salt(args.salt),
            args.secured_by,
            authorizing_factory=args.factory,
            deployer=args.deployer,
        )
    if args.command == "transfer-code":
        code = get_transfer_ownership_code(
            AccountFactoryKind.parse(args.kind), args.owner, authorizing_factory=args.factory
        )
        return "0x" + code.hex()
    if args.command == "domain":
        return asyncio.run(_run_domain(args))
    return asyncio.run(_run_sign(args))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        output = run(args)
    except (DeterministicAAError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
