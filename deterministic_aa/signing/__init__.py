"""CreateAccount typed-data signing."""

from .eip712 import (
    CreateAccountMessage,
    DelegateMessage,
    TypedDataDomain,
    build_create_account_message,
    create_account_digest,
    signable_message,
    to_typed_data,
    typed_data_digest,
)
from .domain import resolve_domain
from .signers import ContractAccountSigner, DelegateSigner, EOASigner, Signer
from .builder import get_create_account_signature, recover_signer, sign

__all__ = [
    "CreateAccountMessage",
    "DelegateMessage",
    "TypedDataDomain",
    "build_create_account_message",
    "create_account_digest",
    "signable_message",
    "to_typed_data",
    "typed_data_digest",
    "resolve_domain",
    "ContractAccountSigner",
    "DelegateSigner",
    "EOASigner",
    "Signer",
    "get_create_account_signature",
    "recover_signer",
    "sign",
]
