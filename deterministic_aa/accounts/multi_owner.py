"""
Multi-Owner Modular Account.

The factory folds the initial owner list into the CREATE2 salt
(``keccak256(abi.encode(salt, abi.encode(owners)))``) rather than into the
proxy constructor, so the deterministic account factory address shows up in
the salt and not in the init code. Ownership is held by the multi-owner
plugin, which is also where owners and message hashes are read.
"""

from __future__ import annotations

from typing import Optional

from deterministic_aa.accounts.base import AccountAdapter
from deterministic_aa.common.abi import encode_call, encode_params
from deterministic_aa.common.config import (
    MODULAR_ACCOUNT_IMPLEMENTATION,
    MULTI_OWNER_PLUGIN,
)
from deterministic_aa.common.crypto import keccak256
from deterministic_aa.common.errors import ConfigurationError
from deterministic_aa.common.types import AccountFactoryKind, to_address
from deterministic_aa.rpc.client import ContractReader, call_function

# ERC1967Proxy creation code as compiled into MultiOwnerModularAccountFactory
PROXY_CREATION_CODE = bytes.fromhex(
    "60406080815261042c908138038061001681610218565b93843982019181818403126102135780516001600160a01b038116808203610213576020838101516001600160401b0394919391858211610213570186601f820112156102135780519061007161006c83610253565b610218565b918083528583019886828401011161021357888661008f930161026e565b813b156101b9577f360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc80546001600160a01b031916841790556000927fbc7cd75a20ee27fd9adebab32041f755214dbc6bffa90cc0225b39da2e5c2d3b8480a28051158015906101b2575b61010b575b855160e790816103458239f35b855194606086019081118682101761019e578697849283926101889952602788527f416464726573733a206c6f772d6c6576656c2064656c65676174652063616c6c87890152660819985a5b195960ca1b8a8901525190845af4913d15610194573d9061017a61006c83610253565b91825281943d92013e610291565b508038808080806100fe565b5060609250610291565b634e487b7160e01b84526041600452602484fd5b50826100f9565b855162461bcd60e51b815260048101859052602d60248201527f455243313936373a206e657720696d706c656d656e746174696f6e206973206e60448201526c1bdd08184818dbdb9d1c9858dd609a1b6064820152608490fd5b600080fd5b6040519190601f01601f191682016001600160401b0381118382101761023d57604052565b634e487b7160e01b600052604160045260246000fd5b6001600160401b03811161023d57601f01601f191660200190565b60005b8381106102815750506000910152565b8181015183820152602001610271565b919290156102f357508151156102a5575090565b3b156102ae5790565b60405162461bcd60e51b815260206004820152601d60248201527f416464726573733a2063616c6c20746f206e6f6e2d636f6e74726163740000006044820152606490fd5b8251909150156103065750805190602001fd5b6044604051809262461bcd60e51b825260206004830152610336815180928160248601526020868601910161026e565b601f01601f19168101030190fdfe60806040523615605f5773ffffffffffffffffffffffffffffffffffffffff7f360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc54166000808092368280378136915af43d82803e15605b573d90f35b3d90fd5b73ffffffffffffffffffffffffffffffffffffffff7f360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc54166000808092368280378136915af43d82803e15605b573d90f3fea26469706673582212208f3104255ee3c201238ea03e118ee6ec0a2cff51cbfbdc3af1727982a5a959a564736f6c63430008160033"
)


class MultiOwnerModularAccountAdapter(AccountAdapter):
    kind = AccountFactoryKind.MULTI_OWNER_MODULAR_ACCOUNT

    def init_code(self, authorizing_factory: bytes) -> bytes:
        # Proxy without initializer call; the factory initializes afterwards
        return PROXY_CREATION_CODE + encode_params(
            ["address", "string"], [MODULAR_ACCOUNT_IMPLEMENTATION, ""]
        )

    def deployment_salt(self, wrapped_salt: bytes, authorizing_factory: bytes) -> bytes:
        owners = encode_params(["address[]"], [[authorizing_factory]])
        return keccak256(encode_params(["bytes32", "bytes"], [wrapped_salt, owners]))

    def transfer_ownership_code(
        self, owner: bytes, authorizing_factory: Optional[bytes] = None
    ) -> bytes:
        if authorizing_factory is None:
            raise ConfigurationError(
                "Multi-owner transfer code must remove the authorizing factory, "
                "but none was given"
            )
        # The authorizing factory was the only owner during deployment
        return encode_call(
            "updateOwners(address[],address[])", [[owner], [authorizing_factory]]
        )

    async def read_owners(self, reader: ContractReader, account: bytes) -> list[bytes]:
        (owners,) = await call_function(
            reader, MULTI_OWNER_PLUGIN, "ownersOf(address)", [account], ["address[]"]
        )
        return [to_address(owner) for owner in owners]

    async def read_message_hash(
        self, reader: ContractReader, account: bytes, message: bytes
    ) -> bytes:
        (message_hash,) = await call_function(
            reader,
            MULTI_OWNER_PLUGIN,
            "getMessageHash(address,bytes)",
            [account, message],
            ["bytes32"],
        )
        return message_hash
