"""Signing primitives for off-chain 0x orders."""

from typing import Any

from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount
from web3 import Web3

from src.melon_client.core.enums import SignatureType
from src.melon_client.core.exceptions import JsonRpcError
from src.melon_client.core.interfaces import OrderSigner
from src.melon_client.models.order import ZeroExOrder
from src.melon_client.utils.address import same_address, to_checksum
from src.melon_client.utils.logger import get_logger
from src.melon_client.utils.order_hash import get_order_hash

logger = get_logger(__name__)


def to_zeroex_signature(rsv: bytes, signature_type: SignatureType = SignatureType.ETH_SIGN) -> str:
    """Convert an r, s, v signature into the 0x v, r, s, type layout.

    Args:
        rsv: 65-byte signature as returned by eth_sign
        signature_type: 0x signature type appended as the last byte

    Returns:
        str: 66-byte signature as hex
    """
    if len(rsv) != 65:
        raise ValueError(f"Expected a 65-byte signature, got {len(rsv)} bytes")

    r, s, v = rsv[:32], rsv[32:64], rsv[64]
    if v < 27:
        v += 27
    return Web3.to_hex(bytes([v]) + r + s + bytes([signature_type]))


class JsonRpcShim:
    """Minimal JSON-RPC request/response wrapper over a web3 provider."""

    def __init__(self, provider: Any):
        self.provider = provider

    async def send(self, method: str, params: list[Any]) -> Any:
        """Send a request and return its result.

        Raises:
            JsonRpcError: If the node answers with an error
        """
        response = await self.provider.make_request(method, params)
        error = response.get("error")
        if error:
            if isinstance(error, dict):
                raise JsonRpcError(method, error.get("code"), error.get("message", str(error)))
            raise JsonRpcError(method, None, str(error))
        return response["result"]


class JsonRpcOrderSigner(OrderSigner):
    """Signs orders with eth_sign on a node-managed account."""

    def __init__(self, shim: JsonRpcShim):
        self.shim = shim

    async def sign_order(self, order: ZeroExOrder, signer: str) -> str:
        order_hash = get_order_hash(order)
        result = await self.shim.send("eth_sign", [to_checksum(signer), order_hash])
        rsv = bytes.fromhex(result.removeprefix("0x")) if isinstance(result, str) else bytes(result)
        logger.debug("Order signed with eth_sign", signer=signer, order_hash=order_hash)
        return to_zeroex_signature(rsv)


class LocalAccountOrderSigner(OrderSigner):
    """Signs orders with a local eth_account account."""

    def __init__(self, account: LocalAccount):
        self.account = account

    async def sign_order(self, order: ZeroExOrder, signer: str) -> str:
        if not same_address(self.account.address, signer):
            raise ValueError(f"Local account {self.account.address} cannot sign for {signer}")

        order_hash = get_order_hash(order)
        signed = self.account.sign_message(encode_defunct(hexstr=order_hash))
        logger.debug("Order signed with local account", signer=signer, order_hash=order_hash)
        return to_zeroex_signature(bytes(signed.signature))
