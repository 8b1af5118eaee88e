"""Contract ABI fragments used by the Melon fund client.

Only the functions the client reads or sends are listed. Signature tables are
derived from these fragments once, at import time.
"""

from typing import Any

from web3 import Web3


def _fn(
    name: str,
    inputs: list[tuple[str, str]] | None = None,
    outputs: list[tuple[str, str]] | None = None,
    mutability: str = "view",
) -> dict[str, Any]:
    """Build a function ABI entry from (name, type) pairs."""
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs or []],
        "outputs": [{"name": n, "type": t} for n, t in outputs or []],
        "stateMutability": mutability,
    }


def _uint_getter(name: str) -> dict[str, Any]:
    return _fn(name, outputs=[("", "uint256")])


def _address_getter(name: str) -> dict[str, Any]:
    return _fn(name, outputs=[("", "address")])


_ORDER_INPUTS = [
    ("orderAddresses", "address[6]"),
    ("orderValues", "uint256[8]"),
    ("identifier", "bytes32"),
    ("makerAssetData", "bytes"),
    ("takerAssetData", "bytes"),
    ("signature", "bytes"),
]

ERC20_ABI: list[dict[str, Any]] = [
    _fn("balanceOf", inputs=[("_owner", "address")], outputs=[("balance", "uint256")]),
    _fn("decimals", outputs=[("", "uint8")]),
    _fn("symbol", outputs=[("", "string")]),
]

ENGINE_ABI: list[dict[str, Any]] = [
    _uint_getter("amguPrice"),
    _uint_getter("enginePrice"),
    _uint_getter("frozenEther"),
    _uint_getter("liquidEther"),
    _uint_getter("premiumPercent"),
    _address_getter("registry"),
    _uint_getter("totalEtherConsumed"),
    _uint_getter("totalAmguConsumed"),
    _uint_getter("totalMlnBurned"),
]

AMGU_CONSUMER_ABI: list[dict[str, Any]] = [
    _address_getter("mlnToken"),
    _address_getter("engine"),
    _address_getter("priceSource"),
    _address_getter("version"),
]

BOOLEAN_POLICY_ABI: list[dict[str, Any]] = [
    _fn("position", outputs=[("", "uint8")], mutability="pure"),
]

HUB_ABI: list[dict[str, Any]] = [
    _address_getter("manager"),
    _fn("isShutDown", outputs=[("", "bool")]),
    _fn("name", outputs=[("", "string")]),
]

SPOKE_ABI: list[dict[str, Any]] = [
    _address_getter("hub"),
    _fn(
        "routes",
        outputs=[
            ("accounting", "address"),
            ("feeManager", "address"),
            ("participation", "address"),
            ("policyManager", "address"),
            ("shares", "address"),
            ("trading", "address"),
            ("vault", "address"),
            ("priceSource", "address"),
            ("registry", "address"),
            ("version", "address"),
            ("engine", "address"),
            ("mlnToken", "address"),
        ],
    ),
]

TRADING_ABI: list[dict[str, Any]] = [
    *SPOKE_ABI,
    _fn(
        "getExchangeInfo",
        outputs=[("", "address[]"), ("", "address[]"), ("", "bool[]")],
    ),
    _fn("isInOpenMakeOrder", inputs=[("", "address")], outputs=[("", "bool")]),
    _fn("makerAssetCooldown", inputs=[("", "address")], outputs=[("", "uint256")]),
    _fn(
        "exchangesToOpenMakeOrders",
        inputs=[("", "address"), ("", "address")],
        outputs=[
            ("id", "uint256"),
            ("expiresAt", "uint256"),
            ("orderIndex", "uint256"),
            ("buyAsset", "address"),
        ],
    ),
    _fn(
        "callOnExchange",
        inputs=[
            ("exchangeIndex", "uint256"),
            ("methodSignature", "string"),
            *_ORDER_INPUTS,
        ],
        mutability="nonpayable",
    ),
]

EXCHANGE_ADAPTER_ABI: list[dict[str, Any]] = [
    _fn(name, inputs=[("targetExchange", "address"), *_ORDER_INPUTS], mutability="nonpayable")
    for name in ("makeOrder", "takeOrder", "cancelOrder")
]

MATCHING_MARKET_ABI: list[dict[str, Any]] = [
    _fn(
        "getOffer",
        inputs=[("id", "uint256")],
        outputs=[
            ("payAmt", "uint256"),
            ("payGem", "address"),
            ("buyAmt", "uint256"),
            ("buyGem", "address"),
        ],
    ),
    _fn("getOwner", inputs=[("id", "uint256")], outputs=[("owner", "address")]),
]


def function_signatures(abi: list[dict[str, Any]]) -> dict[str, str]:
    """Map function names to their canonical signatures.

    Args:
        abi: Contract ABI

    Returns:
        dict[str, str]: e.g. {"balanceOf": "balanceOf(address)"}
    """
    signatures = {}
    for item in abi:
        if item.get("type") != "function":
            continue
        input_types = ",".join(inp["type"] for inp in item["inputs"])
        signatures[item["name"]] = f"{item['name']}({input_types})"
    return signatures


def function_selector(signature: str) -> str:
    """Compute the 4-byte selector of a canonical function signature."""
    return "0x" + Web3.keccak(text=signature).hex().removeprefix("0x")[:8]
