"""Constants for the Melon fund client."""

# Zero sentinels for unused call-on-exchange slots
ZERO_ADDRESS = "0x" + "0" * 40
ZERO_BYTES32 = "0x" + "0" * 64
ZERO_AMOUNT = 0

# Fixed arity of the callOnExchange address and value arrays
ORDER_ADDRESSES_LENGTH = 6
ORDER_VALUES_LENGTH = 8

# Cache key component used when a call targets the latest block
LATEST_BLOCK = "latest"

# Order Configuration
DEFAULT_ORDER_DURATION_SECONDS = 24 * 60 * 60  # 0x make orders expire after one day
ORDER_IDENTIFIER_BYTES = 32  # Random identifier attached to make orders
MAX_UINT256 = 2**256 - 1  # Largest numeric order id that fits a bytes32 identifier

# 0x v2 protocol
ZEROEX_ERC20_PROXY_ID = "0xf47261b0"  # bytes4(keccak256("ERC20Token(address)"))
ZEROEX_EIP712_DOMAIN_NAME = "0x Protocol"
ZEROEX_EIP712_DOMAIN_VERSION = "2"
ZEROEX_EIP712_DOMAIN_SCHEMA = (
    "EIP712Domain(string name,string version,address verifyingContract)"
)
ZEROEX_ORDER_SCHEMA = (
    "Order("
    "address makerAddress,"
    "address takerAddress,"
    "address feeRecipientAddress,"
    "address senderAddress,"
    "uint256 makerAssetAmount,"
    "uint256 takerAssetAmount,"
    "uint256 makerFee,"
    "uint256 takerFee,"
    "uint256 expirationTimeSeconds,"
    "uint256 salt,"
    "bytes makerAssetData,"
    "bytes takerAssetData"
    ")"
)

# Transaction Confirmation
TRANSACTION_TIMEOUT_SECONDS = 120  # Timeout for transaction confirmation
