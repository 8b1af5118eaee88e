"""Core exceptions for the Melon fund client."""

from decimal import Decimal


class MelonClientError(Exception):
    """Base exception for all client errors."""

    pass


class InvalidStateTransitionError(MelonClientError):
    """Raised when an invalid state transition is attempted."""

    pass


class ConfigurationError(MelonClientError):
    """Raised when configuration is invalid."""

    pass


class UnknownContractMethodError(MelonClientError):
    """Raised when a method is not part of a contract's ABI."""

    def __init__(self, contract: str, method: str):
        self.contract = contract
        self.method = method
        super().__init__(f"Method {method} is not defined in the {contract} ABI")


class TransactionFailedError(MelonClientError):
    """Raised when a mined transaction reports a failed status."""

    def __init__(self, tx_hash: str, message: str | None = None):
        self.tx_hash = tx_hash
        super().__init__(message or f"Transaction {tx_hash} failed (status=0)")


class ValidationError(MelonClientError):
    """Base exception for precondition failures of state-changing calls."""

    pass


class SenderIsNotManagerError(ValidationError):
    """Raised when the sender is not the manager of the fund."""

    def __init__(self, sender: str, manager: str, message: str | None = None):
        self.sender = sender
        self.manager = manager
        super().__init__(message or "Sender is not the manager of the fund.")


class OutOfBalanceError(ValidationError):
    """Raised when the vault holds less than the requested amount."""

    def __init__(self, amount: Decimal, balance: Decimal, message: str | None = None):
        self.amount = amount
        self.balance = balance
        super().__init__(message or "Requested amount exceeds current balance.")


class ExchangeNotRegisteredWithFundError(ValidationError):
    """Raised when an exchange is not registered with the fund's trading contract."""

    def __init__(self, exchange: str, message: str | None = None):
        self.exchange = exchange
        super().__init__(message or f"Exchange {exchange} is not registered for this fund.")


class FundIsShutDownError(ValidationError):
    """Raised when the fund has been shut down."""

    def __init__(self, hub: str, message: str | None = None):
        self.hub = hub
        super().__init__(message or "The fund has been shut down.")


class CooldownForMakerAssetNotReachedError(ValidationError):
    """Raised when a make order is placed before the asset cooldown has passed."""

    def __init__(self, asset: str, cooldown_end: int, message: str | None = None):
        self.asset = asset
        self.cooldown_end = cooldown_end
        super().__init__(
            message or f"Cooldown period for maker asset {asset} ends at {cooldown_end}."
        )


class ExistingOpenMakeOrderError(ValidationError):
    """Raised when the fund already has an open make order for the asset."""

    def __init__(self, asset: str, message: str | None = None):
        self.asset = asset
        super().__init__(message or f"An open make order already exists for asset {asset}.")


class MissingOrderIdentifierError(ValidationError):
    """Raised when an order cancellation has neither an order hash nor an order id."""

    def __init__(self, message: str = "Missing order hash hex or order id."):
        super().__init__(message)


class InvalidOrderIdentifierError(ValidationError):
    """Raised when a numeric order id is negative or wider than 256 bits."""

    def __init__(self, order_id: int, message: str | None = None):
        self.order_id = order_id
        super().__init__(message or f"Order id {order_id} does not fit in a bytes32 identifier.")


class InvalidAssetDataError(ValidationError):
    """Raised when asset data cannot be decoded as ERC20 asset data."""

    pass


class JsonRpcError(MelonClientError):
    """Raised when a JSON-RPC request sent through the signing shim returns an error."""

    def __init__(self, method: str, code: int | None, message: str):
        self.method = method
        self.code = code
        super().__init__(f"{method} failed: {message}")


class InvalidOrderSignatureError(ValidationError):
    """Raised when an order submitted to an exchange carries no signature."""

    def __init__(self, message: str = "Invalid order signature."):
        super().__init__(message)
