"""HitBTC SDK for Python."""

# Main client
from .client import HitBTCClient, parse_response

# Request agent and transport
from .agent import RawAgent
from .http import HTTPClient, encode_query

# Configuration and signing
from .config import ClientConfig, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .signing import sign_message

from .logger import Logger, ConsoleLogger, NoopLogger, LogLevel

# Types
from .types import (
    ApiAuth,
    HitBTCResponse,
    Signature,
    Side,
    OrderType,
    TimeInForce,
    OrderStatus,
    TransactionStatus,
    TransactionType,
    TransferType,
    CandlePeriod,
    Symbol,
    Currency,
    Ticker,
    PublicTrade,
    OrderBookEntry,
    OrderBook,
    Candle,
    TradingFee,
    TradeReport,
    Order,
    Trade,
    Balance,
    Transaction,
    Address,
    WithdrawConfirm,
    IdResult,
    ErrorDetail,
)

# Request parameters
from .params import (
    RequestParams,
    TradesInfoParams,
    OrderBookParams,
    CandleParams,
    NewOrderParams,
    CancelAllOrdersParams,
    GetOrderParams,
    NewClientIdOrderParams,
    ReplaceOrderParams,
    TradesHistoryParams,
    OrdersHistoryParams,
    AccountTransactionsParams,
    WithdrawCryptoParams,
    TransferParams,
)

# Exceptions
from .exceptions import (
    HitBTCError,
    AuthRequiredError,
    APIError,
    ResponseParseError,
    SigningError,
    unwrap_error,
)

__all__ = [
    # Clients
    "HitBTCClient",
    "RawAgent",
    "HTTPClient",
    "parse_response",
    "encode_query",
    # Configuration
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "sign_message",
    # Logging
    "Logger",
    "ConsoleLogger",
    "NoopLogger",
    "LogLevel",
    # Types
    "ApiAuth",
    "HitBTCResponse",
    "Signature",
    "Side",
    "OrderType",
    "TimeInForce",
    "OrderStatus",
    "TransactionStatus",
    "TransactionType",
    "TransferType",
    "CandlePeriod",
    "Symbol",
    "Currency",
    "Ticker",
    "PublicTrade",
    "OrderBookEntry",
    "OrderBook",
    "Candle",
    "TradingFee",
    "TradeReport",
    "Order",
    "Trade",
    "Balance",
    "Transaction",
    "Address",
    "WithdrawConfirm",
    "IdResult",
    "ErrorDetail",
    # Params
    "RequestParams",
    "TradesInfoParams",
    "OrderBookParams",
    "CandleParams",
    "NewOrderParams",
    "CancelAllOrdersParams",
    "GetOrderParams",
    "NewClientIdOrderParams",
    "ReplaceOrderParams",
    "TradesHistoryParams",
    "OrdersHistoryParams",
    "AccountTransactionsParams",
    "WithdrawCryptoParams",
    "TransferParams",
    # Exceptions
    "HitBTCError",
    "AuthRequiredError",
    "APIError",
    "ResponseParseError",
    "SigningError",
    "unwrap_error",
]

__version__ = "0.1.0"
