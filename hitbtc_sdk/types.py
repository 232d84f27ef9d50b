"""Type definitions for the HitBTC SDK."""

import os
from enum import Enum
from typing import Any, Optional
from multidict import CIMultiDict
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ============================================================================
# Enums
# ============================================================================


class Side(str, Enum):
    """Order side."""

    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    """Order type."""

    LIMIT = "limit"
    MARKET = "market"
    STOP_LIMIT = "stopLimit"
    STOP_MARKET = "stopMarket"


class TimeInForce(str, Enum):
    """Order time in force."""

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"
    DAY = "Day"
    GTD = "GTD"


class OrderStatus(str, Enum):
    """Order status."""

    NEW = "new"
    SUSPENDED = "suspended"
    PARTIALLY_FILLED = "partiallyFilled"
    FILLED = "filled"
    CANCELED = "canceled"
    EXPIRED = "expired"


class TransactionStatus(str, Enum):
    """Account transaction status."""

    CREATED = "created"
    PENDING = "pending"
    FAILED = "failed"
    SUCCESS = "success"


class TransactionType(str, Enum):
    """Account transaction type."""

    PAYOUT = "payout"
    PAYIN = "payin"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    BANK_TO_EXCHANGE = "bankToExchange"
    EXCHANGE_TO_BANK = "exchangeToBank"


class TransferType(str, Enum):
    """Direction of a transfer between the account and trading balances."""

    BANK_TO_EXCHANGE = "bankToExchange"
    EXCHANGE_TO_BANK = "exchangeToBank"


class CandlePeriod(str, Enum):
    """Candle periods accepted by the candles endpoint."""

    M1 = "M1"
    M3 = "M3"
    M5 = "M5"
    M15 = "M15"
    M30 = "M30"
    H1 = "H1"
    H4 = "H4"
    D1 = "D1"
    D7 = "D7"
    MONTH1 = "1M"


# ============================================================================
# Credentials
# ============================================================================


class ApiAuth(BaseModel):
    """API key pair. Passphrase is only used by message-signing setups."""

    model_config = ConfigDict(frozen=True)

    public_key: str
    private_key: str = Field(repr=False)
    passphrase: Optional[str] = Field(default=None, repr=False)

    @classmethod
    def from_env(cls, prefix: str = "HITBTC_") -> Optional["ApiAuth"]:
        """
        Load credentials from the environment.

        Reads ``{prefix}PUBLIC_KEY``, ``{prefix}PRIVATE_KEY`` and
        ``{prefix}PASSPHRASE``.

        Returns:
            ApiAuth, or None when the key pair is incomplete
        """
        public_key = os.environ.get(f"{prefix}PUBLIC_KEY")
        private_key = os.environ.get(f"{prefix}PRIVATE_KEY")
        if not public_key or not private_key:
            return None
        return cls(
            public_key=public_key,
            private_key=private_key,
            passphrase=os.environ.get(f"{prefix}PASSPHRASE"),
        )


# ============================================================================
# Transport
# ============================================================================


class HitBTCResponse(BaseModel):
    """
    A completed HTTP exchange: status, headers and decoded body.

    Headers are case-insensitive and keep repeated fields such as
    ``Set-Cookie``; use ``headers.getall(name)`` to read every value.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: int
    headers: CIMultiDict = Field(default_factory=CIMultiDict)
    data: Any = None

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, value: Any) -> CIMultiDict:
        if value is None:
            return CIMultiDict()
        return CIMultiDict(value)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Signature(BaseModel):
    """HMAC digest and the timestamp it was computed with."""

    digest: str
    timestamp: float


# ============================================================================
# Domain Models
# ============================================================================


class HitBTCModel(BaseModel):
    """Base for API payloads: camelCase on the wire, extra fields kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Symbol(HitBTCModel):
    """Trading pair."""

    id: str
    base_currency: str
    quote_currency: str
    quantity_increment: str
    tick_size: str
    take_liquidity_rate: Optional[str] = None
    provide_liquidity_rate: Optional[str] = None
    fee_currency: Optional[str] = None


class Currency(HitBTCModel):
    """Currency information."""

    id: str
    full_name: str
    crypto: bool
    payin_enabled: Optional[bool] = None
    payin_payment_id: Optional[bool] = None
    payin_confirmations: Optional[int] = None
    payout_enabled: Optional[bool] = None
    payout_is_payment_id: Optional[bool] = None
    transfer_enabled: Optional[bool] = None


class Ticker(HitBTCModel):
    """24h ticker for a symbol."""

    symbol: str
    ask: Optional[str] = None
    bid: Optional[str] = None
    last: Optional[str] = None
    low: Optional[str] = None
    high: Optional[str] = None
    open: Optional[str] = None
    volume: Optional[str] = None
    volume_quote: Optional[str] = None
    timestamp: str


class PublicTrade(HitBTCModel):
    """Trade from the public tape."""

    id: int
    price: str
    quantity: str
    side: Side
    timestamp: str


class OrderBookEntry(HitBTCModel):
    """Order book price level."""

    price: str
    size: str


class OrderBook(HitBTCModel):
    """Order book snapshot."""

    asks: list[OrderBookEntry]
    bids: list[OrderBookEntry]
    timestamp: Optional[str] = None


class Candle(HitBTCModel):
    """OHLC candle. HitBTC names the low and high ``min`` and ``max``."""

    timestamp: str
    open: str
    close: str
    min: str
    max: str
    volume: str
    volume_quote: str


class TradingFee(HitBTCModel):
    """Fee rates for a symbol."""

    take_liquidity_rate: str
    provide_liquidity_rate: str


class TradeReport(HitBTCModel):
    """Fill attached to an order."""

    id: int
    quantity: str
    price: str
    fee: str
    timestamp: str


class Order(HitBTCModel):
    """Order information."""

    id: int
    client_order_id: str
    symbol: str
    side: Side
    status: OrderStatus
    type: OrderType
    time_in_force: TimeInForce
    quantity: str
    price: Optional[str] = None
    cum_quantity: str
    created_at: str
    updated_at: str
    stop_price: Optional[str] = None
    expire_time: Optional[str] = None
    trades_report: Optional[list[TradeReport]] = None


class Trade(HitBTCModel):
    """Trade from the account's history."""

    id: int
    client_order_id: str
    order_id: int
    symbol: str
    side: Side
    quantity: str
    fee: str
    price: str
    timestamp: str


class Balance(HitBTCModel):
    """Balance for one currency."""

    currency: str
    available: str
    reserved: str


class Transaction(HitBTCModel):
    """Account transaction."""

    id: str
    index: Optional[str] = None
    currency: str
    amount: str
    fee: Optional[str] = None
    network_fee: Optional[str] = None
    address: Optional[str] = None
    payment_id: Optional[str] = None
    hash: Optional[str] = None
    status: TransactionStatus
    type: TransactionType
    created_at: str
    updated_at: str


class Address(HitBTCModel):
    """Crypto deposit address."""

    address: str
    payment_id: Optional[str] = None


class WithdrawConfirm(HitBTCModel):
    """Result of committing or rolling back a withdrawal."""

    result: bool


class IdResult(HitBTCModel):
    """Identifier returned by withdrawals and transfers."""

    id: str


class ErrorDetail(HitBTCModel):
    """The ``error`` object of a failed HitBTC response."""

    code: int
    message: str
    description: Optional[str] = None
