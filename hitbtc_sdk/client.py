"""HitBTC client: one method per REST operation."""

from typing import Any, Optional, Union
from pydantic import TypeAdapter, ValidationError

from .agent import RawAgent
from .config import ClientConfig
from .exceptions import ResponseParseError
from .logger import ConsoleLogger, Logger, LogLevel
from .params import (
    AccountTransactionsParams,
    CancelAllOrdersParams,
    CandleParams,
    GetOrderParams,
    NewClientIdOrderParams,
    NewOrderParams,
    OrderBookParams,
    OrdersHistoryParams,
    ParamsLike,
    ReplaceOrderParams,
    TradesHistoryParams,
    TradesInfoParams,
    TransferParams,
    WithdrawCryptoParams,
    to_payload,
)
from .types import (
    Address,
    ApiAuth,
    Balance,
    Candle,
    Currency,
    HitBTCResponse,
    IdResult,
    Order,
    OrderBook,
    PublicTrade,
    Symbol,
    Ticker,
    Trade,
    TradingFee,
    Transaction,
    WithdrawConfirm,
)

_adapters: dict[Any, TypeAdapter] = {}


def parse_response(response: HitBTCResponse, shape: Any) -> Any:
    """
    Validate a response body against a model or ``list[Model]``.

    Raises:
        ResponseParseError: If the body does not match
    """
    adapter = _adapters.get(shape)
    if adapter is None:
        adapter = _adapters[shape] = TypeAdapter(shape)
    try:
        return adapter.validate_python(response.data)
    except ValidationError as error:
        raise ResponseParseError(
            f"Unexpected response shape for {shape}: {error}", response
        ) from error


class HitBTCClient:
    """
    HitBTC REST client.

    Public market data works without credentials. Private methods raise
    :class:`AuthRequiredError` until the client holds API keys.

    Credentials never change on an existing client. :meth:`upgrade` returns
    a new client holding the keys and leaves this one anonymous, so keep
    the return value: ``client = client.upgrade(auth)``.

    Example:
        ```python
        async with HitBTCClient() as client:
            book = await client.get_order_book("ETHBTC", {"limit": 5})

            client = client.upgrade(ApiAuth(public_key="...", private_key="..."))
            order = await client.create_new_order(
                {"symbol": "ETHBTC", "side": "buy", "quantity": "0.1"}
            )
        ```
    """

    def __init__(
        self,
        auth: Optional[ApiAuth] = None,
        config: Optional[ClientConfig] = None,
        log_level: LogLevel = LogLevel.INFO,
        logger: Optional[Logger] = None,
        raw_agent: Optional[RawAgent] = None,
    ):
        """
        Initialize the client.

        Args:
            auth: API key pair
            config: Client configuration
            log_level: Minimum log level for the default console logger
            logger: Custom logger instance
            raw_agent: Request agent to wrap; ``auth`` and ``config`` are
                ignored when given
        """
        if raw_agent is None:
            raw_agent = RawAgent(
                auth=auth,
                config=config,
                logger=logger or ConsoleLogger(level=log_level),
            )
        self.raw_agent = raw_agent
        self.logger = raw_agent.logger

    @classmethod
    def from_env(cls, prefix: str = "HITBTC_", **kwargs: Any) -> "HitBTCClient":
        """Build a client from environment credentials and settings."""
        return cls(
            auth=ApiAuth.from_env(prefix),
            config=ClientConfig.from_env(prefix),
            **kwargs,
        )

    @property
    def config(self) -> ClientConfig:
        return self.raw_agent.config

    def is_upgraded(self) -> bool:
        """Check whether the client holds API keys."""
        return self.raw_agent.is_upgraded()

    def upgrade(self, auth: ApiAuth) -> "HitBTCClient":
        """
        Return a client using ``auth``.

        The new client shares this client's session; this client keeps
        its own credentials.
        """
        return HitBTCClient(raw_agent=self.raw_agent.upgrade(auth))

    async def close(self) -> None:
        """Close the HTTP session."""
        await self.raw_agent.close()

    async def __aenter__(self) -> "HitBTCClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ========================================================================
    # Market Data
    # ========================================================================

    async def get_available_currency_symbols(self) -> list[Symbol]:
        response = await self.raw_agent.get_public_endpoint("public/symbol")
        return parse_response(response, list[Symbol])

    async def get_symbol_info(self, symbol_id: str) -> Symbol:
        response = await self.raw_agent.get_public_endpoint(f"public/symbol/{symbol_id}")
        return parse_response(response, Symbol)

    async def get_available_currencies(self) -> list[Currency]:
        response = await self.raw_agent.get_public_endpoint("public/currency")
        return parse_response(response, list[Currency])

    async def get_currency_info(self, currency_id: str) -> Currency:
        response = await self.raw_agent.get_public_endpoint(f"public/currency/{currency_id}")
        return parse_response(response, Currency)

    async def get_ticker(self) -> list[Ticker]:
        """Get tickers for all symbols."""
        response = await self.raw_agent.get_public_endpoint("public/ticker")
        return parse_response(response, list[Ticker])

    async def get_ticker_info(self, symbol_id: str) -> Ticker:
        response = await self.raw_agent.get_public_endpoint(f"public/ticker/{symbol_id}")
        return parse_response(response, Ticker)

    async def get_trades_info(
        self, symbol_id: str, params: Union[TradesInfoParams, ParamsLike] = None
    ) -> list[PublicTrade]:
        """Get public trades for a symbol."""
        response = await self.raw_agent.get_public_endpoint(
            f"public/trades/{symbol_id}", to_payload(params)
        )
        return parse_response(response, list[PublicTrade])

    async def get_order_book(
        self, symbol_id: str, params: Union[OrderBookParams, ParamsLike] = None
    ) -> OrderBook:
        """Get the order book for a symbol; ``limit`` 0 means full depth."""
        response = await self.raw_agent.get_public_endpoint(
            f"public/orderbook/{symbol_id}", to_payload(params)
        )
        return parse_response(response, OrderBook)

    async def get_candles(
        self, symbol_id: str, params: Union[CandleParams, ParamsLike] = None
    ) -> list[Candle]:
        response = await self.raw_agent.get_public_endpoint(
            f"public/candles/{symbol_id}", to_payload(params)
        )
        return parse_response(response, list[Candle])

    # ========================================================================
    # Trading
    # ========================================================================

    async def list_open_orders(self, symbol_id: Optional[str] = None) -> list[Order]:
        """List active orders, optionally for one symbol."""
        response = await self.raw_agent.get_from_private_endpoint(
            "order", {"symbol": symbol_id}
        )
        return parse_response(response, list[Order])

    async def create_new_order(self, params: Union[NewOrderParams, ParamsLike]) -> Order:
        response = await self.raw_agent.post_to_private_endpoint("order", to_payload(params))
        return parse_response(response, Order)

    async def cancel_all_orders(
        self, params: Union[CancelAllOrdersParams, ParamsLike] = None
    ) -> list[Order]:
        """Cancel all active orders, optionally for one symbol."""
        response = await self.raw_agent.delete_from_private_endpoint("order", to_payload(params))
        return parse_response(response, list[Order])

    async def get_order_by_client_id(
        self, client_order_id: str, params: Union[GetOrderParams, ParamsLike] = None
    ) -> Order:
        response = await self.raw_agent.get_from_private_endpoint(
            f"order/{client_order_id}", to_payload(params)
        )
        return parse_response(response, Order)

    async def create_new_client_id_order(
        self, client_order_id: str, params: Union[NewClientIdOrderParams, ParamsLike]
    ) -> Order:
        """Place an order under a caller-chosen client order ID."""
        response = await self.raw_agent.put_to_private_endpoint(
            f"order/{client_order_id}", to_payload(params)
        )
        return parse_response(response, Order)

    async def cancel_client_id_order(self, client_order_id: str) -> Order:
        response = await self.raw_agent.delete_from_private_endpoint(f"order/{client_order_id}")
        return parse_response(response, Order)

    async def replace_order(
        self, client_order_id: str, params: Union[ReplaceOrderParams, ParamsLike] = None
    ) -> Order:
        """Cancel-replace an order."""
        response = await self.raw_agent.patch_to_private_endpoint(
            f"order/{client_order_id}", to_payload(params)
        )
        return parse_response(response, Order)

    async def get_trading_balances(self) -> list[Balance]:
        response = await self.raw_agent.get_from_private_endpoint("trading/balance")
        return parse_response(response, list[Balance])

    async def get_trading_fee(self, symbol_id: str) -> TradingFee:
        response = await self.raw_agent.get_from_private_endpoint(f"trading/fee/{symbol_id}")
        return parse_response(response, TradingFee)

    # ========================================================================
    # Trading History
    # ========================================================================

    async def get_trades(self, params: Union[TradesHistoryParams, ParamsLike] = None) -> list[Trade]:
        response = await self.raw_agent.get_from_private_endpoint(
            "history/trades", to_payload(params)
        )
        return parse_response(response, list[Trade])

    async def get_orders(self, params: Union[OrdersHistoryParams, ParamsLike] = None) -> list[Order]:
        response = await self.raw_agent.get_from_private_endpoint(
            "history/order", to_payload(params)
        )
        return parse_response(response, list[Order])

    async def get_trades_by_order_id(self, order_id: Union[int, str]) -> list[Trade]:
        response = await self.raw_agent.get_from_private_endpoint(
            f"history/order/{order_id}/trades"
        )
        return parse_response(response, list[Trade])

    # ========================================================================
    # Account
    # ========================================================================

    async def get_main_account_balance(self) -> list[Balance]:
        response = await self.raw_agent.get_from_private_endpoint("account/balance")
        return parse_response(response, list[Balance])

    async def get_account_transactions(
        self, params: Union[AccountTransactionsParams, ParamsLike] = None
    ) -> list[Transaction]:
        response = await self.raw_agent.get_from_private_endpoint(
            "account/transactions", to_payload(params)
        )
        return parse_response(response, list[Transaction])

    async def get_account_transaction_by_id(self, transaction_id: str) -> Transaction:
        response = await self.raw_agent.get_from_private_endpoint(
            f"account/transactions/{transaction_id}"
        )
        return parse_response(response, Transaction)

    async def withdraw_crypto(self, params: Union[WithdrawCryptoParams, ParamsLike]) -> IdResult:
        """Start a withdrawal; it needs a commit unless ``autoCommit`` is set."""
        response = await self.raw_agent.post_to_private_endpoint(
            "account/crypto/withdraw", to_payload(params)
        )
        return parse_response(response, IdResult)

    async def commit_crypto_withdraw(self, withdraw_id: str) -> WithdrawConfirm:
        response = await self.raw_agent.put_to_private_endpoint(
            f"account/crypto/withdraw/{withdraw_id}"
        )
        return parse_response(response, WithdrawConfirm)

    async def rollback_crypto_withdraw(self, withdraw_id: str) -> WithdrawConfirm:
        response = await self.raw_agent.delete_from_private_endpoint(
            f"account/crypto/withdraw/{withdraw_id}"
        )
        return parse_response(response, WithdrawConfirm)

    async def get_crypto_deposit_address(self, currency_id: str) -> Address:
        response = await self.raw_agent.get_from_private_endpoint(
            f"account/crypto/address/{currency_id}"
        )
        return parse_response(response, Address)

    async def create_crypto_deposit_address(self, currency_id: str) -> Address:
        response = await self.raw_agent.post_to_private_endpoint(
            f"account/crypto/address/{currency_id}"
        )
        return parse_response(response, Address)

    async def transfer_to_trading(self, params: Union[TransferParams, ParamsLike]) -> IdResult:
        """Move funds between the account and trading balances."""
        response = await self.raw_agent.post_to_private_endpoint(
            "account/transfer", to_payload(params)
        )
        return parse_response(response, IdResult)
