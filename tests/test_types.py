"""Tests for response models and request parameters."""

import pytest
from pydantic import ValidationError

from hitbtc_sdk import (
    AccountTransactionsParams,
    Candle,
    Currency,
    ErrorDetail,
    NewOrderParams,
    Order,
    OrderStatus,
    OrderType,
    ReplaceOrderParams,
    Side,
    Symbol,
    TimeInForce,
    Transaction,
    TransactionType,
    WithdrawCryptoParams,
)
from hitbtc_sdk.params import to_payload
from conftest import CANDLE, CURRENCY, ORDER, SYMBOL, TRANSACTION


class TestResponseModels:
    """Test parsing of camelCase payloads."""

    def test_symbol(self):
        symbol = Symbol.model_validate(SYMBOL)

        assert symbol.base_currency == "ETH"
        assert symbol.quote_currency == "BTC"
        assert symbol.provide_liquidity_rate == "-0.0001"

    def test_currency(self):
        currency = Currency.model_validate(CURRENCY)

        assert currency.full_name == "Ethereum"
        assert currency.payout_is_payment_id is False
        assert currency.payin_confirmations == 2

    def test_order(self):
        order = Order.model_validate({**ORDER, "tradesReport": [
            {"id": 1, "quantity": "0.01", "price": "0.046", "fee": "0.0000001", "timestamp": "2017-05-12T17:18:00.000Z"}
        ]})

        assert order.side == Side.BUY
        assert order.status == OrderStatus.NEW
        assert order.type == OrderType.LIMIT
        assert order.time_in_force == TimeInForce.GTC
        assert order.trades_report[0].fee == "0.0000001"

    def test_order_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            Order.model_validate({**ORDER, "status": "bogus"})

    def test_candle_keeps_min_max_names(self):
        candle = Candle.model_validate(CANDLE)

        assert candle.min == "0.050000"
        assert candle.max == "0.050511"

    def test_transaction(self):
        transaction = Transaction.model_validate(TRANSACTION)

        assert transaction.type == TransactionType.PAYOUT
        assert transaction.network_fee is None

    def test_unknown_fields_are_kept(self):
        symbol = Symbol.model_validate({**SYMBOL, "marginTrading": True})
        assert symbol.model_extra == {"marginTrading": True}

    def test_dump_by_alias(self):
        symbol = Symbol.model_validate(SYMBOL)
        assert symbol.model_dump(by_alias=True)["baseCurrency"] == "ETH"

    def test_error_detail(self):
        detail = ErrorDetail.model_validate({"code": 1002, "message": "Authorization failed"})
        assert detail.description is None


class TestRequestParams:
    """Test parameter dumping."""

    def test_new_order_omits_unset(self):
        params = NewOrderParams(
            symbol="ETHBTC",
            side=Side.SELL,
            quantity="1",
            type=OrderType.STOP_LIMIT,
            stop_price="0.05",
            strict_validate=False,
        )

        assert params.to_payload() == {
            "symbol": "ETHBTC",
            "side": "sell",
            "quantity": "1",
            "type": "stopLimit",
            "stopPrice": "0.05",
            "strictValidate": False,
        }

    def test_accepts_camel_case_input(self):
        params = ReplaceOrderParams.model_validate({"quantity": "1", "requestClientId": "r1"})
        assert params.request_client_id == "r1"

    def test_from_alias(self):
        params = AccountTransactionsParams(currency="ETH", from_="2018-01-01", limit=10)
        assert params.to_payload() == {"currency": "ETH", "from": "2018-01-01", "limit": 10}

    def test_withdraw_flags(self):
        params = WithdrawCryptoParams(currency="BTC", amount="0.1", address="1abc", auto_commit=True)
        assert params.to_payload()["autoCommit"] is True

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            NewOrderParams(symbol="ETHBTC", side=Side.BUY)

    def test_to_payload_passes_mappings_through(self):
        body = {"symbol": "ETHBTC", "whatever": 1}
        assert to_payload(body) == body
        assert to_payload(None) is None
