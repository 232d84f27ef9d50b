"""Shared fixtures: a recording transport and sample HitBTC payloads."""

import base64
from dataclasses import dataclass
from typing import Any, Optional

import pytest

from hitbtc_sdk import ApiAuth, HitBTCClient, HitBTCResponse, NoopLogger, RawAgent
from hitbtc_sdk.http import HTTPClient, encode_query


@dataclass
class RecordedCall:
    method: str
    endpoint: str
    params: Optional[dict[str, str]]
    body: Any
    auth: Any


class RecordingHTTP(HTTPClient):
    """Transport that records requests and replays queued outcomes."""

    def __init__(self, config=None):
        super().__init__(config)
        self.calls: list[RecordedCall] = []
        self._outcomes: list[Any] = []

    def reply(self, data: Any = None, status: int = 200) -> None:
        self._outcomes.append(HitBTCResponse(status=status, data=data))

    def fail(self, error: BaseException) -> None:
        self._outcomes.append(error)

    async def request(self, method, endpoint, params=None, json_body=None, auth=None):
        self.calls.append(
            RecordedCall(method, endpoint, encode_query(params), json_body, auth)
        )
        outcome = self._outcomes.pop(0) if self._outcomes else HitBTCResponse(status=200)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


PRIVATE_KEY = base64.b64encode(b"secret").decode()


@pytest.fixture
def auth():
    return ApiAuth(public_key="public-key", private_key=PRIVATE_KEY)


@pytest.fixture
def transport():
    return RecordingHTTP()


@pytest.fixture
def agent(transport):
    return RawAgent(logger=NoopLogger(), http=transport)


@pytest.fixture
def client(agent):
    return HitBTCClient(raw_agent=agent)


@pytest.fixture
def private_client(agent, auth):
    return HitBTCClient(raw_agent=agent.upgrade(auth))


# ============================================================================
# Sample payloads, shaped like real API v2 responses
# ============================================================================

SYMBOL = {
    "id": "ETHBTC",
    "baseCurrency": "ETH",
    "quoteCurrency": "BTC",
    "quantityIncrement": "0.001",
    "tickSize": "0.000001",
    "takeLiquidityRate": "0.001",
    "provideLiquidityRate": "-0.0001",
    "feeCurrency": "BTC",
}

CURRENCY = {
    "id": "ETH",
    "fullName": "Ethereum",
    "crypto": True,
    "payinEnabled": True,
    "payinPaymentId": False,
    "payinConfirmations": 2,
    "payoutEnabled": True,
    "payoutIsPaymentId": False,
    "transferEnabled": True,
}

TICKER = {
    "symbol": "ETHBTC",
    "ask": "0.050043",
    "bid": "0.050042",
    "last": "0.050042",
    "open": "0.047800",
    "low": "0.047052",
    "high": "0.051679",
    "volume": "36456.720",
    "volumeQuote": "1782.625000",
    "timestamp": "2017-05-12T14:57:19.999Z",
}

PUBLIC_TRADE = {
    "id": 9533117,
    "price": "0.046001",
    "quantity": "0.220",
    "side": "sell",
    "timestamp": "2017-04-14T12:18:40.426Z",
}

ORDER_BOOK = {
    "asks": [{"price": "0.046002", "size": "0.088"}],
    "bids": [{"price": "0.046001", "size": "0.005"}],
    "timestamp": "2018-11-19T05:00:28.193Z",
}

CANDLE = {
    "timestamp": "2017-10-20T20:00:00.000Z",
    "open": "0.050459",
    "close": "0.050087",
    "min": "0.050000",
    "max": "0.050511",
    "volume": "1326.628",
    "volumeQuote": "66.555987736",
}

ORDER = {
    "id": 840450210,
    "clientOrderId": "c1837634ef81472a9cd13c81e7b91401",
    "symbol": "ETHBTC",
    "side": "buy",
    "status": "new",
    "type": "limit",
    "timeInForce": "GTC",
    "quantity": "0.020",
    "price": "0.046001",
    "cumQuantity": "0.000",
    "createdAt": "2017-05-12T17:17:57.437Z",
    "updatedAt": "2017-05-12T17:17:57.437Z",
}

TRADE = {
    "id": 9535486,
    "clientOrderId": "f8dbaab336d44d5ba3ff578098a68454",
    "orderId": 816088377,
    "symbol": "ETHBTC",
    "side": "sell",
    "quantity": "0.061",
    "price": "0.045487",
    "fee": "0.000002775",
    "timestamp": "2017-05-17T12:32:57.848Z",
}

BALANCE = {"currency": "ETH", "available": "10.000000000", "reserved": "0.560000000"}

TRADING_FEE = {"takeLiquidityRate": "0.001", "provideLiquidityRate": "-0.0001"}

TRANSACTION = {
    "id": "6a2fb54d-7466-490c-b3a6-95d8c882f7f7",
    "index": "20400458",
    "currency": "ETH",
    "amount": "38.616700000000000000000000",
    "fee": "0.000880000000000000000000",
    "address": "0xfaEF4bE10dDF50B68c220c9ab19381e20B8EEB2B",
    "hash": "eece4c17994798939cea9f6a72ee12faa8d7e5b1e1d23b71a4d2f6a4a5a5b5a1",
    "status": "success",
    "type": "payout",
    "createdAt": "2017-05-18T18:05:36.957Z",
    "updatedAt": "2017-05-18T19:21:05.370Z",
}

ADDRESS = {"address": "NXT-G22U-BYF7-H8D9-3J27W", "paymentId": "616598347865"}
