"""Request parameter models.

Every model dumps to the camelCase field names HitBTC expects, with unset
fields left out. Client methods also accept plain mappings, which are sent
as given.
"""

from typing import Any, Mapping, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .types import CandlePeriod, OrderType, Side, TimeInForce, TransferType


class RequestParams(BaseModel):
    """Base for request parameters."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump to a wire-ready dict, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


ParamsLike = Union[RequestParams, Mapping[str, Any], None]


def to_payload(params: ParamsLike) -> Optional[dict[str, Any]]:
    """
    Normalize caller-supplied parameters.

    Args:
        params: A params model, a plain mapping or None

    Returns:
        The dumped model, the mapping as a dict, or None
    """
    if params is None:
        return None
    if isinstance(params, RequestParams):
        return params.to_payload()
    return dict(params)


# ============================================================================
# Market data
# ============================================================================


class TradesInfoParams(RequestParams):
    sort: Optional[str] = None
    by: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    till: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class OrderBookParams(RequestParams):
    limit: Optional[int] = None


class CandleParams(RequestParams):
    limit: Optional[int] = None
    period: Optional[CandlePeriod] = None


# ============================================================================
# Trading
# ============================================================================


class NewOrderParams(RequestParams):
    """Body of ``POST /order``."""

    symbol: str
    side: Side
    quantity: str
    client_order_id: Optional[str] = None
    type: Optional[OrderType] = None
    time_in_force: Optional[TimeInForce] = None
    price: Optional[str] = None
    stop_price: Optional[str] = None
    expire_time: Optional[str] = None
    strict_validate: Optional[bool] = None


class CancelAllOrdersParams(RequestParams):
    symbol: Optional[str] = None


class GetOrderParams(RequestParams):
    """``wait`` is a long-poll timeout in milliseconds."""

    wait: Optional[int] = None


class NewClientIdOrderParams(RequestParams):
    """Body of ``PUT /order/{clientOrderId}``."""

    symbol: str
    side: Side
    quantity: str
    type: Optional[OrderType] = None
    time_in_force: Optional[TimeInForce] = None
    price: Optional[str] = None
    stop_price: Optional[str] = None
    expire_time: Optional[str] = None
    strict_validate: Optional[bool] = None


class ReplaceOrderParams(RequestParams):
    """Body of ``PATCH /order/{clientOrderId}``."""

    quantity: str
    request_client_id: str
    price: Optional[str] = None


# ============================================================================
# History
# ============================================================================


class TradesHistoryParams(TradesInfoParams):
    symbol: Optional[str] = None


class OrdersHistoryParams(RequestParams):
    symbol: Optional[str] = None
    client_order_id: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    till: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


# ============================================================================
# Account
# ============================================================================


class AccountTransactionsParams(TradesInfoParams):
    currency: Optional[str] = None


class WithdrawCryptoParams(RequestParams):
    """Body of ``POST /account/crypto/withdraw``."""

    currency: str
    amount: str
    address: str
    payment_id: Optional[str] = None
    network_fee: Optional[str] = None
    include_fee: Optional[bool] = None
    auto_commit: Optional[bool] = None


class TransferParams(RequestParams):
    """Body of ``POST /account/transfer``."""

    currency: str
    amount: str
    type: TransferType
