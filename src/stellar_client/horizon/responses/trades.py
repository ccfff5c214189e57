from typing import Dict, Optional

from pydantic import Field

from .base import Link, Price, Response


class TradeResponse(Response):
    id: Optional[str] = None
    paging_token: Optional[str] = None
    ledger_close_time: Optional[str] = None
    trade_type: Optional[str] = None
    offer_id: Optional[str] = None
    base_offer_id: Optional[str] = None
    base_liquidity_pool_id: Optional[str] = None
    liquidity_pool_fee_bp: Optional[int] = None
    base_account: Optional[str] = None
    base_amount: Optional[str] = None
    base_asset_type: Optional[str] = None
    base_asset_code: Optional[str] = None
    base_asset_issuer: Optional[str] = None
    counter_offer_id: Optional[str] = None
    counter_liquidity_pool_id: Optional[str] = None
    counter_account: Optional[str] = None
    counter_amount: Optional[str] = None
    counter_asset_type: Optional[str] = None
    counter_asset_code: Optional[str] = None
    counter_asset_issuer: Optional[str] = None
    price: Optional[Price] = None
    base_is_seller: Optional[bool] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")


class TradeAggregationResponse(Response):
    """OHLC bucket from ``/trade_aggregations``."""

    timestamp: Optional[str] = None
    trade_count: Optional[str] = None
    base_volume: Optional[str] = None
    counter_volume: Optional[str] = None
    average_price: Optional[str] = Field(default=None, alias="avg")
    high: Optional[str] = None
    high_r: Optional[Price] = None
    low: Optional[str] = None
    low_r: Optional[Price] = None
    open: Optional[str] = None
    open_r: Optional[Price] = None
    close: Optional[str] = None
    close_r: Optional[Price] = None
