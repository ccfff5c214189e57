"""Builders for ``/trades`` and ``/trade_aggregations``."""

from typing import Optional

import httpx

from ...asset import Asset
from ...strkey import liquidity_pool_id_hex
from ..responses.page import Page
from ..responses.trades import TradeAggregationResponse, TradeResponse
from .base import RequestBuilder

TRADE_TYPES = ("all", "orderbook", "liquidity_pools")


class TradesRequestBuilder(RequestBuilder[Page[TradeResponse]]):
    response_type = Page[TradeResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "trades")

    def for_offer_id(self, offer_id) -> "TradesRequestBuilder":
        self.query_parameters["offer_id"] = str(offer_id)
        return self

    def for_trade_type(self, trade_type: str) -> "TradesRequestBuilder":
        if trade_type not in TRADE_TYPES:
            raise ValueError(
                f"trade_type must be one of {', '.join(TRADE_TYPES)}, got {trade_type!r}"
            )
        self.query_parameters["trade_type"] = trade_type
        return self

    def for_base_asset(self, asset: Asset) -> "TradesRequestBuilder":
        return self._set_asset("base_", asset)

    def for_counter_asset(self, asset: Asset) -> "TradesRequestBuilder":
        return self._set_asset("counter_", asset)

    def for_liquidity_pool(self, liquidity_pool_id: str) -> "TradesRequestBuilder":
        return self.set_segments(
            "liquidity_pools", liquidity_pool_id_hex(liquidity_pool_id), "trades"
        )

    def for_account(self, account_id: str) -> "TradesRequestBuilder":
        return self.set_segments("accounts", account_id, "trades")


class TradeAggregationsRequestBuilder(RequestBuilder[Page[TradeAggregationResponse]]):
    """OHLC trade buckets for an asset pair.

    Args:
        base_asset: Base asset of the pair
        counter_asset: Counter asset of the pair
        start_time: Lower time boundary, milliseconds since epoch
        end_time: Upper time boundary, milliseconds since epoch
        resolution: Bucket size in milliseconds
        offset: Bucket offset in milliseconds
    """

    response_type = Page[TradeAggregationResponse]

    def __init__(
        self,
        http_client: httpx.Client,
        base_asset: Optional[Asset] = None,
        counter_asset: Optional[Asset] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        resolution: Optional[int] = None,
        offset: Optional[int] = None,
    ):
        super().__init__(http_client, "trade_aggregations")
        if base_asset is not None:
            self.for_base_asset(base_asset)
        if counter_asset is not None:
            self.for_counter_asset(counter_asset)
        if start_time is not None:
            self.for_start_time(start_time)
        if end_time is not None:
            self.for_end_time(end_time)
        if resolution is not None:
            self.for_resolution(resolution)
        if offset is not None:
            self.for_offset(offset)

    def for_base_asset(self, asset: Asset) -> "TradeAggregationsRequestBuilder":
        return self._set_asset("base_", asset)

    def for_counter_asset(self, asset: Asset) -> "TradeAggregationsRequestBuilder":
        return self._set_asset("counter_", asset)

    def for_start_time(self, start_time: int) -> "TradeAggregationsRequestBuilder":
        self.query_parameters["start_time"] = str(start_time)
        return self

    def for_end_time(self, end_time: int) -> "TradeAggregationsRequestBuilder":
        self.query_parameters["end_time"] = str(end_time)
        return self

    def for_resolution(self, resolution: int) -> "TradeAggregationsRequestBuilder":
        self.query_parameters["resolution"] = str(resolution)
        return self

    def for_offset(self, offset: int) -> "TradeAggregationsRequestBuilder":
        self.query_parameters["offset"] = str(offset)
        return self
