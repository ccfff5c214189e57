"""Builder for ``/order_book``."""

from typing import Optional

import httpx

from ...asset import Asset
from ..responses.order_book import OrderBookResponse
from .base import RequestBuilder


class OrderBookRequestBuilder(RequestBuilder[OrderBookResponse]):
    response_type = OrderBookResponse

    def __init__(
        self,
        http_client: httpx.Client,
        selling_asset: Optional[Asset] = None,
        buying_asset: Optional[Asset] = None,
    ):
        super().__init__(http_client, "order_book")
        if selling_asset is not None:
            self.for_selling_asset(selling_asset)
        if buying_asset is not None:
            self.for_buying_asset(buying_asset)

    def for_selling_asset(self, asset: Asset) -> "OrderBookRequestBuilder":
        return self._set_asset("selling_", asset)

    def for_buying_asset(self, asset: Asset) -> "OrderBookRequestBuilder":
        return self._set_asset("buying_", asset)
