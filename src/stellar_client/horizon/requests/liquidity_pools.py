"""Builder for ``/liquidity_pools``."""

import httpx

from ...asset import Asset, canonical_list
from ...strkey import liquidity_pool_id_hex
from ..responses.liquidity_pools import LiquidityPoolResponse
from ..responses.page import Page
from .base import RequestBuilder


class LiquidityPoolsRequestBuilder(RequestBuilder[Page[LiquidityPoolResponse]]):
    response_type = Page[LiquidityPoolResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "liquidity_pools")

    def liquidity_pool(self, liquidity_pool_id: str) -> LiquidityPoolResponse:
        """Fetch one pool by hex or ``L...`` id."""
        self.set_segments("liquidity_pools", liquidity_pool_id_hex(liquidity_pool_id))
        return self._fetch(LiquidityPoolResponse)

    def for_reserves(self, *reserves: Asset) -> "LiquidityPoolsRequestBuilder":
        """Pools holding all of the given reserve assets."""
        self.query_parameters["reserves"] = canonical_list(reserves)
        return self

    def for_account(self, account_id: str) -> "LiquidityPoolsRequestBuilder":
        """Pools the account holds shares of."""
        self.query_parameters["account"] = account_id
        return self
