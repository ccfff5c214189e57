"""Builder for ``/claimable_balances``."""

import httpx

from ...asset import Asset, canonical_form
from ...strkey import claimable_balance_id_hex
from ..responses.claimable_balances import ClaimableBalanceResponse
from ..responses.page import Page
from .base import RequestBuilder


class ClaimableBalancesRequestBuilder(RequestBuilder[Page[ClaimableBalanceResponse]]):
    response_type = Page[ClaimableBalanceResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "claimable_balances")

    def claimable_balance(self, claimable_balance_id: str) -> ClaimableBalanceResponse:
        """Fetch one claimable balance by hex or ``B...`` id."""
        self.set_segments(
            "claimable_balances", claimable_balance_id_hex(claimable_balance_id)
        )
        return self._fetch(ClaimableBalanceResponse)

    def for_sponsor(self, sponsor: str) -> "ClaimableBalancesRequestBuilder":
        self.query_parameters["sponsor"] = sponsor
        return self

    def for_asset(self, asset: Asset) -> "ClaimableBalancesRequestBuilder":
        self.query_parameters["asset"] = canonical_form(asset)
        return self

    def for_claimant(self, claimant: str) -> "ClaimableBalancesRequestBuilder":
        self.query_parameters["claimant"] = claimant
        return self
