"""Builder for ``/offers``."""

import httpx

from ...asset import Asset
from ..responses.offers import OfferResponse
from ..responses.page import Page
from .base import RequestBuilder


class OffersRequestBuilder(RequestBuilder[Page[OfferResponse]]):
    response_type = Page[OfferResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "offers")

    def offer(self, offer_id) -> OfferResponse:
        self.set_segments("offers", str(offer_id))
        return self._fetch(OfferResponse)

    def for_account(self, account_id: str) -> "OffersRequestBuilder":
        """Offers created by the account, ``/accounts/{id}/offers``."""
        return self.set_segments("accounts", account_id, "offers")

    def for_sponsor(self, sponsor: str) -> "OffersRequestBuilder":
        self.query_parameters["sponsor"] = sponsor
        return self

    def for_seller(self, seller: str) -> "OffersRequestBuilder":
        self.query_parameters["seller"] = seller
        return self

    def for_selling_asset(self, asset: Asset) -> "OffersRequestBuilder":
        return self._set_asset("selling_", asset)

    def for_buying_asset(self, asset: Asset) -> "OffersRequestBuilder":
        return self._set_asset("buying_", asset)
