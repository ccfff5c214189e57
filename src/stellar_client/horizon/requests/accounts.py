"""Builder for ``/accounts``."""

import httpx

from ...asset import Asset, canonical_form
from ...strkey import liquidity_pool_id_hex
from ..responses.accounts import AccountDataValueResponse, AccountResponse
from ..responses.page import Page
from .base import RequestBuilder

SIGNER = "signer"
ASSET = "asset"
LIQUIDITY_POOL = "liquidity_pool"
SPONSOR = "sponsor"

# Horizon accepts at most one of these filters per request. Conflicts are
# reported in this order, e.g. "cannot set both sponsor and signer".
EXCLUSIVE_FILTERS = (SIGNER, ASSET, LIQUIDITY_POOL, SPONSOR)


class AccountsRequestBuilder(RequestBuilder[Page[AccountResponse]]):
    """Accounts by signer, asset, liquidity pool or sponsor."""

    response_type = Page[AccountResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "accounts")

    def account(self, account_id: str) -> AccountResponse:
        """Fetch a single account."""
        self.set_segments("accounts", account_id)
        return self._fetch(AccountResponse)

    def account_data(self, account_id: str, key: str) -> AccountDataValueResponse:
        """Fetch one data entry of an account."""
        self.set_segments("accounts", account_id, "data", key)
        return self._fetch(AccountDataValueResponse)

    def _set_exclusive(self, name: str, value: str) -> "AccountsRequestBuilder":
        for other in EXCLUSIVE_FILTERS:
            if other != name and other in self.query_parameters:
                first, second = sorted(
                    (name, other), key=EXCLUSIVE_FILTERS.index, reverse=True
                )
                raise ValueError(f"cannot set both {first} and {second}")
        self.query_parameters[name] = value
        return self

    def for_signer(self, signer: str) -> "AccountsRequestBuilder":
        return self._set_exclusive(SIGNER, signer)

    def for_asset(self, asset: Asset) -> "AccountsRequestBuilder":
        return self._set_exclusive(ASSET, canonical_form(asset))

    def for_liquidity_pool(self, liquidity_pool_id: str) -> "AccountsRequestBuilder":
        """Accounts participating in a pool, hex or ``L...`` id."""
        return self._set_exclusive(
            LIQUIDITY_POOL, liquidity_pool_id_hex(liquidity_pool_id)
        )

    def for_sponsor(self, sponsor: str) -> "AccountsRequestBuilder":
        return self._set_exclusive(SPONSOR, sponsor)
