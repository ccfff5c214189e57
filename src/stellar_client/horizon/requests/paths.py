"""Builders for payment path finding.

``/paths/strict-receive`` and ``/paths/strict-send`` each take either a
list of candidate assets or an account whose holdings supply them, never
both.
"""

from typing import Optional

import httpx

from ...asset import Asset, canonical_list
from ..responses.page import Page
from ..responses.paths import PathResponse
from .base import RequestBuilder


class _PathsRequestBuilder(RequestBuilder[Page[PathResponse]]):
    response_type = Page[PathResponse]

    # (assets parameter, account parameter) that may not be combined
    exclusive_pair: Optional[tuple] = None

    def _set_exclusive(self, name: str, value: str):
        if self.exclusive_pair is not None and name in self.exclusive_pair:
            other = next(p for p in self.exclusive_pair if p != name)
            if other in self.query_parameters:
                assets_param, account_param = self.exclusive_pair
                raise ValueError(
                    f"cannot set both {assets_param} and {account_param}"
                )
        self.query_parameters[name] = value
        return self


class FindPathsRequestBuilder(_PathsRequestBuilder):
    """Legacy ``/paths`` endpoint."""

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "paths")

    def for_destination_account(self, account_id: str) -> "FindPathsRequestBuilder":
        self.query_parameters["destination_account"] = account_id
        return self

    def for_source_account(self, account_id: str) -> "FindPathsRequestBuilder":
        self.query_parameters["source_account"] = account_id
        return self

    def for_destination_amount(self, amount: str) -> "FindPathsRequestBuilder":
        self.query_parameters["destination_amount"] = str(amount)
        return self

    def for_destination_asset(self, asset: Asset) -> "FindPathsRequestBuilder":
        return self._set_asset("destination_", asset)


class StrictReceivePathsRequestBuilder(_PathsRequestBuilder):
    exclusive_pair = ("source_assets", "source_account")

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "paths/strict-receive")

    def for_source_assets(self, *assets: Asset) -> "StrictReceivePathsRequestBuilder":
        return self._set_exclusive("source_assets", canonical_list(assets))

    def for_source_account(self, account_id: str) -> "StrictReceivePathsRequestBuilder":
        return self._set_exclusive("source_account", account_id)

    def for_destination_account(
        self, account_id: str
    ) -> "StrictReceivePathsRequestBuilder":
        self.query_parameters["destination_account"] = account_id
        return self

    def for_destination_amount(self, amount: str) -> "StrictReceivePathsRequestBuilder":
        self.query_parameters["destination_amount"] = str(amount)
        return self

    def for_destination_asset(self, asset: Asset) -> "StrictReceivePathsRequestBuilder":
        return self._set_asset("destination_", asset)


class StrictSendPathsRequestBuilder(_PathsRequestBuilder):
    exclusive_pair = ("destination_assets", "destination_account")

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "paths/strict-send")

    def for_destination_assets(self, *assets: Asset) -> "StrictSendPathsRequestBuilder":
        return self._set_exclusive("destination_assets", canonical_list(assets))

    def for_destination_account(self, account_id: str) -> "StrictSendPathsRequestBuilder":
        return self._set_exclusive("destination_account", account_id)

    def for_source_amount(self, amount: str) -> "StrictSendPathsRequestBuilder":
        self.query_parameters["source_amount"] = str(amount)
        return self

    def for_source_asset(self, asset: Asset) -> "StrictSendPathsRequestBuilder":
        return self._set_asset("source_", asset)
