"""Builder for ``/assets``."""

import httpx

from ..responses.assets import AssetResponse
from ..responses.page import Page
from .base import RequestBuilder


class AssetsRequestBuilder(RequestBuilder[Page[AssetResponse]]):
    response_type = Page[AssetResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "assets")

    def for_asset_code(self, asset_code: str) -> "AssetsRequestBuilder":
        self.query_parameters["asset_code"] = asset_code
        return self

    def for_asset_issuer(self, asset_issuer: str) -> "AssetsRequestBuilder":
        self.query_parameters["asset_issuer"] = asset_issuer
        return self
