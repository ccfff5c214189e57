"""Base request builder for Horizon endpoints.

A builder collects path segments and query parameters through fluent
setters, renders them with ``build_url`` and performs the request with the
injected ``httpx.Client``. Each concrete builder returns its own response
type from ``execute``.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from urllib.parse import quote, urlencode

import httpx

from ...asset import ASSET_QUERY_KEYS, Asset, asset_query_params
from ...errors import UrlSegmentsError
from ..http import execute_request, parse_response
from ..responses.base import Response

ResultT = TypeVar("ResultT", bound=Response)
BuilderT = TypeVar("BuilderT", bound="RequestBuilder")

ORDER_ASC = "asc"
ORDER_DESC = "desc"


class RequestBuilder(Generic[ResultT]):
    """Accumulates path segments and query parameters for one Horizon request."""

    response_type: Type[ResultT]

    def __init__(self, http_client: httpx.Client, default_segment: Optional[str] = None):
        self.http_client = http_client
        self.segments: List[str] = []
        self.query_parameters: Dict[str, Any] = {}
        self._segments_added = False
        if default_segment is not None:
            self.segments = default_segment.split("/")

    def set_segments(self: BuilderT, *segments: str) -> BuilderT:
        """Replace the default path; allowed once per builder.

        Each segment is percent-encoded, so ids and data keys may carry
        reserved characters such as ``/``, ``?`` or ``#``.
        """
        if self._segments_added:
            raise UrlSegmentsError("URL segments have been already added.")
        self._segments_added = True
        self.segments = [quote(str(segment), safe="") for segment in segments]
        return self

    def cursor(self: BuilderT, cursor: str) -> BuilderT:
        self.query_parameters["cursor"] = cursor
        return self

    def limit(self: BuilderT, number: int) -> BuilderT:
        if number < 1:
            raise ValueError("limit must be a positive number")
        self.query_parameters["limit"] = number
        return self

    def order(self: BuilderT, direction: str = ORDER_ASC) -> BuilderT:
        if direction not in (ORDER_ASC, ORDER_DESC):
            raise ValueError(f"order must be '{ORDER_ASC}' or '{ORDER_DESC}'")
        self.query_parameters["order"] = direction
        return self

    def _set_asset(self: BuilderT, prefix: str, asset: Asset) -> BuilderT:
        for key in ASSET_QUERY_KEYS:
            self.query_parameters.pop(prefix + key, None)
        self.query_parameters.update(asset_query_params(asset, prefix))
        return self

    def build_url(self) -> str:
        """Render the relative URL for the current segments and parameters."""
        url = "/".join(self.segments)
        if self.query_parameters:
            url += "?" + urlencode(self.query_parameters)
        return url

    def _fetch(self, response_type: Type[Response], url: Optional[str] = None):
        url = url if url is not None else self.build_url()
        response = execute_request(self.http_client, url)
        return parse_response(response_type, response, url, self.http_client)

    def execute(self) -> ResultT:
        """Execute the request built so far and return the typed result."""
        return self._fetch(self.response_type)
