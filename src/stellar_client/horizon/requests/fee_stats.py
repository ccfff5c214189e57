"""Builder for ``/fee_stats``."""

import httpx

from ..responses.fee_stats import FeeStatsResponse
from .base import RequestBuilder


class FeeStatsRequestBuilder(RequestBuilder[FeeStatsResponse]):
    response_type = FeeStatsResponse

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "fee_stats")
