"""Builder for ``/ledgers``."""

import httpx

from ..responses.ledgers import LedgerResponse
from ..responses.page import Page
from .base import RequestBuilder


class LedgersRequestBuilder(RequestBuilder[Page[LedgerResponse]]):
    response_type = Page[LedgerResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "ledgers")

    def ledger(self, ledger_seq) -> LedgerResponse:
        self.set_segments("ledgers", str(ledger_seq))
        return self._fetch(LedgerResponse)
