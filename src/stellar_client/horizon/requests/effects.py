"""Builder for ``/effects`` and the per-resource effect collections."""

import httpx

from ...strkey import liquidity_pool_id_hex
from ..responses.effects import EffectsPage
from .base import RequestBuilder


class EffectsRequestBuilder(RequestBuilder[EffectsPage]):
    response_type = EffectsPage

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "effects")

    def for_account(self, account_id: str) -> "EffectsRequestBuilder":
        return self.set_segments("accounts", account_id, "effects")

    def for_ledger(self, ledger_seq) -> "EffectsRequestBuilder":
        return self.set_segments("ledgers", str(ledger_seq), "effects")

    def for_transaction(self, transaction_id: str) -> "EffectsRequestBuilder":
        return self.set_segments("transactions", transaction_id, "effects")

    def for_liquidity_pool(self, liquidity_pool_id: str) -> "EffectsRequestBuilder":
        return self.set_segments(
            "liquidity_pools", liquidity_pool_id_hex(liquidity_pool_id), "effects"
        )

    def for_operation(self, operation_id: str) -> "EffectsRequestBuilder":
        return self.set_segments("operations", operation_id, "effects")
