"""Builder for ``/transactions``."""

import httpx

from ...strkey import claimable_balance_id_hex, liquidity_pool_id_hex
from ..responses.page import Page
from ..responses.transactions import TransactionResponse
from .base import RequestBuilder


class TransactionsRequestBuilder(RequestBuilder[Page[TransactionResponse]]):
    response_type = Page[TransactionResponse]

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "transactions")

    def transaction(self, transaction_id: str) -> TransactionResponse:
        """Fetch one transaction by hash."""
        self.set_segments("transactions", transaction_id)
        return self._fetch(TransactionResponse)

    def for_account(self, account_id: str) -> "TransactionsRequestBuilder":
        return self.set_segments("accounts", account_id, "transactions")

    def for_claimable_balance(
        self, claimable_balance_id: str
    ) -> "TransactionsRequestBuilder":
        return self.set_segments(
            "claimable_balances",
            claimable_balance_id_hex(claimable_balance_id),
            "transactions",
        )

    def for_ledger(self, ledger_seq) -> "TransactionsRequestBuilder":
        return self.set_segments("ledgers", str(ledger_seq), "transactions")

    def for_liquidity_pool(self, liquidity_pool_id: str) -> "TransactionsRequestBuilder":
        return self.set_segments(
            "liquidity_pools", liquidity_pool_id_hex(liquidity_pool_id), "transactions"
        )

    def include_failed(self, value: bool) -> "TransactionsRequestBuilder":
        self.query_parameters["include_failed"] = "true" if value else "false"
        return self
