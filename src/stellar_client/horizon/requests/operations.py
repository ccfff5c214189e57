"""Builders for ``/operations`` and ``/payments``.

Both return operations pages; payments are the subset of operation kinds
that move funds (create account, payment, path payments, account merge).
"""

import httpx

from ...strkey import claimable_balance_id_hex, liquidity_pool_id_hex
from ..responses.operations import OperationResponse, OperationsPage
from .base import RequestBuilder


class _OperationFiltersMixin:
    query_parameters: dict

    def include_failed(self, value: bool):
        """Include operations of failed transactions."""
        self.query_parameters["include_failed"] = "true" if value else "false"
        return self

    def include_transactions(self, include: bool):
        """Embed the parent transaction in each record (``join=transactions``)."""
        if include:
            self.query_parameters["join"] = "transactions"
        else:
            self.query_parameters.pop("join", None)
        return self


class OperationsRequestBuilder(_OperationFiltersMixin, RequestBuilder[OperationsPage]):
    response_type = OperationsPage

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "operations")

    def operation(self, operation_id) -> OperationResponse:
        self.set_segments("operations", str(operation_id))
        return self._fetch(OperationResponse)

    def for_account(self, account_id: str) -> "OperationsRequestBuilder":
        return self.set_segments("accounts", account_id, "operations")

    def for_claimable_balance(
        self, claimable_balance_id: str
    ) -> "OperationsRequestBuilder":
        return self.set_segments(
            "claimable_balances",
            claimable_balance_id_hex(claimable_balance_id),
            "operations",
        )

    def for_ledger(self, ledger_seq) -> "OperationsRequestBuilder":
        return self.set_segments("ledgers", str(ledger_seq), "operations")

    def for_transaction(self, transaction_id: str) -> "OperationsRequestBuilder":
        return self.set_segments("transactions", transaction_id, "operations")

    def for_liquidity_pool(self, liquidity_pool_id: str) -> "OperationsRequestBuilder":
        return self.set_segments(
            "liquidity_pools", liquidity_pool_id_hex(liquidity_pool_id), "operations"
        )


class PaymentsRequestBuilder(_OperationFiltersMixin, RequestBuilder[OperationsPage]):
    response_type = OperationsPage

    def __init__(self, http_client: httpx.Client):
        super().__init__(http_client, "payments")

    def for_account(self, account_id: str) -> "PaymentsRequestBuilder":
        return self.set_segments("accounts", account_id, "payments")

    def for_ledger(self, ledger_seq) -> "PaymentsRequestBuilder":
        return self.set_segments("ledgers", str(ledger_seq), "payments")

    def for_transaction(self, transaction_id: str) -> "PaymentsRequestBuilder":
        return self.set_segments("transactions", transaction_id, "payments")
