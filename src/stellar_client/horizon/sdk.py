"""Horizon facade.

``StellarSDK`` owns (or borrows) one ``httpx.Client`` pointed at a Horizon
server and hands it to a fresh request builder per call.
"""

import logging
from typing import Optional

import httpx

from ..asset import Asset
from ..config import FUTURENET, PUBLIC, TESTNET, ClientConfig
from .http import HorizonRequestError, execute_request, parse_response
from .requests import (
    AccountsRequestBuilder,
    AssetsRequestBuilder,
    ClaimableBalancesRequestBuilder,
    EffectsRequestBuilder,
    FeeStatsRequestBuilder,
    FindPathsRequestBuilder,
    LedgersRequestBuilder,
    LiquidityPoolsRequestBuilder,
    OffersRequestBuilder,
    OperationsRequestBuilder,
    OrderBookRequestBuilder,
    PaymentsRequestBuilder,
    StrictReceivePathsRequestBuilder,
    StrictSendPathsRequestBuilder,
    TradeAggregationsRequestBuilder,
    TradesRequestBuilder,
    TransactionsRequestBuilder,
)
from .responses.accounts import AccountDataValueResponse, AccountResponse
from .responses.claimable_balances import ClaimableBalanceResponse
from .responses.fee_stats import FeeStatsResponse
from .responses.ledgers import LedgerResponse
from .responses.liquidity_pools import LiquidityPoolResponse
from .responses.offers import OfferResponse
from .responses.operations import OperationResponse
from .responses.root import HealthResponse, RootResponse
from .responses.transactions import (
    SubmitAsyncTransactionResponse,
    SubmitTransactionResponse,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

# Statuses on which /transactions_async still answers with a submission result
ASYNC_SUBMIT_RESULT_STATUSES = (400, 403, 409, 500, 503)
HEALTH_KEYS = ("database_connected", "core_up", "core_synced")


class StellarSDK:
    """Entry point for Horizon queries and transaction submission."""

    def __init__(
        self,
        horizon_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        config: Optional[ClientConfig] = None,
    ):
        """Initialize the facade.

        Args:
            horizon_url: Horizon base URL, overrides config.horizon_url
            http_client: Client to use; the caller keeps ownership of it
            config: Client settings used when no http_client is given
        """
        self.config = config or ClientConfig()
        self.horizon_url = (horizon_url or self.config.horizon_url).rstrip("/") + "/"
        if http_client is None:
            self.http_client = self.config.create_http_client(self.horizon_url)
            self._owns_client = True
        else:
            self.http_client = http_client
            self._owns_client = False

    @classmethod
    def public_net(cls, http_client: Optional[httpx.Client] = None) -> "StellarSDK":
        return cls(PUBLIC.horizon_url, http_client=http_client)

    @classmethod
    def test_net(cls, http_client: Optional[httpx.Client] = None) -> "StellarSDK":
        return cls(TESTNET.horizon_url, http_client=http_client)

    @classmethod
    def future_net(cls, http_client: Optional[httpx.Client] = None) -> "StellarSDK":
        return cls(FUTURENET.horizon_url, http_client=http_client)

    def accounts(self) -> AccountsRequestBuilder:
        return AccountsRequestBuilder(self.http_client)

    def assets(self) -> AssetsRequestBuilder:
        return AssetsRequestBuilder(self.http_client)

    def claimable_balances(self) -> ClaimableBalancesRequestBuilder:
        return ClaimableBalancesRequestBuilder(self.http_client)

    def effects(self) -> EffectsRequestBuilder:
        return EffectsRequestBuilder(self.http_client)

    def ledgers(self) -> LedgersRequestBuilder:
        return LedgersRequestBuilder(self.http_client)

    def liquidity_pools(self) -> LiquidityPoolsRequestBuilder:
        return LiquidityPoolsRequestBuilder(self.http_client)

    def offers(self) -> OffersRequestBuilder:
        return OffersRequestBuilder(self.http_client)

    def operations(self) -> OperationsRequestBuilder:
        return OperationsRequestBuilder(self.http_client)

    def payments(self) -> PaymentsRequestBuilder:
        return PaymentsRequestBuilder(self.http_client)

    def transactions(self) -> TransactionsRequestBuilder:
        return TransactionsRequestBuilder(self.http_client)

    def trades(self) -> TradesRequestBuilder:
        return TradesRequestBuilder(self.http_client)

    def trade_aggregations(
        self,
        base_asset: Optional[Asset] = None,
        counter_asset: Optional[Asset] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        resolution: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> TradeAggregationsRequestBuilder:
        return TradeAggregationsRequestBuilder(
            self.http_client,
            base_asset=base_asset,
            counter_asset=counter_asset,
            start_time=start_time,
            end_time=end_time,
            resolution=resolution,
            offset=offset,
        )

    def order_book(
        self, selling_asset: Optional[Asset] = None, buying_asset: Optional[Asset] = None
    ) -> OrderBookRequestBuilder:
        return OrderBookRequestBuilder(self.http_client, selling_asset, buying_asset)

    def find_paths(self) -> FindPathsRequestBuilder:
        return FindPathsRequestBuilder(self.http_client)

    def find_strict_send_paths(self) -> StrictSendPathsRequestBuilder:
        return StrictSendPathsRequestBuilder(self.http_client)

    def find_strict_receive_paths(self) -> StrictReceivePathsRequestBuilder:
        return StrictReceivePathsRequestBuilder(self.http_client)

    def fee_stats(self) -> FeeStatsRequestBuilder:
        return FeeStatsRequestBuilder(self.http_client)

    def root(self) -> RootResponse:
        """Fetch server and protocol versions from ``/``."""
        url = ""
        response = execute_request(self.http_client, url)
        return parse_response(RootResponse, response, url)

    def health(self) -> HealthResponse:
        """Fetch /health.

        An unhealthy Horizon answers HTTP 503 with the same body, which is
        returned as a result rather than raised.
        """
        url = "health"
        try:
            response = execute_request(self.http_client, url)
        except HorizonRequestError as e:
            response = e.response
            if (
                response is None
                or e.status_code != 503
                or not _has_any_key(response, HEALTH_KEYS)
            ):
                raise
            logger.warning(f"Horizon reported unhealthy: HTTP {e.status_code}")
        return parse_response(HealthResponse, response, url)

    def request_account(self, account_id: str) -> AccountResponse:
        return self.accounts().account(account_id)

    def request_account_data(self, account_id: str, key: str) -> AccountDataValueResponse:
        return self.accounts().account_data(account_id, key)

    def request_ledger(self, ledger_seq) -> LedgerResponse:
        return self.ledgers().ledger(ledger_seq)

    def request_transaction(self, transaction_hash: str) -> TransactionResponse:
        return self.transactions().transaction(transaction_hash)

    def request_operation(self, operation_id) -> OperationResponse:
        return self.operations().operation(operation_id)

    def request_offer(self, offer_id) -> OfferResponse:
        return self.offers().offer(offer_id)

    def request_claimable_balance(
        self, claimable_balance_id: str
    ) -> ClaimableBalanceResponse:
        return self.claimable_balances().claimable_balance(claimable_balance_id)

    def request_liquidity_pool(self, liquidity_pool_id: str) -> LiquidityPoolResponse:
        return self.liquidity_pools().liquidity_pool(liquidity_pool_id)

    def request_fee_stats(self) -> FeeStatsResponse:
        return self.fee_stats().execute()

    def account_exists(self, account_id: str) -> bool:
        """Check whether an account exists on the ledger.

        Returns:
            False when Horizon answers 404

        Raises:
            HorizonRequestError: For any other failure
        """
        try:
            self.request_account(account_id)
        except HorizonRequestError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def submit_transaction_envelope_xdr_base64(
        self, transaction_envelope_xdr_base64: str
    ) -> SubmitTransactionResponse:
        """Submit a signed transaction and wait for it to be included in a ledger.

        Raises:
            HorizonRequestError: If Horizon rejects the transaction; the
                result codes are in ``horizon_error.extras``
        """
        url = "transactions"
        response = execute_request(
            self.http_client,
            url,
            method="POST",
            data={"tx": transaction_envelope_xdr_base64},
        )
        return parse_response(SubmitTransactionResponse, response, url, method="POST")

    def submit_async_transaction_envelope_xdr_base64(
        self, transaction_envelope_xdr_base64: str
    ) -> SubmitAsyncTransactionResponse:
        """Submit a signed transaction without waiting for ledger inclusion.

        Horizon answers rejected, duplicate and throttled submissions with an
        error status and a ``tx_status`` body; those are returned as results
        rather than raised.
        """
        url = "transactions_async"
        try:
            response = execute_request(
                self.http_client,
                url,
                method="POST",
                data={"tx": transaction_envelope_xdr_base64},
            )
        except HorizonRequestError as e:
            response = e.response
            if (
                response is None
                or e.status_code not in ASYNC_SUBMIT_RESULT_STATUSES
                or not _has_any_key(response, ("tx_status",))
            ):
                raise
            logger.debug(f"Async submission answered HTTP {e.status_code}")
        return parse_response(
            SubmitAsyncTransactionResponse, response, url, method="POST"
        )

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and not self.http_client.is_closed:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _has_any_key(response: httpx.Response, keys) -> bool:
    try:
        body = response.json()
    except ValueError:
        return False
    return isinstance(body, dict) and any(key in body for key in keys)
