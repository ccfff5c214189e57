"""SEP-06 transfer server client.

Talks to an anchor's programmatic deposit and withdrawal API. Requests are
plain GETs with query parameters and an optional SEP-10 bearer token.
Deposit and withdraw endpoints answer 403 with a typed body when the
anchor needs KYC data or authentication; those become typed exceptions.
Every other error status raises ``httpx.HTTPStatusError``.
"""

import logging
from typing import Dict, Optional

import httpx

from ..config import ClientConfig
from .exceptions import (
    AuthenticationRequiredError,
    CustomerInformationNeededError,
    CustomerInformationStatusError,
)
from .requests import (
    AnchorTransactionRequest,
    AnchorTransactionsRequest,
    DepositExchangeRequest,
    DepositRequest,
    FeeRequest,
    PatchTransactionRequest,
    WithdrawExchangeRequest,
    WithdrawRequest,
)
from .responses import (
    AnchorTransactionResponse,
    AnchorTransactionsResponse,
    AuthenticationRequiredResponse,
    CustomerInformationNeededResponse,
    CustomerInformationStatusResponse,
    DepositResponse,
    FeeResponse,
    InfoResponse,
    WithdrawResponse,
)

logger = logging.getLogger(__name__)

CUSTOMER_INFO_NEEDED = "non_interactive_customer_info_needed"
CUSTOMER_INFO_STATUS = "customer_info_status"
AUTHENTICATION_REQUIRED = "authentication_required"


def auth_headers(jwt: Optional[str]) -> Dict[str, str]:
    """Bearer header for a SEP-10 token; none for a missing or empty token."""
    if not jwt:
        return {}
    return {"Authorization": f"Bearer {jwt}"}


class TransferServerService:
    """Client for one anchor's SEP-06 transfer server."""

    def __init__(
        self,
        service_address: str,
        http_client: Optional[httpx.Client] = None,
        config: Optional[ClientConfig] = None,
    ):
        self.service_address = service_address.rstrip("/")
        if http_client is None:
            self.http_client = (config or ClientConfig()).create_http_client(
                self.service_address
            )
            self._owns_client = True
        else:
            self.http_client = http_client
            self._owns_client = False

    def info(self, jwt: Optional[str] = None, lang: Optional[str] = None) -> InfoResponse:
        params = {"lang": lang} if lang is not None else {}
        response = self._get("info", params, jwt)
        return InfoResponse.from_json(response.json())

    def deposit(self, request: DepositRequest) -> DepositResponse:
        response = self._get(
            "deposit", request.to_query_params(), request.jwt, check_customer_info=True
        )
        return DepositResponse.from_json(response.json())

    def deposit_exchange(self, request: DepositExchangeRequest) -> DepositResponse:
        response = self._get(
            "deposit-exchange",
            request.to_query_params(),
            request.jwt,
            check_customer_info=True,
        )
        return DepositResponse.from_json(response.json())

    def withdraw(self, request: WithdrawRequest) -> WithdrawResponse:
        response = self._get(
            "withdraw", request.to_query_params(), request.jwt, check_customer_info=True
        )
        return WithdrawResponse.from_json(response.json())

    def withdraw_exchange(self, request: WithdrawExchangeRequest) -> WithdrawResponse:
        response = self._get(
            "withdraw-exchange",
            request.to_query_params(),
            request.jwt,
            check_customer_info=True,
        )
        return WithdrawResponse.from_json(response.json())

    def fee(self, request: FeeRequest) -> FeeResponse:
        response = self._get("fee", request.to_query_params(), request.jwt)
        return FeeResponse.from_json(response.json())

    def transactions(
        self, request: AnchorTransactionsRequest
    ) -> AnchorTransactionsResponse:
        """List the account's transactions for one asset."""
        response = self._get("transactions", request.to_query_params(), request.jwt)
        return AnchorTransactionsResponse.from_json(response.json())

    def transaction(self, request: AnchorTransactionRequest) -> AnchorTransactionResponse:
        response = self._get("transaction", request.to_query_params(), request.jwt)
        return AnchorTransactionResponse.from_json(response.json())

    def patch_transaction(self, request: PatchTransactionRequest) -> httpx.Response:
        """Send updated fields for a transaction in ``pending_transaction_info_update``.

        Returns:
            The raw response; the status code is the result
        """
        url = f"{self.service_address}/transactions/{request.id}"
        logger.debug(f"PATCH {url}")
        return self.http_client.patch(
            url,
            json={"transaction": request.fields},
            headers=auth_headers(request.jwt),
        )

    def _get(
        self,
        path: str,
        params: Dict[str, str],
        jwt: Optional[str],
        check_customer_info: bool = False,
    ) -> httpx.Response:
        url = f"{self.service_address}/{path}"
        logger.debug(f"GET {url}")
        response = self.http_client.get(url, params=params, headers=auth_headers(jwt))
        if check_customer_info and response.status_code == 403:
            raise_for_customer_info(response)
        response.raise_for_status()
        return response

    def close(self) -> None:
        if self._owns_client and not self.http_client.is_closed:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def raise_for_customer_info(response: httpx.Response) -> None:
    """Raise the typed error for a known SEP-06 403 body, else return."""
    try:
        body = response.json()
    except ValueError:
        return
    if not isinstance(body, dict):
        return

    error_type = body.get("type")
    if error_type == CUSTOMER_INFO_NEEDED:
        logger.debug("Anchor requires customer information")
        raise CustomerInformationNeededError(
            "The anchor needs more customer information",
            response=CustomerInformationNeededResponse.from_json(body),
        )
    if error_type == CUSTOMER_INFO_STATUS:
        info_status = CustomerInformationStatusResponse.from_json(body)
        logger.debug(f"Anchor customer info status: {info_status.status}")
        raise CustomerInformationStatusError(
            f"Customer information status: {info_status.status}",
            response=info_status,
        )
    if error_type == AUTHENTICATION_REQUIRED:
        raise AuthenticationRequiredError(
            "The endpoint requires SEP-10 authentication",
            response=AuthenticationRequiredResponse.from_json(body),
        )
