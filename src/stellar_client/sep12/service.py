"""SEP-12 KYC service client."""

import logging
from typing import Optional

import httpx

from ..config import ClientConfig
from ..sep06.service import auth_headers
from .requests import (
    GetCustomerInfoRequest,
    PutCustomerCallbackRequest,
    PutCustomerInfoRequest,
    PutCustomerVerificationRequest,
    text_parts,
)
from .responses import (
    CustomerFileResponse,
    GetCustomerFilesResponse,
    GetCustomerInfoResponse,
    PutCustomerInfoResponse,
)

logger = logging.getLogger(__name__)


class KYCService:
    """Client for an anchor's SEP-12 customer endpoints.

    HTTP errors are not translated: ``raise_for_status`` raises
    ``httpx.HTTPStatusError`` for the calls that parse a body, and the raw
    response is returned for delete and callback registration.
    """

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

    def _url(self, path: str) -> str:
        return f"{self.service_address}/{path}"

    def get_customer_info(self, request: GetCustomerInfoRequest) -> GetCustomerInfoResponse:
        url = self._url("customer")
        logger.debug(f"GET {url}")
        response = self.http_client.get(
            url, params=request.form_fields(), headers=auth_headers(request.jwt)
        )
        response.raise_for_status()
        return GetCustomerInfoResponse.from_json(response.json())

    def put_customer_info(self, request: PutCustomerInfoRequest) -> PutCustomerInfoResponse:
        """Upload customer fields and files.

        Returns:
            The customer id assigned or confirmed by the anchor
        """
        url = self._url("customer")
        logger.debug(f"PUT {url}")
        response = self.http_client.put(
            url, files=request.multipart(), headers=auth_headers(request.jwt)
        )
        response.raise_for_status()
        return PutCustomerInfoResponse.from_json(response.json())

    def put_customer_verification(
        self, request: PutCustomerVerificationRequest
    ) -> GetCustomerInfoResponse:
        url = self._url("customer/verification")
        logger.debug(f"PUT {url}")
        response = self.http_client.put(
            url, files=request.multipart(), headers=auth_headers(request.jwt)
        )
        response.raise_for_status()
        return GetCustomerInfoResponse.from_json(response.json())

    def delete_customer(
        self,
        account: str,
        jwt: str,
        memo: Optional[str] = None,
        memo_type: Optional[str] = None,
    ) -> httpx.Response:
        url = self._url(f"customer/{account}")
        fields = {}
        if memo:
            fields["memo"] = memo
        if memo_type:
            fields["memo_type"] = memo_type
        logger.debug(f"DELETE {url}")
        return self.http_client.request(
            "DELETE", url, files=text_parts(fields), headers=auth_headers(jwt)
        )

    def put_customer_callback(self, request: PutCustomerCallbackRequest) -> httpx.Response:
        url = self._url("customer/callback")
        logger.debug(f"PUT {url}")
        return self.http_client.put(
            url, files=request.multipart(), headers=auth_headers(request.jwt)
        )

    def post_customer_file(self, file_bytes: bytes, jwt: str) -> CustomerFileResponse:
        url = self._url("customer/files")
        logger.debug(f"POST {url}")
        response = self.http_client.post(
            url, files={"file": ("file", file_bytes)}, headers=auth_headers(jwt)
        )
        response.raise_for_status()
        return CustomerFileResponse.from_json(response.json())

    def get_customer_files(
        self,
        jwt: str,
        file_id: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> GetCustomerFilesResponse:
        url = self._url("customer/files")
        params = {}
        if file_id is not None:
            params["file_id"] = file_id
        if customer_id is not None:
            params["customer_id"] = customer_id
        logger.debug(f"GET {url}")
        response = self.http_client.get(url, params=params, headers=auth_headers(jwt))
        response.raise_for_status()
        return GetCustomerFilesResponse.from_json(response.json())

    def close(self) -> None:
        if self._owns_client and not self.http_client.is_closed:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
