"""HTTP execution and error mapping for Horizon requests."""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx

from ..errors import StellarClientError
from .responses.base import Response
from .responses.errors import HorizonErrorResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=Response)


class HorizonRequestError(StellarClientError):
    """Exception raised when a Horizon request fails.

    Carries the request that failed and, when the server answered, the raw
    response and the parsed Horizon problem document.
    """

    def __init__(
        self,
        message: str,
        url: str,
        http_method: str,
        status_code: Optional[int] = None,
        response: Optional[httpx.Response] = None,
        horizon_error: Optional[HorizonErrorResponse] = None,
        retry_after: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code)
        self.url = url
        self.http_method = http_method
        self.response = response
        self.horizon_error = horizon_error
        self.retry_after = retry_after

    @classmethod
    def from_response(
        cls, url: str, http_method: str, response: httpx.Response
    ) -> "HorizonRequestError":
        """Build the error for an HTTP error status."""
        message = f"HTTP {response.status_code}"
        horizon_error = None
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and "type" in body:
            try:
                horizon_error = HorizonErrorResponse.from_json(body)
            except ValueError as e:
                logger.debug(f"Could not parse Horizon error body: {e}")
            if horizon_error is not None and horizon_error.detail:
                message = horizon_error.detail
        elif response.text:
            message = response.text

        retry_after = None
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")

        return cls(
            message,
            url=url,
            http_method=http_method,
            status_code=response.status_code,
            response=response,
            horizon_error=horizon_error,
            retry_after=retry_after,
        )


def execute_request(
    http_client: httpx.Client,
    url: str,
    method: str = "GET",
    data: Optional[Dict[str, Any]] = None,
) -> httpx.Response:
    """Send a request to Horizon and fail on any status >= 300.

    Raises:
        HorizonRequestError: If the transport fails or Horizon returns an error
    """
    logger.debug(f"{method} {url}")
    try:
        response = http_client.request(method, url, data=data)
    except httpx.RequestError as e:
        raise HorizonRequestError(
            f"Request to Horizon failed: {e}", url=url, http_method=method
        ) from e

    if response.status_code >= 300:
        logger.warning(f"Horizon returned HTTP {response.status_code} for {method} {url}")
        raise HorizonRequestError.from_response(url, method, response)

    return response


def parse_response(
    response_type: Type[ResponseT],
    response: httpx.Response,
    url: str,
    http_client: Optional[httpx.Client] = None,
    method: str = "GET",
) -> ResponseT:
    """Parse a successful Horizon response into the requested model."""
    try:
        return response_type.from_response(response, http_client)
    except ValueError as e:
        raise HorizonRequestError(
            f"Unexpected response from Horizon: {e}",
            url=url,
            http_method=method,
            status_code=response.status_code,
            response=response,
        ) from e
