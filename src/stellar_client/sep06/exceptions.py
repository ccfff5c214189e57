"""Exceptions raised by the SEP-06 transfer server client."""

from typing import Any, Optional

from ..errors import StellarClientError


class AnchorError(StellarClientError):
    """Base exception for anchor protocol errors carrying the parsed payload."""

    def __init__(
        self, message: str, response: Any = None, status_code: Optional[int] = 403
    ):
        super().__init__(message, status_code=status_code)
        self.response = response


class CustomerInformationNeededError(AnchorError):
    """Exception raised when the anchor needs more KYC fields (SEP-12)."""

    pass


class CustomerInformationStatusError(AnchorError):
    """Exception raised when submitted KYC data is pending or was denied."""

    pass


class AuthenticationRequiredError(AnchorError):
    """Exception raised when the endpoint requires a SEP-10 JWT."""

    pass
