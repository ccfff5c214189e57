"""Exceptions shared by the Horizon and anchor clients."""

from typing import Optional


class StellarClientError(Exception):
    """Base exception for Stellar client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UrlSegmentsError(StellarClientError):
    """Exception raised when a request builder's path is set twice."""

    pass
