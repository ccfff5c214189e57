"""SEP-06 transfer server client."""

from .exceptions import (
    AnchorError,
    AuthenticationRequiredError,
    CustomerInformationNeededError,
    CustomerInformationStatusError,
)
from .service import TransferServerService

__all__ = [
    "TransferServerService",
    "AnchorError",
    "AuthenticationRequiredError",
    "CustomerInformationNeededError",
    "CustomerInformationStatusError",
]
