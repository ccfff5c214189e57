"""Horizon API client: request builders, response models and the facade."""

from .http import HorizonRequestError
from .sdk import StellarSDK

__all__ = [
    # Facade
    "StellarSDK",
    # Errors
    "HorizonRequestError",
]
