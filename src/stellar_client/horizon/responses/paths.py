from typing import List, Optional

from pydantic import Field

from .base import Response
from .offers import OfferAsset


class PathResponse(Response):
    """One payment path found by ``/paths/strict-send`` or ``/paths/strict-receive``."""

    source_amount: Optional[str] = None
    source_asset_type: Optional[str] = None
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None
    destination_amount: Optional[str] = None
    destination_asset_type: Optional[str] = None
    destination_asset_code: Optional[str] = None
    destination_asset_issuer: Optional[str] = None
    path: List[OfferAsset] = Field(default_factory=list)
