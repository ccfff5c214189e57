from typing import Dict, Optional

from pydantic import Field

from .base import HorizonModel, Link, Price, Response


class OfferAsset(HorizonModel):
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None


class OfferResponse(Response):
    offer_id: Optional[str] = Field(default=None, alias="id")
    paging_token: Optional[str] = None
    seller: Optional[str] = None
    selling: Optional[OfferAsset] = None
    buying: Optional[OfferAsset] = None
    amount: Optional[str] = None
    price: Optional[str] = None
    price_r: Optional[Price] = None
    sponsor: Optional[str] = None
    last_modified_ledger: Optional[int] = None
    last_modified_time: Optional[str] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
