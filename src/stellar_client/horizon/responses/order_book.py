from typing import List, Optional

from pydantic import Field

from .base import HorizonModel, Price, Response
from .offers import OfferAsset


class OrderBookRow(HorizonModel):
    price_r: Optional[Price] = None
    price: Optional[str] = None
    amount: Optional[str] = None


class OrderBookResponse(Response):
    base: Optional[OfferAsset] = None
    counter: Optional[OfferAsset] = None
    asks: List[OrderBookRow] = Field(default_factory=list)
    bids: List[OrderBookRow] = Field(default_factory=list)
