from typing import Dict, List, Optional

from pydantic import Field

from .base import HorizonModel, Link, Response


class ReserveResponse(HorizonModel):
    asset: Optional[str] = None
    amount: Optional[str] = None


class LiquidityPoolResponse(Response):
    pool_id: Optional[str] = Field(default=None, alias="id")
    paging_token: Optional[str] = None
    fee: Optional[int] = Field(
        default=None, alias="fee_bp", description="Pool fee in basis points"
    )
    type: Optional[str] = None
    total_trustlines: Optional[str] = None
    total_shares: Optional[str] = None
    reserves: List[ReserveResponse] = Field(default_factory=list)
    last_modified_ledger: Optional[int] = None
    last_modified_time: Optional[str] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
