from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import HorizonModel, Link, Response


class Claimant(HorizonModel):
    destination: Optional[str] = None
    predicate: Dict[str, Any] = Field(
        default_factory=dict,
        description="Claim predicate tree as sent by Horizon (and/or/not/abs_before/rel_before)",
    )


class ClaimableBalanceResponse(Response):
    balance_id: Optional[str] = Field(default=None, alias="id")
    asset: Optional[str] = Field(default=None, description="Canonical asset form")
    amount: Optional[str] = None
    sponsor: Optional[str] = None
    last_modified_ledger: Optional[int] = None
    last_modified_time: Optional[str] = None
    paging_token: Optional[str] = None
    claimants: List[Claimant] = Field(default_factory=list)
    flags: Optional[Dict[str, Any]] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
