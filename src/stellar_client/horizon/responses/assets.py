from typing import Dict, Optional

from pydantic import Field

from .base import HorizonModel, Link, Response


class AssetAccounts(HorizonModel):
    authorized: Optional[int] = None
    authorized_to_maintain_liabilities: Optional[int] = None
    unauthorized: Optional[int] = None


class AssetBalances(HorizonModel):
    authorized: Optional[str] = None
    authorized_to_maintain_liabilities: Optional[str] = None
    unauthorized: Optional[str] = None


class AssetFlags(HorizonModel):
    auth_required: Optional[bool] = None
    auth_revocable: Optional[bool] = None
    auth_immutable: Optional[bool] = None
    auth_clawback_enabled: Optional[bool] = None


class AssetResponse(Response):
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    paging_token: Optional[str] = None
    contract_id: Optional[str] = None
    accounts: Optional[AssetAccounts] = None
    balances: Optional[AssetBalances] = None
    claimable_balances_amount: Optional[str] = None
    liquidity_pools_amount: Optional[str] = None
    contracts_amount: Optional[str] = None
    num_claimable_balances: Optional[int] = None
    num_liquidity_pools: Optional[int] = None
    num_contracts: Optional[int] = None
    flags: Optional[AssetFlags] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
