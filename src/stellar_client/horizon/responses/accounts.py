"""Account resources."""

import base64
from typing import Dict, List, Optional

from pydantic import Field

from .base import HorizonModel, Link, Response


class AccountThresholds(HorizonModel):
    low_threshold: Optional[int] = None
    med_threshold: Optional[int] = None
    high_threshold: Optional[int] = None


class AccountFlags(HorizonModel):
    auth_required: Optional[bool] = None
    auth_revocable: Optional[bool] = None
    auth_immutable: Optional[bool] = None
    auth_clawback_enabled: Optional[bool] = None


class AccountBalance(HorizonModel):
    """One trustline, native or liquidity pool share balance of an account."""

    balance: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    liquidity_pool_id: Optional[str] = None
    limit: Optional[str] = None
    buying_liabilities: Optional[str] = None
    selling_liabilities: Optional[str] = None
    sponsor: Optional[str] = None
    is_authorized: Optional[bool] = None
    is_authorized_to_maintain_liabilities: Optional[bool] = None
    is_clawback_enabled: Optional[bool] = None
    last_modified_ledger: Optional[int] = None


class AccountSigner(HorizonModel):
    key: Optional[str] = None
    type: Optional[str] = None
    weight: Optional[int] = None
    sponsor: Optional[str] = None


class AccountResponse(Response):
    """A Stellar account as returned by ``/accounts/{account_id}``."""

    id: Optional[str] = None
    account_id: Optional[str] = None
    sequence: Optional[str] = Field(
        default=None, description="Sequence number as a decimal string"
    )
    sequence_ledger: Optional[int] = None
    sequence_time: Optional[str] = None
    subentry_count: Optional[int] = None
    inflation_destination: Optional[str] = None
    home_domain: Optional[str] = None
    last_modified_ledger: Optional[int] = None
    last_modified_time: Optional[str] = None
    thresholds: Optional[AccountThresholds] = None
    flags: Optional[AccountFlags] = None
    balances: List[AccountBalance] = Field(default_factory=list)
    signers: List[AccountSigner] = Field(default_factory=list)
    data: Dict[str, str] = Field(
        default_factory=dict, description="Account data entries, base64 values"
    )
    num_sponsoring: Optional[int] = None
    num_sponsored: Optional[int] = None
    sponsor: Optional[str] = None
    paging_token: Optional[str] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")

    @property
    def sequence_number(self) -> Optional[int]:
        return int(self.sequence) if self.sequence is not None else None

    def decoded_data(self, key: str) -> Optional[bytes]:
        value = self.data.get(key)
        return base64.b64decode(value) if value is not None else None


class AccountDataValueResponse(Response):
    """Value of one account data entry, ``/accounts/{id}/data/{key}``."""

    value: Optional[str] = None

    def decoded_value(self) -> Optional[str]:
        if self.value is None:
            return None
        return base64.b64decode(self.value).decode("utf-8")
