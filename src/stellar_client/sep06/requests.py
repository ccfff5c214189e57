"""SEP-06 request models.

Fields are the wire parameter names. ``jwt`` authenticates the call and
``extra_fields`` carries anchor specific parameters; neither is dumped as a
regular field.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class AnchorRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jwt: Optional[str] = Field(
        default=None, exclude=True, description="SEP-10 token sent as a bearer header"
    )
    extra_fields: Optional[Dict[str, str]] = Field(
        default=None, exclude=True, description="Additional query parameters"
    )

    def to_query_params(self) -> Dict[str, str]:
        """Render set fields (and extra_fields) as query parameters."""
        params = {
            key: query_value(value)
            for key, value in self.model_dump(by_alias=True, exclude_none=True).items()
        }
        if self.extra_fields:
            params.update(self.extra_fields)
        return params


class DepositRequest(AnchorRequest):
    asset_code: str = Field(..., description="Code of the on-chain asset to receive")
    account: str = Field(..., description="Stellar account that receives the deposit")
    memo_type: Optional[str] = None
    memo: Optional[str] = None
    email_address: Optional[str] = None
    type: Optional[str] = Field(default=None, description="Deposit method, e.g. SEPA")
    wallet_name: Optional[str] = None
    wallet_url: Optional[str] = None
    lang: Optional[str] = None
    on_change_callback: Optional[str] = None
    amount: Optional[str] = None
    country_code: Optional[str] = None
    claimable_balance_supported: Optional[bool] = None
    customer_id: Optional[str] = None
    location_id: Optional[str] = None


class DepositExchangeRequest(AnchorRequest):
    destination_asset: str = Field(..., description="Code of the on-chain asset")
    source_asset: str = Field(..., description="Off-chain asset in SEP-38 format")
    amount: str
    account: str
    quote_id: Optional[str] = None
    memo_type: Optional[str] = None
    memo: Optional[str] = None
    email_address: Optional[str] = None
    type: Optional[str] = None
    wallet_name: Optional[str] = None
    wallet_url: Optional[str] = None
    lang: Optional[str] = None
    on_change_callback: Optional[str] = None
    country_code: Optional[str] = None
    claimable_balance_supported: Optional[bool] = None
    customer_id: Optional[str] = None
    location_id: Optional[str] = None


class WithdrawRequest(AnchorRequest):
    asset_code: str
    type: str = Field(..., description="Withdraw method, e.g. bank_account")
    dest: Optional[str] = None
    dest_extra: Optional[str] = None
    account: Optional[str] = None
    memo: Optional[str] = None
    memo_type: Optional[str] = None
    wallet_name: Optional[str] = None
    wallet_url: Optional[str] = None
    lang: Optional[str] = None
    on_change_callback: Optional[str] = None
    amount: Optional[str] = None
    country_code: Optional[str] = None
    refund_memo: Optional[str] = None
    refund_memo_type: Optional[str] = None
    customer_id: Optional[str] = None
    location_id: Optional[str] = None


class WithdrawExchangeRequest(AnchorRequest):
    source_asset: str = Field(..., description="Code of the on-chain asset")
    destination_asset: str = Field(..., description="Off-chain asset in SEP-38 format")
    amount: str
    type: str
    quote_id: Optional[str] = None
    dest: Optional[str] = None
    dest_extra: Optional[str] = None
    account: Optional[str] = None
    memo: Optional[str] = None
    memo_type: Optional[str] = None
    wallet_name: Optional[str] = None
    wallet_url: Optional[str] = None
    lang: Optional[str] = None
    on_change_callback: Optional[str] = None
    country_code: Optional[str] = None
    refund_memo: Optional[str] = None
    refund_memo_type: Optional[str] = None
    customer_id: Optional[str] = None
    location_id: Optional[str] = None


class FeeRequest(AnchorRequest):
    operation: str = Field(..., description="deposit or withdraw")
    asset_code: str
    amount: str
    type: Optional[str] = None


class AnchorTransactionsRequest(AnchorRequest):
    asset_code: str
    account: str
    no_older_than: Optional[datetime] = None
    limit: Optional[int] = None
    kind: Optional[str] = Field(default=None, description="deposit, withdrawal, ...")
    paging_id: Optional[str] = None
    lang: Optional[str] = None


class AnchorTransactionRequest(AnchorRequest):
    """Look up one transaction by any of its three ids."""

    id: Optional[str] = None
    stellar_transaction_id: Optional[str] = None
    external_transaction_id: Optional[str] = None
    lang: Optional[str] = None


class PatchTransactionRequest(BaseModel):
    id: str = Field(..., description="Anchor transaction id")
    fields: Dict[str, Any] = Field(
        ..., description="Updated values for the fields the anchor asked for"
    )
    jwt: Optional[str] = None
