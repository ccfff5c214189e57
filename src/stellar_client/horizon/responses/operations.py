"""Operation resources.

Horizon returns every operation kind from the same endpoints and tells them
apart by the ``type`` field. ``OperationResponse.from_json`` picks the
matching subclass from ``OPERATION_TYPES``; unknown kinds parse as the base
class so new protocol operations never break a page.
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import Field, field_validator

from .base import Link, Price, Response
from .claimable_balances import Claimant
from .liquidity_pools import ReserveResponse
from .offers import OfferAsset
from .page import Page
from .transactions import TransactionResponse


class OperationResponse(Response):
    id: Optional[str] = None
    paging_token: Optional[str] = None
    source_account: Optional[str] = None
    source_account_muxed: Optional[str] = None
    source_account_muxed_id: Optional[str] = None
    type: Optional[str] = None
    type_i: Optional[int] = None
    created_at: Optional[str] = None
    transaction_hash: Optional[str] = None
    transaction_successful: Optional[bool] = None
    transaction: Optional[TransactionResponse] = Field(
        default=None, description="Embedded when requested with join=transactions"
    )
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")

    @classmethod
    def from_json(cls, data):
        if cls is OperationResponse:
            cls = OPERATION_TYPES.get(data.get("type"), OperationResponse)
        return cls.model_validate(data)


class CreateAccountOperationResponse(OperationResponse):
    starting_balance: Optional[str] = None
    funder: Optional[str] = None
    funder_muxed: Optional[str] = None
    funder_muxed_id: Optional[str] = None
    account: Optional[str] = None


class PaymentOperationResponse(OperationResponse):
    amount: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    from_account: Optional[str] = Field(default=None, alias="from")
    from_muxed: Optional[str] = None
    from_muxed_id: Optional[str] = None
    to: Optional[str] = None
    to_muxed: Optional[str] = None
    to_muxed_id: Optional[str] = None


class PathPaymentStrictReceiveOperationResponse(PaymentOperationResponse):
    source_amount: Optional[str] = None
    source_max: Optional[str] = None
    source_asset_type: Optional[str] = None
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None
    path: List[OfferAsset] = Field(default_factory=list)


class PathPaymentStrictSendOperationResponse(PaymentOperationResponse):
    source_amount: Optional[str] = None
    destination_min: Optional[str] = None
    source_asset_type: Optional[str] = None
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None
    path: List[OfferAsset] = Field(default_factory=list)


class ManageOfferOperationResponse(OperationResponse):
    offer_id: Optional[str] = None
    amount: Optional[str] = None
    price: Optional[str] = None
    price_r: Optional[Price] = None
    buying_asset_type: Optional[str] = None
    buying_asset_code: Optional[str] = None
    buying_asset_issuer: Optional[str] = None
    selling_asset_type: Optional[str] = None
    selling_asset_code: Optional[str] = None
    selling_asset_issuer: Optional[str] = None


class ManageSellOfferOperationResponse(ManageOfferOperationResponse):
    pass


class ManageBuyOfferOperationResponse(ManageOfferOperationResponse):
    pass


class CreatePassiveSellOfferOperationResponse(ManageOfferOperationResponse):
    pass


class SetOptionsOperationResponse(OperationResponse):
    low_threshold: Optional[int] = None
    med_threshold: Optional[int] = None
    high_threshold: Optional[int] = None
    inflation_dest: Optional[str] = None
    home_domain: Optional[str] = None
    signer_key: Optional[str] = None
    signer_weight: Optional[int] = None
    master_key_weight: Optional[int] = None
    set_flags: List[int] = Field(default_factory=list)
    set_flags_s: List[str] = Field(default_factory=list)
    clear_flags: List[int] = Field(default_factory=list)
    clear_flags_s: List[str] = Field(default_factory=list)


class ChangeTrustOperationResponse(OperationResponse):
    trustor: Optional[str] = None
    trustor_muxed: Optional[str] = None
    trustor_muxed_id: Optional[str] = None
    trustee: Optional[str] = None
    limit: Optional[str] = None
    liquidity_pool_id: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None


class AllowTrustOperationResponse(OperationResponse):
    trustor: Optional[str] = None
    trustee: Optional[str] = None
    trustee_muxed: Optional[str] = None
    trustee_muxed_id: Optional[str] = None
    authorize: Optional[bool] = None
    authorize_to_maintain_liabilities: Optional[bool] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None


class AccountMergeOperationResponse(OperationResponse):
    account: Optional[str] = None
    account_muxed: Optional[str] = None
    account_muxed_id: Optional[str] = None
    into: Optional[str] = None
    into_muxed: Optional[str] = None
    into_muxed_id: Optional[str] = None


class InflationOperationResponse(OperationResponse):
    pass


class ManageDataOperationResponse(OperationResponse):
    name: Optional[str] = None
    value: Optional[str] = None


class BumpSequenceOperationResponse(OperationResponse):
    bump_to: Optional[str] = None


class CreateClaimableBalanceOperationResponse(OperationResponse):
    sponsor: Optional[str] = None
    asset: Optional[str] = None
    amount: Optional[str] = None
    claimants: List[Claimant] = Field(default_factory=list)


class ClaimClaimableBalanceOperationResponse(OperationResponse):
    balance_id: Optional[str] = None
    claimant: Optional[str] = None
    claimant_muxed: Optional[str] = None
    claimant_muxed_id: Optional[str] = None


class BeginSponsoringFutureReservesOperationResponse(OperationResponse):
    sponsored_id: Optional[str] = None


class EndSponsoringFutureReservesOperationResponse(OperationResponse):
    begin_sponsor: Optional[str] = None
    begin_sponsor_muxed: Optional[str] = None
    begin_sponsor_muxed_id: Optional[str] = None


class RevokeSponsorshipOperationResponse(OperationResponse):
    account_id: Optional[str] = None
    claimable_balance_id: Optional[str] = None
    data_account_id: Optional[str] = None
    data_name: Optional[str] = None
    offer_id: Optional[str] = None
    trustline_account_id: Optional[str] = None
    trustline_asset: Optional[str] = None
    trustline_liquidity_pool_id: Optional[str] = None
    signer_account_id: Optional[str] = None
    signer_key: Optional[str] = None


class ClawbackOperationResponse(OperationResponse):
    amount: Optional[str] = None
    from_account: Optional[str] = Field(default=None, alias="from")
    from_muxed: Optional[str] = None
    from_muxed_id: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None


class ClawbackClaimableBalanceOperationResponse(OperationResponse):
    balance_id: Optional[str] = None


class SetTrustLineFlagsOperationResponse(OperationResponse):
    trustor: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    set_flags: List[int] = Field(default_factory=list)
    set_flags_s: List[str] = Field(default_factory=list)
    clear_flags: List[int] = Field(default_factory=list)
    clear_flags_s: List[str] = Field(default_factory=list)


class LiquidityPoolDepositOperationResponse(OperationResponse):
    liquidity_pool_id: Optional[str] = None
    reserves_max: List[ReserveResponse] = Field(default_factory=list)
    min_price: Optional[str] = None
    min_price_r: Optional[Price] = None
    max_price: Optional[str] = None
    max_price_r: Optional[Price] = None
    reserves_deposited: List[ReserveResponse] = Field(default_factory=list)
    shares_received: Optional[str] = None


class LiquidityPoolWithdrawOperationResponse(OperationResponse):
    liquidity_pool_id: Optional[str] = None
    reserves_min: List[ReserveResponse] = Field(default_factory=list)
    shares: Optional[str] = None
    reserves_received: List[ReserveResponse] = Field(default_factory=list)


class InvokeHostFunctionOperationResponse(OperationResponse):
    function: Optional[str] = None
    address: Optional[str] = None
    salt: Optional[str] = None
    parameters: List[Dict[str, Any]] = Field(default_factory=list)
    asset_balance_changes: List[Dict[str, Any]] = Field(default_factory=list)


class ExtendFootprintTTLOperationResponse(OperationResponse):
    extend_to: Optional[int] = None


class RestoreFootprintOperationResponse(OperationResponse):
    pass


OPERATION_TYPES: Dict[str, Type[OperationResponse]] = {
    "create_account": CreateAccountOperationResponse,
    "payment": PaymentOperationResponse,
    "path_payment_strict_receive": PathPaymentStrictReceiveOperationResponse,
    "manage_sell_offer": ManageSellOfferOperationResponse,
    "create_passive_sell_offer": CreatePassiveSellOfferOperationResponse,
    "set_options": SetOptionsOperationResponse,
    "change_trust": ChangeTrustOperationResponse,
    "allow_trust": AllowTrustOperationResponse,
    "account_merge": AccountMergeOperationResponse,
    "inflation": InflationOperationResponse,
    "manage_data": ManageDataOperationResponse,
    "bump_sequence": BumpSequenceOperationResponse,
    "manage_buy_offer": ManageBuyOfferOperationResponse,
    "path_payment_strict_send": PathPaymentStrictSendOperationResponse,
    "create_claimable_balance": CreateClaimableBalanceOperationResponse,
    "claim_claimable_balance": ClaimClaimableBalanceOperationResponse,
    "begin_sponsoring_future_reserves": BeginSponsoringFutureReservesOperationResponse,
    "end_sponsoring_future_reserves": EndSponsoringFutureReservesOperationResponse,
    "revoke_sponsorship": RevokeSponsorshipOperationResponse,
    "clawback": ClawbackOperationResponse,
    "clawback_claimable_balance": ClawbackClaimableBalanceOperationResponse,
    "set_trust_line_flags": SetTrustLineFlagsOperationResponse,
    "liquidity_pool_deposit": LiquidityPoolDepositOperationResponse,
    "liquidity_pool_withdraw": LiquidityPoolWithdrawOperationResponse,
    "invoke_host_function": InvokeHostFunctionOperationResponse,
    "extend_footprint_ttl": ExtendFootprintTTLOperationResponse,
    "restore_footprint": RestoreFootprintOperationResponse,
}


class OperationsPage(Page[OperationResponse]):
    """Page of operations (or payments) with each record parsed to its kind."""

    @field_validator("records", mode="before")
    @classmethod
    def parse_operation_kinds(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [
            OperationResponse.from_json(item) if isinstance(item, dict) else item
            for item in value
        ]
