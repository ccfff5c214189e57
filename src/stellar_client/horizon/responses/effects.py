"""Effect resources, dispatched on the ``type`` field like operations."""

from typing import Any, Dict, List, Optional, Type

from pydantic import Field, field_validator

from .base import HorizonModel, Link, Response
from .liquidity_pools import ReserveResponse
from .page import Page


class EffectResponse(Response):
    id: Optional[str] = None
    paging_token: Optional[str] = None
    account: Optional[str] = None
    account_muxed: Optional[str] = None
    account_muxed_id: Optional[str] = None
    type: Optional[str] = None
    type_i: Optional[int] = None
    created_at: Optional[str] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")

    @classmethod
    def from_json(cls, data):
        if cls is EffectResponse:
            cls = EFFECT_TYPES.get(data.get("type"), EffectResponse)
        return cls.model_validate(data)


class AssetAmountEffectResponse(EffectResponse):
    amount: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None


class AccountCreatedEffectResponse(EffectResponse):
    starting_balance: Optional[str] = None


class AccountRemovedEffectResponse(EffectResponse):
    pass


class AccountCreditedEffectResponse(AssetAmountEffectResponse):
    pass


class AccountDebitedEffectResponse(AssetAmountEffectResponse):
    pass


class AccountThresholdsUpdatedEffectResponse(EffectResponse):
    low_threshold: Optional[int] = None
    med_threshold: Optional[int] = None
    high_threshold: Optional[int] = None


class AccountHomeDomainUpdatedEffectResponse(EffectResponse):
    home_domain: Optional[str] = None


class AccountFlagsUpdatedEffectResponse(EffectResponse):
    auth_required_flag: Optional[bool] = None
    auth_revokable_flag: Optional[bool] = None
    auth_immutable_flag: Optional[bool] = None
    auth_clawback_enabled_flag: Optional[bool] = None


class SignerEffectResponse(EffectResponse):
    weight: Optional[int] = None
    key: Optional[str] = None
    public_key: Optional[str] = None


class SignerCreatedEffectResponse(SignerEffectResponse):
    pass


class SignerRemovedEffectResponse(SignerEffectResponse):
    pass


class SignerUpdatedEffectResponse(SignerEffectResponse):
    pass


class TrustlineEffectResponse(EffectResponse):
    limit: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    liquidity_pool_id: Optional[str] = None


class TrustlineCreatedEffectResponse(TrustlineEffectResponse):
    pass


class TrustlineRemovedEffectResponse(TrustlineEffectResponse):
    pass


class TrustlineUpdatedEffectResponse(TrustlineEffectResponse):
    pass


class TrustlineFlagsUpdatedEffectResponse(EffectResponse):
    trustor: Optional[str] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    authorized_flag: Optional[bool] = None
    authorized_to_maintain_liabilites_flag: Optional[bool] = None
    clawback_enabled_flag: Optional[bool] = None


class TradeEffectResponse(EffectResponse):
    seller: Optional[str] = None
    seller_muxed: Optional[str] = None
    seller_muxed_id: Optional[str] = None
    offer_id: Optional[str] = None
    sold_amount: Optional[str] = None
    sold_asset_type: Optional[str] = None
    sold_asset_code: Optional[str] = None
    sold_asset_issuer: Optional[str] = None
    bought_amount: Optional[str] = None
    bought_asset_type: Optional[str] = None
    bought_asset_code: Optional[str] = None
    bought_asset_issuer: Optional[str] = None


class DataEffectResponse(EffectResponse):
    name: Optional[str] = None
    value: Optional[str] = None


class DataCreatedEffectResponse(DataEffectResponse):
    pass


class DataRemovedEffectResponse(DataEffectResponse):
    pass


class DataUpdatedEffectResponse(DataEffectResponse):
    pass


class SequenceBumpedEffectResponse(EffectResponse):
    new_seq: Optional[str] = None


class ClaimableBalanceCreatedEffectResponse(EffectResponse):
    balance_id: Optional[str] = None
    asset: Optional[str] = None
    amount: Optional[str] = None


class ClaimableBalanceClaimantCreatedEffectResponse(EffectResponse):
    balance_id: Optional[str] = None
    asset: Optional[str] = None
    amount: Optional[str] = None
    predicate: Dict[str, Any] = Field(default_factory=dict)


class ClaimableBalanceClaimedEffectResponse(EffectResponse):
    balance_id: Optional[str] = None
    asset: Optional[str] = None
    amount: Optional[str] = None


class LiquidityPoolEffectPool(HorizonModel):
    id: Optional[str] = None
    fee_bp: Optional[int] = None
    type: Optional[str] = None
    total_trustlines: Optional[str] = None
    total_shares: Optional[str] = None
    reserves: List[ReserveResponse] = Field(default_factory=list)


class LiquidityPoolDepositedEffectResponse(EffectResponse):
    liquidity_pool: Optional[LiquidityPoolEffectPool] = None
    reserves_deposited: List[ReserveResponse] = Field(default_factory=list)
    shares_received: Optional[str] = None


class LiquidityPoolWithdrewEffectResponse(EffectResponse):
    liquidity_pool: Optional[LiquidityPoolEffectPool] = None
    reserves_received: List[ReserveResponse] = Field(default_factory=list)
    shares_redeemed: Optional[str] = None


class LiquidityPoolTradeEffectResponse(EffectResponse):
    liquidity_pool: Optional[LiquidityPoolEffectPool] = None
    sold: Optional[ReserveResponse] = None
    bought: Optional[ReserveResponse] = None


class ContractEffectResponse(AssetAmountEffectResponse):
    contract: Optional[str] = None


class ContractCreditedEffectResponse(ContractEffectResponse):
    pass


class ContractDebitedEffectResponse(ContractEffectResponse):
    pass


EFFECT_TYPES: Dict[str, Type[EffectResponse]] = {
    "account_created": AccountCreatedEffectResponse,
    "account_removed": AccountRemovedEffectResponse,
    "account_credited": AccountCreditedEffectResponse,
    "account_debited": AccountDebitedEffectResponse,
    "account_thresholds_updated": AccountThresholdsUpdatedEffectResponse,
    "account_home_domain_updated": AccountHomeDomainUpdatedEffectResponse,
    "account_flags_updated": AccountFlagsUpdatedEffectResponse,
    "signer_created": SignerCreatedEffectResponse,
    "signer_removed": SignerRemovedEffectResponse,
    "signer_updated": SignerUpdatedEffectResponse,
    "trustline_created": TrustlineCreatedEffectResponse,
    "trustline_removed": TrustlineRemovedEffectResponse,
    "trustline_updated": TrustlineUpdatedEffectResponse,
    "trustline_flags_updated": TrustlineFlagsUpdatedEffectResponse,
    "trade": TradeEffectResponse,
    "data_created": DataCreatedEffectResponse,
    "data_removed": DataRemovedEffectResponse,
    "data_updated": DataUpdatedEffectResponse,
    "sequence_bumped": SequenceBumpedEffectResponse,
    "claimable_balance_created": ClaimableBalanceCreatedEffectResponse,
    "claimable_balance_claimant_created": ClaimableBalanceClaimantCreatedEffectResponse,
    "claimable_balance_claimed": ClaimableBalanceClaimedEffectResponse,
    "liquidity_pool_deposited": LiquidityPoolDepositedEffectResponse,
    "liquidity_pool_withdrew": LiquidityPoolWithdrewEffectResponse,
    "liquidity_pool_trade": LiquidityPoolTradeEffectResponse,
    "contract_credited": ContractCreditedEffectResponse,
    "contract_debited": ContractDebitedEffectResponse,
}


class EffectsPage(Page[EffectResponse]):
    @field_validator("records", mode="before")
    @classmethod
    def parse_effect_kinds(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [
            EffectResponse.from_json(item) if isinstance(item, dict) else item
            for item in value
        ]
