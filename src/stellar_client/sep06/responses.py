"""SEP-06 response models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnchorModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_json(cls, data):
        return cls.model_validate(data)


class AnchorField(AnchorModel):
    """Description of a field the anchor asks the wallet to supply."""

    description: Optional[str] = None
    optional: Optional[bool] = None
    choices: Optional[List[str]] = None


class DepositAsset(AnchorModel):
    enabled: bool = False
    authentication_required: Optional[bool] = None
    fee_fixed: Optional[float] = None
    fee_percent: Optional[float] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    fields: Optional[Dict[str, AnchorField]] = None


class DepositExchangeAsset(AnchorModel):
    enabled: bool = False
    authentication_required: Optional[bool] = None
    fields: Optional[Dict[str, AnchorField]] = None


class WithdrawType(AnchorModel):
    fields: Optional[Dict[str, AnchorField]] = None


class WithdrawAsset(AnchorModel):
    enabled: bool = False
    authentication_required: Optional[bool] = None
    fee_fixed: Optional[float] = None
    fee_percent: Optional[float] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    types: Optional[Dict[str, Optional[WithdrawType]]] = None


class WithdrawExchangeAsset(AnchorModel):
    enabled: bool = False
    authentication_required: Optional[bool] = None
    types: Optional[Dict[str, Optional[WithdrawType]]] = None


class AnchorEndpointInfo(AnchorModel):
    enabled: bool = False
    authentication_required: Optional[bool] = None
    description: Optional[str] = None


class AnchorFeatureFlags(AnchorModel):
    account_creation: bool = True
    claimable_balances: bool = False


class InfoResponse(AnchorModel):
    """``GET /info``: what the anchor supports, keyed by asset code."""

    deposit: Dict[str, DepositAsset] = Field(default_factory=dict)
    deposit_exchange: Dict[str, DepositExchangeAsset] = Field(
        default_factory=dict, alias="deposit-exchange"
    )
    withdraw: Dict[str, WithdrawAsset] = Field(default_factory=dict)
    withdraw_exchange: Dict[str, WithdrawExchangeAsset] = Field(
        default_factory=dict, alias="withdraw-exchange"
    )
    fee: Optional[AnchorEndpointInfo] = None
    transactions: Optional[AnchorEndpointInfo] = None
    transaction: Optional[AnchorEndpointInfo] = None
    features: Optional[AnchorFeatureFlags] = None


class ExtraInfo(AnchorModel):
    message: Optional[str] = None


class DepositInstruction(AnchorModel):
    """Off-chain deposit detail, keyed by its SEP-09 field name."""

    value: Optional[str] = None
    description: Optional[str] = None


class DepositResponse(AnchorModel):
    how: Optional[str] = None
    id: Optional[str] = None
    eta: Optional[int] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    fee_fixed: Optional[float] = None
    fee_percent: Optional[float] = None
    extra_info: Optional[ExtraInfo] = None
    instructions: Optional[Dict[str, DepositInstruction]] = None


class WithdrawResponse(AnchorModel):
    account_id: Optional[str] = None
    memo_type: Optional[str] = None
    memo: Optional[str] = None
    id: Optional[str] = None
    eta: Optional[int] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    fee_fixed: Optional[float] = None
    fee_percent: Optional[float] = None
    extra_info: Optional[ExtraInfo] = None


class FeeResponse(AnchorModel):
    fee: Optional[float] = None


class FeeDetailsDetails(AnchorModel):
    name: Optional[str] = None
    amount: Optional[str] = None
    description: Optional[str] = None


class FeeDetails(AnchorModel):
    total: Optional[str] = None
    asset: Optional[str] = None
    details: Optional[List[FeeDetailsDetails]] = None


class TransactionRefundPayment(AnchorModel):
    id: Optional[str] = None
    id_type: Optional[str] = Field(default=None, description="stellar or external")
    amount: Optional[str] = None
    fee: Optional[str] = None


class TransactionRefunds(AnchorModel):
    amount_refunded: Optional[str] = None
    amount_fee: Optional[str] = None
    payments: List[TransactionRefundPayment] = Field(default_factory=list)


class AnchorTransaction(AnchorModel):
    """A deposit or withdrawal as tracked by the anchor."""

    id: Optional[str] = None
    kind: Optional[str] = None
    status: Optional[str] = None
    status_eta: Optional[int] = None
    more_info_url: Optional[str] = None
    amount_in: Optional[str] = None
    amount_in_asset: Optional[str] = None
    amount_out: Optional[str] = None
    amount_out_asset: Optional[str] = None
    amount_fee: Optional[str] = None
    amount_fee_asset: Optional[str] = None
    fee_details: Optional[FeeDetails] = None
    quote_id: Optional[str] = None
    from_address: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    external_extra: Optional[str] = None
    external_extra_text: Optional[str] = None
    deposit_memo: Optional[str] = None
    deposit_memo_type: Optional[str] = None
    withdraw_anchor_account: Optional[str] = None
    withdraw_memo: Optional[str] = None
    withdraw_memo_type: Optional[str] = None
    started_at: Optional[str] = None
    updated_at: Optional[str] = None
    completed_at: Optional[str] = None
    user_action_required_by: Optional[str] = None
    stellar_transaction_id: Optional[str] = None
    external_transaction_id: Optional[str] = None
    message: Optional[str] = None
    refunded: Optional[bool] = None
    refunds: Optional[TransactionRefunds] = None
    required_info_message: Optional[str] = None
    required_info_updates: Optional[Dict[str, AnchorField]] = None
    instructions: Optional[Dict[str, DepositInstruction]] = None
    claimable_balance_id: Optional[str] = None


class AnchorTransactionsResponse(AnchorModel):
    transactions: List[AnchorTransaction] = Field(default_factory=list)


class AnchorTransactionResponse(AnchorModel):
    transaction: AnchorTransaction


class CustomerInformationNeededResponse(AnchorModel):
    """403 body of type ``non_interactive_customer_info_needed``."""

    fields: List[str] = Field(default_factory=list)


class CustomerInformationStatusResponse(AnchorModel):
    """403 body of type ``customer_info_status``."""

    status: Optional[str] = Field(default=None, description="pending or denied")
    more_info_url: Optional[str] = None
    eta: Optional[int] = None


class AuthenticationRequiredResponse(AnchorModel):
    type: Optional[str] = None
