"""Transaction resources and submission results."""

from typing import Dict, List, Optional

from pydantic import Field

from .base import HorizonModel, Link, Response
from .errors import HorizonErrorResponseExtras


class FeeBumpTransactionResponse(HorizonModel):
    hash: Optional[str] = None
    signatures: List[str] = Field(default_factory=list)


class InnerTransactionResponse(HorizonModel):
    hash: Optional[str] = None
    signatures: List[str] = Field(default_factory=list)
    max_fee: Optional[str] = None


class TimeBounds(HorizonModel):
    min_time: Optional[str] = None
    max_time: Optional[str] = None


class LedgerBounds(HorizonModel):
    min_ledger: int = 0
    max_ledger: int = 0


class TransactionPreconditions(HorizonModel):
    timebounds: Optional[TimeBounds] = None
    ledgerbounds: Optional[LedgerBounds] = None
    min_account_sequence: Optional[str] = None
    min_account_sequence_age: Optional[str] = None
    min_account_sequence_ledger_gap: Optional[int] = None
    extra_signers: List[str] = Field(default_factory=list)


class TransactionResponse(Response):
    id: Optional[str] = None
    paging_token: Optional[str] = None
    successful: Optional[bool] = None
    hash: Optional[str] = None
    ledger: Optional[int] = None
    created_at: Optional[str] = None
    source_account: Optional[str] = None
    source_account_muxed: Optional[str] = None
    source_account_muxed_id: Optional[str] = None
    source_account_sequence: Optional[str] = None
    fee_account: Optional[str] = None
    fee_account_muxed: Optional[str] = None
    fee_account_muxed_id: Optional[str] = None
    fee_charged: Optional[str] = None
    max_fee: Optional[str] = None
    operation_count: Optional[int] = None
    envelope_xdr: Optional[str] = None
    result_xdr: Optional[str] = None
    result_meta_xdr: Optional[str] = None
    fee_meta_xdr: Optional[str] = None
    memo_type: Optional[str] = None
    memo: Optional[str] = None
    memo_bytes: Optional[str] = None
    signatures: List[str] = Field(default_factory=list)
    valid_after: Optional[str] = None
    valid_before: Optional[str] = None
    preconditions: Optional[TransactionPreconditions] = None
    fee_bump_transaction: Optional[FeeBumpTransactionResponse] = None
    inner_transaction: Optional[InnerTransactionResponse] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")


class SubmitTransactionResponse(TransactionResponse):
    """Result of ``POST /transactions``.

    Horizon answers failed submissions with an error status, so ``extras``
    is only filled when a caller parses an error body into this model.
    """

    extras: Optional[HorizonErrorResponseExtras] = None

    @property
    def is_successful(self) -> bool:
        return bool(self.successful) and self.extras is None


TX_STATUS_PENDING = "PENDING"
TX_STATUS_DUPLICATE = "DUPLICATE"
TX_STATUS_TRY_AGAIN_LATER = "TRY_AGAIN_LATER"
TX_STATUS_ERROR = "ERROR"


class SubmitAsyncTransactionResponse(Response):
    """Result of ``POST /transactions_async``.

    Horizon reports the submission status both in ``tx_status`` and in the
    HTTP status code (201 pending, 400 error, 409 duplicate, 503 try again
    later), so both are kept.
    """

    tx_status: Optional[str] = None
    hash: Optional[str] = None
    error_result_xdr: Optional[str] = None
    http_status_code: Optional[int] = None

    @classmethod
    def from_response(cls, response, http_client=None):
        result = super().from_response(response, http_client)
        result.http_status_code = response.status_code
        return result
