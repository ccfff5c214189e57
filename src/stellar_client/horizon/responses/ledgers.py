from typing import Dict, Optional

from pydantic import Field

from .base import Link, Response


class LedgerResponse(Response):
    id: Optional[str] = None
    paging_token: Optional[str] = None
    hash: Optional[str] = None
    previous_hash: Optional[str] = Field(default=None, alias="prev_hash")
    sequence: Optional[int] = None
    successful_transaction_count: Optional[int] = None
    failed_transaction_count: Optional[int] = None
    operation_count: Optional[int] = None
    tx_set_operation_count: Optional[int] = None
    closed_at: Optional[str] = None
    total_coins: Optional[str] = None
    fee_pool: Optional[str] = None
    base_fee_in_stroops: Optional[int] = None
    base_reserve_in_stroops: Optional[int] = None
    max_tx_set_size: Optional[int] = None
    protocol_version: Optional[int] = None
    header_xdr: Optional[str] = None
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
