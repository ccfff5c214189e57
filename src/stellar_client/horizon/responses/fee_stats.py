"""Fee statistics over recent ledgers, ``/fee_stats``."""

from typing import Optional

from .base import HorizonModel, Response


class FeeDistribution(HorizonModel):
    """Min, max, mode and percentiles of fees over the last ledgers, in stroops."""

    max: Optional[str] = None
    min: Optional[str] = None
    mode: Optional[str] = None
    p10: Optional[str] = None
    p20: Optional[str] = None
    p30: Optional[str] = None
    p40: Optional[str] = None
    p50: Optional[str] = None
    p60: Optional[str] = None
    p70: Optional[str] = None
    p80: Optional[str] = None
    p90: Optional[str] = None
    p95: Optional[str] = None
    p99: Optional[str] = None


class FeeStatsResponse(Response):
    last_ledger: Optional[str] = None
    last_ledger_base_fee: Optional[str] = None
    ledger_capacity_usage: Optional[str] = None
    fee_charged: Optional[FeeDistribution] = None
    max_fee: Optional[FeeDistribution] = None
