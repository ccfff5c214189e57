"""Fluent request builders, one per Horizon resource collection."""

from .accounts import AccountsRequestBuilder
from .assets import AssetsRequestBuilder
from .base import RequestBuilder
from .claimable_balances import ClaimableBalancesRequestBuilder
from .effects import EffectsRequestBuilder
from .fee_stats import FeeStatsRequestBuilder
from .ledgers import LedgersRequestBuilder
from .liquidity_pools import LiquidityPoolsRequestBuilder
from .offers import OffersRequestBuilder
from .operations import OperationsRequestBuilder, PaymentsRequestBuilder
from .order_book import OrderBookRequestBuilder
from .paths import (
    FindPathsRequestBuilder,
    StrictReceivePathsRequestBuilder,
    StrictSendPathsRequestBuilder,
)
from .trades import TradeAggregationsRequestBuilder, TradesRequestBuilder
from .transactions import TransactionsRequestBuilder

__all__ = [
    "RequestBuilder",
    "AccountsRequestBuilder",
    "AssetsRequestBuilder",
    "ClaimableBalancesRequestBuilder",
    "EffectsRequestBuilder",
    "FeeStatsRequestBuilder",
    "LedgersRequestBuilder",
    "LiquidityPoolsRequestBuilder",
    "OffersRequestBuilder",
    "OperationsRequestBuilder",
    "PaymentsRequestBuilder",
    "OrderBookRequestBuilder",
    "FindPathsRequestBuilder",
    "StrictReceivePathsRequestBuilder",
    "StrictSendPathsRequestBuilder",
    "TradesRequestBuilder",
    "TradeAggregationsRequestBuilder",
    "TransactionsRequestBuilder",
]
