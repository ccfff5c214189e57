"""Tests for Horizon request builder URL construction.

Builders only render URLs here; nothing is sent.
"""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from stellar_client.asset import Asset
from stellar_client.errors import UrlSegmentsError
from stellar_client.horizon.requests import (
    AccountsRequestBuilder,
    AssetsRequestBuilder,
    ClaimableBalancesRequestBuilder,
    EffectsRequestBuilder,
    FeeStatsRequestBuilder,
    FindPathsRequestBuilder,
    LedgersRequestBuilder,
    LiquidityPoolsRequestBuilder,
    OffersRequestBuilder,
    OperationsRequestBuilder,
    OrderBookRequestBuilder,
    PaymentsRequestBuilder,
    StrictReceivePathsRequestBuilder,
    StrictSendPathsRequestBuilder,
    TradeAggregationsRequestBuilder,
    TradesRequestBuilder,
    TransactionsRequestBuilder,
)

ACCOUNT = "GCIBUCGPOHWMMMFPFTDWBSVHQRT4DIBJ7AD6BZJYDITBK2LCVBYW7HUQ"
ISSUER = "GA5ZSEJYB37JRC5AVCIA5MOP4RHTM335X2KGX3IHOJAPP5RE34K4KZVN"
POOL_ID = "LA7QYNF7SOWQ3GLR2BGMZEHXAVIRZA4KVWLTJJFC7MGXUA74P7UJUPJN"
POOL_HEX = "3f0c34bf93ad0d9971d04ccc90f705511c838aad9734a4a2fb0d7a03fc7fe89a"
BALANCE_ID = "BAAD6DBUX6J22DMZOHIEZTEQ64CVCHEDRKWZONFEUL5Q26QD7R76RGR4TU"
BALANCE_HEX = "00000000" + POOL_HEX


def split(url):
    """Return (path, {param: value}) of a relative builder URL."""
    parts = urlsplit(url)
    return parts.path, {k: v[0] for k, v in parse_qs(parts.query).items()}


@pytest.fixture
def client():
    """Client that is never used to send anything."""
    with httpx.Client(base_url="https://horizon.example.org/") as http_client:
        yield http_client


class TestRequestBuilderBase:
    """Test the behaviour shared by all builders."""

    def test_default_segment_without_params(self, client):
        assert LedgersRequestBuilder(client).build_url() == "ledgers"

    def test_cursor_limit_order(self, client):
        url = LedgersRequestBuilder(client).cursor("now").limit(10).order("desc").build_url()

        assert url == "ledgers?cursor=now&limit=10&order=desc"

    def test_build_url_is_deterministic(self, client):
        def build():
            return (
                PaymentsRequestBuilder(client)
                .for_account(ACCOUNT)
                .include_failed(True)
                .limit(5)
                .build_url()
            )

        assert build() == build()

    def test_set_segments_twice_raises(self, client):
        builder = OperationsRequestBuilder(client).for_account(ACCOUNT)

        with pytest.raises(UrlSegmentsError, match="URL segments have been already added."):
            builder.for_ledger(12345)

    def test_segments_are_percent_encoded(self, client):
        url = OperationsRequestBuilder(client).for_account("a/b?c#d").build_url()

        assert url == "accounts/a%2Fb%3Fc%23d/operations"

    def test_limit_must_be_positive(self, client):
        with pytest.raises(ValueError):
            LedgersRequestBuilder(client).limit(0)

    def test_order_must_be_asc_or_desc(self, client):
        with pytest.raises(ValueError):
            LedgersRequestBuilder(client).order("newest")


class TestAccountsRequestBuilder:
    """Test the pairwise exclusive account filters."""

    @pytest.mark.parametrize(
        "apply, expected",
        [
            (lambda b: b.for_signer(ACCOUNT), {"signer": ACCOUNT}),
            (
                lambda b: b.for_asset(Asset("USD", ISSUER)),
                {"asset": f"USD:{ISSUER}"},
            ),
            (lambda b: b.for_liquidity_pool(POOL_ID), {"liquidity_pool": POOL_HEX}),
            (lambda b: b.for_sponsor(ACCOUNT), {"sponsor": ACCOUNT}),
        ],
    )
    def test_single_filter(self, client, apply, expected):
        path, params = split(apply(AccountsRequestBuilder(client)).build_url())

        assert path == "accounts"
        assert params == expected

    @pytest.mark.parametrize(
        "first, second, message",
        [
            ("signer", "asset", "cannot set both asset and signer"),
            ("signer", "liquidity_pool", "cannot set both liquidity_pool and signer"),
            ("signer", "sponsor", "cannot set both sponsor and signer"),
            ("asset", "liquidity_pool", "cannot set both liquidity_pool and asset"),
            ("asset", "sponsor", "cannot set both sponsor and asset"),
            ("liquidity_pool", "sponsor", "cannot set both sponsor and liquidity_pool"),
        ],
    )
    def test_conflicting_filters_raise_in_either_order(self, client, first, second, message):
        setters = {
            "signer": lambda b: b.for_signer(ACCOUNT),
            "asset": lambda b: b.for_asset(Asset.native()),
            "liquidity_pool": lambda b: b.for_liquidity_pool(POOL_HEX),
            "sponsor": lambda b: b.for_sponsor(ACCOUNT),
        }

        builder = setters[first](AccountsRequestBuilder(client))
        with pytest.raises(ValueError) as exc_info:
            setters[second](builder)
        assert str(exc_info.value) == message

        builder = setters[second](AccountsRequestBuilder(client))
        with pytest.raises(ValueError) as exc_info:
            setters[first](builder)
        assert str(exc_info.value) == message

    def test_same_filter_can_be_replaced(self, client):
        url = AccountsRequestBuilder(client).for_signer("GA").for_signer(ACCOUNT).build_url()

        assert split(url)[1] == {"signer": ACCOUNT}

    def test_account_data_path(self, client):
        builder = AccountsRequestBuilder(client)
        builder.set_segments("accounts", ACCOUNT, "data", "config")

        assert builder.build_url() == f"accounts/{ACCOUNT}/data/config"


class TestCollectionBuilders:
    """Test filters and sub-resource paths of the collection builders."""

    def test_assets_filters(self, client):
        url = AssetsRequestBuilder(client).for_asset_code("USD").for_asset_issuer(ISSUER).build_url()

        assert split(url) == ("assets", {"asset_code": "USD", "asset_issuer": ISSUER})

    def test_claimable_balances_filters(self, client):
        url = (
            ClaimableBalancesRequestBuilder(client)
            .for_sponsor(ACCOUNT)
            .for_asset(Asset("USD", ISSUER))
            .for_claimant(ISSUER)
            .build_url()
        )

        assert split(url) == (
            "claimable_balances",
            {"sponsor": ACCOUNT, "asset": f"USD:{ISSUER}", "claimant": ISSUER},
        )

    @pytest.mark.parametrize(
        "apply, expected_path",
        [
            (lambda b: b.for_account(ACCOUNT), f"accounts/{ACCOUNT}/effects"),
            (lambda b: b.for_ledger(42), "ledgers/42/effects"),
            (lambda b: b.for_transaction("abc"), "transactions/abc/effects"),
            (lambda b: b.for_liquidity_pool(POOL_ID), f"liquidity_pools/{POOL_HEX}/effects"),
            (lambda b: b.for_operation("123"), "operations/123/effects"),
        ],
    )
    def test_effects_paths(self, client, apply, expected_path):
        assert apply(EffectsRequestBuilder(client)).build_url() == expected_path

    def test_liquidity_pools_for_reserves(self, client):
        url = (
            LiquidityPoolsRequestBuilder(client)
            .for_reserves(Asset.native(), Asset("USD", ISSUER))
            .build_url()
        )

        assert split(url) == ("liquidity_pools", {"reserves": f"native,USD:{ISSUER}"})

    def test_liquidity_pools_for_account(self, client):
        url = LiquidityPoolsRequestBuilder(client).for_account(ACCOUNT).build_url()

        assert split(url) == ("liquidity_pools", {"account": ACCOUNT})

    def test_offers_filters(self, client):
        url = (
            OffersRequestBuilder(client)
            .for_seller(ACCOUNT)
            .for_selling_asset(Asset.native())
            .for_buying_asset(Asset("USD", ISSUER))
            .build_url()
        )

        assert split(url) == (
            "offers",
            {
                "seller": ACCOUNT,
                "selling_asset_type": "native",
                "buying_asset_type": "credit_alphanum4",
                "buying_asset_code": "USD",
                "buying_asset_issuer": ISSUER,
            },
        )

    def test_offers_replacing_credit_with_native_drops_code_and_issuer(self, client):
        url = (
            OffersRequestBuilder(client)
            .for_selling_asset(Asset("USD", ISSUER))
            .for_selling_asset(Asset.native())
            .build_url()
        )

        assert split(url) == ("offers", {"selling_asset_type": "native"})

    @pytest.mark.parametrize(
        "builder_cls,setter,prefix",
        [
            (OrderBookRequestBuilder, "for_buying_asset", "buying_"),
            (TradesRequestBuilder, "for_base_asset", "base_"),
            (TradeAggregationsRequestBuilder, "for_counter_asset", "counter_"),
        ],
    )
    def test_asset_setters_replace_previous_asset(self, client, builder_cls, setter, prefix):
        builder = builder_cls(client)
        getattr(builder, setter)(Asset("LONGCODE", ISSUER))
        getattr(builder, setter)(Asset.native())

        assert split(builder.build_url())[1] == {f"{prefix}asset_type": "native"}

    def test_offers_for_account_is_a_path(self, client):
        assert OffersRequestBuilder(client).for_account(ACCOUNT).build_url() == (
            f"accounts/{ACCOUNT}/offers"
        )

    def test_operations_for_claimable_balance_decodes_strkey(self, client):
        url = OperationsRequestBuilder(client).for_claimable_balance(BALANCE_ID).build_url()

        assert url == f"claimable_balances/{BALANCE_HEX}/operations"

    def test_operations_include_failed_and_transactions(self, client):
        builder = OperationsRequestBuilder(client).include_failed(False).include_transactions(True)

        assert split(builder.build_url())[1] == {
            "include_failed": "false",
            "join": "transactions",
        }

        builder.include_transactions(False)
        assert split(builder.build_url())[1] == {"include_failed": "false"}

    def test_payments_for_ledger(self, client):
        url = PaymentsRequestBuilder(client).for_ledger(7).include_failed(True).build_url()

        assert url == "ledgers/7/payments?include_failed=true"

    def test_transactions_for_liquidity_pool(self, client):
        url = TransactionsRequestBuilder(client).for_liquidity_pool(POOL_ID).build_url()

        assert url == f"liquidity_pools/{POOL_HEX}/transactions"

    def test_trades_filters(self, client):
        url = (
            TradesRequestBuilder(client)
            .for_base_asset(Asset.native())
            .for_counter_asset(Asset("USD", ISSUER))
            .for_trade_type("orderbook")
            .for_offer_id(77)
            .build_url()
        )

        assert split(url)[1] == {
            "base_asset_type": "native",
            "counter_asset_type": "credit_alphanum4",
            "counter_asset_code": "USD",
            "counter_asset_issuer": ISSUER,
            "trade_type": "orderbook",
            "offer_id": "77",
        }

    def test_trades_rejects_unknown_trade_type(self, client):
        with pytest.raises(ValueError):
            TradesRequestBuilder(client).for_trade_type("otc")

    def test_trades_for_liquidity_pool_path(self, client):
        assert TradesRequestBuilder(client).for_liquidity_pool(POOL_HEX).build_url() == (
            f"liquidity_pools/{POOL_HEX}/trades"
        )

    def test_trade_aggregations_constructor_params(self, client):
        builder = TradeAggregationsRequestBuilder(
            client,
            base_asset=Asset.native(),
            counter_asset=Asset("USD", ISSUER),
            start_time=1512689100000,
            end_time=1512775500000,
            resolution=300000,
            offset=0,
        )

        path, params = split(builder.build_url())
        assert path == "trade_aggregations"
        assert params["start_time"] == "1512689100000"
        assert params["end_time"] == "1512775500000"
        assert params["resolution"] == "300000"
        assert params["offset"] == "0"
        assert params["counter_asset_code"] == "USD"

    def test_order_book(self, client):
        builder = OrderBookRequestBuilder(
            client, Asset.native(), Asset("USD", ISSUER)
        )

        path, params = split(builder.build_url())
        assert path == "order_book"
        assert params["selling_asset_type"] == "native"
        assert params["buying_asset_code"] == "USD"

    def test_fee_stats(self, client):
        assert FeeStatsRequestBuilder(client).build_url() == "fee_stats"


class TestPathsRequestBuilders:
    """Test path finding builders and their exclusive source/destination filters."""

    def test_find_paths(self, client):
        url = (
            FindPathsRequestBuilder(client)
            .for_source_account(ACCOUNT)
            .for_destination_account(ISSUER)
            .for_destination_amount("20.0")
            .for_destination_asset(Asset("EUR", ISSUER))
            .build_url()
        )

        path, params = split(url)
        assert path == "paths"
        assert params["source_account"] == ACCOUNT
        assert params["destination_amount"] == "20.0"
        assert params["destination_asset_code"] == "EUR"

    def test_strict_receive_with_source_assets(self, client):
        url = (
            StrictReceivePathsRequestBuilder(client)
            .for_source_assets(Asset.native(), Asset("USD", ISSUER))
            .for_destination_amount("5")
            .build_url()
        )

        path, params = split(url)
        assert path == "paths/strict-receive"
        assert params["source_assets"] == f"native,USD:{ISSUER}"

    def test_strict_receive_source_assets_and_account_conflict(self, client):
        builder = StrictReceivePathsRequestBuilder(client).for_source_account(ACCOUNT)

        with pytest.raises(ValueError, match="cannot set both source_assets and source_account"):
            builder.for_source_assets(Asset.native())

        builder = StrictReceivePathsRequestBuilder(client).for_source_assets(Asset.native())
        with pytest.raises(ValueError, match="cannot set both source_assets and source_account"):
            builder.for_source_account(ACCOUNT)

    def test_strict_send(self, client):
        url = (
            StrictSendPathsRequestBuilder(client)
            .for_source_asset(Asset.native())
            .for_source_amount("10")
            .for_destination_account(ACCOUNT)
            .build_url()
        )

        path, params = split(url)
        assert path == "paths/strict-send"
        assert params == {
            "source_asset_type": "native",
            "source_amount": "10",
            "destination_account": ACCOUNT,
        }

    def test_strict_send_destination_assets_and_account_conflict(self, client):
        builder = StrictSendPathsRequestBuilder(client).for_destination_assets(Asset.native())

        with pytest.raises(
            ValueError, match="cannot set both destination_assets and destination_account"
        ):
            builder.for_destination_account(ACCOUNT)
