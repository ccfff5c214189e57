"""Tests for paged responses and Horizon HTTP error mapping."""

import httpx
import pytest

from stellar_client.horizon.http import HorizonRequestError
from stellar_client.horizon.requests import AccountsRequestBuilder, LedgersRequestBuilder
from stellar_client.horizon.responses.accounts import AccountResponse

ACCOUNT = "GCIBUCGPOHWMMMFPFTDWBSVHQRT4DIBJ7AD6BZJYDITBK2LCVBYW7HUQ"

NOT_FOUND = {
    "type": "https://stellar.org/horizon-errors/not_found",
    "title": "Resource Missing",
    "status": 404,
    "detail": "The resource at the url requested was not found.",
}


def ledger_page(records, next_href=None, prev_href=None):
    links = {"self": {"href": "https://horizon.example.org/ledgers"}}
    if next_href:
        links["next"] = {"href": next_href}
    if prev_href:
        links["prev"] = {"href": prev_href}
    return {"_links": links, "_embedded": {"records": records}}


class TestPages:
    """Test page parsing and navigation."""

    def test_empty_page(self, canned_client):
        client, _ = canned_client(ledger_page([]))

        page = LedgersRequestBuilder(client).execute()

        assert page.records == []
        assert not page.has_next_page()

    def test_single_record_page(self, canned_client):
        client, _ = canned_client(ledger_page([{"sequence": 7, "hash": "c"}]))

        page = LedgersRequestBuilder(client).limit(1).execute()

        assert len(page.records) == 1
        assert page.records[0].sequence == 7
        assert not page.has_next_page()

    def test_records_are_typed(self, canned_client):
        client, _ = canned_client(
            ledger_page([{"sequence": 1, "hash": "a"}, {"sequence": 2, "hash": "b"}])
        )

        page = LedgersRequestBuilder(client).execute()

        assert [ledger.sequence for ledger in page.records] == [1, 2]
        assert page.records[1].hash == "b"

    def test_rate_limit_headers(self, canned_client):
        client, _ = canned_client(
            ledger_page([{"sequence": 1}]),
            headers={
                "X-Ratelimit-Limit": "3600",
                "X-Ratelimit-Remaining": "3599",
                "X-Ratelimit-Reset": "12",
            },
        )

        page = LedgersRequestBuilder(client).execute()

        assert page.rate_limit_limit == 3600
        assert page.rate_limit_remaining == 3599
        assert page.rate_limit_reset == 12

    def test_missing_rate_limit_headers(self, canned_client):
        client, _ = canned_client({"account_id": ACCOUNT})

        account = AccountsRequestBuilder(client).account(ACCOUNT)

        assert isinstance(account, AccountResponse)
        assert account.rate_limit_limit is None

    def test_get_next_page_follows_link(self, canned_client):
        next_href = "https://horizon.example.org/ledgers?cursor=2&limit=1&order=asc"
        client, recorded = canned_client(
            ledger_page([{"sequence": 1}], next_href=next_href)
        )

        page = LedgersRequestBuilder(client).limit(1).execute()
        following = page.get_next_page()

        assert str(recorded[1].url) == next_href
        assert following.records[0].sequence == 1
        assert type(following) is type(page)

    def test_no_link_means_no_page(self, canned_client):
        client, recorded = canned_client(ledger_page([]))

        page = LedgersRequestBuilder(client).execute()

        assert page.get_next_page() is None
        assert page.get_previous_page() is None
        assert len(recorded) == 1

    def test_get_previous_page_follows_link(self, canned_client):
        prev_href = "https://horizon.example.org/ledgers?cursor=1&order=desc"
        client, recorded = canned_client(ledger_page([], prev_href=prev_href))

        page = LedgersRequestBuilder(client).execute()
        page.get_previous_page()

        assert page.has_prev_page()
        assert str(recorded[1].url) == prev_href


class TestRequestPaths:
    def test_data_key_with_reserved_characters(self, canned_client):
        client, recorded = canned_client({"value": "MQ=="})

        entry = AccountsRequestBuilder(client).account_data(ACCOUNT, "a?b#c")

        assert entry.value == "MQ=="
        assert recorded[0].url.raw_path == f"/accounts/{ACCOUNT}/data/a%3Fb%23c".encode()
        assert recorded[0].url.query == b""


class TestHorizonErrors:
    """Test mapping of failed requests to HorizonRequestError."""

    def test_not_found(self, canned_client):
        client, _ = canned_client(NOT_FOUND, status_code=404)

        with pytest.raises(HorizonRequestError) as exc_info:
            AccountsRequestBuilder(client).account(ACCOUNT)

        error = exc_info.value
        assert error.status_code == 404
        assert error.http_method == "GET"
        assert error.url == f"accounts/{ACCOUNT}"
        assert error.horizon_error.title == "Resource Missing"
        assert error.message == NOT_FOUND["detail"]
        assert error.retry_after is None

    def test_rate_limited(self, canned_client):
        client, _ = canned_client(
            {
                "type": "https://stellar.org/horizon-errors/rate_limit_exceeded",
                "title": "Rate Limit Exceeded",
                "status": 429,
            },
            status_code=429,
            headers={"Retry-After": "10"},
        )

        with pytest.raises(HorizonRequestError) as exc_info:
            LedgersRequestBuilder(client).execute()

        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after == "10"

    def test_non_json_error_body(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with httpx.Client(
            transport=httpx.MockTransport(handler), base_url="https://horizon.example.org/"
        ) as client:
            with pytest.raises(HorizonRequestError) as exc_info:
                LedgersRequestBuilder(client).execute()

        assert exc_info.value.status_code == 502
        assert exc_info.value.horizon_error is None
        assert exc_info.value.message == "Bad Gateway"

    def test_transport_error_is_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        with httpx.Client(
            transport=httpx.MockTransport(handler), base_url="https://horizon.example.org/"
        ) as client:
            with pytest.raises(HorizonRequestError) as exc_info:
                LedgersRequestBuilder(client).execute()

        assert exc_info.value.status_code is None
        assert exc_info.value.response is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_malformed_body(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>not json</html>")

        with httpx.Client(
            transport=httpx.MockTransport(handler), base_url="https://horizon.example.org/"
        ) as client:
            with pytest.raises(HorizonRequestError) as exc_info:
                LedgersRequestBuilder(client).execute()

        assert exc_info.value.status_code == 200
        assert "Unexpected response" in exc_info.value.message
