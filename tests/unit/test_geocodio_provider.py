"""GeocodioProviderのテスト"""

import json

import pytest

from geocodio_adapter.features.geocoding.providers.geocodio_provider import GeocodioProvider
from geocodio_adapter.shared.exceptions.errors import (
    InvalidCredentials,
    NoResult,
    UnsupportedOperation,
)

from fakes import FakeTransport, make_candidate


def test_name() -> None:
    assert GeocodioProvider(FakeTransport(), "K").name == "geocodio"


@pytest.mark.parametrize("address", ["127.0.0.1", "74.200.247.59", "::1", "2001:db8::ff00:42:8329"])
@pytest.mark.parametrize("api_key", ["K", None])
def test_geocode_rejects_ip_addresses(
    transport: FakeTransport, address: str, api_key: str | None
) -> None:
    """IPアドレスはAPIキーの有無に関わらずUnsupportedOperation"""
    provider = GeocodioProvider(transport, api_key)

    with pytest.raises(UnsupportedOperation):
        provider.geocode(address)

    assert transport.requested_urls == []


@pytest.mark.parametrize("api_key", [None, ""])
def test_geocode_without_api_key(transport: FakeTransport, api_key: str | None) -> None:
    """APIキーなしは通信前にInvalidCredentials"""
    provider = GeocodioProvider(transport, api_key)

    with pytest.raises(InvalidCredentials, match="No API Key provided"):
        provider.geocode("1600 Pennsylvania Ave")

    assert transport.requested_urls == []


def test_reverse_without_api_key(transport: FakeTransport) -> None:
    provider = GeocodioProvider(transport, None)

    with pytest.raises(InvalidCredentials):
        provider.reverse(38.9, -77.0)

    assert transport.requested_urls == []


def test_geocode_requests_forward_endpoint(geocodio_body: str) -> None:
    transport = FakeTransport(geocodio_body)
    provider = GeocodioProvider(transport, "secret")

    records = provider.geocode("1109 N Highland St, Arlington VA")

    assert transport.requested_urls == [
        "http://api.geocod.io/v1/geocode?q=1109+N+Highland+St%2C+Arlington+VA&api_key=secret"
    ]
    assert len(records) == 1
    assert records[0].street_name == "Highland St"


def test_reverse_requests_reverse_endpoint(geocodio_body: str) -> None:
    transport = FakeTransport(geocodio_body)
    provider = GeocodioProvider(transport, "secret")

    records = provider.reverse(38.886665, -77.094733)

    assert transport.requested_urls == [
        "http://api.geocod.io/v1/reverse?q=38.886665,-77.094733&api_key=secret"
    ]
    assert records[0].region == "VA"


def test_vendor_invalid_key_is_reported() -> None:
    transport = FakeTransport(json.dumps({"error": "Invalid API key"}))

    with pytest.raises(InvalidCredentials, match="Invalid API Key"):
        GeocodioProvider(transport, "wrong").geocode("Arlington VA")


def test_no_result_message_does_not_leak_api_key() -> None:
    """エラーメッセージにはクエリを含むが、APIキーは伏せる"""
    transport = FakeTransport(json.dumps({"results": []}))

    with pytest.raises(NoResult) as exc_info:
        GeocodioProvider(transport, "secret").geocode("Nowhere")

    message = str(exc_info.value)
    assert "q=Nowhere" in message
    assert "secret" not in message


def test_absent_body_raises_no_result(transport: FakeTransport) -> None:
    with pytest.raises(NoResult, match="Could not execute query"):
        GeocodioProvider(transport, "K").reverse(1.5, 2.5)


def test_limit_applies_to_results() -> None:
    body = json.dumps({"results": [make_candidate(city=c) for c in ("A", "B", "C")]})
    provider = GeocodioProvider(FakeTransport(body), "K", limit=1)

    records = provider.geocode("Somewhere")

    assert [r.city for r in records] == ["A"]


def test_with_limit_returns_new_provider() -> None:
    body = json.dumps({"results": [make_candidate(city=c) for c in ("A", "B", "C")]})
    transport = FakeTransport(body)
    provider = GeocodioProvider(transport, "K", locale="en_US")

    limited = provider.with_limit(2)

    assert provider.limit == 5
    assert limited.limit == 2
    assert limited.locale == "en_US"
    assert limited.transport is transport
    assert [r.city for r in limited.geocode("Somewhere")] == ["A", "B"]


@pytest.mark.parametrize("limit", [0, -1])
def test_invalid_limit(limit: int) -> None:
    with pytest.raises(ValueError):
        GeocodioProvider(FakeTransport(), "K", limit=limit)


def test_locale_defaults_to_none() -> None:
    assert GeocodioProvider(FakeTransport(), "K").locale is None
