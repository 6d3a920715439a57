"""テキスト処理ユーティリティのテスト"""

import pytest

from geocodio_adapter.shared.utils.text import empty_to_none, is_ip_address, redact_api_key


@pytest.mark.parametrize(
    "value,expected",
    [
        ("192.168.0.1", True),
        ("::ffff:192.0.2.1", True),
        ("fe80::1", True),
        ("1600 Pennsylvania Ave", False),
        ("999.1.1.1", False),
        ("", False),
        (None, False),
    ],
)
def test_is_ip_address(value: object, expected: bool) -> None:
    assert is_ip_address(value) is expected


def test_redact_api_key() -> None:
    url = "http://api.geocod.io/v1/geocode?q=Main&api_key=abc123"

    assert redact_api_key(url) == "http://api.geocod.io/v1/geocode?q=Main&api_key=***"


def test_redact_api_key_without_key() -> None:
    assert redact_api_key("http://example.com/?q=x") == "http://example.com/?q=x"


@pytest.mark.parametrize("value", [None, "", 0, 0.0])
def test_empty_to_none(value: object) -> None:
    assert empty_to_none(value) is None


@pytest.mark.parametrize("value", ["Main", "0", 1.5, -77.0])
def test_empty_to_none_keeps_values(value: object) -> None:
    assert empty_to_none(value) == value
