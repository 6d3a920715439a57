"""テキスト処理ユーティリティ"""

import ipaddress
import re
from typing import Any

# URLクエリ中のAPIキー
_API_KEY_PATTERN = re.compile(r"(api_key=)[^&]*")


def is_ip_address(value: Any) -> bool:
    """
    IPv4/IPv6アドレスのリテラルかどうか

    Args:
        value: 判定対象

    Returns:
        bool: IPアドレスとして解釈できる場合True
    """
    if not isinstance(value, str):
        return False

    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False

    return True


def redact_api_key(url: str, placeholder: str = "***") -> str:
    """
    URL中のapi_keyパラメータを伏せ字にする（ログ・例外メッセージ用）

    Args:
        url: 対象URL
        placeholder: 置換文字列

    Returns:
        APIキーを伏せたURL
    """
    return _API_KEY_PATTERN.sub(lambda m: m.group(1) + placeholder, url)


def empty_to_none(value: Any) -> Any:
    """
    空値をNoneに寄せる

    空文字列・0・None（およびその他のfalsyな値）はすべて「値なし」として扱う。
    有効な座標0.0もNoneになる点に注意。
    """
    return value or None
