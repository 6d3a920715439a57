"""Geocodio APIのリクエストURL組み立て"""
from decimal import Decimal
from urllib.parse import quote_plus

GEOCODE_ENDPOINT_URL = "http://api.geocod.io/v1/geocode?q={query}&api_key={api_key}"
REVERSE_ENDPOINT_URL = "http://api.geocod.io/v1/reverse?q={latitude},{longitude}&api_key={api_key}"


def encode_address(address: str) -> str:
    """
    住所をURLエンコード

    空白は'+'、英数字と'-_.'以外はすべて%エンコードする（'~'も'%7E'）。
    """
    return quote_plus(address, safe="").replace("~", "%7E")


def format_coordinate(value: float) -> str:
    """
    座標を固定小数点表記の文字列にする

    floatの最短表現の桁をそのまま使い、丸めも指数表記もしない。
    """
    return format(Decimal(repr(float(value))), "f")


def build_geocode_url(address: str, api_key: str) -> str:
    """
    住所検索（正引き）のURLを作成

    住所はURLエンコード、APIキーはそのまま埋め込む。
    """
    return GEOCODE_ENDPOINT_URL.format(query=encode_address(address), api_key=api_key)


def build_reverse_url(latitude: float, longitude: float, api_key: str) -> str:
    """逆ジオコーディングのURLを作成"""
    return REVERSE_ENDPOINT_URL.format(
        latitude=format_coordinate(latitude),
        longitude=format_coordinate(longitude),
        api_key=api_key,
    )
