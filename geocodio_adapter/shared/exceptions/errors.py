"""カスタム例外定義"""


class GeocoderError(Exception):
    """ジオコーダー基底例外"""

    pass


class UnsupportedOperation(GeocoderError):
    """プロバイダーが対応していない操作（IPアドレスのジオコーディングなど）"""

    pass


class InvalidCredentials(GeocoderError):
    """APIキー未設定、またはベンダーがAPIキーを拒否した"""

    pass


class NoResult(GeocoderError):
    """結果なし（レスポンス本文なし、ベンダーエラー、候補0件）"""

    pass


class HTTPError(GeocoderError):
    """HTTP関連のエラー"""

    pass
