"""ジオコーディングプロバイダーのインターフェース"""
from typing import Optional, Protocol

from ..domain.models import LocationRecord

# プロバイダーが返す最大件数のデフォルト
DEFAULT_RESULT_LIMIT = 5


class Transport(Protocol):
    """URLへGETを行い本文を返す通信層"""

    def get_body(self, url: str) -> Optional[str]: ...


class GeocodingProvider(Protocol):
    """ジオコーディングプロバイダー"""

    @property
    def name(self) -> str: ...

    @property
    def limit(self) -> int: ...

    def geocode(self, address: str) -> list[LocationRecord]: ...

    def reverse(self, latitude: float, longitude: float) -> list[LocationRecord]: ...
