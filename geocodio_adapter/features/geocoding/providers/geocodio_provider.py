"""Geocodio API実装"""
from typing import Any, Mapping, Optional

from ..domain.models import LocationRecord
from .base import DEFAULT_RESULT_LIMIT, Transport
from .geocodio_normalizer import GeocodioResponseNormalizer
from .geocodio_query import build_geocode_url, build_reverse_url
from ....shared.exceptions.errors import InvalidCredentials, UnsupportedOperation
from ....shared.logging.config import get_logger
from ....shared.utils.text import is_ip_address, redact_api_key

logger = get_logger(__name__)


class GeocodioProvider:
    """Geocodio API実装"""

    name = "geocodio"

    def __init__(
        self,
        transport: Transport,
        api_key: Optional[str],
        locale: Optional[str] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Args:
            transport: HTTP通信層（get_bodyを持つもの）
            api_key: Geocodio APIキー（未設定の場合は呼び出し時にInvalidCredentials）
            locale: ロケール（Geocodioは参照しない）
            limit: 返す結果の最大件数
            defaults: 各レコードの下地となるデフォルト値
        """
        if limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit}")

        self.transport = transport
        self._api_key = api_key
        self._locale = locale
        self._limit = limit
        self._defaults = defaults
        self.normalizer = GeocodioResponseNormalizer(limit=limit, defaults=defaults)

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @property
    def limit(self) -> int:
        return self._limit

    def with_limit(self, limit: int) -> "GeocodioProvider":
        """最大件数だけを変えたプロバイダーを返す"""
        return GeocodioProvider(
            self.transport,
            self._api_key,
            locale=self._locale,
            limit=limit,
            defaults=self._defaults,
        )

    def geocode(self, address: str) -> list[LocationRecord]:
        """
        住所をジオコーディング

        Args:
            address: 住所文字列

        Returns:
            list[LocationRecord]: 候補（最大limit件、ベンダーの順序）

        Raises:
            UnsupportedOperation: IPアドレスが渡された場合
            InvalidCredentials: APIキーが未設定、または拒否された場合
            NoResult: 結果が得られなかった場合
            HTTPError: 通信に失敗した場合
        """
        # このAPIはIPアドレスを扱えない
        if is_ip_address(address):
            raise UnsupportedOperation("The GeocodioProvider does not support IP addresses.")

        self._require_api_key()

        return self._execute_query(build_geocode_url(address, self._api_key))

    def reverse(self, latitude: float, longitude: float) -> list[LocationRecord]:
        """
        座標から住所を取得（逆ジオコーディング）

        Args:
            latitude: 緯度
            longitude: 経度

        Returns:
            list[LocationRecord]: 候補（最大limit件、ベンダーの順序）

        Raises:
            InvalidCredentials: APIキーが未設定、または拒否された場合
            NoResult: 結果が得られなかった場合
            HTTPError: 通信に失敗した場合
        """
        self._require_api_key()

        return self._execute_query(build_reverse_url(latitude, longitude, self._api_key))

    def _require_api_key(self) -> None:
        if not self._api_key:
            raise InvalidCredentials("No API Key provided.")

    def _execute_query(self, url: str) -> list[LocationRecord]:
        query = redact_api_key(url)
        logger.debug(f"Executing geocodio query: {query}")

        body = self.transport.get_body(url)
        records = self.normalizer.normalize(body, query)

        logger.debug(f"Geocodio returned {len(records)} records for: {query}")
        return records
