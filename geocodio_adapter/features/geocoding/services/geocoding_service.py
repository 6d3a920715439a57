"""ジオコーディングサービス"""

from typing import Any, Optional

from ..domain.models import LocationRecord
from ..providers.base import GeocodingProvider
from ..providers.geocodio_provider import GeocodioProvider
from ....infrastructure.config.settings import Settings
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class GeocodingService:
    """設定からHTTPクライアントとGeocodioプロバイダーを組み立てるサービス"""

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[HTTPClient] = None,
        limit: Optional[int] = None,
    ) -> None:
        """
        Args:
            settings: アプリケーション設定
            http_client: HTTPクライアント（未指定時は設定から作成）
            limit: 最大結果件数（未指定時は設定値）
        """
        self.settings = settings
        self.http_client = http_client or HTTPClient(
            timeout=settings.http_timeout,
            max_retries=settings.http_max_retries,
            backoff_factor=settings.http_backoff_factor,
            user_agent=settings.http_user_agent,
        )
        self.provider: GeocodingProvider = GeocodioProvider(
            self.http_client,
            settings.geocodio_api_key,
            locale=settings.geocodio_locale,
            limit=limit or settings.geocodio_result_limit,
        )

        if not settings.has_api_key:
            logger.warning("Geocodio API key is not configured; queries will be rejected")

        logger.info(
            f"GeocodingService initialized: provider={self.provider.name}, limit={self.provider.limit}"
        )

    def geocode(self, address: str) -> list[LocationRecord]:
        """住所をジオコーディング"""
        logger.info(f"Geocoding address: {address}")
        records = self.provider.geocode(address)
        logger.info(f"Geocoded {address}: {len(records)} result(s)")
        return records

    def reverse(self, latitude: float, longitude: float) -> list[LocationRecord]:
        """座標から住所を取得"""
        logger.info(f"Reverse geocoding: ({latitude}, {longitude})")
        records = self.provider.reverse(latitude, longitude)
        logger.info(f"Reverse geocoded ({latitude}, {longitude}): {len(records)} result(s)")
        return records

    def close(self) -> None:
        """HTTPセッションをクローズ"""
        self.http_client.close()

    def __enter__(self) -> "GeocodingService":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
