"""Geocodio APIレスポンスの正規化"""

import json
from typing import Any, Mapping, Optional

from ..domain.models import LocationRecord, default_record_template
from .base import DEFAULT_RESULT_LIMIT
from ....shared.exceptions.errors import InvalidCredentials, NoResult
from ....shared.logging.config import get_logger
from ....shared.utils.text import empty_to_none

logger = get_logger(__name__)

# Geocodioは米国の住所のみを扱う
GEOCODIO_COUNTRY = "US"

INVALID_API_KEY_ERROR = "invalid api key"


class GeocodioResponseNormalizer:
    """
    Geocodio APIのJSONレスポンスをLocationRecordのリストに変換

    - ベンダーエラーの分類（APIキー不正 / その他）
    - 最大件数（limit）までの候補の取り出し
    - 通り名・番地の補完（inputブロックからのフォールバック）
    """

    def __init__(
        self,
        limit: int = DEFAULT_RESULT_LIMIT,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Args:
            limit: 返す結果の最大件数
            defaults: 各レコードの下地となるデフォルト値（出力キー -> 値）
        """
        self.limit = limit
        self.defaults = dict(defaults) if defaults is not None else default_record_template()

    def normalize(self, body: Optional[str], query: str) -> list[LocationRecord]:
        """
        レスポンス本文を正規化

        Args:
            body: レスポンス本文（なしの場合None）
            query: 実行したクエリ（エラーメッセージ用）

        Returns:
            list[LocationRecord]: ベンダーの順序を保った結果（最大limit件）

        Raises:
            InvalidCredentials: ベンダーがAPIキーを拒否した場合
            NoResult: 本文なし、ベンダーエラー、結果0件の場合
        """
        if not body:
            raise NoResult(f"Could not execute query: {query}")

        payload = self._parse(body)

        error = payload.get("error")
        if error and str(error).lower() == INVALID_API_KEY_ERROR:
            raise InvalidCredentials("Invalid API Key")
        elif error:
            raise NoResult(f"Error returned from api: {error}")

        candidates = _as_list(payload.get("results"))
        if not candidates:
            raise NoResult(f"Could not find results for given query: {query}")

        input_components = _as_mapping(_as_mapping(payload.get("input")).get("address_components"))

        records: list[LocationRecord] = []

        # 全候補を走査し、limit件を超えた分は捨てる
        counter = 0
        for candidate in candidates:
            counter += 1

            if counter > self.limit:
                continue

            records.append(self._build_record(candidate, input_components))

        if counter > self.limit:
            logger.debug(f"Discarded {counter - self.limit} candidates beyond limit {self.limit}")

        return records

    def _parse(self, body: str) -> dict[str, Any]:
        """JSONをパース（不正なJSONは空の構造として扱う）"""
        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.warning(f"Malformed JSON in geocodio response: {e}")
            return {}

        if not isinstance(payload, dict):
            logger.warning(f"Unexpected geocodio response type: {type(payload).__name__}")
            return {}

        return payload

    def _build_record(
        self, candidate: Any, input_components: Mapping[str, Any]
    ) -> LocationRecord:
        """候補1件からレコードを作成"""
        candidate = _as_mapping(candidate)
        coordinates = _as_mapping(candidate.get("location"))
        address = dict(_as_mapping(candidate.get("address_components")))

        # 結果に通り名がない場合、inputブロック側にパース済みの値があることがある
        if address.get("street") is None and input_components.get("street") is not None:
            address["street"] = input_components.get("street")
            address["number"] = input_components.get("number")
            address["suffix"] = input_components.get("suffix")
        elif address.get("street") is None:
            address["street"] = ""
            address["number"] = ""  # 通り名なし = 番地なし
            address["suffix"] = ""

        if address.get("suffix"):
            address["street"] = f"{address['street']} {address['suffix']}"

        data = dict(self.defaults)
        data.update(
            {
                "latitude": empty_to_none(coordinates.get("lat")),
                "longitude": empty_to_none(coordinates.get("lng")),
                "streetNumber": empty_to_none(address.get("number")),
                "streetName": empty_to_none(address.get("street")),
                "city": empty_to_none(address.get("city")),
                "zipcode": empty_to_none(address.get("zip")),
                "county": empty_to_none(address.get("county")),
                "region": empty_to_none(address.get("state")),
                "country": GEOCODIO_COUNTRY,
            }
        )

        return LocationRecord.from_mapping(data)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    """オブジェクト以外（文字列・配列・None等）は空のマッピングとして扱う"""
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list[Any]:
    """配列はそのまま、オブジェクトは値の並びとして扱い、それ以外は候補なし"""
    if isinstance(value, list):
        return value
    if isinstance(value, Mapping):
        return list(value.values())
    return []
