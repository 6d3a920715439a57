"""ジオコーディング機能のドメインモデル"""
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

# レコードのフィールド名 -> 出力キー（プロバイダー共通の名前）
_WIRE_NAMES = {
    "latitude": "latitude",
    "longitude": "longitude",
    "bounds": "bounds",
    "street_number": "streetNumber",
    "street_name": "streetName",
    "city": "city",
    "zipcode": "zipcode",
    "city_district": "cityDistrict",
    "county": "county",
    "county_code": "countyCode",
    "region": "region",
    "region_code": "regionCode",
    "country": "country",
    "country_code": "countryCode",
    "timezone": "timezone",
}
_FIELD_NAMES = {wire: name for name, wire in _WIRE_NAMES.items()}


def default_record_template() -> dict[str, Any]:
    """
    全プロバイダー共通のデフォルトレコード

    各結果はこのテンプレートの上にパース結果を重ねて作られる。
    """
    return {wire: None for wire in _WIRE_NAMES.values()}


@dataclass
class LocationRecord:
    """正規化された位置情報（プロバイダー非依存）"""

    latitude: Optional[float] = None  # 緯度
    longitude: Optional[float] = None  # 経度
    bounds: Optional[dict[str, float]] = None  # 範囲（south/west/north/east）
    street_number: Optional[str] = None  # 番地
    street_name: Optional[str] = None  # 通り名（接尾辞込み）
    city: Optional[str] = None
    zipcode: Optional[str] = None
    city_district: Optional[str] = None
    county: Optional[str] = None
    county_code: Optional[str] = None
    region: Optional[str] = None  # 州
    region_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    timezone: Optional[str] = None

    # テンプレート由来でレコードに対応するフィールドがない値
    extras: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return (
            f"LocationRecord(lat={self.latitude}, lng={self.longitude}, "
            f"street={self.street_number} {self.street_name}, city={self.city})"
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LocationRecord":
        """
        出力キー形式（streetNumber等）のマッピングからレコードを作成

        Args:
            data: 出力キー -> 値

        Returns:
            LocationRecord: 対応しないキーはextrasに格納される
        """
        kwargs: dict[str, Any] = {}
        extras: dict[str, Any] = {}

        for key, value in data.items():
            name = _FIELD_NAMES.get(key)
            if name is None:
                extras[key] = value
            else:
                kwargs[name] = value

        return cls(**kwargs, extras=extras)

    def to_dict(self) -> dict[str, Any]:
        """出力キー形式の辞書に変換"""
        data = dict(self.extras)
        for f in fields(self):
            if f.name == "extras":
                continue
            data[_WIRE_NAMES[f.name]] = getattr(self, f.name)
        return data
