"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocodio
    geocodio_api_key: Optional[str] = Field(
        default=None,
        description="Geocodio API Key",
    )
    geocodio_locale: Optional[str] = Field(
        default=None,
        description="ロケール（Geocodioでは参照されない）",
    )
    geocodio_result_limit: int = Field(
        default=5,
        ge=1,
        description="1クエリあたりの最大結果件数",
    )

    # HTTP
    http_timeout: int = Field(
        default=20,
        description="HTTPリクエストのタイムアウト（秒）",
    )
    http_max_retries: int = Field(
        default=3,
        ge=0,
        description="5xx応答時のリトライ回数",
    )
    http_backoff_factor: float = Field(
        default=0.5,
        description="リトライのバックオフ係数",
    )
    http_user_agent: Optional[str] = Field(
        default=None,
        description="User-Agent（未設定時はクライアントのデフォルト）",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @property
    def has_api_key(self) -> bool:
        """APIキーが設定されているか"""
        return bool(self.geocodio_api_key)
