"""HTTPクライアント（リトライ機能付き）"""

from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions.errors import HTTPError
from ..logging.config import get_logger
from ..utils.text import redact_api_key

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "geocodio-adapter/1.0 (+https://www.geocod.io)"


class HTTPClient:
    """
    リトライ機能付きHTTPクライアント

    Features:
    - 5xx応答の自動リトライ（指数バックオフ）
    - タイムアウト設定
    - セッション管理
    """

    def __init__(
        self,
        timeout: int = 20,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        status_forcelist: tuple[int, ...] = (500, 502, 503, 504),
        user_agent: Optional[str] = None,
    ):
        """
        Args:
            timeout: リクエストタイムアウト（秒）
            max_retries: 最大リトライ回数
            backoff_factor: バックオフ係数
            status_forcelist: リトライ対象のステータスコード
            user_agent: User-Agentヘッダー
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.status_forcelist = status_forcelist
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()

        retry_strategy = Retry(
            total=self.max_retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=self.status_forcelist,
            allowed_methods=["HEAD", "GET", "OPTIONS"],
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "application/json",
            }
        )

        return session

    def get(
        self,
        url: str,
        raise_for_status: bool = True,
    ) -> requests.Response:
        """
        GETリクエスト

        Args:
            url: リクエストURL
            raise_for_status: 4xx/5xx応答を例外にするか

        Returns:
            レスポンスオブジェクト

        Raises:
            HTTPError: リクエスト失敗時
        """
        safe_url = redact_api_key(url)

        try:
            logger.debug(f"GET request to {safe_url}")
            response = self.session.get(
                url,
                timeout=self.timeout,
            )

            if raise_for_status:
                response.raise_for_status()

            logger.debug(f"GET request finished: {safe_url} (status={response.status_code})")
            return response

        except requests.RequestException as e:
            logger.error(f"GET request failed: {safe_url} - {type(e).__name__}")
            raise HTTPError(f"Failed to GET {safe_url}: {type(e).__name__}") from e

    def get_body(self, url: str) -> Optional[str]:
        """
        GETリクエストを行い、レスポンス本文を返す

        4xx応答はエラー本文（JSON）を呼び出し側で判定できるよう、例外にせず本文を返す。
        5xx応答はリトライ後も失敗した場合にHTTPErrorとなる。

        Args:
            url: リクエストURL

        Returns:
            Optional[str]: レスポンス本文（空の場合はNone）

        Raises:
            HTTPError: 接続失敗・タイムアウト・リトライ上限到達時
        """
        response = self.get(url, raise_for_status=False)

        if response.status_code >= 500:
            logger.error(
                f"Server error from {redact_api_key(url)} (status={response.status_code})"
            )
            raise HTTPError(
                f"Server error {response.status_code} for {redact_api_key(url)}"
            )

        return response.text or None

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
