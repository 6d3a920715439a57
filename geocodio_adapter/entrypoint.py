"""CLIエントリーポイント"""
import argparse
import json
import sys
from typing import Optional

from .features.geocoding.services.geocoding_service import GeocodingService
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import GeocoderError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geocodio ジオコーディングツール")

    parser.add_argument(
        "--limit",
        type=int,
        help="最大結果件数（デフォルト: 設定値）",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    geocode_parser = subparsers.add_parser("geocode", help="住所から座標を取得")
    geocode_parser.add_argument("address", type=str, help="住所")

    reverse_parser = subparsers.add_parser("reverse", help="座標から住所を取得")
    reverse_parser.add_argument("latitude", type=float, help="緯度")
    reverse_parser.add_argument("longitude", type=float, help="経度")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗）
    """
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(_env_file=args.env_file)

        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(level=settings.log_level)

        with GeocodingService(settings, limit=args.limit) as service:
            if args.command == "geocode":
                records = service.geocode(args.address)
            else:
                records = service.reverse(args.latitude, args.longitude)

        print(json.dumps([record.to_dict() for record in records], ensure_ascii=False, indent=2))
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except GeocoderError as e:
        logger.error(f"Geocoding failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
