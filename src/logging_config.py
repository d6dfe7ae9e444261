# -*- coding: utf-8 -*-

"""
ログ設定

ハンドラーはルートロガーに付ける。各モジュールは get_logger() で
"tag_cloud." 配下のロガーを取得する。コンソール出力は対話プロンプトと
混ざらないよう標準エラー出力に書く。
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from config.base import LoggingConfig

LOGGER_NAMESPACE = "tag_cloud"


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_data", None) or {}


class JsonFormatter(logging.Formatter):
    """1レコード1行のJSONで出力する"""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.lineno}",
        }

        context = _record_context(record)
        if context:
            entry["context"] = context

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """人が読むためのテキスト形式。コンテキストは key=value で末尾に付ける"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = _record_context(record)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line = f"{line} | {pairs}"
        return line


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format == "json":
        return JsonFormatter()
    return TextFormatter()


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    ルートロガーを設定し、アプリケーションのロガーを返す

    既存のハンドラーは閉じてから付け替えるため、何度呼んでもよい。
    """
    config = config or LoggingConfig()
    formatter = _build_formatter(config)

    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return logging.getLogger(LOGGER_NAMESPACE)


def get_logger(name: str) -> logging.Logger:
    """tag_cloud 配下のロガーを取得"""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context
) -> None:
    """コンテキスト情報付きログ出力（None の項目は出力しない）"""
    extra_data = {key: value for key, value in context.items() if value is not None}
    logger.log(level, message, extra={"extra_data": extra_data})
