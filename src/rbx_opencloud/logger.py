"""rbx_opencloud のログ出力設定（structlog）"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LogSection

LOGGER_NAME = "rbx_opencloud"


def _processors(format: str) -> list[structlog.types.Processor]:
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if format == "text":
        return [*shared, structlog.dev.ConsoleRenderer()]
    return [*shared, structlog.processors.StackInfoRenderer(), structlog.processors.JSONRenderer()]


def configure_logging(section: LogSection | None = None) -> structlog.stdlib.BoundLogger:
    """LogSection に従ってライブラリのログ出力を設定する。

    ライブラリ内部のイベント（リクエスト送信・ページ取得）はすべて DEBUG で、
    認証情報は含まない。ハンドラーは rbx_opencloud ロガーにのみ付与する。
    """
    section = section or LogSection()
    level = getattr(logging, section.level.upper(), logging.INFO)

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.setLevel(level)
    if not stdlib_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        stdlib_logger.addHandler(handler)

    structlog.configure(
        processors=_processors(section.format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.stdlib.get_logger(LOGGER_NAME)
