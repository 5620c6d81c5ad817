"""Structured Logging Configuration

structlog → stdlib logging → stdout
빌드 1건의 로그는 contextvars로 project_id를 공유한다.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from backend.app.core.config import settings

# 프롬프트/파일 내용 같은 긴 값은 잘라서 기록
MAX_FIELD_LENGTH = 500

QUIET_LOGGERS = ("httpx", "httpcore", "openai", "asyncio", "uvicorn.access")


def truncate_long_values(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, str) and len(value) > MAX_FIELD_LENGTH:
            event_dict[key] = f"{value[:MAX_FIELD_LENGTH]}... ({len(value)} chars)"
    return event_dict


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "text":
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    raise ValueError(f"Unknown LOG_FORMAT '{log_format}' (expected 'json' or 'text')")


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """구조화 로깅 설정

    Args:
        level: 로그 레벨 (기본값: settings.LOG_LEVEL)
        log_format: "json" (운영) 또는 "text" (개발) (기본값: settings.LOG_FORMAT)
    """
    log_format = (log_format or settings.LOG_FORMAT).lower()
    renderer = _renderer(log_format)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        truncate_long_values,
        structlog.processors.UnicodeDecoder(),
    ]
    if log_format == "json":
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel((level or settings.LOG_LEVEL).upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """현재 컨텍스트(빌드)의 이후 모든 로그에 필드 추가"""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()
