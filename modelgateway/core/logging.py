"""loguru setup for the gateway, with stdlib logging routed into it.

Outbound httpx request lines are tagged with the provider that the current
pipeline run is serving, taken from ``current_provider``.
"""

import sys
import logging
from pathlib import Path
from contextvars import ContextVar
from typing import Optional

from loguru import logger

from modelgateway.core.config import get_config

current_provider: ContextVar[str] = ContextVar("current_provider", default="")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

FILE_ROTATION = "100 MB"
FILE_RETENTION = "10 days"

STDLIB_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi", "httpx")
HTTPX_REQUEST_MARKER = "HTTP Request:"


def _tag_provider(record: logging.LogRecord) -> str:
    message = record.getMessage()
    if not record.name.startswith("httpx") or HTTPX_REQUEST_MARKER not in message:
        return message
    provider_name = current_provider.get()
    return f"[Provider: {provider_name}] {message}" if provider_name else message


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so loguru reports the real call site
        frame, depth = logging.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, _tag_provider(record))


def _route_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in STDLIB_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [InterceptHandler()]
        stdlib_logger.propagate = False


def setup_logging(
    log_level: Optional[str] = None, log_file: Optional[str] = None
) -> None:
    """Replace loguru's default sink with a console sink and a rotating file sink.

    Args:
        log_level: Console level. Falls back to LOG_LEVEL.
        log_file: File sink path. Falls back to LOG_FILE. The file sink
            always records DEBUG and above.
    """
    config = get_config()
    log_level = log_level or config.log_level
    log_file = log_file or config.log_file

    logger.remove()
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=log_level, colorize=True)

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        format=FILE_FORMAT,
        level="DEBUG",
        rotation=FILE_ROTATION,
        retention=FILE_RETENTION,
        compression="zip",
        encoding="utf-8",
    )

    _route_stdlib_logging()
    logger.debug(f"Logging to stdout at {log_level} and to {log_file}")


def set_provider_context(provider_name: str) -> None:
    current_provider.set(provider_name)


def get_provider_context() -> str:
    return current_provider.get()


def clear_provider_context() -> None:
    current_provider.set("")


def get_logger():
    return logger
