"""Logging for the commerce backend.

Standard library handlers carry the output (console plus rotating files) and
structlog renders key/value events on top. The environment is resolved once
per configuration from ``ENV``, ``ENVIRONMENT`` or ``PROTEAN_ENV``, in that
order: production and staging render JSON, anything else goes through the
coloured console renderer.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
JSON_ENVIRONMENTS = frozenset({"production", "staging"})
QUIET_LOGGERS = ("protean", "asyncio", "httpx")

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def current_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level(env: str | None = None) -> str:
    """``LOG_LEVEL`` wins; otherwise the level mapped to the environment (INFO when unknown)."""
    env = env or current_environment()
    return os.getenv("LOG_LEVEL", LEVEL_BY_ENVIRONMENT.get(env, "INFO"))


def _rotating_file(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_dir: str, log_file_prefix: str, env: str) -> None:
    level = get_log_level(env)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [
        console,
        _rotating_file(log_path / f"{log_file_prefix}.log", level),
        _rotating_file(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def build_renderer(env: str):
    if env in JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
    )


def setup_structlog(env: str) -> None:
    callsite = structlog.processors.CallsiteParameter
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.contextvars.merge_contextvars,
            structlog.processors.CallsiteParameterAdder(
                parameters=[callsite.FILENAME, callsite.LINENO, callsite.FUNC_NAME]
            ),
            build_renderer(env),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str | None = None, log_file_prefix: str = "expirapp") -> None:
    env = current_environment()
    setup_stdlib_logging(log_dir or os.getenv("LOG_DIR", "logs"), log_file_prefix, env)
    setup_structlog(env)


def add_context(**kwargs: Any) -> None:
    """Bind values that every later log event of this context carries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
