"""Centralized logging configuration."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from loguru import logger as loguru_logger

from ticketing.domain.errors import DomainError

if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
        "<y>{extra}</>",
    )
)


class InterceptHandler(logging.Handler):
    """Route stdlib (and Django) log records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO") -> None:
    loguru_logger.remove()  # Remove default handler to avoid duplicate output
    loguru_logger.add(sys.stderr, format=log_format, level=level)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


@contextmanager
def log_rejections(operation: str, **context: Any) -> Iterator["LoguruLogger"]:
    """Yield a logger bound to ``context`` and log any DomainError at WARNING.

    The error is re-raised unchanged.
    """
    bound = loguru_logger.bind(operation=operation, **context)
    try:
        yield bound
    except DomainError as exc:
        bound.warning("Rejected {}: {}", operation, exc)
        raise
