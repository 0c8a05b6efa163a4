"""Logging setup and lightweight timing helpers."""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("landmark_router")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including fields passed via ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Install a single stream handler on the package logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = config.level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="LMR_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)


@contextmanager
def log_duration(label: str, **context: Any) -> Iterator[None]:
    """Log how long the wrapped block took, at DEBUG level."""
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            f"{label} took {elapsed_ms:.2f}ms",
            extra={"step": label, "elapsed_ms": round(elapsed_ms, 3), **context},
        )
