"""Structured JSON logging helper."""
import json
import logging
import sys
from typing import Any, Dict, Optional

from fuzzy_match.settings import settings

LOGGER_NAME = "fuzzy_match"

EXTRA_FIELDS = (
    "request_id",
    "strategy",
    "score",
    "normalization",
    "timing_ms",
    "len_a",
    "len_b",
    "version",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging() -> logging.Logger:
    """Set up JSON logging."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger, or one of its children."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def log_comparison_result(
    logger: logging.Logger,
    request_id: str,
    strategy: str,
    score: float,
    normalization: str,
    timing_ms: Dict[str, float],
    len_a: int,
    len_b: int,
    level: int = logging.INFO,
):
    """Log structured comparison result."""
    extra = {
        "request_id": request_id,
        "strategy": strategy,
        "score": score,
        "normalization": normalization,
        "timing_ms": timing_ms,
        "len_a": len_a,
        "len_b": len_b,
    }
    logger.log(level, "Comparison completed", extra=extra)
