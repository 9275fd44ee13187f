"""
Logging setup for sortlog.

Records go to stderr so CLI output on stdout stays machine readable. Each
record carries a trace_id; runs use the algorithm name.

Environment Variables:
    SORTLOG_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL - default: INFO
    SORTLOG_LOG_FORMAT: json or text - default: json
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(trace_id)s] %(message)s"


def _resolve_level(name: str) -> int:
    name = name.upper()
    return getattr(logging, name) if name in _LEVELS else logging.INFO


def _formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return jsonlogger.JsonFormatter(
            JSON_FIELDS,
            rename_fields={"asctime": "timestamp", "name": "logger", "levelname": "level"},
        )
    return logging.Formatter(TEXT_FORMAT, datefmt="%H:%M:%S")


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Replace the root logger's handlers with one stderr handler.

    Args:
        level: Log level name; falls back to SORTLOG_LOG_LEVEL, unknown names mean INFO
        fmt: "json" or "text"; falls back to SORTLOG_LOG_FORMAT
    """
    resolved = _resolve_level(level or os.getenv("SORTLOG_LOG_LEVEL", "INFO"))
    fmt = (fmt or os.getenv("SORTLOG_LOG_FORMAT", "json")).lower()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(TraceIDFilter())
    handler.setFormatter(_formatter(fmt))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(resolved)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """Logger adapter that stamps trace_id ("N/A" when not given) on every record."""
    return logging.LoggerAdapter(logging.getLogger(name), {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """Backfills trace_id on records logged without an adapter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
