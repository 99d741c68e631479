from __future__ import annotations

import logging
import sys
from typing import Any

from config.settings import get_settings


_INITIALIZED: bool = False


class SafeExtraFormatter(logging.Formatter):
    """Formatter that tolerates missing extra fields by injecting defaults."""

    DEFAULTS: dict[str, Any] = {
        "op": "-",
        "status": "-",
        "duration_ms": "-",
        "record_id": "-",
        "error": "-",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return super().format(record)


def init_logging(level: str | None = None) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings()
    log_level_str = (level or settings.log_level).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        # stderr keeps stdout clean for --json output
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        formatter = SafeExtraFormatter(
            fmt=(
                "%(asctime)s %(levelname)s %(name)s %(message)s "
                "op=%(op)s status=%(status)s duration_ms=%(duration_ms)s "
                "record_id=%(record_id)s error=%(error)s"
            )
        )
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _INITIALIZED = True


def log_store_call(
    logger: logging.Logger,
    *,
    op: str,
    status: str,
    duration_ms: int,
    record_id: str | None = None,
    error: str | None = None,
) -> None:
    """One line per store round trip; failures at ERROR, successes at INFO."""
    extra: dict[str, Any] = {
        "op": op,
        "status": status,
        "duration_ms": duration_ms,
        "record_id": record_id or "-",
        "error": error or "-",
    }
    if status == "ok":
        logger.info(f"{op} company", extra=extra)
    else:
        logger.error(f"Error during {op} company", extra=extra)
