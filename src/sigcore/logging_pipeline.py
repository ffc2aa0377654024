"""Log formatting and logger setup for :mod:`sigcore`."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Final
from uuid import uuid4

from .settings import SigcoreSettings, get_settings

__all__ = ["JsonFormatter", "configure_logging", "ROOT_LOGGER_NAME"]

ROOT_LOGGER_NAME: Final[str] = "sigcore"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "trace_id"}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def __init__(self, *, default_trace_id: str | None = None) -> None:
        super().__init__()
        self._default_trace_id = default_trace_id

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES
        }
        payload: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "trace_id": getattr(record, "trace_id", None) or self._default_trace_id,
            "context": context,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    settings: SigcoreSettings | None = None,
    *,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """Attach a single formatted handler to the ``sigcore`` logger.

    Calling this repeatedly replaces the handler installed by the previous
    call instead of stacking handlers.

    Args:
        settings: Settings to apply. Defaults to :func:`get_settings`.
        handler: Handler to install. Defaults to a stderr stream handler.

    Returns:
        The configured ``sigcore`` logger.
    """

    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.log_level_number)

    for existing in list(logger.handlers):
        if getattr(existing, "_sigcore_handler", False):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    if settings.json_logs:
        handler.setFormatter(
            JsonFormatter(default_trace_id=settings.trace_id or str(uuid4()))
        )
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._sigcore_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
