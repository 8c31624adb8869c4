"""
Logging setup for basecore.

setup_logging() configures the root logger once per process.
SessionLoggerConfig hands out request-scoped loggers: every message logged
through one carries the request label and a short session id, so the lines
of a single request can be grepped together.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from basecore.settings import get_settings

_configured = False


def setup_logging(level: str | None = None) -> None:
    """Configure root logging from settings. Safe to call multiple times."""
    global _configured
    if _configured:
        return

    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
        stream=sys.stdout,
    )
    _configured = True


class SessionLoggerAdapter(logging.LoggerAdapter):
    """Prefixes messages with "[<label> #<session_id>]"."""

    def __init__(self, logger: logging.Logger, label: str, session_id: str):
        super().__init__(logger, {"session_label": label, "session_id": session_id})
        self.label = label
        self.session_id = session_id

    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return f"[{self.label} #{self.session_id}] {msg}", kwargs


@dataclass
class SessionLoggerConfig:
    """
    Factory for request-scoped loggers.

    Attributes:
        logger_name: Name of the underlying stdlib logger
    """

    logger_name: str = "autocrud.session"

    def new_session_logger(self, label: str) -> SessionLoggerAdapter:
        return SessionLoggerAdapter(
            logging.getLogger(self.logger_name),
            label=label,
            session_id=uuid4().hex[:8],
        )
