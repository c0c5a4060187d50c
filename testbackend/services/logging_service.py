# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/logging_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Logging Service Implementation.
Configures the process-wide logging setup once (text or JSON output) and hands
out module loggers. JSON records are rendered with orjson so log shippers can
parse them without extra configuration.
"""

# Standard
from datetime import datetime, timezone
import logging
import sys
from typing import Any, Dict, Optional

# Third-Party
import orjson

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RESERVED_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON documents.

    Examples:
        >>> fmt = JSONFormatter()
        >>> record = logging.LogRecord("demo", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        >>> import orjson
        >>> orjson.loads(fmt.format(record))["message"]
        'hello world'
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a record as JSON.

        Args:
            record: Log record to render.

        Returns:
            JSON string for the record.
        """
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode()


class LoggingService:
    """Configure root logging and provide named loggers."""

    _configured: bool = False
    _handler: Optional[logging.Handler] = None

    def configure(self, level: str = "INFO", fmt: str = "text") -> None:
        """Install a stream handler on the root logger.

        Calling this again replaces the handler installed by the previous call,
        so the level and format can be changed at runtime (e.g. in tests).

        Args:
            level: Log level name.
            fmt: ``text`` or ``json``.
        """
        root = logging.getLogger()
        if LoggingService._handler is not None:
            root.removeHandler(LoggingService._handler)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
        root.addHandler(handler)
        root.setLevel(level.upper())

        LoggingService._handler = handler
        LoggingService._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        """Return a logger for a module.

        Args:
            name: Logger name, usually ``__name__``.

        Returns:
            The named logger.

        Examples:
            >>> LoggingService().get_logger("testbackend.demo").name
            'testbackend.demo'
        """
        return logging.getLogger(name)

    @property
    def configured(self) -> bool:
        """Whether :meth:`configure` has run in this process.

        Returns:
            True once a handler is installed.
        """
        return LoggingService._configured
