"""Contract for structured logging sinks that receive deprecation notices."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol


class StructuredLogger(Protocol):
    """Receives a message plus a mapping of structured context fields."""

    def debug(self, message: str, context: Mapping[str, Any]) -> None:
        """Record a debug-level event with its context."""


class StdlibStructuredLogger:
    """Adapts a stdlib ``logging.Logger`` to the ``StructuredLogger`` contract.

    Context fields are attached to the log record through ``extra`` so
    formatters and handlers can read them as record attributes. When the
    context carries ``file`` and ``line`` the record is attributed to that
    location, so ``%(pathname)s:%(lineno)d`` point at the deprecated call.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("deprecations.notices")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, message: str, context: Mapping[str, Any]) -> None:
        if "file" not in context or "line" not in context:
            self._logger.debug(message, extra=dict(context))
            return

        if not self._logger.isEnabledFor(logging.DEBUG):
            return

        record = self._logger.makeRecord(
            self._logger.name,
            logging.DEBUG,
            context["file"],
            context["line"],
            message,
            (),
            None,
            extra=dict(context),
        )
        self._logger.handle(record)
