"""Sink strategies a registry dispatches formatted notices to.

Each sink is a small immutable value tagged with its ``SinkMode``; swapping the
registry's sink is how its mode changes.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import ClassVar, Protocol

from deprecations.models import DeprecationNotice, SinkMode
from deprecations.telemetry.logging import StructuredLogger

_logger = logging.getLogger("deprecations.sinks")


class PackageDeprecationWarning(FutureWarning):
    """Warning category used by the warning-channel sinks.

    Derives from ``FutureWarning`` so the interpreter's default filters show
    it; a plain ``DeprecationWarning`` raised outside ``__main__`` is ignored.
    """


class SinkConfigurationError(TypeError):
    """Raised when a sink is built from an unusable collaborator."""


class NoticeSink(Protocol):
    """Destination for deprecation notices that passed dedup and filtering."""

    mode: ClassVar[SinkMode]

    def emit(self, notice: DeprecationNotice) -> None:
        """Deliver one notice."""


@dataclass(frozen=True, slots=True)
class DisabledSink:
    mode: ClassVar[SinkMode] = SinkMode.DISABLED

    def emit(self, notice: DeprecationNotice) -> None:
        return None


@dataclass(frozen=True, slots=True)
class WarningChannelSink:
    """Emits notices through ``warnings``; filter errors reach the caller."""

    mode: ClassVar[SinkMode] = SinkMode.WARNING_CHANNEL
    category: type[Warning] = PackageDeprecationWarning

    def emit(self, notice: DeprecationNotice) -> None:
        warnings.warn_explicit(
            notice.warning_text,
            self.category,
            notice.location.file,
            notice.location.line,
        )


@dataclass(frozen=True, slots=True)
class SuppressedWarningChannelSink:
    """Same delivery as ``WarningChannelSink`` but never raises."""

    mode: ClassVar[SinkMode] = SinkMode.SUPPRESSED_WARNING_CHANNEL
    category: type[Warning] = PackageDeprecationWarning

    def emit(self, notice: DeprecationNotice) -> None:
        try:
            warnings.warn_explicit(
                notice.warning_text,
                self.category,
                notice.location.file,
                notice.location.line,
            )
        except Exception:  # noqa: BLE001 - delivery is best effort.
            _logger.debug("suppressed_warning_failed", extra={"link": notice.link}, exc_info=True)


@dataclass(frozen=True, slots=True)
class StructuredLoggerSink:
    """Hands the raw message and its context to a structured logger."""

    mode: ClassVar[SinkMode] = SinkMode.STRUCTURED_LOGGER
    logger: StructuredLogger

    def __post_init__(self) -> None:
        if not callable(getattr(self.logger, "debug", None)):
            raise SinkConfigurationError(
                f"Structured logger must provide a callable debug(message, context), got {self.logger!r}"
            )

    def emit(self, notice: DeprecationNotice) -> None:
        self.logger.debug(notice.message, notice.context)
