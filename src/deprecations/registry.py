"""Deduplicating registry that routes deprecation notices to a configurable sink.

Library code calls ``trigger`` whenever a deprecated path runs. The first call
for a given link is formatted and dispatched to the active sink; every later
call for that link only bumps its occurrence count. The table of seen links
outlives sink reconfiguration, so enabling a sink late never replays notices
that fired while the registry was disabled.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from deprecations.models import CallerLocation, DeprecationNotice, SinkMode
from deprecations.sinks import (
    DisabledSink,
    NoticeSink,
    StructuredLoggerSink,
    SuppressedWarningChannelSink,
    WarningChannelSink,
)
from deprecations.telemetry.logging import StructuredLogger


class NoticeFormatError(TypeError):
    """Raised when a notice template does not match its arguments."""


class DeprecationRegistry:
    """Tracks triggered deprecations and dispatches first occurrences."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._lock = threading.Lock()
        self._triggered: dict[str, int] = {}
        self._ignored_packages: set[str] = set()
        self._sink: NoticeSink = DisabledSink()
        self._logger = logger or logging.getLogger("deprecations.registry")

    @property
    def mode(self) -> SinkMode:
        return self._sink.mode

    @property
    def ignored_packages(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._ignored_packages)

    def trigger(
        self,
        package: str,
        version: str,
        link: str,
        message: str,
        *args: Any,
        stacklevel: int = 1,
    ) -> None:
        """Announce that a deprecated code path ran.

        ``link`` identifies the deprecation and is the only deduplication key.
        ``message`` is a printf-style template formatted with ``args``.
        ``stacklevel`` works like ``warnings.warn``: 1 reports the direct
        caller of this method, 2 that caller's caller, and so on.
        """
        with self._lock:
            if link in self._triggered:
                self._triggered[link] += 1
                return

            self._triggered[link] = 1
            sink = self._sink
            if sink.mode is SinkMode.DISABLED or package in self._ignored_packages:
                return

        location = _caller_location(stacklevel + 1)

        try:
            text = message % args
        except (TypeError, ValueError) as exc:
            raise NoticeFormatError(
                f"Cannot format deprecation message {message!r} with {len(args)} argument(s): {exc}"
            ) from exc

        sink.emit(
            DeprecationNotice(
                package=package,
                version=version,
                link=link,
                message=text,
                location=location,
            )
        )

    def enable_with_warning_channel(self) -> None:
        self._set_sink(WarningChannelSink())

    def enable_with_suppressed_warning_channel(self) -> None:
        self._set_sink(SuppressedWarningChannelSink())

    def enable_with_structured_logger(self, logger: StructuredLogger) -> None:
        self._set_sink(StructuredLoggerSink(logger=logger))

    def disable(self) -> None:
        """Stop dispatching and drop any held logger; counts are kept."""
        self._set_sink(DisabledSink())

    def ignore_packages(self, *packages: str) -> None:
        """Never dispatch future notices attributed to these packages."""
        with self._lock:
            self._ignored_packages.update(packages)

    def ignore_deprecations(self, *links: str) -> None:
        """Silence links before they fire by seeding them at count 0."""
        with self._lock:
            for link in links:
                self._triggered.setdefault(link, 0)

    def get_unique_triggered_deprecations_count(self) -> int:
        with self._lock:
            return len(self._triggered)

    def get_triggered_deprecations(self) -> Mapping[str, int]:
        """Return a read-only snapshot of link -> occurrence count."""
        with self._lock:
            return MappingProxyType(dict(self._triggered))

    def _set_sink(self, sink: NoticeSink) -> None:
        with self._lock:
            self._sink = sink
        self._logger.info("deprecation_sink_configured", extra={"mode": sink.mode.value})


def _caller_location(depth: int) -> CallerLocation:
    """Location of the frame ``depth`` levels up, clamped to the outermost frame."""
    try:
        frame = sys._getframe(depth)
    except ValueError:
        frame = sys._getframe(1)
        while frame.f_back is not None:
            frame = frame.f_back
    try:
        return CallerLocation(file=frame.f_code.co_filename, line=frame.f_lineno)
    finally:
        del frame


_default_registry = DeprecationRegistry()


def get_registry() -> DeprecationRegistry:
    """Return the process-wide registry used by the module-level helpers."""
    return _default_registry
