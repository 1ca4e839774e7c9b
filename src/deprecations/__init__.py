"""Process-wide registry for deprecation notices.

Libraries announce deprecations with ``trigger``; applications decide where
they go::

    import deprecations

    deprecations.enable_with_warning_channel()
    deprecations.ignore_packages("vendor/legacy")

    deprecations.trigger(
        "acme/lib",
        "2.0",
        "https://github.com/acme/lib/issues/1",
        "Use %s instead",
        "new_thing",
    )

Nothing is reported until a sink is enabled, but every link is counted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import DeprecationSettings, configure_from_settings
from .decorators import deprecated
from .models import CallerLocation, DeprecationNotice, SinkMode
from .registry import DeprecationRegistry, NoticeFormatError, get_registry
from .sinks import (
    DisabledSink,
    NoticeSink,
    PackageDeprecationWarning,
    SinkConfigurationError,
    StructuredLoggerSink,
    SuppressedWarningChannelSink,
    WarningChannelSink,
)
from .telemetry import StdlibStructuredLogger, StructuredLogger


def trigger(package: str, version: str, link: str, message: str, *args: Any, stacklevel: int = 1) -> None:
    """Trigger a notice on the process-wide registry, reporting this function's caller."""
    get_registry().trigger(package, version, link, message, *args, stacklevel=stacklevel + 1)


def enable_with_warning_channel() -> None:
    get_registry().enable_with_warning_channel()


def enable_with_suppressed_warning_channel() -> None:
    get_registry().enable_with_suppressed_warning_channel()


def enable_with_structured_logger(logger: StructuredLogger) -> None:
    get_registry().enable_with_structured_logger(logger)


def disable() -> None:
    get_registry().disable()


def ignore_packages(*packages: str) -> None:
    get_registry().ignore_packages(*packages)


def ignore_deprecations(*links: str) -> None:
    get_registry().ignore_deprecations(*links)


def get_unique_triggered_deprecations_count() -> int:
    return get_registry().get_unique_triggered_deprecations_count()


def get_triggered_deprecations() -> Mapping[str, int]:
    return get_registry().get_triggered_deprecations()


__all__ = [
    "CallerLocation",
    "DeprecationNotice",
    "DeprecationRegistry",
    "DeprecationSettings",
    "DisabledSink",
    "NoticeFormatError",
    "NoticeSink",
    "PackageDeprecationWarning",
    "SinkConfigurationError",
    "SinkMode",
    "StdlibStructuredLogger",
    "StructuredLogger",
    "StructuredLoggerSink",
    "SuppressedWarningChannelSink",
    "WarningChannelSink",
    "configure_from_settings",
    "deprecated",
    "disable",
    "enable_with_structured_logger",
    "enable_with_suppressed_warning_channel",
    "enable_with_warning_channel",
    "get_registry",
    "get_triggered_deprecations",
    "get_unique_triggered_deprecations_count",
    "ignore_deprecations",
    "ignore_packages",
    "trigger",
]
