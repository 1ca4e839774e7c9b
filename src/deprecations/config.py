"""Environment-driven settings for hosts that configure deprecations at startup."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from deprecations.models import SinkMode
from deprecations.registry import DeprecationRegistry, get_registry
from deprecations.telemetry.logging import StdlibStructuredLogger


class DeprecationSettings(BaseSettings):
    """Sink and ignore rules read from ``DEPRECATIONS_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="DEPRECATIONS_", extra="ignore")

    mode: SinkMode = SinkMode.DISABLED
    ignored_packages: list[str] = Field(default_factory=list)
    ignored_links: list[str] = Field(
        default_factory=list,
        description="Deprecation links to silence before they ever fire.",
    )
    logger_name: str = Field(
        default="deprecations.notices",
        description="stdlib logger receiving notices in structured_logger mode.",
    )


def configure_from_settings(
    settings: DeprecationSettings | None = None,
    registry: DeprecationRegistry | None = None,
) -> DeprecationRegistry:
    """Apply settings to ``registry`` (the process-wide one by default) and return it."""
    settings = settings or DeprecationSettings()
    registry = registry or get_registry()

    if settings.mode is SinkMode.WARNING_CHANNEL:
        registry.enable_with_warning_channel()
    elif settings.mode is SinkMode.SUPPRESSED_WARNING_CHANNEL:
        registry.enable_with_suppressed_warning_channel()
    elif settings.mode is SinkMode.STRUCTURED_LOGGER:
        registry.enable_with_structured_logger(StdlibStructuredLogger(logging.getLogger(settings.logger_name)))
    else:
        registry.disable()

    registry.ignore_packages(*settings.ignored_packages)
    registry.ignore_deprecations(*settings.ignored_links)
    return registry
