from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any


class SinkMode(str, Enum):
    """Destinations a registry can route deprecation notices to."""

    DISABLED = "disabled"
    WARNING_CHANNEL = "warning_channel"
    SUPPRESSED_WARNING_CHANNEL = "suppressed_warning_channel"
    STRUCTURED_LOGGER = "structured_logger"


@dataclass(frozen=True, slots=True)
class CallerLocation:
    """Source position of the code that triggered a notice."""

    file: str
    line: int

    @property
    def basename(self) -> str:
        return os.path.basename(self.file)


@dataclass(frozen=True, slots=True)
class DeprecationNotice:
    """One formatted notice, ready to hand to a sink."""

    package: str
    version: str
    link: str
    message: str
    location: CallerLocation

    @property
    def trailer(self) -> str:
        return (
            f" ({self.location.basename}:{self.location.line}, {self.link}, "
            f"since {self.package} {self.version})"
        )

    @property
    def warning_text(self) -> str:
        """Message with the location/link trailer used by warning channels."""
        return self.message + self.trailer

    @property
    def context(self) -> dict[str, Any]:
        """Structured fields handed to a structured logger next to the raw message."""
        return {
            "file": self.location.file,
            "line": self.location.line,
            "package": self.package,
            "since": self.version,
            "link": self.link,
        }
