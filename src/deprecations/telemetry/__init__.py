"""Logging boundaries for deprecation notices."""

from .logging import StdlibStructuredLogger, StructuredLogger

__all__ = ["StdlibStructuredLogger", "StructuredLogger"]
