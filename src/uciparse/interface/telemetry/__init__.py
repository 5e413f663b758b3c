"""Telemetry helpers (structured logging)."""

from .logging import bind_trace, get_logger, setup_logging

__all__ = ["bind_trace", "get_logger", "setup_logging"]
