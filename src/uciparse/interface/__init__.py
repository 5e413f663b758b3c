"""Interface adapters for uciparse."""

__all__ = ["telemetry"]
