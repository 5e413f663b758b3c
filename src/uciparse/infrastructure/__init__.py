"""Integrations around the core: environment config and python-chess."""

from .config import ParserConfig, load_config

__all__ = ["ParserConfig", "load_config"]
