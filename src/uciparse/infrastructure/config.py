from __future__ import annotations

from dataclasses import dataclass, field
import os

from ..domain.grammar.parser import ParsePolicy

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Runtime settings for codec users (logging and default error policy)."""

    log_level: str = "INFO"
    default_policy: ParsePolicy = ParsePolicy.lenient
    log_dropped_lines: bool = True
    additional: dict[str, str] = field(default_factory=dict)


def load_config(prefix: str = "") -> ParserConfig:
    """Load parser configuration from environment variables."""

    def _get_env(key: str, default: str = "") -> str:
        env_key = f"{prefix}{key}"
        return os.getenv(env_key, default)

    def _parse_policy(raw: str, fallback: ParsePolicy) -> ParsePolicy:
        try:
            return ParsePolicy(raw.strip().lower())
        except ValueError:
            return fallback

    def _parse_bool(raw: str, fallback: bool) -> bool:
        lowered = raw.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        return fallback

    additional_keys = ("STRUCTLOG_LEVEL",)
    additional: dict[str, str] = {}
    for key in additional_keys:
        value = _get_env(key, "")
        if value:
            additional[key] = value

    log_level = _get_env("UCIPARSE_LOG_LEVEL", "") or additional.get("STRUCTLOG_LEVEL", "INFO")

    return ParserConfig(
        log_level=log_level.upper(),
        default_policy=_parse_policy(_get_env("UCIPARSE_DEFAULT_POLICY", "lenient"), ParsePolicy.lenient),
        log_dropped_lines=_parse_bool(_get_env("UCIPARSE_LOG_DROPPED_LINES", "true"), True),
        additional=additional,
    )


__all__ = ["ParserConfig", "load_config"]
