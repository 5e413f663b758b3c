from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from uciparse.domain.grammar.parser import ParsePolicy
from uciparse.infrastructure.config import ParserConfig


@pytest.fixture(scope="session")
def parser_config() -> ParserConfig:
    """Provide a configuration tuned for isolated tests."""
    return ParserConfig(
        log_level="DEBUG",
        default_policy=ParsePolicy.lenient,
        log_dropped_lines=True,
        additional={},
    )


@pytest.fixture
def strict_config() -> ParserConfig:
    return ParserConfig(log_level="DEBUG", default_policy=ParsePolicy.strict)


@pytest.fixture
def log_events():
    with capture_logs() as events:
        yield events
