from __future__ import annotations

from typing import Any, Iterable, Optional

from .domain.grammar.parser import (
    ParsePolicy,
    parse_lenient,
    parse_one,
    parse_strict,
    parse_with_unknown,
)
from .domain.messages.message import FramedMessage, MessageList, UciMessage
from .infrastructure.config import ParserConfig, load_config
from .interface.telemetry.logging import bind_trace, get_logger, setup_logging


class UciCodec:
    """Decode protocol text and encode messages with one bound configuration.

    The policy used by :meth:`decode` comes from the config unless a call
    overrides it.
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        *,
        trace_id: str | None = None,
        logger: Any | None = None,
    ) -> None:
        self._config = config or load_config()
        self._logger = bind_trace(logger or get_logger("uciparse.codec"), trace_id)

    @property
    def config(self) -> ParserConfig:
        return self._config

    def setup(self) -> None:
        setup_logging(self._config.log_level)

    def decode(self, text: str, policy: ParsePolicy | str | None = None) -> MessageList:
        selected = ParsePolicy(policy) if policy is not None else self._config.default_policy
        if selected is ParsePolicy.strict:
            messages = parse_strict(text)
        elif selected is ParsePolicy.unknown:
            messages = parse_with_unknown(text)
        else:
            messages = parse_lenient(text, log_dropped=self._config.log_dropped_lines)
        self._logger.debug("uci_decoded", policy=selected.value, count=len(messages))
        return messages

    def decode_line(self, line: str) -> UciMessage:
        message = parse_one(line)
        if message.is_unknown():
            self._logger.info("uci_unknown_line", text=message.serialize())
        return message

    def frame(self, message: UciMessage) -> FramedMessage:
        return FramedMessage(message)

    def encode(self, message: UciMessage) -> bytes:
        return self.frame(message).data

    def encode_all(self, messages: Iterable[UciMessage]) -> bytes:
        return b"".join(self.encode(message) for message in messages)


__all__ = ["UciCodec"]
