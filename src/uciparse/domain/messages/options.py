from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple

EMPTY_MARKER = "<empty>"


def render_text(value: str) -> str:
    return value if value else EMPTY_MARKER


class OptionConfig:
    """An ``option`` declaration sent by the engine.

    Subclasses render their own optional clauses after the common
    ``option name <N> type <T>`` prefix.
    """

    __slots__ = ()
    type_str: ClassVar[str] = ""
    name: str

    def _clauses(self) -> list[str]:
        return []

    def serialize(self) -> str:
        parts = [f"option name {self.name} type {self.type_str}", *self._clauses()]
        return " ".join(parts)

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True, slots=True)
class CheckOption(OptionConfig):
    type_str: ClassVar[str] = "check"

    name: str
    default: Optional[bool] = None

    def _clauses(self) -> list[str]:
        if self.default is None:
            return []
        return [f"default {'true' if self.default else 'false'}"]


@dataclass(frozen=True, slots=True)
class SpinOption(OptionConfig):
    type_str: ClassVar[str] = "spin"

    name: str
    default: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None

    def _clauses(self) -> list[str]:
        return [
            f"{keyword} {value}"
            for keyword, value in (("default", self.default), ("min", self.min), ("max", self.max))
            if value is not None
        ]


@dataclass(frozen=True, slots=True)
class ComboOption(OptionConfig):
    type_str: ClassVar[str] = "combo"

    name: str
    default: Optional[str] = None
    var: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "var", tuple(self.var))

    def _clauses(self) -> list[str]:
        clauses = [] if self.default is None else [f"default {render_text(self.default)}"]
        clauses.extend(f"var {value}" for value in self.var)
        return clauses


@dataclass(frozen=True, slots=True)
class ButtonOption(OptionConfig):
    type_str: ClassVar[str] = "button"

    name: str


@dataclass(frozen=True, slots=True)
class StringOption(OptionConfig):
    type_str: ClassVar[str] = "string"

    name: str
    default: Optional[str] = None

    def _clauses(self) -> list[str]:
        if self.default is None:
            return []
        return [f"default {render_text(self.default)}"]


__all__ = [
    "ButtonOption",
    "CheckOption",
    "ComboOption",
    "EMPTY_MARKER",
    "OptionConfig",
    "SpinOption",
    "StringOption",
]
