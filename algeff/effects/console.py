"""Console effects.

One effect kind with two requests:
- WriteLine(text): print a line (returns None)
- ReadLine(): read a line (returns str, without the trailing newline)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from algeff.chain import EffectChain, perform
from algeff.effect import Capability, Effect

CONSOLE = Capability("console")


@dataclass(frozen=True)
class ConsoleEffect(Effect[Any]):
    """Base for console requests."""

    capability: ClassVar[Capability] = CONSOLE


@dataclass(frozen=True)
class WriteLine(ConsoleEffect):
    text: str


@dataclass(frozen=True)
class ReadLine(ConsoleEffect):
    pass


def write_line(text: str) -> EffectChain[None]:
    return perform(WriteLine(text))


def read_line() -> EffectChain[str]:
    return perform(ReadLine())


__all__ = [
    "CONSOLE",
    "ConsoleEffect",
    "ReadLine",
    "WriteLine",
    "read_line",
    "write_line",
]
