"""Log effects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from algeff.chain import EffectChain, perform
from algeff.effect import Capability, Effect

LOG = Capability("log")


@dataclass(frozen=True)
class LogEffect(Effect[None]):
    """Appends ``message`` to the log; completes with None."""

    capability: ClassVar[Capability] = LOG

    message: str


def write(message: str) -> EffectChain[None]:
    return perform(LogEffect(message))


def writef(fmt: str, *args: Any, **kwargs: Any) -> EffectChain[None]:
    """Write ``fmt.format(*args, **kwargs)`` to the log."""

    return write(fmt.format(*args, **kwargs))


__all__ = ["LOG", "LogEffect", "write", "writef"]
