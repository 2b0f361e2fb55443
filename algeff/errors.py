from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from algeff.effect import Capability, Effect


def _names(capabilities: Iterable[Capability]) -> str:
    return ", ".join(sorted(c.name for c in capabilities))


class UnhandledEffectError(Exception):
    """Raised when no configured handler claims an effect during a run."""

    def __init__(self, effect: Effect) -> None:
        self.effect = effect
        super().__init__(
            f"No handler for {type(effect).__name__} "
            f"(capability {effect.capability.name!r})\n"
            f"Hint: combine a handler for {effect.capability.name!r} into the handler passed to run()"
        )


class CapabilityError(Exception):
    """Base class for capability manifest mismatches."""


class MissingCapabilityError(CapabilityError):
    """Raised when a program requires capabilities its handler does not declare."""

    def __init__(self, missing: frozenset[Capability]) -> None:
        self.missing = missing
        super().__init__(
            f"Handler does not provide required capabilities: {_names(missing)}\n"
            f"Hint: add handlers for these capabilities with combine(...)"
        )


class CapabilityConflictError(CapabilityError):
    """Raised when two combined handlers claim the same capability."""

    def __init__(self, overlap: frozenset[Capability]) -> None:
        self.overlap = overlap
        super().__init__(
            f"Combined handlers both claim: {_names(overlap)}\n"
            f"Hint: each capability must be interpreted by exactly one handler"
        )


class ConsoleInputExhaustedError(EOFError):
    """Raised when a console handler has no more input lines to give."""

    def __init__(self, consumed: int | None = None) -> None:
        self.consumed = consumed
        if consumed is None:
            super().__init__("Console input exhausted")
        else:
            super().__init__(f"Console input exhausted after {consumed} line(s)")


__all__ = [
    "CapabilityConflictError",
    "CapabilityError",
    "ConsoleInputExhaustedError",
    "MissingCapabilityError",
    "UnhandledEffectError",
]
