"""
Handler composition.

``combine`` folds any number of handlers into right-nested pairs. Each
pair offers an effect to its first handler, then to its second; only the
slot of the handler that claimed the effect changes.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from algeff.effect import Effect
from algeff.errors import CapabilityConflictError
from algeff.handler import NOT_MINE, Handled, Handler, Outcome

SA = TypeVar("SA")
SB = TypeVar("SB")
RA = TypeVar("RA")
RB = TypeVar("RB")

logger = logging.getLogger(__name__)


class CombinedHandler(Handler[tuple[SA, SB], tuple[RA, RB]], Generic[SA, SB, RA, RB]):
    """Handler over ``(first_state, second_state)`` trying ``first`` then ``second``."""

    def __init__(self, first: Handler[SA, RA], second: Handler[SB, RB]) -> None:
        overlap = first.capabilities & second.capabilities
        if overlap:
            raise CapabilityConflictError(frozenset(overlap))
        self.first = first
        self.second = second
        self.capabilities = first.capabilities | second.capabilities

    def start(self) -> tuple[SA, SB]:
        return (self.first.start(), self.second.start())

    def try_step(self, state: tuple[SA, SB], effect: Effect[Any]) -> Outcome[tuple[SA, SB]]:
        first_state, second_state = state

        outcome = self.first.try_step(first_state, effect)
        if isinstance(outcome, Handled):
            return Handled((outcome.state, second_state), outcome.next)

        outcome = self.second.try_step(second_state, effect)
        if isinstance(outcome, Handled):
            return Handled((first_state, outcome.state), outcome.next)

        return NOT_MINE

    def finish(self, state: tuple[SA, SB]) -> tuple[RA, RB]:
        first_state, second_state = state
        return (self.first.finish(first_state), self.second.finish(second_state))

    def __repr__(self) -> str:
        return f"CombinedHandler({self.first!r}, {self.second!r})"


def combine(*handlers: Handler[Any, Any]) -> Handler[Any, Any]:
    """Compose handlers into one, tried left to right.

    ``combine(a)`` is ``a``; ``combine(a, b, c)`` has state ``(sa, (sb, sc))``
    and finishes to ``(ra, (rb, rc))``.
    """

    if not handlers:
        raise ValueError("combine requires at least one handler")
    for handler in handlers:
        if not isinstance(handler, Handler):
            raise TypeError(f"combine expects Handler instances, got {type(handler).__name__}")

    combined = handlers[-1]
    for handler in reversed(handlers[:-1]):
        combined = CombinedHandler(handler, combined)
    logger.debug("Combined %d handler(s): %r", len(handlers), combined)
    return combined


__all__ = ["CombinedHandler", "combine"]
