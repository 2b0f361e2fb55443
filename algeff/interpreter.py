"""
Interpreter loop for the algeff system.

``run`` interprets a chain against a handler, one effect at a time and in
chain order, until the chain is ``Done``; then it finalizes handler state.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, TypeVar

from algeff.chain import Done, EffectChain, Suspended, is_chain
from algeff.errors import MissingCapabilityError, UnhandledEffectError
from algeff.handler import Handled, Handler
from algeff.utils import DEBUG_STEPS, truncate_repr

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class RunResult(NamedTuple):
    """Program result paired with the handler's finished state."""

    value: Any
    output: Any


def check_capabilities(chain: EffectChain[Any], handler: Handler[Any, Any]) -> None:
    """Raise ``MissingCapabilityError`` if ``handler`` lacks what ``chain`` declares."""

    if not is_chain(chain):
        raise TypeError(f"run expects an EffectChain, got {type(chain).__name__}")
    missing = chain.requires - handler.capabilities
    if missing:
        raise MissingCapabilityError(frozenset(missing))


def run(chain: EffectChain[T], handler: Handler[Any, R]) -> RunResult:
    """Execute ``chain`` against ``handler`` and return ``(value, handler.finish(state))``.

    Raises:
        MissingCapabilityError: the chain declares capabilities the handler lacks.
        UnhandledEffectError: an effect reached the driver that no handler claims.

    Any exception raised by the handler or by the program's continuations
    propagates unchanged.
    """

    check_capabilities(chain, handler)

    state = handler.start()
    steps = 0
    logger.debug("Run started with %r", handler)

    while isinstance(chain, Suspended):
        effect = chain.effect
        outcome = handler.try_step(state, effect)
        if not isinstance(outcome, Handled):
            logger.error("Unhandled effect after %d step(s): %s", steps, truncate_repr(effect))
            raise UnhandledEffectError(effect)
        state, chain = outcome.state, outcome.next
        steps += 1
        if DEBUG_STEPS:
            logger.debug("Step %d handled %s", steps, truncate_repr(effect))

    if not isinstance(chain, Done):
        raise TypeError(f"Handler step produced a non-chain value: {type(chain).__name__}")

    logger.debug("Run finished after %d step(s)", steps)
    return RunResult(chain.value, handler.finish(state))


__all__ = ["RunResult", "check_capabilities", "run"]
