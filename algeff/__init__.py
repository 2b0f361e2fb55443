"""
algeff - Algebraic effects as data, interpreted by composable handlers.

Programs describe their side effects as inert effect values chained with
``bind`` (or the ``@do`` generator notation). Handlers interpret one effect
kind each, ``combine`` joins them into one execution environment, and
``run`` drives a program to completion against it.

Example:
    >>> from algeff import combine, do, run
    >>> from algeff.effects import get, put, write
    >>> from algeff.handlers import PureLogHandler, PureStateHandler
    >>>
    >>> @do
    >>> def example_program():
    ...     yield put("counter", 0)
    ...     yield write("Starting computation")
    ...     count = yield get("counter")
    ...     return count + 1
    >>>
    >>> value, (log, state) = run(example_program(), combine(PureLogHandler(), PureStateHandler()))
"""

# Core types
from algeff.effect import Capability, Effect
from algeff.chain import (
    Done,
    EffectChain,
    Suspended,
    bind,
    fmap,
    is_chain,
    is_done,
    perform,
    pure,
    sequence,
    then,
    with_requirements,
)
from algeff.handler import NOT_MINE, Handled, Handler, NotMine, Outcome, SimpleHandler

# Composition and execution
from algeff.combinator import CombinedHandler, combine
from algeff.interpreter import RunResult, check_capabilities, run
from algeff.do import ProgramGenerator, do

# Errors
from algeff.errors import (
    CapabilityConflictError,
    CapabilityError,
    ConsoleInputExhaustedError,
    MissingCapabilityError,
    UnhandledEffectError,
)

__version__ = "0.1.0"

__all__ = [
    # Effects and chains
    "Capability",
    "Done",
    "Effect",
    "EffectChain",
    "Suspended",
    "bind",
    "fmap",
    "is_chain",
    "is_done",
    "perform",
    "pure",
    "sequence",
    "then",
    "with_requirements",
    # Handlers
    "CombinedHandler",
    "Handled",
    "Handler",
    "NOT_MINE",
    "NotMine",
    "Outcome",
    "SimpleHandler",
    "combine",
    # Running
    "ProgramGenerator",
    "RunResult",
    "check_capabilities",
    "do",
    "run",
    # Errors
    "CapabilityConflictError",
    "CapabilityError",
    "ConsoleInputExhaustedError",
    "MissingCapabilityError",
    "UnhandledEffectError",
]
