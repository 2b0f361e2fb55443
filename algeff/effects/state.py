"""State effects.

State effects provide keyed state within a computation:
- Get(key): Retrieve the value for a key (returns None if missing)
- Put(key, value): Store a value for a key (returns None)
- Modify(key, func): Apply func to current value and store result (returns new value)

Usage:
    from algeff import combine, do, run
    from algeff.effects.state import get, put
    from algeff.handlers.state import PureStateHandler

    @do
    def program():
        yield put("counter", 0)
        count = yield get("counter")
        yield put("counter", count + 1)
        return (yield get("counter"))

    value, final_state = run(program(), PureStateHandler())
    # value == 1, final_state == frozendict({"counter": 1})
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from algeff.chain import EffectChain, perform
from algeff.effect import Capability, Effect

STATE = Capability("state")


@dataclass(frozen=True)
class StateEffect(Effect[Any]):
    """Base for keyed state requests."""

    capability: ClassVar[Capability] = STATE

    key: str


@dataclass(frozen=True)
class Get(StateEffect):
    """Yields the value stored under key, or None if key is not present."""


@dataclass(frozen=True)
class Put(StateEffect):
    """Stores value under key and completes with None."""

    value: Any


@dataclass(frozen=True)
class Modify(StateEffect):
    """Applies func to the current value and yields the updated value.

    If key is not present, func receives None as the current value.
    """

    func: Callable[[Any], Any]


def get(key: str) -> EffectChain[Any]:
    return perform(Get(key))


def put(key: str, value: Any) -> EffectChain[None]:
    return perform(Put(key, value))


def modify(key: str, func: Callable[[Any], Any]) -> EffectChain[Any]:
    return perform(Modify(key, func))


__all__ = [
    "Get",
    "Modify",
    "Put",
    "STATE",
    "StateEffect",
    "get",
    "modify",
    "put",
]
