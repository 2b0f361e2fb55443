"""Handler for state effects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from frozendict import frozendict

from algeff.chain import EffectChain
from algeff.effects.state import Get, Modify, Put, StateEffect
from algeff.handler import SimpleHandler


class PureStateHandler(
    SimpleHandler[frozendict, StateEffect, frozendict]
):
    """Keyed state threaded through the run as an immutable frozendict.

    Example:
        @do
        def program():
            yield put("x", 10)
            return (yield get("x"))

        value, final = run(program(), PureStateHandler({"x": 0}))
        # value == 10, final == frozendict({"x": 10})
    """

    effect_type = StateEffect

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self.initial = frozendict(initial or {})

    def start(self) -> frozendict:
        return self.initial

    def step(self, state: frozendict, effect: StateEffect) -> tuple[frozendict, EffectChain[Any]]:
        if isinstance(effect, Get):
            return state, effect.resume(state.get(effect.key))
        if isinstance(effect, Put):
            return state.set(effect.key, effect.value), effect.resume()
        if isinstance(effect, Modify):
            new_value = effect.func(state.get(effect.key))
            return state.set(effect.key, new_value), effect.resume(new_value)
        raise TypeError(f"Unknown state request: {type(effect).__name__}")

    def finish(self, state: frozendict) -> frozendict:
        return state

    def __repr__(self) -> str:
        return f"PureStateHandler(keys={sorted(self.initial)})"


__all__ = ["PureStateHandler"]
