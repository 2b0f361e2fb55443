"""
The do decorator for the algeff system.

This module provides the @do decorator that converts generator functions
into functions returning EffectChains, giving do-notation over ``bind``.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator, Iterable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, overload

from algeff.chain import Done, EffectChain, bind, is_chain, perform, with_requirements
from algeff.effect import Capability, Effect

P = ParamSpec("P")
T = TypeVar("T")

ProgramGenerator = Generator["Effect[Any] | EffectChain[Any]", Any, T]


class _GeneratorReplay:
    """Drives one generator invocation and rebuilds it when a chain is re-run.

    Every suspension point remembers the tuple of answers the generator had
    received to reach it. Resuming the point the live generator is parked on
    just sends the answer; resuming any other point (a chain being run a
    second time) replays the recorded answers into a fresh generator first.
    """

    def __init__(self, factory: Callable[[], Generator[Any, Any, Any]]) -> None:
        self._factory = factory
        self._gen: Generator[Any, Any, Any] | None = None
        self._history: tuple[Any, ...] | None = None

    def start(self, gen: Generator[Any, Any, Any] | None = None) -> EffectChain[Any]:
        if gen is None:
            gen = self._factory()
        try:
            yielded = next(gen)
        except StopIteration as stop:
            return Done(stop.value)
        self._gen, self._history = gen, ()
        return self._suspend(yielded, ())

    def _resume(self, history: tuple[Any, ...], answer: Any) -> EffectChain[Any]:
        if self._gen is None or self._history is not history:
            self._rebuild(history)
        gen = self._gen
        assert gen is not None
        self._gen = None
        try:
            yielded = gen.send(answer)
        except StopIteration as stop:
            return Done(stop.value)
        history = history + (answer,)
        self._gen, self._history = gen, history
        return self._suspend(yielded, history)

    def _rebuild(self, history: tuple[Any, ...]) -> None:
        gen = self._factory()
        try:
            next(gen)
            for answer in history:
                gen.send(answer)
        except StopIteration:
            raise RuntimeError(
                "Generator finished early while replaying recorded answers; "
                "@do bodies must be deterministic given the answers they receive"
            ) from None
        self._gen, self._history = gen, history

    def _suspend(self, yielded: Any, history: tuple[Any, ...]) -> EffectChain[Any]:
        # Finished sub-chains are fed back directly so long runs of pure
        # yields do not grow the Python stack.
        while True:
            chain = _as_chain(yielded)
            if not isinstance(chain, Done):
                return bind(chain, lambda answer: self._resume(history, answer))
            answer = chain.value
            gen = self._gen
            assert gen is not None
            self._gen = None
            try:
                yielded = gen.send(answer)
            except StopIteration as stop:
                return Done(stop.value)
            history = history + (answer,)
            self._gen, self._history = gen, history


def _as_chain(yielded: Any) -> EffectChain[Any]:
    if isinstance(yielded, Effect):
        return perform(yielded)
    if is_chain(yielded):
        return yielded
    raise TypeError(
        f"@do functions may only yield Effects or EffectChains, got {type(yielded).__name__}"
    )


def _make_do(
    func: Callable[P, ProgramGenerator[T]],
    requires: frozenset[Capability],
) -> Callable[P, EffectChain[T]]:
    @wraps(func)
    def build(*args: P.args, **kwargs: P.kwargs) -> EffectChain[T]:
        result = func(*args, **kwargs)
        if inspect.isgenerator(result):
            replay = _GeneratorReplay(lambda: func(*args, **kwargs))
            chain = replay.start(result)
        elif is_chain(result):
            chain = result
        else:
            chain = Done(result)
        return with_requirements(chain, *requires)

    build.requires = requires  # type: ignore[attr-defined]
    return build


@overload
def do(func: Callable[P, ProgramGenerator[T]]) -> Callable[P, EffectChain[T]]: ...


@overload
def do(
    *, requires: Iterable[Capability]
) -> Callable[[Callable[P, ProgramGenerator[T]]], Callable[P, EffectChain[T]]]: ...


def do(func=None, *, requires=()):
    """
    Decorator that converts a generator function into an EffectChain factory.

    Each ``yield`` suspends the program on an Effect (or a whole chain) and
    receives its result; the generator's return value becomes the result of
    the chain. The decorated function runs its body up to the first effect
    when called, and the chain it returns can be run any number of times.

    Keep side effects out of the body: the body is re-entered from the start
    when a chain is run again. Side effects belong in handlers.

    Usage:
        @do
        def greet(name: str):
            yield write(f"hello {name}")
            line = yield read_line()
            return len(line)

        @do(requires=[LOG])
        def audited():
            yield write("audit")
            return True

    Args:
        func: A generator function yielding Effects or EffectChains.
        requires: Capabilities the program declares up front; ``run`` checks
            them against the handler before the first step.
    """

    capabilities = frozenset(requires)
    for capability in capabilities:
        if not isinstance(capability, Capability):
            raise TypeError(f"requires expects Capability tags, got {type(capability).__name__}")

    if func is None:
        return lambda f: _make_do(f, capabilities)
    return _make_do(func, capabilities)


__all__ = ["ProgramGenerator", "do"]
