"""
Effect chains: lazy, data-only descriptions of effectful programs.

A chain is either ``Done`` (the program has a result) or ``Suspended``
(the program waits on one effect whose eventual result is the next chain).
``bind`` is the only way programs are sequenced; every other helper in this
module and the ``@do`` decorator are built on it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from algeff.effect import Capability, Effect
from algeff.utils import ensure_callable

T = TypeVar("T")
U = TypeVar("U")

_NO_REQUIREMENTS: frozenset[Capability] = frozenset()


@dataclass(frozen=True)
class Done(Generic[T]):
    """Terminal chain node carrying the program's result."""

    value: T
    requires: frozenset[Capability] = field(
        default=_NO_REQUIREMENTS, repr=False, compare=False
    )


@dataclass(frozen=True)
class Suspended(Generic[T]):
    """Chain node waiting on ``effect``; its result is the next chain node."""

    effect: Effect[EffectChain[T]]
    requires: frozenset[Capability] = field(
        default=_NO_REQUIREMENTS, repr=False, compare=False
    )

    def splice_stages(
        self, stages: tuple[Callable[[Any], Any], ...], start: int
    ) -> tuple[Suspended[Any], int]:
        # A bind stage applied to Suspended(e) is Suspended(e.map(stage)), so
        # a run of them can be moved onto this node's effect wholesale.
        end = start
        while end < len(stages) and isinstance(stages[end], _BindStage):
            end += 1
        if end == start:
            return self, start
        effect = replace(self.effect, pipeline=self.effect.pipeline + stages[start:end])
        return Suspended(effect, requires=self.requires), end


@dataclass(frozen=True)
class _BindStage:
    binder: Callable[[Any], EffectChain[Any]]

    def __call__(self, next_chain: EffectChain[Any]) -> EffectChain[Any]:
        return bind(next_chain, self.binder)


EffectChain = Done[T] | Suspended[T]

_CHAIN_TYPES = (Done, Suspended)


def is_chain(value: Any) -> bool:
    return isinstance(value, _CHAIN_TYPES)


def is_done(chain: EffectChain[Any]) -> bool:
    return isinstance(chain, Done)


def _ensure_chain(value: Any, *, source: str) -> EffectChain[Any]:
    if not isinstance(value, _CHAIN_TYPES):
        raise TypeError(f"{source} must return an EffectChain; got {type(value).__name__}")
    return value


def pure(value: T) -> Done[T]:
    """Lift a plain value into a finished chain."""

    return Done(value)


def perform(effect: Effect[T]) -> Suspended[T]:
    """Lift a single effect into a one-step chain yielding the effect's result."""

    if not isinstance(effect, Effect):
        raise TypeError(f"perform expects an Effect, got {type(effect).__name__}")
    return Suspended(effect.map(pure), requires=frozenset((effect.capability,)))


def bind(chain: EffectChain[T], f: Callable[[T], EffectChain[U]]) -> EffectChain[U]:
    """Sequence ``chain`` with ``f``, which receives its result and continues.

    bind(Done(v), f)         == f(v)
    bind(Suspended(e), f)    == Suspended(e.map(lambda nxt: bind(nxt, f)))
    """

    ensure_callable(f, name="binder")
    if isinstance(chain, Done):
        result = _ensure_chain(f(chain.value), source="binder")
        if chain.requires:
            return with_requirements(result, *chain.requires)
        return result
    if isinstance(chain, Suspended):
        return Suspended(
            chain.effect.map(_BindStage(f)),
            requires=chain.requires,
        )
    raise TypeError(f"bind expects an EffectChain, got {type(chain).__name__}")


def fmap(chain: EffectChain[T], f: Callable[[T], U]) -> EffectChain[U]:
    """Apply ``f`` to the chain's eventual result."""

    ensure_callable(f, name="mapper")
    return bind(chain, lambda value: Done(f(value)))


def then(chain: EffectChain[Any], next_chain: EffectChain[U]) -> EffectChain[U]:
    """Run ``chain`` for its effects, then continue with ``next_chain``."""

    _ensure_chain(next_chain, source="then")
    return bind(chain, lambda _: next_chain)


def sequence(chains: Iterable[EffectChain[T]]) -> EffectChain[list[T]]:
    """Run ``chains`` in order and collect their results into a list."""

    def append_to(acc: list[T], chain: EffectChain[T]) -> EffectChain[list[T]]:
        return fmap(chain, lambda value: acc + [value])

    result: EffectChain[list[T]] = Done([])
    for chain in chains:
        _ensure_chain(chain, source="sequence")
        result = bind(result, lambda acc, chain=chain: append_to(acc, chain))
    return result


def with_requirements(chain: EffectChain[T], *capabilities: Capability) -> EffectChain[T]:
    """Declare extra capabilities the program needs; checked before it runs."""

    if not capabilities:
        return chain
    return replace(chain, requires=chain.requires | frozenset(capabilities))


__all__ = [
    "Done",
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
]
