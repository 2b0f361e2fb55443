"""
Handler contract for the algeff system.

A handler interprets one effect kind. It creates a fresh state for every
run, is offered effects one at a time through ``try_step``, and turns its
final state into its contribution to the run's result with ``finish``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from algeff.effect import Capability, Effect

if TYPE_CHECKING:
    from algeff.chain import EffectChain

S = TypeVar("S")
R = TypeVar("R")
E = TypeVar("E", bound=Effect)


@dataclass(frozen=True)
class Handled(Generic[S]):
    """The handler interpreted the effect: new state plus the next chain node."""

    state: S
    next: EffectChain[Any]


class NotMine:
    """The effect is not of a kind this handler understands."""

    _instance: ClassVar[NotMine | None] = None

    def __new__(cls) -> NotMine:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_MINE"


NOT_MINE = NotMine()

Outcome = Handled[S] | NotMine


class Handler(ABC, Generic[S, R]):
    """Interpreter for one or more effect kinds.

    ``try_step`` must not touch ``state`` or perform I/O when it answers
    ``NOT_MINE``; state only ever flows forward through ``Handled``.
    """

    capabilities: frozenset[Capability] = frozenset()

    @abstractmethod
    def start(self) -> S:
        """Return a fresh initial state for one run."""

    @abstractmethod
    def try_step(self, state: S, effect: Effect[Any]) -> Outcome[S]:
        """Interpret ``effect`` or report ``NOT_MINE``."""

    @abstractmethod
    def finish(self, state: S) -> R:
        """Turn the final state into this handler's result."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SimpleHandler(Handler[S, R], Generic[S, E, R]):
    """Handler for exactly one effect kind.

    Subclasses set ``effect_type`` and implement ``step``; the kind test is
    done here once so ``step`` always receives an ``effect_type`` instance.
    """

    effect_type: ClassVar[type[Effect[Any]]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        effect_type = cls.__dict__.get("effect_type")
        if effect_type is not None and "capabilities" not in cls.__dict__:
            cls.capabilities = frozenset((effect_type.capability,))

    @abstractmethod
    def step(self, state: S, effect: E) -> tuple[S, EffectChain[Any]]:
        """Interpret ``effect`` and return ``(new_state, next_chain)``."""

    def try_step(self, state: S, effect: Effect[Any]) -> Outcome[S]:
        if not isinstance(effect, self.effect_type):
            return NOT_MINE
        new_state, next_chain = self.step(state, effect)  # type: ignore[arg-type]
        return Handled(new_state, next_chain)


__all__ = [
    "Handled",
    "Handler",
    "NOT_MINE",
    "NotMine",
    "Outcome",
    "SimpleHandler",
]
