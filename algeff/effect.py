"""
Effect descriptors for the algeff system.

An effect is inert data: a request (its payload fields) plus the pipeline
of functions that turn the handler's answer into the rest of the program.
Nothing here executes anything; interpreting an effect is a handler's job.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Generic, TypeVar

from algeff.utils import ensure_callable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Capability:
    """Tag naming one effect kind an environment must be able to interpret."""

    name: str

    def __repr__(self) -> str:
        return f"Capability({self.name!r})"


@dataclass(frozen=True, kw_only=True)
class Effect(Generic[T]):
    """Base class for every effect kind.

    Subclasses set ``capability`` and declare their payload as dataclass
    fields. ``pipeline`` holds the continuation; it is excluded from equality
    so two requests with the same payload compare equal.
    """

    capability: ClassVar[Capability]

    pipeline: tuple[Callable[[Any], Any], ...] = field(
        default=(), repr=False, compare=False
    )

    def map(self, f: Callable[[T], U]) -> Effect[U]:
        """Return the same request whose eventual result is passed through ``f``."""

        ensure_callable(f, name="mapper")
        return replace(self, pipeline=self.pipeline + (f,))

    def resume(self, answer: Any = None) -> T:
        """Feed the handler's answer through the continuation pipeline.

        A stage result that offers ``splice_stages`` (a suspended chain) may
        take over the stages that follow it in one step instead of having
        each of them mapped onto it individually.
        """

        value = answer
        stages = self.pipeline
        index = 0
        while index < len(stages):
            value = stages[index](value)
            index += 1
            splice = getattr(value, "splice_stages", None)
            if splice is not None and index < len(stages):
                value, index = splice(stages, index)
        return value


__all__ = ["Capability", "Effect"]
