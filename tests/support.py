"""Effect kinds and handlers shared by the test modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from algeff import Capability, Effect, EffectChain, Handler, SimpleHandler, perform

COUNTER = Capability("counter")


@dataclass(frozen=True)
class Tick(Effect[int]):
    """Adds ``amount`` to the counter and yields the new total."""

    capability: ClassVar[Capability] = COUNTER

    amount: int = 1


def tick(amount: int = 1) -> EffectChain[int]:
    return perform(Tick(amount))


class CounterHandler(SimpleHandler[int, Tick, int]):
    effect_type = Tick

    def start(self) -> int:
        return 0

    def step(self, total: int, effect: Tick) -> tuple[int, EffectChain[Any]]:
        total += effect.amount
        return total, effect.resume(total)

    def finish(self, total: int) -> int:
        return total


class RecordingHandler(Handler[Any, Any]):
    """Delegates to ``inner`` and records every call it receives."""

    def __init__(self, inner: Handler[Any, Any]) -> None:
        self.inner = inner
        self.capabilities = inner.capabilities
        self.calls: list[tuple[str, Any]] = []

    def start(self) -> Any:
        self.calls.append(("start", None))
        return self.inner.start()

    def try_step(self, state: Any, effect: Effect[Any]) -> Any:
        self.calls.append(("try_step", effect))
        return self.inner.try_step(state, effect)

    def finish(self, state: Any) -> Any:
        self.calls.append(("finish", state))
        return self.inner.finish(state)

    def offered(self) -> list[Effect[Any]]:
        return [payload for name, payload in self.calls if name == "try_step"]
