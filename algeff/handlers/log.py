"""Handlers for log effects."""

from __future__ import annotations

from typing import Any

from loguru import logger

from algeff.chain import EffectChain
from algeff.effects.log import LogEffect
from algeff.handler import SimpleHandler

# Newest entry first: (message, older_entries) or None.
LogEntries = tuple[str, "LogEntries"] | None


class PureLogHandler(SimpleHandler[LogEntries, LogEffect, list[str]]):
    """Accumulates log messages in memory.

    Each step conses onto an immutable list, so earlier states stay valid;
    ``finish`` returns the messages oldest first.
    """

    effect_type = LogEffect

    def start(self) -> LogEntries:
        return None

    def step(self, log: LogEntries, effect: LogEffect) -> tuple[LogEntries, EffectChain[Any]]:
        return (effect.message, log), effect.resume()

    def finish(self, log: LogEntries) -> list[str]:
        messages: list[str] = []
        while log is not None:
            message, log = log
            messages.append(message)
        messages.reverse()
        return messages


class LoguruLogHandler(SimpleHandler[int, LogEffect, int]):
    """Emits every log message through loguru; finishes with the message count."""

    effect_type = LogEffect

    def __init__(self, level: str = "INFO", *, component: str = "algeff.log") -> None:
        self.level = level
        self._logger = logger.bind(component=component)

    def start(self) -> int:
        return 0

    def step(self, count: int, effect: LogEffect) -> tuple[int, EffectChain[Any]]:
        self._logger.log(self.level, "{}", effect.message)
        return count + 1, effect.resume()

    def finish(self, count: int) -> int:
        return count

    def __repr__(self) -> str:
        return f"LoguruLogHandler(level={self.level!r})"


__all__ = ["LogEntries", "LoguruLogHandler", "PureLogHandler"]
