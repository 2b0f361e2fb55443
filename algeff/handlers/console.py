"""Handlers for console effects."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, TextIO

from algeff.chain import EffectChain
from algeff.effects.console import ConsoleEffect, ReadLine, WriteLine
from algeff.errors import ConsoleInputExhaustedError
from algeff.handler import SimpleHandler

# (lines still to read, lines written newest first)
ScriptedConsole = tuple[tuple[str, ...], tuple[str, ...]]


class PureConsoleHandler(SimpleHandler[ScriptedConsole, ConsoleEffect, list[str]]):
    """Console backed by a fixed script of input lines; output is captured."""

    effect_type = ConsoleEffect

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self.inputs = tuple(inputs)

    def start(self) -> ScriptedConsole:
        return (self.inputs, ())

    def step(
        self, console: ScriptedConsole, effect: ConsoleEffect
    ) -> tuple[ScriptedConsole, EffectChain[Any]]:
        pending, written = console
        if isinstance(effect, WriteLine):
            return (pending, (effect.text,) + written), effect.resume()
        if isinstance(effect, ReadLine):
            if not pending:
                raise ConsoleInputExhaustedError(len(self.inputs))
            return (pending[1:], written), effect.resume(pending[0])
        raise TypeError(f"Unknown console request: {type(effect).__name__}")

    def finish(self, console: ScriptedConsole) -> list[str]:
        _, written = console
        return list(reversed(written))

    def __repr__(self) -> str:
        return f"PureConsoleHandler(inputs={len(self.inputs)})"


class StreamConsoleHandler(SimpleHandler[int, ConsoleEffect, int]):
    """Console on real text streams; finishes with the number of lines written."""

    effect_type = ConsoleEffect

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def start(self) -> int:
        return 0

    def step(self, written: int, effect: ConsoleEffect) -> tuple[int, EffectChain[Any]]:
        if isinstance(effect, WriteLine):
            stdout = self.stdout or sys.stdout
            stdout.write(effect.text + "\n")
            stdout.flush()
            return written + 1, effect.resume()
        if isinstance(effect, ReadLine):
            line = (self.stdin or sys.stdin).readline()
            if not line:
                raise ConsoleInputExhaustedError()
            return written, effect.resume(line.rstrip("\r\n"))
        raise TypeError(f"Unknown console request: {type(effect).__name__}")

    def finish(self, written: int) -> int:
        return written


__all__ = ["PureConsoleHandler", "ScriptedConsole", "StreamConsoleHandler"]
