from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from algeff import Capability
from algeff.effects import CONSOLE, LOG, STATE, LogEffect, ReadLine, WriteLine
from algeff.effects.state import Get, Put


class TestEffectMap:
    def test_map_keeps_request_and_appends_stage(self):
        effect = LogEffect("hello")
        mapped = effect.map(lambda _: "next")

        assert mapped.message == "hello"
        assert mapped == effect
        assert len(mapped.pipeline) == 1
        assert effect.pipeline == ()

    def test_map_does_not_invoke_anything(self):
        calls: list[object] = []
        effect = LogEffect("x").map(lambda value: calls.append(value))
        assert calls == []
        effect.resume("answer")
        assert calls == ["answer"]

    def test_resume_runs_stages_left_to_right_once(self):
        calls: list[str] = []

        def stage(name: str, f):
            def run(value):
                calls.append(name)
                return f(value)

            return run

        effect = (
            ReadLine()
            .map(stage("first", lambda line: line.upper()))
            .map(stage("second", lambda line: line + "!"))
        )

        assert effect.resume("hi") == "HI!"
        assert calls == ["first", "second"]

    def test_resume_without_stages_returns_answer(self):
        assert ReadLine().resume("line") == "line"
        assert LogEffect("x").resume() is None

    def test_map_rejects_non_callable(self):
        with pytest.raises(TypeError, match="mapper must be callable"):
            LogEffect("x").map("not callable")  # type: ignore[arg-type]

    def test_effects_are_immutable(self):
        effect = LogEffect("x")
        with pytest.raises(FrozenInstanceError):
            effect.message = "y"  # type: ignore[misc]

    def test_deep_map_chain_is_stack_safe(self):
        effect = Get("n")
        for _ in range(5000):
            effect = effect.map(lambda value: value + 1)
        assert effect.resume(0) == 5000


class TestCapabilities:
    def test_each_kind_declares_its_capability(self):
        assert LogEffect("x").capability == LOG
        assert WriteLine("x").capability == CONSOLE
        assert ReadLine().capability == CONSOLE
        assert Put("k", 1).capability == STATE

    def test_capabilities_compare_by_name(self):
        assert Capability("log") == LOG
        assert Capability("log") != Capability("console")
        assert len({LOG, Capability("log"), STATE}) == 2
