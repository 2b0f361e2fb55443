from __future__ import annotations

import pytest

from algeff import (
    NOT_MINE,
    CapabilityConflictError,
    CombinedHandler,
    Handled,
    bind,
    combine,
    pure,
    run,
    then,
)
from algeff.effects import CONSOLE, LOG, STATE, LogEffect, read_line, write
from algeff.effects.console import ReadLine
from algeff.effects.state import get, put
from algeff.handlers import (
    LoguruLogHandler,
    PureConsoleHandler,
    PureLogHandler,
    PureStateHandler,
)

from tests.support import COUNTER, CounterHandler, Tick, tick


class TestCombinedHandler:
    def test_start_pairs_sub_states(self):
        handler = CombinedHandler(PureLogHandler(), CounterHandler())
        assert handler.start() == (None, 0)

    def test_capabilities_are_united(self):
        handler = CombinedHandler(PureLogHandler(), CounterHandler())
        assert handler.capabilities == frozenset({LOG, COUNTER})

    def test_first_handler_claims_its_effect(self):
        handler = CombinedHandler(PureLogHandler(), CounterHandler())
        outcome = handler.try_step((None, 5), LogEffect("x").map(pure))
        assert isinstance(outcome, Handled)
        assert outcome.state == (("x", None), 5)

    def test_falls_through_to_second_with_original_state(self):
        handler = CombinedHandler(PureLogHandler(), CounterHandler())
        log_state = ("earlier", None)
        outcome = handler.try_step((log_state, 1), Tick(2).map(pure))
        assert isinstance(outcome, Handled)
        assert outcome.state[0] is log_state
        assert outcome.state[1] == 3
        assert outcome.next == pure(3)

    def test_neither_claims_reports_not_mine(self):
        handler = CombinedHandler(PureLogHandler(), CounterHandler())
        assert handler.try_step((None, 0), ReadLine().map(pure)) is NOT_MINE

    def test_finish_pairs_results(self):
        handler = CombinedHandler(PureLogHandler(), CounterHandler())
        assert handler.finish((("b", ("a", None)), 4)) == (["a", "b"], 4)

    def test_conflicting_capabilities_rejected(self):
        with pytest.raises(CapabilityConflictError) as excinfo:
            CombinedHandler(PureLogHandler(), LoguruLogHandler())
        assert excinfo.value.overlap == frozenset({LOG})

    def test_trial_order_is_left_to_right(self, recording):
        first = recording(PureLogHandler())
        second = recording(CounterHandler())
        run(then(write("x"), tick()), CombinedHandler(first, second))

        assert first.offered() == [LogEffect("x"), Tick(1)]
        assert second.offered() == [Tick(1)]


class TestCombine:
    def test_single_handler_returned_as_is(self):
        handler = PureLogHandler()
        assert combine(handler) is handler

    def test_requires_a_handler(self):
        with pytest.raises(ValueError, match="at least one handler"):
            combine()

    def test_rejects_non_handlers(self):
        with pytest.raises(TypeError, match="Handler instances"):
            combine(PureLogHandler(), object())  # type: ignore[arg-type]

    def test_three_handlers_nest_to_the_right(self):
        log, counter, state = PureLogHandler(), CounterHandler(), PureStateHandler()
        handler = combine(log, counter, state)

        assert isinstance(handler, CombinedHandler)
        assert handler.first is log
        assert isinstance(handler.second, CombinedHandler)
        assert handler.second.first is counter
        assert handler.second.second is state
        assert handler.capabilities == frozenset({LOG, COUNTER, STATE})

    def test_conflict_detected_anywhere_in_the_fold(self):
        with pytest.raises(CapabilityConflictError):
            combine(PureLogHandler(), CounterHandler(), PureStateHandler(), CounterHandler())

    def test_nested_result_shape(self):
        handler = combine(PureLogHandler(), CounterHandler(), PureStateHandler())
        chain = then(write("a"), then(tick(2), then(put("k", "v"), pure("done"))))

        value, (log, (count, state)) = run(chain, handler)

        assert value == "done"
        assert log == ["a"]
        assert count == 2
        assert state == {"k": "v"}


class TestIsolation:
    def test_unused_handler_state_stays_at_start(self):
        counter = CounterHandler()
        handler = combine(PureLogHandler(), counter)
        chain = then(write("x"), then(write("y"), pure(42)))

        value, (log, count) = run(chain, handler)

        assert value == 42
        assert log == ["x", "y"]
        assert count == counter.finish(counter.start())

    def test_unused_handler_is_offered_nothing_when_first(self, recording):
        counter = recording(CounterHandler())
        handler = combine(PureLogHandler(), counter)
        run(then(write("x"), pure(None)), handler)
        assert counter.offered() == []

    def test_interleaved_kinds_update_only_their_slot(self):
        handler = combine(PureStateHandler({"n": 1}), PureConsoleHandler(["in"]), PureLogHandler())
        chain = bind(
            get("n"),
            lambda n: then(
                write(f"n={n}"),
                bind(read_line(), lambda line: then(put("line", line), pure(n))),
            ),
        )

        value, (state, (console, log)) = run(chain, handler)

        assert value == 1
        assert state == {"n": 1, "line": "in"}
        assert console == []
        assert log == ["n=1"]
        assert handler.capabilities == frozenset({STATE, CONSOLE, LOG})
