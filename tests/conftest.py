"""
Pytest configuration for algeff tests.

Shared effect kinds and handlers live in ``tests/support.py``; the fixtures
here hand out fresh instances per test.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from algeff import EffectChain, Handler
from algeff.handlers import PureLogHandler
from tests.support import CounterHandler, RecordingHandler, tick as make_tick


@pytest.fixture
def tick() -> Callable[..., EffectChain[int]]:
    return make_tick


@pytest.fixture
def counter_handler() -> CounterHandler:
    return CounterHandler()


@pytest.fixture
def log_handler() -> PureLogHandler:
    return PureLogHandler()


@pytest.fixture
def recording() -> Callable[[Handler[Any, Any]], RecordingHandler]:
    return RecordingHandler
