"""Handlers for the effect vocabularies shipped with algeff."""

from algeff.handlers.console import PureConsoleHandler, StreamConsoleHandler
from algeff.handlers.log import LoguruLogHandler, PureLogHandler
from algeff.handlers.state import PureStateHandler

__all__ = [
    "LoguruLogHandler",
    "PureConsoleHandler",
    "PureLogHandler",
    "PureStateHandler",
    "StreamConsoleHandler",
]
