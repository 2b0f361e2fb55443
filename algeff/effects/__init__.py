"""Effect vocabularies shipped with algeff."""

from algeff.effects.console import (
    CONSOLE,
    ConsoleEffect,
    ReadLine,
    WriteLine,
    read_line,
    write_line,
)
from algeff.effects.log import LOG, LogEffect, write, writef
from algeff.effects.state import STATE, Get, Modify, Put, StateEffect, get, modify, put

__all__ = [
    "CONSOLE",
    "ConsoleEffect",
    "Get",
    "LOG",
    "LogEffect",
    "Modify",
    "Put",
    "ReadLine",
    "STATE",
    "StateEffect",
    "WriteLine",
    "get",
    "modify",
    "put",
    "read_line",
    "write",
    "write_line",
    "writef",
]
