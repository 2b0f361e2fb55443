"""
Utility functions for the algeff library.
"""

import os
from collections.abc import Callable
from typing import Any

# Environment variable to control per-step debug logging
DEBUG_STEPS = os.environ.get("ALGEFF_DEBUG", "").lower() in ("1", "true", "yes")


def truncate_repr(obj: object, limit: int = 120) -> str:
    text = repr(obj)
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def ensure_callable(value: Any, *, name: str) -> Callable[..., Any]:
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")
    return value


__all__ = [
    "DEBUG_STEPS",
    "ensure_callable",
    "truncate_repr",
]
