"""
Errors raised by the Delve engine.

Rule violations during play (wrong phase, empty slot) are reported through
ActionResult, not exceptions. Exceptions are reserved for programming errors
such as building a card outside its domain.
"""

from __future__ import annotations
from typing import Any


class DelveError(Exception):
    """Base class for all Delve errors."""


class InvalidCardError(DelveError, ValueError):
    """A card was constructed with a field outside its domain."""

    def __init__(self, field: str, value: Any, reason: str | None = None):
        self.field = field
        self.value = value
        message = f"Invalid {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
