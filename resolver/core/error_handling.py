"""
Error types raised by the resolver.

In-band battle failures (missing MP, missing items, empty target sides) are
never errors: they are logged and skipped. The exceptions below are reserved
for callers that break the input contract of a turn.
"""

from typing import Any


class GameException(Exception):
    """Base exception carrying the context in which the failure happened."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"


class BattleInputError(GameException, ValueError):
    """
    Raised when a turn is requested with malformed input, such as an actor
    index outside its roster or a random factor array shorter than the number
    of values the turn consumes.
    """
