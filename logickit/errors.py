"""Error type raised by logic operations."""

from __future__ import annotations


class LogicError(Exception):
    """Raised when a logic operation fails.

    ``op`` names the operation that failed and ``message`` says why.
    """

    def __init__(self, op: str, message: str) -> None:
        super().__init__(op, message)
        self.op = op
        self.message = message

    def __str__(self) -> str:
        return f"logic operation '{self.op}': {self.message}"

    def __repr__(self) -> str:
        return f"LogicError(op={self.op!r}, message={self.message!r})"