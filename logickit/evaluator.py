"""Chainable boolean evaluation."""

from __future__ import annotations


class Evaluator:
    """Holds a boolean and updates it through chained operations."""

    __slots__ = ("_value",)

    def __init__(self, value: bool) -> None:
        self._value = bool(value)

    def and_(self, other: bool) -> Evaluator:
        self._value = self._value and bool(other)
        return self

    def or_(self, other: bool) -> Evaluator:
        self._value = self._value or bool(other)
        return self

    def xor(self, other: bool) -> Evaluator:
        self._value = self._value != bool(other)
        return self

    def not_(self) -> Evaluator:
        self._value = not self._value
        return self

    def result(self) -> bool:
        """The current value of the chain."""
        return self._value

    def __repr__(self) -> str:
        return f"Evaluator({self._value!r})"


def chain(initial: bool) -> Evaluator:
    """Start a chain of operations from ``initial``."""
    return Evaluator(initial)