"""Fixed sequence of booleans with element-wise logic."""

from __future__ import annotations

from collections.abc import Iterator
from typing import overload

from logickit.errors import LogicError


class BoolVector:
    """An immutable vector of booleans.

    Element-wise operations require vectors of equal length and raise
    :class:`LogicError` otherwise.
    """

    __slots__ = ("_values",)

    def __init__(self, *args: bool) -> None:
        self._values: tuple[bool, ...] = tuple(bool(v) for v in args)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._values)

    @overload
    def __getitem__(self, index: int) -> bool: ...

    @overload
    def __getitem__(self, index: slice) -> BoolVector: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return BoolVector(*self._values[index])
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoolVector):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"BoolVector({', '.join(map(repr, self._values))})"

    def _pairwise(self, other: BoolVector, op: str):
        if len(self) != len(other):
            raise LogicError(f"BoolVector.{op}", "vector length mismatch")
        return zip(self._values, other)

    def and_(self, other: BoolVector) -> BoolVector:
        """Element-wise AND."""
        return BoolVector(*(a and b for a, b in self._pairwise(other, "And")))

    def or_(self, other: BoolVector) -> BoolVector:
        """Element-wise OR."""
        return BoolVector(*(a or b for a, b in self._pairwise(other, "Or")))

    def xor(self, other: BoolVector) -> BoolVector:
        """Element-wise XOR."""
        return BoolVector(*(a != b for a, b in self._pairwise(other, "Xor")))

    def not_(self) -> BoolVector:
        """Element-wise NOT."""
        return BoolVector(*(not v for v in self._values))

    def __and__(self, other: object) -> BoolVector:
        if not isinstance(other, BoolVector):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: object) -> BoolVector:
        if not isinstance(other, BoolVector):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other: object) -> BoolVector:
        if not isinstance(other, BoolVector):
            return NotImplemented
        return self.xor(other)

    def __invert__(self) -> BoolVector:
        return self.not_()

    def count(self) -> int:
        """Number of true values."""
        return sum(self._values)

    def all_true(self) -> bool:
        """True when every value is true; false for an empty vector."""
        return bool(self._values) and all(self._values)

    def any_true(self) -> bool:
        """True when any value is true."""
        return any(self._values)

    def __str__(self) -> str:
        return "[" + ", ".join("T" if v else "F" for v in self._values) + "]"