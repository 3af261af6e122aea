"""Unsigned 64-bit integer with bitwise helpers."""

from __future__ import annotations

from logickit.vector import BoolVector

_WIDTH = 64
_MASK = (1 << _WIDTH) - 1


class BitwiseInt:
    """An immutable unsigned 64-bit integer.

    Every operation returns a new instance; results wrap to 64 bits.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        self._value = int(value) & _MASK

    @property
    def value(self) -> int:
        """The wrapped unsigned integer."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BitwiseInt):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"BitwiseInt({self._value:#x})"

    def and_(self, other: BitwiseInt) -> BitwiseInt:
        """Bitwise AND."""
        return BitwiseInt(self._value & other._value)

    def or_(self, other: BitwiseInt) -> BitwiseInt:
        """Bitwise OR."""
        return BitwiseInt(self._value | other._value)

    def xor(self, other: BitwiseInt) -> BitwiseInt:
        """Bitwise XOR."""
        return BitwiseInt(self._value ^ other._value)

    def not_(self) -> BitwiseInt:
        """One's complement within 64 bits."""
        return BitwiseInt(~self._value)

    def __and__(self, other: object) -> BitwiseInt:
        if not isinstance(other, BitwiseInt):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: object) -> BitwiseInt:
        if not isinstance(other, BitwiseInt):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other: object) -> BitwiseInt:
        if not isinstance(other, BitwiseInt):
            return NotImplemented
        return self.xor(other)

    def __invert__(self) -> BitwiseInt:
        return self.not_()

    def set_bit(self, pos: int) -> BitwiseInt:
        """Set bit ``pos`` (0 is the least significant) to 1."""
        return BitwiseInt(self._value | (1 << pos))

    def clear_bit(self, pos: int) -> BitwiseInt:
        """Set bit ``pos`` to 0."""
        return BitwiseInt(self._value & ~(1 << pos))

    def toggle_bit(self, pos: int) -> BitwiseInt:
        """Flip bit ``pos``."""
        return BitwiseInt(self._value ^ (1 << pos))

    def get_bit(self, pos: int) -> bool:
        """Whether bit ``pos`` is set."""
        return (self._value >> pos) & 1 == 1

    def count_set_bits(self) -> int:
        """Population count."""
        return bin(self._value).count("1")

    def is_power_of_two(self) -> bool:
        """True for powers of two; zero is not one."""
        return self._value != 0 and self._value & (self._value - 1) == 0

    def left_shift(self, n: int) -> BitwiseInt:
        """Shift left by ``n``, discarding bits beyond 64."""
        return BitwiseInt(self._value << n)

    def right_shift(self, n: int) -> BitwiseInt:
        """Logical shift right by ``n``."""
        return BitwiseInt(self._value >> n)

    def to_bool_vector(self) -> BoolVector:
        """All 64 bits as a vector, least significant bit first."""
        return BoolVector(*(self.get_bit(pos) for pos in range(_WIDTH)))

    def __str__(self) -> str:
        return f"0b{self._value:064b} ({self._value})"