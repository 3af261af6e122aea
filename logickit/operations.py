"""Basic boolean operations and checks over all input combinations."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence


def and_(*args: bool) -> bool:
    """True when every input is true; false when there are no inputs."""
    return bool(args) and all(args)


def or_(*args: bool) -> bool:
    """True when at least one input is true."""
    return any(args)


def xor(*args: bool) -> bool:
    """True when an odd number of inputs are true."""
    return sum(1 for value in args if value) % 2 == 1


def not_(value: bool) -> bool:
    """Logical negation."""
    return not value


def nand(*args: bool) -> bool:
    """Negation of :func:`and_`."""
    return not and_(*args)


def nor(*args: bool) -> bool:
    """Negation of :func:`or_`."""
    return not or_(*args)


def xnor(*args: bool) -> bool:
    """True when an even number of inputs are true."""
    return not xor(*args)


def implies(a: bool, b: bool) -> bool:
    """Material implication: false only when ``a`` is true and ``b`` false."""
    return (not a) or bool(b)


def iff(a: bool, b: bool) -> bool:
    """Biconditional: true when both inputs have the same truth value."""
    return bool(a) == bool(b)


def de_morgan_law(a: bool, b: bool) -> bool:
    """Check that not(a and b) equals (not a) or (not b)."""
    return not_(and_(a, b)) == or_(not_(a), not_(b))


def distributive_law(a: bool, b: bool, c: bool) -> bool:
    """Check that a and (b or c) equals (a and b) or (a and c)."""
    return and_(a, or_(b, c)) == or_(and_(a, b), and_(a, c))


def _combinations(count: int) -> Iterator[tuple[bool, ...]]:
    """Yield every assignment; input j takes bit j of the row number."""
    for row in range(1 << count):
        yield tuple((row >> bit) & 1 == 1 for bit in range(count))


def tautology(variables: Sequence[str], fn: Callable[..., bool]) -> bool:
    """True when ``fn`` is true for every assignment of ``variables``."""
    return all(fn(*inputs) for inputs in _combinations(len(variables)))


def contradiction(variables: Sequence[str], fn: Callable[..., bool]) -> bool:
    """True when ``fn`` is false for every assignment of ``variables``."""
    return not any(fn(*inputs) for inputs in _combinations(len(variables)))


def contingency(variables: Sequence[str], fn: Callable[..., bool]) -> bool:
    """True when ``fn`` is true for some assignments and false for others."""
    seen_true = seen_false = False
    for inputs in _combinations(len(variables)):
        if fn(*inputs):
            seen_true = True
        else:
            seen_false = True
        if seen_true and seen_false:
            return True
    return False