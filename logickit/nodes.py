"""Syntax tree of logical expressions and its evaluation."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from logickit.errors import LogicError
from logickit.operations import and_, iff, implies, nand, nor, not_, or_, xor

_OP = "ASTNode.Evaluate"


class NodeType(Enum):
    """Kinds of node in an expression tree."""

    VARIABLE = "Variable"
    CONSTANT = "Constant"
    NOT = "Not"
    AND = "And"
    OR = "Or"
    XOR = "Xor"
    NAND = "Nand"
    NOR = "Nor"
    IMPLIES = "Implies"
    IFF = "Iff"

    def __str__(self) -> str:
        return self.value


_VARIADIC: dict[NodeType, Callable[..., bool]] = {
    NodeType.AND: and_,
    NodeType.OR: or_,
    NodeType.XOR: xor,
    NodeType.NAND: nand,
    NodeType.NOR: nor,
}

_BINARY: dict[NodeType, tuple[Callable[[bool, bool], bool], str]] = {
    NodeType.IMPLIES: (implies, "IMPLIES"),
    NodeType.IFF: (iff, "IFF"),
}

_TRUE_CONSTANTS = frozenset({"true", "1", "t"})


@dataclass
class ASTNode:
    """A node of an expression tree.

    ``value`` holds the name of a variable or the text of a constant;
    ``position`` is the offset in the source text used in messages.
    """

    type: NodeType
    value: str = ""
    children: list[ASTNode] = field(default_factory=list)
    position: int = 0

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        """Value of the tree with variables taken from ``context``.

        Raises :class:`LogicError` for an undefined variable or a node with
        the wrong number of operands.
        """
        kind = self.type

        if kind is NodeType.VARIABLE:
            if self.value not in context:
                raise LogicError(_OP, f"undefined variable: {self.value}")
            return bool(context[self.value])

        if kind is NodeType.CONSTANT:
            return self.value.lower() in _TRUE_CONSTANTS

        if kind is NodeType.NOT:
            if len(self.children) != 1:
                raise LogicError(_OP, "NOT operation requires exactly one operand")
            return not_(self.children[0].evaluate(context))

        if kind in _VARIADIC:
            values = [child.evaluate(context) for child in self.children]
            return _VARIADIC[kind](*values)

        if kind in _BINARY:
            operation, label = _BINARY[kind]
            if len(self.children) != 2:
                raise LogicError(_OP, f"{label} operation requires exactly two operands")
            left, right = (child.evaluate(context) for child in self.children)
            return operation(left, right)

        raise LogicError(_OP, f"unknown node type: {kind}")