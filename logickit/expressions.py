"""Parse and evaluate logical expressions given as text.

Supported operators (keywords are case-insensitive):

* AND: ``&``, ``∧``, ``and``
* OR: ``|``, ``∨``, ``or``
* NOT: ``!``, ``¬``, ``not``
* XOR: ``^``, ``⊕``, ``xor``
* NAND, NOR: ``nand``, ``nor``
* IMPLIES: ``->``, ``→``, ``implies``
* IFF: ``<->``, ``↔``, ``iff``
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from logickit.errors import LogicError
from logickit.parser import parse_expression
from logickit.truthtable import TruthTable, generate_truth_table


def evaluate_expression(expr: str, variables: Mapping[str, bool]) -> bool:
    """Parse ``expr`` and evaluate it with the given variable values.

    Raises :class:`LogicError` for a syntax error or an undefined variable.
    """
    return parse_expression(expr).evaluate(variables)


def validate_expression(expr: str) -> bool:
    """Return ``True`` if ``expr`` is well formed; raise :class:`LogicError` if not."""
    parse_expression(expr)
    return True


def truth_table_from_expression(expr: str, variables: Sequence[str]) -> TruthTable:
    """Build the truth table of ``expr`` over ``variables``.

    Raises :class:`LogicError` if ``expr`` does not parse. A row in which the
    expression cannot be evaluated, for instance because it names a variable
    not listed, gets the output ``False``.
    """
    tree = parse_expression(expr)
    names = list(variables)

    def evaluate(*inputs: bool) -> bool:
        context = dict(zip(names, inputs))
        try:
            return tree.evaluate(context)
        except LogicError:
            return False

    return generate_truth_table(names, evaluate)