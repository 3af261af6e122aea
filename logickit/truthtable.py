"""Truth tables over all assignments of a set of variables."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

_COLUMN = 8
_MARKS = {True: "T", False: "F"}


@dataclass
class TruthTableRow:
    """One assignment of the inputs and the function's result for it."""

    inputs: dict[str, bool]
    output: bool


@dataclass
class TruthTable:
    """All rows of a function's truth table, in binary counting order."""

    variables: list[str] = field(default_factory=list)
    rows: list[TruthTableRow] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.rows:
            return "Empty truth table\n"

        lines = [
            "".join(f"{name:<{_COLUMN}}" for name in self.variables) + "Output",
            "-" * (len(self.variables) * _COLUMN + 6),
        ]
        for row in self.rows:
            cells = "".join(
                f"{_MARKS[bool(row.inputs.get(name, False))]:<{_COLUMN}}"
                for name in self.variables
            )
            lines.append(cells + _MARKS[bool(row.output)])
        return "\n".join(lines) + "\n"


def generate_truth_table(
    variables: Sequence[str], fn: Callable[..., bool]
) -> TruthTable:
    """Evaluate ``fn`` for all 2**n assignments of ``variables``.

    The first variable is the most significant bit of the row number, so
    rows run from all-false to all-true.
    """
    names = list(variables)
    count = len(names)
    rows = []
    for number in range(1 << count):
        values = [(number >> (count - 1 - bit)) & 1 == 1 for bit in range(count)]
        rows.append(TruthTableRow(inputs=dict(zip(names, values)), output=bool(fn(*values))))
    return TruthTable(variables=names, rows=rows)