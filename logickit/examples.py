"""A tour of the package's features, printed to standard output."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from logickit.bitwise import BitwiseInt
from logickit.errors import LogicError
from logickit.evaluator import chain
from logickit.gates import (
    AndGate,
    Circuit,
    NandGate,
    NorGate,
    NotGate,
    OrGate,
    XnorGate,
    XorGate,
)
from logickit.operations import (
    and_,
    contingency,
    contradiction,
    de_morgan_law,
    distributive_law,
    iff,
    implies,
    nand,
    nor,
    not_,
    or_,
    tautology,
    xor,
)
from logickit.truthtable import generate_truth_table
from logickit.vector import BoolVector


def _line(label: str, value: object) -> str:
    """Format ``label: value``, writing booleans in lower case."""
    text = str(value).lower() if isinstance(value, bool) else str(value)
    return f"{label}: {text}"


def basic_operations() -> Iterator[str]:
    yield "=== Basic Boolean Operations ==="
    cases: list[tuple[str, Callable[..., bool], tuple[bool, ...]]] = [
        ("AND(true, false)", and_, (True, False)),
        ("OR(true, false)", or_, (True, False)),
        ("XOR(true, false)", xor, (True, False)),
        ("NOT(true)", not_, (True,)),
        ("AND(true, true, false)", and_, (True, True, False)),
        ("OR(false, false, true)", or_, (False, False, True)),
        ("NAND(true, true)", nand, (True, True)),
        ("NOR(false, false)", nor, (False, False)),
        ("IMPLIES(true, false)", implies, (True, False)),
        ("IFF(true, true)", iff, (True, True)),
    ]
    for label, operation, args in cases:
        yield _line(label, operation(*args))
    yield ""


def bool_vector() -> Iterator[str]:
    yield "=== Boolean Vector Operations ==="
    v1 = BoolVector(True, False, True, False)
    v2 = BoolVector(False, True, True, False)
    yield _line("Vector 1", v1)
    yield _line("Vector 2", v2)
    yield _line("V1 AND V2", v1 & v2)
    yield _line("V1 OR V2", v1 | v2)
    yield _line("V1 XOR V2", v1 ^ v2)
    yield _line("NOT V1", ~v1)
    yield _line("V1 count", v1.count())
    yield _line("V1 all true", v1.all_true())
    yield _line("V1 any true", v1.any_true())
    yield ""


def bitwise_operations() -> Iterator[str]:
    yield "=== Bitwise Operations ==="
    a = BitwiseInt(0b1010)
    b = BitwiseInt(0b1100)
    yield _line("A", a)
    yield _line("B", b)
    yield _line("A AND B", a & b)
    yield _line("A OR B", a | b)
    yield _line("A XOR B", a ^ b)
    yield _line("A set bit 0", a.set_bit(0))
    yield _line("A clear bit 1", a.clear_bit(1))
    yield _line("A toggle bit 2", a.toggle_bit(2))
    yield _line("A get bit 1", a.get_bit(1))
    yield _line("A count set bits", a.count_set_bits())
    yield _line("A is power of 2", a.is_power_of_two())
    yield _line("A left shift 2", a.left_shift(2))
    yield _line("A right shift 1", a.right_shift(1))
    yield ""


def truth_tables() -> Iterator[str]:
    yield "=== Truth Table Generation ==="
    yield "XOR Truth Table:"
    yield str(generate_truth_table(["A", "B"], xor)).rstrip("\n")

    def equivalence(a: bool, b: bool) -> bool:
        return or_(and_(a, b), and_(not_(a), not_(b)))

    yield "Complex Operation Truth Table:"
    yield str(generate_truth_table(["A", "B"], equivalence)).rstrip("\n")
    yield ""


def logical_laws() -> Iterator[str]:
    yield "=== Logical Laws Verification ==="
    checks: list[tuple[str, Callable[..., bool], list[str], Callable[..., bool]]] = [
        ("De Morgan's Law is a tautology", tautology, ["A", "B"], de_morgan_law),
        (
            "Distributive Law is a tautology",
            tautology,
            ["A", "B", "C"],
            distributive_law,
        ),
        (
            "Law of excluded middle is a tautology",
            tautology,
            ["A"],
            lambda a: or_(a, not_(a)),
        ),
        (
            "A && !A is a contradiction",
            contradiction,
            ["A"],
            lambda a: and_(a, not_(a)),
        ),
        ("A AND B is contingent", contingency, ["A", "B"], and_),
    ]
    for label, check, variables, fn in checks:
        yield _line(label, check(variables, fn))
    yield ""


def fluent_interface() -> Iterator[str]:
    yield "=== Fluent Interface ==="
    result1 = chain(True).and_(False).or_(True).result()
    result2 = chain(False).not_().and_(True).xor(False).result()
    yield _line("Eval(true).And(false).Or(true)", result1)
    yield _line("Eval(false).Not().And(true).Xor(false)", result2)
    combined = (
        chain(True).and_(False).or_(True).xor(False).and_(True).not_().or_(True).result()
    )
    yield _line("Complex chain result", combined)
    yield ""


def full_adder() -> Circuit:
    """A one-bit full adder with outputs ``sum`` and ``cout``."""
    circuit = Circuit(["A", "B", "Cin"])
    circuit.add_node("xor1", XorGate(), ["A", "B"])
    circuit.add_node("sum", XorGate(), ["xor1", "Cin"])
    circuit.add_node("and1", AndGate(), ["A", "B"])
    circuit.add_node("and2", AndGate(), ["xor1", "Cin"])
    circuit.add_node("cout", OrGate(), ["and1", "and2"])
    circuit.set_outputs(["sum", "cout"])
    return circuit


def gates_and_circuits() -> Iterator[str]:
    yield "=== Logic Gates and Enhanced Circuits ==="
    yield _line("AND(true, false)", AndGate().evaluate(True, False))
    yield _line("OR(true, false)", OrGate().evaluate(True, False))
    yield _line("NOT(true)", NotGate().evaluate(True))
    yield _line("XOR(true, false)", XorGate().evaluate(True, False))
    yield _line("XNOR(true, false)", XnorGate().evaluate(True, False))
    yield _line("NAND(true, true)", NandGate().evaluate(True, True))

    circuit = full_adder()
    yield ""
    yield "Full Adder Truth Table:"
    yield "A B Cin | Sum Cout"
    yield "--------|----------"
    for a in (0, 1):
        for b in (0, 1):
            for cin in (0, 1):
                inputs = {"A": a == 1, "B": b == 1, "Cin": cin == 1}
                try:
                    outputs = circuit.simulate(inputs)
                except LogicError as err:
                    yield f"Circuit simulation error: {err}"
                    continue
                yield (
                    f"{a} {b} {cin}   | "
                    f"{int(outputs['sum'])}   {int(outputs['cout'])}"
                )
    yield ""


def comparator() -> Circuit:
    """A simplified 2-bit comparator with outputs ``gt``, ``eq`` and ``lt``."""
    circuit = Circuit(["A1", "A0", "B1", "B0"])
    circuit.add_node("eq1", XnorGate(), ["A1", "B1"])
    circuit.add_node("eq0", XnorGate(), ["A0", "B0"])
    circuit.add_node("gt1", AndGate(), ["A1", "B1"])
    circuit.add_node("gt0", AndGate(), ["A0", "B0"])
    circuit.add_node("eq", AndGate(), ["eq1", "eq0"])
    circuit.add_node("gt_partial", OrGate(), ["gt1", "gt0"])
    circuit.add_node("not_eq", NotGate(), ["eq"])
    circuit.add_node("gt", AndGate(), ["gt_partial", "not_eq"])
    circuit.add_node("lt", NorGate(), ["gt", "eq"])
    circuit.set_outputs(["gt", "eq", "lt"])
    return circuit


def complex_circuit() -> Iterator[str]:
    yield "=== Complex Multi-Layer Circuit ==="
    circuit = comparator()
    yield "2-bit Comparator Examples:"
    yield "A1 A0 | B1 B0 | GT EQ LT"
    yield "------|------|----------"
    cases = [
        (False, False, False, False, "0 vs 0"),
        (False, True, False, False, "1 vs 0"),
        (True, False, False, True, "2 vs 1"),
        (True, True, True, False, "3 vs 2"),
        (False, True, True, True, "1 vs 3"),
    ]
    for a1, a0, b1, b0, name in cases:
        try:
            outputs = circuit.simulate({"A1": a1, "A0": a0, "B1": b1, "B0": b0})
        except LogicError as err:
            yield f"Error: {err}"
            continue
        gt, eq, lt = (int(outputs[key]) for key in ("gt", "eq", "lt"))
        yield (
            f"{int(a1)}  {int(a0)}  | {int(b1)}  {int(b0)}  | "
            f"{gt}  {eq}  {lt}   ({name})"
        )
    yield ""


def advanced_bitwise() -> Iterator[str]:
    yield "=== Advanced Bitwise Operations ==="
    num = BitwiseInt(42)
    yield _line("Original number", num)
    yield _line("Population count", num.count_set_bits())
    yield _line("Is power of 2", num.is_power_of_two())
    yield _line("As boolean vector (first 8 bits)", num.to_bool_vector()[:8])

    even_bits = BitwiseInt(0)
    for pos in range(0, 64, 2):
        even_bits = even_bits.set_bit(pos)
    yield f"Even bits pattern (first 16 bits): 0b{even_bits.value & 0xFFFF:016b}"

    rightmost = num & BitwiseInt(-num.value)
    yield f"Rightmost set bit: 0b{rightmost.value:b}"
    yield ""


def error_handling() -> Iterator[str]:
    yield "=== Error Handling ==="
    v1 = BoolVector(True, False)
    v2 = BoolVector(True, False, True)
    try:
        v1.and_(v2)
    except LogicError as err:
        yield f"Error occurred: {err}"
        yield f"Operation: {err.op}"
        yield f"Message: {err.message}"

    circuit = Circuit(["A", "B"])
    circuit.add_node("gate1", AndGate(), ["A", "B"])
    try:
        circuit.add_node("gate1", OrGate(), ["A", "B"])
    except LogicError as err:
        yield f"Circuit error: {err}"
    yield ""


_SECTIONS: tuple[Callable[[], Iterator[str]], ...] = (
    basic_operations,
    bool_vector,
    bitwise_operations,
    truth_tables,
    logical_laws,
    fluent_interface,
    gates_and_circuits,
    complex_circuit,
    advanced_bitwise,
    error_handling,
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print every example in turn."""
    print("Logic Package Examples")
    print("======================")
    print()
    for section in _SECTIONS:
        for line in section():
            print(line)
    print("All examples completed successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())