import re

import pytest

from logickit.errors import LogicError
from logickit.examples import comparator, full_adder, main


@pytest.fixture
def output(capsys):
    status = main()
    return status, capsys.readouterr().out


def test_main_succeeds_and_reports_completion(output):
    status, text = output
    assert status == 0
    lines = text.splitlines()
    assert lines[0] == "Logic Package Examples"
    assert lines[-1] == "All examples completed successfully!"


def test_main_prints_every_section(output):
    _, text = output
    headers = [
        "=== Basic Boolean Operations ===",
        "=== Boolean Vector Operations ===",
        "=== Bitwise Operations ===",
        "=== Truth Table Generation ===",
        "=== Logical Laws Verification ===",
        "=== Fluent Interface ===",
        "=== Logic Gates and Enhanced Circuits ===",
        "=== Complex Multi-Layer Circuit ===",
        "=== Advanced Bitwise Operations ===",
        "=== Error Handling ===",
    ]
    positions = [text.index(header) for header in headers]
    assert positions == sorted(positions)


def test_laws_are_reported_as_holding(output):
    _, text = output
    assert "De Morgan's Law is a tautology: true" in text
    assert "Distributive Law is a tautology: true" in text
    assert "A && !A is a contradiction: true" in text


def test_full_adder_rows_are_consistent(output):
    _, text = output
    rows = re.findall(r"^(\d) (\d) (\d)   \| (\d)   (\d)$", text, re.MULTILINE)
    assert len(rows) == 8
    for a, b, cin, total, carry in rows:
        assert int(a) + int(b) + int(cin) == int(total) + 2 * int(carry)


def test_error_messages_are_printed(output):
    _, text = output
    assert "Operation: BoolVector.And" in text
    assert "Message: vector length mismatch" in text
    assert "node ID 'gate1' already exists" in text


def test_full_adder_circuit_adds_bits():
    circuit = full_adder()
    for a in (False, True):
        for b in (False, True):
            for cin in (False, True):
                out = circuit.simulate({"A": a, "B": b, "Cin": cin})
                assert a + b + cin == out["sum"] + 2 * out["cout"]


def test_comparator_equal_inputs_report_equality():
    circuit = comparator()
    out = circuit.simulate({"A1": True, "A0": False, "B1": True, "B0": False})
    assert out["eq"] is True
    assert out["gt"] is False
    assert out["lt"] is False


def test_comparator_outputs_are_exclusive():
    circuit = comparator()
    for number in range(16):
        bits = [(number >> shift) & 1 == 1 for shift in (3, 2, 1, 0)]
        out = circuit.simulate(dict(zip(["A1", "A0", "B1", "B0"], bits)))
        assert sum(out.values()) == 1


def test_comparator_requires_all_inputs():
    with pytest.raises(LogicError):
        comparator().simulate({"A1": True})