import itertools

import pytest

from logickit.errors import LogicError
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


@pytest.mark.parametrize(
    "gate, inputs, expected",
    [
        (AndGate(), (True, True), True),
        (AndGate(), (True, False), False),
        (OrGate(), (False, True), True),
        (OrGate(), (False, False), False),
        (NotGate(), (True,), False),
        (NotGate(), (False,), True),
        (XorGate(), (True, False), True),
        (XorGate(), (True, True), False),
        (XnorGate(), (True, False), False),
        (XnorGate(), (True, True), True),
        (XnorGate(), (False, False), True),
        (NandGate(), (True, True), False),
        (NandGate(), (True, False), True),
        (NorGate(), (False, False), True),
        (NorGate(), (False, True), False),
    ],
)
def test_gates(gate, inputs, expected):
    assert gate.evaluate(*inputs) is expected


@pytest.mark.parametrize(
    "inputs, expected",
    [
        ((False, False), True),
        ((False, True), False),
        ((True, False), False),
        ((True, True), True),
        ((True, True, True), False),
        ((True, True, False, False), True),
    ],
)
def test_xnor_gate(inputs, expected):
    assert XnorGate().evaluate(*inputs) is expected


@pytest.mark.parametrize("inputs", [(), (True, False), (False, False)])
def test_not_gate_needs_exactly_one_input(inputs):
    assert NotGate().evaluate(*inputs) is False


@pytest.mark.parametrize(
    "gate, name",
    [
        (AndGate(), "AND"),
        (OrGate(), "OR"),
        (NotGate(), "NOT"),
        (XorGate(), "XOR"),
        (XnorGate(), "XNOR"),
        (NandGate(), "NAND"),
        (NorGate(), "NOR"),
    ],
)
def test_gate_names(gate, name):
    assert str(gate) == name


@pytest.fixture
def and_or_circuit():
    circuit = Circuit(["A", "B", "C", "D"])
    circuit.add_node("and1", AndGate(), ["A", "B"])
    circuit.add_node("and2", AndGate(), ["C", "D"])
    circuit.add_node("or1", OrGate(), ["and1", "and2"])
    circuit.set_outputs(["or1"])
    return circuit


@pytest.mark.parametrize(
    "inputs, expected",
    [
        ({"A": False, "B": False, "C": False, "D": False}, False),
        ({"A": True, "B": True, "C": False, "D": False}, True),
        ({"A": False, "B": False, "C": True, "D": True}, True),
        ({"A": True, "B": True, "C": True, "D": True}, True),
        ({"A": True, "B": False, "C": False, "D": True}, False),
    ],
)
def test_enhanced_circuit(and_or_circuit, inputs, expected):
    assert and_or_circuit.simulate(inputs) == {"or1": expected}


def test_circuit_multiple_outputs():
    circuit = Circuit(["A", "B"])
    circuit.add_node("and1", AndGate(), ["A", "B"])
    circuit.add_node("or1", OrGate(), ["A", "B"])
    circuit.add_node("xor1", XorGate(), ["A", "B"])
    circuit.add_node("not1", NotGate(), ["A"])
    circuit.set_outputs(["and1", "or1", "xor1", "not1"])

    outputs = circuit.simulate({"A": True, "B": False})
    assert outputs == {"and1": False, "or1": True, "xor1": True, "not1": False}


def test_duplicate_node_id():
    circuit = Circuit(["A", "B"])
    circuit.add_node("gate1", AndGate(), ["A", "B"])
    with pytest.raises(LogicError) as info:
        circuit.add_node("gate1", OrGate(), ["A", "B"])
    assert info.value.op == "Circuit.AddNode"
    assert "gate1" in info.value.message


def test_invalid_output_reference():
    circuit = Circuit(["A", "B"])
    circuit.add_node("gate1", AndGate(), ["A", "B"])
    with pytest.raises(LogicError) as info:
        circuit.set_outputs(["nonexistent"])
    assert info.value.op == "Circuit.SetOutputs"
    assert circuit.outputs == []


def test_missing_input():
    circuit = Circuit(["A", "B"])
    circuit.add_node("gate1", AndGate(), ["A", "B"])
    circuit.set_outputs(["gate1"])
    with pytest.raises(LogicError) as info:
        circuit.simulate({"A": True})
    assert info.value.message == "missing input value for 'B'"


def test_cyclic_dependency():
    circuit = Circuit(["A"])
    circuit.add_node("gate1", AndGate(), ["A", "gate2"])
    circuit.add_node("gate2", OrGate(), ["gate1", "A"])
    circuit.set_outputs(["gate1"])
    with pytest.raises(LogicError) as info:
        circuit.simulate({"A": True})
    assert info.value.op == "Circuit.buildTopology"
    assert info.value.message == "circular dependency detected"


def test_self_loop_is_cycle():
    circuit = Circuit(["A"])
    circuit.add_node("loop", AndGate(), ["A", "loop"])
    with pytest.raises(LogicError):
        circuit.simulate({"A": True})


def test_unresolved_input():
    circuit = Circuit(["A"])
    circuit.add_node("gate1", AndGate(), ["A", "ghost"])
    circuit.set_outputs(["gate1"])
    with pytest.raises(LogicError) as info:
        circuit.simulate({"A": True})
    assert info.value.message == "unresolved input 'ghost' for node 'gate1'"


def test_complex_topology():
    circuit = Circuit(["A", "B", "C", "D"])
    circuit.add_node("gate1", AndGate(), ["A", "B"])
    circuit.add_node("gate2", OrGate(), ["C", "D"])
    circuit.add_node("gate3", XorGate(), ["gate1", "gate2"])
    circuit.add_node("gate4", NandGate(), ["A", "C"])
    circuit.add_node("final", OrGate(), ["gate3", "gate4"])
    circuit.set_outputs(["final"])

    outputs = circuit.simulate({"A": True, "B": False, "C": True, "D": False})

    assert circuit.get_node_value("gate1") is False
    assert circuit.get_node_value("gate2") is True
    assert circuit.get_node_value("gate3") is True
    assert circuit.get_node_value("gate4") is False
    assert outputs == {"final": True}


def test_nodes_added_out_of_dependency_order():
    circuit = Circuit(["A", "B"])
    circuit.add_node("final", NotGate(), ["middle"])
    circuit.add_node("middle", AndGate(), ["A", "B"])
    circuit.set_outputs(["final"])
    assert circuit.simulate({"A": True, "B": True}) == {"final": False}
    assert circuit.simulate({"A": True, "B": False}) == {"final": True}


def test_adding_node_after_simulation_rebuilds_order():
    circuit = Circuit(["A"])
    circuit.add_node("n1", NotGate(), ["A"])
    circuit.set_outputs(["n1"])
    assert circuit.simulate({"A": True}) == {"n1": False}
    circuit.add_node("n2", NotGate(), ["n1"])
    circuit.set_outputs(["n1", "n2"])
    assert circuit.simulate({"A": True}) == {"n1": False, "n2": True}


def test_get_node_value_errors():
    circuit = Circuit(["A"])
    circuit.add_node("n1", NotGate(), ["A"])
    with pytest.raises(LogicError) as missing:
        circuit.get_node_value("nope")
    assert missing.value.message == "node 'nope' does not exist"
    with pytest.raises(LogicError) as unevaluated:
        circuit.get_node_value("n1")
    assert unevaluated.value.message == "node 'n1' has not been evaluated"


def test_full_adder():
    circuit = Circuit(["A", "B", "Cin"])
    circuit.add_node("xor1", XorGate(), ["A", "B"])
    circuit.add_node("sum", XorGate(), ["xor1", "Cin"])
    circuit.add_node("and1", AndGate(), ["A", "B"])
    circuit.add_node("and2", AndGate(), ["xor1", "Cin"])
    circuit.add_node("cout", OrGate(), ["and1", "and2"])
    circuit.set_outputs(["sum", "cout"])

    for a, b, cin in itertools.product([False, True], repeat=3):
        outputs = circuit.simulate({"A": a, "B": b, "Cin": cin})
        total = int(a) + int(b) + int(cin)
        assert outputs == {"sum": total % 2 == 1, "cout": total >= 2}


def test_constructor_copies_inputs():
    names = ["A", "B"]
    circuit = Circuit(names)
    names.append("C")
    assert circuit.input_vars == ["A", "B"]


def test_str_before_and_after_simulation():
    circuit = Circuit(["A", "B"])
    circuit.add_node("g", AndGate(), ["A", "B"])
    circuit.set_outputs(["g"])
    assert str(circuit) == (
        "Circuit:\n"
        "  Inputs: [A B]\n"
        "  Outputs: [g]\n"
        "  Nodes:\n"
        "    g: AND([A B]) = nil\n"
    )
    circuit.simulate({"A": True, "B": True})
    assert str(circuit).endswith("    g: AND([A B]) = true\n")