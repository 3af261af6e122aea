"""Logic gates and circuits of connected gates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from logickit.errors import LogicError
from logickit.operations import and_, nand, nor, not_, or_, xor


class Gate(ABC):
    """A logic gate that maps boolean inputs to one boolean output."""

    name: str = "GATE"

    @abstractmethod
    def evaluate(self, *args: bool) -> bool:
        """Compute the gate's output for the given inputs."""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class AndGate(Gate):
    """True only when all inputs are true."""

    name = "AND"

    def evaluate(self, *args: bool) -> bool:
        return and_(*args)


class OrGate(Gate):
    """True when at least one input is true."""

    name = "OR"

    def evaluate(self, *args: bool) -> bool:
        return or_(*args)


class NotGate(Gate):
    """Inverts a single input; any other number of inputs gives false."""

    name = "NOT"

    def evaluate(self, *args: bool) -> bool:
        if len(args) != 1:
            return False
        return not_(args[0])


class XorGate(Gate):
    """True when an odd number of inputs are true."""

    name = "XOR"

    def evaluate(self, *args: bool) -> bool:
        return xor(*args)


class XnorGate(Gate):
    """True when an even number of inputs are true."""

    name = "XNOR"

    def evaluate(self, *args: bool) -> bool:
        return not xor(*args)


class NandGate(Gate):
    """False only when all inputs are true."""

    name = "NAND"

    def evaluate(self, *args: bool) -> bool:
        return nand(*args)


class NorGate(Gate):
    """True only when all inputs are false."""

    name = "NOR"

    def evaluate(self, *args: bool) -> bool:
        return nor(*args)


@dataclass
class CircuitNode:
    """A gate in a circuit, fed by input variables or other nodes."""

    id: str
    gate: Gate
    inputs: list[str] = field(default_factory=list)
    value: bool | None = None


def _go_list(items: Iterable[str]) -> str:
    return "[" + " ".join(items) + "]"


class Circuit:
    """A network of gates with named inputs and chosen output nodes."""

    def __init__(self, inputs: Iterable[str]) -> None:
        self.input_vars: list[str] = list(inputs)
        self.nodes: dict[str, CircuitNode] = {}
        self.outputs: list[str] = []
        self._topology: list[str] = []
        self._topology_valid = False

    def add_node(self, node_id: str, gate: Gate, inputs: Iterable[str]) -> None:
        """Add a gate under a new, unique ``node_id``."""
        if node_id in self.nodes:
            raise LogicError("Circuit.AddNode", f"node ID '{node_id}' already exists")
        self.nodes[node_id] = CircuitNode(node_id, gate, list(inputs))
        self._topology_valid = False

    def set_outputs(self, outputs: Iterable[str]) -> None:
        """Choose which nodes' values :meth:`simulate` returns."""
        chosen = list(outputs)
        for output_id in chosen:
            if output_id not in self.nodes:
                raise LogicError(
                    "Circuit.SetOutputs", f"output node '{output_id}' does not exist"
                )
        self.outputs = chosen

    def _node_refs(self, node_id: str) -> Iterator[str]:
        return (ref for ref in self.nodes[node_id].inputs if ref in self.nodes)

    def _build_topology(self) -> None:
        if self._topology_valid:
            return

        visited: set[str] = set()
        order: list[str] = []
        for root in self.nodes:
            if root in visited:
                continue
            on_path = {root}
            stack = [(root, self._node_refs(root))]
            while stack:
                node_id, pending = stack[-1]
                for ref in pending:
                    if ref in on_path:
                        raise LogicError(
                            "Circuit.buildTopology", "circular dependency detected"
                        )
                    if ref in visited:
                        continue
                    on_path.add(ref)
                    stack.append((ref, self._node_refs(ref)))
                    break
                else:
                    stack.pop()
                    on_path.discard(node_id)
                    visited.add(node_id)
                    order.append(node_id)

        self._topology = order
        self._topology_valid = True

    def simulate(self, inputs: Mapping[str, bool]) -> dict[str, bool]:
        """Propagate ``inputs`` through the circuit and return the outputs."""
        for name in self.input_vars:
            if name not in inputs:
                raise LogicError("Circuit.Simulate", f"missing input value for '{name}'")

        self._build_topology()

        for node in self.nodes.values():
            node.value = None

        for node_id in self._topology:
            node = self.nodes[node_id]
            values = []
            for ref in node.inputs:
                if ref in inputs:
                    values.append(bool(inputs[ref]))
                    continue
                source = self.nodes.get(ref)
                if source is None or source.value is None:
                    raise LogicError(
                        "Circuit.Simulate",
                        f"unresolved input '{ref}' for node '{node_id}'",
                    )
                values.append(source.value)
            node.value = bool(node.gate.evaluate(*values))

        results: dict[str, bool] = {}
        for output_id in self.outputs:
            node = self.nodes.get(output_id)
            if node is None or node.value is None:
                raise LogicError(
                    "Circuit.Simulate", f"output node '{output_id}' not evaluated"
                )
            results[output_id] = node.value
        return results

    def get_node_value(self, node_id: str) -> bool:
        """The value a node took in the last simulation."""
        node = self.nodes.get(node_id)
        if node is None:
            raise LogicError("Circuit.GetNodeValue", f"node '{node_id}' does not exist")
        if node.value is None:
            raise LogicError(
                "Circuit.GetNodeValue", f"node '{node_id}' has not been evaluated"
            )
        return node.value

    def __str__(self) -> str:
        lines = [
            "Circuit:",
            f"  Inputs: {_go_list(self.input_vars)}",
            f"  Outputs: {_go_list(self.outputs)}",
            "  Nodes:",
        ]
        for node_id, node in self.nodes.items():
            value = "nil" if node.value is None else str(node.value).lower()
            lines.append(f"    {node_id}: {node.gate}({_go_list(node.inputs)}) = {value}")
        return "\n".join(lines) + "\n"