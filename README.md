# logickit

A small toolkit for working with boolean logic in Python:

- variadic logical operations (`and_`, `or_`, `xor`, `nand`, `nor`, `xnor`,
  `implies`, `iff`) and checks for tautologies, contradictions and contingencies
- `BoolVector` for element-wise logic over sequences of booleans
- `BitwiseInt` for bit manipulation on 64-bit unsigned values
- logic gates and `Circuit` for simulating networks of connected gates
- truth table generation
- a fluent evaluator for chaining operations
- a parser and evaluator for logical expressions written in ASCII, Unicode or
  keyword form
- a small runner that executes named boolean operations and records results
  and timings

It has no runtime dependencies.

## Installation

```
pip install logickit
```

To run the test suite:

```
pip install "logickit[test]"
pytest
```

## Basic operations

```python
from logickit.operations import and_, or_, xor, implies, tautology, not_

and_(True, False, True)   # False
or_(False, True)          # True
xor(True, True, True)     # True (odd number of True inputs)
and_()                    # False (no inputs)
implies(True, False)      # False

# "A or not A" holds for every assignment
tautology(["A"], lambda a: or_(a, not_(a)))   # True
```

`contradiction` and `contingency` take the same arguments: a list of variable
names (only its length matters) and a function called with one boolean per
variable. `de_morgan_law(a, b)` and `distributive_law(a, b, c)` return whether
the law holds for the given values.

## Boolean vectors

```python
from logickit.vector import BoolVector

v1 = BoolVector(True, False, True)
v2 = BoolVector(False, False, True)

str(v1 & v2)     # "[F, F, T]"
str(~v1)         # "[F, T, F]"
v1.count()       # 2
v1.any_true()    # True
v1.all_true()    # False
```

The operators `&`, `|`, `^` and `~` are also available as the methods `and_`,
`or_`, `xor` and `not_`. Vectors are immutable, iterable, indexable and
sliceable. Combining vectors of different lengths raises
`logickit.errors.LogicError`, whose `op` attribute names the operation (for
example `"BoolVector.And"`) and whose `message` says what went wrong.

## Bitwise integers

```python
from logickit.bitwise import BitwiseInt

a = BitwiseInt(0b1010)
b = BitwiseInt(0b1100)

(a & b).value           # 8
a.set_bit(0).value      # 11
a.get_bit(1)            # True
a.count_set_bits()      # 2
BitwiseInt(8).is_power_of_two()  # True
str(BitwiseInt(5))      # "0b000...0101 (5)", 64 binary digits
```

Values are kept to 64 bits: `~`, `left_shift` and negative inputs wrap.
`to_bool_vector()` returns all 64 bits as a `BoolVector`, least significant
bit first.

## Fluent evaluation

```python
from logickit.evaluator import chain

chain(True).and_(False).or_(True).not_().result()   # False
```

## Gates and circuits

```python
from logickit.gates import Circuit, AndGate, OrGate, XorGate

# A full adder
circuit = Circuit(["A", "B", "Cin"])
circuit.add_node("xor1", XorGate(), ["A", "B"])
circuit.add_node("sum", XorGate(), ["xor1", "Cin"])
circuit.add_node("and1", AndGate(), ["A", "B"])
circuit.add_node("and2", AndGate(), ["xor1", "Cin"])
circuit.add_node("cout", OrGate(), ["and1", "and2"])
circuit.set_outputs(["sum", "cout"])

circuit.simulate({"A": True, "B": True, "Cin": False})
# {"sum": False, "cout": True}

circuit.get_node_value("xor1")   # False
```

The gates are `AndGate`, `OrGate`, `NotGate`, `XorGate`, `XnorGate`,
`NandGate` and `NorGate`; each has an `evaluate(*inputs)` method, and
`NotGate` returns `False` unless given exactly one input. New gates can be
made by subclassing `Gate`. Duplicate node ids, unknown output nodes, missing
input values and circular dependencies raise `LogicError`.

## Truth tables

```python
from logickit.operations import and_
from logickit.truthtable import generate_truth_table

table = generate_truth_table(["A", "B"], and_)
[row.output for row in table.rows]   # [False, False, False, True]
print(table)
```

Rows are ordered with the first variable as the most significant bit. Each
`TruthTableRow` has `inputs` (a dict of variable name to value) and `output`.

## Expressions

```python
from logickit.expressions import (
    evaluate_expression,
    validate_expression,
    truth_table_from_expression,
)

evaluate_expression("(A & B) | !C", {"A": True, "B": False, "C": True})   # False
evaluate_expression("¬(A ∧ B) ↔ (¬A ∨ ¬B)", {"A": True, "B": False})    # True
evaluate_expression("A implies B", {"A": True, "B": False})              # False

validate_expression("A & B")   # True
validate_expression("A & ")    # raises LogicError

table = truth_table_from_expression("A -> B", ["A", "B"])
```

Supported operators, from lowest to highest precedence:

| Operator | Forms                         |
|----------|-------------------------------|
| IFF      | `<->`, `↔`, `iff`             |
| IMPLIES  | `->`, `→`, `implies` (right associative) |
| OR / NOR | `\|`, `∨`, `or`, `nor`        |
| XOR      | `^`, `⊕`, `xor`               |
| AND/NAND | `&`, `∧`, `and`, `nand`       |
| NOT      | `!`, `¬`, `not`               |

Keywords are case-insensitive. The constants `true`, `t`, `1`, `false`, `f`
and `0` are recognised in any case; other identifiers are variables that
start with a letter or digit and continue with letters, digits and
underscores. Doubled symbols such as `&&` or `||` are syntax errors.
Evaluating an expression with a variable that has no value raises
`LogicError`. In `truth_table_from_expression`, a row where the expression
cannot be evaluated (for instance because it uses a variable not in the list)
gets the output `False`.

For lower-level access, `logickit.lexer.tokenize` turns text into `Token`
objects ending with an `EOF` token, `logickit.parser.parse_expression` builds
an `ASTNode` tree, and `ASTNode.evaluate` takes a mapping of variable names to
values.

## Running operations in sequence

```python
from logickit.benchmark import Benchmark
from logickit.operations import and_, or_

bench = Benchmark()
bench.add("and", lambda: and_(True, False))
bench.add("or", lambda: or_(True, False))
bench.run()
bench.results     # [False, True]
bench.durations   # seconds taken by each operation
```

This only runs each operation once and records how long it took; it does no
repetition or statistics.

## Examples

A tour of the package's features can be printed with:

```
logickit-examples
```

## What it does not do

There is no interactive prompt or command for evaluating expressions typed at
the shell; `logickit-examples` only prints the fixed tour above. Expressions
and circuits are worked with from Python code.