"""Boolean logic operations, vectors, bitwise integers, gates and circuits, truth tables and expressions."""

__version__ = "0.1.0"

__all__ = [
    "benchmark",
    "bitwise",
    "errors",
    "evaluator",
    "examples",
    "expressions",
    "gates",
    "lexer",
    "nodes",
    "operations",
    "parser",
    "truthtable",
    "vector",
]