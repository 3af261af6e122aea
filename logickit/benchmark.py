"""Run a list of named boolean operations and collect their results."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Operation:
    """A named operation returning a boolean."""

    name: str
    fn: Callable[[], bool]


class Benchmark:
    """Collects operations and runs them in the order they were added."""

    def __init__(self) -> None:
        self.operations: list[Operation] = []
        self.results: list[bool] = []
        self.durations: list[float] = []

    def add(self, name: str, fn: Callable[[], bool]) -> None:
        """Queue ``fn`` under ``name`` for the next run."""
        self.operations.append(Operation(name, fn))

    def run(self) -> None:
        """Run every operation, replacing earlier results and timings."""
        results: list[bool] = []
        durations: list[float] = []
        for operation in self.operations:
            start = time.perf_counter()
            result = operation.fn()
            durations.append(time.perf_counter() - start)
            results.append(bool(result))
        self.results = results
        self.durations = durations