"""The banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .cpu import _ask, _run


class UnsafeStateError(ValueError):
    """Raised when no order lets every process finish."""

    def __init__(self, finished: Iterable[int]) -> None:
        self.finished = tuple(finished)
        super().__init__(
            "no safe sequence exists"
            + (f"; finished before deadlock: {', '.join(f'P{p}' for p in self.finished)}"
               if self.finished else "")
        )


def need_matrix(
    allocation: Sequence[Sequence[int]], maximum: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return what each process may still request: maximum minus allocation."""
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must have the same number of rows")
    widths = {len(row) for row in (*allocation, *maximum)}
    if len(widths) > 1:
        raise ValueError("all rows must have the same number of resources")
    return [[m - a for a, m in zip(alloc_row, max_row)]
            for alloc_row, max_row in zip(allocation, maximum)]


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int]:
    """Return process indices in an order in which all of them can finish.

    Processes are examined in repeated passes in index order; any process whose
    need fits the free resources runs and releases its allocation.
    """
    need = need_matrix(allocation, maximum)
    if need and len(available) != len(need[0]):
        raise ValueError("available must list one amount per resource")
    work = list(available)
    sequence: list[int] = []
    pending = list(range(len(need)))
    while pending:
        remaining = []
        for pid in pending:
            if all(n <= w for n, w in zip(need[pid], work)):
                sequence.append(pid)
                work = [w + a for w, a in zip(work, allocation[pid])]
            else:
                remaining.append(pid)
        if len(remaining) == len(pending):
            raise UnsafeStateError(sequence)
        pending = remaining
    return sequence


def _read_matrix(tokens: Iterator[int], rows: int, cols: int) -> list[list[int]]:
    return [[_ask(tokens, "") for _ in range(cols)] for _ in range(rows)]


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive banker's algorithm."""

    def body(tokens: Iterator[int]) -> None:
        processes = _ask(tokens, "Enter the number of processes: ")
        resources = _ask(tokens, "Enter the number of resources: ")
        print("Enter the allocation matrix:")
        allocation = _read_matrix(tokens, processes, resources)
        print("Enter the max matrix:")
        maximum = _read_matrix(tokens, processes, resources)
        print("Enter the available resources: ", end="", flush=True)
        available = [_ask(tokens, "") for _ in range(resources)]
        print("\nNeed matrix is")
        for row in need_matrix(allocation, maximum):
            print("".join(f"{value} " for value in row))
        order = safe_sequence(allocation, maximum, available)
        print("The safe sequence is " + "".join(f"P{pid} " for pid in order))

    return _run(argv, "Banker's algorithm safe sequence.", body)