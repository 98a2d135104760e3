"""CPU scheduling: first come first served, shortest job first, priority and round robin."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from itertools import accumulate
from typing import Callable, Iterable, Iterator, Sequence, TextIO


@dataclass(frozen=True)
class Process:
    """A process waiting for the CPU."""

    pid: int
    burst: int
    arrival: int = 0
    priority: int = 0


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the times the scheduler gave it."""

    process: Process
    completion: int
    waiting: int
    turnaround: int

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def burst(self) -> int:
        return self.process.burst

    @property
    def arrival(self) -> int:
        return self.process.arrival

    @property
    def priority(self) -> int:
        return self.process.priority


_COLUMNS: dict[str, tuple[str, Callable[[ScheduledProcess], int]]] = {
    "pid": ("PID", lambda e: e.pid),
    "arrival": ("ArrivalTime", lambda e: e.arrival),
    "priority": ("Priority", lambda e: e.priority),
    "burst": ("BurstTime", lambda e: e.burst),
    "completion": ("CompletionTime", lambda e: e.completion),
    "waiting": ("WaitingTime", lambda e: e.waiting),
    "turnaround": ("TurnaroundTime", lambda e: e.turnaround),
}


@dataclass(frozen=True)
class Schedule:
    """The processes in the order the scheduler reports them."""

    entries: tuple[ScheduledProcess, ...]

    def __iter__(self) -> Iterator[ScheduledProcess]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def _mean(self, values: Iterable[int]) -> float:
        if not self.entries:
            raise ValueError("schedule is empty")
        return sum(values) / len(self.entries)

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        return self._mean(e.waiting for e in self.entries)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        return self._mean(e.turnaround for e in self.entries)

    def render(self, columns: Sequence[str]) -> str:
        """Return a tab-separated table of the given columns, one row per process."""
        names = list(columns)
        if not names:
            raise ValueError("at least one column is required")
        unknown = [name for name in names if name not in _COLUMNS]
        if unknown:
            raise ValueError(f"unknown column(s): {', '.join(unknown)}")
        header = "\t".join(_COLUMNS[name][0] for name in names)
        rows = []
        for entry in self.entries:
            first, *rest = (str(_COLUMNS[name][1](entry)) for name in names)
            rows.append(first + ("\t" + "\t\t".join(rest) if rest else ""))
        return "\n".join([header, *rows]) + "\n"


def _require(processes: Iterable[Process]) -> list[Process]:
    procs = list(processes)
    if not procs:
        raise ValueError("at least one process is required")
    return procs


def _run_in_order(ordered: list[Process], use_arrival: bool) -> Schedule:
    entries = []
    for proc, completion in zip(ordered, accumulate(p.burst for p in ordered)):
        turnaround = completion - (proc.arrival if use_arrival else 0)
        entries.append(
            ScheduledProcess(proc, completion, turnaround - proc.burst, turnaround)
        )
    return Schedule(tuple(entries))


def fcfs(processes: Iterable[Process]) -> Schedule:
    """Run processes in order of arrival; ties keep their input order."""
    procs = sorted(_require(processes), key=lambda p: p.arrival)
    return _run_in_order(procs, use_arrival=True)


def sjf(processes: Iterable[Process]) -> Schedule:
    """Run the shortest bursts first; all processes arrive at time 0."""
    procs = sorted(_require(processes), key=lambda p: p.burst)
    return _run_in_order(procs, use_arrival=False)


def priority(processes: Iterable[Process]) -> Schedule:
    """Run the highest priority number first; all processes arrive at time 0."""
    procs = sorted(_require(processes), key=lambda p: -p.priority)
    return _run_in_order(procs, use_arrival=False)


def round_robin(processes: Iterable[Process], time_slice: int) -> Schedule:
    """Share the CPU in turns of ``time_slice``; rows keep their input order."""
    if time_slice <= 0:
        raise ValueError("time slice must be positive")
    procs = _require(processes)
    completions = [0] * len(procs)
    queue = deque((index, p.burst) for index, p in enumerate(procs) if p.burst > 0)
    clock = 0
    while queue:
        index, left = queue.popleft()
        if left > time_slice:
            clock += time_slice
            queue.append((index, left - time_slice))
        else:
            clock += left
            completions[index] = clock
    entries = tuple(
        ScheduledProcess(p, done, done - p.burst, done)
        for p, done in zip(procs, completions)
    )
    return Schedule(entries)


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"not an integer: {token!r}") from None


def _ask(tokens: Iterator[int], prompt: str) -> int:
    print(prompt, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _print_averages(schedule: Schedule) -> None:
    print(f"\nAverage waiting time = {schedule.average_waiting():.2f}")
    print(f"Average turnaround time = {schedule.average_turnaround():.2f}")


def _run(argv: Sequence[str] | None, description: str,
         body: Callable[[Iterator[int]], None]) -> int:
    argparse.ArgumentParser(description=description).parse_args(argv)
    try:
        body(_int_tokens(sys.stdin))
    except (EOFError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    return 0


def _read_count(tokens: Iterator[int]) -> int:
    return _ask(tokens, "Enter the number of processes: ")


def main_fcfs(argv: Sequence[str] | None = None) -> int:
    """Interactive first come first served scheduler."""

    def body(tokens: Iterator[int]) -> None:
        procs = []
        for number in range(1, _read_count(tokens) + 1):
            print(f"\nProcess {number}")
            pid = _ask(tokens, "Enter PID: ")
            burst = _ask(tokens, "Enter burst time: ")
            arrival = _ask(tokens, "Enter arrival time: ")
            procs.append(Process(pid=pid, burst=burst, arrival=arrival))
        schedule = fcfs(procs)
        print("\nThe execution order is")
        print(schedule.render(
            ["pid", "arrival", "burst", "completion", "waiting", "turnaround"]
        ), end="")
        _print_averages(schedule)

    return _run(argv, "First come first served CPU scheduling.", body)


def main_sjf(argv: Sequence[str] | None = None) -> int:
    """Interactive shortest job first scheduler."""

    def body(tokens: Iterator[int]) -> None:
        procs = []
        for number in range(1, _read_count(tokens) + 1):
            print(f"\nProcess {number}")
            procs.append(Process(pid=number, burst=_ask(tokens, "Enter burst time: ")))
        schedule = sjf(procs)
        print("\nThe execution order is")
        print(schedule.render(["pid", "burst", "waiting", "turnaround"]), end="")
        _print_averages(schedule)

    return _run(argv, "Shortest job first CPU scheduling.", body)


def main_priority(argv: Sequence[str] | None = None) -> int:
    """Interactive priority scheduler."""

    def body(tokens: Iterator[int]) -> None:
        procs = []
        for number in range(1, _read_count(tokens) + 1):
            print(f"\nProcess {number}")
            prio = _ask(tokens, "Enter priority: ")
            burst = _ask(tokens, "Enter burst time: ")
            procs.append(Process(pid=number, burst=burst, priority=prio))
        schedule = priority(procs)
        print("\nThe execution order is")
        print(schedule.render(
            ["pid", "priority", "burst", "waiting", "turnaround"]
        ), end="")
        _print_averages(schedule)

    return _run(argv, "Priority CPU scheduling.", body)


def main_round_robin(argv: Sequence[str] | None = None) -> int:
    """Interactive round robin scheduler."""

    def body(tokens: Iterator[int]) -> None:
        procs = []
        for number in range(1, _read_count(tokens) + 1):
            print(f"\nProcess {number}")
            procs.append(Process(pid=number, burst=_ask(tokens, "Enter burst time: ")))
        time_slice = _ask(tokens, "\nEnter time slice: ")
        schedule = round_robin(procs, time_slice)
        print(schedule.render(["pid", "burst", "waiting", "turnaround"]), end="")
        _print_averages(schedule)

    return _run(argv, "Round robin CPU scheduling.", body)