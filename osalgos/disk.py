"""Disk scheduling: first come first served, SCAN and C-SCAN."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, Sequence

from .cpu import _ask, _run


@dataclass(frozen=True)
class SeekResult:
    """The order the head visits tracks and the total distance it travels."""

    path: tuple[int, ...]
    seek: int
    requests: int
    queue: tuple[int, ...] = ()

    def average_seek(self) -> float:
        """Mean seek distance per request."""
        if self.requests <= 0:
            raise ValueError("no requests were served")
        return self.seek / self.requests

    def render(self) -> str:
        """Return the visiting order joined by arrows."""
        return " --> ".join(str(track) for track in self.path)


def _distance(path: Sequence[int]) -> int:
    return sum(abs(b - a) for a, b in pairwise(path))


def _checked(head: int, requests: Iterable[int]) -> list[int]:
    reqs = list(requests)
    if not reqs:
        raise ValueError("at least one request is required")
    return reqs


def _check_non_negative(head: int, requests: Sequence[int]) -> None:
    if head < 0 or any(track < 0 for track in requests):
        raise ValueError("tracks must not be negative")


def fcfs(head: int, requests: Iterable[int]) -> SeekResult:
    """Serve requests in the order they were given."""
    reqs = _checked(head, requests)
    path = (head, *reqs)
    return SeekResult(path, _distance(path), len(reqs))


def scan(head: int, requests: Iterable[int]) -> SeekResult:
    """Sweep down to track 0, then up to the highest request."""
    reqs = _checked(head, requests)
    _check_non_negative(head, reqs)
    queue = sorted([0, *reqs, head])
    start = queue.index(head)
    path = (*queue[start::-1], *queue[start + 1:])
    return SeekResult(path, _distance(path), len(reqs), tuple(queue))


def cscan(head: int, requests: Iterable[int], limit: int) -> SeekResult:
    """Sweep up to ``limit``, jump to track 0 and sweep up again."""
    reqs = _checked(head, requests)
    _check_non_negative(head, reqs)
    if head > limit or any(track > limit for track in reqs):
        raise ValueError("tracks must not exceed the track limit")
    queue = sorted([0, *reqs, head, limit])
    start = queue.index(head)
    path = (*queue[start:], *queue[:start])
    return SeekResult(path, _distance(path), len(reqs), tuple(queue))


def _read_queue(tokens: Iterator[int], count: int) -> list[int]:
    print("Enter the I/O request queue: ", end="", flush=True)
    return [_ask(tokens, "") for _ in range(count)]


def _print_queue(result: SeekResult) -> None:
    print("The request queue is")
    print("".join(f"{track} " for track in result.queue))


def _report(result: SeekResult) -> None:
    print("\nOrder of requests served")
    print(result.render())
    print(f"Total seek time = {result.seek}")
    print(f"Average seek time = {result.average_seek():.2f}")


def main_fcfs(argv: Sequence[str] | None = None) -> int:
    """Interactive first come first served disk scheduler."""

    def body(tokens: Iterator[int]) -> None:
        count = _ask(tokens, "Enter the number of requests: ")
        head = _ask(tokens, "Enter the initial head position: ")
        _report(fcfs(head, _read_queue(tokens, count)))

    return _run(argv, "First come first served disk scheduling.", body)


def main_scan(argv: Sequence[str] | None = None) -> int:
    """Interactive SCAN disk scheduler."""

    def body(tokens: Iterator[int]) -> None:
        count = _ask(tokens, "Enter the number of requests: ")
        head = _ask(tokens, "Enter the initial head position: ")
        result = scan(head, _read_queue(tokens, count))
        _print_queue(result)
        _report(result)

    return _run(argv, "SCAN disk scheduling.", body)


def main_cscan(argv: Sequence[str] | None = None) -> int:
    """Interactive C-SCAN disk scheduler."""

    def body(tokens: Iterator[int]) -> None:
        count = _ask(tokens, "Enter the number of requests: ")
        head = _ask(tokens, "Enter the initial head position: ")
        limit = _ask(tokens, "Enter the maximum track limit: ")
        result = cscan(head, _read_queue(tokens, count), limit)
        _print_queue(result)
        _report(result)

    return _run(argv, "C-SCAN disk scheduling.", body)