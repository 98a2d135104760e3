"""A bounded buffer shared by a producer and a consumer."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence, TextIO


class BufferFullError(Exception):
    """Raised when producing into a full buffer."""


class BufferEmptyError(Exception):
    """Raised when consuming from an empty buffer."""


class BoundedBuffer:
    """A buffer holding up to ``capacity`` numbered items."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._count = 0

    @property
    def count(self) -> int:
        """Number of items currently in the buffer."""
        return self._count

    def produce(self) -> int:
        """Add an item and return its number."""
        if self._count >= self.capacity:
            raise BufferFullError("Buffer is full")
        self._count += 1
        return self._count

    def consume(self) -> int:
        """Remove the most recent item and return its number."""
        if self._count == 0:
            raise BufferEmptyError("Buffer is empty")
        item = self._count
        self._count -= 1
        return item


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Menu-driven producer and consumer on a buffer of three items."""
    argparse.ArgumentParser(description="Producer consumer simulation.").parse_args(argv)
    buffer = BoundedBuffer()
    print("Producer Consumer")
    print(" [1] Produce")
    print(" [2] Consume")
    print(" [3] Exit")
    tokens = _tokens(sys.stdin)
    while True:
        print("\nEnter choice: ", end="", flush=True)
        choice = next(tokens, None)
        if choice is None:
            print()
            return 0
        if choice == "1":
            try:
                print(f"Produced item {buffer.produce()}")
            except BufferFullError as exc:
                print(exc)
        elif choice == "2":
            try:
                print(f"Consumed item {buffer.consume()}")
            except BufferEmptyError as exc:
                print(exc)
        elif choice == "3":
            print("Exiting")
            return 0
        else:
            print("INVALID CHOICE")