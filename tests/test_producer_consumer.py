import io
import sys

import pytest

from osalgos.producer_consumer import (
    BoundedBuffer,
    BufferEmptyError,
    BufferFullError,
    main,
)


def test_produce_until_full():
    buffer = BoundedBuffer()
    assert [buffer.produce() for _ in range(3)] == [1, 2, 3]
    with pytest.raises(BufferFullError):
        buffer.produce()
    assert buffer.count == 3


def test_consume_returns_latest_item():
    buffer = BoundedBuffer()
    buffer.produce()
    buffer.produce()
    assert buffer.consume() == 2
    assert buffer.consume() == 1
    with pytest.raises(BufferEmptyError):
        buffer.consume()
    assert buffer.count == 0


def test_empty_buffer_cannot_consume():
    with pytest.raises(BufferEmptyError):
        BoundedBuffer().consume()


def test_interleaved_numbering():
    buffer = BoundedBuffer(capacity=5)
    assert buffer.produce() == 1
    assert buffer.consume() == 1
    assert buffer.produce() == 1
    assert buffer.produce() == 2


def test_zero_capacity_is_always_full():
    buffer = BoundedBuffer(capacity=0)
    with pytest.raises(BufferFullError):
        buffer.produce()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedBuffer(capacity=-1)


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_main_session(monkeypatch, capsys):
    _feed(monkeypatch, "2\n1\n1\n1\n1\n2\n9\n3\n1\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Producer Consumer\n [1] Produce\n [2] Consume\n [3] Exit\n")
    assert "Buffer is empty" in out
    for n in (1, 2, 3):
        assert f"Produced item {n}" in out
    assert "Buffer is full" in out
    assert "Consumed item 3" in out
    assert "INVALID CHOICE" in out
    assert out.rstrip().endswith("Exiting")
    assert out.count("Produced item") == 3


def test_main_non_numeric_choice_is_invalid(monkeypatch, capsys):
    _feed(monkeypatch, "abc\n3\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "INVALID CHOICE" in out
    assert "Exiting" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, "1\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Produced item 1" in out
    assert "Exiting" not in out