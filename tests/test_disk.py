import io
import sys

import pytest

from osalgos.disk import SeekResult, cscan, fcfs, main_cscan, main_fcfs, main_scan, scan

HEAD = 53
REQUESTS = [98, 183, 37, 122, 14, 124, 65, 67]
LIMIT = 199


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_fcfs_path_follows_input_order():
    result = fcfs(HEAD, REQUESTS)
    assert result.path == (HEAD, *REQUESTS)
    assert result.requests == len(REQUESTS)


def test_fcfs_total_seek():
    assert fcfs(HEAD, REQUESTS).seek == 640


def test_fcfs_average_is_seek_per_request():
    result = fcfs(HEAD, REQUESTS)
    assert result.average_seek() == pytest.approx(result.seek / len(REQUESTS))


def test_render_joins_with_arrows():
    assert fcfs(10, [4, 7]).render() == "10 --> 4 --> 7"


def test_seek_result_without_requests_has_no_average():
    with pytest.raises(ValueError):
        SeekResult((5,), 0, 0).average_seek()


@pytest.mark.parametrize("algorithm", [fcfs, scan])
def test_empty_requests_rejected(algorithm):
    with pytest.raises(ValueError):
        algorithm(HEAD, [])


def test_scan_visits_every_track_once_plus_zero():
    result = scan(HEAD, REQUESTS)
    assert sorted(result.path) == sorted([0, HEAD, *REQUESTS])
    assert result.path[0] == HEAD


def test_scan_goes_down_then_up():
    result = scan(HEAD, REQUESTS)
    zero = result.path.index(0)
    down, up = result.path[: zero + 1], result.path[zero:]
    assert list(down) == sorted(down, reverse=True)
    assert list(up) == sorted(up)
    assert result.path[-1] == max(REQUESTS)


def test_scan_seek_is_head_plus_highest_request():
    result = scan(HEAD, REQUESTS)
    assert result.seek == HEAD + max(REQUESTS)


def test_scan_queue_is_sorted():
    result = scan(HEAD, REQUESTS)
    assert list(result.queue) == sorted([0, HEAD, *REQUESTS])


def test_scan_rejects_negative_tracks():
    with pytest.raises(ValueError):
        scan(HEAD, [5, -1])


def test_cscan_sweeps_up_then_wraps():
    result = cscan(HEAD, REQUESTS, LIMIT)
    assert result.path[0] == HEAD
    top = result.path.index(LIMIT)
    assert list(result.path[: top + 1]) == sorted(result.path[: top + 1])
    assert result.path[top + 1] == 0
    assert result.path[-1] == max(t for t in REQUESTS if t < HEAD)


def test_cscan_seek_counts_wrap_jump():
    result = cscan(HEAD, REQUESTS, LIMIT)
    below = max(t for t in REQUESTS if t < HEAD)
    assert result.seek == (LIMIT - HEAD) + LIMIT + below


def test_cscan_path_is_permutation_of_queue():
    result = cscan(HEAD, REQUESTS, LIMIT)
    assert sorted(result.path) == list(result.queue)


def test_cscan_rejects_tracks_beyond_limit():
    with pytest.raises(ValueError):
        cscan(HEAD, [LIMIT + 1], LIMIT)


def test_cscan_rejects_head_beyond_limit():
    with pytest.raises(ValueError):
        cscan(LIMIT + 1, [3], LIMIT)


def test_main_fcfs_output(monkeypatch, capsys):
    _feed(monkeypatch, f"8 {HEAD} " + " ".join(map(str, REQUESTS)) + "\n")
    assert main_fcfs([]) == 0
    out = capsys.readouterr().out
    assert "Order of requests served\n53 --> 98 --> 183" in out
    assert "Total seek time = 640\n" in out
    assert "Average seek time = 80.00\n" in out


def test_main_scan_prints_sorted_queue(monkeypatch, capsys):
    _feed(monkeypatch, f"8\n{HEAD}\n" + " ".join(map(str, REQUESTS)) + "\n")
    assert main_scan([]) == 0
    out = capsys.readouterr().out
    expected = "".join(f"{t} " for t in sorted([0, HEAD, *REQUESTS]))
    assert f"The request queue is\n{expected}\n" in out
    assert f"Total seek time = {HEAD + max(REQUESTS)}\n" in out


def test_main_cscan_reports_path(monkeypatch, capsys):
    _feed(monkeypatch, f"8 {HEAD} {LIMIT} " + " ".join(map(str, REQUESTS)))
    assert main_cscan([]) == 0
    out = capsys.readouterr().out
    assert cscan(HEAD, REQUESTS, LIMIT).render() in out


def test_main_fails_on_short_input(monkeypatch, capsys):
    _feed(monkeypatch, "3 50 1 2")
    assert main_fcfs([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err


def test_main_fails_on_non_integer(monkeypatch):
    _feed(monkeypatch, "2 50 x 4")
    assert main_scan([]) == 1