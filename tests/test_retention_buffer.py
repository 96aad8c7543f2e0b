import pytest

from sniffer.analysis import normalize_packet
from sniffer.capture import RetentionBuffer, RetentionEntry


def _entry(n):
    raw = {"n": n, "layers": {"frame": {"frame_len": str(n)}}}
    return RetentionEntry(normalize_packet(raw), raw)


def _fill(buffer, count, start=0):
    for n in range(start, start + count):
        buffer.append(_entry(n))


def test_append_preserves_order():
    buffer = RetentionBuffer()
    _fill(buffer, 5)

    assert [e.raw["n"] for e in buffer.all()] == [0, 1, 2, 3, 4]
    assert len(buffer) == 5


def test_truncates_to_floor_when_ceiling_exceeded():
    buffer = RetentionBuffer(max_size=5000, floor_size=4000)
    _fill(buffer, 5000)
    assert len(buffer) == 5000

    buffer.append(_entry(5000))

    assert len(buffer) == 4000
    assert buffer.all()[0].raw["n"] == 1001
    assert buffer.all()[-1].raw["n"] == 5000


def test_hysteresis_between_truncations():
    buffer = RetentionBuffer(max_size=10, floor_size=6)
    _fill(buffer, 11)
    assert len(buffer) == 6

    _fill(buffer, 4, start=11)
    assert len(buffer) == 10

    _fill(buffer, 1, start=15)
    assert len(buffer) == 6
    assert [e.raw["n"] for e in buffer.all()] == [10, 11, 12, 13, 14, 15]


def test_truncate_is_noop_within_bounds():
    buffer = RetentionBuffer(max_size=10, floor_size=6)
    _fill(buffer, 10)
    assert buffer.truncate() == 0
    assert len(buffer) == 10


def test_recent_is_newest_first():
    buffer = RetentionBuffer()
    _fill(buffer, 5)

    assert [e.raw["n"] for e in buffer.recent(3)] == [4, 3, 2]
    assert [e.raw["n"] for e in buffer.recent(50)] == [4, 3, 2, 1, 0]
    assert buffer.recent(0) == []


def test_latest_is_in_buffer_order():
    buffer = RetentionBuffer()
    _fill(buffer, 5)

    assert [e.raw["n"] for e in buffer.latest(3)] == [2, 3, 4]
    assert [e.raw["n"] for e in buffer.latest(100)] == [0, 1, 2, 3, 4]


def test_all_returns_a_copy():
    buffer = RetentionBuffer()
    _fill(buffer, 2)
    snapshot = buffer.all()
    snapshot.clear()
    assert len(buffer) == 2


def test_stats():
    buffer = RetentionBuffer(max_size=10, floor_size=6)
    _fill(buffer, 12)

    assert buffer.stats() == {
        "capacity": 10,
        "floor": 6,
        "current_size": 7,
        "total_appended": 12,
        "evicted": 5,
        "truncations": 1,
    }


def test_entry_keeps_raw_document_untouched():
    raw = {"layers": {"ip": {"ip_ip_src": "1.2.3.4"}}, "extra": [1, 2]}
    entry = RetentionEntry(normalize_packet(raw), raw)
    data = entry.to_dict()

    assert data["raw"] is raw
    assert raw == {"layers": {"ip": {"ip_ip_src": "1.2.3.4"}}, "extra": [1, 2]}
    assert data["srcIp"] == "1.2.3.4"


@pytest.mark.parametrize("max_size,floor_size", [(10, 0), (10, 11), (5, -1)])
def test_invalid_bounds(max_size, floor_size):
    with pytest.raises(ValueError):
        RetentionBuffer(max_size=max_size, floor_size=floor_size)


def test_entry_is_read_only():
    entry = _entry(1)
    with pytest.raises(AttributeError):
        entry.raw = {"replaced": True}
    with pytest.raises(AttributeError):
        entry.summary = None
    assert entry.raw["n"] == 1
