import struct

import pytest

from firebbs.readmarks import (
    BRC_MAXNUM,
    BRC_STRLEN,
    BrcRecord,
    ReadState,
    dump_boardrc,
    load_read_state,
    parse_boardrc,
    save_read_state,
)


def test_dump_wire_format():
    data = dump_boardrc([BrcRecord("test", [5, 3])])
    expected = b"test".ljust(BRC_STRLEN, b"\0") + bytes([2]) + struct.pack("<2i", 5, 3)
    assert data == expected


def test_round_trip():
    records = [BrcRecord("alpha", [30, 20, 10]), BrcRecord("beta", [7])]
    assert parse_boardrc(dump_boardrc(records)) == records


def test_empty_records_skipped():
    assert dump_boardrc([BrcRecord("none", [])]) == b""


def test_name_truncated():
    long_name = "x" * 40
    parsed = parse_boardrc(dump_boardrc([BrcRecord(long_name, [1])]))
    assert parsed[0].name == long_name[:BRC_STRLEN - 1]


def test_marks_capped():
    marks = list(range(100, 0, -1))
    parsed = parse_boardrc(dump_boardrc([BrcRecord("b", marks)]))
    assert parsed[0].marks == marks[:BRC_MAXNUM]


def test_parse_stops_at_invalid_byte():
    assert parse_boardrc(b"\x80abc") == []
    assert parse_boardrc(b"") == []


def test_new_board_defaults():
    state = ReadState("b", b"")
    assert state.marks == [1]
    assert state.found is False
    assert state.changed is False


def test_existing_board_loaded():
    data = dump_boardrc([BrcRecord("a", [9]), BrcRecord("b", [50, 40])])
    state = ReadState("b", data)
    assert state.found is True
    assert state.marks == [50, 40]


def test_unread_time_rules():
    state = ReadState("b", b"")
    assert state.unread_time(5) is True
    assert state.unread_time(1) is False
    assert state.unread_time(0) is False


def test_filename_validation():
    state = ReadState("b", b"")
    assert state.unread("X.100.A") is False
    assert state.unread("G.200.A") is True
    assert state.unread("M") is False


def test_add_filename_marks_read():
    state = ReadState("b", b"")
    state.add_filename("M.100.A")
    assert state.marks == [100, 1]
    assert state.changed is True
    assert state.unread("M.100.A") is False


def test_add_keeps_descending_order():
    state = ReadState("b", b"")
    for t in (50, 200, 100):
        state.add_filename(f"M.{t}.A")
    assert state.marks == sorted(state.marks, reverse=True)
    assert set(state.marks) == {1, 50, 100, 200}


def test_insert_capped_at_max():
    state = ReadState("b", b"")
    for t in range(2, 2 + 2 * BRC_MAXNUM):
        state.add_filename(f"M.{t}.A")
    assert len(state.marks) == BRC_MAXNUM
    assert state.marks[0] == 1 + 2 * BRC_MAXNUM


def test_clear():
    state = ReadState("b", dump_boardrc([BrcRecord("b", [9, 8])]))
    state.clear(now=500)
    assert state.marks == [500]
    assert state.changed is True
    assert state.unread_time(400) is False


def test_merged_replaces_own_board():
    other = dump_boardrc([BrcRecord("b", [3]), BrcRecord("c", [4])])
    state = ReadState("b", other)
    state.add_filename("M.10.A")
    merged = parse_boardrc(state.merged(other))
    assert [r.name for r in merged] == ["b", "c"]
    assert merged[0].marks == state.marks
    assert merged[1].marks == [4]


def test_save_and_load(tmp_path):
    path = tmp_path / ".boardrc"
    path.write_bytes(dump_boardrc([BrcRecord("c", [4])]))
    state = load_read_state(path, "b")
    assert save_read_state(state, path) is False
    state.add_filename("M.77.A")
    assert save_read_state(state, path) is True
    assert state.changed is False
    again = load_read_state(path, "b")
    assert again.marks == [77, 1]
    assert load_read_state(path, "c").marks == [4]


def test_load_missing_file(tmp_path):
    state = load_read_state(tmp_path / "absent", "b")
    assert state.marks == [1]


@pytest.mark.parametrize("name", ["M.abc", "M."])
def test_non_numeric_time_is_zero(name):
    assert ReadState("b", b"").unread(name) is False