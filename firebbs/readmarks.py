"""Per-board read marks kept in a user's ``.boardrc`` file.

The file is a sequence of records. Each record holds a board name in a
fixed-width NUL-padded field, one byte giving the number of marks, and that
many native 32-bit integers. The marks are article times in descending order.
A time equal to a mark has been read; a time older than the oldest mark
counts as read as well.
"""

from __future__ import annotations

import os
import re
import struct
import time
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

BRC_STRLEN = 15
BRC_MAXNUM = 60
BRC_MAXSIZE = 50000
BRC_ITEMSIZE = BRC_STRLEN + 1 + BRC_MAXNUM * 4

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_INT = struct.Struct("<i")

PathLike = Union[str, "os.PathLike[str]"]


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return _wrap32(int(match.group(1))) if match else 0


def _is_record_start(byte: int) -> bool:
    return 0x20 <= byte <= 0x7A


@dataclass
class BrcRecord:
    """The read marks of one board."""

    name: str
    marks: list[int] = field(default_factory=list)


def parse_boardrc(data: bytes) -> list[BrcRecord]:
    """Decode the records held in ``data``, stopping at the first invalid byte."""
    records: list[BrcRecord] = []
    pos = 0
    size = len(data)
    while pos < size and _is_record_start(data[pos]):
        count_at = pos + BRC_STRLEN
        if count_at >= size:
            break
        raw_name = data[pos:pos + BRC_STRLEN - 1].split(b"\0", 1)[0]
        count = data[count_at]
        start = count_at + 1
        body = data[start:start + 4 * min(count, BRC_MAXNUM)]
        usable = len(body) // 4
        marks = [value for (value,) in _INT.iter_unpack(body[:usable * 4])]
        records.append(BrcRecord(raw_name.decode(_ENCODING, _ERRORS), marks))
        pos = start + 4 * count
    return records


def dump_boardrc(records: Iterable[BrcRecord]) -> bytes:
    """Encode ``records``; records without marks are left out."""
    parts = []
    for record in records:
        marks = list(record.marks)[:BRC_MAXNUM]
        if not marks:
            continue
        name = record.name.encode(_ENCODING, _ERRORS)[:BRC_STRLEN - 1]
        parts.append(name.ljust(BRC_STRLEN, b"\0"))
        parts.append(bytes([len(marks)]))
        parts.append(struct.pack(f"<{len(marks)}i", *(_wrap32(m) for m in marks)))
    return b"".join(parts)


class ReadState:
    """The read marks of one board, with a cursor used for lookups."""

    def __init__(self, board: str, data: bytes = b"") -> None:
        self.board = board
        self.cur = 0
        self.changed = False
        self.found = False
        for record in parse_boardrc(data[:BRC_MAXSIZE]):
            if record.name == board:
                self.marks = list(record.marks)
                self.found = True
                break
        else:
            self.marks = [1]

    def locate(self, num: int) -> bool:
        """Move the cursor to ``num`` or to where it belongs; True if present."""
        marks = self.marks
        total = len(marks)
        if total == 0:
            self.cur = 0
            return False
        if self.cur >= total:
            self.cur = total - 1
        if num <= marks[self.cur]:
            while self.cur < total:
                if num == marks[self.cur]:
                    return True
                if num > marks[self.cur]:
                    return False
                self.cur += 1
            return False
        while self.cur > 0:
            if num < marks[self.cur - 1]:
                return False
            self.cur -= 1
            if num == marks[self.cur]:
                return True
        return False

    def insert(self, num: int) -> bool:
        """Insert ``num`` at the cursor, dropping the oldest mark when full."""
        limit = min(len(self.marks) + 1, BRC_MAXNUM)
        if self.cur >= limit:
            return False
        self.marks.insert(self.cur, _wrap32(num))
        del self.marks[BRC_MAXNUM:]
        self.changed = True
        return True

    def unread_time(self, ftime: int) -> bool:
        """True if an article posted at ``ftime`` has not been read."""
        if self.locate(ftime):
            return False
        if not self.marks:
            return True
        return self.cur < len(self.marks)

    @staticmethod
    def _article_time(filename: str) -> Optional[int]:
        if len(filename) < 2 or filename[0] not in "MG" or filename[1] != ".":
            return None
        return _atoi(filename[2:])

    def unread(self, filename: str) -> bool:
        """True if the article file ``filename`` has not been read."""
        ftime = self._article_time(filename)
        return False if ftime is None else self.unread_time(ftime)

    def add_filename(self, filename: str) -> None:
        """Mark the article file ``filename`` as read."""
        ftime = self._article_time(filename)
        if ftime is not None and self.unread_time(ftime):
            self.insert(ftime)

    def clear(self, now: Optional[float] = None) -> None:
        """Mark everything up to ``now`` (default: the current time) as read."""
        self.marks = []
        self.cur = 0
        self.insert(int(time.time() if now is None else now))

    def merged(self, data: bytes = b"") -> bytes:
        """This board's record followed by the other boards' records in ``data``."""
        records = []
        if self.marks:
            records.append(BrcRecord(self.board, list(self.marks)))
        records.extend(
            record
            for record in parse_boardrc(data[:BRC_MAXSIZE - BRC_ITEMSIZE])
            if record.name != self.board
        )
        return dump_boardrc(records)


def _read_file(path: PathLike, limit: int) -> bytes:
    try:
        with open(path, "rb") as handle:
            return handle.read(limit)
    except FileNotFoundError:
        return b""


def load_read_state(path: PathLike, board: str) -> ReadState:
    """Read the marks of ``board`` from the ``.boardrc`` file at ``path``."""
    return ReadState(board, _read_file(path, BRC_MAXSIZE))


def save_read_state(state: ReadState, path: PathLike) -> bool:
    """Write ``state`` into the file at ``path`` if it changed; True if written."""
    if not state.changed:
        return False
    existing = _read_file(path, BRC_MAXSIZE - BRC_ITEMSIZE)
    content = state.merged(existing)
    with open(path, "wb") as handle:
        handle.write(content)
    state.changed = False
    return True