"""A list of strings with stable slots, loadable from and savable to files."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Union

# A single line read holds at most this many bytes; longer lines are split.
_LINE_LIMIT = 1023

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

PathLike = Union[str, "os.PathLike[str]"]


class StringList:
    """Strings kept in numbered slots.

    Removing a string leaves its slot empty, so the indexes of the other
    strings do not change; the next string added fills the first empty slot.
    """

    def __init__(self) -> None:
        self._slots: list[Optional[str]] = []

    def add(self, text: str) -> int:
        """Store ``text`` in the first free slot and return that slot's index."""
        if not isinstance(text, str):
            raise TypeError(f"str expected, got {type(text).__name__}")
        try:
            index = self._slots.index(None)
        except ValueError:
            self._slots.append(text)
            return len(self._slots) - 1
        self._slots[index] = text
        return index

    def remove(self, index: int) -> None:
        """Empty the slot at ``index``."""
        if not 0 <= index < len(self._slots) or self._slots[index] is None:
            raise IndexError(f"no string at index {index}")
        self._slots[index] = None
        while self._slots and self._slots[-1] is None:
            self._slots.pop()

    def clear(self) -> None:
        """Remove every string."""
        self._slots.clear()

    def load(self, path: PathLike) -> None:
        """Replace the contents with the non-empty lines of the file at ``path``."""
        with open(path, "rb") as handle:
            self.clear()
            for line in handle:
                for start in range(0, len(line), _LINE_LIMIT):
                    piece = line[start:start + _LINE_LIMIT]
                    if piece.endswith(b"\n"):
                        piece = piece[:-1]
                    if piece:
                        self.add(piece.decode(_ENCODING, _ERRORS))

    def save(self, path: PathLike) -> None:
        """Write every string to ``path``, one per line."""
        with open(path, "wb") as handle:
            for text in self:
                handle.write(text.encode(_ENCODING, _ERRORS) + b"\n")

    def next(self, cur: int) -> Optional[tuple[int, str]]:
        """Return ``(index, text)`` of the first string after slot ``cur``.

        A negative ``cur`` starts from the beginning. Returns ``None`` when
        there is no further string.
        """
        start = max(cur, -1) + 1
        for index in range(start, len(self._slots)):
            text = self._slots[index]
            if text is not None:
                return index, text
        return None

    def prev(self, cur: int) -> Optional[tuple[int, str]]:
        """Return ``(index, text)`` of the last string before slot ``cur``.

        Returns ``None`` when ``cur`` lies past the last used slot or when
        there is no earlier string.
        """
        if cur > len(self._slots) - 1:
            return None
        for index in range(cur - 1, -1, -1):
            text = self._slots[index]
            if text is not None:
                return index, text
        return None

    def __len__(self) -> int:
        return sum(1 for text in self._slots if text is not None)

    def __iter__(self) -> Iterator[str]:
        return (text for text in self._slots if text is not None)