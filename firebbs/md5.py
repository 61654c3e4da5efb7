"""MD5 message digest with a hashlib-like interface."""

from __future__ import annotations

import struct

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_MASK = 0xFFFFFFFF

_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)


def _word_index(step: int) -> int:
    round_no, i = divmod(step, 16)
    if round_no == 0:
        return i
    if round_no == 1:
        return (1 + 5 * i) % 16
    if round_no == 2:
        return (5 + 3 * i) % 16
    return (7 * i) % 16


_SCHEDULE = tuple(
    (_word_index(step), _CONSTANTS[step], _SHIFTS[step // 16][step % 4], step // 16)
    for step in range(64)
)

_BLOCK = struct.Struct("<16I")


def _rotl(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (32 - amount))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = _BLOCK.unpack(block)
    a, b, c, d = state
    for index, constant, shift, round_no in _SCHEDULE:
        if round_no == 0:
            f = ((c ^ d) & b) ^ d
        elif round_no == 1:
            f = ((b ^ c) & d) ^ c
        elif round_no == 2:
            f = b ^ c ^ d
        else:
            f = (b | (~d & _MASK)) ^ c
        rotated = _rotl((a + f + constant + words[index]) & _MASK, shift)
        a, d, c, b = d, c, b, (b + rotated) & _MASK
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5 hash object."""

    name = "md5"
    digest_size = 16
    block_size = 64

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("strings must be encoded before hashing")
        chunk = bytes(memoryview(data))
        self._length += len(chunk)
        buffer = self._buffer + chunk
        full = len(buffer) - len(buffer) % 64
        state = self._state
        for start in range(0, full, 64):
            state = _compress(state, buffer[start:start + 64])
        self._state = state
        self._buffer = buffer[full:]

    def copy(self) -> "MD5":
        """Return an independent copy of the current hash state."""
        other = MD5()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding_len = (55 - len(self._buffer)) % 64
        tail = self._buffer + b"\x80" + b"\x00" * padding_len + struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), 64):
            state = _compress(state, tail[start:start + 64])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md5(data: bytes = b"") -> MD5:
    """Return a new MD5 object primed with ``data``."""
    return MD5(data)