"""printf-style formatting with C99 semantics for s, c, d, u, o, x, X and p."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from .printf_spec import ConversionSpec, tokenize

_Take = Callable[[], Any]


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _as_int(value: Any) -> int:
    if isinstance(value, int):
        return value
    raise TypeError(f"integer argument expected, got {type(value).__name__}")


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires an integer or a single character")
        return value
    return chr(_as_int(value) & 0xFF)


def _as_text(value: Any, precision: int | None) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("latin-1")
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError(f"string argument expected, got {type(value).__name__}")
    if precision is not None:
        text = text[:precision]
    return text.split("\0", 1)[0]


class _Arguments:
    """Hands out format arguments one at a time."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._iter: Iterator[Any] = iter(args)

    def __call__(self) -> Any:
        try:
            return next(self._iter)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None


def _numeric_body(
    spec: ConversionSpec, take: _Take, precision: int | None
) -> tuple[str, int, int, bool]:
    """Return the converted number, the zero insertion index, the zero count
    and whether zero padding to the field width still applies."""
    conv = spec.conversion
    length = spec.length

    if conv == "p":
        raw = take()
        value = 0 if raw is None else _as_int(raw)
        sign = 1 if value else 0
        digits = f"0x{value:x}" if value else "(nil)"
    elif conv == "d":
        raw = _as_int(take())
        value = _wrap_signed(raw, 64 if length == "l" else 32)
        sign = (value > 0) - (value < 0)
        shown = _wrap_signed(value, 16) if length == "h" else value
        digits = str(shown)
    else:
        raw = _as_int(take())
        value = raw & ((1 << (64 if length == "l" else 32)) - 1)
        sign = 1 if value else 0
        shown = value & 0xFFFF if length == "h" else value
        digits = format(shown, {"u": "d", "o": "o", "x": "x", "X": "X"}[conv])

    precision_specified = precision is not None
    zero_pad = spec.zero_pad and not precision_specified

    prefix = ""
    if conv == "d":
        if spec.force_sign and sign >= 0:
            prefix = spec.sign_char
    elif spec.alternate_form and sign != 0 and conv in "xX":
        prefix = "0" + conv

    insert_at = len(prefix)
    effective = precision if precision_specified else 1
    if effective == 0 and sign == 0:
        body = prefix
    else:
        body = prefix + digits
        if body[insert_at:insert_at + 1] == "-":
            insert_at += 1
        if body[insert_at:insert_at + 2] in ("0x", "0X"):
            insert_at += 2

    num_digits = len(body) - insert_at
    if spec.alternate_form and conv == "o" and body[insert_at:insert_at + 1] != "0":
        if not precision_specified or effective < num_digits + 1:
            effective = num_digits + 1

    zeros = max(0, effective - num_digits)
    return body, insert_at, zeros, zero_pad


def _render(spec: ConversionSpec, take: _Take) -> str:
    left = spec.left_justify
    width = spec.width
    if spec.width_from_arg:
        requested = _as_int(take())
        if requested >= 0:
            width = requested
        else:
            width = -requested
            left = True

    precision = spec.precision
    if spec.precision_from_arg:
        requested = _as_int(take())
        precision = requested if requested >= 0 else None

    conv = spec.conversion
    insert_at = 0
    zeros = 0
    if spec.is_string:
        if conv == "%":
            body = "%"
        elif conv == "c":
            body = _as_char(take())
        else:
            body = _as_text(take(), precision)
    elif spec.is_numeric:
        body, insert_at, zeros, zero_pad = _numeric_body(spec, take, precision)
        if not left and zero_pad:
            zeros += max(0, width - (len(body) + zeros))
    else:
        # Unknown conversion: drop the directive, keep the character itself.
        body = conv
        left = True
        width = 0

    padding = " " * max(0, width - (len(body) + zeros))
    if zeros > 0:
        core = body[:insert_at] + "0" * zeros + body[insert_at:]
    else:
        core = body
    return core + padding if left else padding + core


def vformat(fmt: str | None, args: Iterable[Any]) -> str:
    """Format ``args`` according to ``fmt`` and return the whole result."""
    take = _Arguments(args)
    pieces = []
    for token in tokenize(fmt):
        if isinstance(token, str):
            pieces.append(token)
        else:
            pieces.append(_render(token, take))
    return "".join(pieces)


def sprintf(fmt: str | None, *args: Any) -> str:
    """Format the arguments according to ``fmt``."""
    return vformat(fmt, args)


def snprintf(size: int, fmt: str | None, *args: Any) -> tuple[str, int]:
    """Format into a buffer of ``size`` characters including the terminator.

    Returns the stored text (at most ``size - 1`` characters) and the length
    the complete result would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    full = vformat(fmt, args)
    stored = full[:size - 1] if size > 0 else ""
    return stored, len(full)