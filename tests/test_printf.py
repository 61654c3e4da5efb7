import pytest

from firebbs.printf import snprintf, sprintf, vformat


@pytest.mark.parametrize(
    "fmt, arg",
    [
        ("%d", 42),
        ("%d", -42),
        ("%i", 7),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%+d", 42),
        ("% d", 42),
        ("%+ d", 42),
        ("%.3d", 7),
        ("%8.3d", -7),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#010x", 255),
        ("%o", 8),
        ("%u", 123),
        ("%s", "hello"),
        ("%10s|", "hi"),
        ("%-10s|", "hi"),
        ("%.2s", "hello"),
        ("%c", 65),
    ],
)
def test_agrees_with_standard_formatting(fmt, arg):
    assert sprintf(fmt, arg) == fmt % arg


def test_literal_text_and_percent():
    assert sprintf("100%% sure") == "100% sure"
    assert sprintf("plain text") == "plain text"


def test_empty_and_none_format():
    assert sprintf("") == ""
    assert vformat(None, []) == ""


def test_star_width_and_precision():
    assert sprintf("%*d", 6, 42) == "%6d" % 42
    assert sprintf("%*d|", -6, 42) == "%-6d|" % 42
    assert sprintf("%.*s", 3, "abcdef") == "abc"


def test_negative_star_precision_means_unspecified():
    assert sprintf("%.*s", -1, "abcdef") == "abcdef"


def test_alternate_octal_gets_leading_zero():
    assert sprintf("%#o", 8) == "010"
    assert sprintf("%#o", 0) == sprintf("%o", 0)


def test_zero_value_with_zero_precision_is_empty():
    assert sprintf("[%.0d]", 0) == "[]"
    assert sprintf("%.0x", 0) == sprintf("%.0u", 0)


def test_zero_flag_ignored_with_precision():
    assert sprintf("%08.3d", 5) == "%8.3d" % 5


def test_zero_flag_ignored_for_strings():
    assert sprintf("%05s", "ab") == "%5s" % "ab"


def test_unsigned_wraps_negative_values():
    assert sprintf("%u", -1) == str(2**32 - 1)
    assert sprintf("%lu", -1) == str(2**64 - 1)


def test_short_length_truncates():
    assert sprintf("%hd", 65537) == sprintf("%d", 1)


def test_unknown_conversion_keeps_character():
    assert sprintf("a%5yb") == "ayb"


def test_none_string_is_empty():
    assert sprintf("[%s]", None) == "[]"


def test_pointer_formatting():
    assert sprintf("%p", 255) == "0x%x" % 255
    assert sprintf("%p", None) == "(nil)"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "x")


def test_snprintf_truncates_and_reports_full_length():
    full = sprintf("%s-%d", "board", 12345)
    for size in range(0, len(full) + 3):
        text, length = snprintf(size, "%s-%d", "board", 12345)
        assert length == len(full)
        assert text == (full[: size - 1] if size > 0 else "")


def test_snprintf_negative_size_raises():
    with pytest.raises(ValueError):
        snprintf(-1, "%d", 1)