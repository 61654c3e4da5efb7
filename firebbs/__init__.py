"""Library pieces of a Firebird-style bulletin board system: MD5, printf formatting, string lists, read marks and ads."""

__version__ = "0.1.0"

__all__ = [
    "ads",
    "md5",
    "printf",
    "printf_spec",
    "readmarks",
    "stringlist",
]