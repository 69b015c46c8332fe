"""Small shared helpers: number formatting, character classes, trimming and logging."""

from __future__ import annotations

import enum
import sys

_UINT64_MASK = (1 << 64) - 1


class LogLevel(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    ERROR = 2


def int_to_str(num: int) -> str:
    """Format an integer as an unsigned 64-bit decimal string."""
    return str(num & _UINT64_MASK)


def float_to_str(num: float) -> str:
    """Format a float in fixed notation with six decimal places."""
    return f"{num:f}"


def _single(ch: str) -> bool:
    return isinstance(ch, str) and len(ch) == 1


def is_letter(ch: str) -> bool:
    """Return True if ``ch`` is an ASCII letter."""
    return _single(ch) and ("a" <= ch <= "z" or "A" <= ch <= "Z")


def is_digit(ch: str) -> bool:
    """Return True if ``ch`` is an ASCII decimal digit."""
    return _single(ch) and "0" <= ch <= "9"


def is_letter_digit(ch: str) -> bool:
    """Return True if ``ch`` is an ASCII letter or digit."""
    return is_letter(ch) or is_digit(ch)


def is_letter_digit_underline(ch: str) -> bool:
    """Return True if ``ch`` is an ASCII letter, digit or underscore."""
    return is_letter_digit(ch) or ch == "_"


def is_letter_underline(ch: str) -> bool:
    """Return True if ``ch`` is an ASCII letter or underscore."""
    return is_letter(ch) or ch == "_"


def trim(text: str) -> str:
    """Remove leading and trailing spaces.

    Only the space character is removed. A string made of spaces only is
    returned unchanged.
    """
    if not text.strip(" "):
        return text
    return text.strip(" ")


def log(level: LogLevel | int, message: str) -> None:
    """Write a log line: errors go to standard output, the rest to standard error."""
    stream = sys.stdout if LogLevel(level) is LogLevel.ERROR else sys.stderr
    print(message, file=stream)