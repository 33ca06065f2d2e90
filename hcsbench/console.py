"""Prompting the user for strings and integers on the console."""

from __future__ import annotations

import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _leading_int(text: str) -> int:
    """Parse the leading integer of ``text`` into a 32-bit int.

    Trailing characters are ignored; a missing number or one out of range
    raises ValueError.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer {value} is out of range")
    return value


def get_string_from_user(message: str) -> str:
    """Show ``message`` and return the next line the user enters."""
    print(message, end="", flush=True)
    return input()


def get_int_from_user(
    message: str, error_message: str = "Error! Enter integer number"
) -> int:
    """Prompt until the user enters an integer, and return it.

    Raises EOFError when input runs out.
    """
    while True:
        print(message, end="", flush=True)
        words = input().split()
        try:
            if not words:
                raise ValueError("empty input")
            return _leading_int(words[0])
        except ValueError:
            print(error_message)