"""Small text helpers shared by the parser, the lexer and the builtins."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = frozenset(" \t\r\n\v\f")

_STATELESS_BUILTINS = frozenset({"echo", "env", "pwd"})
_STATEFUL_BUILTINS = frozenset({"cd", "exit", "export", "unset"})


def is_space(char: str) -> bool:
    """Return True if ``char`` is one of the six ASCII whitespace characters."""
    return len(char) == 1 and char in _WHITESPACE


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring anything after the digits.

    Leading whitespace is skipped and one optional sign is honoured. Text with
    no digits gives 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda c: "0" <= c <= "9", rest))
    return sign * int(digits) if digits else 0


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def builtin_kind(name: str | None) -> int:
    """Classify a command name.

    Returns 2 for builtins that do not touch shell state (echo, env, pwd),
    1 for builtins that do (cd, exit, export, unset) and 0 otherwise.
    """
    if not name:
        return 0
    if name in _STATELESS_BUILTINS:
        return 2
    if name in _STATEFUL_BUILTINS:
        return 1
    return 0