"""Checks on a raw command line and its division into pipeline groups."""

from __future__ import annotations

import re
from typing import Iterator

from tinyshell.textutils import is_space

_QUOTES = ("'", '"')
_WHITESPACE = " \t\r\n\v\f"
_QUOTED = re.compile(r"'[^']*'?|\"[^\"]*\"?")


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be run; the message is shown."""


def _char_at(line: str, pos: int) -> str:
    return line[pos] if 0 <= pos < len(line) else ""


def is_blank(line: str) -> bool:
    """Return True if ``line`` holds nothing but spaces."""
    return all(char == " " for char in line)


def closing_quote(line: str, pos: int) -> int | None:
    """Return the index of the quote closing the one at ``pos``, or None."""
    if pos + 1 >= len(line):
        return None
    close = line.find(line[pos], pos + 1)
    return None if close == -1 else close


def count_groups(line: str) -> int:
    """Return the number of pipeline groups in ``line``.

    Raises ShellSyntaxError for unclosed quotes, doubled pipes and pipes
    that do not sit between two commands. An empty line has 0 groups.
    """
    newline = line.find("\n")
    end = len(line) if newline == -1 else newline
    groups = pipes = 0
    pos = 0
    while pos < end:
        if _char_at(line, pos) != "|":
            while pos < len(line) and line[pos] != "|":
                if line[pos] in _QUOTES:
                    close = closing_quote(line, pos)
                    if close is None:
                        raise ShellSyntaxError("Error: unclosed quotes")
                    pos = close
                pos += 1
            groups += 1
        if _char_at(line, pos) == "|":
            while is_space(_char_at(line, pos + 1)):
                pos += 1
            if _char_at(line, pos + 1) == "|":
                raise ShellSyntaxError("syntax error near `|'")
            pipes += 1
            pos += 1
    if pipes + 1 == groups:
        return groups
    if pipes == 0 and groups == 0:
        return 0
    raise ShellSyntaxError("Error: wrong pipe usage")


def check_invalid_chars(line: str) -> None:
    """Raise ShellSyntaxError if ``;`` or ``\\`` appears outside quotes."""
    unquoted = _QUOTED.sub("", line)
    if ";" in unquoted or "\\" in unquoted:
        raise ShellSyntaxError("Error: invalid character")


def _unquoted_pipes(line: str) -> Iterator[int]:
    pos = 0
    while pos < len(line):
        char = line[pos]
        if char in _QUOTES:
            close = line.find(char, pos + 1)
            pos = len(line) if close == -1 else close + 1
            continue
        if char == "|":
            yield pos
        pos += 1


def split_groups(line: str, groups: int) -> list[str]:
    """Cut ``line`` into ``groups`` pieces at unquoted pipes.

    Every group but the last is the raw text before its pipe; the last group
    is the rest of the line with leading whitespace removed.
    """
    if groups <= 0:
        return []
    result: list[str] = []
    start = 0
    for pipe in _unquoted_pipes(line):
        if len(result) == groups - 1:
            break
        result.append(line[start:pipe])
        start = pipe + 1
    result.append(line[start:].lstrip(_WHITESPACE))
    return result


def custom_split(line: str) -> list[str]:
    """Validate ``line`` and return its pipeline groups.

    Raises ShellSyntaxError when the line is malformed; returns an empty
    list when there is nothing to run.
    """
    groups = count_groups(line)
    if not groups:
        return []
    check_invalid_chars(line)
    return split_groups(line, groups)