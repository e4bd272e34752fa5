"""Expansion of ``$NAME`` and ``$?`` references in a command line."""

from __future__ import annotations

import string

from tinyshell.environment import Environment

_LETTERS = frozenset(string.ascii_letters)
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_@")

# Characters that end a variable name in each quoting state: 1 outside
# quotes, 2 inside double quotes, 3 inside both kinds.
_TERMINATORS = {1: " $", 2: ' $"', 3: " $'"}


def _char_at(text: str, pos: int) -> str:
    return text[pos] if 0 <= pos < len(text) else ""


def _is_alpha(char: str) -> bool:
    return char in _LETTERS


def find_name_end(text: str, state: int, pos: int) -> int:
    """Return the index just past the variable name that starts at ``pos``.

    Names are made of ASCII letters, digits, ``_`` and ``@``. A ``?`` right
    after the name (or in place of it) is taken as part of it.
    """
    terminators = _TERMINATORS.get(state)
    if terminators is not None:
        while (
            pos < len(text)
            and text[pos] in _NAME_CHARS
            and text[pos] not in terminators
        ):
            pos += 1
    if _char_at(text, pos) == "?":
        return pos + 1
    return pos


def skip_single_quoted(text: str, pos: int, in_single: bool, in_double: bool) -> int:
    """Skip a single-quoted section starting at ``pos``.

    Only applies outside any quotes. Returns the index after the closing
    quote, or the closing quote itself when it ends the text.
    """
    if _char_at(text, pos) != "'" or in_single or in_double:
        return pos
    close = text.find("'", pos + 1)
    if close == -1:
        return len(text)
    if close + 1 < len(text):
        return close + 1
    return close


def dollar_skip(text: str, pos: int) -> int:
    """Return where scanning resumes after a ``$`` that was not expanded."""
    if _char_at(text, pos) != "$":
        return pos
    following = _char_at(text, pos + 1)
    if following in ("", '"'):
        return pos + 1
    if following in ("$", " ") or not _is_alpha(following):
        return pos + 2
    return pos


def _quote_state(in_single: bool, in_double: bool, char: str) -> tuple[bool, bool]:
    if char == '"' and in_single and in_double:
        return False, False
    if char == '"':
        return in_single, not in_double
    return in_single, in_double


def _read_state(in_single: bool, in_double: bool) -> int:
    if not in_single and in_double:
        return 2
    if in_single and in_double:
        return 3
    if not in_single and not in_double:
        return 1
    return 0


def _lookup(env: Environment, name: str) -> str | None:
    for var in env.variables:
        if var.name == name:
            return var.value or ""
    return None


def _replace_reference(text: str, pos: int, state: int, env: Environment) -> str | None:
    if not state:
        return None
    end = find_name_end(text, state, pos + 1)
    parts = [text[:pos] or None, _lookup(env, text[pos + 1:end]), text[end:] or None]
    if all(part is None for part in parts):
        return None
    return "".join(part for part in parts if part is not None)


def expand_variables(line: str, env: Environment) -> str | None:
    """Replace variable references in ``line`` with their values.

    Text inside single quotes is left alone. Unknown variables expand to
    nothing. Returns None when the expansion leaves nothing at all, in which
    case the line is not run.
    """
    text = line
    pos = 0
    in_single = in_double = False
    while pos < len(text):
        pos = skip_single_quoted(text, pos, in_single, in_double)
        char = _char_at(text, pos)
        following = _char_at(text, pos + 1)
        if char in ("'", '"'):
            in_single, in_double = _quote_state(in_single, in_double, char)
        elif char == "$" and following and (_is_alpha(following) or following == "?"):
            replaced = _replace_reference(
                text, pos, _read_state(in_single, in_double), env
            )
            if replaced is None:
                return None
            text = replaced
        char = _char_at(text, pos)
        if char == "$":
            pos = dollar_skip(text, pos)
        elif char:
            pos += 1
    return text