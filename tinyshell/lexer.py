"""Turning a command line into a flat list of tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tinyshell.splitting import ShellSyntaxError
from tinyshell.textutils import is_space

_QUOTES = ("'", '"')


class TokenType(IntEnum):
    """Kinds of token; every kind below PIPE is a redirection operator."""

    R_RED = 1
    L_RED = 2
    DR_RED = 3
    DL_RED = 4
    PIPE = 5
    FILE_NAME = 6
    CMD = 7
    ARG = 8
    END = 9


@dataclass(frozen=True)
class Token:
    """One lexical unit of a command line."""

    type: TokenType
    value: str


def _quote_kind(char: str) -> int:
    if char == "'":
        return 1
    if char == '"':
        return 2
    return 0


class Lexer:
    """Scanner over one command line.

    Words end at a space, ``<``, ``>`` or the end of the line; quoted
    sections are kept whole. Pipes and tabs do not end a word.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._tokens: list[Token] = []

    @property
    def char(self) -> str:
        """The character under the cursor, or an empty string at the end."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _peek(self, offset: int) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def _advance(self) -> None:
        if self.pos < len(self.text):
            self.pos += 1

    def _skip_space(self) -> None:
        while is_space(self.char):
            self.pos += 1

    def _separated(self) -> bool:
        return self.char in (" ", "<", ">", "")

    def _emit(self, kind: TokenType, value: str) -> None:
        self._tokens.append(Token(kind, value))

    def _scan_word(self) -> None:
        while self.char:
            opening = 0
            while not opening and not self._separated():
                opening = _quote_kind(self.char)
                if not opening:
                    self._advance()
            if self._separated():
                return
            self._advance()
            current = _quote_kind(self.char)
            while current != opening:
                if not self.char:
                    return
                current = _quote_kind(self.char)
                self._advance()

    def _take_word(self) -> str:
        start = self.pos
        self._scan_word()
        return self.text[start:self.pos]

    def _filename(self) -> None:
        self._skip_space()
        char = self.char
        if not char:
            raise ShellSyntaxError("syntax error near `\\n'")
        if char == "|":
            raise ShellSyntaxError(f"syntax error near `{char}'")
        start = self.pos
        while self.char and not is_space(self.char) and self.char not in "<>":
            self._advance()
        self._emit(TokenType.FILE_NAME, self.text[start:self.pos])

    def _redirection(self) -> None:
        char = self.char
        if char not in ("<", ">"):
            return
        doubled = self._peek(1) == char
        if char == "<":
            kind = TokenType.DL_RED if doubled else TokenType.L_RED
        else:
            kind = TokenType.DR_RED if doubled else TokenType.R_RED
        self._emit(kind, char * 2 if doubled else char)
        self._advance()
        if doubled:
            self._advance()
        self._filename()

    def tokenize(self) -> list[Token]:
        """Scan the whole line and return its tokens, quotes left in place.

        The list always ends with an END token. Raises ShellSyntaxError when
        a redirection has no file name.
        """
        self.pos = 0
        self._tokens = []
        in_command = False
        while self.pos < len(self.text):
            self._skip_space()
            self._redirection()
            if self.char == "|":
                self._emit(TokenType.PIPE, "|")
                self._advance()
                in_command = False
            elif not in_command:
                self._emit(TokenType.CMD, self._take_word())
                in_command = True
            elif not self._separated():
                self._emit(TokenType.ARG, self._take_word())
        self._emit(TokenType.END, "")
        return list(self._tokens)


def remove_quotes(value: str) -> str:
    """Drop quote pairs from ``value``, keeping what they enclose.

    An unclosed quote is dropped and the rest of the text kept as it is.
    """
    parts: list[str] = []
    pos = 0
    while pos < len(value):
        char = value[pos]
        if char in _QUOTES:
            close = value.find(char, pos + 1)
            if close == -1:
                parts.append(value[pos + 1:])
                break
            parts.append(value[pos + 1:close])
            pos = close + 1
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)


def tokenize(line: str) -> list[Token]:
    """Return the tokens of ``line`` with quotes removed from their values."""
    return [Token(tok.type, remove_quotes(tok.value)) for tok in Lexer(line).tokenize()]


def check_token_rules(tokens: list[Token]) -> list[Token]:
    """Return ``tokens`` unchanged if no operator is left dangling.

    Raises ShellSyntaxError when a redirection or pipe is directly followed
    by a pipe or the end of the line.
    """
    for current, following in zip(tokens, tokens[1:]):
        if current.type < TokenType.FILE_NAME and following.type in (
            TokenType.PIPE,
            TokenType.END,
        ):
            raise ShellSyntaxError(f"syntax error near `{current.value}'")
    return tokens