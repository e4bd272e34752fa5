"""Grouping tokens into the commands of a pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from tinyshell.lexer import Token, TokenType

_STOPS = (TokenType.PIPE, TokenType.END)


@dataclass
class Command:
    """One command of a pipeline.

    ``args`` are the words before the first redirection; ``redirs`` holds
    the first redirection and everything after it except command words.
    ``no_command`` is True when no command word was collected.
    """

    args: list[str] = field(default_factory=list)
    redirs: list[str] = field(default_factory=list)
    no_command: bool = True


def _is_redirection(kind: TokenType) -> bool:
    return kind < TokenType.PIPE or kind == TokenType.FILE_NAME


def _segment(tokens: list[Token], start: int) -> Iterator[Token]:
    for tok in tokens[start:]:
        if tok.type in _STOPS:
            return
        yield tok


def count_args(tokens: list[Token], start: int) -> int:
    """Count the command words from ``start`` up to the first redirection."""
    count = 0
    for tok in _segment(tokens, start):
        if _is_redirection(tok.type):
            break
        if tok.type in (TokenType.ARG, TokenType.CMD):
            count += 1
    return count


def count_redirs(tokens: list[Token], start: int) -> int:
    """Count the words that go to the redirection list of a command."""
    count = 0
    seen = False
    for tok in _segment(tokens, start):
        if _is_redirection(tok.type):
            seen = True
            count += 1
        elif seen and tok.type == TokenType.ARG:
            count += 1
    return count


def _build_one(tokens: list[Token], start: int) -> tuple[Command, int]:
    command = Command()
    seen = False
    end = start
    for tok in _segment(tokens, start):
        end += 1
        if _is_redirection(tok.type):
            seen = True
            command.redirs.append(tok.value)
        elif seen:
            if tok.type == TokenType.ARG:
                command.redirs.append(tok.value)
        elif tok.type in (TokenType.CMD, TokenType.ARG):
            if tok.type == TokenType.CMD:
                command.no_command = False
            command.args.append(tok.value)
    return command, end


def build_commands(tokens: list[Token]) -> list[Command]:
    """Return the commands of the pipeline described by ``tokens``."""
    commands: list[Command] = []
    pos = 0
    while pos < len(tokens) and tokens[pos].type != TokenType.END:
        if tokens[pos].type == TokenType.PIPE:
            pos += 1
            continue
        command, pos = _build_one(tokens, pos)
        commands.append(command)
    return commands