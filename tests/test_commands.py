from tinyshell.commands import Command, build_commands, count_args, count_redirs
from tinyshell.lexer import Token, TokenType, tokenize


def test_count_args_plain():
    assert count_args(tokenize("echo a b"), 0) == 3


def test_count_args_stops_at_redirection():
    assert count_args(tokenize("cat a < in b"), 0) == 2


def test_count_redirs_includes_trailing_args():
    assert count_redirs(tokenize("cat a < in b"), 0) == 3


def test_counts_from_second_segment():
    tokens = tokenize("ls -l | wc -c")
    pipe = [tok.type for tok in tokens].index(TokenType.PIPE)
    assert count_args(tokens, pipe + 1) == 2
    assert count_redirs(tokens, pipe + 1) == 0


def test_build_pipeline():
    assert build_commands(tokenize("ls -l | wc -c")) == [
        Command(["ls", "-l"], [], False),
        Command(["wc", "-c"], [], False),
    ]


def test_build_with_redirections():
    assert build_commands(tokenize("cat < in > out")) == [
        Command(["cat"], ["<", "in", ">", "out"], False)
    ]


def test_words_after_redirection_go_to_redirs():
    commands = build_commands(tokenize("cat a < in b"))
    assert commands == [Command(["cat", "a"], ["<", "in", "b"], False)]


def test_only_end_token_gives_no_commands():
    assert build_commands([Token(TokenType.END, "")]) == []


def test_counts_match_built_commands():
    line = "cat a < in b | grep x > out | wc"
    tokens = tokenize(line)
    starts = [0] + [i + 1 for i, tok in enumerate(tokens) if tok.type == TokenType.PIPE]
    commands = build_commands(tokens)
    assert len(commands) == len(starts)
    for start, command in zip(starts, commands):
        assert len(command.args) == count_args(tokens, start)
        assert len(command.redirs) == count_redirs(tokens, start)