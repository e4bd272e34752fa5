import pytest

from tinyshell.environment import Environment
from tinyshell.expansion import (
    dollar_skip,
    expand_variables,
    find_name_end,
    skip_single_quoted,
)


@pytest.fixture
def home_env():
    return Environment.from_entries(["HOME=/tmp/h", "MY_VAR1=val"])


def test_expands_simple_variable(home_env):
    value = "/tmp/h"
    assert expand_variables("echo $HOME", home_env) == f"echo {value}"


def test_expands_name_with_underscore_and_digit(home_env):
    assert expand_variables("echo $MY_VAR1", home_env) == "echo " + "val"


def test_unknown_variable_expands_to_nothing(home_env):
    assert expand_variables("echo $NOPE x", home_env) == "echo " + " x"


def test_only_unknown_variable_gives_none(home_env):
    assert expand_variables("$NOPE", home_env) is None


def test_single_quotes_block_expansion(home_env):
    line = "echo '$HOME'"
    assert expand_variables(line, home_env) == line


def test_double_quotes_allow_expansion(home_env):
    value = "/tmp/h"
    assert expand_variables('echo "$HOME"', home_env) == f'echo "{value}"'


def test_single_quotes_inside_double_quotes_expand(home_env):
    value = "/tmp/h"
    line = "echo \"'$HOME'\""
    assert expand_variables(line, home_env) == f"echo \"'{value}'\""


def test_status_expansion(home_env):
    code = 42
    home_env.set_status(code)
    assert expand_variables("echo $?", home_env) == f"echo {code}"


@pytest.mark.parametrize("line", ["echo $1x", "echo $", "echo $$", "echo $ a"])
def test_non_names_are_left_alone(home_env, line):
    assert expand_variables(line, home_env) == line


def test_empty_value_expands_to_empty_line():
    env = Environment.from_entries(["E="])
    assert expand_variables("$E", env) == ""


def test_value_is_scanned_again():
    b_value = "y"
    env = Environment.from_entries(["A=x$B", f"B={b_value}"])
    assert expand_variables("echo $A", env) == f"echo x{b_value}"


def test_line_without_dollar_is_unchanged(home_env):
    line = 'ls -l "a b" | wc'
    assert expand_variables(line, home_env) == line


def test_find_name_end_stops_at_slash():
    text = "$HOME/x"
    assert find_name_end(text, 1, 1) == text.index("/")


def test_find_name_end_includes_question_mark():
    text = "$?"
    assert find_name_end(text, 1, 1) == len(text)


def test_find_name_end_stops_at_double_quote():
    text = '"$A"'
    assert find_name_end(text, 2, 2) == text.rindex('"')


@pytest.mark.parametrize("state", [1, 2, 3])
def test_find_name_end_states_agree_on_plain_names(state):
    text = "$NAME rest"
    assert find_name_end(text, state, 1) == text.index(" ")


def test_skip_single_quoted_moves_past_closing_quote():
    text = "'abc' d"
    assert skip_single_quoted(text, 0, False, False) == text.index(" ")


def test_skip_single_quoted_stops_on_final_quote():
    text = "'abc'"
    assert skip_single_quoted(text, 0, False, False) == len(text) - 1


def test_skip_single_quoted_ignored_inside_double_quotes():
    text = "'abc' d"
    assert skip_single_quoted(text, 0, False, True) == 0


def test_skip_single_quoted_ignores_other_characters():
    text = "abc"
    assert skip_single_quoted(text, 1, False, False) == 1


def test_dollar_skip_at_end():
    text = "$"
    assert dollar_skip(text, 0) == len(text)


def test_dollar_skip_before_double_quote():
    text = '$"'
    assert dollar_skip(text, 0) == text.index('"')


@pytest.mark.parametrize("text", ["$$x", "$ x", "$1x"])
def test_dollar_skip_jumps_two(text):
    assert dollar_skip(text, 0) == text.index("x")


def test_dollar_skip_keeps_position_before_letter():
    assert dollar_skip("$a", 0) == 0


def test_dollar_skip_without_dollar():
    assert dollar_skip("ab", 1) == 1