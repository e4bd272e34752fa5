# tinyshell

The front end of a small command shell: it takes one line of input and turns
it into the commands of a pipeline. The stages are separate modules and can
be used on their own.

- `tinyshell.splitting`: checks a raw line and cuts it into pipeline groups.
  `custom_split(line)` raises `ShellSyntaxError` for unclosed quotes, doubled
  pipes, pipes that do not sit between two commands, and `;` or `\` outside
  quotes. It returns an empty list when there is nothing to run.
  `is_blank`, `count_groups`, `check_invalid_chars` and `split_groups` are the
  individual steps.
- `tinyshell.environment`: `Environment` holds the shell variables (what
  `env` would show) and the export list. Both include a `?` entry for the last
  exit status. Build one with `Environment.from_entries(["NAME=value", ...])`.
  Read values with `get`, set and read the status with `set_status`,
  `set_status_text` and `status`, and get a `NAME=value` list for child
  processes with `to_envp`.
- `tinyshell.expansion`: `expand_variables(line, env)` replaces `$NAME` and
  `$?` and leaves single-quoted text alone. Unknown names expand to nothing.
  It returns `None` when the expansion leaves nothing at all.
- `tinyshell.lexer`: `tokenize(line)` returns a list of `Token` objects
  (`type` is a `TokenType`, `value` is the text with quotes removed), always
  ending in an `END` token. The tokens cover commands, arguments, `|`, the
  redirections `<`, `>`, `<<` and `>>`, and file names. A redirection with no
  file name raises `ShellSyntaxError`. `check_token_rules(tokens)` raises when
  an operator is followed directly by a pipe or by the end of the line.
  `Lexer` and `remove_quotes` are available separately.
- `tinyshell.commands`: `build_commands(tokens)` returns one `Command` per
  pipeline stage. Each has `args` (the words before the first redirection),
  `redirs` (the redirection words) and `no_command`.
- `tinyshell.textutils`: small helpers such as `is_space`, `atoi`,
  `split_fields` and `builtin_kind`.

## Example

```python
from tinyshell.environment import Environment
from tinyshell.expansion import expand_variables
from tinyshell.splitting import custom_split
from tinyshell.lexer import tokenize, check_token_rules
from tinyshell.commands import build_commands

env = Environment.from_entries(["USER=alice"])

expand_variables('echo "hi $USER"', env)
# 'echo "hi alice"'

custom_split("ls -l | wc -l")
# ['ls -l ', 'wc -l']

tokens = check_token_rules(tokenize("cat < in.txt | grep x"))
for command in build_commands(tokens):
    print(command.args, command.redirs)
# ['cat'] ['<', 'in.txt']
# ['grep', 'x'] []
```

Malformed input raises `tinyshell.splitting.ShellSyntaxError`. Its message is
the text a shell would print:

```python
from tinyshell.splitting import ShellSyntaxError, custom_split

try:
    custom_split("echo 'unterminated")
except ShellSyntaxError as err:
    print(err)  # Error: unclosed quotes
```

## What it does not do

This package only parses. It has no prompt loop and no command to install. It
does not start programs, search `PATH`, connect pipes, open redirection files,
read here-documents, or run any builtins such as `echo`, `cd`, `export` or
`exit`. `builtin_kind` only tells you whether a name is one of those builtins.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```