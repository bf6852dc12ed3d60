# minish

`minish` is a library for handling command lines the way a small interactive
shell does. It takes a line through each stage:

- **syntax checking**: unbalanced quotes, stray pipes and malformed redirections
  are rejected (`minish.syntax.validate_syntax`, raising `ShellSyntaxError`,
  whose `exit_code` is 258);
- **spacing and splitting**: operators such as `|`, `<`, `>`, `<<` and `>>` are
  separated from their neighbours (`minish.spacing.add_space`, raising
  `UnclosedQuoteError`), and the line is cut into words with quoted text kept
  whole (`minish.splitting.split_words`);
- **expansion**: `$NAME` and `$?` are replaced, single-quoted words are left
  alone and quotes are removed afterwards (`minish.expand.expand_words`);
- **tokenizing**: words become typed tokens numbered by pipeline stage
  (`minish.tokens.tokenize`, `TokenType`, `Token`, `command_args`,
  `heredoc_limiters`);
- **builtins**: `echo`, `cd`, `pwd`, `export`, `unset`, `env` and `exit`
  (`minish.builtins.run_builtin`);
- **redirections and here-documents** (`minish.redirect.resolve_redirections`,
  `minish.redirect.collect_heredoc`) and **command lookup** along `PATH`
  (`minish.pathsearch.resolve_command`).

It has no dependencies beyond the standard library and supports Python 3.10 and
later.

## Parsing a line

`parse` checks, splits, expands and tokenizes a line using a `Shell`'s state:

```python
from minish.parser import parse
from minish.shell import Shell

shell = Shell.from_environ({"HOME": "/home/user", "PATH": "/usr/bin"})
parsed = parse("echo hello | tr a-z A-Z > out.txt", shell)

parsed.words     # ['echo', 'hello', '|', 'tr', 'a-z', 'A-Z', '>', 'out.txt']
parsed.cmds_num  # 1 (the number of pipes)
```

Each `Token` has an `index` (its pipeline stage), a `type` and a `value`;
redirection tokens carry the file name as their value. A syntax error sets
`shell.exit_code` to 258 and raises `ShellSyntaxError`.

The stages can be used on their own as well:

```python
from minish.quotes import trim_quote
from minish.syntax import ShellSyntaxError, validate_syntax
from minish.textutils import atoi

trim_quote('"hello" world')   # 'hello world'
atoi("  -42")                 # -42

try:
    validate_syntax("| ls")
except ShellSyntaxError:
    print("syntax error")
```

## The environment

The environment is kept as ordered `NAME=value` entries, just as a process
receives it:

```python
from minish.environment import Environment, bump_shlvl

env = Environment.from_mapping({"HOME": "/home/user", "PATH": "/usr/bin"})
env.lookup("HOME")             # '/home/user'
env.replace_or_add("EDITOR=vi")
env.remove("PATH")
env.sorted_declarations()      # ['declare -x EDITOR=vi', 'declare -x HOME=/home/user']

bump_shlvl(["SHLVL=1"])        # ['SHLVL=2']
```

## Builtins

`run_builtin` runs a built-in command against a `Shell`, writing to the given
streams, and returns its exit code, or `None` when the command is not a
builtin. `exit` raises `ShellExit`, whose `code` is the requested code and
whose `status` is that code reduced to a process exit status.

```python
import io

from minish.builtins import run_builtin
from minish.shell import Shell

shell = Shell.from_environ({})
out = io.StringIO()
run_builtin(shell, ["echo", "hi"], out)   # 0
out.getvalue()                            # 'hi\n'
run_builtin(shell, ["ls"], out)           # None
```

## Redirections, here-documents and command lookup

`resolve_redirections(tokens, index, directory=None)` opens each file
redirection of one pipeline stage in order, creating or truncating output
files, and returns a `Redirections` record (`infile`, `outfile`, `append`,
`heredoc`); a file that cannot be opened raises `RedirectError`.

`collect_heredoc(lines, limiters, env, exit_code)` reads here-document text from
any iterable of lines, stopping at the last limiter, and expands `$` references
in the kept text.

`resolve_command(command, env)` returns the path to run for a command name, or
raises `CommandError` with an `exit_code` of 126 (a directory, or a file that
cannot be run) or 127 (not found).

## What it does not do

`minish` prepares commands but does not run them. It has no interactive prompt
or command to start, does not start programs, connect pipeline stages or
rebind file descriptors, and does not handle signals. Those are left to the
code that uses it.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.