# mshell

The parsing core of a small shell, as a Python library.

It turns a list of lexer tokens into a command tree of pipelines,
`&&` / `||` chains and subshells. The tree records arguments, input and
output redirections, here-documents, and the positions of `$VAR`
references so that a later step can fill them in. The package also
provides `*` wildcard expansion against a directory, a buffered line
reader, a small `printf` and a few C-style string helpers.

## Installation

```
pip install .
```

Install with `pip install .[test]` to get the test dependencies, then
run the suite with `pytest`.

## Modules

- `mshell.tokens`: `TokenType`, `State` and `Token`, plus `append_token`,
  which appends a token to a list and skips empty content.
- `mshell.nodes`: the command tree. It holds `Command`, `CommandArg`,
  `InFile`, `OutFile`, `EnvIndex` and `NodeType`, along with the helpers
  `node_type_for`, `rank_of` and `make_operator_node`. A pipe ranks above
  `&&` and `||`, and those two share a rank.
- `mshell.words`: `collect_word` joins adjacent tokens into one word and
  returns a `WordResult`. Quotes are dropped, and an unquoted `*` becomes
  `mshell.wildcard.WILDCARD_MARKER`. `env_index` finds where a variable
  reference starts inside a word.
- `mshell.parser`: `parse(tokens, read_here_doc, is_ambiguous)` and the
  `Parser` class build the tree.
  - `read_here_doc` takes a limiter and returns the body, or None to
    cancel.
  - `is_ambiguous` decides whether a redirection target is ambiguous.
  - Here-document bodies are written to new files under `/tmp`.
  - `ParseError` is raised when no reader was given, when reading is
    cancelled, or when the file cannot be created.
- `mshell.heredoc`: `NameGenerator` produces deterministic nine-character
  file names. `create_here_doc` writes a here-document body to such a file
  and points the `InFile` at it.
- `mshell.wildcard`:
  - `match_pattern` matches a name against a pattern.
  - `directory_entries` lists names that do not start with a dot.
  - `expand_pattern` and `expand_wildcards` return matching names joined
    by spaces, in directory order.
- `mshell.linereader`: `LineReader` reads lines from a text or binary
  stream in fixed-size chunks (42 by default). Each line keeps its
  newline.
- `mshell.printf`: `format_printf`, `printf` and `format_hex`. These
  support the `c`, `s`, `d`, `i`, `u`, `x`, `X`, `p` and `%%`
  conversions.
- `mshell.strutils`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr` and `strncmp`.

## Example

```python
from mshell.tokens import State, Token, TokenType
from mshell.parser import parse

tokens = [
    Token("ls", State.GENERAL, TokenType.WORD),
    Token(" ", State.GENERAL, TokenType.WHITE_SPACE),
    Token("|", State.GENERAL, TokenType.PIPE_LINE),
    Token(" ", State.GENERAL, TokenType.WHITE_SPACE),
    Token("wc", State.GENERAL, TokenType.WORD),
]
root = parse(tokens)
root.type_node                     # NodeType.PIPE_LINE_NODE
root.right.command_arg[0].content  # "ls"
root.left.command_arg[0].content   # "wc"
```

```python
from mshell.wildcard import match_pattern, expand_pattern

match_pattern("notes.txt", "*.txt", "*")   # True
expand_pattern("*.txt", "*", ".")          # matching names joined by spaces, or "*.txt" if none
```

```python
from mshell.printf import format_printf

format_printf("%s has %d items (%x)", "box", 42, 255)   # "box has 42 items (ff)"
```

## What it does not do

This is a library, not a shell you can run. It has no command-line
entry point and no interactive prompt. It does not turn raw input text
into tokens, so you build the `Token` list yourself. It does not expand
`$VAR` references; it only records where they are. It does not run
commands, pipelines or built-ins. It does not decide whether a
redirection is ambiguous unless you pass an `is_ambiguous` callback.