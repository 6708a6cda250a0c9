"""Tokens produced by the lexer and consumed by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token the lexer emits."""

    WORD = "word"
    WHITE_SPACE = " "
    QUOTE = "'"
    DOUBLE_QUOTE = '"'
    ENV = "$"
    WILDCARD = "*"
    PIPE_LINE = "|"
    REDIR_IN = "<"
    REDIR_OUT = ">"
    HERE_DOC = "<<"
    DREDIR_OUT = ">>"
    AND = "&&"
    OR = "||"
    START_SUBSHELL = "("
    END_SUBSHELL = ")"

    @property
    def is_separator(self) -> bool:
        """Tell whether an unquoted token of this kind ends a word."""
        return self in _SEPARATORS

    @property
    def is_operator(self) -> bool:
        """Tell whether this kind joins two commands into a tree node."""
        return self in _OPERATORS


_OPERATORS = frozenset({TokenType.PIPE_LINE, TokenType.AND, TokenType.OR})

_SEPARATORS = frozenset(
    {
        TokenType.WHITE_SPACE,
        TokenType.REDIR_IN,
        TokenType.REDIR_OUT,
        TokenType.HERE_DOC,
        TokenType.DREDIR_OUT,
        TokenType.START_SUBSHELL,
        TokenType.END_SUBSHELL,
    }
    | _OPERATORS
)


class State(Enum):
    """Quoting context a token was read in."""

    GENERAL = "general"
    IN_QUOTE = "in_quote"
    IN_DQUOTE = "in_dquote"


@dataclass
class Token:
    """One lexical element of a command line."""

    content: str
    state: State
    type: TokenType
    length: int | None = None

    def __post_init__(self) -> None:
        if self.length is None:
            self.length = len(self.content)


def append_token(
    tokens: list[Token], content: str | None, state: State, token_type: TokenType
) -> Token | None:
    """Append a new token to ``tokens`` and return it.

    Empty or missing content adds nothing and returns None.
    """
    if not content:
        return None
    token = Token(content, state, token_type)
    tokens.append(token)
    return token