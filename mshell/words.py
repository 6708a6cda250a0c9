"""Assembly of one shell word from a run of tokens."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from mshell.nodes import EnvIndex
from mshell.tokens import State, Token, TokenType
from mshell.wildcard import WILDCARD_MARKER

_QUOTES = frozenset({TokenType.QUOTE, TokenType.DOUBLE_QUOTE})
_QUOTED_STATES = frozenset({State.IN_QUOTE, State.IN_DQUOTE})


@dataclass
class WordResult:
    """The word built from consecutive tokens and what was learnt about it.

    ``command`` is None only when no token could be taken at all.
    ``end`` is the index of the first token that was not consumed.
    """

    command: str | None = None
    including_null: bool = False
    wildcard: bool = False
    env: bool = False
    env_indexes: list[EnvIndex] = field(default_factory=list)
    end: int = 0


def env_index(env_text: str | None, previous: str | None) -> int:
    """Return where the ``$`` of ``env_text`` lands once appended to ``previous``.

    Without a ``$`` the position just past ``env_text`` is used.
    """
    text = env_text or ""
    position = text.find("$")
    if position == -1:
        position = len(text)
    return len(previous or "") + position


def _append(result: WordResult, piece: str) -> None:
    result.command = piece if result.command is None else result.command + piece


def _take_general(token: Token, result: WordResult) -> None:
    if token.type is TokenType.WILDCARD:
        result.wildcard = True
        _append(result, WILDCARD_MARKER)
    elif result.command is None or token.type is not TokenType.WHITE_SPACE:
        _append(result, token.content)


def _take(tokens: Sequence[Token], index: int, result: WordResult) -> None:
    token = tokens[index]
    following = tokens[index + 1] if index + 1 < len(tokens) else None
    if token.type in _QUOTES:
        if following is not None and following.type is token.type and result.command is None:
            result.command = ""
        result.including_null = True
        return
    if token.type is TokenType.ENV:
        result.env_indexes.append(
            EnvIndex(env_index(token.content, result.command), token.length or 0)
        )
        result.env = True
    if token.state in _QUOTED_STATES:
        _append(result, token.content)
    elif token.state is State.GENERAL:
        _take_general(token, result)


def collect_word(tokens: Sequence[Token], start: int = 0) -> WordResult:
    """Join tokens from ``start`` into one word.

    The word ends before the first unquoted separator token.  Quote
    characters are dropped but mark the word as possibly empty, unquoted
    ``*`` becomes :data:`WILDCARD_MARKER`, and each variable reference is
    recorded with its position in the word.  A word that runs to the end
    of the tokens is never None.
    """
    result = WordResult(end=start)
    if start < len(tokens) and tokens[start].type is TokenType.ENV:
        result.env = True
    for index in range(start, len(tokens)):
        token = tokens[index]
        if token.state is State.GENERAL and token.type.is_separator:
            return result
        _take(tokens, index, result)
        result.end = index + 1
    if result.command is None:
        result.command = ""
    return result