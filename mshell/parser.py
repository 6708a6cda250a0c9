"""Building a command tree from a list of tokens."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from mshell.heredoc import create_here_doc
from mshell.nodes import (
    Command,
    CommandArg,
    InFile,
    NodeType,
    OutFile,
    make_operator_node,
    node_type_for,
    rank_of,
)
from mshell.tokens import Token, TokenType, append_token
from mshell.words import collect_word

HereDocReader = Callable[[str | None], str | None]
AmbiguityCheck = Callable[[Sequence[Token], int], bool]

_WORD_STARTS = frozenset(
    {
        TokenType.WORD,
        TokenType.WILDCARD,
        TokenType.ENV,
        TokenType.QUOTE,
        TokenType.DOUBLE_QUOTE,
    }
)
_QUOTES = frozenset({TokenType.QUOTE, TokenType.DOUBLE_QUOTE})


class ParseError(Exception):
    """Raised when a command line cannot be turned into a tree."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def _names_file(tokens: Sequence[Token], index: int) -> bool:
    token = tokens[index]
    if token.type in (TokenType.WORD, TokenType.WILDCARD, TokenType.ENV):
        return True
    following = tokens[index + 1] if index + 1 < len(tokens) else None
    return token.type in _QUOTES and following is not None and following.type is token.type


def _awaits_redirection(command: Command) -> bool:
    return command.in_redir or command.out_redir or command.dredir or command.here_doc


class _Tree:
    """The tree under construction and the command words go to."""

    def __init__(self) -> None:
        self.command = Command()
        self.root = Command(type_node=NodeType.ROOT_NODE, right=self.command)
        self.rank = 0
        self.first = True

    def split(self, token_type: TokenType) -> None:
        rank = rank_of(token_type)
        self.command = Command()
        if self.first:
            self.first = False
            self.root.left = self.command
            self.root.type_node = node_type_for(token_type)
            self.rank = rank
        elif rank >= self.rank:
            self.root = make_operator_node(self.root, token_type)
            self.root.left = self.command
            self.rank = rank
        else:
            branch = make_operator_node(self.root.left, token_type)
            branch.left = self.command
            self.root.left = branch


class Parser:
    """Turns tokens into a tree of :class:`Command` nodes.

    ``read_here_doc`` receives a here-document limiter and returns its
    body, or None when reading was cancelled.  ``is_ambiguous`` receives
    the tokens and the index where a redirection target starts and tells
    whether that target is an ambiguous redirect; without it no target
    is ambiguous.
    """

    def __init__(
        self,
        read_here_doc: HereDocReader | None = None,
        is_ambiguous: AmbiguityCheck | None = None,
    ) -> None:
        self._read_here_doc = read_here_doc
        self._is_ambiguous = is_ambiguous

    def parse(self, tokens: Sequence[Token]) -> Command:
        """Return the top node of the tree built from ``tokens``.

        Operators put earlier commands on the right and later ones on the
        left; a pipe binds tighter than ``&&`` and ``||``.
        """
        tokens = list(tokens)
        tree = _Tree()
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token.type is TokenType.START_SUBSHELL:
                index = self._subshell(tokens, index + 1, tree.command)
                if index >= len(tokens):
                    break
                index += 1
                continue
            if token.type in _WORD_STARTS and not _awaits_redirection(tree.command):
                following = self._argument(tokens, index, tree.command)
            elif token.type.is_operator:
                tree.split(token.type)
                following = index + 1
            else:
                following = self._redirection(tokens, index, tree.command)
            if following is None:
                break
            index = following
        return tree.root

    def _ambiguous(self, tokens: Sequence[Token], index: int) -> bool:
        return self._is_ambiguous is not None and bool(self._is_ambiguous(tokens, index))

    def _argument(self, tokens: list[Token], index: int, command: Command) -> int | None:
        result = collect_word(tokens, index)
        if result.end == index:
            return None
        command.add_arg(
            CommandArg(
                result.command or "",
                including_null=result.including_null,
                wildcard=result.wildcard,
                env=result.env,
                index_list=result.env_indexes,
            )
        )
        return result.end

    def _subshell(self, tokens: list[Token], start: int, command: Command) -> int:
        level = 0
        inner_tokens: list[Token] = []
        index = start
        while index < len(tokens):
            token = tokens[index]
            if token.type is TokenType.END_SUBSHELL and level == 0:
                break
            if token.type is TokenType.START_SUBSHELL:
                level += 1
            elif token.type is TokenType.END_SUBSHELL:
                level -= 1
            append_token(inner_tokens, token.content, token.state, token.type)
            index += 1
        command.type_node = NodeType.SUBSHELL_NODE
        inner = self.parse(inner_tokens)
        if (
            inner.type_node is NodeType.ROOT_NODE
            and inner.right is not None
            and inner.right.type_node is not NodeType.ROOT_NODE
        ):
            inner = inner.right
        command.right = inner
        return index

    def _redirection(self, tokens: list[Token], index: int, command: Command) -> int | None:
        token_type = tokens[index].type
        if token_type is TokenType.REDIR_IN:
            command.in_redir = True
        elif token_type is TokenType.REDIR_OUT:
            command.out_redir = True
        elif token_type is TokenType.DREDIR_OUT:
            command.dredir = True
        elif _names_file(tokens, index) and (command.out_redir or command.dredir):
            return self._redirect_out(tokens, index, command)
        elif token_type is TokenType.HERE_DOC:
            command.here_doc = True
        elif _names_file(tokens, index) and (command.in_redir or command.here_doc):
            return self._redirect_in(tokens, index, command)
        return index + 1

    def _redirect_out(self, tokens: list[Token], index: int, command: Command) -> int | None:
        result = collect_word(tokens, index)
        if result.end == index:
            return None
        append = command.dredir
        command.out_redir = False
        command.dredir = False
        command.add_out_file(
            OutFile(
                result.command or "",
                append=append,
                ambiguous=self._ambiguous(tokens, index),
                wildcard=result.wildcard,
                index_list=result.env_indexes,
            )
        )
        return result.end

    def _redirect_in(self, tokens: list[Token], index: int, command: Command) -> int | None:
        result = collect_word(tokens, index)
        if result.end == index:
            return None
        filename = result.command or ""
        ambiguous = self._ambiguous(tokens, index)
        if command.in_redir:
            command.add_in_file(
                InFile(filename, here_doc=False, ambiguous=ambiguous, wildcard=result.wildcard)
            )
        elif command.here_doc:
            command.here_doc = False
            file = command.add_in_file(
                InFile(filename, here_doc=True, ambiguous=ambiguous, wildcard=result.wildcard)
            )
            self._write_here_doc(file)
        if command.in_redir:
            command.in_redir = False
            command.in_files[-1].index_list.extend(result.env_indexes)
        return result.end

    def _write_here_doc(self, file: InFile) -> None:
        if self._read_here_doc is None:
            raise ParseError("no here-document reader available")
        try:
            path = create_here_doc(file, self._read_here_doc)
        except OSError as error:
            raise ParseError("problem with opening here doc") from error
        if path is None:
            raise ParseError("here-document cancelled")


def parse(
    tokens: Sequence[Token],
    read_here_doc: HereDocReader | None = None,
    is_ambiguous: AmbiguityCheck | None = None,
) -> Command:
    """Build a command tree from ``tokens`` with a fresh :class:`Parser`."""
    return Parser(read_here_doc, is_ambiguous).parse(tokens)