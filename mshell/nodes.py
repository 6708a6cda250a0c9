"""Command tree nodes and the redirections and arguments they carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from mshell.tokens import TokenType


class NodeType(Enum):
    """Kinds of node in the command tree."""

    NODE = "node"
    PIPE_LINE_NODE = "pipe"
    AND_NODE = "and"
    OR_NODE = "or"
    SUBSHELL_NODE = "subshell"
    ROOT_NODE = "root"


class _Rank(IntEnum):
    NONE = 0
    PIPE = 1
    AND = 2
    OR = 2


_NODE_TYPES = {
    TokenType.PIPE_LINE: NodeType.PIPE_LINE_NODE,
    TokenType.AND: NodeType.AND_NODE,
    TokenType.OR: NodeType.OR_NODE,
    TokenType.START_SUBSHELL: NodeType.SUBSHELL_NODE,
}

_RANKS = {
    TokenType.PIPE_LINE: _Rank.PIPE,
    TokenType.AND: _Rank.AND,
    TokenType.OR: _Rank.OR,
}


@dataclass
class EnvIndex:
    """Position and length of a variable reference inside a word."""

    index: int
    length: int
    expanded: bool = False


@dataclass
class CommandArg:
    """One argument word of a simple command."""

    content: str
    including_null: bool = False
    wildcard: bool = False
    env: bool = False
    index_list: list[EnvIndex] = field(default_factory=list)


@dataclass
class InFile:
    """An input redirection or a here-document."""

    filename: str
    here_doc: bool = False
    ambiguous: bool = False
    wildcard: bool = False
    index_list: list[EnvIndex] = field(default_factory=list)
    limiter: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.here_doc:
            self.limiter = self.filename


@dataclass
class OutFile:
    """An output redirection, truncating or appending."""

    filename: str
    append: bool = False
    ambiguous: bool = False
    wildcard: bool = False
    index_list: list[EnvIndex] = field(default_factory=list)


@dataclass
class Command:
    """A node of the command tree.

    Plain nodes hold a simple command; operator, subshell and root nodes
    link to their children through ``left`` and ``right``.
    """

    type_node: NodeType = NodeType.NODE
    left: Command | None = None
    right: Command | None = None
    command_arg: list[CommandArg] = field(default_factory=list)
    in_files: list[InFile] = field(default_factory=list)
    outfiles: list[OutFile] = field(default_factory=list)
    args: list[str] | None = None
    path: str | None = None
    builtin: bool = False
    in_redir: bool = False
    out_redir: bool = False
    dredir: bool = False
    here_doc: bool = False
    dup: bool = False
    infd: int = -1
    outfd: int = -1

    def add_arg(self, arg: CommandArg) -> CommandArg:
        """Append an argument and return it."""
        self.command_arg.append(arg)
        return arg

    def add_in_file(self, file: InFile) -> InFile:
        """Append an input redirection and return it."""
        self.in_files.append(file)
        return file

    def add_out_file(self, file: OutFile) -> OutFile:
        """Append an output redirection and return it."""
        self.outfiles.append(file)
        return file


def node_type_for(token_type: TokenType) -> NodeType:
    """Return the node kind an operator or subshell token builds."""
    return _NODE_TYPES.get(token_type, NodeType.NODE)


def rank_of(token_type: TokenType) -> int:
    """Return the precedence rank of an operator token, 0 for others.

    A pipe binds tighter than ``&&`` and ``||``, which share a rank.
    """
    return int(_RANKS.get(token_type, _Rank.NONE))


def make_operator_node(child: Command | None, token_type: TokenType) -> Command:
    """Build an operator node with ``child`` as its right branch."""
    return Command(type_node=node_type_for(token_type), right=child, left=None)