import os

import pytest

from mshell.nodes import EnvIndex, NodeType
from mshell.parser import ParseError, Parser, parse
from mshell.tokens import State, Token, TokenType


def word(text, state=State.GENERAL):
    return Token(text, state, TokenType.WORD)


def space():
    return Token(" ", State.GENERAL, TokenType.WHITE_SPACE)


def op(text, token_type):
    return Token(text, State.GENERAL, token_type)


PIPE = lambda: op("|", TokenType.PIPE_LINE)  # noqa: E731
AND = lambda: op("&&", TokenType.AND)  # noqa: E731
OPEN = lambda: op("(", TokenType.START_SUBSHELL)  # noqa: E731
CLOSE = lambda: op(")", TokenType.END_SUBSHELL)  # noqa: E731


def args(command):
    return [arg.content for arg in command.command_arg]


def test_simple_command():
    root = parse([word("ls"), space(), word("-l")])
    assert root.type_node is NodeType.ROOT_NODE
    assert args(root.right) == ["ls", "-l"]
    assert root.left is None


def test_empty_input_gives_empty_command():
    root = parse([])
    assert root.type_node is NodeType.ROOT_NODE
    assert root.right.command_arg == []


def test_pipe_puts_earlier_command_on_right():
    root = parse([word("a"), space(), PIPE(), space(), word("b")])
    assert root.type_node is NodeType.PIPE_LINE_NODE
    assert args(root.right) == ["a"]
    assert args(root.left) == ["b"]


def test_pipe_binds_tighter_than_and():
    root = parse([word("a"), AND(), word("b"), PIPE(), word("c")])
    assert root.type_node is NodeType.AND_NODE
    assert args(root.right) == ["a"]
    assert root.left.type_node is NodeType.PIPE_LINE_NODE
    assert args(root.left.right) == ["b"]
    assert args(root.left.left) == ["c"]


def test_and_after_pipe_wraps_whole_pipeline():
    root = parse([word("a"), PIPE(), word("b"), AND(), word("c")])
    assert root.type_node is NodeType.AND_NODE
    assert root.right.type_node is NodeType.PIPE_LINE_NODE
    assert args(root.right.right) == ["a"]
    assert args(root.right.left) == ["b"]
    assert args(root.left) == ["c"]


def test_output_redirection():
    tokens = [word("echo"), space(), op(">", TokenType.REDIR_OUT), space(), word("out")]
    command = parse(tokens).right
    assert args(command) == ["echo"]
    assert [(f.filename, f.append) for f in command.outfiles] == [("out", False)]
    assert command.out_redir is False


def test_append_redirection():
    tokens = [word("echo"), op(">>", TokenType.DREDIR_OUT), word("log")]
    command = parse(tokens).right
    assert [(f.filename, f.append) for f in command.outfiles] == [("log", True)]
    assert command.dredir is False


def test_quoted_output_filename():
    tokens = [
        op(">", TokenType.REDIR_OUT),
        op('"', TokenType.DOUBLE_QUOTE),
        word("my", State.IN_DQUOTE),
        Token(" ", State.IN_DQUOTE, TokenType.WHITE_SPACE),
        word("file", State.IN_DQUOTE),
        op('"', TokenType.DOUBLE_QUOTE),
    ]
    command = parse(tokens).right
    assert [f.filename for f in command.outfiles] == ["my file"]
    assert command.command_arg == []


def test_input_redirection_keeps_env_indexes():
    tokens = [word("cat"), op("<", TokenType.REDIR_IN), Token("$F", State.GENERAL, TokenType.ENV)]
    command = parse(tokens).right
    assert [f.filename for f in command.in_files] == ["$F"]
    assert command.in_files[0].index_list == [EnvIndex(0, len("$F"))]
    assert command.in_files[0].here_doc is False
    assert command.in_redir is False


def test_argument_env_indexes():
    tokens = [word("echo"), space(), word("a"), Token("$X", State.GENERAL, TokenType.ENV)]
    command = parse(tokens).right
    assert command.command_arg[1].env is True
    assert command.command_arg[1].index_list == [EnvIndex(len("a"), len("$X"))]


def test_ambiguity_check_receives_target_index():
    seen = []

    def check(tokens, index):
        seen.append(tokens[index].content)
        return True

    tokens = [word("ls"), op(">", TokenType.REDIR_OUT), word("target")]
    command = Parser(is_ambiguous=check).parse(tokens)
    assert seen == ["target"]
    assert command.right.outfiles[0].ambiguous is True


def test_subshell_with_redirection():
    tokens = [
        OPEN(), word("a"), PIPE(), word("b"), CLOSE(),
        op(">", TokenType.REDIR_OUT), word("out"),
    ]
    root = parse(tokens)
    sub = root.right
    assert sub.type_node is NodeType.SUBSHELL_NODE
    assert sub.right.type_node is NodeType.PIPE_LINE_NODE
    assert args(sub.right.right) == ["a"]
    assert args(sub.right.left) == ["b"]
    assert [f.filename for f in sub.outfiles] == ["out"]


def test_plain_subshell_drops_inner_root():
    root = parse([OPEN(), word("a"), CLOSE()])
    sub = root.right
    assert sub.type_node is NodeType.SUBSHELL_NODE
    assert sub.right.type_node is NodeType.NODE
    assert args(sub.right) == ["a"]


def test_nested_subshells():
    root = parse([OPEN(), OPEN(), word("a"), CLOSE(), CLOSE(), AND(), word("b")])
    assert root.type_node is NodeType.AND_NODE
    outer = root.right
    assert outer.type_node is NodeType.SUBSHELL_NODE
    assert outer.right.type_node is NodeType.SUBSHELL_NODE
    assert args(outer.right.right) == ["a"]
    assert args(root.left) == ["b"]


def test_here_doc_writes_body():
    limiters = []

    def reader(limiter):
        limiters.append(limiter)
        return "hello\n"

    tokens = [word("cat"), space(), op("<<", TokenType.HERE_DOC), space(), word("EOF")]
    command = parse(tokens, reader).right
    file = command.in_files[0]
    try:
        assert limiters == ["EOF"]
        assert file.here_doc is True
        assert file.limiter == "EOF"
        with open(file.filename) as handle:
            assert handle.read() == "hello\n"
        assert command.here_doc is False
    finally:
        os.unlink(file.filename)


def test_cancelled_here_doc_raises():
    tokens = [word("cat"), op("<<", TokenType.HERE_DOC), word("EOF")]
    with pytest.raises(ParseError) as info:
        parse(tokens, lambda limiter: None)
    assert info.value.status == 1


def test_here_doc_without_reader_raises():
    tokens = [op("<<", TokenType.HERE_DOC), word("EOF")]
    with pytest.raises(ParseError):
        Parser().parse(tokens)