"""Temporary files that hold the bodies of here-documents."""

from __future__ import annotations

import os
from collections.abc import Callable

from mshell.nodes import InFile

CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
NAME_LENGTH = 9
DEFAULT_DIRECTORY = "/tmp"

_INT_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _c_mod(value: int, divisor: int) -> int:
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


class NameGenerator:
    """Deterministic generator of short file names.

    Each value multiplies a 32-bit state by 50; the state restarts at 1
    whenever it wraps round to zero.
    """

    def __init__(self) -> None:
        self._state = 0

    def next_value(self) -> int:
        """Advance the state and return the next raw value."""
        if not self._state:
            self._state = 1
        self._state = _to_int32(self._state * 50)
        return _c_mod(self._state, _INT_MAX)

    def random_name(self) -> str:
        """Return a name of :data:`NAME_LENGTH` characters from :data:`CHARSET`."""
        return "".join(
            CHARSET[abs(self.next_value()) % 61] for _ in range(NAME_LENGTH)
        )


_shared_names = NameGenerator()


def create_here_doc(
    file: InFile,
    read_body: Callable[[str | None], str | None],
    directory: str | os.PathLike[str] = DEFAULT_DIRECTORY,
    names: NameGenerator | None = None,
) -> str | None:
    """Write a here-document body to a fresh file and point ``file`` at it.

    ``read_body`` receives the limiter and returns the body, or None when
    reading was cancelled; in that case nothing is written and None is
    returned.  Otherwise the path of the new file is returned.  Failing to
    create the file raises :class:`OSError`.
    """
    generator = _shared_names if names is None else names
    path = os.path.join(os.fspath(directory), generator.random_name())
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    file.filename = path
    body = read_body(file.limiter)
    if body is None:
        return None
    descriptor = os.open(path, os.O_CREAT | os.O_WRONLY, 0o777)
    with os.fdopen(descriptor, "w") as handle:
        handle.write(body)
    return path