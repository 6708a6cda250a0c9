"""Expansion of ``*`` patterns against the names in a directory."""

from __future__ import annotations

import os

from mshell.strutils import split

WILDCARD_MARKER = "\xef"
"""Character the parser uses to stand for an unquoted ``*``."""


def match_pattern(name: str, pattern: str, marker: str = "*") -> bool:
    """Tell whether ``name`` matches ``pattern``.

    Each ``marker`` character in the pattern matches any run of
    characters, including an empty one; every other character matches
    itself.
    """
    name_pos = 0
    pattern_pos = 0
    star_pos = -1
    star_name_pos = 0
    while name_pos < len(name):
        if pattern_pos < len(pattern) and pattern[pattern_pos] == marker:
            star_pos = pattern_pos
            star_name_pos = name_pos
            pattern_pos += 1
        elif pattern_pos < len(pattern) and pattern[pattern_pos] == name[name_pos]:
            name_pos += 1
            pattern_pos += 1
        elif star_pos != -1:
            star_name_pos += 1
            name_pos = star_name_pos
            pattern_pos = star_pos + 1
        else:
            return False
    while pattern_pos < len(pattern) and pattern[pattern_pos] == marker:
        pattern_pos += 1
    return pattern_pos == len(pattern)


def directory_entries(directory: str | os.PathLike[str] | None = None) -> list[str]:
    """List the names in ``directory`` that do not start with a dot.

    The current working directory is used when ``directory`` is None.
    Names come in the order the directory yields them.
    """
    path = os.getcwd() if directory is None else directory
    with os.scandir(path) as entries:
        return [entry.name for entry in entries if not entry.name.startswith(".")]


def expand_pattern(
    pattern: str,
    marker: str = "*",
    directory: str | os.PathLike[str] | None = None,
) -> str:
    """Expand ``pattern`` to the space-joined names it matches.

    When nothing matches, the pattern is returned with every
    :data:`WILDCARD_MARKER` turned back into ``*``.
    """
    matches = [
        name for name in directory_entries(directory)
        if match_pattern(name, pattern, marker)
    ]
    if not matches:
        return pattern.replace(WILDCARD_MARKER, "*")
    return " ".join(matches)


def _expand_tab_word(word: str, directory: str | os.PathLike[str] | None) -> str:
    parts = []
    for piece in split(word, "\t"):
        if "*" in piece:
            parts.append(expand_pattern(piece, "*", directory))
        else:
            parts.append(piece)
        parts.append(" ")
    return "".join(parts)


def expand_wildcards(text: str, directory: str | os.PathLike[str] | None = None) -> str:
    """Expand every ``*`` pattern among the words of ``text``.

    Words are separated by spaces; a word holding tabs is further split
    on them, and each of its pieces is followed by a space.
    """
    if " " not in text and "\t" not in text:
        return expand_pattern(text, "*", directory)
    expanded = []
    for word in split(text, " "):
        if "\t" in word:
            expanded.append(_expand_tab_word(word, directory))
        else:
            expanded.append(expand_pattern(word, "*", directory))
    return " ".join(expanded)