"""A small printf supporting the c, s, d, i, u, x, X and p conversions."""

from __future__ import annotations

import sys

_MASKS = {"x": 0xFFFFFFFF, "X": 0xFFFFFFFF, "p": 0xFFFFFFFFFFFFFFFF}


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def format_hex(number: int, spec: str) -> str:
    """Render ``number`` in hexadecimal for the ``x``, ``X`` or ``p`` spec."""
    if spec not in _MASKS:
        raise ValueError(f"unsupported hexadecimal spec: {spec!r}")
    value = int(number) & _MASKS[spec]
    if spec == "X":
        return f"{value:X}"
    if spec == "p":
        return f"0x{value:x}"
    return f"{value:x}"


def _convert(spec: str, arg: object) -> str:
    if spec == "c":
        if isinstance(arg, str):
            return arg[:1]
        return chr(int(arg) & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in "di":
        return str(_to_int32(int(arg)))
    if spec == "u":
        return str(int(arg) & 0xFFFFFFFF)
    return format_hex(int(arg), spec)


def format_printf(fmt: str, *args: object) -> str:
    """Format ``fmt`` with ``args`` and return the resulting string.

    Unknown conversions print the conversion character itself, ``%%``
    prints a percent sign and a lone trailing ``%`` is dropped.
    """
    parts: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
        elif spec in "csdiuxXp":
            try:
                arg = next(remaining)
            except StopIteration:
                raise ValueError(f"missing argument for %{spec}") from None
            parts.append(_convert(spec, arg))
        else:
            parts.append(spec)
    return "".join(parts)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)