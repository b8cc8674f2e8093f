"""Minimal printf-style formatting with the conversions used by the game."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator

_CONVERSION = re.compile(r"%([cspdiuxX%])")
_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _to_uint32(value: int) -> int:
    return value & _UINT32_MASK


def _render(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            return value[0] if value else "\0"
        return chr(int(value) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "x":
        return format(_to_uint32(int(value)), "x")
    if spec == "X":
        return format(_to_uint32(int(value)), "X")
    if spec == "u":
        return str(_to_uint32(int(value)))
    # spec == "p"
    if not value:
        return "(nil)"
    return "0x" + format(int(value) & _POINTER_MASK, "x")


def format_message(template: str, *args: Any) -> str:
    """Expand %c %s %p %d %i %u %x %X and %% in ``template``.

    A '%' not followed by one of those letters is kept as it is.
    """
    values = iter(args)
    return _CONVERSION.sub(lambda match: _render(match.group(1), values), template)


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_message(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)