"""Reading map files into rows of tiles."""

from __future__ import annotations

import os
import re
from typing import Iterable, Union

from .game import MapError

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def parse_rows(lines: Iterable[str]) -> list[str]:
    """Turn raw lines into map rows, checking that the map is rectangular."""
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    if not rows:
        raise MapError("The file is empty.")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("The map should be rectangular.")
    return rows


def read_map(path: Union[str, os.PathLike]) -> list[str]:
    """Read the map file at ``path`` and return its rows."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("Couldn't open file.") from exc
    return parse_rows(_LINE.findall(data.decode("latin-1")))