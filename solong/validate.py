"""Checks that a map is well formed and can be finished."""

from __future__ import annotations

from typing import Optional, Sequence

from .game import COLLECTABLE, EXIT, FLOOR, PLAYER, WALL, MapError

_ALLOWED = frozenset((WALL, PLAYER, EXIT, FLOOR, COLLECTABLE))


def check_map_name(name: str) -> None:
    """Require a '.ber' file extension."""
    if len(name) < 4 or not name.endswith(".ber"):
        raise MapError("Wrong file extension.")


def check_map_wall(rows: Sequence[str]) -> None:
    """Require the outline of the map to be walls."""
    edges = [rows[0], rows[-1]]
    edges.extend(row[0] + row[-1] for row in rows)
    if any(tile != WALL for edge in edges for tile in edge):
        raise MapError("Missing walls on map outline.")


def check_map_contents(rows: Sequence[str]) -> None:
    """Reject any tile that is not one of the known ones."""
    if any(tile not in _ALLOWED for row in rows for tile in row):
        raise MapError("Found undefined characters.")


def check_asset_count(rows: Sequence[str]) -> int:
    """Require one player, one exit and a collectable; return the collectables."""
    players = sum(row.count(PLAYER) for row in rows)
    exits = sum(row.count(EXIT) for row in rows)
    collectables = sum(row.count(COLLECTABLE) for row in rows)
    if players != 1 or exits != 1 or collectables < 1:
        raise MapError(
            "Map should have one player, one exit and at least one collectables."
        )
    return collectables


def find_player(rows: Sequence[str]) -> Optional[tuple[int, int]]:
    """Return the (x, y) of the first player tile, or None."""
    for y, row in enumerate(rows):
        if PLAYER in row:
            return row.index(PLAYER), y
    return None


def check_paths(rows: Sequence[str], start: tuple[int, int]) -> None:
    """Require every collectable and the exit to be reachable from ``start``.

    The exit is a dead end: the search does not pass through it.
    """
    remaining = sum(row.count(COLLECTABLE) + row.count(EXIT) for row in rows)
    seen: set[tuple[int, int]] = set()
    stack = [start]
    while stack and remaining:
        x, y = stack.pop()
        if (x, y) in seen or rows[y][x] == WALL:
            continue
        seen.add((x, y))
        tile = rows[y][x]
        if tile in (COLLECTABLE, EXIT):
            remaining -= 1
        if tile == EXIT:
            continue
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    if remaining:
        raise MapError("Map is imposible to navigate.")


def check_map(name: str, rows: Sequence[str]) -> tuple[int, int]:
    """Run every check in order and return the player's starting position."""
    if not rows or not rows[0]:
        raise MapError("Map is invalid.")
    check_map_name(name)
    check_map_wall(rows)
    check_map_contents(rows)
    check_asset_count(rows)
    start = find_player(rows)
    assert start is not None
    check_paths(rows, start)
    return start