"""Checks that a loaded map is a playable level."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from solong.mapfile import TILE_SCALE, TILE_SIZE, MapError, TileMap

MANDATORY_TILES = "10CEP"
BONUS_TILES = "10CEPN"
MAX_WINDOW_WIDTH = 1920
MAX_WINDOW_HEIGHT = 1000


@dataclass
class MapSummary:
    """What a scan of the map found: the player's tile and the collectibles."""

    player: tuple[int, int] | None = None
    collectibles: int = 0

    @property
    def start_position(self) -> tuple[int, int]:
        """The player's starting position in pixels."""
        if self.player is None:
            raise ValueError("the map has no player")
        col, row = self.player
        return col * TILE_SIZE, row * TILE_SIZE


def is_rectangular(rows: Sequence[str]) -> bool:
    """Whether every row is as long as the first one."""
    if not rows:
        return True
    width = len(rows[0])
    return all(len(row) == width for row in rows[1:])


def enclosed_in_walls(tilemap: TileMap) -> bool:
    """Whether the border of the map is made of walls only."""
    rows = tilemap.rows
    if not rows:
        return False
    top, bottom = rows[0], rows[-1]
    if any(a != "1" or b != "1" for a, b in zip(top, bottom)):
        return False
    return all(row and row[0] == "1" and row[-1] == "1" for row in rows[1:-1])


def has_one_exit_and_player(rows: Sequence[str]) -> bool:
    """Whether the map holds exactly one exit and exactly one player."""
    exits = sum(row.count("E") for row in rows)
    players = sum(row.count("P") for row in rows)
    return exits == 1 and players == 1


def scan_tiles(rows: Sequence[str], allowed: str) -> MapSummary | None:
    """Count collectibles and find the player; ``None`` on a tile not in ``allowed``."""
    summary = MapSummary()
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile not in allowed:
                return None
            if tile == "P":
                summary.player = (x, y)
            elif tile == "C":
                summary.collectibles += 1
    return summary


def reachable(
    tilemap: TileMap, start: tuple[int, int], bonus: bool = False
) -> tuple[int, int]:
    """Flood the map from ``start``; return (collectibles reached, exits reached).

    An exit can be reached but not walked through; in bonus maps enemies block
    the way as well.
    """
    grid = [list(row) for row in tilemap.rows]
    width, height = tilemap.width, tilemap.height
    collectibles = exits = 0
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < width and 0 <= y < height) or x >= len(grid[y]):
            continue
        tile = grid[y][x]
        if tile in ("1", "V"):
            continue
        if tile == "C":
            collectibles += 1
        if tile == "E" or (bonus and tile == "N"):
            if tile == "E":
                exits += 1
            grid[y][x] = "1"
            continue
        grid[y][x] = "V"
        pending.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return collectibles, exits


def parse_map(tilemap: TileMap, bonus: bool = False) -> MapSummary:
    """Run every check on ``tilemap`` in turn; raise :class:`MapError` on the first failure."""
    rows = tilemap.rows
    if not is_rectangular(rows):
        raise MapError(4, "The map is not rectangular!")
    summary = scan_tiles(rows, BONUS_TILES if bonus else MANDATORY_TILES)
    if summary is None:
        listed = "1,E,C,0,P,N" if bonus else "1,E,C,0,P"
        raise MapError(5, f"The map has invalid characters! (other than {listed})")
    if not enclosed_in_walls(tilemap):
        raise MapError(6, "The map is not enclosed in walls!")
    if not has_one_exit_and_player(rows) or summary.player is None:
        raise MapError(7, "The map must contain exactly one player and one exit!")
    if summary.collectibles < 1:
        raise MapError(8, "The map must have at least one collectible!")
    found, exits = reachable(tilemap, summary.player, bonus)
    if found != summary.collectibles or exits != 1:
        raise MapError(
            9, "No valid path in the map: the player can't reach the exit!"
        )
    if tilemap.pixel_width * TILE_SCALE > MAX_WINDOW_WIDTH:
        raise MapError(10, "The map exceeds the maximum window width!")
    if tilemap.pixel_height * TILE_SCALE > MAX_WINDOW_HEIGHT:
        raise MapError(11, "The map exceeds the maximum window height!")
    return summary