"""Game state: player movement, collisions, pickups and sprite animation."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from solong.mapfile import TILE_SIZE, TileMap
from solong.validation import MapSummary

SPEED = 12
PLAYER_MARGIN = 9
COIN_FRAMES = 6
ENEMY_FRAMES = 8
FRAME_DELAY = 10

GOODBYE = "\033[1;33m\nYou can always come back!\n\033[0m"
BONUS_GOODBYE = "\033[1;33mYou can always come back!\n\033[0m"
VICTORY = "\033[1;32m\nCongratulations! YOU HAVE WON!\n\033[0m"
DEFEAT = "\033[1;31m\nGAME OVER!\033[0m\n"


class Key(enum.Enum):
    """The keys the game reacts to; anything else is ``OTHER``."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    OTHER = "other"


_STEPS = {
    Key.UP: (0, -SPEED),
    Key.DOWN: (0, SPEED),
    Key.LEFT: (-SPEED, 0),
    Key.RIGHT: (SPEED, 0),
}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned box in map pixels."""

    x: int
    y: int
    w: int
    h: int


class GameOver(Exception):
    """The game has ended; ``status`` is the exit status, ``message`` the text to show."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def overlaps(a: Rect, b: Rect) -> bool:
    """Whether two boxes share any area; touching edges do not count."""
    if a.x + a.w <= b.x or a.x >= b.x + b.w:
        return False
    if a.y + a.h <= b.y or a.y >= b.y + b.h:
        return False
    return True


def tile_shape(tile: str, col: int, row: int, bonus: bool = False) -> Rect | None:
    """The hit box of ``tile`` at the given cell, or ``None`` if it has none."""
    left, top = col * TILE_SIZE, row * TILE_SIZE
    if tile == "1":
        return Rect(left, top, TILE_SIZE, TILE_SIZE)
    if tile == "E":
        return Rect(left + 3, top, TILE_SIZE - 3 - 4, TILE_SIZE)
    if tile == "C":
        if bonus:
            return Rect(left + 3, top + 3, TILE_SIZE - 3 - 3, TILE_SIZE - 3 - 3)
        return Rect(left + 7, top + 11, TILE_SIZE - 7 - 7, TILE_SIZE - 11 - 11)
    if tile == "N" and bonus:
        return Rect(left + 5, top + 5, TILE_SIZE - 5 - 5, TILE_SIZE - 5 - 6)
    return None


class Game:
    """A running level: where the player is, what is collected, how many moves."""

    def __init__(self, tilemap: TileMap, summary: MapSummary, bonus: bool = False) -> None:
        self.tilemap = tilemap
        self.bonus = bonus
        self.x, self.y = summary.start_position
        self.total_collectibles = summary.collectibles
        self.collected = 0
        self.moves = 0
        self.facing_left = False
        self.coin_frame = 0
        self.enemy_frame = 0
        self._coin_ticks = 0
        self._enemy_ticks = 0

    @property
    def exit_open(self) -> bool:
        """Whether every collectible has been picked up."""
        return self.collected == self.total_collectibles

    def _player_box(self, x: int, y: int) -> Rect:
        size = TILE_SIZE - 2 * PLAYER_MARGIN
        return Rect(x + PLAYER_MARGIN, y + PLAYER_MARGIN, size, size)

    def check_collision(self, x: int, y: int) -> bool:
        """Whether the player at (x, y) would be blocked.

        Tiles touched on the way are acted on: collectibles are picked up,
        an enemy ends the game and an open exit wins it.
        """
        player = self._player_box(x, y)
        for row_index, row in enumerate(self.tilemap.rows):
            for col, tile in enumerate(row):
                shape = tile_shape(tile, col, row_index, self.bonus)
                if shape is None or not overlaps(player, shape):
                    continue
                if tile == "1" or (tile == "E" and not self.exit_open):
                    return True
                self._enter(tile, col, row_index)
        return False

    def _enter(self, tile: str, col: int, row: int) -> None:
        if tile == "C":
            self.collected += 1
            self.tilemap.replace(col, row, "0")
            return
        if tile == "N":
            raise GameOver(1, DEFEAT)
        if tile == "E" and self.exit_open:
            self.moves += 1
            if self.bonus:
                raise GameOver(0, VICTORY)
            raise GameOver(0, f"\r\033[KTotal moves: {self.moves}" + VICTORY)

    def press(self, key: Key) -> str | None:
        """Handle a key press; return text to show on the terminal, if any."""
        if key is Key.ESCAPE:
            self.close()
        dx, dy = _STEPS.get(key, (0, 0))
        if key is Key.LEFT:
            self.facing_left = True
        elif key is Key.RIGHT:
            self.facing_left = False
        new_x, new_y = self.x + dx, self.y + dy
        if self.check_collision(new_x, new_y):
            return None
        message = None
        if key in _STEPS and not self.check_collision(new_x, new_y):
            self.moves += 1
            if not self.bonus:
                message = f"\r\033[KTotal moves: {self.moves}"
        self.x, self.y = new_x, new_y
        return message

    def close(self) -> None:
        """Leave the game."""
        raise GameOver(0, BONUS_GOODBYE if self.bonus else GOODBYE)

    def tick(self) -> None:
        """Advance the coin and enemy animations by one frame."""
        if not self.bonus:
            return
        if self._coin_ticks % FRAME_DELAY == 0:
            self.coin_frame = (self.coin_frame + 1) % COIN_FRAMES
        self._coin_ticks += 1
        if self._enemy_ticks % FRAME_DELAY == 0:
            self.enemy_frame = (self.enemy_frame + 1) % ENEMY_FRAMES
        self._enemy_ticks += 1