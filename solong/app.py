"""The game window: command line, event loop and frame display."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import numpy as np
import pygame

from solong.game import Game, GameOver, Key
from solong.mapfile import TILE_SCALE, MapError, check_arguments, read_map
from solong.render import Canvas, SpriteSet, draw_move_count, draw_scene
from solong.textures import load_sprites
from solong.validation import parse_map

WINDOW_TITLE = "Welcome to my 2D game"
FRAME_RATE = 60
BONUS_FLAG = "--bonus"

_KEYS = {
    pygame.K_w: Key.UP,
    pygame.K_UP: Key.UP,
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def key_from_pygame(keycode: int) -> Key:
    """The game key for a pygame key code."""
    return _KEYS.get(keycode, Key.OTHER)


def render_frame(game: Game, sprites: SpriteSet) -> Canvas:
    """Advance the animations and draw one full frame."""
    game.tick()
    canvas = Canvas(
        game.tilemap.pixel_width * TILE_SCALE, game.tilemap.pixel_height * TILE_SCALE
    )
    draw_scene(canvas, game, sprites)
    if game.bonus:
        draw_move_count(canvas, game.moves, sprites.digits)
    return canvas


def _to_surface(canvas: Canvas) -> pygame.Surface:
    pixels = canvas.pixels
    rgb = np.stack(
        ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
    ).astype(np.uint8)
    return pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))


def _report_error(message: str) -> None:
    print("\033[1;31mError!\n\033[0m", end="")
    print(f"\033[1m{message}\033[0m", flush=True)


def run(path: str, bonus: bool = False) -> int:
    """Load the map at ``path`` and play it; return the exit status."""
    try:
        tilemap = read_map(path)
        summary = parse_map(tilemap, bonus)
    except MapError as error:
        _report_error(error.message)
        return error.status
    game = Game(tilemap, summary, bonus)
    pygame.init()
    try:
        sprites = load_sprites(bonus)
        window = pygame.display.set_mode(
            (tilemap.pixel_width * TILE_SCALE, tilemap.pixel_height * TILE_SCALE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.close()
                elif event.type == pygame.KEYDOWN:
                    message = game.press(key_from_pygame(event.key))
                    if message:
                        print(message, end="", flush=True)
            window.blit(_to_surface(render_frame(game, sprites)), (0, 0))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    except GameOver as over:
        print(over.message, end="", flush=True)
        return over.status
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; ``--bonus`` turns on the bonus game."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    args = [arg for arg in args if arg != BONUS_FLAG]
    try:
        path = check_arguments(args)
    except MapError as error:
        _report_error(error.message)
        return error.status
    return run(path, bonus)