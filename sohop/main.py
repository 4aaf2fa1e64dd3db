"""Level setup, the per-frame loop and the window's event loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .components import Collision, Entity, Gravity, Image, Keyboard, Position
from .game import Game
from .systems import (
    collision_system,
    draw_system,
    gravity_system,
    jump_system,
    movement_system,
)

WINDOW_SIZE = (1080, 768)
TITLE = "joguinho"
DEFAULT_IMAGE = Path("assets/idle/idle01.xpm")
BACKGROUND = (0, 0, 0)


def game_loop(game: Game) -> None:
    """Clear the screen and run every system on every entity once."""
    if game.screen is not None:
        game.screen.fill(BACKGROUND)
    for entity in game.entities:
        draw_system(game, entity)
        movement_system(game, entity)
        collision_system(game, entity)
        jump_system(game, entity)
        gravity_system(game, entity)


def _load_image(image_path: Optional[Union[str, Path]]) -> Optional[Image]:
    if image_path is None:
        return None
    surface = pygame.image.load(str(image_path))
    width, height = surface.get_size()
    return Image(surface, width, height)


def load_level(game: Game, image_path: Optional[Union[str, Path]] = None) -> list[Entity]:
    """Place the keyboard player and a second, passive entity in the game."""
    player = Entity(
        position=Position(64, 64),
        image=_load_image(image_path),
        gravity=Gravity(),
        keyboard=Keyboard(),
        collision=Collision(32, 32),
    )
    other = Entity(
        position=Position(128, 64),
        image=_load_image(image_path),
        gravity=Gravity(),
        collision=Collision(32, 32),
    )
    return [game.add_entity(player), game.add_entity(other)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="sohop")
    parser.add_argument("--image", default=str(DEFAULT_IMAGE), help="sprite for the entities")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        game = Game(screen=screen)
        image_path = Path(args.image)
        load_level(game, image_path if image_path.is_file() else None)

        frame = 0
        running = True
        while running and (args.frames is None or frame < args.frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.keydown(event.key)
                elif event.type == pygame.KEYUP:
                    game.keyup(event.key)
            game_loop(game)
            pygame.display.flip()
            frame += 1
    finally:
        pygame.quit()
    return 0