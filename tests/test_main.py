import pygame
import pytest

from sohop.components import Keyboard
from sohop.game import Game
from sohop.main import game_loop, load_level, main
from sohop.systems import FALL_SPEED


class FakeScreen:
    def __init__(self):
        self.blits = []
        self.fills = []

    def fill(self, colour):
        self.fills.append(colour)

    def blit(self, surface, dest):
        self.blits.append((surface, dest))


@pytest.fixture
def sprite(tmp_path):
    path = tmp_path / "sprite.bmp"
    pygame.image.save(pygame.Surface((8, 6)), str(path))
    return path


def test_load_level_places_two_entities():
    game = Game()
    player, other = load_level(game)
    assert game.entities == [player, other]
    assert (player.position.x, player.position.y) == (64, 64)
    assert (other.position.x, other.position.y) == (128, 64)
    assert (player.collision.width, player.collision.height) == (32, 32)
    assert player.keyboard == Keyboard()
    assert other.keyboard is None


def test_load_level_loads_sprite(sprite):
    game = Game()
    player, other = load_level(game, sprite)
    assert (player.image.width, player.image.height) == (8, 6)
    assert other.image.surface.get_size() == (8, 6)


def test_load_level_missing_sprite_raises(tmp_path):
    with pytest.raises((pygame.error, FileNotFoundError)):
        load_level(Game(), tmp_path / "missing.bmp")


def test_game_loop_draws_and_applies_gravity(sprite):
    screen = FakeScreen()
    game = Game(screen=screen)
    player, other = load_level(game, sprite)
    game_loop(game)
    assert screen.fills == [(0, 0, 0)]
    assert [dest for _, dest in screen.blits] == [(64, 64), (128, 64)]
    assert player.position.y == pytest.approx(64 + FALL_SPEED)
    assert other.position.y == pytest.approx(64 + FALL_SPEED)


def test_game_loop_moves_player_with_keys():
    game = Game()
    player, other = load_level(game)
    game.keydown(ord("d"))
    game_loop(game)
    assert player.position.x > 64
    assert other.position.x == 128


def test_main_runs_frames_headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    result = main(["--frames", "2", "--image", str(tmp_path / "missing.xpm")])
    assert result == 0