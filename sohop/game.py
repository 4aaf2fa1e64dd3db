"""Game state: the entity list and the keyboard map."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .components import Entity

MAX_KEY_MAP = 0x10000
MAX_ENTITIES = 10
JUMP_KEY = ord("w")


class Game:
    """Holds the world's entities, the pressed keys and the drawing target."""

    def __init__(self, screen: Any = None, entities: Optional[Iterable[Entity]] = None):
        self.screen = screen
        self.entities: list[Entity] = []
        self._pressed: set[int] = set()
        for entity in entities or ():
            self.add_entity(entity)

    def add_entity(self, entity: Entity) -> Entity:
        """Add an entity to the world; the world holds at most MAX_ENTITIES."""
        if len(self.entities) >= MAX_ENTITIES:
            raise RuntimeError(f"a game holds at most {MAX_ENTITIES} entities")
        self.entities.append(entity)
        return entity

    def is_pressed(self, keycode: int) -> bool:
        """Whether the key is currently held down."""
        return keycode in self._pressed

    def keydown(self, keycode: int) -> None:
        """Record a key press; 'w' asks the first entity to jump."""
        if 0 <= keycode < MAX_KEY_MAP:
            self._pressed.add(keycode)
        if keycode == JUMP_KEY and self.entities:
            player = self.entities[0]
            if player.keyboard is not None and player.gravity is not None:
                player.gravity.jump_request = True

    def keyup(self, keycode: int) -> None:
        """Record a key release."""
        self._pressed.discard(keycode)