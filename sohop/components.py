"""Components that entities are built from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Position:
    """Top-left corner of an entity, in pixels."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Collision:
    """Size of an entity's axis-aligned hit box."""

    width: float = 0.0
    height: float = 0.0


@dataclass
class Keyboard:
    """Marker component: the entity is driven by the keyboard."""


@dataclass
class Image:
    """A drawable surface together with its size."""

    surface: Any
    width: int
    height: int


@dataclass
class Gravity:
    """Vertical motion state of an entity that falls and jumps."""

    can_jump: bool = True
    is_jumping: bool = False
    velocity: float = 0.0
    jump_request: bool = False


@dataclass(eq=False)
class Entity:
    """A game object; each component is optional.

    Entities compare by identity, so two entities with equal components
    are still different objects in the world.
    """

    position: Optional[Position] = None
    image: Optional[Image] = None
    gravity: Optional[Gravity] = None
    keyboard: Optional[Keyboard] = None
    collision: Optional[Collision] = None