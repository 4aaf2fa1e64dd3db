"""Systems that update entities each frame."""

from __future__ import annotations

from .components import Entity, Position
from .game import Game

GRAVITY_PULL = 0.060
FALL_SPEED = 0.08
FLOOR_Y = 300
JUMP_VELOCITY = -3.2
WALK_SPEED = 0.07
COLLISION_MESSAGE = "Colidindo"


def collision_checker(a: Entity, b: Entity) -> bool:
    """Whether the hit boxes of two entities overlap."""
    if a.position is None or a.collision is None or b.position is None or b.collision is None:
        return False
    ax, ay = a.position.x, a.position.y
    bx, by = b.position.x, b.position.y
    return (
        ax < bx + b.collision.width
        and ax + a.collision.width > bx
        and ay < by + b.collision.height
        and ay + a.collision.height > by
    )


def collision_system(game: Game, entity: Entity) -> list[Entity]:
    """Report every other entity the given one overlaps and return them."""
    if entity.position is None or entity.collision is None:
        return []
    hits = []
    for other in game.entities:
        if other is entity or other.position is None or other.collision is None:
            continue
        if collision_checker(entity, other):
            print(COLLISION_MESSAGE, end="")
            hits.append(other)
    return hits


def draw_system(game: Game, entity: Entity) -> None:
    """Blit the entity's image at its position on the game's screen."""
    if entity.image is None or entity.position is None or game.screen is None:
        return
    game.screen.blit(entity.image.surface, (int(entity.position.x), int(entity.position.y)))


def gravity_system(game: Game, entity: Entity) -> None:
    """Apply a jump's rise, or let the entity fall down to the floor."""
    gravity, position = entity.gravity, entity.position
    if position is None or gravity is None:
        return
    if gravity.is_jumping:
        position.y += gravity.velocity
        gravity.velocity += GRAVITY_PULL
        if gravity.velocity >= 0.0:
            gravity.is_jumping = False
    elif position.y < FLOOR_Y:
        position.y += FALL_SPEED
    else:
        gravity.can_jump = True


def jump_system(game: Game, entity: Entity) -> None:
    """Start a jump when one was requested and the entity may jump."""
    gravity = entity.gravity
    if entity.keyboard is None or gravity is None or entity.position is None:
        return
    if gravity.jump_request and gravity.can_jump:
        gravity.is_jumping = True
        gravity.can_jump = False
        gravity.velocity = JUMP_VELOCITY
    gravity.jump_request = False


def movement_system(game: Game, entity: Entity) -> None:
    """Walk a keyboard entity left or right unless it would hit another."""
    if entity.keyboard is None or entity.position is None:
        return
    new_x = entity.position.x
    if game.is_pressed(ord("d")):
        new_x += WALK_SPEED
    elif game.is_pressed(ord("a")):
        new_x -= WALK_SPEED
    probe = Entity(position=Position(new_x, entity.position.y), collision=entity.collision)
    blocked = any(
        collision_checker(probe, other) for other in game.entities if other is not entity
    )
    if not blocked:
        entity.position.x = new_x