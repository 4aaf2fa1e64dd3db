from sohop.components import Collision, Entity, Gravity, Image, Keyboard, Position


def test_entity_defaults_have_no_components():
    entity = Entity()
    assert (
        entity.position,
        entity.image,
        entity.gravity,
        entity.keyboard,
        entity.collision,
    ) == (None, None, None, None, None)


def test_entities_compare_by_identity():
    a = Entity(position=Position(1, 2))
    b = Entity(position=Position(1, 2))
    assert a != b
    assert a == a
    assert a in [a]
    assert b not in [a]


def test_gravity_starts_ready_to_jump():
    gravity = Gravity()
    assert gravity.can_jump is True
    assert gravity.is_jumping is False
    assert gravity.velocity == 0.0
    assert gravity.jump_request is False


def test_position_keeps_coordinates_and_compares_by_value():
    position = Position(64, 128)
    assert (position.x, position.y) == (64, 128)
    assert position == Position(64, 128)
    assert (Position(1, 2) == Position(2, 1)) is False


def test_collision_keeps_size_and_compares_by_value():
    collision = Collision(32, 16)
    assert (collision.width, collision.height) == (32, 16)
    assert collision == Collision(32, 16)
    assert (Collision(32, 16) == Collision(16, 32)) is False


def test_keyboard_instances_are_equal():
    assert [Keyboard(), Keyboard()].count(Keyboard()) == 2


def test_image_keeps_its_fields():
    surface = object()
    image = Image(surface, 8, 4)
    assert image.surface is surface
    assert (image.width, image.height) == (8, 4)