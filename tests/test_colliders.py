import pytest

from loopzone.actor import Actor
from loopzone.colliders import (
    AccelObj,
    BoxCollider,
    Collider,
    PixelCollider,
    SphereCollider,
    box_to_box,
    sphere_to_box,
    sphere_to_sphere,
)
from loopzone.enums import (
    ColliderType,
    CollisionLayer,
    ComponentType,
    PixelColliderType,
    PixelDirection,
)
from loopzone.geometry import Vector


def _box(x, y, w, h):
    actor = Actor(Vector(x, y))
    box = BoxCollider(Vector(w, h))
    actor.add_component(box)
    return box


def _sphere(x, y, radius):
    actor = Actor(Vector(x, y))
    sphere = SphereCollider(radius)
    actor.add_component(sphere)
    return sphere


class _Registry:
    def __init__(self):
        self.added = []

    def add_collider(self, collider):
        self.added.append(collider)


def test_layer_flags_control_base_check():
    mine = Collider(ColliderType.BOX)
    other = Collider(ColliderType.BOX)
    other.collision_layer = CollisionLayer.GROUND
    assert mine.check_collision(other) is False
    mine.add_collision_layer(CollisionLayer.GROUND)
    assert mine.check_collision(other) is True
    mine.remove_collision_layer(CollisionLayer.GROUND)
    assert mine.check_collision(other) is False


def test_reset_collision_flag_clears_all_layers():
    collider = Collider(ColliderType.BOX)
    collider.add_collision_layer(CollisionLayer.WALL)
    collider.add_collision_layer(CollisionLayer.GROUND)
    collider.reset_collision_flag()
    assert collider.collision_flag == 0


def test_remove_layer_keeps_other_layers():
    collider = Collider(ColliderType.BOX)
    collider.add_collision_layer(CollisionLayer.WALL)
    collider.add_collision_layer(CollisionLayer.GROUND)
    collider.remove_collision_layer(CollisionLayer.GROUND)
    wall = Collider(ColliderType.BOX)
    wall.collision_layer = CollisionLayer.WALL
    assert collider.check_collision(wall) is True


def test_default_layer_is_object():
    assert Collider(ColliderType.SPHERE).collision_layer is CollisionLayer.OBJECT


def test_box_rect_is_centred_on_owner():
    box = _box(100, 50, 40, 20)
    rect = box.rect()
    assert rect.right - rect.left == 40
    assert rect.bottom - rect.top == 20
    assert rect.left + rect.right == 200
    assert rect.top + rect.bottom == 100


def test_box_rect_without_owner_raises():
    with pytest.raises(RuntimeError):
        BoxCollider(Vector(10, 10)).rect()


def test_overlapping_boxes_collide():
    first = _box(0, 0, 40, 40)
    second = _box(30, 10, 40, 40)
    assert box_to_box(first, second) is True
    assert first.check_collision(second) is True
    assert second.check_collision(first) is True


def test_boxes_sharing_only_an_edge_do_not_collide():
    first = _box(0, 0, 40, 40)
    second = _box(40, 0, 40, 40)
    assert first.check_collision(second) is False


def test_box_check_ignores_layer_flags():
    first = _box(0, 0, 40, 40)
    second = _box(5, 5, 40, 40)
    assert first.collision_flag == 0
    assert first.check_collision(second) is True


def test_spheres_touching_collide():
    first = _sphere(0, 0, 2)
    second = _sphere(3, 4, 3)
    assert sphere_to_sphere(first, second) is True
    assert first.check_collision(second) is True


def test_spheres_apart_do_not_collide():
    first = _sphere(0, 0, 2)
    second = _sphere(3, 4, 2.9)
    assert first.check_collision(second) is False


def test_sphere_and_box_never_collide():
    sphere = _sphere(0, 0, 50)
    box = _box(0, 0, 40, 40)
    assert sphere_to_box(sphere, box) is False
    assert sphere.check_collision(box) is False
    assert box.check_collision(sphere) is False


def test_pixel_collider_attaches_and_registers():
    owner = Actor(Vector(10, 10))
    registry = _Registry()
    pixel = PixelCollider(
        owner, PixelColliderType.GROUND, PixelDirection.BOTTOM, Vector(5, 5), registry
    )
    assert owner.find_component(ComponentType.PIXEL_COLLIDER) is pixel
    assert pixel.owner is owner
    assert registry.added == [pixel]


def test_pixel_collider_opposite_directions_cancel():
    owner = Actor(Vector(100, 100))
    pixel = PixelCollider(
        owner,
        PixelColliderType.WALL,
        PixelDirection.LEFT | PixelDirection.RIGHT,
        Vector(10, 20),
    )
    pixel.tick()
    assert pixel.pos == owner.pos


def test_pixel_collider_top_moves_up_by_distance():
    owner = Actor(Vector(100, 100))
    pixel = PixelCollider(owner, PixelColliderType.CEILING, PixelDirection.TOP, Vector(10, 20))
    owner.tick()
    assert pixel.pos.x == owner.pos.x
    assert owner.pos.y - pixel.pos.y == 20


def test_pixel_collider_follows_owner():
    owner = Actor(Vector(0, 0))
    pixel = PixelCollider(owner, PixelColliderType.GROUND, PixelDirection.RIGHT, Vector(7, 7))
    pixel.update_position()
    first = pixel.pos
    owner.pos = Vector(50, 30)
    pixel.update_position()
    assert pixel.pos - first == Vector(50, 30)


def test_pixel_collider_never_collides():
    owner = Actor(Vector(0, 0))
    pixel = PixelCollider(owner, PixelColliderType.GROUND, PixelDirection.BOTTOM, Vector(1, 1))
    box = _box(0, 0, 100, 100)
    assert pixel.check_collision(box) is False
    assert box.check_collision(pixel) is False


def test_accel_obj_is_a_colliding_box():
    owner = Actor(Vector(0, 0))
    accel = AccelObj(Vector(1, 0), Vector(50, 50))
    owner.add_component(accel)
    box = _box(10, 10, 40, 40)
    assert accel.direction == Vector(1, 0)
    assert accel.collider_type is ColliderType.BOX
    assert box.check_collision(accel) is True