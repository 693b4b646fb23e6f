import pytest

from loopzone.geometry import Vector
from loopzone.objects import GameObject, Monster, ObjectType


def test_monster_type_and_default_rail():
    monster = Monster()
    assert monster.object_type is ObjectType.MONSTER
    assert monster.start == Vector(300.0, 100.0)
    assert monster.end == Vector(600.0, 250.0)


def test_init_sets_stats():
    monster = Monster()
    monster.init()
    assert monster.stat.hp == 1
    assert monster.stat.max_hp == 1
    assert monster.stat.speed == 1000


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject()


def test_mouse_on_start_moves_to_start():
    monster = Monster()
    monster.update(Vector(300.0, 100.0))
    assert monster.pos.x == pytest.approx(300.0)
    assert monster.pos.y == pytest.approx(100.0)


def test_mouse_on_end_moves_to_end():
    monster = Monster()
    monster.update(Vector(600.0, 250.0))
    assert monster.pos.x == pytest.approx(600.0)
    assert monster.pos.y == pytest.approx(250.0)


def test_projection_lies_on_rail():
    monster = Monster(Vector(0.0, 0.0), Vector(100.0, 0.0))
    monster.update(Vector(40.0, 25.0))
    assert monster.pos.x == pytest.approx(40.0)
    assert monster.pos.y == pytest.approx(0.0)


def test_projection_on_diagonal_rail_is_collinear():
    monster = Monster()
    monster.update(Vector(420.0, 260.0))
    rail = monster.end - monster.start
    offset = monster.pos - monster.start
    assert rail.cross(offset) == pytest.approx(0.0, abs=1e-6)
    assert 0.0 <= offset.length() <= rail.length()


@pytest.mark.parametrize("mouse", [Vector(-10.0, 5.0), Vector(150.0, -3.0)])
def test_mouse_outside_rail_keeps_position(mouse):
    monster = Monster(Vector(0.0, 0.0), Vector(100.0, 0.0))
    monster.update(Vector(50.0, 0.0))
    monster.update(mouse)
    assert monster.pos == Vector(50.0, 0.0)