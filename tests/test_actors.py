import pytest
from PIL import Image

from loopzone.actors import FlipbookActor, SpriteActor
from loopzone.geometry import Rect, Vector
from loopzone.resources import Flipbook, FlipbookInfo, Sprite, Texture
from loopzone.timing import TimeManager

WINDOW = Vector(860.0, 640.0)


def make_actor(delta, **info_kwargs):
    clock = TimeManager()
    clock.delta_time = delta
    actor = FlipbookActor(time_manager=clock)
    flipbook = Flipbook(FlipbookInfo(size=Vector(32.0, 48.0), **info_kwargs))
    actor.set_flipbook(flipbook)
    return actor, flipbook


def test_tick_advances_one_frame_when_frame_time_reached():
    actor, _ = make_actor(0.1, start=0, end=3, duration=0.4)
    actor.tick()
    assert actor.idx == 1
    assert actor.sum_time == 0.0


def test_tick_accumulates_small_steps():
    actor, _ = make_actor(0.05, start=0, end=3, duration=0.4)
    actor.tick()
    assert actor.idx == 0
    actor.tick()
    assert actor.idx == 1


def test_looping_wraps_around():
    actor, _ = make_actor(0.1, start=0, end=3, duration=0.4)
    for _ in range(4):
        actor.tick()
    assert actor.idx == 0


def test_non_looping_stops_on_last_frame():
    actor, _ = make_actor(1.0, start=0, end=1, duration=1.0, loop=False)
    actor.tick()
    assert actor.idx == 1
    for _ in range(5):
        actor.tick()
    assert actor.idx == 1


def test_tick_without_flipbook_keeps_state():
    actor = FlipbookActor()
    actor.tick()
    assert actor.idx == 0
    assert actor.source_rect() is None


def test_set_flipbook_resets_to_start():
    actor, _ = make_actor(0.0, start=2, end=3)
    assert actor.idx == 2


def test_setting_same_flipbook_does_not_reset():
    actor, flipbook = make_actor(0.1, start=0, end=3, duration=0.4)
    actor.tick()
    actor.set_flipbook(flipbook)
    assert actor.idx == 1


def test_setting_other_flipbook_resets():
    actor, _ = make_actor(0.1, start=0, end=3, duration=0.4)
    actor.tick()
    other = Flipbook(FlipbookInfo(start=1, end=2))
    actor.set_flipbook(other)
    assert actor.idx == 1
    assert actor.flipbook is other
    assert actor.sum_time == 0.0


def test_source_rect_pinned():
    actor, _ = make_actor(0.1, start=0, end=3, duration=0.4, line=2)
    actor.tick()
    assert actor.source_rect() == Rect(32, 96, 64, 144)


def test_source_rect_matches_frame_size():
    actor, _ = make_actor(0.0, start=0, end=3, line=1)
    rect = actor.source_rect()
    assert rect.right - rect.left == 32
    assert rect.bottom - rect.top == 48


def test_flipbook_screen_position_pinned():
    actor, _ = make_actor(0.0, start=0, end=0)
    actor.pos = Vector(1000.0, 500.0)
    assert actor.screen_position(Vector(1000.0, 500.0), WINDOW) == (414, 296)


def test_screen_position_follows_actor_and_camera():
    actor, _ = make_actor(0.0, start=0, end=0)
    camera = Vector(700.0, 400.0)
    actor.pos = Vector(700.0, 400.0)
    base_x, base_y = actor.screen_position(camera, WINDOW)
    actor.pos = Vector(710.0, 405.0)
    assert actor.screen_position(camera, WINDOW) == (base_x + 10, base_y + 5)
    assert actor.screen_position(Vector(710.0, 405.0), WINDOW) == (base_x, base_y)


def test_screen_position_truncates_positions():
    actor, _ = make_actor(0.0, start=0, end=0)
    actor.pos = Vector(700.0, 400.0)
    exact = actor.screen_position(Vector(700.0, 400.0), WINDOW)
    actor.pos = Vector(700.9, 400.9)
    assert actor.screen_position(Vector(700.2, 400.2), WINDOW) == exact


def test_sprite_actor_screen_position():
    texture = Texture(Image.new("RGB", (40, 20)))
    sprite = Sprite(texture, 0, 0, 40, 20)
    actor = SpriteActor(Vector(20.0, 10.0), sprite)
    camera = Vector(430.0, 320.0)
    assert actor.screen_position(camera, WINDOW) == (0, 0)
    actor.pos = Vector(25.0, 10.0)
    assert actor.screen_position(camera, WINDOW) == (5, 0)


def test_sprite_actor_without_sprite():
    actor = SpriteActor()
    assert actor.screen_position(Vector(), WINDOW) is None
    assert actor.sprite is None


def test_zero_frames_is_an_error():
    actor, _ = make_actor(0.1, start=1, end=0, duration=1.0)
    with pytest.raises(ZeroDivisionError):
        actor.tick()