import pytest

from controlroom.animation import Animation
from controlroom.graphics import Display


@pytest.fixture
def display():
    d = Display()
    d.create_sprite(0, 4, 0, 0)
    return d


def test_zero_speed_does_not_advance():
    anim = Animation(start_frame=2, frame_count=3, animation_speed=0)
    anim.reset()
    for _ in range(10):
        anim.update()
    assert anim.current_frame == anim.start_frame


def test_single_frame_does_not_advance():
    anim = Animation(start_frame=5, frame_count=1, animation_speed=1)
    anim.reset()
    for _ in range(10):
        anim.update()
    assert anim.current_frame == anim.start_frame
    assert anim.elapsed_frames == 0


def test_frames_stay_in_range_and_cycle():
    anim = Animation(start_frame=2, frame_count=3, animation_speed=2)
    anim.reset()
    seen = set()
    for _ in range(anim.frame_count * anim.animation_speed * 3):
        anim.update()
        seen.add(anim.current_frame)
    assert seen == set(range(anim.start_frame, anim.start_frame + anim.frame_count))


def test_full_cycle_returns_to_start():
    anim = Animation(start_frame=2, frame_count=3, animation_speed=2)
    anim.reset()
    for _ in range(anim.frame_count * anim.animation_speed):
        anim.update()
    assert anim.current_frame == anim.start_frame


def test_frame_changes_only_after_speed_ticks():
    anim = Animation(start_frame=0, frame_count=4, animation_speed=3)
    anim.reset()
    anim.update()
    anim.update()
    assert anim.current_frame == anim.start_frame
    anim.update()
    assert anim.current_frame == anim.start_frame + 1


def test_attached_sprite_follows_current_frame(display):
    anim = Animation(start_frame=1, frame_count=3, animation_speed=1)
    anim.set_sprite(display, 0, 4)
    anim.reset()
    assert display.sprite(0, 4).frame == anim.start_frame
    for _ in range(5):
        anim.update()
        assert display.sprite(0, 4).frame == anim.current_frame


def test_attached_to_missing_sprite_raises(display):
    anim = Animation(start_frame=0, frame_count=2, animation_speed=1)
    anim.set_sprite(display, 1, 4)
    with pytest.raises(KeyError):
        anim.reset()