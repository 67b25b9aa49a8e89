import pytest

from controlroom.camera import Camera, GameObject
from controlroom.graphics import SCREEN_HEIGHT, SCREEN_WIDTH, Display
from controlroom.vector import Vector2f, Vector2i


def make_camera(obj):
    return Camera(
        tracking=obj,
        min_position=Vector2i(0, 0),
        max_position=Vector2i(1024, 768),
    )


def test_centre_is_half_size_from_position():
    obj = GameObject(Vector2f(10, 20), Vector2f(32, 16))
    assert obj.centre() == obj.position + obj.size * 0.5


def test_screen_position_truncates():
    obj = GameObject(Vector2f(10.9, 3.2), Vector2f(1, 1))
    assert obj.screen_position() == Vector2i(int(10.9), int(3.2))


def test_camera_without_tracking_stays_put():
    camera = Camera(position=Vector2f(5, 6))
    camera.update()
    assert camera.position == Vector2f(5, 6)


def test_camera_centres_on_object_in_middle():
    obj = GameObject(Vector2f(500, 400), Vector2f(32, 32))
    camera = make_camera(obj)
    camera.update()
    assert camera.position == obj.centre() - Vector2f(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)


def test_camera_clamps_to_minimum():
    camera = make_camera(GameObject(Vector2f(0, 0), Vector2f(8, 8)))
    camera.update()
    assert camera.position == Vector2f(camera.min_position.x, camera.min_position.y)


def test_camera_clamps_to_maximum():
    camera = make_camera(GameObject(Vector2f(5000, 5000), Vector2f(8, 8)))
    camera.update()
    assert camera.position == Vector2f(
        camera.max_position.x - SCREEN_WIDTH, camera.max_position.y - SCREEN_HEIGHT
    )


@pytest.mark.parametrize(
    "pos, expected",
    [
        (Vector2f(100, 100), True),
        (Vector2f(-20, -20), True),
        (Vector2f(250, 190), True),
        (Vector2f(-100, 50), False),
        (Vector2f(300, 50), False),
        (Vector2f(50, 200), False),
    ],
)
def test_visibility_by_corners(pos, expected):
    camera = Camera()
    assert camera.is_visible(pos, Vector2f(32, 32)) is expected


def test_render_sprite_moves_visible_sprite_relative_to_camera():
    display = Display()
    display.create_sprite(0, 1, 0, 0)
    camera = Camera(position=Vector2f(40, 30))
    world = Vector2f(100.5, 60.0)
    camera.render_sprite(display, 0, 1, world, Vector2f(16, 16))
    sprite = display.sprite(0, 1)
    assert sprite.visible is True
    assert (sprite.x, sprite.y) == (int(world.x - 40), int(world.y - 30))


def test_render_sprite_hides_offscreen_sprite():
    display = Display()
    display.create_sprite(0, 1, 7, 7)
    camera = Camera()
    camera.render_sprite(display, 0, 1, Vector2f(1000, 1000), Vector2f(16, 16))
    sprite = display.sprite(0, 1)
    assert sprite.visible is False
    assert (sprite.x, sprite.y) == (7, 7)


def test_render_bg_scrolls_to_camera_position():
    display = Display()
    display.set_background(0, 3, "TopScreenBG")
    camera = Camera(position=Vector2f(64, 32))
    camera.render_bg(display, 0, 3)
    assert display.scroll[(0, 3)] == (64, 32)