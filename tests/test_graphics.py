import pytest

from controlroom.graphics import MAX_SPRITES, Display


@pytest.fixture
def display():
    return Display()


def test_created_sprite_can_be_fetched(display):
    created = display.create_sprite(1, 5, 32, 64)
    assert display.sprite(1, 5) is created
    assert (created.x, created.y, created.visible) == (32, 64, True)


def test_duplicate_sprite_is_rejected(display):
    display.create_sprite(0, 3, 0, 0)
    with pytest.raises(ValueError):
        display.create_sprite(0, 3, 10, 10)


def test_same_id_on_other_screen_is_allowed(display):
    display.create_sprite(0, 3, 0, 0)
    display.create_sprite(1, 3, 8, 8)
    assert display.sprite(1, 3).x == 8
    assert display.sprite(0, 3).x == 0


@pytest.mark.parametrize("screen, sprite_id", [(2, 0), (-1, 0), (0, MAX_SPRITES), (0, -1)])
def test_invalid_sprite_slots_are_rejected(display, screen, sprite_id):
    with pytest.raises(ValueError):
        display.create_sprite(screen, sprite_id, 0, 0)


def test_deleted_sprite_is_gone(display):
    display.create_sprite(0, 1, 0, 0)
    display.delete_sprite(0, 1)
    with pytest.raises(KeyError):
        display.sprite(0, 1)
    with pytest.raises(KeyError):
        display.delete_sprite(0, 1)


def test_frame_move_and_visibility(display):
    display.create_sprite(1, 2, 0, 0)
    display.set_frame(1, 2, 12)
    display.move_sprite(1, 2, 10.7, 5.2)
    display.show_sprite(1, 2, False)
    sprite = display.sprite(1, 2)
    assert sprite.frame == 12
    assert (sprite.x, sprite.y) == (10, 5)
    assert sprite.visible is False


def test_frame_on_missing_sprite_raises(display):
    with pytest.raises(KeyError):
        display.set_frame(0, 9, 1)


def test_background_scroll_and_clear(display):
    display.set_background(0, 3, "TopScreenBG")
    display.scroll_bg(0, 3, 12.9, 4.0)
    assert display.backgrounds[(0, 3)] == "TopScreenBG"
    assert display.scroll[(0, 3)] == (12, 4)
    display.clear_background(0, 3)
    assert (0, 3) not in display.backgrounds
    with pytest.raises(KeyError):
        display.scroll_bg(0, 3, 0, 0)


def test_background_layer_out_of_range(display):
    with pytest.raises(ValueError):
        display.set_background(0, 4, "YouWinBG")


def test_text_overwrites_in_place(display):
    display.write_text(0, 0, 0, 12, "IP: 123")
    display.write_text(0, 0, 0, 12, "IP: 1")
    assert display.text_layers[(0, 0)][12] == "IP: 123"


def test_text_off_screen_raises(display):
    with pytest.raises(ValueError):
        display.write_text(0, 0, 0, 100, "x")


def test_sounds_load_play_unload(display):
    display.load_sound("sound/Goodbye", 31)
    display.play_sound(31, 127)
    assert display.played == [(31, 127)]
    display.unload_sound(31)
    with pytest.raises(KeyError):
        display.play_sound(31, 64)


def test_sound_volume_is_bounded(display):
    display.load_sound("sound/ButtonClick", 0)
    with pytest.raises(ValueError):
        display.play_sound(0, 128)


def test_reset_clears_everything(display):
    display.create_sprite(0, 0, 0, 0)
    display.set_background(1, 3, "TopScreenBG")
    display.load_sound("sound/ButtonClick", 0)
    display.write_text(0, 0, 0, 0, "hi")
    display.reset()
    assert display == Display()