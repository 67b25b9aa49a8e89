"""In-memory model of the two screens: sprites, backgrounds, text and sounds."""

from __future__ import annotations

from dataclasses import dataclass, field

SCREEN_WIDTH = 256
SCREEN_HEIGHT = 192
SCREENS = (0, 1)
MAX_SPRITES = 128
BG_LAYERS = 4
TEXT_COLUMNS = SCREEN_WIDTH // 8
TEXT_ROWS = SCREEN_HEIGHT // 8
MAX_SOUNDS = 32
MAX_VOLUME = 127


@dataclass
class Sprite:
    """A sprite placed on one screen."""

    screen: int
    sprite_id: int
    x: int = 0
    y: int = 0
    frame: int = 0
    visible: bool = True
    sheet: str = ""


def _check_screen(screen: int) -> None:
    if screen not in SCREENS:
        raise ValueError(f"no screen {screen}")


def _check_layer(layer: int) -> None:
    if not 0 <= layer < BG_LAYERS:
        raise ValueError(f"no background layer {layer}")


@dataclass
class Display:
    """State of both screens and the sound slots."""

    sprites: dict[tuple[int, int], Sprite] = field(default_factory=dict)
    backgrounds: dict[tuple[int, int], str] = field(default_factory=dict)
    scroll: dict[tuple[int, int], tuple[int, int]] = field(default_factory=dict)
    text_layers: dict[tuple[int, int], dict[int, str]] = field(default_factory=dict)
    sounds: dict[int, str] = field(default_factory=dict)
    played: list[tuple[int, int]] = field(default_factory=list)

    def create_sprite(self, screen: int, sprite_id: int, x: float, y: float) -> Sprite:
        """Create a sprite at a position; the id must be free on that screen."""
        _check_screen(screen)
        if not 0 <= sprite_id < MAX_SPRITES:
            raise ValueError(f"sprite id {sprite_id} out of range")
        key = (screen, sprite_id)
        if key in self.sprites:
            raise ValueError(f"sprite {sprite_id} already exists on screen {screen}")
        sprite = Sprite(screen, sprite_id, int(x), int(y))
        self.sprites[key] = sprite
        return sprite

    def sprite(self, screen: int, sprite_id: int) -> Sprite:
        """Return an existing sprite, raising KeyError if there is none."""
        try:
            return self.sprites[(screen, sprite_id)]
        except KeyError:
            raise KeyError(f"no sprite {sprite_id} on screen {screen}") from None

    def set_frame(self, screen: int, sprite_id: int, frame: int) -> None:
        """Show a given animation frame of a sprite."""
        if frame < 0:
            raise ValueError(f"frame {frame} is negative")
        self.sprite(screen, sprite_id).frame = frame

    def move_sprite(self, screen: int, sprite_id: int, x: float, y: float) -> None:
        """Move a sprite to a screen position; coordinates truncate to ints."""
        sprite = self.sprite(screen, sprite_id)
        sprite.x = int(x)
        sprite.y = int(y)

    def show_sprite(self, screen: int, sprite_id: int, visible: bool) -> None:
        """Show or hide a sprite."""
        self.sprite(screen, sprite_id).visible = bool(visible)

    def delete_sprite(self, screen: int, sprite_id: int) -> None:
        """Remove a sprite."""
        self.sprite(screen, sprite_id)
        del self.sprites[(screen, sprite_id)]

    def set_background(self, screen: int, layer: int, name: str) -> None:
        """Place a named tiled background on a layer."""
        _check_screen(screen)
        _check_layer(layer)
        self.backgrounds[(screen, layer)] = name
        self.scroll[(screen, layer)] = (0, 0)

    def clear_background(self, screen: int, layer: int) -> None:
        """Remove the background from a layer."""
        key = (screen, layer)
        if key not in self.backgrounds:
            raise KeyError(f"no background on screen {screen} layer {layer}")
        del self.backgrounds[key]
        self.scroll.pop(key, None)

    def scroll_bg(self, screen: int, layer: int, x: float, y: float) -> None:
        """Set the scroll offset of a background layer."""
        key = (screen, layer)
        if key not in self.backgrounds:
            raise KeyError(f"no background on screen {screen} layer {layer}")
        self.scroll[key] = (int(x), int(y))

    def write_text(self, screen: int, layer: int, x: int, y: int, text: str) -> None:
        """Write text at a character cell, overwriting what is underneath."""
        _check_screen(screen)
        _check_layer(layer)
        if not (0 <= x < TEXT_COLUMNS and 0 <= y < TEXT_ROWS):
            raise ValueError(f"text position ({x}, {y}) is off the screen")
        rows = self.text_layers.setdefault((screen, layer), {})
        line = rows.get(y, "").ljust(x)
        line = line[:x] + text + line[x + len(text):]
        rows[y] = line[:TEXT_COLUMNS]

    def load_sound(self, name: str, sound_id: int) -> None:
        """Load a named sound into a slot."""
        if not 0 <= sound_id < MAX_SOUNDS:
            raise ValueError(f"sound slot {sound_id} out of range")
        self.sounds[sound_id] = name

    def play_sound(self, sound_id: int, volume: int) -> None:
        """Play a loaded sound at a volume from 0 to 127."""
        if sound_id not in self.sounds:
            raise KeyError(f"no sound in slot {sound_id}")
        if not 0 <= volume <= MAX_VOLUME:
            raise ValueError(f"volume {volume} out of range")
        self.played.append((sound_id, volume))

    def unload_sound(self, sound_id: int) -> None:
        """Free a sound slot."""
        if sound_id not in self.sounds:
            raise KeyError(f"no sound in slot {sound_id}")
        del self.sounds[sound_id]

    def reset(self) -> None:
        """Clear every sprite, background, text layer and sound."""
        self.sprites.clear()
        self.backgrounds.clear()
        self.scroll.clear()
        self.text_layers.clear()
        self.sounds.clear()
        self.played.clear()