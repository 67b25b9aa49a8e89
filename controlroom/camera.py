"""Objects in the world and the camera that follows them."""

from __future__ import annotations

from dataclasses import dataclass, field

from controlroom.graphics import SCREEN_HEIGHT, SCREEN_WIDTH, Display
from controlroom.vector import Vector2f, Vector2i


@dataclass
class GameObject:
    """Something with a position and size in the world."""

    position: Vector2f = field(default_factory=Vector2f)
    size: Vector2f = field(default_factory=Vector2f)

    def screen_position(self) -> Vector2i:
        """The position truncated to whole pixels."""
        return Vector2i(int(self.position.x), int(self.position.y))

    def centre(self) -> Vector2f:
        """The centre point of the object."""
        return Vector2f(
            self.position.x + self.size.x / 2.0,
            self.position.y + self.size.y / 2.0,
        )


@dataclass
class Camera:
    """A screen-sized view onto the world that may track an object."""

    tracking: GameObject | None = None
    position: Vector2f = field(default_factory=Vector2f)
    min_position: Vector2i = field(default_factory=Vector2i)
    max_position: Vector2i = field(default_factory=Vector2i)

    def update(self) -> None:
        """Centre on the tracked object, kept within the world bounds."""
        if self.tracking is None:
            return
        target = self.tracking.centre() - Vector2f(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)
        x, y = target.x, target.y
        if x < self.min_position.x:
            x = self.min_position.x
        elif x > self.max_position.x - SCREEN_WIDTH:
            x = self.max_position.x - SCREEN_WIDTH
        if y < self.min_position.y:
            y = self.min_position.y
        elif y > self.max_position.y - SCREEN_HEIGHT:
            y = self.max_position.y - SCREEN_HEIGHT
        self.position = Vector2f(x, y)

    def render_bg(self, display: Display, screen: int, layer: int) -> None:
        """Scroll a background layer to the camera position."""
        display.scroll_bg(screen, layer, self.position.x, self.position.y)

    def _on_screen(self, point: Vector2f) -> bool:
        return (
            self.position.x <= point.x <= self.position.x + SCREEN_WIDTH
            and self.position.y <= point.y <= self.position.y + SCREEN_HEIGHT
        )

    def is_visible(self, sprite_position: Vector2f, size: Vector2f) -> bool:
        """True if any corner of the rectangle falls within the view."""
        corners = (
            sprite_position,
            Vector2f(sprite_position.x + size.x, sprite_position.y),
            Vector2f(sprite_position.x, sprite_position.y + size.y),
            sprite_position + size,
        )
        return any(self._on_screen(corner) for corner in corners)

    def render_sprite(
        self,
        display: Display,
        screen: int,
        sprite_id: int,
        sprite_position: Vector2f,
        size: Vector2f,
    ) -> None:
        """Place a sprite relative to the camera, hiding it when out of view."""
        if self.is_visible(sprite_position, size):
            display.show_sprite(screen, sprite_id, True)
            relative = sprite_position - self.position
            display.move_sprite(screen, sprite_id, relative.x, relative.y)
        else:
            display.show_sprite(screen, sprite_id, False)