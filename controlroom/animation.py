"""Frame-cycling animation for a sprite."""

from __future__ import annotations

from dataclasses import dataclass, field

from controlroom.graphics import Display


@dataclass
class Animation:
    """Cycles through a run of frames, switching every few updates."""

    start_frame: int = 0
    frame_count: int = 0
    animation_speed: int = 0
    current_frame: int = 0
    elapsed_frames: int = 0
    display: Display | None = field(default=None, repr=False)
    screen: int = -1
    sprite: int = -1

    def set_sprite(self, display: Display, screen: int, sprite: int) -> None:
        """Attach the animation to a sprite on a display."""
        self.display = display
        self.screen = screen
        self.sprite = sprite

    def _show(self) -> None:
        if self.display is not None and self.screen != -1 and self.sprite != -1:
            self.display.set_frame(self.screen, self.sprite, self.current_frame)

    def update(self) -> None:
        """Advance one tick, moving to the next frame when it is due."""
        if self.frame_count <= 1 or self.animation_speed == 0:
            return
        self.elapsed_frames += 1
        if self.elapsed_frames >= self.animation_speed:
            self.elapsed_frames = 0
            self.current_frame += 1
            if self.current_frame >= self.start_frame + self.frame_count:
                self.current_frame = self.start_frame
            self._show()

    def reset(self) -> None:
        """Go back to the first frame."""
        self.elapsed_frames = 0
        self.current_frame = self.start_frame
        self._show()