"""The game loop and a desktop window to play it in."""

from __future__ import annotations

import argparse
import socket
from collections.abc import Callable

from controlroom.graphics import SCREEN_HEIGHT, SCREEN_WIDTH, Display
from controlroom.input import InputHandler, Key
from controlroom.levels import Connector, IPSelectLevel, LevelHandler
from controlroom.vector import Vector2f

FPS = 60
QUIT_COMBO = Key.SELECT | Key.L | Key.R
SPRITE_SIZE = 32


class Game:
    """Owns the display, input and levels, and runs one frame per step."""

    def __init__(
        self,
        display: Display | None = None,
        connector: Connector = socket.create_connection,
        wait_frames: Callable[[int], None] | None = None,
    ) -> None:
        self.display = display if display is not None else Display()
        self.input = InputHandler()
        self.handler = LevelHandler(connector=connector)
        if wait_frames is not None:
            self.handler.wait_frames = wait_frames
        self.handler.current = IPSelectLevel(self.handler, self.display)
        self.handler.current.load()

    def step(self, keys: int, touch: Vector2f | None = None) -> bool:
        """Run one frame; return False when the quit buttons are held."""
        self.input.update(keys, touch)
        level = self.handler.current
        if level is not None:
            level.handle_input(self.input)
            level.update()
            level.render()
            level.post_render()
            level.handle_network()
        if self.input.this_frame & QUIT_COMBO == QUIT_COMBO:
            return False
        self.handler.handle_level_swaps()
        return True

    def _close(self) -> None:
        level = self.handler.current
        if level is not None and level.connection is not None:
            level.connection.close()


def _key_map() -> dict[int, Key]:
    import pygame

    return {
        pygame.K_z: Key.A,
        pygame.K_x: Key.B,
        pygame.K_a: Key.Y,
        pygame.K_s: Key.X,
        pygame.K_q: Key.L,
        pygame.K_w: Key.R,
        pygame.K_RETURN: Key.START,
        pygame.K_BACKSPACE: Key.SELECT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }


def _read_controls(key_map: dict[int, Key], scale: int) -> tuple[Key, Vector2f | None]:
    import pygame

    held = pygame.key.get_pressed()
    keys = Key(0)
    for code, key in key_map.items():
        if held[code]:
            keys |= key
    touch = None
    if pygame.mouse.get_pressed()[0]:
        mx, my = pygame.mouse.get_pos()
        x, y = mx / scale, my / scale - SCREEN_HEIGHT
        if 0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT:
            touch = Vector2f(x, y)
            keys |= Key.TOUCH
    return keys, touch


def _draw(canvas, font, display: Display) -> None:
    import pygame

    canvas.fill((0, 0, 0))
    for (screen, _layer), name in sorted(display.backgrounds.items()):
        top = screen * SCREEN_HEIGHT
        pygame.draw.rect(canvas, (40, 40, 60), (0, top, SCREEN_WIDTH, SCREEN_HEIGHT))
        canvas.blit(font.render(name, True, (120, 120, 160)), (4, top + 4))
    for (screen, _layer), rows in display.text_layers.items():
        top = screen * SCREEN_HEIGHT
        for row, text in rows.items():
            canvas.blit(font.render(text, True, (255, 255, 255)), (0, top + row * 8))
    for sprite in display.sprites.values():
        if not sprite.visible:
            continue
        rect = (sprite.x, sprite.y + sprite.screen * SCREEN_HEIGHT, SPRITE_SIZE, SPRITE_SIZE)
        pygame.draw.rect(canvas, (200, 200, 80), rect, 1)
        label = font.render(str(sprite.frame), True, (200, 200, 80))
        canvas.blit(label, (rect[0] + 4, rect[1] + 4))


def main(argv: list[str] | None = None) -> int:
    """Open a window with both screens stacked and play until closed."""
    parser = argparse.ArgumentParser(prog="controlroom", description="Control room game.")
    parser.add_argument("--scale", type=int, default=2, help="window scale factor")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("--scale must be at least 1")

    import pygame

    pygame.init()
    game: Game | None = None
    try:
        window = pygame.display.set_mode(
            (SCREEN_WIDTH * args.scale, SCREEN_HEIGHT * 2 * args.scale)
        )
        pygame.display.set_caption("Control Room")
        font = pygame.font.Font(None, 16)
        clock = pygame.time.Clock()
        canvas = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT * 2))
        key_map = _key_map()
        game = Game(wait_frames=lambda frames: pygame.time.wait(frames * 1000 // FPS))
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            keys, touch = _read_controls(key_map, args.scale)
            if not game.step(keys, touch):
                break
            _draw(canvas, font, game.display)
            pygame.transform.scale(canvas, window.get_size(), window)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        if game is not None:
            game._close()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())