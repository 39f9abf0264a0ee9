"""The windowed game: draws the interface with pygame and feeds it input."""

from __future__ import annotations

import argparse
import logging
import random

import pygame

from glitchbomb.interface import Interface
from glitchbomb.screens import TextLine
from glitchbomb.widgets import WHITE, Button, Color

TITLE = "Glitch Bomb"
FRAME_RATE = 60


def _rgb(color: Color) -> tuple[int, int, int]:
    return (round(color.red * 255), round(color.green * 255), round(color.blue * 255))


class GlitchBombApp:
    """Owns the interface and a surface to draw it on."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        rng: random.Random | None = None,
        surface: pygame.Surface | None = None,
    ) -> None:
        self.interface = Interface(width, height, rng)
        self.surface = surface
        self.running = True
        self._fonts: dict[int, pygame.font.Font] = {}

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Feed one event to the interface; return whether the app keeps running."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.interface.pointer_at(x, y, bool(event.buttons[0]))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            self.interface.pointer_at(x, y, True)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            x, y = event.pos
            self.interface.pointer_at(x, y, False)
        elif event.type == pygame.WINDOWLEAVE:
            self.interface.pointer_at(-1, -1, False)
        return self.running

    def _font(self, size: float) -> pygame.font.Font:
        key = round(size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def draw(self) -> None:
        """Draw the current screen onto the surface."""
        if self.surface is None:
            raise RuntimeError("no surface to draw on")
        screen = self.interface.screen()
        self.surface.fill(_rgb(screen.background))
        centre_x = self.interface.width / 2
        for item in screen.items:
            if isinstance(item, TextLine):
                image = self._font(item.font_size).render(item.text, True, _rgb(item.color))
                self.surface.blit(image, image.get_rect(midtop=(centre_x, item.y)))
            elif isinstance(item, Button):
                rect = pygame.Rect(round(item.x), round(item.y), round(item.width), round(item.height))
                self.surface.fill(_rgb(item.background), rect)
                pygame.draw.rect(self.surface, _rgb(item.border), rect, width=round(item.border_width))
                label = self._font(item.label_size).render(item.label, True, _rgb(WHITE))
                self.surface.blit(label, label.get_rect(center=rect.center))

    def run(self) -> None:
        """Open the window and run the game loop until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((self.interface.width, self.interface.height))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.interface.tick()
                self.draw()
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            self._fonts.clear()
            pygame.quit()


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="glitchbomb", description="Play Glitch Bomb.")
    parser.add_argument("--width", type=_positive, default=1280)
    parser.add_argument("--height", type=_positive, default=720)
    parser.add_argument("--seed", type=int, default=None, help="seed for orb draws")
    parser.add_argument("--verbose", action="store_true", help="log game events")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    rng = random.Random(args.seed) if args.seed is not None else None
    GlitchBombApp(args.width, args.height, rng).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())