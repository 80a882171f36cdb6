"""Sierpinski triangle drawn by the chaos game on an ILI9341 panel."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from mcukit.display import Colour, Ili9341, PanelModel, Rotation
from mcukit.gfx import draw_filled_circle, draw_line

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF

VERTEX_A = (150, 310)
VERTEX_B = (5, 40)
VERTEX_C = (235, 5)
VERTICES = (VERTEX_A, VERTEX_B, VERTEX_C)
START = (90, 120)

PREVIEW_STEPS = 18
DOT_RADIUS = 1
MARK_RADIUS = 3
PREVIEW_DELAY_MS = 600
PLOT_DELAY_MS = 3


class ChaosGame:
    """Moves a point half way towards a randomly chosen triangle vertex at each step."""

    def __init__(self, random_word: Callable[[], int] | None = None) -> None:
        if random_word is None:
            rng = random.Random()
            random_word = lambda: rng.getrandbits(32)  # noqa: E731
        self._random_word = random_word
        self.position: tuple[int, int] = START
        self.previous: tuple[int, int] = START
        self.vertex: tuple[int, int] | None = None

    def _word(self) -> int:
        return self._random_word() & _U32

    def drop_dice(self) -> int:
        """Return a uniformly chosen number from 0 to 11, taken four bits at a time."""
        word = self._word()
        while word & 0x0F > 11:
            word >>= 4
            if word == 0:
                word = self._word()
        return word & 0x0F

    def step(self) -> tuple[int, int]:
        """Move towards a random vertex and return the new position."""
        self.vertex = VERTICES[self.drop_dice() // 4]
        vx, vy = self.vertex
        x, y = self.position
        self.previous = self.position
        self.position = ((vx + x) // 2 & _U16, (vy + y) // 2 & _U16)
        return self.position

    def points(self, count: int) -> Iterator[tuple[int, int]]:
        """Yield the positions of the next ``count`` steps."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count!r}")
        for _ in range(count):
            yield self.step()


def render(display: Ili9341, game: ChaosGame, steps: int) -> None:
    """Initialise the screen, animate the first moves, then plot ``steps`` points."""
    if steps < 0:
        raise ValueError(f"steps must not be negative, got {steps!r}")
    display.init()
    display.set_rotation(Rotation.VERTICAL_1)
    display.fill_screen(Colour.WHITE)
    for vx, vy in VERTICES:
        draw_filled_circle(display, vx, vy, MARK_RADIUS, Colour.BLACK)

    for _ in range(PREVIEW_STEPS):
        sx, sy = game.position
        ex, ey = game.step()
        vx, vy = game.vertex
        draw_line(display, sx, sy, vx, vy, Colour.RED)
        display.delay(PREVIEW_DELAY_MS)
        draw_filled_circle(display, ex, ey, DOT_RADIUS, Colour.BLUE)
        display.delay(PREVIEW_DELAY_MS)
        draw_line(display, sx, sy, vx, vy, Colour.WHITE)
        draw_filled_circle(display, ex, ey, DOT_RADIUS, Colour.BLUE)

    for x, y in game.points(steps):
        display.draw_pixel(x, y, Colour.BLUE)
        display.delay(PLOT_DELAY_MS)


def _to_ppm(panel: PanelModel, width: int, height: int) -> bytes:
    out = bytearray(f"P6\n{width} {height}\n255\n".encode("ascii"))
    for y in range(height):
        for x in range(width):
            colour = panel.pixel(x, y)
            if colour is None:
                colour = 0
            out.append(((colour >> 11) & 0x1F) * 255 // 31)
            out.append(((colour >> 5) & 0x3F) * 255 // 63)
            out.append((colour & 0x1F) * 255 // 31)
    return bytes(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Render the chaos game on a simulated panel and save it as a PPM image."""
    parser = argparse.ArgumentParser(
        prog="fractal", description="Draw a Sierpinski triangle with the chaos game."
    )
    parser.add_argument("--steps", type=int, default=20000, help="points plotted after the preview")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random source")
    parser.add_argument("--output", type=Path, required=True, help="PPM file to write")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    if args.steps < 0:
        parser.error("--steps must not be negative")

    rng = random.Random(args.seed)
    game = ChaosGame(lambda: rng.getrandbits(32))
    panel = PanelModel()
    display = Ili9341(panel)
    display.delay = lambda ms: None
    render(display, game, args.steps)
    args.output.write_bytes(_to_ppm(panel, display.width, display.height))
    return 0