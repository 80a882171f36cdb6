"""Shapes, text and images drawn on top of the ILI9341 driver."""

from __future__ import annotations

from mcukit.display import BURST_MAX_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH, Ili9341, Rotation
from mcukit.font import CHAR_HEIGHT, CHAR_WIDTH, glyph

_U16 = 0xFFFF
_U8 = 0xFF
_IMAGE_BLOCKS = SCREEN_WIDTH * SCREEN_HEIGHT * 2 // BURST_MAX_SIZE
IMAGE_SIZE = _IMAGE_BLOCKS * BURST_MAX_SIZE


def draw_hollow_circle(display: Ili9341, x: int, y: int, radius: int, colour: int) -> None:
    """Draw a circle outline centred on ``(x, y)``."""
    x, y, radius = x & _U16, y & _U16, radius & _U16
    cx, cy = radius - 1, 0
    dx = dy = 1
    err = dx - (radius << 1)
    while cx >= cy:
        for px, py in (
            (x + cx, y + cy), (x + cy, y + cx), (x - cy, y + cx), (x - cx, y + cy),
            (x - cx, y - cy), (x - cy, y - cx), (x + cy, y - cx), (x + cx, y - cy),
        ):
            display.draw_pixel(px, py, colour)
        if err <= 0:
            cy += 1
            err += dy
            dy += 2
        if err > 0:
            cx -= 1
            dx += 2
            err += -(radius << 1) + dx


def draw_filled_circle(display: Ili9341, x: int, y: int, radius: int, colour: int) -> None:
    """Draw a solid disc centred on ``(x, y)``."""
    x, y, radius = x & _U16, y & _U16, radius & _U16
    cx, cy = radius, 0
    x_change = 1 - (radius << 1)
    y_change = 0
    radius_error = 0
    while cx >= cy:
        for i in range(x - cx, x + cx + 1):
            display.draw_pixel(i, y + cy, colour)
            display.draw_pixel(i, y - cy, colour)
        for i in range(x - cy, x + cy + 1):
            display.draw_pixel(i, y + cx, colour)
            display.draw_pixel(i, y - cx, colour)
        cy += 1
        radius_error += y_change
        y_change += 2
        if (radius_error << 1) + x_change > 0:
            cx -= 1
            radius_error += x_change
            x_change += 2


def draw_hollow_rectangle_coord(
    display: Ili9341, x0: int, y0: int, x1: int, y1: int, colour: int
) -> None:
    """Draw the outline of the rectangle spanned by two corners."""
    x0, y0, x1, y1 = (v & _U16 for v in (x0, y0, x1, y1))
    x_length = abs(x1 - x0)
    y_length = abs(y1 - y0)
    display.draw_horizontal_line(x0, y0, x_length, colour)
    display.draw_horizontal_line(x0, y1, x_length, colour)
    display.draw_vertical_line(x0, y0, y_length, colour)
    display.draw_vertical_line(x1, y0, y_length, colour)
    if x_length > 0 or y_length > 0:
        display.draw_pixel(x1, y1, colour)


def draw_filled_rectangle_coord(
    display: Ili9341, x0: int, y0: int, x1: int, y1: int, colour: int
) -> None:
    """Fill the rectangle spanned by two corners, given in any order."""
    x0, y0, x1, y1 = (v & _U16 for v in (x0, y0, x1, y1))
    display.draw_rectangle(min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0), colour)


def draw_char(
    display: Ili9341, character: str, x: int, y: int, colour: int, size: int, background: int
) -> None:
    """Draw one character at ``(x, y)`` scaled by ``size`` over a background box."""
    columns = glyph(character)
    x, y, size = x & _U8, y & _U8, size & _U16
    display.draw_rectangle(x, y, CHAR_WIDTH * size, CHAR_HEIGHT * size, background)
    for j, column in enumerate(columns):
        for i in range(CHAR_HEIGHT):
            if not column >> i & 1:
                continue
            if size == 1:
                display.draw_pixel(x + j, y + i, colour)
            else:
                display.draw_rectangle(x + j * size, y + i * size, size, size, colour)


def draw_text(
    display: Ili9341, text: str, x: int, y: int, colour: int, size: int, background: int
) -> None:
    """Draw ``text`` left to right; drawing stops at a NUL character."""
    x &= _U8
    size &= _U16
    for character in text.split("\0", 1)[0]:
        draw_char(display, character, x, y, colour, size, background)
        x = (x + CHAR_WIDTH * size) & _U8


def draw_image(display: Ili9341, image: bytes, orientation: int) -> None:
    """Stream a full-screen RGB565 image in the given orientation.

    An unknown orientation draws nothing; an image shorter than
    IMAGE_SIZE bytes raises ValueError.
    """
    try:
        rotation = Rotation(orientation)
    except ValueError:
        return
    data = bytes(image)
    if len(data) < IMAGE_SIZE:
        raise ValueError(f"image needs {IMAGE_SIZE} bytes, got {len(data)}")
    display.set_rotation(rotation)
    if rotation in (Rotation.HORIZONTAL_1, Rotation.HORIZONTAL_2):
        display.set_address(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
    else:
        display.set_address(0, 0, SCREEN_HEIGHT, SCREEN_WIDTH)
    for start in range(0, IMAGE_SIZE, BURST_MAX_SIZE):
        display.panel.feed(True, data[start:start + BURST_MAX_SIZE])


def draw_line(display: Ili9341, x1: int, y1: int, x2: int, y2: int, colour: int) -> None:
    """Draw a straight line from ``(x1, y1)`` towards ``(x2, y2)``."""
    x1, y1, x2, y2 = (v & _U16 for v in (x1, y1, x2, y2))
    if y1 == y2:
        display.draw_horizontal_line(x1, y1, x2 - x1, colour)
        return
    if x1 == x2:
        display.draw_vertical_line(x1, y1, y2 - y1, colour)
        return
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    xstep = 1 if x2 > x1 else -1
    ystep = 1 if y2 > y1 else -1
    col, row = x1, y1
    if dx < dy:
        t = -(dy >> 1)
        while True:
            display.draw_pixel(col, row, colour)
            if row == y2:
                return
            row += ystep
            t += dx
            if t >= 0:
                col += xstep
                t -= dy
    else:
        t = -(dx >> 1)
        while True:
            display.draw_pixel(col, row, colour)
            if col == x2:
                return
            col += xstep
            t += dy
            if t >= 0:
                row += ystep
                t -= dx