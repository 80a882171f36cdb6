"""Rainbow animation for a short WS2812 LED strip."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """One LED colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"channel {name} must be 0..255, got {value!r}")


PALETTE = (
    RGB(150, 150, 150),
    RGB(255, 0, 0),  # red
    RGB(255, 100, 0),  # orange
    RGB(100, 255, 0),  # yellow
    RGB(0, 255, 0),  # green
    RGB(0, 100, 255),  # light blue
    RGB(0, 0, 255),  # blue
    RGB(100, 0, 255),  # violet
)


def _fade(current: int, target: int, step: int) -> int:
    if current < target - step:
        return current + step
    if current > target + step:
        return current - step
    return current


class RainbowStrip:
    """Shifts colours along the strip while the first LED fades through the palette."""

    def __init__(self, length: int = 6) -> None:
        if length < 1 or 256 // length // 2 == 0:
            raise ValueError(f"strip length must be 1..128, got {length!r}")
        self.length = length
        self.colour_length = length // 2
        self.fade = 256 // length // 2
        self.palette = PALETTE
        self.colour_index = 0
        self.leds: list[RGB] = [RGB()] * length
        self._ticks = 0

    def step(self) -> RGB:
        """Advance the animation by one frame and return the new first LED colour."""
        if self._ticks > self.colour_length:
            self.colour_index = (self.colour_index + 1) % len(self.palette)
            self._ticks = 0
        self._ticks += 1
        target = self.palette[self.colour_index]
        head = self.leds[0]
        first = RGB(
            _fade(head.r, target.r, self.fade),
            _fade(head.g, target.g, self.fade),
            _fade(head.b, target.b, self.fade),
        )
        self.leds = [first, *self.leds[:-1]]
        return first

    def to_bytes(self) -> bytes:
        """Return the strip contents in the green, red, blue order WS2812 LEDs expect."""
        return bytes(channel for led in self.leds for channel in (led.g, led.r, led.b))


def split_digits(value: int) -> tuple[int, int]:
    """Return the tens and units digits of an 8-bit value."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value must be 0..255, got {value!r}")
    return (value % 100) // 10, value % 10