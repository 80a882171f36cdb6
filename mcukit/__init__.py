"""Microcontroller helpers: CAN masks, soft SPI, a simulated ILI9341 display, timers and demos."""

__version__ = "0.1.0"

__all__ = [
    "canmask",
    "convert",
    "display",
    "font",
    "fractal",
    "gfx",
    "ledstrip",
    "melody",
    "softspi",
    "timers",
]