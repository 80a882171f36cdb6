"""ILI9341 TFT driver speaking to a panel through command and data writes."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from enum import IntEnum
from typing import Protocol

SCREEN_HEIGHT = 240
SCREEN_WIDTH = 320
BURST_MAX_SIZE = 500

_CASET = 0x2A
_PASET = 0x2B
_RAMWR = 0x2C
_MADCTL = 0x36
_SWRESET = 0x01
_SLPIN = 0x10
_SLPOUT = 0x11
_DISPOFF = 0x28
_DISPON = 0x29
_MADCTL_MV = 0x20


class Colour(IntEnum):
    """RGB565 colours."""

    BLACK = 0x0000
    NAVY = 0x000F
    DARKGREEN = 0x03E0
    DARKCYAN = 0x03EF
    MAROON = 0x7800
    PURPLE = 0x780F
    OLIVE = 0x7BE0
    LIGHTGREY = 0xC618
    DARKGREY = 0x7BEF
    BLUE = 0x001F
    GREEN = 0x07E0
    CYAN = 0x07FF
    RED = 0xF800
    MAGENTA = 0xF81F
    YELLOW = 0xFFE0
    WHITE = 0xFFFF
    ORANGE = 0xFD20
    GREENYELLOW = 0xAFE5
    PINK = 0xF81F


class Rotation(IntEnum):
    VERTICAL_1 = 0
    HORIZONTAL_1 = 1
    VERTICAL_2 = 2
    HORIZONTAL_2 = 3


# rotation -> (memory access control byte, width, height)
_ROTATIONS = {
    Rotation.VERTICAL_1: (0x40 | 0x08, 240, 320),
    Rotation.HORIZONTAL_1: (0x20 | 0x08, 320, 240),
    Rotation.VERTICAL_2: (0x80 | 0x08, 240, 320),
    Rotation.HORIZONTAL_2: (0x40 | 0x80 | 0x20 | 0x08, 320, 240),
}

_INIT_SEQUENCE: tuple[tuple[int, bytes], ...] = (
    (0xCB, bytes([0x39, 0x2C, 0x00, 0x34, 0x02])),  # power control A
    (0xCF, bytes([0x00, 0xC1, 0x30])),  # power control B
    (0xE8, bytes([0x85, 0x00, 0x78])),  # driver timing control A
    (0xEA, bytes([0x00, 0x00])),  # driver timing control B
    (0xED, bytes([0x64, 0x03, 0x12, 0x81])),  # power on sequence control
    (0xF7, bytes([0x20])),  # pump ratio control
    (0xC0, bytes([0x23])),  # power control VRH
    (0xC1, bytes([0x10])),  # power control SAP/BT
    (0xC5, bytes([0x3E, 0x28])),  # VCM control
    (0xC7, bytes([0x86])),  # VCM control 2
    (0x36, bytes([0x48])),  # memory access control
    (0x3A, bytes([0x55])),  # pixel format
    (0xB1, bytes([0x00, 0x18])),  # frame ratio control
    (0xB6, bytes([0x08, 0x82, 0x27])),  # display function control
    (0xF2, bytes([0x00])),  # 3-gamma disable
    (0x26, bytes([0x01])),  # gamma curve
    (
        0xE0,
        bytes([0x0F, 0x31, 0x2B, 0x0C, 0x0E, 0x08, 0x4E, 0xF1,
               0x37, 0x07, 0x10, 0x03, 0x0E, 0x09, 0x00]),
    ),  # positive gamma
    (
        0xE1,
        bytes([0x00, 0x0E, 0x14, 0x03, 0x11, 0x07, 0x31, 0xC1,
               0x48, 0x08, 0x0F, 0x0C, 0x31, 0x36, 0x0F]),
    ),  # negative gamma
)


class Panel(Protocol):
    def feed(self, is_data: bool, payload: bytes) -> None: ...


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000)


def _be16(*values: int) -> bytes:
    return b"".join((v & 0xFFFF).to_bytes(2, "big") for v in values)


class PanelModel:
    """In-memory ILI9341 controller: interprets commands and keeps the pixels written."""

    def __init__(self) -> None:
        self.ram: dict[tuple[int, int], int] = {}
        self.commands: list[int] = []
        self.registers: dict[int, bytes] = {}
        self._current: int | None = None
        self._params = bytearray()
        self._pending = bytearray()
        self._cursor = (0, 0)
        self._soft_reset()

    def _soft_reset(self) -> None:
        self.madctl = 0
        self.sleeping = True
        self.display_on = False
        self.columns = (0, 0xEF)
        self.pages = (0, 0x13F)

    def _limits(self) -> tuple[int, int]:
        if self.madctl & _MADCTL_MV:
            return SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1
        return SCREEN_HEIGHT - 1, SCREEN_WIDTH - 1

    def _window(self) -> tuple[int, int, int, int]:
        max_col, max_page = self._limits()
        sc, ec = self.columns
        sp, ep = self.pages
        return sc, min(ec, max_col), sp, min(ep, max_page)

    def _command(self, code: int) -> None:
        self.commands.append(code)
        self._current = code
        self._params = bytearray()
        self._pending = bytearray()
        if code == _SWRESET:
            self._soft_reset()
        elif code == _SLPOUT:
            self.sleeping = False
        elif code == _SLPIN:
            self.sleeping = True
        elif code == _DISPON:
            self.display_on = True
        elif code == _DISPOFF:
            self.display_on = False
        elif code == _RAMWR:
            self._cursor = (self.columns[0], self.pages[0])

    def _parameters(self, payload: bytes) -> None:
        if self._current is None:
            return
        self._params.extend(payload)
        params = bytes(self._params)
        self.registers[self._current] = params
        if self._current == _CASET and len(params) >= 4:
            self.columns = (int.from_bytes(params[0:2], "big"), int.from_bytes(params[2:4], "big"))
        elif self._current == _PASET and len(params) >= 4:
            self.pages = (int.from_bytes(params[0:2], "big"), int.from_bytes(params[2:4], "big"))
        elif self._current == _MADCTL and params:
            self.madctl = params[0]

    def _write_pixels(self, payload: bytes) -> None:
        self._pending.extend(payload)
        usable = len(self._pending) & ~1
        words, self._pending = self._pending[:usable], self._pending[usable:]
        sc, ec, sp, ep = self._window()
        if sc > ec or sp > ep:
            return
        col, page = self._cursor
        for high, low in zip(words[0::2], words[1::2]):
            if sc <= col <= ec and sp <= page <= ep:
                self.ram[(col, page)] = high << 8 | low
            col += 1
            if col > ec:
                col = sc
                page += 1
                if page > ep:
                    page = sp
        self._cursor = (col, page)

    def feed(self, is_data: bool, payload: bytes) -> None:
        """Accept bytes sent with the data/command line high (data) or low (command)."""
        payload = bytes(payload)
        if not is_data:
            for code in payload:
                self._command(code)
        elif self._current == _RAMWR:
            self._write_pixels(payload)
        else:
            self._parameters(payload)

    def pixel(self, x: int, y: int) -> int | None:
        """Return the colour stored at column ``x``, page ``y``, or None if never written."""
        return self.ram.get((x, y))


class Ili9341:
    """Drawing primitives for a 320x240 ILI9341 panel."""

    def __init__(self, panel: Panel) -> None:
        self.panel = panel
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.reset_level = False
        self.delay: Callable[[float], None] = _sleep_ms

    def _send(self, is_data: bool, payload: Iterable[int] | bytes) -> None:
        self.panel.feed(is_data, bytes(payload))

    def write_command(self, command: int) -> None:
        self._send(False, [command & 0xFF])

    def write_data(self, data: int) -> None:
        self._send(True, [data & 0xFF])

    def set_address(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Select the column and page window that the next pixel writes fill."""
        self.write_command(_CASET)
        for byte in _be16(x1, x2):
            self.write_data(byte)
        self.write_command(_PASET)
        for byte in _be16(y1, y2):
            self.write_data(byte)
        self.write_command(_RAMWR)

    def reset(self) -> None:
        """Pulse the hardware reset line."""
        self.reset_level = False
        self.delay(200)
        self.delay(200)
        self.reset_level = True

    def enable(self) -> None:
        self.reset_level = True

    def init(self) -> None:
        """Reset the panel, load its configuration and turn the display on."""
        self.enable()
        self.reset()
        self.write_command(_SWRESET)
        self.delay(1000)
        for command, params in _INIT_SEQUENCE:
            self.write_command(command)
            for byte in params:
                self.write_data(byte)
        self.write_command(_SLPOUT)
        self.delay(120)
        self.write_command(_DISPON)
        self.set_rotation(Rotation.VERTICAL_1)

    def set_rotation(self, rotation: int) -> None:
        """Set the screen orientation; an unknown value leaves it unchanged."""
        self.write_command(_MADCTL)
        self.delay(1)
        try:
            madctl, width, height = _ROTATIONS[Rotation(rotation)]
        except ValueError:
            return
        self.write_data(madctl)
        self.width = width
        self.height = height

    def draw_colour(self, colour: int) -> None:
        """Send one pixel of colour into the current window."""
        self._send(True, _be16(colour))

    def draw_colour_burst(self, colour: int, size: int) -> None:
        """Send ``size`` pixels of one colour, in blocks of at most BURST_MAX_SIZE bytes."""
        total = size * 2
        if total <= 0:
            return
        chunk = size if total < BURST_MAX_SIZE else BURST_MAX_SIZE
        stream = _be16(colour) * size
        for start in range(0, total, chunk):
            self._send(True, stream[start:start + chunk])

    def fill_screen(self, colour: int) -> None:
        self.set_address(0, 0, self.width, self.height)
        self.draw_colour_burst(colour, self.width * self.height)

    def draw_pixel(self, x: int, y: int, colour: int) -> None:
        """Draw one pixel; coordinates off the screen are ignored."""
        x &= 0xFFFF
        y &= 0xFFFF
        if x >= self.width or y >= self.height:
            return
        self._send(False, [_CASET])
        self._send(True, _be16(x, x + 1))
        self._send(False, [_PASET])
        self._send(True, _be16(y, y + 1))
        self._send(False, [_RAMWR])
        self._send(True, _be16(colour))

    def draw_rectangle(self, x: int, y: int, width: int, height: int, colour: int) -> None:
        """Fill a rectangle whose top left corner is ``(x, y)``, clipped to the screen."""
        x, y, width, height = (v & 0xFFFF for v in (x, y, width, height))
        if x >= self.width or y >= self.height:
            return
        if x + width - 1 >= self.width:
            width = self.width - x
        if y + height - 1 >= self.height:
            height = self.height - y
        self.set_address(x, y, x + width - 1, y + height - 1)
        self.draw_colour_burst(colour, height * width)

    def draw_horizontal_line(self, x: int, y: int, width: int, colour: int) -> None:
        x, y, width = (v & 0xFFFF for v in (x, y, width))
        if x >= self.width or y >= self.height:
            return
        if x + width - 1 >= self.width:
            width = self.width - x
        self.set_address(x, y, x + width - 1, y)
        self.draw_colour_burst(colour, width)

    def draw_vertical_line(self, x: int, y: int, height: int, colour: int) -> None:
        x, y, height = (v & 0xFFFF for v in (x, y, height))
        if x >= self.width or y >= self.height:
            return
        if y + height - 1 >= self.height:
            height = self.height - y
        self.set_address(x, y, x, y + height - 1)
        self.draw_colour_burst(colour, height)