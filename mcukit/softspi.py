"""Bit-banged SPI master over simulated GPIO pins."""

from __future__ import annotations

from enum import Enum, IntEnum


class BitOrder(IntEnum):
    LSBFIRST = 0
    MSBFIRST = 1


class SpiMode(IntEnum):
    MODE0 = 0
    MODE1 = 1
    MODE2 = 2
    MODE3 = 3


class ClockDivider(IntEnum):
    DIV2 = 2
    DIV4 = 4
    DIV8 = 8
    DIV16 = 16
    DIV32 = 32
    DIV64 = 64
    DIV128 = 128


class PinMode(Enum):
    INPUT = "input"
    OUTPUT = "output"


class Pin:
    """A GPIO line that remembers its mode, its level and every level written to it."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.mode = PinMode.INPUT
        self.level = False
        self.history: list[bool] = []

    def __repr__(self) -> str:
        return f"Pin({self.name!r}, mode={self.mode.name}, level={self.level})"

    def configure(self, mode: PinMode) -> None:
        self.mode = PinMode(mode)

    def write(self, state: bool) -> None:
        self.level = bool(state)
        self.history.append(self.level)

    def read(self) -> bool:
        return self.level


def _check(value: int, limit: int) -> int:
    if not 0 <= value <= limit:
        raise ValueError(f"value {value!r} out of range 0..{limit:#x}")
    return value


class SoftSPI:
    """SPI master that drives MOSI and SCK and samples MISO bit by bit."""

    def __init__(self, mosi: Pin, miso: Pin, sck: Pin) -> None:
        self.mosi = mosi
        self.miso = miso
        self.sck = sck
        self.clock_divider = ClockDivider.DIV128
        self.mode = SpiMode.MODE0
        self.order = BitOrder.MSBFIRST

    @property
    def _ckp(self) -> bool:
        return self.mode in (SpiMode.MODE2, SpiMode.MODE3)

    @property
    def _cke(self) -> bool:
        return self.mode in (SpiMode.MODE1, SpiMode.MODE3)

    def begin(self) -> None:
        """Make MOSI and SCK outputs and MISO an input."""
        self.mosi.configure(PinMode.OUTPUT)
        self.miso.configure(PinMode.INPUT)
        self.sck.configure(PinMode.OUTPUT)

    def end(self) -> None:
        """Release all three lines as inputs."""
        for pin in (self.mosi, self.miso, self.sck):
            pin.configure(PinMode.INPUT)

    def set_bit_order(self, order: int) -> None:
        self.order = BitOrder(int(order) & 1)

    def set_data_mode(self, mode: int) -> None:
        """Select clock polarity and phase, and park SCK at its idle level."""
        self.mode = SpiMode(mode)
        self.sck.write(self._ckp)

    def set_clock_divider(self, divider: int) -> None:
        """Select the clock divider; unknown values fall back to 128."""
        try:
            self.clock_divider = ClockDivider(divider)
        except ValueError:
            self.clock_divider = ClockDivider.DIV128

    def send_bit(self, bit: int, data: int) -> None:
        """Put bit number ``bit`` of ``data`` on MOSI and pulse SCK."""
        self.mosi.write(bool(data >> bit & 1))
        self.sck.write(True)
        self.sck.write(False)

    def send(self, data: int) -> None:
        """Clock out one byte, most significant bit first."""
        _check(data, 0xFF)
        for bit in range(7, -1, -1):
            self.send_bit(bit, data)

    def send16(self, data: int) -> None:
        """Clock out a 16-bit word, byte order following the bit order."""
        _check(data, 0xFFFF)
        high, low = data >> 8, data & 0xFF
        first, second = (high, low) if self.order is BitOrder.MSBFIRST else (low, high)
        self.send(first)
        self.send(second)

    def transfer(self, value: int) -> int:
        """Exchange one byte: shift ``value`` out on MOSI while reading MISO."""
        _check(value, 0xFF)
        msb_first = self.order is BitOrder.MSBFIRST
        bits = range(7, -1, -1) if msb_first else range(8)
        cke = self._cke
        sck = self._ckp
        received = 0
        for bit in bits:
            if cke:
                sck = not sck
                self.sck.write(sck)
            self.mosi.write(bool(value >> bit & 1))
            sck = not sck
            self.sck.write(sck)
            level = int(self.miso.read())
            if msb_first:
                received = (received << 1) | level
            else:
                received = (received >> 1) | (level << 7)
            if not cke:
                sck = not sck
                self.sck.write(sck)
        return received

    def transfer16(self, data: int) -> int:
        """Exchange a 16-bit word, byte order following the bit order."""
        _check(data, 0xFFFF)
        high, low = data >> 8, data & 0xFF
        if self.order is BitOrder.MSBFIRST:
            high_in = self.transfer(high)
            low_in = self.transfer(low)
        else:
            low_in = self.transfer(low)
            high_in = self.transfer(high)
        return high_in << 8 | low_in