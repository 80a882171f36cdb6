# mcukit

Small, dependency-free tools for checking microcontroller firmware logic on a
desktop: CAN filter masks, a bit-banged SPI master, an ILI9341 display driver
with an in-memory panel, millisecond timers, and a few demos built on them.

## Modules

- `mcukit.canmask`: which identifiers a CAN ID/mask filter pair accepts, for
  11-bit standard and 29-bit extended frames (`format_bits`, `accepted_ids`,
  `render_report`, and the `can-mask` command).
- `mcukit.convert`: `constrain(amount, low, high)` clamps a value;
  `reinterpret(data, kind)` views 2, 4 or 8 little-endian bytes as a tuple of
  `"uint8"`, `"uint16"`, `"uint32"`, `"float"` or `"double"` values, raising
  `ValueError` for a size or kind that does not fit.
- `mcukit.timers`: `PeriodicTimer`, a task timer on a wrapping 32-bit
  millisecond clock (by default the monotonic clock, or any callable you pass
  as `clock`), with `enable`, `disable` and `ready`; plus `micros_from_cycles`
  and `delay_deadline` for cycle-counter arithmetic.
- `mcukit.softspi`: a bit-banged SPI master `SoftSPI` over `Pin` objects that
  record their mode, level and every level written, with `BitOrder`,
  `SpiMode`, `ClockDivider` and `PinMode` settings.
- `mcukit.display`: the `Ili9341` driver, `Colour` (RGB565) and `Rotation`
  enums, and `PanelModel`, an in-memory controller that interprets commands
  and lets you read back pixels with `pixel(x, y)`.
- `mcukit.font`: a 6x8 bitmap font; `glyph(character)` returns six column bytes.
- `mcukit.gfx`: circles, rectangles, lines, characters, text and full-screen
  images drawn through an `Ili9341`.
- `mcukit.fractal`: the Sierpinski triangle by the chaos game (`ChaosGame`,
  `render`, and the `mcukit-fractal` command).
- `mcukit.ledstrip`: `RainbowStrip`, a rainbow animation for a short RGB LED
  strip whose `to_bytes()` gives green, red, blue order; `RGB`; and
  `split_digits`, the tens and units digits of an 8-bit value.
- `mcukit.melody`: a fixed ringtone as `Note` frequencies, `signal_periods()`
  in microseconds, `note_durations()` in milliseconds and `melody()` pairs.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## CAN filter calculator

Give it a filter ID and a mask (decimal, `0x` hex or leading-zero octal); it
prints both in hex and binary and then lists every identifier for which
`id & mask == filter_id`. The width is 29 bits unless `--width 11` is given:

```
can-mask 0x0100 0x07F8 --width 11
can-mask 0x00010000 0x1FFFFFFF
```

From Python:

```python
from mcukit.canmask import accepted_ids, format_bits, render_report

ids = list(accepted_ids(0x0100, 0x07F8, 11))   # 0x100 .. 0x107
print(format_bits(0x0100, 11))                 # 00100000000
print(render_report(0x0100, 0x07F8, 11))
```

## Timers

```python
from mcukit.timers import PeriodicTimer

now = 0
timer = PeriodicTimer(100, True, lambda: now)
now = 100
timer.ready()   # True, and the period restarts
```

## Soft SPI

```python
from mcukit.softspi import Pin, SoftSPI, BitOrder, SpiMode, ClockDivider

spi = SoftSPI(Pin("MOSI"), Pin("MISO"), Pin("SCK"))
spi.begin()
spi.set_bit_order(BitOrder.MSBFIRST)
spi.set_data_mode(SpiMode.MODE0)
spi.set_clock_divider(ClockDivider.DIV8)
reply = spi.transfer(0xA5)
spi.end()
```

`Pin.history` holds every level the master wrote, so the clock and data
waveforms can be checked after a transfer.

## Drawing on an ILI9341

```python
from mcukit.display import Ili9341, PanelModel, Colour, Rotation
from mcukit import gfx

panel = PanelModel()
lcd = Ili9341(panel)
lcd.delay = lambda ms: None   # skip the real reset and wake-up pauses
lcd.init()
lcd.set_rotation(Rotation.VERTICAL_1)
lcd.fill_screen(Colour.WHITE)
gfx.draw_filled_circle(lcd, 120, 160, 10, Colour.RED)
gfx.draw_text(lcd, "HELLO", 10, 10, Colour.BLACK, 2, Colour.WHITE)
print(panel.pixel(120, 160))
```

`gfx.draw_image` needs at least `gfx.IMAGE_SIZE` bytes of RGB565 data.

## Chaos game

```
mcukit-fractal --output triangle.ppm --steps 20000 --seed 1
```

renders the triangle on a `PanelModel` and writes it as a PPM image.
`ChaosGame().points(n)` yields the points themselves, and
`render(display, game, steps)` draws them on any `Ili9341`.

## What it does not do

Everything runs against simulated hardware. `Pin` does not touch real GPIO,
`Ili9341` talks only to an object with a `feed(is_data, payload)` method such
as `PanelModel`, `RainbowStrip` only produces the bytes for an LED strip, and
`mcukit.melody` only computes periods and durations: nothing here drives a
real SPI bus, display, LED strip or buzzer.