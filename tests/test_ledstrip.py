import pytest

from mcukit.ledstrip import PALETTE, RGB, RainbowStrip, split_digits


def test_new_strip_is_dark():
    strip = RainbowStrip()
    assert strip.to_bytes() == bytes(18)


def test_default_fade_step():
    assert RainbowStrip().fade == 21


def test_first_step_fades_towards_first_colour():
    strip = RainbowStrip()
    first = strip.step()
    assert first == RGB(strip.fade, strip.fade, strip.fade)
    assert strip.leds[0] == first


def test_step_shifts_colours_along_strip():
    strip = RainbowStrip()
    for _ in range(40):
        before = list(strip.leds)
        strip.step()
        assert strip.leds[1:] == before[:-1]
        assert len(strip.leds) == strip.length


def test_head_moves_towards_target():
    strip = RainbowStrip()
    for _ in range(200):
        old = strip.leds[0]
        new = strip.step()
        target = strip.palette[strip.colour_index]
        for channel in ("r", "g", "b"):
            assert abs(getattr(new, channel) - getattr(target, channel)) <= abs(
                getattr(old, channel) - getattr(target, channel)
            )


def test_palette_cycles_through_all_colours():
    strip = RainbowStrip()
    seen = set()
    for _ in range(100):
        strip.step()
        assert 0 <= strip.colour_index < len(PALETTE)
        seen.add(strip.colour_index)
    assert seen == set(range(len(PALETTE)))


def test_to_bytes_uses_grb_order():
    strip = RainbowStrip(3)
    for _ in range(10):
        strip.step()
    data = strip.to_bytes()
    assert len(data) == 9
    for index, led in enumerate(strip.leds):
        assert data[3 * index:3 * index + 3] == bytes([led.g, led.r, led.b])


@pytest.mark.parametrize("length", [0, -1, 129])
def test_invalid_length(length):
    with pytest.raises(ValueError):
        RainbowStrip(length)


def test_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        RGB(256, 0, 0)
    with pytest.raises(ValueError):
        RGB(0, -1, 0)


def test_split_digits():
    assert split_digits(123) == (2, 3)
    assert split_digits(7) == (0, 7)
    assert split_digits(48) == (4, 8)


def test_split_digits_rejects_out_of_range():
    with pytest.raises(ValueError):
        split_digits(256)