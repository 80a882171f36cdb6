import pytest

from mcukit.timers import PeriodicTimer, delay_deadline, micros_from_cycles


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_ready_after_period():
    clock = FakeClock()
    timer = PeriodicTimer(100, clock=clock)
    clock.now = 50
    assert timer.ready() is False
    clock.now = 100
    assert timer.ready() is True
    clock.now = 150
    assert timer.ready() is False
    clock.now = 200
    assert timer.ready() is True


def test_disabled_timer_never_ready():
    clock = FakeClock()
    timer = PeriodicTimer(10, enable=False, clock=clock)
    clock.now = 1000
    assert timer.ready() is False
    assert timer.enabled is False


def test_enable_restarts_period():
    clock = FakeClock(500)
    timer = PeriodicTimer(100, enable=False, clock=clock)
    timer.enable()
    clock.now = 550
    assert timer.ready() is False
    clock.now = 600
    assert timer.ready() is True


def test_disable_stops_timer():
    clock = FakeClock()
    timer = PeriodicTimer(10, clock=clock)
    timer.disable()
    clock.now = 100
    assert timer.ready() is False


def test_ready_survives_clock_wraparound():
    clock = FakeClock(0xFFFFFFF0)
    timer = PeriodicTimer(30, enable=False, clock=clock)
    timer.enable()
    clock.now = 0x10
    assert timer.ready() is True


def test_period_can_be_changed():
    clock = FakeClock()
    timer = PeriodicTimer(100, clock=clock)
    timer.period = 20
    clock.now = 20
    assert timer.period == 20
    assert timer.ready() is True


def test_period_must_fit_sixteen_bits():
    with pytest.raises(ValueError):
        PeriodicTimer(70000)


def test_micros_from_one_second_of_cycles():
    assert micros_from_cycles(72_000_000, 72_000_000) == 1_000_000


@pytest.mark.parametrize("start", [0, 12345, 0xFFFFFF00])
@pytest.mark.parametrize("us", [1, 10, 500])
def test_deadline_matches_microseconds(start, us):
    clock = 72_000_000
    deadline = delay_deadline(start, us, clock)
    assert micros_from_cycles((deadline - start) & 0xFFFFFFFF, clock) == us


def test_deadline_wraps_to_32_bits():
    deadline = delay_deadline(0xFFFFFFFF, 1, 8_000_000)
    assert 0 <= deadline < 0xFFFFFFFF


def test_slow_core_clock_rejected():
    with pytest.raises(ValueError):
        micros_from_cycles(100, 500_000)