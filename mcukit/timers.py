"""Millisecond periodic timers and cycle-counter time arithmetic."""

from __future__ import annotations

import time
from collections.abc import Callable

_UINT32 = 0xFFFFFFFF
_UINT16 = 0xFFFF


def _monotonic_ms() -> int:
    return (time.monotonic_ns() // 1_000_000) & _UINT32


class PeriodicTimer:
    """Reports when a period has elapsed on a wrapping 32-bit millisecond clock."""

    def __init__(
        self,
        period_ms: int,
        enable: bool = True,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.period = period_ms
        self._enabled = bool(enable)
        self._clock = clock if clock is not None else _monotonic_ms
        self._mark = 0

    @property
    def period(self) -> int:
        return self._period

    @period.setter
    def period(self, value: int) -> None:
        if not 0 <= value <= _UINT16:
            raise ValueError(f"period must fit in 16 bits, got {value!r}")
        self._period = value

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        """Start the timer and restart its period from now."""
        self._enabled = True
        self._mark = self._clock() & _UINT32

    def disable(self) -> None:
        """Stop the timer; ``ready`` returns False until it is enabled again."""
        self._enabled = False

    def ready(self) -> bool:
        """Return True once per elapsed period, restarting the period when it does."""
        if not self._enabled:
            return False
        now = self._clock() & _UINT32
        if (now - self._mark) & _UINT32 >= self._period:
            self._mark = now
            return True
        return False


def _cycles_per_us(core_clock: int) -> int:
    per_us = core_clock // 1_000_000
    if per_us <= 0:
        raise ValueError(f"core clock must be at least 1 MHz, got {core_clock!r}")
    return per_us


def micros_from_cycles(cycles: int, core_clock: int) -> int:
    """Convert a cycle count into whole microseconds at ``core_clock`` Hz."""
    return (cycles & _UINT32) // _cycles_per_us(core_clock)


def delay_deadline(start_cycles: int, us: int, core_clock: int) -> int:
    """Return the 32-bit cycle counter value ``us`` microseconds after ``start_cycles``."""
    return (start_cycles + us * _cycles_per_us(core_clock)) & _UINT32