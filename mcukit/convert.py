"""Small numeric helpers: clamping and byte reinterpretation."""

from __future__ import annotations

import struct
from typing import TypeVar

T = TypeVar("T")

_FORMATS = {"uint8": "B", "uint16": "H", "uint32": "I", "float": "f", "double": "d"}

_KINDS_BY_SIZE = {
    2: frozenset({"uint8", "uint16"}),
    4: frozenset({"uint8", "uint16", "uint32", "float"}),
    8: frozenset({"uint8", "uint16", "uint32", "float", "double"}),
}


def constrain(amount: T, low: T, high: T) -> T:
    """Clamp ``amount`` into the range ``[low, high]``."""
    if amount < low:
        return low
    if amount > high:
        return high
    return amount


def reinterpret(data: bytes, kind: str) -> tuple:
    """View 2, 4 or 8 little-endian bytes as a tuple of values of ``kind``.

    ``kind`` is one of uint8, uint16, uint32, float or double; a kind that
    does not fit the buffer size raises ValueError.
    """
    raw = bytes(data)
    kinds = _KINDS_BY_SIZE.get(len(raw))
    if kinds is None:
        raise ValueError(f"buffer must be 2, 4 or 8 bytes long, got {len(raw)}")
    if kind not in kinds:
        raise ValueError(f"cannot view {len(raw)} bytes as {kind!r}")
    code = _FORMATS[kind]
    count = len(raw) // struct.calcsize(code)
    return struct.unpack(f"<{count}{code}", raw)