"""CAN acceptance filter calculator for identifier/mask filter banks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_UINT32 = 0xFFFFFFFF


@dataclass(frozen=True)
class _Layout:
    scan_limit: int
    hex_digits: int
    header: str
    rule: str


_LAYOUTS = {
    11: _Layout(0x800, 4, " HEX        BIN", "-" * 37),
    29: _Layout(0x200000, 8, "   HEX                  BIN", "-" * 41),
}


def _layout(width: int) -> _Layout:
    try:
        return _LAYOUTS[width]
    except KeyError:
        raise ValueError(f"identifier width must be 11 or 29, not {width!r}") from None


def format_bits(value: int, width: int) -> str:
    """Return the low ``width`` bits of ``value`` as a binary string, MSB first."""
    _layout(width)
    return format(value & ((1 << width) - 1), f"0{width}b")


def _deposit(n: int, positions: Sequence[int]) -> int:
    result = 0
    for index, position in enumerate(positions):
        if n >> index & 1:
            result |= 1 << position
    return result


def accepted_ids(can_id: int, mask: int, width: int) -> Iterator[int]:
    """Yield, in ascending order, every identifier the filter lets through.

    An identifier ``i`` passes when ``i & mask == can_id``; identifiers are
    scanned below 0x800 for standard frames and below 0x200000 for extended ones.
    """
    limit = _layout(width).scan_limit
    if can_id & ~mask or can_id >= limit:
        return
    free = [bit for bit in range(limit.bit_length() - 1) if not mask >> bit & 1]
    for n in range(1 << len(free)):
        yield can_id | _deposit(n, free)


def render_report(can_id: int, mask: int, width: int) -> str:
    """Build the printable table of filter registers and accepted identifiers."""
    layout = _layout(width)
    digits = layout.hex_digits

    def row(value: int) -> str:
        return f"0x{value:0{digits}X}  {format_bits(value, width)}"

    lines = [
        "",
        layout.header,
        layout.rule,
        f"{row(can_id)}    ID - first filter register",
        f"{row(mask)}    Mask - second filter register",
        "",
        "IDs that will be accepted",
        "-" * 25,
    ]
    lines.extend(row(i) for i in accepted_ids(can_id, mask, width))
    return "\n".join(lines) + "\n"


def _parse_number(text: str) -> int:
    body = text.strip()
    try:
        if body[:2].lower() == "0x":
            value = int(body[2:], 16)
        elif len(body) > 1 and body.startswith("0"):
            value = int(body[1:], 8)
        else:
            value = int(body, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    return value & _UINT32


def main(argv: Sequence[str] | None = None) -> int:
    """Print the acceptance report for an identifier and mask given on the command line."""
    parser = argparse.ArgumentParser(
        prog="canmask", description="List CAN identifiers accepted by an ID/mask filter."
    )
    parser.add_argument("can_id", type=_parse_number, help="filter identifier register")
    parser.add_argument("mask", type=_parse_number, help="filter mask register")
    parser.add_argument(
        "--width", type=int, choices=sorted(_LAYOUTS), default=29, help="identifier width in bits"
    )
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    print(render_report(args.can_id, args.mask, args.width), end="")
    return 0