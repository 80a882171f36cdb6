"""Compact 6x8 bitmap font covering printable ASCII."""

from __future__ import annotations

CHAR_WIDTH = 6
CHAR_HEIGHT = 8

_SYMBOLS = (
    "000000000000",  # space
    "5c0000000000",  # !
    "060006000000",  # "
    "287c287c2800",  # #
    "5c54fe547400",  # $
    "442010084400",  # %
    "285454205000",  # &
    "060000000000",  # '
    "384400000000",  # (
    "443800000000",  # )
    "020702000000",  # *
    "10107c101000",  # +
    "c00000000000",  # ,
    "101010101000",  # -
    "400000000000",  # .
    "60100c000000",  # /
    "7c64544c7c00",  # 0
    "487c40000000",  # 1
    "645454544800",  # 2
    "445454546c00",  # 3
    "3c2070202000",  # 4
    "5c5454542400",  # 5
    "7c5454547400",  # 6
    "040464140c00",  # 7
    "7c5454547c00",  # 8
    "5c5454547c00",  # 9
    "440000000000",  # :
    "c40000000000",  # ;
    "102844000000",  # <
    "282828282800",  # =
    "442810000000",  # >
    "080454080000",  # ?
    "7c4454545c00",  # @
)

_LETTERS = (
    "7c2424247c00",  # A
    "7c5454546c00",  # B
    "7c4444444400",  # C
    "7c4444443800",  # D
    "7c5454544400",  # E
    "7c1414140400",  # F
    "7c4444547400",  # G
    "7c1010107c00",  # H
    "44447c444400",  # I
    "604040447c00",  # J
    "7c1010284400",  # K
    "7c4040404000",  # L
    "7c0810087c00",  # M
    "7c0810207c00",  # N
    "384444443800",  # O
    "7c1414140800",  # P
    "3c2464243c00",  # Q
    "7c1414146800",  # R
    "5c5454547400",  # S
    "04047c040400",  # T
    "7c4040407c00",  # U
    "0c3040300c00",  # V
    "3c4030403c00",  # W
    "442810284400",  # X
    "0c1060100c00",  # Y
    "4464544c4400",  # Z
)

_BRACKETS = (
    "7c4400000000",  # [
    "0c1060000000",  # backslash
    "447c00000000",  # ]
    "000100010000",  # ^
    "404040404040",  # _
    "000100000000",  # `
)

_BRACES = (
    "107c44000000",  # {
    "6c0000000000",  # |
    "447c10000000",  # }
    "020102010000",  # ~
    "000000000000",  # DEL
)

_TABLE: tuple[bytes, ...] = tuple(
    bytes.fromhex(row)
    for row in (*_SYMBOLS, *_LETTERS, *_BRACKETS, *_LETTERS, *_BRACES)
)


def glyph(character: str) -> bytes:
    """Return the six column bytes of ``character``; bit 0 of each byte is the top row.

    Printable characters map from the space onwards. Control characters
    index the table by their raw code, as the display firmware does.
    """
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    code = ord(character)
    index = code if code < 0x20 else code - 0x20
    if index >= len(_TABLE):
        raise ValueError(f"character {character!r} is not in the font")
    return _TABLE[index]