"""Skip blocks: runs of unchanged pixels along a row or down whole rows."""

from dataclasses import dataclass
from enum import Enum


class AxisType(Enum):
    X = 0
    Y = 1


@dataclass
class Axis:
    """A skip of `value` pixels (X) or rows (Y)."""

    value: int = 0
    type: AxisType = AxisType.X

    def encode(self):
        """One byte for skips up to 31, otherwise two bytes big-endian."""
        value = self.value & 0xFFFF
        is_y = self.type is AxisType.Y
        if value <= 0x1F:
            return bytes([(0x20 if is_y else 0x00) | (value & 0x1F)])
        word = 0x4000 | (0x2000 if is_y else 0x0000) | (value & 0x1FFF)
        return word.to_bytes(2, "big")


def decode(data, offset, width, shift):
    """Read a skip block at `offset`.

    Returns the number of bytes consumed and how far, in bytes, the screen
    position moves for a screen `width` pixels wide with `shift` bytes per pixel.
    """
    if offset >= len(data):
        raise ValueError("Axis block is missing")
    head = data[offset]
    kind = head & 0xE0
    if kind in (0x00, 0x20):
        value = head & 0x1F
        consumed = 1
    elif kind in (0x40, 0x60):
        if offset + 2 > len(data):
            raise ValueError("Axis block is truncated")
        value = int.from_bytes(data[offset:offset + 2], "big") & 0x1FFF
        consumed = 2
    else:
        raise ValueError("Incorrect Axis block")
    step = width if kind in (0x20, 0x60) else 1
    return consumed, value * shift * step