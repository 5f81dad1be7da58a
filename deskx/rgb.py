"""Colour run blocks: one colour repeated over consecutive pixels."""

from dataclasses import dataclass

from . import palette

_BIG = 32767
_MIDDLE = 127
_SMALL = 31
_TOP = 31


def _big(color, size):
    return (0xE0000000 | ((size & 0x7FFF) << 14) | color).to_bytes(4, "big")


def _middle(color, size):
    return (0xC0000000 | ((size & 0x7F) << 22) | (color << 8)).to_bytes(4, "big")[:3]


def _small(index, size):
    return (0xA000 | ((size & 0x1F) << 8) | index).to_bytes(2, "big")


def _top(size):
    return bytes([0x80 | (size & 0x1F)])


@dataclass
class Run:
    """A colour and how many pixels in a row carry it."""

    r: int = 0
    g: int = 0
    b: int = 0
    size: int = 1

    def set(self, pixel):
        """Start a new run of one pixel from the first three bytes of `pixel`."""
        self.r, self.g, self.b = pixel[0], pixel[1], pixel[2]
        self.size = 1

    def increment(self):
        if not self.full():
            self.size += 1

    def decrement(self):
        if self.size > 1:
            self.size -= 1

    def full(self):
        return self.size >= _BIG

    def rgb14(self):
        """The colour reduced to 4+5+5 bits."""
        return ((self.r // 17) << 10) | ((self.g // 8) << 5) | (self.b // 8)

    def rgb24(self):
        return (self.r << 16) | (self.g << 8) | self.b

    def eq(self, other, delta):
        """Whether two colours are within `delta` of each other or reduce alike."""
        distance = abs(other.r - self.r) + abs(other.g - self.g) + abs(other.b - self.b)
        return distance <= delta or self.rgb14() == other.rgb14()

    def encode(self, flag):
        """Encode the run; `flag` allows copying the colour from the row above."""
        num = self.size - 1
        if num > _MIDDLE:
            return _big(self.rgb14(), num)
        if flag and num <= _TOP:
            return _top(num)
        if num > _SMALL:
            return _middle(self.rgb14(), num)
        index = palette.to8(self.rgb24())
        if index is None:
            return _middle(self.rgb14(), num)
        return _small(index, num)


def _read(data, offset, count):
    if offset + count > len(data):
        raise ValueError("RGB block is truncated")
    return int.from_bytes(data[offset:offset + count], "big")


def decode(data, offset, screen, pos, width, shift):
    """Paint the run block at `data[offset]` into `screen` starting at byte `pos`.

    Returns the number of bytes consumed and how far, in bytes, the screen
    position moves.
    """
    if offset >= len(data):
        raise ValueError("RGB block is missing")
    head = data[offset]
    kind = head & 0xE0
    if kind == 0xE0:
        value = _read(data, offset, 4)
        repeat = (value & 0x1FFFC000) >> 14
        color = bytes((
            ((value & 0x3C00) >> 10) * 17,
            ((value & 0x3E0) >> 5) * 8,
            (value & 0x1F) * 8,
        ))
        consumed = 4
    elif kind == 0xC0:
        value = _read(data, offset, 3) << 8
        repeat = (value & 0x1FC00000) >> 22
        color = bytes((
            ((value & 0x3C0000) >> 18) * 17,
            ((value & 0x3E000) >> 13) * 8,
            ((value & 0x1F00) >> 8) * 8,
        ))
        consumed = 3
    elif kind == 0xA0:
        value = _read(data, offset, 2)
        repeat = (value & 0x1F00) >> 8
        # Palette colours are written low byte first.
        color = palette.to24(value & 0xFF).to_bytes(3, "little")
        consumed = 2
    elif kind == 0x80:
        source = pos - width * shift
        if source < 0:
            raise ValueError("RGB block refers to a row above the screen")
        repeat = head & 0x1F
        color = bytes(screen[source:source + 3])
        consumed = 1
    else:
        raise ValueError("Incorrect RGB block")

    advance = (repeat + 1) * shift
    if pos < 0 or pos + repeat * shift + 3 > len(screen):
        raise ValueError("RGB block runs past the end of the screen")
    for at in range(pos, pos + advance, shift):
        screen[at:at + 3] = color
    return consumed, advance