"""Frame compression: colour runs and skips over unchanged pixels."""

from . import axis, rgb
from .axis import Axis, AxisType
from .common import SCR_X_MAX, SCR_Y_MAX, WARN, info
from .rgb import Run

# Bytes per pixel of the window surface frames are decoded into.
_WINDOW_SHIFT = 4


class Codec:
    """Encodes captured frames against the previous one and decodes them."""

    def __init__(self, width, height, delta):
        if width > SCR_X_MAX or height > SCR_Y_MAX:
            raise ValueError(f"screen resolution {width}x{height} is too large")
        self.width = width
        self.height = height
        self.delta = delta
        self._pixnum = width * height
        self._xmax = width
        self._skipx = 0
        self._skipy = 0
        self._prev = None
        self._next = None
        self._start = True

    def skip(self, x, y):
        """Sample every (x + 1)-th pixel of a row and every (y + 1)-th row."""
        self._xmax = self.width // (x + 1)
        self._skipx = x
        self._skipy = y

    def alloc(self):
        """Create the buffers that remember the previous frame."""
        size = self._pixnum * 3
        if not size:
            raise ValueError("screen has no pixels")
        self._prev = bytearray(size)
        self._next = bytearray(size)

    def free(self):
        self._prev = None
        self._next = None

    def max_size(self):
        """An upper bound on the size of one encoded frame."""
        return self._pixnum * 4

    def _walk(self, pixs):
        """Advance `pixs` over the sampled pixels; yield (pixel index, cell)."""
        index = 0
        column = 0
        cell = 0
        stride = self._skipx + 1
        while True:
            pixs.advance(stride)
            index += stride
            column += stride
            cell += 1
            if column >= self.width:
                column = 0
                pixs.advance(self.width * self._skipy)
                index += self.width * self._skipy
            if index >= self._pixnum:
                return
            yield index, cell

    def encode(self, pixs):
        """Encode the frame in `pixs`; empty bytes when there is nothing to send."""
        if pixs.data is None:
            return b""
        if self._prev is None:
            raise RuntimeError("codec buffers are not allocated")

        out = bytearray()
        prev, nxt = self._prev, self._next
        above = self.width * pixs.shift

        def emit(run, flag):
            out.extend(run.encode(False if self._skipy else flag))

        color = Run()
        color.set(pixs.data[pixs.pos:pixs.pos + 3])
        skipped = 0
        flag = False

        for index, cell in self._walk(pixs):
            at = pixs.pos
            pixel = bytes(pixs.data[at:at + 3])
            slot = slice(cell * 3, cell * 3 + 3)
            nxt[slot] = pixel
            if prev[slot] == pixel and not self._start:
                skipped += 1
                continue

            if skipped:
                emit(color, flag)
                flag = False
                rows, skipped = divmod(skipped, self._xmax)
                if rows:
                    out.extend(Axis(rows, AxisType.Y).encode())
                if skipped:
                    out.extend(Axis(skipped, AxisType.X).encode())
                    skipped = 0
                color.set(pixel)
                continue

            current = Run()
            current.set(pixel)
            if color.full():
                out.extend(color.encode(False))
                color = current
                continue
            if color.eq(current, self.delta):
                color.increment()
                continue

            emit(color, flag)
            color = current
            flag = False
            if index <= self.width:
                continue
            upper = Run()
            upper.set(pixs.data[at - above:at - above + 3])
            flag = color == upper

        if color.size > 1:
            emit(color, flag)

        self._start = False
        self._prev, self._next = nxt, prev
        return bytes(out)

    def decode(self, window, data):
        """Paint an encoded frame into `window`; False if the frame was broken."""
        offset = 0
        pos = 0
        while offset < len(data):
            is_line = bool(data[offset] & 0x80)
            try:
                if is_line:
                    consumed, moved = rgb.decode(
                        data, offset, window, pos, self.width, _WINDOW_SHIFT
                    )
                else:
                    consumed, moved = axis.decode(data, offset, self.width, _WINDOW_SHIFT)
            except ValueError as exc:
                kind = "Line" if is_line else "Shift"
                info(f"{WARN}{exc}; {kind} is broken, skip frame")
                return False
            offset += consumed
            pos += moved
        return True