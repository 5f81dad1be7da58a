import pytest

from deskx.codec import Codec
from deskx.common import SCR_X_MAX
from deskx.display import Pixels

WHITE = b"\xff\xff\xff\x00"
BLACK = b"\x00\x00\x00\x00"


def _frame(rows):
    return b"".join(b"".join(row) for row in rows)


def _rgb(buffer):
    return [bytes(buffer[i:i + 3]) for i in range(0, len(buffer), 4)]


@pytest.fixture
def codec():
    c = Codec(4, 2, 0)
    c.alloc()
    return c


FIRST = _frame([[WHITE, WHITE, BLACK, BLACK], [WHITE, WHITE, BLACK, BLACK]])


def test_first_frame_bytes(codec):
    encoded = codec.encode(Pixels(data=FIRST, shift=4))
    assert encoded == b"\xa1\x0f\xa1\x00\xa1\x0f\x81"


def test_first_frame_round_trip(codec):
    encoded = codec.encode(Pixels(data=FIRST, shift=4))
    window = bytearray(codec.max_size())
    assert codec.decode(window, encoded) is True
    assert _rgb(window) == _rgb(FIRST)


def test_unchanged_frame_encodes_nothing(codec):
    codec.encode(Pixels(data=FIRST, shift=4))
    assert codec.encode(Pixels(data=FIRST, shift=4)) == b""


def test_pixels_are_advanced(codec):
    pixs = Pixels(data=FIRST, shift=4)
    codec.encode(pixs)
    assert pixs.pos >= 8 * 4


def test_missing_frame_encodes_nothing(codec):
    assert codec.encode(Pixels()) == b""


def test_encode_requires_buffers():
    c = Codec(4, 2, 0)
    with pytest.raises(RuntimeError):
        c.encode(Pixels(data=FIRST, shift=4))


def test_free_releases_buffers(codec):
    codec.free()
    with pytest.raises(RuntimeError):
        codec.encode(Pixels(data=FIRST, shift=4))


def test_alloc_empty_screen():
    with pytest.raises(ValueError):
        Codec(0, 0, 2).alloc()


def test_too_large_screen():
    with pytest.raises(ValueError):
        Codec(SCR_X_MAX + 1, 10, 2)


def test_max_size(codec):
    assert codec.max_size() == 4 * 2 * 4


def test_decode_axis_then_run(codec):
    window = bytearray(codec.max_size())
    assert codec.decode(window, b"\x21\xa0\x0f") is True
    assert window[16:19] == b"\xff\xff\xff"
    assert not any(window[:16])
    assert not any(window[19:])


def test_decode_broken_axis(codec):
    window = bytearray(codec.max_size())
    assert codec.decode(window, b"\x40") is False


def test_decode_broken_line(codec):
    window = bytearray(codec.max_size())
    assert codec.decode(window, b"\xe0\x00") is False


def test_similar_colours_merge_with_delta():
    close = b"\x10\x10\x10\x00"
    closer = b"\x11\x10\x10\x00"
    data = _frame([[close, closer, close, closer], [close, closer, close, closer]])
    tolerant = Codec(4, 2, 3)
    tolerant.alloc()
    strict = Codec(4, 2, 0)
    strict.alloc()
    assert len(tolerant.encode(Pixels(data=data, shift=4))) <= len(
        strict.encode(Pixels(data=data, shift=4))
    )