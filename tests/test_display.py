import pytest

from deskx.display import (
    EMSG,
    MAXKEYS,
    Display,
    Events,
    Key,
    KeyType,
    Pixels,
    get,
)


class _FakeScreen(Display):
    session = 97

    def init(self):
        return True

    def close(self):
        pass

    def res(self):
        return (640, 480)

    def refresh(self):
        return Pixels()

    def set(self, events):
        pass


def test_clear_resets_everything():
    events = Events(mouse=(5, 6), buttons=[Key(KeyType.KEY_DOWN, 30)] * MAXKEYS)
    events.clear()
    assert events.mouse == (0, 0)
    assert all(b.type is KeyType.NO_TYPE and b.key == 0 for b in events.buttons)
    assert len(events.buttons) == MAXKEYS


def test_pack_length():
    assert len(Events().pack()) == EMSG


def test_pack_bytes():
    events = Events(mouse=(0x0102, 3))
    events.buttons[0] = Key(KeyType.MOUSE_DOWN, 1)
    data = events.pack()
    assert data[:4] == b"\x02\x01\x03\x00"
    assert data[4:9] == b"\x01\x00\x00\x00\x01"
    assert data[9:14] == b"\x00\x00\x00\x00\x04"


def test_round_trip():
    events = Events(mouse=(1919, 1079))
    events.buttons[0] = Key(KeyType.KEY_DOWN, 4)
    events.buttons[1] = Key(KeyType.KEY_UP, 4)
    events.buttons[2] = Key(KeyType.MOUSE_UP, 3)
    assert Events.unpack(events.pack()) == events


def test_unpack_short():
    with pytest.raises(ValueError):
        Events.unpack(b"\x00" * (EMSG - 1))


def test_unpack_bad_type():
    data = bytearray(Events().pack())
    data[8] = 9
    with pytest.raises(ValueError):
        Events.unpack(bytes(data))


def test_pixels_advance():
    pixs = Pixels(data=b"\x00" * 64, shift=4)
    pixs.advance()
    assert pixs.pos == 4
    pixs.advance(3)
    assert pixs.pos == 16


def test_get_unknown_session():
    assert get(250) is None


def test_get_registered_backend():
    screen = get(97)
    assert isinstance(screen, _FakeScreen)
    assert screen.res() == (640, 480)