"""Screen sources, captured pixels and input events."""

import inspect
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum

from .common import RGBA

MAXKEYS = 5
EMSG = MAXKEYS * 5 + 4

_MOUSE = struct.Struct("<HH")
_KEY = struct.Struct("<IB")


class KeyType(IntEnum):
    MOUSE_UP = 0
    MOUSE_DOWN = 1
    KEY_UP = 2
    KEY_DOWN = 3
    NO_TYPE = 4


@dataclass
class Key:
    type: KeyType = KeyType.NO_TYPE
    key: int = 0


def _blank_buttons():
    return [Key() for _ in range(MAXKEYS)]


@dataclass
class Events:
    """Mouse position and up to MAXKEYS button or key changes."""

    mouse: tuple = (0, 0)
    buttons: list = field(default_factory=_blank_buttons)

    def clear(self):
        self.mouse = (0, 0)
        self.buttons = _blank_buttons()

    def pack(self):
        """The EMSG-byte wire form of the events."""
        x, y = self.mouse
        parts = [_MOUSE.pack(x & 0xFFFF, y & 0xFFFF)]
        parts.extend(
            _KEY.pack(button.key & 0xFFFFFFFF, int(button.type))
            for button in self.buttons[:MAXKEYS]
        )
        return b"".join(parts)

    @classmethod
    def unpack(cls, data):
        if len(data) != EMSG:
            raise ValueError(f"events message must be {EMSG} bytes, got {len(data)}")
        mouse = _MOUSE.unpack_from(data, 0)
        buttons = [
            Key(KeyType(kind), key)
            for key, kind in _KEY.iter_unpack(bytes(data[_MOUSE.size:]))
        ]
        return cls(mouse=mouse, buttons=buttons)


@dataclass
class Pixels:
    """A captured frame read from `pos`, `shift` bytes per pixel."""

    data: object = None
    pos: int = 0
    shift: int = 0
    type: int = RGBA

    def advance(self, count=1):
        self.pos += self.shift * count


_REGISTRY = []


class Display(ABC):
    """A screen source; subclasses set `session` to the session kind they serve."""

    session = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _REGISTRY.append(cls)

    @abstractmethod
    def init(self):
        """Connect to the screen; True on success."""

    @abstractmethod
    def close(self):
        """Release the screen."""

    @abstractmethod
    def res(self):
        """The screen resolution as (width, height)."""

    @abstractmethod
    def refresh(self):
        """Capture the screen and return it as Pixels."""

    @abstractmethod
    def set(self, events):
        """Replay input events on the screen."""


def get(session_type):
    """A screen source for the session kind, or None if none is available."""
    for backend in _REGISTRY:
        if backend.session == session_type and not inspect.isabstract(backend):
            return backend()
    return None