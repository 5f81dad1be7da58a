"""TCP session between client and server, and the handshake messages."""

import socket
import struct
from dataclasses import dataclass
from enum import Enum

from .args import Mode
from .common import WARN, info

_TIMEOUT = 10


class Status(Enum):
    OK = 0
    EMPTY = 1
    FAIL = 2


def _unpack(fmt, data, name):
    if len(data) != fmt.size:
        raise ValueError(f"{name} message must be {fmt.size} bytes, got {len(data)}")
    return fmt.unpack(bytes(data))


_HELLO = struct.Struct("<BB")
_SCREEN = struct.Struct("<HH")
_SKIP = struct.Struct("<BB")


@dataclass
class Hello:
    """The client's greeting: colour distance and frame rate."""

    delta: int = 0
    fps: int = 0
    SIZE = _HELLO.size

    def pack(self):
        return _HELLO.pack(self.delta & 0xFF, self.fps & 0xFF)

    @classmethod
    def unpack(cls, data):
        return cls(*_unpack(_HELLO, data, "hello"))


@dataclass
class Screen:
    """The server's screen resolution."""

    width: int = 0
    height: int = 0
    SIZE = _SCREEN.size

    def pack(self):
        return _SCREEN.pack(self.width & 0xFFFF, self.height & 0xFFFF)

    @classmethod
    def unpack(cls, data):
        return cls(*_unpack(_SCREEN, data, "screen"))


@dataclass
class SkipXY:
    """How many pixels and rows the server leaves out between samples."""

    x: int = 0
    y: int = 0
    SIZE = _SKIP.size

    def pack(self):
        return _SKIP.pack(self.x & 0xFF, self.y & 0xFF)

    @classmethod
    def unpack(cls, data):
        return cls(*_unpack(_SKIP, data, "skip"))


def _setopt(sock, level, option, value, name):
    try:
        sock.setsockopt(level, option, value)
    except OSError:
        info(f"{WARN}Can't set flag {name} for socket")


def _options(sock):
    sock.settimeout(_TIMEOUT)
    _setopt(sock, socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1, "SO_KEEPALIVE")
    keepcnt = getattr(socket, "TCP_KEEPCNT", None)
    if keepcnt is None:
        info(f"{WARN}Can't set flag TCP_KEEPCNT for socket")
    else:
        _setopt(sock, socket.IPPROTO_TCP, keepcnt, 4, "TCP_KEEPCNT")


def _host(ip):
    if not ip:
        return "0.0.0.0"
    try:
        return socket.inet_ntoa(socket.inet_aton(ip))
    except OSError:
        return "255.255.255.255"


def _drop(sock):
    if sock is None:
        return
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    sock.close()


class Connection:
    """One listening or connecting socket and, on a server, the accepted peer."""

    def __init__(self):
        self.mode = Mode.UNKNOWN
        self.address = None
        self._sock = None
        self._peer = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def start(self, ip, port, mode):
        """Connect (client) or bind and listen (server); True on success."""
        self.close()
        self.mode = mode
        if mode is Mode.UNKNOWN:
            return False
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError:
            return False
        self._sock = sock
        _setopt(sock, socket.SOL_SOCKET, socket.SO_REUSEADDR, 1, "SO_REUSEADDR")
        target = (_host(ip), port & 0xFFFF)
        try:
            if mode is Mode.CLIENT:
                _options(sock)
                sock.connect(target)
            else:
                sock.bind(target)
                sock.listen(2)
        except OSError:
            return False
        self.address = sock.getsockname()
        return True

    def accept(self):
        """Wait for a client; True once one is connected."""
        if self.mode is not Mode.SERVER or self._sock is None:
            return False
        try:
            peer, _ = self._sock.accept()
        except OSError:
            return False
        _options(peer)
        self._peer = peer
        return True

    def kick(self):
        """Drop the connected client."""
        _drop(self._peer)
        self._peer = None

    @property
    def _target(self):
        return self._peer if self.mode is Mode.SERVER else self._sock

    def recv(self, size):
        """Read exactly `size` bytes; returns (status, data)."""
        sock = self._target
        if sock is None:
            return Status.EMPTY, b""
        buf = bytearray()
        while len(buf) < size:
            try:
                chunk = sock.recv(size - len(buf))
            except OSError:
                return Status.EMPTY, b""
            if not chunk:
                return Status.EMPTY, b""
            buf.extend(chunk)
        return Status.OK, bytes(buf)

    def send(self, data):
        """Write all of `data`."""
        sock = self._target
        if sock is None:
            return Status.FAIL
        try:
            sock.sendall(data)
        except OSError:
            return Status.FAIL
        return Status.OK

    def close(self):
        self.kick()
        _drop(self._sock)
        self._sock = None