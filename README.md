# deskx

Remote control of a computer over a plain TCP connection. A server streams
its screen; a client shows that screen in a pygame window and sends mouse
and keyboard input back.

Frames are sent with a small run-length codec (`deskx.codec.Codec`): runs of
similar colours become one block, pixels unchanged since the previous frame
are skipped with X/Y shift blocks, and the colour distance setting trades
picture quality for bandwidth.

## Installation

```
pip install .
```

pygame is the only dependency; it provides the client window.

## Command line

```
deskx client --ip=192.168.0.1 --port=1742 --color-distance=2
deskx server --port=1742
```

Options are always written as `--name=value`; anything else is ignored.
If the mode is missing or unknown, or no option is given, the usage text is
printed and the command exits with status 2.

Client options:

- `--ip` — IP address of the server
- `--port` — port of the server
- `--color-distance` — compression range (default: 2, capped at 254)
- `--fps` — frame limit (default: 50, capped at 255)

Server options:

- `--bind-ip` — IP address to listen on (default: all)
- `--port` — connection port

If the server's screen is larger than the client's desktop, the client asks
the server to sample only every n-th pixel and row so the picture fits; some
distortion may occur. The client closes when its window is closed or the
connection drops.

Exit statuses of the client: 0 after a session ends, 3 bad port, 4 missing
IP, 5 cannot connect, 6 cannot send the handshake, 7 no screen description
received, 8 remote screen smaller than 640x480, 9 no video system, 10 cannot
open the window, 11 cannot start the receiving thread.

## Screen sources

The server captures the screen and replays input through a
`deskx.display.Display` subclass. Every subclass is registered when it is
defined, and `deskx.display.get(kind)` returns an instance of the first one
whose `session` attribute equals `kind`. The kind is chosen by
`deskx.server.session_type()` from `XDG_SESSION_TYPE` (`deskx.common.X11`,
`WAYLAND`, or `TTY` otherwise).

A subclass implements `init()`, `close()`, `res()` (returns
`(width, height)`), `refresh()` (returns `deskx.display.Pixels`) and
`set(events)` (replays a `deskx.display.Events`). With such a class defined,
the server is run from Python:

```python
from deskx import server
from deskx.args import Args

server.start(Args(["deskx", "server", "--port=1742"]))
```

`server.start` serves one client at a time until interrupted. Its exit
statuses: 3 bad port, 4 cannot listen, 5 no screen source for the session,
6 the screen source failed to start, 7 after it stops.

## What is not included

No screen source ships with the package: it has no capture or input
injection for X11, Wayland, Windows or macOS. Run from the command line,
`deskx server` therefore reports "Unsupported screen session type" and exits
with status 5. The client, the network protocol and the codec are complete.

## Protocol

All integers are little-endian except inside codec blocks, which are
big-endian.

1. Client sends `Hello`: colour distance and frame rate, one byte each.
2. Server sends `Screen`: width and height, two bytes each.
3. Client sends `SkipXY`: pixels and rows to leave out, one byte each.
4. Server sends frames: an 8-byte length followed by the encoded frame.
   Client sends `Events` messages of 29 bytes: mouse x and y (two bytes
   each) and five button slots of a 4-byte key code and a 1-byte `KeyType`.

`deskx.net.Connection` handles the socket on both sides.

## Tests

```
pip install .[test]
pytest
```