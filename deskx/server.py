"""The controlled side: streams the screen and replays the client's input."""

import os
import struct
import threading
import time

from . import display
from .codec import Codec
from .common import ERR, TTY, WAYLAND, X11, info
from .display import EMSG, Events, Pixels
from .net import Connection, Hello, Screen, SkipXY, Status

_FRAME_SIZE = struct.Struct("<Q")


def session_type(env=None):
    """The desktop session kind named by XDG_SESSION_TYPE."""
    env = os.environ if env is None else env
    name = env.get("XDG_SESSION_TYPE", "").lower()
    if name == "wayland":
        return WAYLAND
    if name == "x11":
        return X11
    return TTY


def _events(conn, disp, alive):
    """Replay input messages from the client while the session is alive."""
    while alive.is_set():
        status, data = conn.recv(EMSG)
        if status is Status.FAIL:
            break
        if status is Status.EMPTY:
            time.sleep(0.001)
            continue
        try:
            events = Events.unpack(data)
        except ValueError:
            continue
        disp.set(events)
    alive.clear()


def _serve(conn, disp):
    """Run one session with the connected client; False if the handshake failed."""
    status, data = conn.recv(Hello.SIZE)
    if status is not Status.OK:
        return False
    hello = Hello.unpack(data)
    delta = min(0xFE, hello.delta)
    fps = max(0x01, hello.fps)

    width, height = disp.res()
    if conn.send(Screen(width, height).pack()) is not Status.OK:
        return False
    status, data = conn.recv(SkipXY.SIZE)
    if status is not Status.OK:
        return False
    skip = SkipXY.unpack(data)

    alive = threading.Event()
    alive.set()
    keys = threading.Thread(target=_events, args=(conn, disp, alive), daemon=True)
    keys.start()

    codec = Codec(width, height, delta)
    codec.skip(skip.x, skip.y)
    codec.alloc()
    delay = (1000 // fps) / 1000
    try:
        prev = time.monotonic()
        while alive.is_set():
            now = time.monotonic()
            if now - prev < delay:
                time.sleep(delay - (now - prev))
            prev = now

            pixs = disp.refresh()
            frame = codec.encode(pixs if pixs is not None else Pixels())
            if not frame:
                continue
            if conn.send(_FRAME_SIZE.pack(len(frame)) + frame) is not Status.OK:
                break
    finally:
        alive.clear()
        keys.join()
        codec.free()
    return True


def start(args):
    """Serve the local screen to clients one at a time; returns an exit code."""
    port = args.num("port")
    if port < 1:
        info(f"{ERR}Incorrect port number")
        return 3

    conn = Connection()
    if not conn.start(args["bind-ip"], port, args.mode):
        info(f"{ERR}Can't start TCP server")
        conn.close()
        return 4

    disp = display.get(session_type())
    if disp is None:
        info(f"{ERR}Unsupported screen session type")
        conn.close()
        return 5
    if not disp.init():
        info(f"{ERR}Can't init screen session")
        disp.close()
        conn.close()
        return 6

    try:
        while True:
            conn.kick()
            if not conn.accept():
                time.sleep(0.001)
                continue
            _serve(conn, disp)
    except KeyboardInterrupt:
        pass
    finally:
        conn.close()
        disp.close()
    return 7