"""The controlling side: shows the remote screen and forwards local input."""

import math
import struct
import threading
import time
from dataclasses import dataclass

from .codec import Codec
from .common import ERR, NOTE, SCR_X_MIN, SCR_Y_MIN, WARN, info
from .display import Events
from .gui import Gui
from .net import Connection, Hello, Screen, SkipXY, Status

_FRAME_SIZE = struct.Struct("<Q")


@dataclass
class _State:
    alive: bool = True
    refresh: bool = False


def _hello(args):
    """The greeting built from --color-distance and --fps."""
    distance = args.num("color-distance")
    fps = args.num("fps")
    return Hello(
        (2 if distance == -1 else min(254, distance)) & 0xFF,
        (50 if fps < 1 else min(255, fps)) & 0xFF,
    )


def _scale(screen, width, height):
    """Fit the remote screen into a desktop of width x height.

    Returns the size of the window to open and the skip to ask the server for.
    """
    if width >= screen.width and height >= screen.height:
        return screen, SkipXY()
    info(f"{WARN}Scaling enabled, distortion may occur")
    fx = 1 if width == screen.width else math.ceil(screen.width / width)
    fy = 1 if height == screen.height else math.ceil(screen.height / height)
    return Screen(screen.width // fx, screen.height // fy), SkipXY(fx - 1, fy - 1)


def _receive(conn, codec, window, state):
    """Paint frames from the server into `window` while the session is alive."""
    while state.alive:
        status, head = conn.recv(_FRAME_SIZE.size)
        if status is Status.FAIL:
            break
        if status is Status.EMPTY:
            time.sleep(0.001)
            continue
        (size,) = _FRAME_SIZE.unpack(head)
        if size < 2:
            time.sleep(0.001)
            continue
        status, frame = conn.recv(size)
        if status is not Status.OK:
            info(f"{ERR}Invalid screen package")
            state.alive = False
            break
        codec.decode(window, frame)
        state.refresh = True


def _session(conn, gui, screen, hello):
    screen, skip = _scale(screen, gui.width, gui.height)
    if conn.send(skip.pack()) is not Status.OK:
        info(f"{ERR}Can't send 'skip' message")
        return 6
    fx, fy = skip.x + 1, skip.y + 1

    window = gui.window(screen.width, screen.height)
    if window is None:
        info(f"{ERR}Can't create new window")
        return 10

    codec = Codec(screen.width, screen.height, hello.delta)
    state = _State()
    thread = threading.Thread(
        target=_receive, args=(conn, codec, window, state), daemon=True
    )
    try:
        thread.start()
    except RuntimeError:
        info(f"{ERR}Can't start screen thread")
        return 11

    events = Events()
    info(f"{NOTE}Ready to use")
    while state.alive:
        if state.refresh and not gui.refresh():
            info(f"{ERR}Can't refresh surface")
            state.alive = False
            break
        state.refresh = False
        changed, quit_requested = gui.events(events)
        if quit_requested:
            break
        if not changed:
            time.sleep(0.001)
            continue
        x, y = events.mouse
        events.mouse = (x * fx, y * fy)
        if conn.send(events.pack()) is not Status.OK:
            break

    info(f"{NOTE}Session is dropped, waiting for work to complete")
    state.alive = False
    thread.join()
    info(f"{NOTE}Quit")
    return 0


def start(args):
    """Connect to a server and run the remote session; returns an exit code."""
    port = args.num("port")
    if port < 1:
        info(f"{ERR}Incorrect port number")
        return 3
    ip = args["ip"]
    if not ip:
        info(f"{ERR}Incorrect ip address")
        return 4

    info(f"{NOTE}Trying to connect to {ip}")
    with Connection() as conn:
        if not conn.start(ip, port, args.mode):
            info(f"{ERR}Can't connect to the server")
            return 5
        hello = _hello(args)
        if conn.send(hello.pack()) is not Status.OK:
            info(f"{ERR}Can't send 'hello' message")
            return 6
        status, data = conn.recv(Screen.SIZE)
        if status is not Status.OK:
            info(f"{ERR}Can't receive screen config")
            return 7
        screen = Screen.unpack(data)
        if screen.width < SCR_X_MIN or screen.height < SCR_Y_MIN:
            info(f"{ERR}Screen resolution is too small")
            return 8

        gui = Gui()
        if not gui.init():
            info(f"{ERR}Can't init GUI module")
            return 9
        try:
            return _session(conn, gui, screen, hello)
        finally:
            gui.close()