"""The client's window: shows the remote screen and collects local input."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .common import NOTE, info  # noqa: E402
from .display import MAXKEYS, Key, KeyType  # noqa: E402

_TITLE = "DeskX"


class Gui:
    """A single window whose pixels live in a BGRA byte buffer."""

    def __init__(self):
        self.width = 0
        self.height = 0
        self._surface = None
        self._image = None
        self._buffer = None
        self._last_mouse = (0, 0)

    def init(self):
        """Start the video system and read the desktop size; True if it is usable."""
        try:
            pygame.display.init()
        except pygame.error:
            return False
        sizes = pygame.display.get_desktop_sizes()
        if sizes:
            self.width, self.height = sizes[0]
        return bool(self.width and self.height)

    def window(self, width, height):
        """Open the window and return the buffer frames are painted into, or None."""
        if not self.width or not self.height:
            return None
        info(f"{NOTE}New window with resolution {width}x{height}")
        flags = pygame.FULLSCREEN if (width, height) == (self.width, self.height) else 0
        try:
            self._surface = pygame.display.set_mode((width, height), flags)
        except pygame.error:
            return None
        pygame.display.set_caption(_TITLE)
        # Frames never touch the fourth byte of a pixel, so it stays opaque.
        self._buffer = bytearray(b"\x00\x00\x00\xff" * (width * height))
        self._image = pygame.image.frombuffer(self._buffer, (width, height), "BGRA")
        return self._buffer

    def refresh(self):
        """Show the current buffer; False if there is no window or drawing failed."""
        if self._surface is None:
            return False
        try:
            self._surface.blit(self._image, (0, 0))
            pygame.display.flip()
        except pygame.error:
            return False
        return True

    def events(self, events):
        """Fill `events` with the mouse position and pending input.

        Returns (something changed, quit requested).
        """
        events.clear()
        pygame.event.pump()
        x, y = pygame.mouse.get_pos()
        events.mouse = (x & 0xFFFF, y & 0xFFFF)
        moved = (x, y) != self._last_mouse
        self._last_mouse = (x, y)

        pressed = False
        quit_requested = False
        num = 0
        while (event := pygame.event.poll()).type != pygame.NOEVENT and num < MAXKEYS:
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                kind = (
                    KeyType.MOUSE_DOWN
                    if event.type == pygame.MOUSEBUTTONDOWN
                    else KeyType.MOUSE_UP
                )
                events.buttons[num] = Key(kind, getattr(event, "button", 0))
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                kind = KeyType.KEY_DOWN if event.type == pygame.KEYDOWN else KeyType.KEY_UP
                events.buttons[num] = Key(kind, getattr(event, "scancode", 0))
            else:
                if event.type == pygame.QUIT:
                    quit_requested = True
                continue
            pressed = True
            num += 1

        return moved or pressed, quit_requested

    def close(self):
        """Close the window and shut the video system down."""
        self._surface = None
        self._image = None
        self._buffer = None
        pygame.display.quit()