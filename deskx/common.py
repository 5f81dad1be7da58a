"""Shared constants and console reporting."""

VERSION = "2.0.2"

LOGO = (
    "\n"
    " __   ___  __       \\   /  Universal light and fast program for remote\n"
    "|  \\ |__  /__` |__/  \\_/   control of a computer. (v" + VERSION + ")\n"
    "|__/ |___ .__/ |  \\  / \\\n"
    "                    /   \\\n\n"
)

ERR = "\033[1;31mError\033[0m:\t"
NOTE = "\033[1;32mNote\033[0m:\t"
WARN = "\033[1;33mWarn\033[0m:\t"

# Pixel layouts reported by screen sources.
RGB0 = 0
RGBA = 1
BGRA = 2

# Desktop session kinds.
TTY = 0
X11 = 1
WAYLAND = 2

SCR_X_MIN = 0x0280
SCR_Y_MIN = 0x01E0
SCR_X_MAX = 0x1FFF
SCR_Y_MAX = SCR_X_MAX


class _Banner:
    shown = False


def info(text):
    """Print a message, preceded by the logo the first time anything is printed."""
    prefix = "" if _Banner.shown else LOGO
    _Banner.shown = True
    print(f"{prefix}{text}.", flush=True)