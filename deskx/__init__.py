"""Remote desktop over TCP: client window, server loop, protocol and screen codec."""

__version__ = "2.0.2"