"""Command line entry point."""

import sys

from . import client, server
from .args import Args, Mode
from .common import info

_SERVER_OPTIONS = (
    "Server's options:\n\t--bind-ip\t\tIP address to listen "
    "on (default: All)\n\t--port\t\t\tConnection port\n"
)
_CLIENT_OPTIONS = (
    "Client's options:\n\t--ip\t\t\tIP address of the server\n"
    "\t--port\t\t\tPort of the server\n\t--color-distance\t"
    "Compression range (1-255) (default: 2)\n\t--fps\t\t\t"
    "Frame limit (default: 50)\n"
)


def usage(num):
    """Usage text: 1 for client mode, 2 for server mode, anything else for both."""
    if num == 1:
        return "Usage: ./deskx client [options]\n" + _CLIENT_OPTIONS
    if num == 2:
        return "Usage: ./deskx server [options]\n" + _SERVER_OPTIONS
    return (
        "Usage: ./deskx [mode] [options]\nModes:\n\tclient\t\t\tMode for "
        "controlling a remote computer\n\tserver\t\t\tMode for the computer"
        " to be controlled\n\n" + _CLIENT_OPTIONS + "\n" + _SERVER_OPTIONS
        + "\nExample:\n\t./deskx client --ip=192.168.0.1 --port=1742 --color-distance=2\n"
    )


def main(argv=None):
    """Run client or server mode from the command line; returns an exit code."""
    argv = sys.argv[1:] if argv is None else list(argv)
    args = Args(["deskx", *argv])
    if args.ok():
        return client.start(args) if args.mode is Mode.CLIENT else server.start(args)
    number = {Mode.CLIENT: 1, Mode.SERVER: 2}.get(args.mode, 0)
    info(usage(number))
    return 2


if __name__ == "__main__":
    sys.exit(main())