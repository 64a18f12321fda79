"""Command-line entry point: `python -m tinysh` or the `tinysh` script."""

import argparse
import logging
import sys

from . import __version__
from .exceptions import FatalStartupError
from .shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinysh",
        description="A small interactive shell with builtins, PATH lookup and output redirection",
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="execute one command line and exit with its status",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log registry scans and dispatch decisions to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        shell = Shell()
    except FatalStartupError as e:
        print(f"tinysh: {e}", file=sys.stderr)
        return 1

    if args.command is not None:
        return shell.execute(args.command)
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
