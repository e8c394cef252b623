# hookconf/cli/main.py
import argparse
import sys
from typing import List

from . import hook_types, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hookconf",
        description="Validate and normalize git hook configuration",
        allow_abbrev=False,
    )
    try:
        from hookconf import __version__ as _VER  # lazy import to avoid side effects
    except ImportError:
        _VER = "unknown"
    parser.add_argument(
        "--version",
        action="version",
        version=f"hookconf {_VER}",
    )
    # Explicit config override; a positional PATH on the subcommand wins over it
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        help="config file to use instead of discovery",
    )
    subparsers = parser.add_subparsers(dest="command")

    validate.register(subparsers)
    hook_types.register(subparsers)

    return parser


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    ns = parser.parse_args(argv)
    if not hasattr(ns, "func"):
        parser.print_help(sys.stderr)
        return 2
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
