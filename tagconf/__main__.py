"""
Entry point for tagconf.

Usage:
    python -m tagconf /path/to/app.conf                 # print normalized file
    python -m tagconf app.conf --get server.port        # print matching values
    python -m tagconf app.conf --get server port        # same, path in segments
    python -m tagconf app.conf --sections cluster       # list sections
    python -m tagconf app.conf --check                  # parse only
    python -m tagconf --help
"""

import argparse
import sys

from . import __version__
from .config import ConfigError, Configuration
from .logging import get_logger, setup_logging_from_args

logger = get_logger("cli")

VALUE_TYPES = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
}


def _path_args(path: str | None) -> list[str]:
    """An empty path addresses the top level."""
    return [path] if path else []


def run(args: argparse.Namespace) -> int:
    """Execute the requested action and return the exit code."""
    try:
        config = Configuration(args.config)

        if args.check:
            print(f"{args.config}: OK ({sum(1 for _ in config.root.walk())} nodes)")
        elif args.get is not None:
            for value in config.get_all(*args.get, as_type=VALUE_TYPES[args.type]):
                print(value)
        elif args.sections is not None:
            for name in config.get_sections(*_path_args(args.sections)):
                print(name)
        elif args.names is not None:
            for name in config.get_names(*_path_args(args.names)):
                print(name)
        else:
            sys.stdout.write(config.serialize())

        return 0

    except ConfigError as e:
        logger.debug(f"{type(e).__name__} while processing {args.config}")
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="tagconf",
        description="Inspect and normalize tagged-section configuration files",
    )

    parser.add_argument(
        "config",
        help="Path to configuration file",
    )

    action = parser.add_mutually_exclusive_group()

    action.add_argument(
        "--get",
        metavar="PATH",
        nargs="+",
        help="Print every value matching a path (one or more dotted segments)",
    )

    action.add_argument(
        "--sections",
        metavar="PATH",
        nargs="?",
        const="",
        help="Print the sections below a dotted path (top level if omitted)",
    )

    action.add_argument(
        "--names",
        metavar="PATH",
        nargs="?",
        const="",
        help="Print the keys below a dotted path (top level if omitted)",
    )

    action.add_argument(
        "--dump",
        action="store_true",
        help="Print the normalized file (default action)",
    )

    action.add_argument(
        "--check",
        action="store_true",
        help="Parse the file and exit",
    )

    parser.add_argument(
        "--type",
        choices=sorted(VALUE_TYPES),
        default="str",
        help="Convert --get values to this type (default: str)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        colors=not args.no_color,
        log_file=args.log_file,
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
