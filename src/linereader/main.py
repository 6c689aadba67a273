"""Top-level command line parser for the `linereader` package.

This module wires together sub-commands from the `cat` and `count`
subpackages and exposes a `parser` factory function used by `__main__`.
"""

from argparse import ArgumentParser
from functools import partial
from typing import Callable

from .cat.main import __name__ as cat_name
from .cat.main import __package__ as cat_package
from .cat.main import parser as cat_parser
from .count.main import __name__ as count_name
from .count.main import __package__ as count_package
from .count.main import parser as count_parser
from .meta import VERSION

__all__ = ("parser",)


def parser(parent: Callable[..., ArgumentParser] | None = None):
    """Create the top-level `ArgumentParser` for the CLI.

    Returns a configured `ArgumentParser` with subparsers for the
    `cat` and `count` subcommands.
    """
    prog = __package__ or __name__

    parser = (ArgumentParser if parent is None else parent)(
        prog=f"python -m {prog}",
        description="line-oriented tools for text files",
        add_help=True,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{prog} v{VERSION}",
        help="print version and exit",
    )
    subparsers = parser.add_subparsers(
        required=True,
    )
    cat_parser(
        partial(
            subparsers.add_parser,
            (cat_package or cat_name).replace(f"{prog}.", ""),
        )
    )
    count_parser(
        partial(
            subparsers.add_parser,
            (count_package or count_name).replace(f"{prog}.", ""),
        )
    )
    return parser
