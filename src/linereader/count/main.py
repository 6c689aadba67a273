"""CLI 'count' subcommand: count the lines of files.

Provide an async `main` entry point and a `parser` factory wired into the
top-level CLI.
"""

from argparse import ONE_OR_MORE, ArgumentParser, Namespace
from asyncio import gather
from dataclasses import dataclass
from enum import IntFlag, auto, unique
from functools import partial, reduce, wraps
from sys import exit
from typing import Callable, Sequence, final

from anyio import Path
from asyncstdlib import filter as afilter

from ..cat.main import pattern
from ..io.options import ReadOpts
from ..io.read import read_lines_async
from ..io.utils import AsyncTextLineReader
from ..meta import LOGGER, OPEN_TEXT_OPTIONS, VERSION

__all__ = ("ExitCode", "Arguments", "count", "main", "parser")


@final
@unique
class ExitCode(IntFlag):
    """Exit flags used by the `count` subcommand."""

    ERROR = auto()


@final
@dataclass(
    init=True,
    repr=True,
    eq=True,
    order=False,
    unsafe_hash=False,
    frozen=True,
    match_args=True,
    kw_only=True,
    slots=True,
)
class Arguments:
    """Container for parsed command-line arguments for `count`.

    Attributes:
        inputs: Sequence of input paths to count.
        options: `ReadOpts` applied to every input.
    """

    inputs: Sequence[Path]
    options: ReadOpts

    def __post_init__(self):
        object.__setattr__(self, "inputs", tuple(self.inputs))


async def count(input: Path, *, options: ReadOpts):
    """Return the number of lines of `input` accepted by `options`."""
    ret = 0
    async with await input.open(mode="rt", **OPEN_TEXT_OPTIONS) as file:
        lines = read_lines_async(AsyncTextLineReader(file))
        async for _ in afilter(options.accepts, lines):
            ret += 1
    return ret


async def main(args: Arguments):
    """Main async entry point for the `count` command.

    Counts all inputs concurrently, then prints one `<count>\\t<path>` row
    per input in argument order. Returns by calling `sys.exit` with an
    `ExitCode` value.
    """

    async def count0(input: Path):
        try:
            return ExitCode(0), await count(input, options=args.options)
        except Exception:
            LOGGER.exception(f"Exception reading file: {input}")
            return ExitCode.ERROR, None

    results = await gather(*map(count0, args.inputs))
    for input, (_, value) in zip(args.inputs, results):
        if value is not None:
            print(f"{value}\t{input}")
    exit(
        reduce(
            lambda left, right: left | right,
            (code for code, _ in results),
            ExitCode(0),
        )
    )


def parser(parent: Callable[..., ArgumentParser] | None = None):
    """Create an `ArgumentParser` for the `count` subcommand."""
    prog = __package__ or __name__

    parser = (ArgumentParser if parent is None else parent)(
        prog=f"python -m {prog}",
        description="count lines of input",
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
    parser.add_argument(
        "-m",
        "--match",
        action="store",
        type=pattern,
        default=None,
        dest="match",
        help="only count lines containing a match of this pattern",
    )
    parser.add_argument(
        "inputs",
        action="store",
        nargs=ONE_OR_MORE,
        type=Path,
        help="sequence of input(s) to read",
    )

    @wraps(main)
    async def invoke(args: Namespace):
        await main(
            Arguments(
                inputs=await gather(
                    *map(
                        partial(Path.resolve, strict=True),
                        args.inputs,
                    )
                ),
                options=ReadOpts(match=args.match),
            )
        )

    parser.set_defaults(invoke=invoke)
    return parser
