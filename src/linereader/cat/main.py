"""CLI 'cat' subcommand: stream the lines of files to standard output.

Provide an async `main` entry point and a `parser` factory wired into the
top-level CLI.
"""

from argparse import ONE_OR_MORE, ArgumentParser, Namespace
from asyncio import gather
from dataclasses import dataclass
from enum import IntFlag, auto, unique
from functools import partial, wraps
from sys import exit
from typing import Callable, Sequence, final

import regex
from anyio import Path, create_task_group, sleep
from asyncstdlib import enumerate as aenumerate

from ..io.cancel import CancellationSignal, CancellationToken
from ..io.options import ReadOpts
from ..io.read import read_lines_async
from ..io.utils import AsyncTextLineReader
from ..meta import LOGGER, OPEN_TEXT_OPTIONS, VERSION

__all__ = ("ExitCode", "Arguments", "main", "parser")


@final
@unique
class ExitCode(IntFlag):
    """Exit flags used by the `cat` subcommand.

    Values are combinable using bitwise-or to signal multiple error
    conditions to the process exit code.
    """

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
    """Container for parsed command-line arguments for `cat`.

    Attributes:
        inputs: Sequence of input paths, printed in order.
        options: `ReadOpts` applied to every input.
        number: whether lines are prefixed with their line number.
        timeout: seconds after which reading stops, or `None`.
    """

    inputs: Sequence[Path]
    options: ReadOpts
    number: bool = False
    timeout: float | None = None

    def __post_init__(self):
        """Ensure `inputs` is a tuple for stable downstream usage and hashing."""
        object.__setattr__(self, "inputs", tuple(self.inputs))


async def cancel_after(token: CancellationToken, delay: float):
    """Request cancellation of `token` after `delay` seconds."""
    await sleep(delay)
    LOGGER.info(f"Timed out after {delay} s, stopping")
    token.cancel()


async def cat(
    input: Path,
    *,
    options: ReadOpts,
    number: bool = False,
    token: CancellationSignal,
):
    """Print the lines of `input` selected by `options` until `token` is requested."""
    limiter = CancellationToken(parents=(token,))
    if options.limit == 0:
        limiter.cancel()
    printed = 0
    async with await input.open(mode="rt", **OPEN_TEXT_OPTIONS) as file:
        lines = read_lines_async(
            AsyncTextLineReader(file, keepends=options.keepends), limiter
        )
        async for index, line in aenumerate(lines, start=1):
            if not options.accepts(line):
                continue
            print(
                f"{index}\t{line}" if number else line,
                end="" if options.keepends else "\n",
            )
            printed += 1
            if options.limit is not None and printed >= options.limit:
                limiter.cancel()
    return printed


async def main(args: Arguments):
    """Main async entry point for the `cat` command.

    Prints each input in order. Returns by calling `sys.exit` with an
    `ExitCode` value.
    """
    exit_code = ExitCode(0)
    deadline = CancellationToken()
    async with create_task_group() as group:
        if args.timeout is not None:
            group.start_soon(cancel_after, deadline, args.timeout)
        for input in args.inputs:
            try:
                await cat(
                    input, options=args.options, number=args.number, token=deadline
                )
            except Exception:
                LOGGER.exception(f"Exception reading file: {input}")
                exit_code |= ExitCode.ERROR
        group.cancel_scope.cancel()
    exit(exit_code)


def pattern(text: str) -> "regex.Pattern[str]":
    """Compile a line filter given on the command line."""
    return regex.compile(text, regex.VERSION0)


def non_negative(text: str):
    """Parse a non-negative integer given on the command line."""
    value = int(text)
    if value < 0:
        raise ValueError(text)
    return value


def parser(parent: Callable[..., ArgumentParser] | None = None):
    """Create an `ArgumentParser` for the `cat` subcommand.

    The returned parser is configured to parse `inputs` and the options
    controlling which lines are printed.
    """
    prog = __package__ or __name__

    parser = (ArgumentParser if parent is None else parent)(
        prog=f"python -m {prog}",
        description="print lines of input",
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
        "-n",
        "--number",
        action="store_true",
        default=False,
        dest="number",
        help="prefix lines with their line number",
    )
    parser.add_argument(
        "-k",
        "--keep-ends",
        action="store_true",
        default=False,
        dest="keepends",
        help="keep line terminators as read",
    )
    parser.add_argument(
        "-m",
        "--match",
        action="store",
        type=pattern,
        default=None,
        dest="match",
        help="only print lines containing a match of this pattern",
    )
    parser.add_argument(
        "-l",
        "--limit",
        action="store",
        type=non_negative,
        default=None,
        dest="limit",
        help="maximum number of lines to print per input",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        action="store",
        type=float,
        default=None,
        dest="timeout",
        help="stop reading after this many seconds",
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
                options=ReadOpts(
                    keepends=args.keepends, match=args.match, limit=args.limit
                ),
                number=args.number,
                timeout=args.timeout,
            )
        )

    parser.set_defaults(invoke=invoke)
    return parser
