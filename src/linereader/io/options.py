"""Options used by the command line tools.

Defines the `ReadOpts` dataclass controlling how the `cat` and `count`
subcommands turn files into line sequences.
"""

from dataclasses import dataclass
from typing import final

import regex

__all__ = ("ReadOpts",)


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
class ReadOpts:
    """Options for reading lines from inputs.

    Attributes:
        keepends: whether line terminators are kept.
        match: only lines containing a match of this pattern are used.
        limit: maximum number of lines used per input, or `None` for all.
    """

    keepends: bool = False
    match: "regex.Pattern[str] | None" = None
    limit: int | None = None

    def __post_init__(self):
        """Reject negative limits."""
        if self.limit is not None and self.limit < 0:
            raise ValueError(self.limit)

    def accepts(self, line: str) -> bool:
        """Whether `line` passes the `match` filter."""
        return self.match is None or self.match.search(line) is not None
