"""I/O utilities: reader capabilities, cancellation and line helpers.

Exports the line helpers of `linereader.io.read` together with the reader
adapters and cancellation signals they operate on.
"""

from .cancel import (
    NEVER_CANCELLED,
    CancellationSignal,
    CancellationToken,
    Cancelled,
    NeverCancelled,
)
from .options import ReadOpts
from .read import (
    AsyncLineSequence,
    LineSequence,
    NullReaderError,
    SequenceState,
    read_line,
    read_line_async,
    read_lines,
    read_lines_async,
    try_read_line,
)
from .utils import (
    AnyTextIO,
    AsyncLineReader,
    AsyncTextLineReader,
    LineReader,
    TextLineReader,
    ThreadedLineReader,
    strip_line_terminator,
)

__all__ = (
    "Cancelled",
    "CancellationSignal",
    "CancellationToken",
    "NeverCancelled",
    "NEVER_CANCELLED",
    "ReadOpts",
    "NullReaderError",
    "SequenceState",
    "LineSequence",
    "AsyncLineSequence",
    "read_line",
    "read_line_async",
    "try_read_line",
    "read_lines",
    "read_lines_async",
    "AnyTextIO",
    "LineReader",
    "AsyncLineReader",
    "TextLineReader",
    "AsyncTextLineReader",
    "ThreadedLineReader",
    "strip_line_terminator",
)
