"""Line-oriented read helpers over `LineReader` and `AsyncLineReader`.

Provides single-shot reads (`read_line`, `read_line_async`, `try_read_line`)
and lazy, cancellable line sequences (`read_lines`, `read_lines_async`).
Every read is delegated to the underlying reader, which is borrowed and
never closed. Failures of the reader propagate unchanged.

Sequences check their `CancellationSignal` before each read. Cancellation
ends a sequence silently; it never interrupts a read already in flight.
"""

from collections.abc import AsyncIterator, Awaitable, Iterator
from enum import StrEnum, unique
from typing import ClassVar, final

from ..meta import LOGGER
from .cancel import NEVER_CANCELLED, CancellationSignal
from .utils import AsyncLineReader, LineReader

__all__ = (
    "NullReaderError",
    "SequenceState",
    "LineSequence",
    "AsyncLineSequence",
    "read_line",
    "read_line_async",
    "try_read_line",
    "read_lines",
    "read_lines_async",
)


class NullReaderError(TypeError):
    """Raised when `None` is passed where a reader is required."""


def _require_reader(reader: LineReader | AsyncLineReader | None):
    if reader is None:
        raise NullReaderError("reader must not be None")


@final
@unique
class SequenceState(StrEnum):
    """Lifecycle of a line sequence.

    - NOT_STARTED: no element has been requested yet
    - PRODUCING: elements are being produced on demand
    - TERMINATED: no element will ever be produced again
    """

    NOT_STARTED = "not_started"
    PRODUCING = "producing"
    TERMINATED = "terminated"


def read_line(
    reader: LineReader, token: CancellationSignal = NEVER_CANCELLED
) -> str | None:
    """Read one line from `reader`, or `None` at end of stream.

    Raises `NullReaderError` if `reader` is `None` and `Cancelled` if `token`
    is already requested, in both cases without reading.
    """
    _require_reader(reader)
    token.raise_if_cancellation_requested()
    return reader.readline()


def read_line_async(
    reader: AsyncLineReader, token: CancellationSignal = NEVER_CANCELLED
) -> Awaitable[str | None]:
    """Start reading one line from `reader` asynchronously.

    The checks of `read_line` run immediately, when this function is called,
    rather than when the result is awaited. The returned awaitable resolves
    to the next line, or `None` at end of stream.
    """
    _require_reader(reader)
    token.raise_if_cancellation_requested()
    return reader.readline()


def try_read_line(reader: LineReader) -> tuple[bool, str]:
    """Read one line from `reader`.

    Returns `(True, line)` on success and `(False, "")` at end of stream.
    Raises `NullReaderError` if `reader` is `None`.
    """
    _require_reader(reader)
    line = reader.readline()
    if line is None:
        return False, ""
    return True, line


def read_lines(
    reader: LineReader, token: CancellationSignal = NEVER_CANCELLED
) -> "LineSequence":
    """Return a lazy sequence of the remaining lines of `reader`.

    `NullReaderError` is raised here rather than on the first `next`.
    """
    _require_reader(reader)
    return LineSequence(reader, token)


def read_lines_async(
    reader: AsyncLineReader, token: CancellationSignal = NEVER_CANCELLED
) -> "AsyncLineSequence":
    """Return a lazy asynchronous sequence of the remaining lines of `reader`.

    `NullReaderError` is raised here rather than on the first `anext`.
    """
    _require_reader(reader)
    return AsyncLineSequence(reader, token)


@final
class LineSequence(Iterator[str]):
    """Single-pass iterator over the lines of a `LineReader`.

    Each `next` first polls the token, then reads one line. Cancellation and
    end of stream both end iteration without an error. A failing read
    propagates its exception and ends the sequence too.
    """

    __slots__: ClassVar = ("__reader", "__token", "__state")

    def __init__(self, reader: LineReader, token: CancellationSignal, /):
        self.__reader = reader
        self.__token = token
        self.__state = SequenceState.NOT_STARTED

    def __repr__(self):
        return f"{type(self).__qualname__}({self.__reader!r}, {self.__token!r}, state={self.__state!r})"

    @property
    def reader(self) -> LineReader:
        """The borrowed reader."""
        return self.__reader

    @property
    def token(self) -> CancellationSignal:
        """The signal polled before each read."""
        return self.__token

    @property
    def state(self) -> SequenceState:
        """Current `SequenceState`."""
        return self.__state

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if self.__state is SequenceState.TERMINATED:
            raise StopIteration
        self.__state = SequenceState.PRODUCING
        if self.__token.cancellation_requested:
            self.__terminate("cancellation requested")
            raise StopIteration
        try:
            success, line = try_read_line(self.__reader)
        except BaseException:
            self.__terminate("read failed")
            raise
        if not success:
            self.__terminate("end of stream")
            raise StopIteration
        return line

    def close(self) -> None:
        """End the sequence early. The reader is left open."""
        if self.__state is not SequenceState.TERMINATED:
            self.__terminate("closed")

    def __terminate(self, reason: str):
        self.__state = SequenceState.TERMINATED
        LOGGER.debug(f"Line sequence terminated ({reason}): {self.__reader!r}")


@final
class AsyncLineSequence(AsyncIterator[str]):
    """Single-pass asynchronous iterator over the lines of an `AsyncLineReader`.

    Each `anext` polls the token before issuing a read, so at most one
    extra read completes after cancellation is requested. Reads are strictly
    sequential: requesting an element while a read is in flight raises
    `RuntimeError`. A failing read propagates its exception to the consumer
    and ends the sequence.
    """

    __slots__: ClassVar = ("__reader", "__token", "__state", "__reading")

    def __init__(self, reader: AsyncLineReader, token: CancellationSignal, /):
        self.__reader = reader
        self.__token = token
        self.__state = SequenceState.NOT_STARTED
        self.__reading = False

    def __repr__(self):
        return f"{type(self).__qualname__}({self.__reader!r}, {self.__token!r}, state={self.__state!r})"

    @property
    def reader(self) -> AsyncLineReader:
        """The borrowed reader."""
        return self.__reader

    @property
    def token(self) -> CancellationSignal:
        """The signal polled before each read."""
        return self.__token

    @property
    def state(self) -> SequenceState:
        """Current `SequenceState`."""
        return self.__state

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        if self.__state is SequenceState.TERMINATED:
            raise StopAsyncIteration
        if self.__reading:
            raise RuntimeError(f"read already in progress: {self!r}")
        self.__state = SequenceState.PRODUCING
        if self.__token.cancellation_requested:
            self.__terminate("cancellation requested")
            raise StopAsyncIteration
        self.__reading = True
        try:
            line = await self.__reader.readline()
        except BaseException:
            self.__terminate("read failed")
            raise
        finally:
            self.__reading = False
        # closed while the read was in flight
        if self.__state is SequenceState.TERMINATED:
            raise StopAsyncIteration
        if line is None:
            self.__terminate("end of stream")
            raise StopAsyncIteration
        return line

    async def aclose(self) -> None:
        """End the sequence early. The reader is left open."""
        if self.__state is not SequenceState.TERMINATED:
            self.__terminate("closed")

    def __terminate(self, reason: str):
        self.__state = SequenceState.TERMINATED
        LOGGER.debug(f"Line sequence terminated ({reason}): {self.__reader!r}")
