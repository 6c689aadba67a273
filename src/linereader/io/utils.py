"""Reader capabilities and adapters for Python text streams.

`LineReader` and `AsyncLineReader` are the only things the line helpers in
`linereader.io.read` need from a stream: a `readline` returning the next line,
or `None` once the stream is exhausted. The adapters here provide those
capabilities on top of `TextIO`, `anyio.AsyncFile` and blocking readers.
"""

from abc import ABCMeta, abstractmethod
from typing import ClassVar, TextIO, final

from aioshutil import sync_to_async
from anyio import AsyncFile

from ..meta import LINE_TERMINATORS
from ..utils import abc_subclasshook_check, wrap_async

__all__ = (
    "AnyTextIO",
    "LineReader",
    "AsyncLineReader",
    "TextLineReader",
    "AsyncTextLineReader",
    "ThreadedLineReader",
    "strip_line_terminator",
)

AnyTextIO = TextIO | AsyncFile[str]


def strip_line_terminator(line: str, /):
    """Remove a single trailing line terminator from `line`, if any."""
    for terminator in LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line


def _to_line(line: str, keepends: bool):
    # `TextIO.readline` signals end of stream with an empty string
    if not line:
        return None
    return line if keepends else strip_line_terminator(line)


class LineReader(metaclass=ABCMeta):
    """Capability of reading one line of text at a time, blocking."""

    __slots__: ClassVar = ()

    @abstractmethod
    def readline(self) -> str | None:
        """Return the next line without its terminator, or `None` at end of stream.

        Calling again after end of stream should keep returning `None`.
        """
        raise NotImplementedError(self)

    @classmethod
    def __subclasshook__(cls, subclass: type):
        """Nominal check used by `issubclass`; register readers explicitly."""
        return abc_subclasshook_check(
            LineReader, cls, subclass, names=(cls.readline.__name__,)
        )


class AsyncLineReader(metaclass=ABCMeta):
    """Capability of reading one line of text at a time, asynchronously."""

    __slots__: ClassVar = ()

    @abstractmethod
    async def readline(self) -> str | None:
        """Return the next line without its terminator, or `None` at end of stream."""
        raise NotImplementedError(self)

    @classmethod
    def __subclasshook__(cls, subclass: type):
        """Nominal check used by `issubclass`; register readers explicitly."""
        return abc_subclasshook_check(
            AsyncLineReader, cls, subclass, names=(cls.readline.__name__,)
        )


@final
class TextLineReader(LineReader):
    """`LineReader` over a blocking text stream such as `io.StringIO`.

    The stream is borrowed and never closed.
    """

    __slots__: ClassVar = ("__io", "__keepends")

    def __init__(self, io: TextIO, /, *, keepends: bool = False):
        """Wrap `io`; with `keepends`, line terminators are kept."""
        self.__io = io
        self.__keepends = keepends

    def __repr__(self):
        return f"{type(self).__qualname__}({self.__io!r}, keepends={self.__keepends!r})"

    @property
    def io(self) -> TextIO:
        """The wrapped text stream."""
        return self.__io

    @property
    def keepends(self) -> bool:
        """Whether line terminators are kept."""
        return self.__keepends

    def readline(self) -> str | None:
        return _to_line(self.__io.readline(), self.__keepends)


@final
class AsyncTextLineReader(AsyncLineReader):
    """`AsyncLineReader` over `AnyTextIO`, e.g. a file opened with `anyio`.

    Blocking streams are read inline, so prefer `ThreadedLineReader` for
    those where the event loop must not be blocked. The stream is borrowed
    and never closed.
    """

    __slots__: ClassVar = ("__io", "__keepends")

    def __init__(self, io: AnyTextIO, /, *, keepends: bool = False):
        """Wrap `io`; with `keepends`, line terminators are kept."""
        self.__io = io
        self.__keepends = keepends

    def __repr__(self):
        return f"{type(self).__qualname__}({self.__io!r}, keepends={self.__keepends!r})"

    @property
    def io(self) -> AnyTextIO:
        """The wrapped text stream."""
        return self.__io

    @property
    def keepends(self) -> bool:
        """Whether line terminators are kept."""
        return self.__keepends

    async def readline(self) -> str | None:
        return _to_line(await wrap_async(self.__io.readline()), self.__keepends)


@final
class ThreadedLineReader(AsyncLineReader):
    """`AsyncLineReader` running each read of a `LineReader` in a worker thread."""

    __slots__: ClassVar = ("__reader", "__readline")

    def __init__(self, reader: LineReader, /):
        self.__reader = reader
        self.__readline = sync_to_async(reader.readline)

    def __repr__(self):
        return f"{type(self).__qualname__}({self.__reader!r})"

    @property
    def reader(self) -> LineReader:
        """The wrapped blocking reader."""
        return self.__reader

    async def readline(self) -> str | None:
        return await self.__readline()
