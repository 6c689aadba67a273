"""Tests for `src/linereader/io/utils.py` (reader capabilities and adapters)."""

from io import StringIO
from os import PathLike

import pytest
from anyio import Path
from hypothesis import given
from hypothesis import strategies as st

from linereader.io.utils import (
    AsyncLineReader,
    AsyncTextLineReader,
    LineReader,
    TextLineReader,
    ThreadedLineReader,
    strip_line_terminator,
)
from linereader.meta import OPEN_TEXT_OPTIONS

__all__ = ()

_LINE_TEXT = st.text(alphabet=st.characters(exclude_characters="\r\n"))


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("abc\n", "abc"),
        ("abc\r\n", "abc"),
        ("abc\r", "abc"),
        ("abc", "abc"),
        ("abc\n\n", "abc\n"),
        ("\r\n", ""),
        ("", ""),
    ],
)
def test_strip_line_terminator(line: str, expected: str):
    """Exactly one trailing terminator is removed."""
    assert strip_line_terminator(line) == expected


def test_capabilities_are_nominal():
    """A `TextIO` is not a `LineReader`: its `readline` never returns `None`."""
    assert not issubclass(StringIO, LineReader)
    assert issubclass(TextLineReader, LineReader)
    assert issubclass(AsyncTextLineReader, AsyncLineReader)
    assert issubclass(ThreadedLineReader, AsyncLineReader)
    assert not issubclass(TextLineReader, AsyncLineReader)


@given(st.lists(_LINE_TEXT))
def test_TextLineReader_reads_lines_then_none(lines: list[str]):
    """Lines come back without terminators, then `None` repeatedly."""
    reader = TextLineReader(StringIO("".join(f"{line}\n" for line in lines)))
    assert [reader.readline() for _ in lines] == lines
    assert reader.readline() is None
    assert reader.readline() is None


def test_TextLineReader_keepends():
    """With `keepends`, terminators are preserved as read."""
    io = StringIO("a\r\nb\nc", newline="")
    reader = TextLineReader(io, keepends=True)
    assert reader.io is io and reader.keepends
    assert reader.readline() == "a\r\n"
    assert reader.readline() == "b\n"
    assert reader.readline() == "c"
    assert reader.readline() is None


def test_TextLineReader_does_not_close():
    """Readers borrow their stream."""
    io = StringIO("x\n")
    reader = TextLineReader(io)
    while reader.readline() is not None:
        pass
    assert not io.closed


@pytest.mark.asyncio
async def test_AsyncTextLineReader_over_blocking_stream():
    """Blocking streams are read inline."""
    reader = AsyncTextLineReader(StringIO("one\ntwo\n"))
    assert await reader.readline() == "one"
    assert await reader.readline() == "two"
    assert await reader.readline() is None


@pytest.mark.asyncio
async def test_AsyncTextLineReader_over_anyio_file(tmp_path: PathLike[str]):
    """Every kind of terminator ends a line of an `anyio` file."""
    f = Path(tmp_path) / "lines.txt"
    await f.write_bytes(b"a\r\nb\rc\nd")
    async with await f.open(mode="rt", **OPEN_TEXT_OPTIONS) as file:
        reader = AsyncTextLineReader(file)
        assert [await reader.readline() for _ in range(5)] == [
            "a",
            "b",
            "c",
            "d",
            None,
        ]


@pytest.mark.asyncio
async def test_ThreadedLineReader_matches_wrapped_reader():
    """Reads in a worker thread return what the wrapped reader returns."""
    inner = TextLineReader(StringIO("x\ny\n"))
    reader = ThreadedLineReader(inner)
    assert reader.reader is inner
    assert await reader.readline() == "x"
    assert await reader.readline() == "y"
    assert await reader.readline() is None
