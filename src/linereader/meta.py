"""Package-level metadata and shared constants for linereader.

Canonical package constants live here and are forwarded from
`src/linereader/__init__.py`, keeping the package root free of logic.
"""

from logging import getLogger as _getLogger
from typing import Literal as _Lit
from typing import TypedDict as _TDict
from typing import final as _fin

__all__ = (
    "NAME",
    "VERSION",
    "LINE_TERMINATORS",
    "LOGGER",
    "OPEN_TEXT_OPTIONS",
)


@_fin
class _OpenOptions(_TDict):
    """Typed dict describing options used when opening text files.

    Matches the arguments accepted by `open(..., encoding=..., errors=..., newline=...)`.
    """

    encoding: str
    errors: _Lit[
        "strict",
        "ignore",
        "replace",
        "surrogateescape",
        "xmlcharrefreplace",
        "backslashreplace",
        "namereplace",
    ]
    newline: _Lit["", "\n", "\r", "\r\n"] | None


# update `pyproject.toml`
NAME = "linereader"
VERSION = "1.0.0"

# longest first, so that "\r\n" is stripped as a single terminator
LINE_TERMINATORS = ("\r\n", "\n", "\r")
LOGGER = _getLogger(NAME)
# `newline=""` keeps terminators untranslated so that every one of
# `LINE_TERMINATORS` ends a line
OPEN_TEXT_OPTIONS = _OpenOptions(
    encoding="UTF-8",
    errors="strict",
    newline="",
)
