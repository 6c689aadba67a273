"""Line-oriented read helpers over text readers.

Package constants are defined in `linereader.meta` and re-exported here.
"""

from .meta import LINE_TERMINATORS, LOGGER, NAME, OPEN_TEXT_OPTIONS, VERSION

__all__ = (
    "NAME",
    "VERSION",
    "LINE_TERMINATORS",
    "LOGGER",
    "OPEN_TEXT_OPTIONS",
)
