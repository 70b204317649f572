"""Exception types raised by objtransform."""
from __future__ import annotations

from typing import Optional


class ObjError(Exception):
    """Base class for all objtransform failures."""


class ObjParseError(ObjError, ValueError):
    """A record could not be parsed.

    Only raised for face records when strict face parsing is enabled;
    other malformed records are dropped during a load.
    """

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ObjIOError(ObjError, OSError):
    """The input could not be read or the output could not be written."""
