#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Exception hierarchy for GFA parsing, CIGAR interpretation and file I/O.

Every error raised while loading carries the 1-based line number and the raw
line text of the offending record once the loader has seen it.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

from typing import Optional


class GfaError(Exception):
    """Base class for all gfagraph errors."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def at_line(self, line_number: int, line: str) -> 'GfaError':
        """
        Attach the location of the offending record.

        Args:
            line_number: 1-based line number in the source
            line: Raw line text without its line ending

        Returns:
            self, so callers can ``raise err.at_line(...)``
        """
        self.line_number = line_number
        self.line = line
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message} [{self.line!r}]"


class GfaFormatError(GfaError):
    """Raised when input text does not follow the GFA subset we read."""
    pass


class MalformedRecord(GfaFormatError):
    """Wrong field count, bad orientation token or bad length tag."""
    pass


class MalformedCigar(GfaFormatError):
    """CIGAR string that does not tokenize into <length><op> pairs."""
    pass


class UnsupportedCigarOp(GfaFormatError):
    """Well-formed CIGAR token whose operation is not M, I or D."""

    def __init__(self, op: str, cigar: str):
        super().__init__(f"Unsupported CIGAR operation '{op}' in '{cigar}'")
        self.op = op


class DuplicateHeader(GfaFormatError):
    """A second H line where only one is allowed."""
    pass


class DuplicateSegment(GfaFormatError):
    """An S record whose name is already defined."""

    def __init__(self, name: str):
        super().__init__(f"Segment '{name}' defined more than once")
        self.name = name


class UnrecognizedRecord(GfaFormatError):
    """A line whose marker is not H, S, L or a comment."""

    def __init__(self, marker: str):
        super().__init__(f"Unrecognized record type '{marker}'")
        self.marker = marker


class GfaIOError(GfaError):
    """The source could not be read or the destination could not be written."""
    pass


# GfaGraph v0.1.0
# Any usage is subject to this software's license.
