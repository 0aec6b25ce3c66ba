#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Tests for the exception hierarchy.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

import pytest
from gfagraph import errors
from gfagraph.errors import (
    DuplicateHeader,
    DuplicateSegment,
    GfaError,
    GfaFormatError,
    GfaIOError,
    MalformedCigar,
    MalformedRecord,
    UnrecognizedRecord,
    UnsupportedCigarOp,
)


ERROR_CLASSES = [
    GfaError,
    GfaFormatError,
    GfaIOError,
    MalformedRecord,
    MalformedCigar,
    UnsupportedCigarOp,
    DuplicateHeader,
    DuplicateSegment,
    UnrecognizedRecord,
]


class TestHierarchy:

    @pytest.mark.parametrize("cls", ERROR_CLASSES[3:])
    def test_format_errors(self, cls):
        assert issubclass(cls, GfaFormatError)

    def test_io_error_is_not_format_error(self):
        assert issubclass(GfaIOError, GfaError)
        assert not issubclass(GfaIOError, GfaFormatError)

    @pytest.mark.parametrize("cls", ERROR_CLASSES)
    def test_every_class_documented(self, cls):
        assert cls.__doc__ and cls.__doc__.strip()
        assert cls.__module__ == errors.__name__


class TestLocation:

    def test_without_location(self):
        err = MalformedRecord("bad record")

        assert str(err) == "bad record"
        assert err.line_number is None

    def test_at_line(self):
        err = DuplicateSegment("utg1").at_line(7, "S\tutg1\tACGT")

        assert err.line_number == 7
        assert err.name == "utg1"
        assert str(err) == "line 7: Segment 'utg1' defined more than once ['S\\tutg1\\tACGT']"

    def test_unrecognized_record_marker(self):
        err = UnrecognizedRecord("P")

        assert err.marker == "P"
        assert "'P'" in str(err)

# GfaGraph v0.1.0
# Any usage is subject to this software's license.
