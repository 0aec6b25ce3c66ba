#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Package initialization and public API.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

from .version import __version__
from .errors import (
    GfaError,
    GfaFormatError,
    GfaIOError,
    MalformedRecord,
    MalformedCigar,
    UnsupportedCigarOp,
    DuplicateHeader,
    DuplicateSegment,
    UnrecognizedRecord,
)
from .io import (
    GfaFile,
    LoadPolicy,
    HeaderRecord,
    Segment,
    Link,
    LinkEnd,
    Orientation,
    parse_record,
    parse_header,
    parse_segment,
    parse_link,
    serialize_header,
    serialize_segment,
    serialize_link,
)
from .utils import IdentityResolver, CigarExtents, cigar_extents, parse_cigar

__all__ = [
    "__version__",
    "GfaError",
    "GfaFormatError",
    "GfaIOError",
    "MalformedRecord",
    "MalformedCigar",
    "UnsupportedCigarOp",
    "DuplicateHeader",
    "DuplicateSegment",
    "UnrecognizedRecord",
    "GfaFile",
    "LoadPolicy",
    "HeaderRecord",
    "Segment",
    "Link",
    "LinkEnd",
    "Orientation",
    "parse_record",
    "parse_header",
    "parse_segment",
    "parse_link",
    "serialize_header",
    "serialize_segment",
    "serialize_link",
    "IdentityResolver",
    "CigarExtents",
    "cigar_extents",
    "parse_cigar",
]

# GfaGraph v0.1.0
# Any usage is subject to this software's license.
