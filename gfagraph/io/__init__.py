"""
GfaGraph v0.1.0

GFA I/O for GfaGraph.

Module structure:
1. record_codec.py - Segment/Link/header records, line parsing and serialization
2. gfa_file.py - GfaFile graph store, load/save, load policies
"""

# Record codec
from .record_codec import (
    HeaderRecord,
    Segment,
    Link,
    LinkEnd,
    Orientation,
    derive_length,
    parse_record,
    parse_header,
    parse_segment,
    parse_link,
    serialize_header,
    serialize_segment,
    serialize_link,
)

# Graph store
from .gfa_file import (
    GfaFile,
    LoadPolicy,
    open_file,
)

__all__ = [
    # Records
    "HeaderRecord",
    "Segment",
    "Link",
    "LinkEnd",
    "Orientation",

    # Codec
    "derive_length",
    "parse_record",
    "parse_header",
    "parse_segment",
    "parse_link",
    "serialize_header",
    "serialize_segment",
    "serialize_link",

    # Graph store
    "GfaFile",
    "LoadPolicy",
    "open_file",
]
