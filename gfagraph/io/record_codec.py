#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

GFA record codec: parse one line into a Segment or Link and serialize it back.

Record layout (tab separated):
- H <header text>
- S <name> <sequence|*> [tags...]
- L <a-name> <+|-> <b-name> <+|-> <cigar|*> [tags...]

Optional tags are opaque: they are kept verbatim in ``features`` and written
back unchanged. The LN:i: tag is read to derive the segment length but stays
in ``features`` so the length survives a save/load cycle.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from ..errors import MalformedRecord, UnrecognizedRecord
from ..utils.cigar import CIGAR_PLACEHOLDER, CigarExtents, cigar_extents


# ============================================================================
#                           RECORD TYPES
# ============================================================================

HEADER_MARKER = 'H'
SEGMENT_MARKER = 'S'
LINK_MARKER = 'L'
COMMENT_MARKER = '#'

SEQUENCE_PLACEHOLDER = '*'
LENGTH_TAG = 'LN:i:'
_LENGTH_VALUE = re.compile(r'[0-9]+')


class Orientation(Enum):
    """Strand of a segment end in a link."""
    FORWARD = '+'
    REVERSE = '-'

    @classmethod
    def from_token(cls, token: str) -> 'Orientation':
        if token == '+':
            return cls.FORWARD
        elif token == '-':
            return cls.REVERSE
        else:
            raise MalformedRecord(f"Unrecognized orientation token: '{token}'")

    @classmethod
    def from_forward(cls, forward: bool) -> 'Orientation':
        return cls.FORWARD if forward else cls.REVERSE


@dataclass(frozen=True)
class HeaderRecord:
    """H-line. ``text`` is everything after the marker, verbatim."""
    text: str


@dataclass(frozen=True)
class Segment:
    """
    GFA S-line.

    Attributes:
        name: Segment name (natural key)
        sequence: Sequence, or '*' when omitted
        length: Derived length (LN tag, else len(sequence), else 0);
            computed when not given
        features: Optional tags, tab separated, verbatim
        id: Dense integer id; None until resolved by a GfaFile
    """
    name: str
    sequence: str = SEQUENCE_PLACEHOLDER
    features: str = ''
    length: Optional[int] = None
    id: Optional[int] = None

    def __post_init__(self):
        if self.length is None:
            object.__setattr__(self, 'length', derive_length(self.sequence, self.features))

    @classmethod
    def with_length(cls, name: str, length: int) -> 'Segment':
        """Placeholder-sequence segment whose length is carried by an LN tag."""
        return cls(name=name, sequence=SEQUENCE_PLACEHOLDER,
                   features=f"{LENGTH_TAG}{length}", length=length)

    @property
    def has_sequence(self) -> bool:
        return self.sequence != SEQUENCE_PLACEHOLDER

    def to_gfa_line(self) -> str:
        return serialize_segment(self)


@dataclass(frozen=True)
class LinkEnd:
    """One side of a link: segment name, resolved id and orientation."""
    name: str
    orientation: Orientation = Orientation.FORWARD
    id: Optional[int] = None

    @property
    def is_forward(self) -> bool:
        return self.orientation is Orientation.FORWARD


@dataclass(frozen=True)
class Link:
    """GFA L-line connecting two segment ends."""
    a_end: LinkEnd
    b_end: LinkEnd
    cigar: str = CIGAR_PLACEHOLDER
    features: str = ''

    @classmethod
    def between(cls, a_name: str, a_orientation: Union[Orientation, str],
                b_name: str, b_orientation: Union[Orientation, str],
                cigar: str = CIGAR_PLACEHOLDER, features: str = '') -> 'Link':
        if isinstance(a_orientation, str):
            a_orientation = Orientation.from_token(a_orientation)
        if isinstance(b_orientation, str):
            b_orientation = Orientation.from_token(b_orientation)

        return cls(a_end=LinkEnd(a_name, a_orientation),
                   b_end=LinkEnd(b_name, b_orientation),
                   cigar=cigar, features=features)

    def with_ids(self, a_id: int, b_id: int) -> 'Link':
        return replace(self,
                       a_end=replace(self.a_end, id=a_id),
                       b_end=replace(self.b_end, id=b_id))

    def alignment_length(self) -> CigarExtents:
        """Query, reference and alignment length of this link's CIGAR."""
        return cigar_extents(self.cigar)

    def to_gfa_line(self) -> str:
        return serialize_link(self)

    def __str__(self) -> str:
        return (self.a_end.name + self.a_end.orientation.value +
                self.b_end.name + self.b_end.orientation.value)


Record = Union[HeaderRecord, Segment, Link]


# ============================================================================
#                           PARSING
# ============================================================================

def _split_fields(line: str) -> list:
    return line.rstrip('\r\n').split('\t')


def derive_length(sequence: str, features: str) -> int:
    """
    Segment length: LN tag if present, else sequence length, else 0.

    Raises:
        MalformedRecord: If the LN tag value is not a non-negative integer
    """
    if features:
        for tag in features.split('\t'):
            if tag.startswith(LENGTH_TAG):
                value = tag[len(LENGTH_TAG):]
                if not _LENGTH_VALUE.fullmatch(value):
                    raise MalformedRecord(f"Invalid length tag: '{tag}'")
                return int(value)

    if sequence != SEQUENCE_PLACEHOLDER:
        return len(sequence)

    return 0


def parse_segment(line: str) -> Segment:
    """
    Parse an S-line.

    Args:
        line: Text line, with or without its line ending

    Returns:
        Unresolved Segment (id is None)

    Raises:
        MalformedRecord: Missing name or sequence column, wrong marker,
            or an invalid LN tag
    """
    fields = _split_fields(line)

    if fields[0] != SEGMENT_MARKER:
        raise MalformedRecord(f"Expected segment marker '{SEGMENT_MARKER}', got '{fields[0]}'")
    if len(fields) < 3:
        raise MalformedRecord(f"Segment record needs a name and a sequence, got {len(fields) - 1} field(s)")

    return Segment(name=fields[1], sequence=fields[2], features='\t'.join(fields[3:]))


def parse_link(line: str) -> Link:
    """
    Parse an L-line.

    Raises:
        MalformedRecord: Fewer than five fields after the marker, wrong marker,
            or an orientation other than '+'/'-'
    """
    fields = _split_fields(line)

    if fields[0] != LINK_MARKER:
        raise MalformedRecord(f"Expected link marker '{LINK_MARKER}', got '{fields[0]}'")
    if len(fields) < 6:
        raise MalformedRecord(f"Link record needs 5 fields after the marker, got {len(fields) - 1}")

    a_end = LinkEnd(fields[1], Orientation.from_token(fields[2]))
    b_end = LinkEnd(fields[3], Orientation.from_token(fields[4]))
    return Link(a_end=a_end, b_end=b_end, cigar=fields[5], features='\t'.join(fields[6:]))


def parse_header(line: str) -> HeaderRecord:
    text = line.rstrip('\r\n')
    if not text.startswith(HEADER_MARKER):
        raise MalformedRecord(f"Expected header marker '{HEADER_MARKER}'")

    text = text[len(HEADER_MARKER):]
    if text.startswith('\t'):
        text = text[1:]

    return HeaderRecord(text)


def parse_record(line: str) -> Optional[Record]:
    """
    Dispatch one line on its marker.

    Returns:
        HeaderRecord, Segment or Link; None for blank and comment lines

    Raises:
        UnrecognizedRecord: For any other marker
        MalformedRecord: From the record parsers
    """
    stripped = line.rstrip('\r\n')
    if not stripped or stripped.startswith(COMMENT_MARKER):
        return None

    marker = stripped.split('\t', 1)[0]

    if marker == HEADER_MARKER:
        return parse_header(stripped)
    elif marker == SEGMENT_MARKER:
        return parse_segment(stripped)
    elif marker == LINK_MARKER:
        return parse_link(stripped)

    raise UnrecognizedRecord(marker)


# ============================================================================
#                           SERIALIZATION
# ============================================================================

def serialize_header(header: HeaderRecord) -> str:
    return f"{HEADER_MARKER}\t{header.text}"


def serialize_segment(segment: Segment) -> str:
    line = f"{SEGMENT_MARKER}\t{segment.name}\t{segment.sequence}"
    if segment.features:
        line += '\t' + segment.features
    return line


def serialize_link(link: Link) -> str:
    line = (f"{LINK_MARKER}\t{link.a_end.name}\t{link.a_end.orientation.value}"
            f"\t{link.b_end.name}\t{link.b_end.orientation.value}\t{link.cigar}")
    if link.features:
        line += '\t' + link.features
    return line


# GfaGraph v0.1.0
# Any usage is subject to this software's license.
