#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

GFA graph store: header, ordered segments and links, and the identity
resolver that ties segment names to dense integer ids.

Load is all-or-nothing: the first bad line aborts it with an error carrying
the line number and text, and the file keeps whatever it held before. Save
groups records by type (header, segments, links) regardless of how the source
interleaved them.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import contextlib
import gzip
import io
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, IO, Iterator, List, Optional, Tuple, Union

from ..config.schema import (
    ConfigValidationError,
    DUPLICATE_HEADER_POLICIES,
    DUPLICATE_SEGMENT_POLICIES,
    UNRECOGNIZED_RECORD_POLICIES,
)
from ..errors import (
    DuplicateHeader,
    DuplicateSegment,
    GfaFormatError,
    GfaIOError,
    UnrecognizedRecord,
)
from ..utils.identity import IdentityResolver
from .record_codec import (
    HeaderRecord,
    Link,
    Segment,
    parse_record,
    serialize_header,
    serialize_link,
    serialize_segment,
)

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO]


# ============================================================================
#                           LOAD POLICY
# ============================================================================

@dataclass(frozen=True)
class LoadPolicy:
    """
    How load reacts to input the format leaves open.

    Attributes:
        duplicate_header: 'reject' (DuplicateHeader), 'overwrite' (last wins)
            or 'merge' (texts joined with a tab)
        duplicate_segment: 'reject' (DuplicateSegment) or 'overwrite'
            (replace the earlier record, keeping its position and id)
        unrecognized_record: 'ignore' (skip P/C/W/... lines) or 'reject'
            (UnrecognizedRecord)
    """
    duplicate_header: str = 'reject'
    duplicate_segment: str = 'reject'
    unrecognized_record: str = 'ignore'

    def __post_init__(self):
        checks = [
            ('duplicate_header', DUPLICATE_HEADER_POLICIES),
            ('duplicate_segment', DUPLICATE_SEGMENT_POLICIES),
            ('unrecognized_record', UNRECOGNIZED_RECORD_POLICIES),
        ]
        for key, allowed in checks:
            if getattr(self, key) not in allowed:
                raise ConfigValidationError(
                    f"Invalid {key} policy: {getattr(self, key)!r} (expected one of {', '.join(allowed)})"
                )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'LoadPolicy':
        """Build a policy from the 'gfa' section of a loaded configuration."""
        gfa = config.get('gfa', {})
        return cls(**{f.name: gfa[f.name] for f in fields(cls) if f.name in gfa})


# ============================================================================
#                           FILE UTILITIES
# ============================================================================

def is_gzipped(filepath: Union[str, Path]) -> bool:
    return Path(filepath).suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> IO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        Text file handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        return gzip.open(filepath, mode + 't', encoding='utf-8')
    return open(filepath, mode, encoding='utf-8')


def _open_target(target: Source, mode: str):
    # Caller-owned streams are used as-is and left open.
    if hasattr(target, 'read' if mode == 'r' else 'write'):
        return contextlib.nullcontext(target)
    return open_file(target, mode)


def _is_binary(handle) -> bool:
    if isinstance(handle, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return 'b' in getattr(handle, 'mode', '')


def _describe(target: Source) -> str:
    if isinstance(target, (str, Path)):
        return str(target)
    return getattr(target, 'name', '<stream>')


# ============================================================================
#                           GRAPH STORE
# ============================================================================

class GfaFile:
    """
    In-memory GFA graph: optional header, segments and links.

    Segment and link endpoint names share one IdentityResolver, so ids are
    dense and follow first appearance across both record types.

    Example:
        >>> gfa = GfaFile.from_path('assembly.gfa')
        >>> for link in gfa.links:
        ...     print(link.a_end.id, link.b_end.id, link.alignment_length())
        >>> gfa.save('copy.gfa')
    """

    def __init__(self, policy: Optional[LoadPolicy] = None):
        self.policy = policy or LoadPolicy()
        self.header: Optional[str] = None
        self._segments: List[Segment] = []
        self._links: List[Link] = []
        self._segment_index: Dict[str, int] = {}
        self._resolver = IdentityResolver()

    @classmethod
    def from_path(cls, source: Source, policy: Optional[LoadPolicy] = None) -> 'GfaFile':
        """Construct a file and load it from a path or stream."""
        return cls(policy=policy).load(source)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def links(self) -> Tuple[Link, ...]:
        return tuple(self._links)

    @property
    def resolver(self) -> IdentityResolver:
        return self._resolver

    def segment(self, name: str) -> Optional[Segment]:
        position = self._segment_index.get(name)
        return self._segments[position] if position is not None else None

    def segment_by_id(self, id: int) -> Optional[Segment]:
        name = self._resolver.get_name(id)
        return self.segment(name) if name is not None else None

    def links_of(self, name: str) -> List[Link]:
        """Links with either end on the named segment."""
        return [link for link in self._links
                if link.a_end.name == name or link.b_end.name == name]

    def dangling_links(self) -> List[Link]:
        """Links with an endpoint that has no S record."""
        return [link for link in self._links
                if link.a_end.name not in self._segment_index
                or link.b_end.name not in self._segment_index]

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def set_header(self, text: Optional[str]):
        self.header = text

    def add_segment(self, segment: Segment) -> Segment:
        """
        Resolve the segment's id and append it.

        Any id already on the value is replaced by the one this file's
        resolver assigns to its name.

        Returns:
            The stored, resolved Segment

        Raises:
            DuplicateSegment: If the name is already defined and the policy
                is 'reject'
        """
        resolved = replace(segment, id=self._resolver.add(segment.name))
        position = self._segment_index.get(segment.name)

        if position is None:
            self._segment_index[segment.name] = len(self._segments)
            self._segments.append(resolved)
        elif self.policy.duplicate_segment == 'reject':
            raise DuplicateSegment(segment.name)
        else:
            logger.warning(f"Segment '{segment.name}' redefined; keeping the later record")
            self._segments[position] = resolved

        return resolved

    def add_link(self, link: Link) -> Link:
        """Resolve both endpoint ids and append the link."""
        resolved = link.with_ids(self._resolver.add(link.a_end.name),
                                 self._resolver.add(link.b_end.name))
        self._links.append(resolved)
        return resolved

    def _add_header(self, header: HeaderRecord):
        if self.header is None:
            self.header = header.text
        elif self.policy.duplicate_header == 'reject':
            raise DuplicateHeader("Header line appears more than once")
        elif self.policy.duplicate_header == 'merge':
            self.header = f"{self.header}\t{header.text}"
        else:
            logger.warning("Header line appears more than once; keeping the later one")
            self.header = header.text

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def load(self, source: Source) -> 'GfaFile':
        """
        Replace this file's contents with the records read from source.

        Args:
            source: Path (gzip if it ends in .gz) or open text/binary stream

        Returns:
            self

        Raises:
            GfaFormatError: On the first bad line, with line_number and line set
            GfaIOError: If the source cannot be read
        """
        staged = GfaFile(policy=self.policy)
        skipped = 0
        line_number = 0
        line = ''

        logger.info(f"Loading GFA: {_describe(source)}")

        try:
            with _open_target(source, 'r') as handle:
                for line_number, raw_line in enumerate(handle, 1):
                    if isinstance(raw_line, bytes):
                        raw_line = raw_line.decode('utf-8')
                    line = raw_line.rstrip('\r\n')

                    try:
                        record = parse_record(line)
                    except UnrecognizedRecord as err:
                        if self.policy.unrecognized_record == 'reject':
                            raise
                        logger.debug(f"GFA line {line_number}: skipping '{err.marker}' record")
                        skipped += 1
                        continue

                    if record is None:
                        continue
                    elif isinstance(record, HeaderRecord):
                        staged._add_header(record)
                    elif isinstance(record, Segment):
                        staged.add_segment(record)
                    else:
                        staged.add_link(record)

        except GfaFormatError as err:
            raise err.at_line(line_number, line)
        except (OSError, UnicodeDecodeError) as err:
            raise GfaIOError(f"Failed to read GFA {_describe(source)}: {err}") from err

        self.header = staged.header
        self._segments = staged._segments
        self._links = staged._links
        self._segment_index = staged._segment_index
        self._resolver = staged._resolver

        logger.info(f"Loaded GFA: {len(self._segments)} segments, {len(self._links)} links")
        if skipped:
            logger.info(f"  Skipped {skipped} unsupported record(s)")
        dangling = len(self.dangling_links())
        if dangling:
            logger.info(f"  {dangling} link(s) reference segments without an S record")

        return self

    def iter_lines(self) -> Iterator[str]:
        """GFA lines in save order, without line endings."""
        if self.header is not None:
            yield serialize_header(HeaderRecord(self.header))
        for segment in self._segments:
            yield serialize_segment(segment)
        for link in self._links:
            yield serialize_link(link)

    def save(self, destination: Source):
        """
        Write header, segments and links to destination.

        Args:
            destination: Path (gzip if it ends in .gz) or open text/binary
                stream; binary streams receive UTF-8

        Raises:
            GfaIOError: If writing fails; no lines follow the failing one
        """
        logger.info(f"Writing GFA with {len(self._segments)} segments and {len(self._links)} links: "
                    f"{_describe(destination)}")

        try:
            with _open_target(destination, 'w') as handle:
                binary = _is_binary(handle)
                for line in self.iter_lines():
                    line += '\n'
                    handle.write(line.encode('utf-8') if binary else line)
        except OSError as err:
            raise GfaIOError(f"Failed to write GFA {_describe(destination)}: {err}") from err

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def stats(self) -> Dict[str, Any]:
        """
        Basic statistics of the loaded graph.

        Returns:
            Dict with keys 'header', 'segments', 'links', 'total_length',
            'placeholder_sequences' and 'dangling_links'
        """
        return {
            'header': self.header,
            'segments': len(self._segments),
            'links': len(self._links),
            'total_length': sum(s.length for s in self._segments),
            'placeholder_sequences': sum(1 for s in self._segments if not s.has_sequence),
            'dangling_links': len(self.dangling_links()),
        }

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"GfaFile(segments={len(self._segments)}, links={len(self._links)})"


# GfaGraph v0.1.0
# Any usage is subject to this software's license.
