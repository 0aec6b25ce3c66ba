#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

CIGAR extent calculation for GFA link overlaps.

Only length accounting is done here: M consumes query and reference, I
consumes query only, D consumes reference only. Every other operation is
rejected rather than guessed at.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

import re
from typing import List, NamedTuple, Tuple

from ..errors import MalformedCigar, UnsupportedCigarOp

CIGAR_PLACEHOLDER = '*'

_CIGAR_TOKEN = re.compile(r'([1-9][0-9]*)([A-Za-z=])')


class CigarExtents(NamedTuple):
    """Lengths covered by an alignment."""
    query_length: int
    reference_length: int
    align_length: int


def parse_cigar(cigar: str) -> List[Tuple[int, str]]:
    """
    Tokenize a CIGAR string into (length, operation) pairs.

    Args:
        cigar: CIGAR string, e.g. '10M2I3D'

    Returns:
        List of (length, op) tuples; empty for the '*' placeholder

    Raises:
        MalformedCigar: If the string is not a sequence of <positive int><op> tokens

    Example:
        >>> parse_cigar('10M2I3D')
        [(10, 'M'), (2, 'I'), (3, 'D')]
    """
    if cigar == CIGAR_PLACEHOLDER:
        return []

    if not cigar:
        raise MalformedCigar("Empty CIGAR string")

    ops = []
    pos = 0
    for match in _CIGAR_TOKEN.finditer(cigar):
        if match.start() != pos:
            raise MalformedCigar(f"Bad CIGAR token at offset {pos}: '{cigar}'")
        ops.append((int(match.group(1)), match.group(2)))
        pos = match.end()

    if pos != len(cigar):
        raise MalformedCigar(f"Bad CIGAR token at offset {pos}: '{cigar}'")

    return ops


def cigar_extents(cigar: str) -> CigarExtents:
    """
    Compute query, reference and total alignment length of a CIGAR string.

    Args:
        cigar: CIGAR string or the '*' placeholder

    Returns:
        CigarExtents; all zero for the placeholder

    Raises:
        MalformedCigar: On bad tokenization
        UnsupportedCigarOp: On any operation other than M, I, D
    """
    query_length = 0
    reference_length = 0
    align_length = 0

    for length, op in parse_cigar(cigar):
        if op == 'M':
            query_length += length
            reference_length += length
        elif op == 'I':
            query_length += length
        elif op == 'D':
            reference_length += length
        else:
            raise UnsupportedCigarOp(op, cigar)

        align_length += length

    return CigarExtents(query_length, reference_length, align_length)


# GfaGraph v0.1.0
# Any usage is subject to this software's license.
