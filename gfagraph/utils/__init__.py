"""
GfaGraph v0.1.0

Utilities: identity resolution and CIGAR extents.
"""

from .identity import IdentityResolver
from .cigar import CIGAR_PLACEHOLDER, CigarExtents, cigar_extents, parse_cigar

__all__ = [
    "IdentityResolver",
    "CIGAR_PLACEHOLDER",
    "CigarExtents",
    "cigar_extents",
    "parse_cigar",
]
