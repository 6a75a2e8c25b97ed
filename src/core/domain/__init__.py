"""
Domain models and value objects.

Contains the exact rational quantity type and the vulgar fraction table.
"""

from src.core.domain.rational import ONE, ZERO, Rational, RationalLike
from src.core.domain.vulgar_fractions import (
    VULGAR_FRACTIONS,
    glyph_to_rational,
    is_vulgar_fraction,
    rational_to_glyph,
)

__all__ = [
    # Rational
    "Rational",
    "RationalLike",
    "ZERO",
    "ONE",
    # Vulgar fractions
    "VULGAR_FRACTIONS",
    "glyph_to_rational",
    "rational_to_glyph",
    "is_vulgar_fraction",
]
