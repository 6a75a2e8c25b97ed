"""Notation — текстовая запись рациональных количеств.

- state_machine: конечный автомат text → Rational
- formatter: Rational → text
"""

from .formatter import (
    FormatterConfig,
    QuantityFormatter,
    format_rational,
)
from .state_machine import (
    CharClass,
    MixedFraction,
    ParseState,
    ParserConfig,
    QuantityParser,
    classify,
    parse_rational,
)

__all__ = [
    # Parser
    "ParseState",
    "CharClass",
    "MixedFraction",
    "ParserConfig",
    "QuantityParser",
    "classify",
    "parse_rational",
    # Formatter
    "FormatterConfig",
    "QuantityFormatter",
    "format_rational",
]
