"""
Domain models and value objects.

Contains the digit alphabet, base bounds, conversion request and result models.
"""

from radixshift.core.domain.alphabet import (
    BASE62_ALPHABET,
    BASE62_SYMBOLS,
    UNKNOWN_SYMBOL,
    DigitAlphabet,
)
from radixshift.core.domain.bases import (
    MAX_BASE_MAGNITUDE,
    MIN_BASE_MAGNITUDE,
    describe_method_availability,
    is_divisor_pair,
    validate_base,
)
from radixshift.core.domain.models import (
    BatchConversion,
    BatchDiagnostics,
    ConversionMethod,
    ConversionRequest,
    ConversionResult,
    LineError,
    NumberEntry,
    ParseErrorKind,
)

__all__ = [
    # Alphabet
    "BASE62_ALPHABET",
    "BASE62_SYMBOLS",
    "UNKNOWN_SYMBOL",
    "DigitAlphabet",
    # Bases
    "MIN_BASE_MAGNITUDE",
    "MAX_BASE_MAGNITUDE",
    "validate_base",
    "is_divisor_pair",
    "describe_method_availability",
    # Models
    "ConversionMethod",
    "ParseErrorKind",
    "ConversionRequest",
    "NumberEntry",
    "LineError",
    "ConversionResult",
    "BatchDiagnostics",
    "BatchConversion",
]
