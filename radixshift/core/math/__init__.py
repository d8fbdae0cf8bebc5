"""
Core math modules для radixshift

Точная арифметика и алгоритмы преобразования оснований.
"""

# Rational arithmetic
from radixshift.core.math.rational import (
    Number,
    Rational,
    ZeroDenominatorError,
    add,
    as_rational,
    multiply,
)

# Combinatorics
from radixshift.core.math.combinatorics import binomial

# Matrices
from radixshift.core.math.matrices import (
    Matrix,
    MatrixDimensionMismatch,
    diagonal_power_matrix,
    format_matrix,
    identity_matrix,
    matrix_multiply,
    multiples_factor,
    pascal_offset_matrix,
)

# Normalization
from radixshift.core.math.normalization import (
    NonTerminatingExpansion,
    NormalizationResult,
    TruncationPolicy,
    expand_digits,
    normalize_coefficients,
)

__all__ = [
    # Rational — Types
    "Number",
    "Rational",
    # Rational — Exceptions
    "ZeroDenominatorError",
    # Rational — Functions
    "add",
    "as_rational",
    "multiply",
    # Combinatorics
    "binomial",
    # Matrices — Types
    "Matrix",
    # Matrices — Exceptions
    "MatrixDimensionMismatch",
    # Matrices — Functions
    "diagonal_power_matrix",
    "format_matrix",
    "identity_matrix",
    "matrix_multiply",
    "multiples_factor",
    "pascal_offset_matrix",
    # Normalization — Types
    "NormalizationResult",
    "TruncationPolicy",
    # Normalization — Exceptions
    "NonTerminatingExpansion",
    # Normalization — Functions
    "expand_digits",
    "normalize_coefficients",
]
