"""
Core math modules для bounded_cast

Fixed-width типы, overflow-safe примитивы и единственное ядро rescale.
"""

# Numeric Types
from bounded_cast.core.math.numeric_types import Number, NumericType

# Numerical Safeguards
from bounded_cast.core.math.numerical_safeguards import (
    # Tolerance
    DEFAULT_ROUND_TRIP_TOL,
    # Checks
    is_integral_number,
    is_valid_float,
    # Arithmetic
    clamp,
    compute_extent,
    to_exact,
    trunc_div,
)

# Rescale
from bounded_cast.core.math.rescale import domain_convert

__all__ = [
    # Numeric Types
    "Number",
    "NumericType",
    # Numerical Safeguards — Tolerance
    "DEFAULT_ROUND_TRIP_TOL",
    # Numerical Safeguards — Checks
    "is_integral_number",
    "is_valid_float",
    # Numerical Safeguards — Arithmetic
    "clamp",
    "compute_extent",
    "to_exact",
    "trunc_div",
    # Rescale
    "domain_convert",
]
