"""
Core math modules

Беззнаковые примитивы над десятичными magnitudes произвольной длины.
"""

# Digit Arithmetic
from src.core.math.digit_arithmetic import (
    # Constants
    DECIMAL_BASE,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    # Types
    Magnitude,
    # Normalization / validation
    is_zero_magnitude,
    normalize_magnitude,
    validate_magnitude,
    # Comparison
    compare_magnitudes,
    magnitude_less,
    # Arithmetic
    add_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
    # String conversion
    magnitude_from_digit_string,
    magnitude_to_digit_string,
)

__all__ = [
    # Digit Arithmetic — Constants
    "DECIMAL_BASE",
    "ONE_MAGNITUDE",
    "ZERO_MAGNITUDE",
    # Digit Arithmetic — Types
    "Magnitude",
    # Digit Arithmetic — Normalization / validation
    "is_zero_magnitude",
    "normalize_magnitude",
    "validate_magnitude",
    # Digit Arithmetic — Comparison
    "compare_magnitudes",
    "magnitude_less",
    # Digit Arithmetic — Arithmetic
    "add_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
    # Digit Arithmetic — String conversion
    "magnitude_from_digit_string",
    "magnitude_to_digit_string",
]
