"""
Domain models and value objects.

Contains the arbitrary-precision BigInteger value type.
"""

from src.core.domain.big_integer import (
    INT64_MAX,
    INT64_MIN,
    INT64_MIN_MAGNITUDE,
    ONE,
    ZERO,
    BigInteger,
    InvalidFormat,
)

__all__ = [
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    "INT64_MIN_MAGNITUDE",
    "ONE",
    "ZERO",
    # Exceptions
    "InvalidFormat",
    # BigInteger model
    "BigInteger",
]
