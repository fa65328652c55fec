"""
Core domain models, mathematical primitives, and invariants.

This module contains the arbitrary-precision integer type and the unsigned
digit algorithms it is built on. Nothing here performs I/O.
"""
