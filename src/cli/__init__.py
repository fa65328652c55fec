"""
Command-line entry points.

Contains the BigInteger demonstration program.
"""

from .demo import DemoConfig, create_parser, main, run_demo

__all__ = [
    "DemoConfig",
    "create_parser",
    "main",
    "run_demo",
]
