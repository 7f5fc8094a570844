"""
Containers with arithmetic operations support.

Contains ArithMap and its convenience constructor.
"""

from src.arith.containers.arith_map import (
    ArithMap,
    ArithMapIdentityMismatch,
    arithmap,
)

__all__ = [
    "ArithMap",
    "ArithMapIdentityMismatch",
    "arithmap",
]
