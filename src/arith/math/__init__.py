"""
Core math modules для arith

Примитивы для значений арифметических контейнеров.
"""

from src.arith.math.numeric import (
    ADDITIVE_IDENTITY_DEFAULT,
    is_additive_identity,
    is_container,
    is_scalar,
    is_valid_number,
    negate,
)

__all__ = [
    # Constants
    "ADDITIVE_IDENTITY_DEFAULT",
    # Operand classification
    "is_container",
    "is_scalar",
    # Additive identity
    "is_additive_identity",
    "negate",
    # Validation
    "is_valid_number",
]
