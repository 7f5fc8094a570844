"""
Containers with arithmetic operations support.

ArithMap — словарь ключ → число с поэлементным сложением, вычитанием,
умножением на скаляр и удалением нулевых записей (prune).
"""

from src.arith.containers import ArithMap, ArithMapIdentityMismatch, arithmap
from src.arith.domain import SNAPSHOT_SCHEMA_VERSION, ArithMapSnapshot

__all__ = [
    "ArithMap",
    "ArithMapIdentityMismatch",
    "arithmap",
    "ArithMapSnapshot",
    "SNAPSHOT_SCHEMA_VERSION",
]
