"""
Domain models and value objects.

Contains serialisable snapshots of arithmetic containers.
"""

from src.arith.domain.snapshot import SNAPSHOT_SCHEMA_VERSION, ArithMapSnapshot

__all__ = [
    "SNAPSHOT_SCHEMA_VERSION",
    "ArithMapSnapshot",
]
