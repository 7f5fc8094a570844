"""
Contract Validation Module

Модуль для валидации JSON-формы ArithMap.
"""

from .validators import (
    ARITH_MAP_SCHEMA_PATH,
    ArithMapSchemaValidator,
    ArithMapValidator,
    dump_arith_map,
    load_arith_map,
    load_arith_map_schema,
    validate_arith_map,
)

__all__ = [
    # Constants
    "ARITH_MAP_SCHEMA_PATH",
    # Classes
    "ArithMapSchemaValidator",
    "ArithMapValidator",
    # Functions
    "load_arith_map_schema",
    "validate_arith_map",
    "dump_arith_map",
    "load_arith_map",
]
