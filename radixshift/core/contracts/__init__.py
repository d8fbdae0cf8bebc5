"""
Contract Validation Module

JSON Schema контракты входа и выхода пакетной конверсии.
"""

from .validators import (
    CONVERSION_BATCH,
    CONVERSION_REQUEST,
    DEFAULT_SCHEMA_DIR,
    SchemaLoader,
    default_schema_loader,
)

__all__ = [
    # Contract names
    "CONVERSION_REQUEST",
    "CONVERSION_BATCH",
    # Loader
    "DEFAULT_SCHEMA_DIR",
    "SchemaLoader",
    "default_schema_loader",
]
