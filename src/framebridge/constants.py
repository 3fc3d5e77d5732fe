"""Type enumerations of the storage engine and the query engine."""

from __future__ import annotations

import enum

# ── Storage engine column kinds ────────────────────────────────────
# Mirrors the H2O Vec type bytes. Several logical types share a kind:
# every numeric type is stored as NUM.


class StorageTag(enum.IntEnum):
    """Physical column kinds of the columnar storage engine."""
    BAD = 0    # all-missing column, no catalog entry
    UUID = 1
    STR = 2
    NUM = 3
    CAT = 4    # categorical (enum) column
    TIME = 5


# ── Query engine schema types ──────────────────────────────────────


class SchemaType(str, enum.Enum):
    """Column types of the query engine schema, valued by type name."""
    BOOLEAN = 'boolean'
    BYTE = 'byte'
    SHORT = 'short'
    INTEGER = 'integer'
    LONG = 'long'
    FLOAT = 'float'
    DOUBLE = 'double'
    TIMESTAMP = 'timestamp'
    STRING = 'string'

    # No supported type maps to these
    DATE = 'date'
    BINARY = 'binary'
    DECIMAL = 'decimal'

    def __str__(self) -> str:
        return self.value
