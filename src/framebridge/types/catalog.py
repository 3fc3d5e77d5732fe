"""The catalog of supported types.

Order matters: index collisions resolve to the entry declared last, and the
structural matcher returns the entry declared first.
"""

from __future__ import annotations

import datetime

import numpy

from ..constants import SchemaType, StorageTag
from .base import BaseType, OptionalType
from .defaults import (
    DEFAULT_BOOLEAN, DEFAULT_BYTE, DEFAULT_SHORT, DEFAULT_INTEGER, DEFAULT_LONG,
    DEFAULT_FLOAT, DEFAULT_DOUBLE, DEFAULT_TIMESTAMP, DEFAULT_STRING,
)

# ── Base types ─────────────────────────────────────────────────────

Boolean = BaseType(
    name="Boolean", storage_tag=StorageTag.NUM, schema_type=SchemaType.BOOLEAN,
    runtime_class=numpy.bool_, default_value=DEFAULT_BOOLEAN, aliases=(bool,),
)

Byte = BaseType(
    name="Byte", storage_tag=StorageTag.NUM, schema_type=SchemaType.BYTE,
    runtime_class=numpy.int8, default_value=DEFAULT_BYTE,
)

Short = BaseType(
    name="Short", storage_tag=StorageTag.NUM, schema_type=SchemaType.SHORT,
    runtime_class=numpy.int16, default_value=DEFAULT_SHORT,
)

Integer = BaseType(
    name="Integer", storage_tag=StorageTag.NUM, schema_type=SchemaType.INTEGER,
    runtime_class=numpy.int32, default_value=DEFAULT_INTEGER,
)

Long = BaseType(
    name="Long", storage_tag=StorageTag.NUM, schema_type=SchemaType.LONG,
    runtime_class=numpy.int64, default_value=DEFAULT_LONG, aliases=(int,),
)

Float = BaseType(
    name="Float", storage_tag=StorageTag.NUM, schema_type=SchemaType.FLOAT,
    runtime_class=numpy.float32, default_value=DEFAULT_FLOAT,
)

Double = BaseType(
    name="Double", storage_tag=StorageTag.NUM, schema_type=SchemaType.DOUBLE,
    runtime_class=numpy.float64, default_value=DEFAULT_DOUBLE, aliases=(float,),
)

Timestamp = BaseType(
    name="Timestamp", storage_tag=StorageTag.TIME, schema_type=SchemaType.TIMESTAMP,
    runtime_class=datetime.datetime, default_value=DEFAULT_TIMESTAMP,
)

# String kinds share the runtime class and schema type; only the storage
# tag tells them apart.
String = BaseType(
    name="String", storage_tag=StorageTag.STR, schema_type=SchemaType.STRING,
    runtime_class=str, default_value=DEFAULT_STRING,
)

UUID = BaseType(
    name="UUID", storage_tag=StorageTag.UUID, schema_type=SchemaType.STRING,
    runtime_class=str, default_value=DEFAULT_STRING,
)

Category = BaseType(
    name="Category", storage_tag=StorageTag.CAT, schema_type=SchemaType.STRING,
    runtime_class=str, default_value=DEFAULT_STRING,
)

# Engine-native string: UTF-8 encoded bytes on the Python side
UTF8 = BaseType(
    name="UTF8", storage_tag=StorageTag.STR, schema_type=SchemaType.STRING,
    runtime_class=str, default_value=DEFAULT_STRING, aliases=(bytes,),
)

BASE_TYPES: tuple[BaseType, ...] = (
    Boolean, Byte, Short, Integer, Long, Float, Double,
    Timestamp, String, UUID, Category, UTF8,
)

# ── Optional variants ──────────────────────────────────────────────

OPTIONAL_TYPES: tuple[OptionalType, ...] = tuple(OptionalType(t) for t in BASE_TYPES)

(
    OptionBoolean, OptionByte, OptionShort, OptionInteger, OptionLong,
    OptionFloat, OptionDouble, OptionTimestamp, OptionString, OptionUUID,
    OptionCategory, OptionUTF8,
) = OPTIONAL_TYPES

ALL_TYPES: tuple[BaseType | OptionalType, ...] = BASE_TYPES + OPTIONAL_TYPES
