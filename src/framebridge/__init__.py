"""framebridge: type correspondence between a columnar storage engine,
a relational query engine, and Python.

Usage::

    from typing import Optional
    from framebridge import get_registry, StorageTag, SchemaType

    registry = get_registry()

    registry.by_type(Optional[float])             # Option[Double]
    registry.get_by_schema_type(SchemaType.LONG)  # Long
    registry.get_by_storage_tag(StorageTag.TIME)  # Timestamp
    registry.get_by_name("Option[Integer]")       # Option[Integer]
"""

from .constants import StorageTag, SchemaType
from .types import (
    Scalar, Container, Signature, is_signature, signature_of,
    SupportedType, BaseType, OptionalType, is_default,
    Boolean, Byte, Short, Integer, Long, Float, Double,
    Timestamp, String, UUID, Category, UTF8,
    OptionBoolean, OptionByte, OptionShort, OptionInteger, OptionLong,
    OptionFloat, OptionDouble, OptionTimestamp, OptionString, OptionUUID,
    OptionCategory, OptionUTF8,
    BASE_TYPES, OPTIONAL_TYPES, ALL_TYPES,
)
from .registry import TypeRegistry, get_registry
from .schema import ColumnSpec, FrameSchema
from .config import load_config, schema_from_config
from .exc import FramebridgeError, UnsupportedTypeError, SchemaError, ConfigError

__version__ = "0.1.0"

__all__ = [
    # Engine enumerations
    'StorageTag', 'SchemaType',
    # Signatures
    'Scalar', 'Container', 'Signature', 'is_signature', 'signature_of',
    # Descriptors
    'SupportedType', 'BaseType', 'OptionalType', 'is_default',
    'Boolean', 'Byte', 'Short', 'Integer', 'Long', 'Float', 'Double',
    'Timestamp', 'String', 'UUID', 'Category', 'UTF8',
    'OptionBoolean', 'OptionByte', 'OptionShort', 'OptionInteger', 'OptionLong',
    'OptionFloat', 'OptionDouble', 'OptionTimestamp', 'OptionString', 'OptionUUID',
    'OptionCategory', 'OptionUTF8',
    'BASE_TYPES', 'OPTIONAL_TYPES', 'ALL_TYPES',
    # Registry
    'TypeRegistry', 'get_registry',
    # Schemas
    'ColumnSpec', 'FrameSchema', 'load_config', 'schema_from_config',
    # Exceptions
    'FramebridgeError', 'UnsupportedTypeError', 'SchemaError', 'ConfigError',
]
