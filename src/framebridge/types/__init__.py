"""Supported type descriptors and runtime type signatures.

Usage::

    from framebridge.types import Double, OptionDouble, signature_of

    Double.matches(signature_of(float))              # True
    OptionDouble.matches(signature_of(float | None)) # True
"""

from __future__ import annotations

from .signature import Scalar, Container, Signature, is_signature, signature_of
from .base import SupportedType, BaseType, OptionalType
from .defaults import is_default
from .catalog import (
    Boolean, Byte, Short, Integer, Long, Float, Double,
    Timestamp, String, UUID, Category, UTF8,
    OptionBoolean, OptionByte, OptionShort, OptionInteger, OptionLong,
    OptionFloat, OptionDouble, OptionTimestamp, OptionString, OptionUUID,
    OptionCategory, OptionUTF8,
    BASE_TYPES, OPTIONAL_TYPES, ALL_TYPES,
)

__all__ = [
    # Signatures
    'Scalar', 'Container', 'Signature', 'is_signature', 'signature_of',
    # Descriptors
    'SupportedType', 'BaseType', 'OptionalType', 'is_default',
    # Catalog
    'Boolean', 'Byte', 'Short', 'Integer', 'Long', 'Float', 'Double',
    'Timestamp', 'String', 'UUID', 'Category', 'UTF8',
    'OptionBoolean', 'OptionByte', 'OptionShort', 'OptionInteger', 'OptionLong',
    'OptionFloat', 'OptionDouble', 'OptionTimestamp', 'OptionString', 'OptionUUID',
    'OptionCategory', 'OptionUTF8',
    'BASE_TYPES', 'OPTIONAL_TYPES', 'ALL_TYPES',
]
