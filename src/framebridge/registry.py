"""Type registry: lookup of supported types from every direction.

Usage::

    registry = get_registry()

    registry.get_by_storage_tag(StorageTag.TIME)     # Timestamp
    registry.get_by_schema_type("double")            # Double
    registry.get_by_name("Option[Double]")           # OptionDouble
    registry.by_type(Optional[float])                # OptionDouble
"""

from __future__ import annotations

import enum
import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping, TypeVar

from .constants import SchemaType, StorageTag
from .exc import UnsupportedTypeError
from .types.base import BaseType, OptionalType, SupportedType
from .types.catalog import BASE_TYPES, OPTIONAL_TYPES
from .types.signature import Signature, is_signature, signature_of

log = logging.getLogger("framebridge.registry")

K = TypeVar('K')
E = TypeVar('E', bound=enum.Enum)


def _index_by(
    key: Callable[[SupportedType], K],
    descriptors: Iterable[SupportedType],
) -> Mapping[K, SupportedType]:
    """Build a one-to-one index; on a key collision the later descriptor wins."""
    index: dict[K, SupportedType] = {}
    for descriptor in descriptors:
        k = key(descriptor)
        previous = index.get(k)
        if previous is not None:
            log.debug("index key %r: %s replaces %s", k, descriptor, previous)
        index[k] = descriptor
    return MappingProxyType(index)


def _group_by(
    key: Callable[[SupportedType], K],
    descriptors: Iterable[SupportedType],
) -> Mapping[K, tuple[SupportedType, ...]]:
    """Build a one-to-many index preserving declaration order."""
    groups: dict[K, list[SupportedType]] = {}
    for descriptor in descriptors:
        groups.setdefault(key(descriptor), []).append(descriptor)
    return MappingProxyType({k: tuple(v) for k, v in groups.items()})


def _coerce(enum_cls: type[E], value: Any) -> E | None:
    """Coerce a raw key to *enum_cls*, or None if it is not a member value."""
    if isinstance(value, bool):
        return None
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


class TypeRegistry:
    """Immutable set of supported types with derived lookup indices.

    Indices keyed by storage tag, schema type or runtime class cover base
    types only, and keep the last declared type on a collision.  The
    display-name index covers optional types as well.  Index lookups return
    None on a miss; :meth:`by_type` raises :class:`UnsupportedTypeError`.
    """

    def __init__(self, base_types: Iterable[BaseType] = BASE_TYPES) -> None:
        self._base = tuple(base_types)
        if self._base == BASE_TYPES:
            self._optional = OPTIONAL_TYPES
        else:
            self._optional = tuple(OptionalType(t) for t in self._base)
        self._all: tuple[SupportedType, ...] = self._base + self._optional

        self.by_runtime_class = _index_by(lambda t: t.runtime_class, self._base)
        self.by_storage_tag = _index_by(lambda t: t.storage_tag, self._base)
        self.by_schema_type = _index_by(lambda t: t.schema_type, self._base)
        self.by_display_name = _index_by(lambda t: t.name, self._all)

        self._by_storage_tag_all = _group_by(lambda t: t.storage_tag, self._base)
        self._by_schema_type_all = _group_by(lambda t: t.schema_type, self._base)
        self._optional_by_base = MappingProxyType(dict(zip(self._base, self._optional)))

        log.debug(
            "built type registry: %d base, %d optional, %d display names",
            len(self._base), len(self._optional), len(self.by_display_name),
        )

    # ── Catalog views ─────────────────────────────────────────────

    @property
    def base_types(self) -> tuple[BaseType, ...]:
        return self._base

    @property
    def optional_types(self) -> tuple[OptionalType, ...]:
        return self._optional

    @property
    def all_types(self) -> tuple[SupportedType, ...]:
        """Base types followed by their optional variants."""
        return self._all

    def optional_of(self, base: BaseType) -> OptionalType | None:
        """Return the optional variant of a registered base type."""
        return self._optional_by_base.get(base)

    # ── Keyed lookups ─────────────────────────────────────────────

    def get_by_runtime_class(self, cls: type) -> SupportedType | None:
        """Look up a base type by the class that boxes its values."""
        try:
            return self.by_runtime_class.get(cls)
        except TypeError:
            return None

    def get_by_storage_tag(self, tag: StorageTag | int) -> SupportedType | None:
        """Look up a base type by storage engine column kind."""
        key = _coerce(StorageTag, tag)
        return None if key is None else self.by_storage_tag.get(key)

    def get_by_schema_type(self, schema_type: SchemaType | str) -> SupportedType | None:
        """Look up a base type by query engine schema type."""
        key = _coerce(SchemaType, schema_type)
        return None if key is None else self.by_schema_type.get(key)

    def get_by_name(self, name: str) -> SupportedType | None:
        """Look up any supported type by display name, e.g. ``Option[Long]``."""
        try:
            return self.by_display_name.get(name)
        except TypeError:
            return None

    def candidates_by_storage_tag(self, tag: StorageTag | int) -> tuple[SupportedType, ...]:
        """All base types stored under *tag*, in declaration order."""
        key = _coerce(StorageTag, tag)
        return () if key is None else self._by_storage_tag_all.get(key, ())

    def candidates_by_schema_type(self, schema_type: SchemaType | str) -> tuple[SupportedType, ...]:
        """All base types with *schema_type*, in declaration order."""
        key = _coerce(SchemaType, schema_type)
        return () if key is None else self._by_schema_type_all.get(key, ())

    # ── Structural matching ───────────────────────────────────────

    def by_type(self, tpe: Signature | Any) -> SupportedType:
        """Find the first supported type matching a runtime type.

        Parameters
        ----------
        tpe : Signature or annotation
            A :data:`Signature`, or an annotation such as ``Optional[float]``.

        Raises
        ------
        UnsupportedTypeError
            If no supported type matches.
        """
        signature = tpe if is_signature(tpe) else signature_of(tpe)
        for descriptor in self._all:
            if descriptor.matches(signature):
                return descriptor
        log.debug("no supported type matches %s", signature)
        raise UnsupportedTypeError(signature)

    by_annotation = by_type

    def __iter__(self) -> Iterator[SupportedType]:
        return iter(self._all)

    def __len__(self) -> int:
        return len(self._all)

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self._all

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._base)
        return f"TypeRegistry([{names}])"


# ── Process-wide registry ─────────────────────────────────────────
_default_registry: TypeRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> TypeRegistry:
    """Return the shared registry over the built-in catalog.

    Built on first use; concurrent first calls build it exactly once.
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = TypeRegistry()
    return _default_registry
