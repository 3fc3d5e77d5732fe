"""Frame schemas: ordered columns resolved to supported types.

A :class:`FrameSchema` can be built from whichever side knows the columns
and read back for the other side::

    schema = FrameSchema.from_schema_fields([
        ("sym", "string", False),
        ("price", "double", True),
    ])
    schema.storage_tags()    # [StorageTag.STR, StorageTag.NUM]
    schema.schema_fields()   # [("sym", SchemaType.STRING, False), ...]
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, Iterator, Mapping

from .constants import SchemaType, StorageTag
from .exc import SchemaError
from .registry import TypeRegistry, get_registry
from .types.base import BaseType, OptionalType, SupportedType

log = logging.getLogger("framebridge.schema")


@dataclasses.dataclass(frozen=True, slots=True)
class ColumnSpec:
    """A single named column and its supported type."""
    name: str
    type: SupportedType

    @property
    def nullable(self) -> bool:
        return isinstance(self.type, OptionalType)

    @property
    def storage_tag(self) -> StorageTag:
        return self.type.storage_tag

    @property
    def schema_type(self) -> SchemaType:
        return self.type.schema_type

    @property
    def default_value(self) -> Any:
        return self.type.default_value


class FrameSchema:
    """Ordered, uniquely named columns.

    Raises
    ------
    SchemaError
        If two columns share a name.
    """

    def __init__(self, columns: Iterable[ColumnSpec]) -> None:
        self._columns = tuple(columns)
        self._by_name: dict[str, ColumnSpec] = {}
        for col in self._columns:
            if col.name in self._by_name:
                raise SchemaError(f"Duplicate column name {col.name!r}")
            self._by_name[col.name] = col

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return self._columns

    @property
    def names(self) -> list[str]:
        return [c.name for c in self._columns]

    def storage_tags(self) -> list[StorageTag]:
        """Storage engine column kinds, in column order."""
        return [c.storage_tag for c in self._columns]

    def schema_fields(self) -> list[tuple[str, SchemaType, bool]]:
        """Query engine ``(name, schema_type, nullable)`` triples."""
        return [(c.name, c.schema_type, c.nullable) for c in self._columns]

    def __iter__(self) -> Iterator[ColumnSpec]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __getitem__(self, name: str) -> ColumnSpec:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"No column {name!r} in schema") from None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrameSchema):
            return self._columns == other._columns
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._columns)

    def __repr__(self) -> str:
        cols = ", ".join(f"{c.name}: {c.type}" for c in self._columns)
        return f"FrameSchema({cols})"

    # ── Builders ──────────────────────────────────────────────────

    @classmethod
    def from_annotations(
        cls,
        annotations: Mapping[str, Any],
        registry: TypeRegistry | None = None,
    ) -> FrameSchema:
        """Build from Python annotations, e.g. ``{"price": float | None}``."""
        registry = registry or get_registry()
        columns = []
        for name, annotation in annotations.items():
            try:
                columns.append(ColumnSpec(name, registry.by_type(annotation)))
            except TypeError as exc:
                # includes UnsupportedTypeError and underivable annotations
                raise SchemaError(f"Column {name!r}: {exc}") from exc
        return cls(columns)

    @classmethod
    def from_display_names(
        cls,
        names: Mapping[str, str],
        registry: TypeRegistry | None = None,
    ) -> FrameSchema:
        """Build from type display names, e.g. ``{"price": "Option[Double]"}``."""
        registry = registry or get_registry()
        columns = []
        for name, type_name in names.items():
            descriptor = registry.get_by_name(type_name)
            if descriptor is None:
                raise SchemaError(f"Unknown type {type_name!r} for column {name!r}")
            columns.append(ColumnSpec(name, descriptor))
        return cls(columns)

    @classmethod
    def from_schema_fields(
        cls,
        fields: Iterable[tuple[str, SchemaType | str, bool]],
        registry: TypeRegistry | None = None,
    ) -> FrameSchema:
        """Build from query engine ``(name, schema_type, nullable)`` triples."""
        registry = registry or get_registry()
        columns = []
        for name, schema_type, nullable in fields:
            base = registry.get_by_schema_type(schema_type)
            if base is None:
                raise SchemaError(
                    f"Unsupported schema type {schema_type!s} for column {name!r}"
                )
            columns.append(ColumnSpec(name, _wrap(registry, base, nullable)))
        return cls(columns)

    @classmethod
    def from_storage_tags(
        cls,
        tags: Mapping[str, StorageTag | int],
        registry: TypeRegistry | None = None,
    ) -> FrameSchema:
        """Build from storage engine column kinds.

        Storage engine columns may always hold missing values, so every
        column is optional.
        """
        registry = registry or get_registry()
        columns = []
        for name, tag in tags.items():
            base = registry.get_by_storage_tag(tag)
            if base is None:
                raise SchemaError(f"Unsupported storage tag {tag!r} for column {name!r}")
            candidates = registry.candidates_by_storage_tag(tag)
            if len(candidates) > 1:
                log.debug(
                    "column %r: storage tag %s resolved to %s of %d candidates",
                    name, StorageTag(tag).name, base, len(candidates),
                )
            columns.append(ColumnSpec(name, _wrap(registry, base, True)))
        return cls(columns)


def _wrap(registry: TypeRegistry, base: SupportedType, nullable: bool) -> SupportedType:
    if nullable and isinstance(base, BaseType):
        return registry.optional_of(base) or OptionalType(base)
    return base
