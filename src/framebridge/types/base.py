"""Supported type descriptors: BaseType and its nullable OptionalType."""

from __future__ import annotations

import abc
import dataclasses
from typing import Any

from ..constants import SchemaType, StorageTag
from .signature import Container, Scalar, Signature, signature_of


class SupportedType(abc.ABC):
    """A type known to both the storage engine and the query engine.

    Every descriptor answers for its storage tag, schema type, the runtime
    class that boxes one value, and whether a runtime type signature
    corresponds to it.
    """

    name: str
    storage_tag: StorageTag
    schema_type: SchemaType
    runtime_class: type
    default_value: Any

    @abc.abstractmethod
    def matches(self, signature: Signature) -> bool:
        """Return True if *signature* corresponds to this type."""

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True, slots=True)
class BaseType(SupportedType):
    """A non-nullable supported type.

    Parameters
    ----------
    name : str
        Unique display name (e.g. "Double").
    storage_tag : StorageTag
        Storage engine column kind.
    schema_type : SchemaType
        Query engine column type.
    runtime_class : type
        Class used to box a single value on the Python side.
    default_value : Any
        Placeholder used when a value is absent but a non-null value is needed.
    aliases : tuple
        Further runtime classes (or signatures) that mean this same type.
    """
    name: str
    storage_tag: StorageTag
    schema_type: SchemaType
    runtime_class: type
    default_value: Any = dataclasses.field(default=None, compare=False)
    aliases: tuple = dataclasses.field(default=(), compare=False)
    _signatures: frozenset = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        own = {Scalar(self.runtime_class)}
        object.__setattr__(
            self, '_signatures', frozenset(own | {signature_of(a) for a in self.aliases}),
        )

    @property
    def signatures(self) -> frozenset[Signature]:
        """All signatures this type matches."""
        return self._signatures

    def matches(self, signature: Signature) -> bool:
        try:
            return signature in self._signatures
        except TypeError:
            # unhashable input
            return False


@dataclasses.dataclass(frozen=True, slots=True)
class OptionalType(SupportedType):
    """Nullable variant of a :class:`BaseType`.

    Nullability is not visible to either engine, so the storage tag, schema
    type and runtime class are those of the wrapped type.
    """
    content_type: BaseType

    @property
    def name(self) -> str:
        return f"Option[{self.content_type.name}]"

    @property
    def storage_tag(self) -> StorageTag:
        return self.content_type.storage_tag

    @property
    def schema_type(self) -> SchemaType:
        return self.content_type.schema_type

    @property
    def runtime_class(self) -> type:
        return self.content_type.runtime_class

    @property
    def default_value(self) -> Any:
        return self.content_type.default_value

    def matches(self, signature: Signature) -> bool:
        if not isinstance(signature, Container) or not signature.is_single:
            return False
        return self.content_type.matches(signature.args[0])
