"""Structural runtime type signatures.

A signature is either a bare runtime class (:class:`Scalar`) or a
parameterized application of some generic origin to argument signatures
(:class:`Container`).  Supported types match signatures by plain
structural comparison.

Signatures are usually derived from a static annotation::

    signature_of(float)              # Scalar(float)
    signature_of(Optional[float])    # Container(Optional, (Scalar(float),))
    signature_of(int | None)         # same shape as Optional[int]
"""

from __future__ import annotations

import dataclasses
import types
from typing import Annotated, Any, Optional, Union, get_args, get_origin

_NONE_TYPE = type(None)


@dataclasses.dataclass(frozen=True, slots=True)
class Scalar:
    """A bare, non-parameterized runtime class."""
    cls: type

    def __str__(self) -> str:
        return self.cls.__name__


@dataclasses.dataclass(frozen=True, slots=True)
class Container:
    """A generic origin applied to argument signatures.

    Parameters
    ----------
    origin : Any
        The generic being applied (``typing.Optional``, ``list``, ...).
    args : tuple[Signature, ...]
        The argument signatures, in declaration order.
    """
    origin: Any
    args: tuple[Signature, ...]

    @classmethod
    def optional(cls, inner: Signature) -> Container:
        """Build the canonical "optional of *inner*" signature."""
        return cls(Optional, (inner,))

    @property
    def is_single(self) -> bool:
        """True when exactly one type argument is applied."""
        return len(self.args) == 1

    def __str__(self) -> str:
        name = (getattr(self.origin, '__name__', None)
                or getattr(self.origin, '_name', None)
                or repr(self.origin))
        return f"{name}[{', '.join(str(a) for a in self.args)}]"


Signature = Union[Scalar, Container]


def is_signature(value: Any) -> bool:
    """Check whether *value* is already a :data:`Signature`."""
    return isinstance(value, (Scalar, Container))


def signature_of(annotation: Any) -> Signature:
    """Derive a structural signature from a Python type annotation.

    Supports:
    - Plain classes: ``int``, ``numpy.float32``, ``datetime.datetime``.
    - ``Annotated[X, ...]``: the metadata is dropped.
    - ``Optional[X]`` / ``Union[X, None]`` / ``X | None``.
    - Any other generic alias, e.g. ``list[int]``.

    Raises
    ------
    TypeError
        If the annotation is neither a class nor a generic alias.
    """
    if is_signature(annotation):
        return annotation

    origin = get_origin(annotation)
    if origin is Annotated:
        return signature_of(get_args(annotation)[0])

    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        present = [a for a in args if a is not _NONE_TYPE]
        if len(present) == 1 and len(present) < len(args):
            return Container.optional(signature_of(present[0]))
        return Container(Union, tuple(signature_of(a) for a in args))

    if origin is not None:
        return Container(origin, tuple(signature_of(a) for a in get_args(annotation)))

    if isinstance(annotation, type):
        return Scalar(annotation)

    raise TypeError(f"Cannot derive a type signature from: {annotation!r}")
