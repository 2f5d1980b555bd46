"""Type nodes of the resolved declaration graph produced by TypeDoc.

Type nodes compare by value. A reflection type holds its declaration, which
compares by identity, so two reflection types are equal only when they wrap the
same declaration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from render_types.declaration import Declaration


@dataclass(frozen=True)
class ArrayType:
    """``T[]``."""

    type: ClassVar[str] = "array"
    element_type: SourceType


@dataclass(frozen=True)
class ReflectionType:
    """An inline declaration used as a type (object literal, function type)."""

    type: ClassVar[str] = "reflection"
    declaration: Declaration


@dataclass(frozen=True)
class TupleType:
    """``[A, B, ...]``."""

    type: ClassVar[str] = "tuple"
    elements: tuple[SourceType, ...] = ()


@dataclass(frozen=True)
class IntersectionType:
    """``A & B``."""

    type: ClassVar[str] = "intersection"
    types: tuple[SourceType, ...] = ()


@dataclass(frozen=True)
class UnionType:
    """``A | B``."""

    type: ClassVar[str] = "union"
    types: tuple[SourceType, ...] = ()


@dataclass(frozen=True)
class ReferenceType:
    """A named, possibly generic, type usage.

    ``target`` is the referenced declaration when TypeDoc resolved it.
    """

    type: ClassVar[str] = "reference"
    name: str
    type_arguments: tuple[SourceType, ...] = ()
    qualified_name: str | None = None
    target: Declaration | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class IntrinsicType:
    """A builtin primitive such as ``string`` or ``void``."""

    type: ClassVar[str] = "intrinsic"
    name: str


@dataclass(frozen=True)
class StringLiteralType:
    """A string literal type such as ``'foo'``."""

    type: ClassVar[str] = "stringLiteral"
    value: str


@dataclass(frozen=True)
class TypeParameterType:
    """A generic parameter used inside its generic declaration."""

    type: ClassVar[str] = "typeParameter"
    name: str


@dataclass(frozen=True)
class UnknownType:
    """Any TypeDoc type category this package does not model."""

    category: str
    raw: str = ""

    @property
    def type(self) -> str:
        """Return the original TypeDoc category."""
        return self.category


SourceType = Union[
    ArrayType,
    ReflectionType,
    TupleType,
    IntersectionType,
    UnionType,
    ReferenceType,
    IntrinsicType,
    StringLiteralType,
    TypeParameterType,
    UnknownType,
]
