"""Data models for the declarations of a TypeDoc project."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from render_types.reflection_kind import ReflectionKind

if TYPE_CHECKING:
    from render_types.source_type import SourceType


@dataclass
class Comment:
    """Documentation attached to a declaration or signature."""

    short_text: str = ""
    text: str = ""
    returns: str = ""


@dataclass(eq=False)
class Parameter:
    """A single parameter of a call signature."""

    name: str
    type: SourceType | None = None
    comment: Comment | None = None
    is_optional: bool = False


@dataclass(eq=False)
class Signature:
    """One overload of a function or method."""

    name: str
    parameters: list[Parameter] = field(default_factory=list)
    type: SourceType | None = None  # return type
    comment: Comment | None = None


@dataclass(eq=False)
class Declaration:
    """A named entity of the analyzed source (interface, alias, function, ...).

    Declarations form a graph and compare by identity.
    """

    id: int | None
    name: str
    kind: ReflectionKind | None = None
    type: SourceType | None = None
    signatures: list[Signature] = field(default_factory=list)
    children: list[Declaration] = field(default_factory=list)
    type_parameters: list[str] = field(default_factory=list)
    comment: Comment | None = None
    is_optional: bool = False
    parent: Declaration | None = field(default=None, repr=False)
