"""Logic for computing fully-qualified names of declarations and references."""

from render_types.declaration import Declaration
from render_types.reflection_kind import ReflectionKind
from render_types.source_type import ReferenceType


def declaration_full_name(declaration: Declaration) -> str:
    """Join the names of a declaration and its enclosing namespaces.

    The project root and file-level modules do not contribute a segment.
    """
    parts = []
    curr: Declaration | None = declaration
    while curr is not None:
        if curr.kind == ReflectionKind.GLOBAL:
            break
        if curr.kind != ReflectionKind.EXTERNAL_MODULE:
            parts.append(curr.name)
        curr = curr.parent
    return ".".join(reversed(parts))


def resolve_fully_qualified_name(reference: ReferenceType) -> str:
    """Return the fully-qualified name a reference type points at."""
    if reference.target is not None:
        return declaration_full_name(reference.target)
    return reference.qualified_name or reference.name
