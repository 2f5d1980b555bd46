"""Utility for iterating over the top-level declarations of a project."""

from collections.abc import Iterator

from render_types.declaration import Declaration
from render_types.fully_qualified_name import declaration_full_name
from render_types.reflection_kind import is_namespace_kind


def iter_documented_declarations(
    root: Declaration,
) -> Iterator[tuple[str, Declaration]]:
    """Yield (full name, declaration) for every member of every namespace.

    Nested namespaces are descended into; interfaces and functions are not.
    """
    for child in root.children:
        if is_namespace_kind(child.kind):
            yield from iter_documented_declarations(child)
        else:
            yield declaration_full_name(child), child
