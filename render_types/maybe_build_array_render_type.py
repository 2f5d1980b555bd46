"""Detection of object types that are really fixed-length arrays."""

from collections import Counter

from render_types.deep_strict_equal import deep_strict_equal
from render_types.render_type import RenderType


def maybe_build_array_render_type(cand: RenderType) -> RenderType | None:
    """Convert ``{0: T, 1: T, ...}`` object types into a fixed-length array.

    Returns None when the candidate is not an inline object, has no
    properties, has property names other than exactly ``"0".."N-1"``, or has
    elements of differing shape.
    """
    if cand.type != "object" or not cand.properties:
        return None

    properties = cand.properties
    length = len(properties)

    # Pass 1: names must be exactly {"0", ..., "N-1"}, each once.
    names = Counter(p.name for p in properties)
    if names != Counter(str(i) for i in range(length)):
        return None

    # Pass 2: every element must match the first, ignoring names.
    element_type = properties[0].with_changes(name=None)
    for p in properties[1:]:
        if not deep_strict_equal(element_type, p.with_changes(name=None)):
            return None

    return RenderType(
        type="array",
        element_type=element_type,
        min_length=length,
        max_length=length,
    )
