"""Merging of intersections of two array types."""

from render_types.deep_strict_equal import deep_strict_equal
from render_types.render_type import RenderType


def merge_intersection_arrays(a: RenderType, b: RenderType) -> RenderType | None:
    """Intersect two array types over the same element type.

    The result is at least as long as the longer minimum and at most as long
    as the shorter maximum. Zero bounds are omitted. Returns None when either
    side is not an array or the element types differ.
    """
    if a.type != "array" or b.type != "array":
        return None
    if not deep_strict_equal(a.element_type, b.element_type):
        return None

    min_length = max(a.min_length or 0, b.min_length or 0)

    # An absent maximum is unbounded and does not constrain the other side.
    maximums = [m for m in (a.max_length, b.max_length) if m is not None]
    max_length = min(maximums) if maximums else 0

    return RenderType(
        type="array",
        element_type=a.element_type,
        min_length=min_length or None,
        max_length=max_length or None,
    )
