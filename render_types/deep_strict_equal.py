"""Structural equality over render types."""

from typing import Any

from render_types.render_type import RenderType


def deep_strict_equal(a: Any, b: Any) -> bool:
    """Compare two values by structure.

    Sequences compare in order, mappings compare by key set and values.
    RenderTypes compare through their serialized form, so an absent field
    never equals a present one.
    """
    if isinstance(a, RenderType):
        a = a.to_dict()
    if isinstance(b, RenderType):
        b = b.to_dict()

    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(deep_strict_equal(a[k], b[k]) for k in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_strict_equal(x, y) for x, y in zip(a, b, strict=True))

    # bool is an int subclass; True must not equal 1 here.
    if type(a) is not type(b):
        return False
    return a == b
