"""Tests for the render type model, equality and the array heuristics."""

import pytest

from render_types.deep_strict_equal import deep_strict_equal
from render_types.maybe_build_array_render_type import maybe_build_array_render_type
from render_types.merge_intersection_arrays import merge_intersection_arrays
from render_types.render_type import RenderType, unknown_type

NUMBER = RenderType(type="primitive", primitive_type="number")
STRING = RenderType(type="primitive", primitive_type="string")


def _obj(*props: tuple[str, RenderType]) -> RenderType:
    return RenderType(
        type="object",
        properties=tuple(rt.with_changes(name=name) for name, rt in props),
    )


def test_to_dict_omits_absent_fields() -> None:
    """Verify serialization keys and omission of absent fields."""
    rt = RenderType(
        type="array",
        element_type=NUMBER,
        min_length=2,
        max_length=2,
        name="pair",
    )
    assert rt.to_dict() == {
        "type": "array",
        "name": "pair",
        "elementType": {"type": "primitive", "primitiveType": "number"},
        "minLength": 2,
        "maxLength": 2,
    }
    assert RenderType(type="object", properties=()).to_dict() == {
        "type": "object",
        "properties": [],
    }
    assert unknown_type().to_dict() == {"type": "?"}


def test_optional_only_serialized_when_true() -> None:
    """Verify that optional is omitted unless set."""
    assert "optional" not in NUMBER.to_dict()
    assert NUMBER.with_changes(optional=True).to_dict()["optional"] is True


def test_tag_restricts_fields() -> None:
    """Verify that fields outside the tag's set are rejected."""
    with pytest.raises(ValueError, match="element_type"):
        RenderType(type="primitive", element_type=NUMBER)
    with pytest.raises(ValueError, match="unknown render type tag"):
        RenderType(type="tuple")


def test_with_changes_does_not_mutate() -> None:
    """Verify that derived render types leave the original untouched."""
    named = NUMBER.with_changes(name="x")
    assert named.name == "x"
    assert NUMBER.name is None


def test_deep_strict_equal() -> None:
    """Verify structural equality over render types and plain values."""
    assert deep_strict_equal(NUMBER, RenderType(type="primitive", primitive_type="number"))
    assert not deep_strict_equal(NUMBER, STRING)
    assert not deep_strict_equal(NUMBER, NUMBER.with_changes(comment="c"))
    assert deep_strict_equal(NUMBER, NUMBER.to_dict())
    assert deep_strict_equal([1, {"a": 2}], (1, {"a": 2}))
    assert not deep_strict_equal([1, 2], [2, 1])
    assert not deep_strict_equal({"a": 1}, {"a": 1, "b": None})
    assert not deep_strict_equal(True, 1)
    assert not deep_strict_equal([1], [1, 1])


def test_array_detection() -> None:
    """Verify detection of numerically keyed objects."""
    out = maybe_build_array_render_type(_obj(("0", STRING), ("1", STRING)))
    assert out == RenderType(type="array", element_type=STRING, min_length=2, max_length=2)
    assert out is not None
    assert out.element_type is not None
    assert out.element_type.name is None


def test_array_detection_rejections() -> None:
    """Verify the cases that stay objects."""
    assert maybe_build_array_render_type(_obj()) is None
    assert maybe_build_array_render_type(_obj(("1", STRING), ("2", STRING))) is None
    assert maybe_build_array_render_type(_obj(("0", STRING), ("2", STRING))) is None
    assert maybe_build_array_render_type(_obj(("0", STRING), ("x", STRING))) is None
    assert maybe_build_array_render_type(_obj(("0", STRING), ("0", STRING))) is None
    assert maybe_build_array_render_type(_obj(("0", STRING), ("1", NUMBER))) is None

    commented = STRING.with_changes(comment="second")
    assert maybe_build_array_render_type(_obj(("0", STRING), ("1", commented))) is None

    iface = RenderType(type="type", properties=(STRING.with_changes(name="0"),))
    assert maybe_build_array_render_type(iface) is None
    assert maybe_build_array_render_type(NUMBER) is None


def test_array_detection_does_not_mutate_candidate() -> None:
    """Verify that a rejected candidate keeps its properties."""
    cand = _obj(("1", STRING), ("0", STRING), ("2", NUMBER))
    assert maybe_build_array_render_type(cand) is None
    assert [p.name for p in cand.properties or ()] == ["1", "0", "2"]


def test_merge_intersection_bounds() -> None:
    """Verify that a lower and an upper bound combine."""
    at_least_two = RenderType(type="array", element_type=NUMBER, min_length=2)
    at_most_five = RenderType(type="array", element_type=NUMBER, max_length=5)
    assert merge_intersection_arrays(at_least_two, at_most_five) == RenderType(
        type="array", element_type=NUMBER, min_length=2, max_length=5
    )


def test_merge_intersection_takes_tightest_bounds() -> None:
    """Verify max of minimums and min of maximums."""
    a = RenderType(type="array", element_type=NUMBER, min_length=1, max_length=4)
    b = RenderType(type="array", element_type=NUMBER, min_length=3, max_length=6)
    out = merge_intersection_arrays(a, b)
    assert out is not None
    assert (out.min_length, out.max_length) == (3, 4)


def test_merge_intersection_unbounded() -> None:
    """Verify that unbounded operands give an unbounded result."""
    a = RenderType(type="array", element_type=NUMBER)
    out = merge_intersection_arrays(a, a)
    assert out == RenderType(type="array", element_type=NUMBER)
    assert "minLength" not in out.to_dict()
    assert "maxLength" not in out.to_dict()


def test_merge_intersection_rejections() -> None:
    """Verify that non-arrays and differing element types are refused."""
    arr = RenderType(type="array", element_type=NUMBER)
    assert merge_intersection_arrays(arr, NUMBER) is None
    assert merge_intersection_arrays(arr, RenderType(type="array", element_type=STRING)) is None
