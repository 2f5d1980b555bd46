"""Logic for loading TypeDoc JSON output into a declaration graph."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from render_types.declaration import Comment, Declaration, Parameter, Signature
from render_types.reflection_kind import ReflectionKind
from render_types.source_type import (
    ArrayType,
    IntersectionType,
    IntrinsicType,
    ReferenceType,
    ReflectionType,
    SourceType,
    StringLiteralType,
    TupleType,
    TypeParameterType,
    UnionType,
    UnknownType,
)

logger = logging.getLogger(__name__)


def load_typedoc_project(path: Path) -> Declaration:
    """Load and parse a TypeDoc ``--json`` output file."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    return parse_typedoc_project(raw)


def parse_typedoc_project(raw: dict[str, Any]) -> Declaration:
    """Build the declaration graph of a parsed TypeDoc JSON document."""
    return _ProjectParser().parse(raw)


class _ProjectParser:
    """Two passes: create every declaration, then fill types that may point at any of them."""

    def __init__(self) -> None:
        self.by_raw: dict[int, Declaration] = {}  # id() of the raw dict
        self.by_typedoc_id: dict[int, Declaration] = {}
        self.current_numbering = False

    def parse(self, raw: dict[str, Any]) -> Declaration:
        self.current_numbering = _uses_current_numbering(raw)
        root = self._create(raw, None)
        self._fill(raw)
        logger.debug("loaded %d declarations", len(self.by_raw))
        return root

    # -----------------------------
    # Pass 1
    # -----------------------------

    def _create(self, raw: dict[str, Any], parent: Declaration | None) -> Declaration:
        flags = raw.get("flags") or {}
        typedoc_id = raw.get("id")
        decl = Declaration(
            id=typedoc_id if isinstance(typedoc_id, int) else None,
            name=str(raw.get("name") or ""),
            kind=ReflectionKind.from_raw(
                raw.get("kind"),
                raw.get("kindString"),
                current_numbering=self.current_numbering,
            ),
            is_optional=bool(flags.get("isOptional")),
            parent=parent,
        )
        self.by_raw[id(raw)] = decl
        if decl.id is not None:
            self.by_typedoc_id[decl.id] = decl

        for child in raw.get("children") or []:
            if isinstance(child, dict):
                decl.children.append(self._create(child, decl))

        # Inline declarations hang off types anywhere below this declaration.
        for nested in _iter_reflection_declarations(_type_roots(raw)):
            self._create(nested, decl)
        return decl

    # -----------------------------
    # Pass 2
    # -----------------------------

    def _fill(self, raw: dict[str, Any]) -> None:
        decl = self.by_raw[id(raw)]
        decl.comment = _parse_comment(raw.get("comment"))
        decl.type = self._parse_type(raw.get("type"))
        decl.type_parameters = [
            str(tp.get("name"))
            for tp in (raw.get("typeParameter") or raw.get("typeParameters") or [])
            if isinstance(tp, dict)
        ]
        decl.signatures = [
            self._parse_signature(s)
            for s in raw.get("signatures") or []
            if isinstance(s, dict)
        ]
        for child in raw.get("children") or []:
            if isinstance(child, dict):
                self._fill(child)

    def _parse_signature(self, raw: dict[str, Any]) -> Signature:
        parameters = []
        for p in raw.get("parameters") or []:
            flags = p.get("flags") or {}
            parameters.append(
                Parameter(
                    name=str(p.get("name") or ""),
                    type=self._parse_type(p.get("type")),
                    comment=_parse_comment(p.get("comment")),
                    is_optional=bool(flags.get("isOptional")),
                )
            )
        return Signature(
            name=str(raw.get("name") or ""),
            parameters=parameters,
            type=self._parse_type(raw.get("type")),
            comment=_parse_comment(raw.get("comment")),
        )

    def _parse_type(self, raw: Any) -> SourceType | None:
        if not isinstance(raw, dict):
            return None
        category = str(raw.get("type") or "")

        if category == "intrinsic":
            return IntrinsicType(name=str(raw.get("name")))
        if category == "stringLiteral":
            return StringLiteralType(value=str(raw.get("value")))
        if category == "literal" and isinstance(raw.get("value"), str):
            # Newer TypeDoc releases fold string literals into "literal".
            return StringLiteralType(value=raw["value"])
        if category == "array":
            element = self._parse_type(raw.get("elementType"))
            if element is not None:
                return ArrayType(element_type=element)
        if category == "tuple":
            return TupleType(elements=self._parse_types(raw.get("elements")))
        if category == "union":
            return UnionType(types=self._parse_types(raw.get("types")))
        if category == "intersection":
            return IntersectionType(types=self._parse_types(raw.get("types")))
        if category == "typeParameter":
            return TypeParameterType(name=str(raw.get("name")))
        if category == "reference":
            return self._parse_reference(raw)
        if category == "reflection" and isinstance(raw.get("declaration"), dict):
            nested = raw["declaration"]
            self._fill(nested)
            return ReflectionType(declaration=self.by_raw[id(nested)])

        return UnknownType(category=category or "unknown", raw=json.dumps(raw, sort_keys=True))

    def _parse_types(self, raw: Any) -> tuple[SourceType, ...]:
        parsed = (self._parse_type(t) for t in raw or [])
        return tuple(t for t in parsed if t is not None)

    def _parse_reference(self, raw: dict[str, Any]) -> ReferenceType:
        target_id = raw.get("id", raw.get("target"))
        target = self.by_typedoc_id.get(target_id) if isinstance(target_id, int) else None
        return ReferenceType(
            name=str(raw.get("name")),
            type_arguments=self._parse_types(raw.get("typeArguments")),
            qualified_name=raw.get("qualifiedName"),
            target=target,
        )


def _uses_current_numbering(raw: dict[str, Any]) -> bool:
    """Tell TypeDoc 0.23+ output (project kind 1) from older releases (kind 0)."""
    if "schemaVersion" in raw:
        return True
    return raw.get("kind") == 1


def _type_roots(raw: dict[str, Any]) -> Iterator[Any]:
    """Yield every raw type directly owned by a declaration or its signatures."""
    yield raw.get("type")
    for s in raw.get("signatures") or []:
        if not isinstance(s, dict):
            continue
        yield s.get("type")
        for p in s.get("parameters") or []:
            if isinstance(p, dict):
                yield p.get("type")


def _iter_reflection_declarations(values: Iterator[Any]) -> Iterator[dict[str, Any]]:
    """Find reflection declarations in raw types without entering them."""
    stack = list(values)
    while stack:
        v = stack.pop()
        if isinstance(v, list):
            stack.extend(reversed(v))
        elif isinstance(v, dict):
            if v.get("type") == "reflection" and isinstance(v.get("declaration"), dict):
                yield v["declaration"]
            else:
                stack.extend(reversed(list(v.values())))


def _parse_comment(raw: Any) -> Comment | None:
    """Parse both the legacy (shortText/text) and block (summary) comment formats."""
    if not isinstance(raw, dict):
        return None

    short_text = str(raw.get("shortText") or "")
    if not short_text and raw.get("summary"):
        short_text = _join_parts(raw["summary"])

    returns = str(raw.get("returns") or "")
    if not returns:
        for tag in raw.get("blockTags") or []:
            if isinstance(tag, dict) and tag.get("tag") == "@returns":
                returns = _join_parts(tag.get("content") or [])
                break

    return Comment(
        short_text=short_text,
        text=str(raw.get("text") or ""),
        returns=returns,
    )


def _join_parts(parts: list[dict[str, Any]]) -> str:
    return "".join(str(p.get("text") or "") for p in parts if isinstance(p, dict))
