"""Logic for converting TypeDoc declarations and types into render types."""

import logging
from collections.abc import Callable

from render_types.contract_violation import ContractViolationError
from render_types.declaration import Declaration
from render_types.extract_comment import extract_comment
from render_types.fully_qualified_name import resolve_fully_qualified_name
from render_types.link_resolver import LinkResolver
from render_types.maybe_build_array_render_type import maybe_build_array_render_type
from render_types.merge_intersection_arrays import merge_intersection_arrays
from render_types.reflection_kind import ReflectionKind
from render_types.render_type import RenderType, unknown_type
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
from render_types.to_json_text import to_json_text

logger = logging.getLogger(__name__)

# Generated .d.ts files give this type a listener whose return type is noise.
EVENT_TYPE_NAME = "chrome.events.Event"
LISTENER_NAME = "listener"

OBJECT_LIKE_KINDS = {
    ReflectionKind.TYPE_LITERAL: "object",
    ReflectionKind.INTERFACE: "type",
}

Handler = Callable[[SourceType, SourceType | None, Declaration], RenderType | None]


class RenderTypeConverter:
    """Converts declarations into render types.

    The converter only reads from its link resolver, so one instance can
    convert any number of declarations.
    """

    def __init__(self, link_resolver: LinkResolver | None = None) -> None:
        """Initialize the converter with the resolver used for reference links."""
        self.link_resolver = link_resolver or LinkResolver()
        self._handlers: dict[type, Handler] = {
            ArrayType: self._build_array,
            ReflectionType: self._build_reflection,
            TupleType: self._build_tuple,
            IntersectionType: self._build_intersection,
            ReferenceType: self._build_reference,
            UnionType: self._build_union,
            IntrinsicType: self._build_intrinsic,
            StringLiteralType: self._build_string_literal,
            TypeParameterType: self._build_type_parameter,
        }

    def declaration_to_type(self, declaration: Declaration) -> RenderType:
        """Convert a declaration, including its comment and optional flag."""
        source = declaration.type
        if source is None:
            source = ReflectionType(declaration)
        out = self.build_render_type(source, None, declaration)
        return self._with_common(out, declaration)

    def build_render_type(
        self,
        source: SourceType,
        parent: SourceType | None,
        owner: Declaration,
    ) -> RenderType:
        """Convert a single type node. Never raises for unsupported shapes."""
        handler = self._handlers.get(type(source))
        out = handler(source, parent, owner) if handler else None
        if out is not None:
            return out

        if isinstance(source, UnknownType) and source.raw:
            logger.warning(
                "got unknown type %r in %s: %s", source.type, owner.name, source.raw
            )
        else:
            logger.warning("got unknown type %r in %s", source.type, owner.name)
        return unknown_type()

    def _with_common(self, render_type: RenderType, declaration: Declaration) -> RenderType:
        """Attach the declaration's comment and optional flag."""
        changes: dict[str, object] = {}
        comment = extract_comment(declaration.comment, declaration, self.link_resolver)
        if comment:
            changes["comment"] = comment
        if declaration.is_optional:
            changes["optional"] = True
        return render_type.with_changes(**changes) if changes else render_type

    # -----------------------------
    # Declarations
    # -----------------------------

    def _build_declaration_render_type(
        self, declaration: Declaration
    ) -> RenderType | None:
        """Map a declaration to a render type without its own comment/optional.

        Returns None for declaration kinds that have no render type.
        """
        if declaration.type is not None:
            return self.build_render_type(declaration.type, None, declaration)
        if declaration.signatures:
            return self._build_function_render_type(declaration)

        # "type" for a top-level interface, "object" for an inline literal.
        tag = OBJECT_LIKE_KINDS.get(declaration.kind)  # type: ignore[arg-type]
        if tag is None:
            return None

        properties = tuple(
            self.declaration_to_type(child).with_changes(name=child.name)
            for child in declaration.children
        )

        # Templated types <T>. Constraints are not represented.
        out = RenderType(
            type=tag,
            properties=properties,
            templates=tuple(declaration.type_parameters) or None,
        )
        out = self._with_common(out, declaration)

        return maybe_build_array_render_type(out) or out

    def _build_function_render_type(self, declaration: Declaration) -> RenderType:
        """Merge all signatures of a function into one function render type.

        Overloads stand in for optional trailing parameters. Parameters of
        the longest signature that are missing from the shortest are marked
        optional. All signatures are assumed to share one return type.
        """
        signatures = declaration.signatures
        best = signatures[0]
        least_parameters = best.parameters
        best_parameters = least_parameters

        for signature in signatures:
            if len(signature.parameters) > len(best_parameters):
                best_parameters = signature.parameters
                best = signature
            elif len(signature.parameters) < len(least_parameters):
                least_parameters = signature.parameters

        required_names = {p.name for p in least_parameters}

        parameters = []
        for param in best_parameters:
            if param.type is None:
                msg = f"signature parameter {param.name!r} of {declaration.name!r} has no type"
                raise ContractViolationError(msg, declaration=declaration.name)

            rt = self.build_render_type(param.type, None, declaration)
            optional = (
                rt.optional or param.is_optional or param.name not in required_names
            )
            # TODO: carry over TypeDoc's defaultValue once the loader reads it.
            comment = extract_comment(param.comment, param, self.link_resolver)
            parameters.append(
                rt.with_changes(
                    name=param.name,
                    optional=optional,
                    comment=comment or rt.comment,
                )
            )

        return_type = None
        if best.type is not None:
            rt = self.build_render_type(best.type, None, declaration)
            # Methods return void, but it is not documented.
            if not (rt.type == "primitive" and rt.primitive_type == "void"):
                returns = best.comment.returns if best.comment else None
                return_comment = extract_comment(returns, declaration, self.link_resolver)
                return_type = rt.with_changes(
                    name="returns",
                    comment=return_comment or rt.comment,
                )

        return RenderType(
            type="function",
            parameters=tuple(parameters),
            return_type=return_type,
            comment=extract_comment(best.comment, declaration, self.link_resolver),
        )

    # -----------------------------
    # Types
    # -----------------------------

    def _build_array(
        self, source: ArrayType, parent: SourceType | None, owner: Declaration
    ) -> RenderType:
        return RenderType(
            type="array",
            element_type=self.build_render_type(source.element_type, source, owner),
        )

    def _build_reflection(
        self, source: ReflectionType, parent: SourceType | None, owner: Declaration
    ) -> RenderType | None:
        return self._build_declaration_render_type(source.declaration)

    def _build_tuple(
        self, source: TupleType, parent: SourceType | None, owner: Declaration
    ) -> RenderType | None:
        # Only tuples of one repeated type, i.e. arrays of a fixed length.
        if not source.elements:
            return None
        first = source.elements[0]
        if any(element != first for element in source.elements[1:]):
            return None

        length = len(source.elements)
        return RenderType(
            type="array",
            element_type=self.build_render_type(first, source, owner),
            min_length=length,
            max_length=length,
        )

    def _build_intersection(
        self, source: IntersectionType, parent: SourceType | None, owner: Declaration
    ) -> RenderType | None:
        if len(source.types) != 2:
            return None
        a, b = source.types
        return merge_intersection_arrays(
            self.build_render_type(a, None, owner),
            self.build_render_type(b, None, owner),
        )

    def _build_reference(
        self, source: ReferenceType, parent: SourceType | None, owner: Declaration
    ) -> RenderType:
        name = resolve_fully_qualified_name(source)
        reference_type = name
        reference_link = None

        generated = self.link_resolver.generate_html_link(owner, source.target)
        if generated:
            reference_type = generated.name
            reference_link = generated.link

        templates = tuple(
            self.build_render_type(t, None, owner) for t in source.type_arguments
        )

        if name == EVENT_TYPE_NAME:
            if len(templates) != 1:
                msg = f"got {EVENT_TYPE_NAME} without a single listener in {owner.name!r}"
                raise ContractViolationError(msg, declaration=owner.name)
            templates = (templates[0].with_changes(name=LISTENER_NAME, return_type=None),)

        return RenderType(
            type="reference",
            reference_type=reference_type,
            reference_link=reference_link,
            reference_templates=templates or None,
        )

    def _build_union(
        self, source: UnionType, parent: SourceType | None, owner: Declaration
    ) -> RenderType:
        options = tuple(self.build_render_type(t, source, owner) for t in source.types)

        # Only unions of primitive values (e.g. a choice of strings) are enums.
        is_enum = all(o.type == "primitive" for o in options)
        return RenderType(type="union", options=options, is_enum=is_enum)

    def _build_intrinsic(
        self, source: IntrinsicType, parent: SourceType | None, owner: Declaration
    ) -> RenderType:
        return RenderType(type="primitive", primitive_type=source.name)

    def _build_string_literal(
        self, source: StringLiteralType, parent: SourceType | None, owner: Declaration
    ) -> RenderType:
        # A lone literal is presented as a single-option enum.
        if parent is None or parent.type != UnionType.type:
            return self.build_render_type(UnionType((source,)), parent, owner)

        return RenderType(
            type="primitive",
            literal_value=to_json_text(source.value),
        )

    def _build_type_parameter(
        self, source: TypeParameterType, parent: SourceType | None, owner: Declaration
    ) -> RenderType:
        return RenderType(type="reference", reference_type=source.name)


def declaration_to_type(
    declaration: Declaration,
    link_resolver: LinkResolver | None = None,
) -> RenderType:
    """Convert one top-level declaration into a render type."""
    return RenderTypeConverter(link_resolver).declaration_to_type(declaration)
