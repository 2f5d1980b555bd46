"""TypeDoc reflection kinds."""

from enum import IntEnum


class ReflectionKind(IntEnum):
    """Numeric reflection kinds as written by TypeDoc's JSON output."""

    GLOBAL = 0
    EXTERNAL_MODULE = 1
    MODULE = 2
    ENUM = 4
    ENUM_MEMBER = 16
    VARIABLE = 32
    FUNCTION = 64
    CLASS = 128
    INTERFACE = 256
    CONSTRUCTOR = 512
    PROPERTY = 1024
    METHOD = 2048
    CALL_SIGNATURE = 4096
    INDEX_SIGNATURE = 8192
    CONSTRUCTOR_SIGNATURE = 16384
    PARAMETER = 32768
    TYPE_LITERAL = 65536
    TYPE_PARAMETER = 131072
    ACCESSOR = 262144
    GET_SIGNATURE = 524288
    SET_SIGNATURE = 1048576
    OBJECT_LITERAL = 2097152
    TYPE_ALIAS = 4194304
    EVENT = 8388608
    REFERENCE = 16777216

    @classmethod
    def from_raw(
        cls,
        value: object,
        kind_string: str | None = None,
        *,
        current_numbering: bool = False,
    ) -> "ReflectionKind | None":
        """Map a raw ``kind`` to a member, or None when unknown.

        ``kindString`` is preferred when present: TypeDoc renumbered its kinds
        across releases but kept their names. Releases that no longer write
        ``kindString`` use the numbers in ``CURRENT_KINDS``.
        """
        if kind_string:
            found = KIND_STRINGS.get(kind_string.strip().lower())
            if found is not None:
                return found
        try:
            number = int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return None
        if current_numbering:
            return CURRENT_KINDS.get(number)
        try:
            return cls(number)
        except ValueError:
            return None


KIND_STRINGS = {
    "project": ReflectionKind.GLOBAL,
    "global": ReflectionKind.GLOBAL,
    "external module": ReflectionKind.EXTERNAL_MODULE,
    "module": ReflectionKind.MODULE,
    "namespace": ReflectionKind.MODULE,
    "enumeration": ReflectionKind.ENUM,
    "enumeration member": ReflectionKind.ENUM_MEMBER,
    "variable": ReflectionKind.VARIABLE,
    "function": ReflectionKind.FUNCTION,
    "class": ReflectionKind.CLASS,
    "interface": ReflectionKind.INTERFACE,
    "constructor": ReflectionKind.CONSTRUCTOR,
    "property": ReflectionKind.PROPERTY,
    "method": ReflectionKind.METHOD,
    "call signature": ReflectionKind.CALL_SIGNATURE,
    "index signature": ReflectionKind.INDEX_SIGNATURE,
    "constructor signature": ReflectionKind.CONSTRUCTOR_SIGNATURE,
    "parameter": ReflectionKind.PARAMETER,
    "type literal": ReflectionKind.TYPE_LITERAL,
    "type parameter": ReflectionKind.TYPE_PARAMETER,
    "accessor": ReflectionKind.ACCESSOR,
    "get signature": ReflectionKind.GET_SIGNATURE,
    "set signature": ReflectionKind.SET_SIGNATURE,
    "object literal": ReflectionKind.OBJECT_LITERAL,
    "type alias": ReflectionKind.TYPE_ALIAS,
    "event": ReflectionKind.EVENT,
    "reference": ReflectionKind.REFERENCE,
}


# TypeDoc 0.23 and later: projects are 1, namespaces 4, file modules 2.
CURRENT_KINDS = {
    1: ReflectionKind.GLOBAL,
    2: ReflectionKind.EXTERNAL_MODULE,
    4: ReflectionKind.MODULE,
    8: ReflectionKind.ENUM,
    16: ReflectionKind.ENUM_MEMBER,
    32: ReflectionKind.VARIABLE,
    64: ReflectionKind.FUNCTION,
    128: ReflectionKind.CLASS,
    256: ReflectionKind.INTERFACE,
    512: ReflectionKind.CONSTRUCTOR,
    1024: ReflectionKind.PROPERTY,
    2048: ReflectionKind.METHOD,
    4096: ReflectionKind.CALL_SIGNATURE,
    8192: ReflectionKind.INDEX_SIGNATURE,
    16384: ReflectionKind.CONSTRUCTOR_SIGNATURE,
    32768: ReflectionKind.PARAMETER,
    65536: ReflectionKind.TYPE_LITERAL,
    131072: ReflectionKind.TYPE_PARAMETER,
    262144: ReflectionKind.ACCESSOR,
    524288: ReflectionKind.GET_SIGNATURE,
    1048576: ReflectionKind.SET_SIGNATURE,
    2097152: ReflectionKind.TYPE_ALIAS,
    4194304: ReflectionKind.REFERENCE,
}


NAMESPACE_KINDS = frozenset(
    {ReflectionKind.GLOBAL, ReflectionKind.EXTERNAL_MODULE, ReflectionKind.MODULE}
)


def is_namespace_kind(kind: ReflectionKind | None) -> bool:
    """Check if the kind groups other declarations (project, file or namespace)."""
    return kind in NAMESPACE_KINDS
