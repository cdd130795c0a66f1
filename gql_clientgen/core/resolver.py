"""Resolution of NON_NULL/LIST wrapper chains.

Every function here recurses until the chain reaches a named type; no
bound on the wrapping depth is assumed.
"""

from dataclasses import dataclass

from .schema import TypeKind, TypeRef


@dataclass(frozen=True)
class Unwrapped:
    """The base of a type reference plus what its wrappers said about it."""
    name: str
    kind: TypeKind
    optional: bool  # False only when the outermost wrapper is NON_NULL
    is_list: bool  # True if a LIST wrapper appears anywhere in the chain


def type_signature(ref: TypeRef) -> str:
    """Return the GraphQL signature of a reference, e.g. ``[String!]!``."""
    if ref.kind is TypeKind.NON_NULL:
        return f"{type_signature(ref.of_type)}!"
    if ref.kind is TypeKind.LIST:
        return f"[{type_signature(ref.of_type)}]"
    return ref.name


def base_type_name(ref: TypeRef) -> str:
    """Return the named type at the end of the wrapper chain."""
    if ref.kind.is_wrapper:
        return base_type_name(ref.of_type)
    return ref.name


def base_kind(ref: TypeRef) -> TypeKind:
    """Return the kind of the named type at the end of the wrapper chain."""
    if ref.kind.is_wrapper:
        return base_kind(ref.of_type)
    return ref.kind


def unwrap(ref: TypeRef) -> Unwrapped:
    """Strip all wrappers, keeping nullability of the outermost wrapper and list-ness."""
    return Unwrapped(
        name=base_type_name(ref),
        kind=base_kind(ref),
        optional=ref.kind is not TypeKind.NON_NULL,
        is_list=_contains_list(ref),
    )


def _contains_list(ref: TypeRef) -> bool:
    if ref.kind is TypeKind.LIST:
        return True
    if ref.kind is TypeKind.NON_NULL:
        return _contains_list(ref.of_type)
    return False
