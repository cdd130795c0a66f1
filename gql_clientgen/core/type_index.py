"""Lookup of type definitions by name."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .errors import UnknownTypeError
from .resolver import base_type_name
from .schema import Field, SchemaDefinition, TypeDefinition, TypeRef


class TypeIndex:
    """Read-only mapping from type name to its definition.

    Built once per schema. Type references only carry names, so every
    recursive expansion dereferences through this index.
    """

    def __init__(self, types: Iterable[TypeDefinition]):
        self._types = MappingProxyType({t.name: t for t in types})

    @classmethod
    def from_schema(cls, schema: SchemaDefinition) -> "TypeIndex":
        return cls(schema.types)

    def __getitem__(self, name: str) -> TypeDefinition:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownTypeError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def get_type(self, name: str) -> TypeDefinition:
        """Return the definition of ``name`` or raise :class:`UnknownTypeError`."""
        return self[name]

    def resolve(self, ref: TypeRef) -> TypeDefinition:
        """Return the definition of the named type a reference wraps."""
        return self[base_type_name(ref)]

    def root_fields(self, schema: SchemaDefinition, operation_type: str) -> list[Field]:
        """Return the fields declared on the query or mutation root type."""
        root = {
            "query": schema.query_type,
            "mutation": schema.mutation_type,
        }[operation_type]
        if root is None:
            return []
        return list(self[root.name].fields)
