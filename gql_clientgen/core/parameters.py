"""Flattening of argument types into parameter descriptors.

Input objects are expanded member by member into dotted paths, so an
argument ``filter: FilterInput!`` documents as ``filter.status``,
``filter.limit`` and so on. Members reached through a list get a ``[]``
marker, e.g. ``items[].id``.
"""

import logging

from .errors import TypeResolutionError
from .ir import ParameterDescriptor
from .resolver import unwrap
from .scalars import ScalarRegistry, SemanticType
from .schema import InputValue, TypeKind, TypeRef
from .type_index import TypeIndex

logger = logging.getLogger(__name__)


class ParameterBuilder:
    """Builds :class:`ParameterDescriptor` lists for generated docs."""

    def __init__(self, index: TypeIndex, scalars: ScalarRegistry | None = None):
        self.index = index
        self.scalars = scalars or ScalarRegistry()

    def build_all(self, args: list[InputValue]) -> list[ParameterDescriptor]:
        """Describe every argument of a field, in declaration order."""
        descriptors = []
        for arg in args:
            descriptors.extend(self.build(arg.name, arg.type, arg.default_value))
        return descriptors

    def build(
        self,
        name: str,
        ref: TypeRef,
        default_value: str | None = None,
    ) -> list[ParameterDescriptor]:
        """Describe one argument, expanding input objects into their members.

        Raises:
            UnknownTypeError: If an input object member names an unknown type
            UnknownScalarError: If a scalar has no registered mapping
            TypeResolutionError: If an argument has an output-only type
        """
        return self._describe(name, ref, default_value, expanding=())

    def _describe(
        self,
        path: str,
        ref: TypeRef,
        default_value: str | None,
        expanding: tuple[str, ...],
    ) -> list[ParameterDescriptor]:
        base = unwrap(ref)

        if base.kind in (TypeKind.OBJECT, TypeKind.INPUT_OBJECT):
            members = self.index.get_type(base.name).input_fields
            if not members or base.name in expanding:
                if members:
                    logger.debug("Not expanding %s at %s: self-referencing input type", base.name, path)
                return [self._descriptor(path, SemanticType.OBJECT, base, default_value)]

            prefix = f"{path}[]" if base.is_list else path
            descriptors = []
            for member in members:
                descriptors.extend(self._describe(
                    f"{prefix}.{member.name}",
                    member.type,
                    member.default_value,
                    expanding + (base.name,),
                ))
            return descriptors

        if base.kind is TypeKind.ENUM:
            semantic = SemanticType.STRING
        elif base.kind is TypeKind.SCALAR:
            semantic = self.scalars.semantic_type(base.name)
        else:
            raise TypeResolutionError(
                f"Argument {path} has type {base.name} ({base.kind.value}), "
                f"which is not valid in an input position"
            )
        return [self._descriptor(path, semantic, base, default_value)]

    @staticmethod
    def _descriptor(path, semantic, base, default_value) -> ParameterDescriptor:
        return ParameterDescriptor(
            path=path,
            semantic_type=semantic,
            optional=base.optional,
            default_value=default_value,
            is_list=base.is_list,
        )
