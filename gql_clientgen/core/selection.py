"""Selection-set synthesis for object return types."""

import logging

from .errors import TypeResolutionError
from .ir import Selection
from .resolver import base_kind, base_type_name
from .schema import TypeKind, TypeRef
from .type_index import TypeIndex

logger = logging.getLogger(__name__)


class SelectionBuilder:
    """Builds a selection of every field of an object type, recursively.

    Fields are selected in declaration order. Object-typed fields get a
    nested selection; every other kind is selected as a bare leaf.

    A field whose type is already being expanded further up the current
    path would recurse forever, so it is selected as ``field { __typename }``
    instead. The same type reached through sibling branches still expands.
    """

    def __init__(self, index: TypeIndex, skip_deprecated: bool = False):
        self.index = index
        self.skip_deprecated = skip_deprecated

    def build(self, ref: TypeRef) -> list[Selection]:
        """Build the selection for an OBJECT-kind (possibly wrapped) reference.

        Raises:
            TypeResolutionError: If the reference does not resolve to an object type
        """
        if base_kind(ref) is not TypeKind.OBJECT:
            raise TypeResolutionError(
                f"Cannot build a selection set for {base_type_name(ref)} "
                f"({base_kind(ref).value}); only object types have fields to select"
            )
        return self._build_fields(base_type_name(ref), path=(base_type_name(ref),))

    def _build_fields(self, type_name: str, path: tuple[str, ...]) -> list[Selection]:
        type_def = self.index.get_type(type_name)
        selections = []

        for gql_field in type_def.fields:
            if self.skip_deprecated and gql_field.is_deprecated:
                continue

            if base_kind(gql_field.type) is not TypeKind.OBJECT:
                selections.append(Selection(gql_field.name))
                continue

            nested_type = base_type_name(gql_field.type)
            if nested_type in path:
                logger.debug(
                    "Not expanding %s.%s: %s is already selected on path %s",
                    type_name, gql_field.name, nested_type, " > ".join(path),
                )
                selections.append(Selection(gql_field.name, [Selection("__typename")]))
                continue

            children = self._build_fields(nested_type, path + (nested_type,))
            selections.append(Selection(gql_field.name, children or [Selection("__typename")]))

        return selections
