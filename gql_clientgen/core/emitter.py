"""Method emission for root query and mutation fields.

For every root field the emitter composes the operation document
(variable declarations, field invocation and selection set), the Python
parameter list and the parameter documentation of one client method.
"""

import keyword
import logging
import re

from .errors import TypeResolutionError
from .ir import ClientMethod, MethodParameter, OperationDocument, VariableDefinition
from .parameters import ParameterBuilder
from .resolver import base_kind, type_signature
from .scalars import ScalarRegistry
from .schema import Field, SchemaDefinition, TypeKind, TypeRef
from .selection import SelectionBuilder
from .type_index import TypeIndex

logger = logging.getLogger(__name__)

# Attributes of the generated client class that methods must not shadow
RESERVED_METHOD_NAMES = {"close"}


def to_snake_case(name: str) -> str:
    """Convert camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def safe_identifier(name: str) -> str:
    """Suffix Python keywords (and ``self``) with an underscore."""
    if keyword.iskeyword(name) or name == "self":
        return f"{name}_"
    return name


class MethodEmitter:
    """Turns root fields into :class:`ClientMethod` instances."""

    def __init__(
        self,
        index: TypeIndex,
        scalars: ScalarRegistry | None = None,
        skip_deprecated: bool = False,
    ):
        self.index = index
        self.scalars = scalars or ScalarRegistry()
        self.skip_deprecated = skip_deprecated
        self.selections = SelectionBuilder(index, skip_deprecated=skip_deprecated)
        self.parameters = ParameterBuilder(index, self.scalars)

    def emit_all(self, schema: SchemaDefinition) -> list[ClientMethod]:
        """Emit methods for all query root fields, then all mutation root fields."""
        methods = []
        taken = set(RESERVED_METHOD_NAMES)

        for operation_type in ("query", "mutation"):
            for root_field in self.index.root_fields(schema, operation_type):
                if self.skip_deprecated and root_field.is_deprecated:
                    logger.debug("Skipping deprecated %s field %s", operation_type, root_field.name)
                    continue
                method = self.emit(root_field, operation_type)
                if method.name in taken:
                    method.name = f"{method.name}_{operation_type}"
                base_name, n = method.name, 2
                while method.name in taken:
                    method.name = f"{base_name}{n}"
                    n += 1
                taken.add(method.name)
                methods.append(method)

        return methods

    def emit(self, root_field: Field, operation_type: str) -> ClientMethod:
        """Emit the method wrapping a single root field."""
        return ClientMethod(
            name=safe_identifier(to_snake_case(root_field.name)),
            field_name=root_field.name,
            operation_type=operation_type,
            operation=self.build_operation(root_field, operation_type),
            parameters=self._build_parameters(root_field),
            docs=self.parameters.build_all(root_field.args),
            return_hint=self.return_hint(root_field.type),
            description=root_field.description,
            deprecation_reason=self._deprecation(root_field),
        )

    @staticmethod
    def _deprecation(root_field: Field) -> str | None:
        if not root_field.is_deprecated:
            return None
        return root_field.deprecation_reason or "Deprecated."

    def build_operation(self, root_field: Field, operation_type: str) -> OperationDocument:
        """Compose the operation document for a root field."""
        variables = [
            VariableDefinition(name=arg.name, type_signature=type_signature(arg.type))
            for arg in root_field.args
        ]
        selections = None
        if base_kind(root_field.type) is TypeKind.OBJECT:
            selections = self.selections.build(root_field.type)

        return OperationDocument(
            operation_type=operation_type,
            name=root_field.name,
            field_name=root_field.name,
            variables=variables,
            selections=selections,
        )

    def _build_parameters(self, root_field: Field) -> list[MethodParameter]:
        params = []
        used: set[str] = set()
        keyword_only = False
        seen_optional = False

        for arg in root_field.args:
            param_name = safe_identifier(to_snake_case(arg.name))
            while param_name in used:
                param_name = f"{param_name}_"
            used.add(param_name)

            optional = arg.type.kind is not TypeKind.NON_NULL
            # A required parameter cannot follow a defaulted one positionally
            if not optional and seen_optional:
                keyword_only = True
            seen_optional = seen_optional or optional

            core = arg.type.of_type if not optional else arg.type
            params.append(MethodParameter(
                name=param_name,
                variable=arg.name,
                type_hint=self._input_hint(core),
                optional=optional,
                keyword_only=keyword_only,
            ))

        return params

    def _input_hint(self, ref: TypeRef) -> str:
        """Python type hint for an input reference, ignoring outer nullability."""
        if ref.kind is TypeKind.LIST:
            inner = ref.of_type
            if inner.kind is TypeKind.NON_NULL:
                return f"list[{self._input_hint(inner.of_type)}]"
            return f"list[Optional[{self._input_hint(inner)}]]"
        if ref.kind is TypeKind.SCALAR:
            return self.scalars.python_type(ref.name)
        if ref.kind is TypeKind.ENUM:
            return "str"
        if ref.kind is TypeKind.INPUT_OBJECT:
            return "dict[str, Any]"
        raise TypeResolutionError(
            f"Type {ref.name} ({ref.kind.value}) is not valid in an input position"
        )

    def return_hint(self, ref: TypeRef) -> str:
        """Python type hint for the payload a method returns."""
        if ref.kind is TypeKind.NON_NULL:
            return self._output_hint(ref.of_type)
        return f"Optional[{self._output_hint(ref)}]"

    def _output_hint(self, ref: TypeRef) -> str:
        if ref.kind is TypeKind.LIST:
            return f"list[{self.return_hint(ref.of_type)}]"
        if ref.kind is TypeKind.SCALAR:
            # Unmapped output scalars pass through untouched
            if self.scalars.has(ref.name):
                return self.scalars.python_type(ref.name)
            return "Any"
        if ref.kind is TypeKind.ENUM:
            return "str"
        return "dict[str, Any]"
