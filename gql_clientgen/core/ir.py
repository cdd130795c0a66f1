"""Document model of a generated client module.

These dataclasses describe what gets generated (operations, variables,
selections, methods) independently of how it is rendered to text; see
:mod:`gql_clientgen.core.renderer` for the renderers.
"""

from dataclasses import dataclass, field

from .scalars import SemanticType


@dataclass
class Selection:
    """A selected field; ``children`` is empty for leaf fields."""
    name: str
    children: list["Selection"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class VariableDefinition:
    """An operation-level variable, e.g. ``$id: ID!``."""
    name: str
    type_signature: str


@dataclass
class OperationDocument:
    """A single-field GraphQL operation.

    Renders as::

        query user($id: ID!) {
          user(id: $id) {
            ...
          }
        }
    """
    operation_type: str  # 'query' or 'mutation'
    name: str
    field_name: str
    variables: list[VariableDefinition] = field(default_factory=list)
    # None when the field returns a scalar/enum and takes no selection set
    selections: list[Selection] | None = None


@dataclass
class ParameterDescriptor:
    """Documentation entry for an argument or a nested input member."""
    path: str  # dotted path, e.g. "filter.user.id" or "items[].id"
    semantic_type: SemanticType
    optional: bool = True
    default_value: str | None = None
    is_list: bool = False


@dataclass
class MethodParameter:
    """A Python parameter of a generated method."""
    name: str  # Python-safe name
    variable: str  # GraphQL variable/argument name
    type_hint: str
    optional: bool = True
    keyword_only: bool = False

    @property
    def declaration(self) -> str:
        if self.optional:
            return f"{self.name}: Optional[{self.type_hint}] = None"
        return f"{self.name}: {self.type_hint}"


@dataclass
class ClientMethod:
    """One generated method, wrapping one root query/mutation field."""
    name: str
    field_name: str
    operation_type: str
    operation: OperationDocument
    parameters: list[MethodParameter] = field(default_factory=list)
    docs: list[ParameterDescriptor] = field(default_factory=list)
    return_hint: str = "Any"
    description: str | None = None
    deprecation_reason: str | None = None

    @property
    def constant_name(self) -> str:
        """Name of the module-level constant holding the operation document."""
        return f"{self.name.upper()}_{self.operation_type.upper()}"


@dataclass
class ClientModule:
    """A complete generated client module."""
    name: str  # client class name
    source: str = ""
    methods: list[ClientMethod] = field(default_factory=list)

    @property
    def queries(self) -> list[ClientMethod]:
        return [m for m in self.methods if m.operation_type == "query"]

    @property
    def mutations(self) -> list[ClientMethod]:
        return [m for m in self.methods if m.operation_type == "mutation"]
