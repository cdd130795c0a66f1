"""Models of a GraphQL introspection result.

The models mirror the ``__schema`` payload returned by the introspection
document in :mod:`gql_clientgen.core.loader`. Field names are snake_case and
accept the camelCase keys used on the wire.
"""

from enum import Enum
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class TypeKind(str, Enum):
    """The ``__TypeKind`` enum of the GraphQL type system."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TypeRef(_IntrospectionModel):
    """A possibly wrapped type reference, e.g. ``[String!]!``."""
    kind: TypeKind
    name: str | None = None
    of_type: "TypeRef | None" = pydantic.Field(default=None, alias="ofType")

    @model_validator(mode="after")
    def _check_wrapping(self) -> "TypeRef":
        if self.kind.is_wrapper:
            if self.of_type is None:
                raise ValueError(f"{self.kind.value} type reference without ofType")
        else:
            if self.of_type is not None:
                raise ValueError(f"named {self.kind.value} type reference must not wrap another type")
            if not self.name:
                raise ValueError(f"named {self.kind.value} type reference without a name")
        return self

    @classmethod
    def named(cls, name: str, kind: TypeKind = TypeKind.SCALAR) -> "TypeRef":
        return cls(kind=kind, name=name)

    @classmethod
    def non_null(cls, inner: "TypeRef") -> "TypeRef":
        return cls(kind=TypeKind.NON_NULL, of_type=inner)

    @classmethod
    def list_of(cls, inner: "TypeRef") -> "TypeRef":
        return cls(kind=TypeKind.LIST, of_type=inner)


class InputValue(_IntrospectionModel):
    """A field argument or an input object member."""
    name: str
    type: TypeRef
    default_value: str | None = pydantic.Field(default=None, alias="defaultValue")
    description: str | None = None


class Field(_IntrospectionModel):
    """A selectable field of an object type, or a root operation field."""
    name: str
    args: list[InputValue] = pydantic.Field(default_factory=list)
    type: TypeRef
    is_deprecated: bool = pydantic.Field(default=False, alias="isDeprecated")
    deprecation_reason: str | None = pydantic.Field(default=None, alias="deprecationReason")
    description: str | None = None

    @field_validator("args", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class EnumValue(_IntrospectionModel):
    name: str
    is_deprecated: bool = pydantic.Field(default=False, alias="isDeprecated")
    deprecation_reason: str | None = pydantic.Field(default=None, alias="deprecationReason")


class TypeDefinition(_IntrospectionModel):
    """A named type of the schema."""
    kind: TypeKind
    name: str
    description: str | None = None
    fields: list[Field] = pydantic.Field(default_factory=list)
    input_fields: list[InputValue] = pydantic.Field(default_factory=list, alias="inputFields")
    interfaces: list[TypeRef] = pydantic.Field(default_factory=list)
    enum_values: list[EnumValue] = pydantic.Field(default_factory=list, alias="enumValues")
    possible_types: list[TypeRef] = pydantic.Field(default_factory=list, alias="possibleTypes")

    @field_validator(
        "fields", "input_fields", "interfaces", "enum_values", "possible_types",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        # Introspection returns null for members that do not apply to a kind
        return [] if value is None else value


class RootTypeName(_IntrospectionModel):
    name: str


class SchemaDefinition(_IntrospectionModel):
    """The ``__schema`` object of an introspection result."""
    query_type: RootTypeName | None = pydantic.Field(default=None, alias="queryType")
    mutation_type: RootTypeName | None = pydantic.Field(default=None, alias="mutationType")
    subscription_type: RootTypeName | None = pydantic.Field(default=None, alias="subscriptionType")
    types: list[TypeDefinition]

    @classmethod
    def from_introspection(cls, payload: dict[str, Any]) -> "SchemaDefinition":
        """Validate an introspection payload.

        Accepts a full response (``{"data": {"__schema": ...}}``), the data
        portion (``{"__schema": ...}``) or the bare schema object.

        Raises:
            pydantic.ValidationError: If the payload does not describe a schema
        """
        if "data" in payload and isinstance(payload["data"], dict):
            payload = payload["data"]
        if "__schema" in payload:
            payload = payload["__schema"]
        return cls.model_validate(payload)
