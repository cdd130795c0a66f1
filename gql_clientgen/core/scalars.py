"""Scalar mappings for generated clients.

Every GraphQL scalar that appears in an argument position must map to a
semantic type (used in generated parameter docs) and a Python type hint
(used in generated method signatures). The built-in scalars are always
registered; custom scalars must be registered explicitly:

    registry = ScalarRegistry()
    registry.register("DateTime", SemanticType.STRING)
    registry.register("BigInt", "number", python_type="int")

Looking up a scalar that was never registered raises UnknownScalarError
instead of guessing.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import UnknownScalarError


class SemanticType(str, Enum):
    """Coarse JSON-level type of a parameter, used in documentation."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"


_DEFAULT_PYTHON_TYPES = {
    SemanticType.STRING: "str",
    SemanticType.NUMBER: "float",
    SemanticType.BOOLEAN: "bool",
    SemanticType.OBJECT: "dict[str, Any]",
}


@dataclass(frozen=True)
class ScalarMapping:
    semantic_type: SemanticType
    python_type: str


class ScalarRegistry:
    """Registry of scalar name to :class:`ScalarMapping`.

    Example:
        registry = ScalarRegistry()
        registry.semantic_type("Int")  # SemanticType.NUMBER
        registry.python_type("Int")    # "int"
    """

    BUILTINS = {
        "ID": ScalarMapping(SemanticType.STRING, "str"),
        "Int": ScalarMapping(SemanticType.NUMBER, "int"),
        "Float": ScalarMapping(SemanticType.NUMBER, "float"),
        "String": ScalarMapping(SemanticType.STRING, "str"),
        "Boolean": ScalarMapping(SemanticType.BOOLEAN, "bool"),
    }

    def __init__(self, custom: dict[str, str | SemanticType] | None = None):
        self._mappings: dict[str, ScalarMapping] = dict(self.BUILTINS)
        for name, semantic in (custom or {}).items():
            self.register(name, semantic)

    def register(
        self,
        scalar_name: str,
        semantic_type: str | SemanticType,
        python_type: str | None = None,
    ):
        """Register (or override) the mapping of a scalar.

        Raises:
            ValueError: If ``semantic_type`` is not one of string/number/boolean/object
        """
        semantic = SemanticType(semantic_type)
        self._mappings[scalar_name] = ScalarMapping(
            semantic_type=semantic,
            python_type=python_type or _DEFAULT_PYTHON_TYPES[semantic],
        )

    def get(self, scalar_name: str) -> ScalarMapping:
        try:
            return self._mappings[scalar_name]
        except KeyError:
            raise UnknownScalarError(scalar_name) from None

    def has(self, scalar_name: str) -> bool:
        return scalar_name in self._mappings

    def semantic_type(self, scalar_name: str) -> SemanticType:
        return self.get(scalar_name).semantic_type

    def python_type(self, scalar_name: str) -> str:
        return self.get(scalar_name).python_type
