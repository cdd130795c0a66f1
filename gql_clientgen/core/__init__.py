"""Core modules for GraphQL client generation."""

from .auth import (
    ApiKeyAuth,
    Auth,
    BearerAuth,
    KeyProviderAuth,
    NoAuth,
    RefreshableAuth,
)
from .client_generator import ClientGenerator
from .config import TargetConfig, load_config
from .emitter import MethodEmitter
from .errors import (
    ArtifactWriteError,
    ConfigError,
    GenerationError,
    SchemaFetchError,
    TargetError,
    TypeResolutionError,
    UnknownScalarError,
    UnknownTypeError,
)
from .executor import GraphQLError, GraphQLExecutor
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    ClientMethod,
    ClientModule,
    MethodParameter,
    OperationDocument,
    ParameterDescriptor,
    Selection,
    VariableDefinition,
)
from .loader import INTROSPECTION_QUERY, IntrospectionLoader
from .parameters import ParameterBuilder
from .pipeline import generate, generate_all
from .renderer import DocumentRenderer, ModuleRenderer
from .resolver import base_kind, base_type_name, type_signature, unwrap
from .scalars import ScalarRegistry, SemanticType
from .schema import Field, InputValue, SchemaDefinition, TypeDefinition, TypeKind, TypeRef
from .selection import SelectionBuilder
from .type_index import TypeIndex
from .writer import write_artifact

__all__ = [
    # Auth
    "Auth",
    "RefreshableAuth",
    "ApiKeyAuth",
    "BearerAuth",
    "KeyProviderAuth",
    "NoAuth",
    # Errors
    "GenerationError",
    "ConfigError",
    "SchemaFetchError",
    "TypeResolutionError",
    "UnknownTypeError",
    "UnknownScalarError",
    "ArtifactWriteError",
    "TargetError",
    # Schema model
    "TypeKind",
    "TypeRef",
    "InputValue",
    "Field",
    "TypeDefinition",
    "SchemaDefinition",
    "TypeIndex",
    # Resolver
    "type_signature",
    "base_type_name",
    "base_kind",
    "unwrap",
    # Scalars
    "ScalarRegistry",
    "SemanticType",
    # Document model
    "Selection",
    "VariableDefinition",
    "OperationDocument",
    "ParameterDescriptor",
    "MethodParameter",
    "ClientMethod",
    "ClientModule",
    # Generation
    "SelectionBuilder",
    "ParameterBuilder",
    "MethodEmitter",
    "DocumentRenderer",
    "ModuleRenderer",
    "ClientGenerator",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
    # Loading, config, entry point
    "INTROSPECTION_QUERY",
    "IntrospectionLoader",
    "TargetConfig",
    "load_config",
    "write_artifact",
    "generate",
    "generate_all",
    # Executor
    "GraphQLError",
    "GraphQLExecutor",
]
