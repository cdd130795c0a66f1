"""Errors raised while generating client modules."""


class GenerationError(Exception):
    """Base class for every failure of a generation run."""


class ConfigError(GenerationError):
    """The configuration file could not be read or is invalid."""


class SchemaFetchError(GenerationError):
    """The introspection result could not be retrieved or parsed."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Failed to load schema from {source}: {message}")


class TypeResolutionError(GenerationError):
    """The schema references something the generator cannot resolve."""


class UnknownTypeError(TypeResolutionError):
    """A type reference names a type absent from the type index."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown type: {type_name}")


class UnknownScalarError(TypeResolutionError):
    """A scalar has no registered mapping."""

    def __init__(self, scalar_name: str):
        self.scalar_name = scalar_name
        super().__init__(
            f"No mapping registered for scalar {scalar_name!r}; "
            f"register it with ScalarRegistry.register() or the 'scalars' config key"
        )


class ArtifactWriteError(GenerationError):
    """The generated module could not be written."""

    def __init__(self, path, cause: OSError):
        self.path = path
        super().__init__(f"Failed to write {path}: {cause}")


class TargetError(GenerationError):
    """A single configured target failed."""

    def __init__(self, target: str, cause: Exception):
        self.target = target
        self.cause = cause
        super().__init__(f"[{target}] {cause}")


def error_messages(errors) -> str:
    """Join the messages of a GraphQL ``errors`` member.

    Entries are normally objects with a ``message`` key, but some servers
    send bare strings or a single object instead of a list.
    """
    if not isinstance(errors, list):
        errors = [errors]
    return "; ".join(
        str(e.get("message", e)) if isinstance(e, dict) else str(e)
        for e in errors
    )
