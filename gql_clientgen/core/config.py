"""Configuration of generation targets.

A configuration file is JSON, either a list of targets or an object with
a ``targets`` list:

    [
        {"name": "UsersClient", "schema": "https://users.example.com/graphql", "output": "clients/users.py"},
        {"name": "BillingClient", "schema": "schemas/billing.graphqls", "output": "clients/billing.py",
         "scalars": {"DateTime": "string"}}
    ]
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .scalars import SemanticType


class TargetConfig(BaseModel):
    """One schema source and the client module generated from it."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    schema_source: str = Field(alias="schema")
    output: str
    headers: dict[str, str] = Field(default_factory=dict)
    scalars: dict[str, SemanticType] = Field(default_factory=dict)
    skip_deprecated: bool = False
    template_dir: str | None = None
    header: str | None = None
    exclude_prefix: str | None = None
    include_prefix: str | None = None

    @field_validator("name")
    @classmethod
    def _valid_class_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"{value!r} is not a valid Python class name")
        return value


class GenerationConfig(BaseModel):
    targets: list[TargetConfig]


def load_config(path: str | Path) -> list[TargetConfig]:
    """Read and validate a configuration file.

    Raises:
        ConfigError: If the file cannot be read or does not describe targets
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Config {path} is not valid JSON: {e}") from e

    if isinstance(raw, list):
        raw = {"targets": raw}
    try:
        return GenerationConfig.model_validate(raw).targets
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e
