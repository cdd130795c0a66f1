"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the client module model before rendering or transform the rendered code
before it is written.

Example usage:
    from gql_clientgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop methods
    class DropAdminFields(PreGenerateHook):
        def pre_generate(self, module):
            module.methods = [m for m in module.methods if not m.field_name.startswith("admin")]
            return module

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            return "# Copyright 2024 My Company\\n\\n" + content
"""

from typing import Protocol, runtime_checkable

from .ir import ClientModule


@runtime_checkable
class PreGenerateHook(Protocol):
    """Receives the client module model before rendering and may modify it."""

    def pre_generate(self, module: ClientModule) -> ClientModule:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Receives the rendered source of a module and may transform it."""

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("# Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterOperationsHook:
    """Built-in hook to drop generated methods by root field name prefix.

    Example:
        # Skip internal root fields such as _entities and _service
        hook = FilterOperationsHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        include_prefix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.include_prefix = include_prefix

    def _should_include(self, field_name: str) -> bool:
        if self.exclude_prefix and field_name.startswith(self.exclude_prefix):
            return False
        if self.include_prefix and not field_name.startswith(self.include_prefix):
            return False
        return True

    def pre_generate(self, module: ClientModule) -> ClientModule:
        module.methods = [m for m in module.methods if self._should_include(m.field_name)]
        return module


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, module: ClientModule) -> ClientModule:
        for hook in self.pre_hooks:
            module = hook.pre_generate(module)
        return module

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
