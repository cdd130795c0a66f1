"""Client module assembly.

Builds the :class:`ClientModule` model for one schema, renders it and
checks that the result is valid Python.
"""

import ast
import logging

from .emitter import MethodEmitter
from .errors import GenerationError
from .hooks import HookRunner
from .ir import ClientModule
from .renderer import ModuleRenderer
from .scalars import ScalarRegistry
from .schema import SchemaDefinition
from .type_index import TypeIndex

logger = logging.getLogger(__name__)


class ClientGenerator:
    """Generates the client module for one schema.

    Example:
        generator = ClientGenerator(schema, client_name="GitHubClient")
        code = generator.generate_client_code()
    """

    def __init__(
        self,
        schema: SchemaDefinition,
        client_name: str = "GraphQLClient",
        *,
        scalars: ScalarRegistry | None = None,
        skip_deprecated: bool = False,
        template_dir: str | None = None,
        hooks: HookRunner | None = None,
        source: str = "",
    ):
        self.schema = schema
        self.client_name = client_name
        self.source = source
        self.index = TypeIndex.from_schema(schema)
        self.emitter = MethodEmitter(self.index, scalars, skip_deprecated=skip_deprecated)
        self.renderer = ModuleRenderer(template_dir)
        self.hooks = hooks or HookRunner()

    def build_module(self) -> ClientModule:
        """Build the document model of the client module, after pre-generate hooks."""
        module = ClientModule(
            name=self.client_name,
            source=self.source,
            methods=self.emitter.emit_all(self.schema),
        )
        module = self.hooks.run_pre_hooks(module)
        logger.debug(
            "%s: %d queries, %d mutations",
            module.name, len(module.queries), len(module.mutations),
        )
        return module

    def generate_client_code(self, filename: str = "client.py") -> str:
        """Render the complete client module.

        Raises:
            TypeResolutionError: If the schema cannot be resolved
            GenerationError: If the rendered module is not valid Python
        """
        module = self.build_module()
        content = self.renderer.render(module)
        content = self.hooks.run_post_hooks(filename, content)

        try:
            ast.parse(content)
        except SyntaxError as e:
            raise GenerationError(
                f"Generated invalid Python for {filename}: {e}\n"
                f"Template: {self.renderer.TEMPLATE}"
            ) from e

        return content
