"""Renderers for the generated document model.

``DocumentRenderer`` turns an :class:`OperationDocument` into GraphQL text.
``ModuleRenderer`` turns a :class:`ClientModule` into Python source through
Jinja2 templates.

Custom templates are supported via the template_dir parameter:
    renderer = ModuleRenderer(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import re
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .ir import ClientModule, OperationDocument, ParameterDescriptor, Selection

INDENT = "  "


class DocumentRenderer:
    """Renders operation documents with two-space indentation, one field per line."""

    def render_selection(self, selections: list[Selection], depth: int = 0) -> str:
        lines = []
        indent = INDENT * depth
        for selection in selections:
            if selection.is_leaf:
                lines.append(f"{indent}{selection.name}")
            else:
                lines.append(f"{indent}{selection.name} {{")
                lines.append(self.render_selection(selection.children, depth + 1))
                lines.append(f"{indent}}}")
        return "\n".join(lines)

    def render(self, operation: OperationDocument) -> str:
        var_decls = ", ".join(f"${v.name}: {v.type_signature}" for v in operation.variables)
        field_args = ", ".join(f"{v.name}: ${v.name}" for v in operation.variables)

        header = operation.operation_type + " " + operation.name
        invocation = operation.field_name
        if operation.variables:
            header += f"({var_decls})"
            invocation += f"({field_args})"

        lines = [f"{header} {{"]
        if operation.selections is None:
            lines.append(f"{INDENT}{invocation}")
        else:
            lines.append(f"{INDENT}{invocation} {{")
            lines.append(self.render_selection(operation.selections, depth=2))
            lines.append(f"{INDENT}}}")
        lines.append("}")
        return "\n".join(lines)


def safe_docstring(text: str) -> str:
    """Escape text for use in docstrings."""
    if not text:
        return ""
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if text.endswith('"'):
        text += " "
    return text


def safe_comment(text: str) -> str:
    """Collapse text to a single line safe for comments and docstring summaries."""
    if not text:
        return ""
    text = re.sub(r"\s+", " ", text.replace("\r", ""))
    if len(text) > 120:
        text = text[:117] + "..."
    return safe_docstring(text.strip())


def param_doc(descriptor: ParameterDescriptor) -> str:
    """Format a descriptor as a docstring ``Args:`` entry."""
    qualifiers = [descriptor.semantic_type.value]
    if descriptor.is_list:
        qualifiers.append("list")
    if descriptor.optional:
        qualifiers.append("optional")
    line = f"{descriptor.path} ({', '.join(qualifiers)})"
    if descriptor.default_value is not None:
        line += f": Defaults to {descriptor.default_value}."
    return safe_docstring(line)


class ModuleRenderer:
    """Renders client modules from Jinja2 templates.

    Available templates to override:
        - client.py.j2: the client module
    """

    TEMPLATE = "client.py.j2"

    def __init__(self, template_dir: str | None = None, documents: DocumentRenderer | None = None):
        self.documents = documents or DocumentRenderer()

        # Custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_clientgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["graphql"] = self.documents.render
        self.env.filters["safe_docstring"] = safe_docstring
        self.env.filters["safe_comment"] = safe_comment
        self.env.filters["param_doc"] = param_doc

    def render(self, module: ClientModule) -> str:
        template = self.env.get_template(self.TEMPLATE)
        return template.render(module=module)
