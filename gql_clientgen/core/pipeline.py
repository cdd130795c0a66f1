"""Generation entry point.

Each target is processed by its own task: load the schema, generate the
client module, write it. Targets share nothing, so they run concurrently.
A failing target does not cancel the others; once every target has
settled, the first failure is raised.
"""

import asyncio
import logging
from pathlib import Path

from .client_generator import ClientGenerator
from .config import TargetConfig
from .errors import TargetError
from .hooks import AddHeaderHook, FilterOperationsHook, HookRunner
from .loader import IntrospectionLoader, is_remote
from .scalars import ScalarRegistry
from .writer import write_artifact

logger = logging.getLogger(__name__)


def _resolve(path: str, base_dir: Path) -> Path:
    candidate = Path(path).expanduser()
    return candidate if candidate.is_absolute() else base_dir / candidate


def build_hooks(target: TargetConfig) -> HookRunner:
    hooks = HookRunner()
    if target.exclude_prefix or target.include_prefix:
        hooks.add_pre_hook(FilterOperationsHook(
            exclude_prefix=target.exclude_prefix,
            include_prefix=target.include_prefix,
        ))
    if target.header:
        hooks.add_post_hook(AddHeaderHook(target.header))
    return hooks


async def generate_target(
    target: TargetConfig,
    base_dir: Path,
    loader: IntrospectionLoader,
) -> Path:
    """Generate and write the client module of one target."""
    source = target.schema_source
    if not is_remote(source):
        source = str(_resolve(source, base_dir))

    schema = await loader.load(source, headers=target.headers)

    output_path = _resolve(target.output, base_dir)
    template_dir = str(_resolve(target.template_dir, base_dir)) if target.template_dir else None
    generator = ClientGenerator(
        schema,
        client_name=target.name,
        scalars=ScalarRegistry(target.scalars),
        skip_deprecated=target.skip_deprecated,
        template_dir=template_dir,
        hooks=build_hooks(target),
        source=target.schema_source,
    )
    code = generator.generate_client_code(output_path.name)
    return write_artifact(output_path, code)


async def generate_all(
    targets: list[TargetConfig],
    base_dir: str | Path | None = None,
    *,
    loader: IntrospectionLoader | None = None,
) -> list[Path]:
    """Generate every target concurrently.

    Args:
        targets: Targets to generate
        base_dir: Directory relative ``schema``/``output`` paths resolve against
            (default: the current directory)
        loader: Introspection loader shared by all targets

    Returns:
        Written paths, in target order

    Raises:
        TargetError: The first target failure, after all targets have settled
    """
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    loader = loader or IntrospectionLoader()

    async def run(target: TargetConfig) -> Path:
        try:
            return await generate_target(target, base, loader)
        except Exception as e:
            raise TargetError(target.name, e) from e

    tasks = [asyncio.create_task(run(t), name=t.name) for t in targets]
    first_failure: TargetError | None = None

    for next_done in asyncio.as_completed(tasks):
        try:
            path = await next_done
        except TargetError as e:
            if first_failure is None:
                first_failure = e
            logger.error("%s", e)
        else:
            logger.info("Generated %s", path)

    if first_failure is not None:
        raise first_failure
    return [task.result() for task in tasks]


def generate(targets: list[TargetConfig], base_dir: str | Path | None = None) -> list[Path]:
    """Synchronous wrapper around :func:`generate_all`."""
    return asyncio.run(generate_all(targets, base_dir))
