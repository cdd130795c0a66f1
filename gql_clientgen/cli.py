"""Command-line interface for gql-clientgen."""

import logging
from pathlib import Path

import click

from .core.config import TargetConfig, load_config
from .core.errors import GenerationError
from .core.pipeline import generate


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_pairs(pairs: tuple[str, ...], option: str) -> dict[str, str]:
    """Parse repeated NAME=VALUE options into a dict."""
    result = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint=option)
        result[key.strip()] = value.strip()
    return result


def _run(targets: list[TargetConfig], base_dir: Path):
    try:
        paths = generate(targets, base_dir)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e
    for path in paths:
        click.echo(f"Done - file written to {path}")


@click.group()
@click.version_option(package_name="gql-clientgen")
def main():
    """Generate Python GraphQL clients from introspected schemas.

    Every root query and mutation field becomes an async client method
    with a complete query document.
    """
    pass


@main.command("generate")
@click.option(
    "--config",
    "-c",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file listing targets ({name, schema, output}).",
)
@click.option(
    "--base-dir",
    "-b",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory relative paths resolve against (default: the config file's directory).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate_command(config_path: str, base_dir: str | None, verbose: bool):
    """Generate one client module per configured target.

    Examples:

        gql-clientgen generate --config ./graphql-clients.json

        gql-clientgen generate -c ./clients.json -b ./src
    """
    _configure_logging(verbose)
    config_file = Path(config_path).resolve()
    try:
        targets = load_config(config_file)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    base = Path(base_dir).resolve() if base_dir else config_file.parent
    if verbose:
        click.echo(f"Config: {config_file}")
        click.echo(f"Base directory: {base}")
    click.echo(f"Generating {len(targets)} client(s)...")
    _run(targets, base)


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    help="GraphQL endpoint URL, introspection JSON, or SDL file/directory.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for generated client code (e.g., client.py).",
)
@click.option(
    "--name",
    "-n",
    default="GraphQLClient",
    help="Name of the generated client class (default: GraphQLClient).",
)
@click.option(
    "--scalar",
    multiple=True,
    metavar="NAME=TYPE",
    help="Map a custom scalar to string/number/boolean/object. Repeatable.",
)
@click.option(
    "--header",
    "-H",
    multiple=True,
    metavar="NAME=VALUE",
    help="HTTP header sent with the introspection request. Repeatable.",
)
@click.option(
    "--skip-deprecated",
    is_flag=True,
    help="Leave deprecated fields out of generated methods and selections.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def client(
    schema: str,
    output: str,
    name: str,
    scalar: tuple[str, ...],
    header: tuple[str, ...],
    skip_deprecated: bool,
    verbose: bool,
):
    """Generate a single client module.

    Examples:

        gql-clientgen client --schema https://api.example.com/graphql --output ./client.py

        gql-clientgen client -s ./schema.graphqls -o ./client.py -n MyClient --scalar DateTime=string
    """
    _configure_logging(verbose)
    try:
        target = TargetConfig(
            name=name,
            schema=schema,
            output=output,
            headers=_parse_pairs(header, "--header"),
            scalars=_parse_pairs(scalar, "--scalar"),
            skip_deprecated=skip_deprecated,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    if verbose:
        click.echo(f"Schema: {schema}")
        click.echo(f"Output: {Path(output).resolve()}")
    click.echo(f"Generating client code (class: {name})...")
    _run([target], Path.cwd())


if __name__ == "__main__":
    main()
