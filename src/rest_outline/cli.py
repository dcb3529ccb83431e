"""Click CLI for rest-outline."""

import click


@click.group()
def cli():
    """rest-outline: reStructuredText heading outline extractor."""


@cli.command()
@click.argument("root", default=".", type=click.Path(exists=True, file_okay=False))
def init(root):
    """Initialize a .rest_outline directory with config.toml."""
    from pathlib import Path

    from rest_outline.config import CONFIG_DIR, create_default_config

    root_path = Path(root).resolve()
    config_path = create_default_config(root_path)
    click.echo(f"Created {config_path}")

    gitignore = root_path / ".gitignore"
    marker = f"{CONFIG_DIR}/"
    if gitignore.exists():
        content = gitignore.read_text()
        if marker not in content:
            with open(gitignore, "a") as f:
                f.write(f"\n{marker}\n")
            click.echo(f"Added {marker} to .gitignore")
    else:
        gitignore.write_text(f"{marker}\n")
        click.echo(f"Created .gitignore with {marker}")


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--format", "output_format", type=click.Choice(["tags", "json", "tree"]),
    default=None, help="Output format (default: [output] format in config, else tags).",
)
@click.option(
    "--root", default=".", type=click.Path(exists=True, file_okay=False),
    help="Directory holding .rest_outline/config.toml.",
)
@click.option("--continue-on-error", is_flag=True, help="Log read errors and continue.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
def scan(paths, output_format, root, continue_on_error, verbose):
    """Print the heading outline of reST files and directories."""
    import logging
    from pathlib import Path

    from rest_outline.config import (
        load_config,
        require_enabled_kinds,
        require_output_format,
        require_scan_config,
    )
    from rest_outline.formatters import get_formatter
    from rest_outline.runner import outline_paths

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = load_config(Path(root).resolve())
    try:
        scan_config = require_scan_config(config)
        enabled_kinds = require_enabled_kinds(config)
        fmt = output_format or require_output_format(config)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    try:
        result = outline_paths(
            [Path(p) for p in paths],
            scan_config=scan_config,
            enabled_kinds=enabled_kinds,
            continue_on_error=continue_on_error,
        )
    except RuntimeError as e:
        raise click.ClickException(str(e)) from e

    output = get_formatter(fmt)(result.entries)
    if output:
        click.echo(output)
    if result.errors:
        click.echo(f"{len(result.errors)} file(s) failed:", err=True)
        for error in result.errors:
            click.echo(f"  {error}", err=True)
        raise SystemExit(1)


@cli.command()
def kinds():
    """List heading kinds (level, letter, tag name, description)."""
    from rest_outline.constants import KINDS

    for kind in KINDS:
        click.echo(f"{kind.level}  {kind.letter}  {kind.tag_name:<10} {kind.name:<14} {kind.description}")
