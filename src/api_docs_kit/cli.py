"""CLI entry point for api-docs-kit."""

import functools
import sys
from pathlib import Path

import click

from api_docs_kit.checks.drift import check_drift
from api_docs_kit.checks.links import validate_links
from api_docs_kit.config import DocsConfig, load_config
from api_docs_kit.generator.samples import generate_samples_file
from api_docs_kit.sync import sync_spec


def _fail_with(prefix: str):
    """Report any error raised by a command as ``<prefix>: <message>`` and exit 1."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except click.exceptions.Exit:
                raise
            except Exception as e:
                click.echo(f"{prefix}: {e}", err=True)
                sys.exit(1)

        return wrapper

    return decorator


@click.group()
@click.option(
    "--root",
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
    help="Documentation site root.",
)
@click.option(
    "--config",
    "config_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Settings file (defaults to docs-kit.yaml in the root).",
)
@click.pass_context
@_fail_with("Error loading configuration")
def main(ctx: click.Context, root: Path, config_file: Path | None):
    """API Docs Kit: keep the docs site's OpenAPI spec and links healthy."""
    ctx.obj = load_config(root, config_file)


@main.command("sync")
@click.pass_obj
@_fail_with("Error syncing spec")
def sync(config: DocsConfig):
    """Copy the upstream OpenAPI spec into the docs site."""
    sync_spec(config)
    click.echo("\nDone!")


@main.command("check-drift")
@click.pass_obj
@_fail_with("OpenAPI drift check failed")
def check_drift_cmd(config: DocsConfig):
    """Fail if the published spec differs from the upstream source."""
    check_drift(config)


@main.command("gen-samples")
@click.pass_obj
@_fail_with("Error generating code samples")
def gen_samples(config: DocsConfig):
    """Add x-codeSamples in 8 languages to every operation."""
    generate_samples_file(config)
    click.echo("Done!")


@main.command("validate-links")
@click.pass_obj
@_fail_with("Error validating links")
def validate_links_cmd(config: DocsConfig):
    """Check that internal documentation links resolve to files."""
    report = validate_links(config)

    if report.ok:
        click.echo("All links are valid!")
        return

    click.echo(f"Found {len(report.broken)} broken links:\n")
    for broken in report.broken:
        click.echo(f"  {broken.file}")
        click.echo(f"    -> {broken.link}")
        click.echo(f"    {broken.reason}\n")
    sys.exit(1)
