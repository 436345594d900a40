"""Copy the upstream OpenAPI spec into the docs site."""

import json
from collections import Counter
from typing import Literal

import click
from pydantic import BaseModel

from api_docs_kit.config import DocsConfig
from api_docs_kit.parser.openapi import parse_operations
from api_docs_kit.parser.source import resolve_source


class SyncResult(BaseModel):
    """Outcome of one sync run."""

    status: Literal["created", "updated", "up-to-date"]
    target: str
    access_levels: dict[str, int] = {}

    @property
    def written(self) -> bool:
        return self.status != "up-to-date"


def sync_spec(config: DocsConfig) -> SyncResult:
    """Write the source spec to the target path unless it is already identical."""
    click.echo("Syncing OpenAPI spec...")

    target = config.target_file
    if not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
        click.echo(f"Created directory: {target.parent}")

    raw = resolve_source(config).read()
    spec = json.loads(raw)
    if not isinstance(spec, dict):
        raise ValueError("OpenAPI source must be a JSON object")
    click.echo(f"Source spec: {len(spec.get('paths') or {})} paths, {len(spec.get('tags') or [])} tags")

    if target.exists():
        if target.read_bytes() == raw:
            click.echo("Spec is already up to date")
            return SyncResult(status="up-to-date", target=str(target))
        status = "updated"
        click.echo("Updating existing spec...")
    else:
        status = "created"
        click.echo("Creating new spec file...")

    target.write_bytes(raw)
    click.echo(f"Spec synced to: {target}")

    levels = summarize_access_levels(spec)
    click.echo("\nPublic endpoints summary:")
    for level, count in levels.items():
        click.echo(f"   {level}: {count} endpoints")

    return SyncResult(status=status, target=str(target), access_levels=levels)


def summarize_access_levels(spec: dict) -> dict[str, int]:
    """Count endpoints per ``x-access-level``, in first-seen order."""
    return dict(Counter(op.access_level for op in parse_operations(spec)))
