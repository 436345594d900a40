"""Detect drift between the upstream spec and the copy published in the docs."""

import json

import click

from api_docs_kit.config import DocsConfig
from api_docs_kit.errors import DriftDetected, SpecFileNotFound
from api_docs_kit.parser.source import resolve_source

# Beyond this, integral floats keep their exponent form (1e+21).
MAX_INTEGRAL_FLOAT = 1e21


def _parse_number(literal: str) -> int | float:
    value = float(literal)
    if value.is_integer() and abs(value) < MAX_INTEGRAL_FLOAT:
        return int(value)
    return value


def normalize_json(text: str | bytes) -> str:
    """Re-serialize a JSON document compactly.

    Only formatting is normalized; key order is kept, so documents whose
    objects list the same keys in a different order still compare unequal.
    Numbers compare by value: ``1.0``, ``1e0`` and ``1`` are the same number.
    """
    doc = json.loads(text, parse_float=_parse_number)
    return json.dumps(doc, separators=(",", ":"), ensure_ascii=False)


def check_drift(config: DocsConfig) -> None:
    """Raise DriftDetected if the published spec differs from the source."""
    source_raw = resolve_source(config).read()

    target = config.target_file
    if not target.is_file():
        raise SpecFileNotFound(f"File not found: {target}")
    target_raw = target.read_bytes()

    if normalize_json(source_raw) != normalize_json(target_raw):
        commands = "\n".join(f"  {line}" for line in config.sync_hint)
        raise DriftDetected(
            "OpenAPI drift detected: docs-site spec is out of sync.\n\n"
            f"Fix by running:\n{commands}"
        )

    click.echo("OpenAPI spec is in sync.")
