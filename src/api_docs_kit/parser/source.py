"""Where the upstream spec is read from.

A source is either a local file or a remote URL; which one is decided once,
from the configuration, by :func:`resolve_source`.
"""

from pathlib import Path

import click
import requests
from pydantic import BaseModel

from api_docs_kit.config import DocsConfig
from api_docs_kit.errors import SourceUnavailable


class LocalSource(BaseModel):
    """Spec file on the local filesystem (monorepo checkout)."""

    path: Path
    regenerate_hint: list[str] = []

    def describe(self) -> str:
        return str(self.path)

    def read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            hint = "\n".join(f"  {line}" for line in self.regenerate_hint)
            message = f"Source file not found: {self.path}"
            if hint:
                message += f"\n\nMake sure to generate the public spec first:\n{hint}"
            raise SourceUnavailable(message) from None


class RemoteSource(BaseModel):
    """Spec served over HTTP (deployed API or raw file URL)."""

    url: str
    timeout: float | None = None

    def describe(self) -> str:
        return self.url

    def read(self) -> bytes:
        click.echo(f"Fetching OpenAPI spec from: {self.url}")
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise SourceUnavailable(f"Failed to fetch OpenAPI spec: {e}") from e
        if not response.ok:
            raise SourceUnavailable(f"Failed to fetch OpenAPI spec: HTTP {response.status_code}")
        return response.content


def resolve_source(config: DocsConfig) -> LocalSource | RemoteSource:
    """Pick the remote URL when one is configured, the local file otherwise."""
    if config.source_url:
        return RemoteSource(url=config.source_url, timeout=config.fetch_timeout)
    return LocalSource(path=config.source_file, regenerate_hint=config.regenerate_hint)
