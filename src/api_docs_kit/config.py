"""Configuration for the docs toolchain.

Values come from built-in defaults, an optional ``docs-kit.yaml`` file in the
documentation root, and environment variables, in that order of precedence.
Relative paths are resolved against the documentation root.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

CONFIG_FILENAME = "docs-kit.yaml"

DEFAULT_SOURCE_PATH = "../../Services/api-gateway-service/client-sdk/openapi-spec-public.json"
DEFAULT_TARGET_PATH = "openapi/widgetic-api-public.json"

ENV_OVERRIDES = {
    "OPENAPI_SOURCE_URL": "source_url",
    "OPENAPI_SOURCE_PATH": "source_path",
    "OPENAPI_TARGET_PATH": "target_path",
    "DOCS_API_BASE_URL": "api_base_url",
}


class DocsConfig(BaseModel):
    """Resolved settings shared by every command."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Path(".")
    source_path: Path = Path(DEFAULT_SOURCE_PATH)
    target_path: Path = Path(DEFAULT_TARGET_PATH)
    source_url: str | None = None
    fetch_timeout: float | None = None
    content_folders: list[str] = ["docs", "api-reference", "resources"]
    content_extension: str = ".mdx"
    api_base_url: str = "https://api.widgetic.com/v1"
    sdk_name: str = "widgetic"
    regenerate_hint: list[str] = [
        "cd Services/api-gateway-service",
        "npm run generate-schema-docs",
    ]
    sync_hint: list[str] = ["api-docs-kit sync"]

    def resolve(self, path: Path) -> Path:
        """Return *path* anchored at the documentation root."""
        if path.is_absolute():
            return path
        return (self.root / path).resolve()

    @property
    def source_file(self) -> Path:
        return self.resolve(self.source_path)

    @property
    def target_file(self) -> Path:
        return self.resolve(self.target_path)


def load_config(root: Path | None = None, config_file: Path | None = None) -> DocsConfig:
    """Build the configuration for a documentation root."""
    root = (root or Path(".")).resolve()
    values: dict = {}

    if config_file is None and (root / CONFIG_FILENAME).is_file():
        config_file = root / CONFIG_FILENAME
    if config_file is not None:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"{config_file}: expected a mapping of settings")
        values.update(data or {})

    for env_name, field in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            values[field] = value

    values["root"] = root
    return DocsConfig(**values)
