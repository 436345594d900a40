"""Read models for the parts of an OpenAPI document the tools look at.

The raw document stays a plain dict so the sample generator can write
back into it; these models are built from its nodes for reading.
"""

from typing import Any

from pydantic import BaseModel

DEFAULT_ACCESS_LEVEL = "user"


class Param(BaseModel):
    """A single operation parameter (path, query, header, or cookie)."""

    name: str
    location: str  # path / query / header / cookie
    required: bool = False
    example: Any = None
    param_type: str | None = None  # declared schema type, if any
    schema_example: Any = None


class Operation(BaseModel):
    """One HTTP method on one path."""

    path: str  # /widgets/{widgetId}
    method: str  # lower-case key from the path item
    operation_id: str | None = None
    tags: list[str] = []
    parameters: list[Param] = []
    access_level: str = DEFAULT_ACCESS_LEVEL

    def params_in(self, location: str) -> list[Param]:
        return [p for p in self.parameters if p.location == location]


class CodeSample(BaseModel):
    """One entry of an operation's ``x-codeSamples`` list."""

    lang: str
    label: str
    source: str
