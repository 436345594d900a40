"""Example values for parameters and request bodies.

Values are illustrative only. Anything the synthesizer cannot make sense of
turns into the ``"example"`` placeholder instead of failing the run.
"""

import json
from typing import Any
from urllib.parse import quote

from api_docs_kit.errors import MalformedSchemaNode
from api_docs_kit.parser.base import Operation, Param
from api_docs_kit.parser.openapi import resolve_ref

PLACEHOLDER = "example"
MAX_SCHEMA_DEPTH = 3
MAX_OBJECT_KEYS = 4
MAX_OPTIONAL_KEYS = 2
MAX_QUERY_PARAMS = 2

READ_METHODS = ("get",)
WRITE_METHODS = ("post", "put", "patch")

# Checked in order against the raw (case-sensitive) parameter name.
NAME_HINTS = (
    ("id", "example-uuid-123"),
    ("table", "my_table"),
    ("feature", "widgets.create"),
)

TYPE_DEFAULTS = {
    "integer": "1",
    "number": "1.0",
    "boolean": "true",
}

STRING_FORMATS = {
    "uuid": "uuid-example-123",
    "email": "user@example.com",
    "uri": "https://example.com",
}

# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def example_value(param: Param) -> str:
    """Example value for a parameter, as it would appear in a URL."""
    if param.example is not None:
        return _as_text(param.example)
    if param.schema_example is not None:
        return _as_text(param.schema_example)

    for fragment, value in NAME_HINTS:
        if fragment in param.name:
            return value

    return TYPE_DEFAULTS.get(param.param_type or "", PLACEHOLDER)


def example_path(operation: Operation) -> str:
    """The operation's path template with every path parameter filled in."""
    path = operation.path
    for param in operation.params_in("path"):
        path = path.replace(f"{{{param.name}}}", example_value(param))
    return path


def query_string(operation: Operation) -> str:
    """``?a=1&b=2`` built from the first query parameters of a read operation."""
    if operation.method.lower() not in READ_METHODS:
        return ""
    params = operation.params_in("query")[:MAX_QUERY_PARAMS]
    if not params:
        return ""
    pairs = [f"{p.name}={quote(example_value(p), safe=_URI_COMPONENT_SAFE)}" for p in params]
    return "?" + "&".join(pairs)


def request_body_example(method: str, node: dict, document: dict | None = None) -> Any:
    """Example JSON body for a write operation, or None when it takes none."""
    if method.lower() not in WRITE_METHODS:
        return None

    body = node.get("requestBody")
    if not isinstance(body, dict):
        return None
    content = body.get("content")
    if not isinstance(content, dict):
        return None
    media = content.get("application/json")
    if not isinstance(media, dict):
        return None
    schema = media.get("schema")
    if schema is None:
        return None

    if media.get("example") is not None:
        return media["example"]
    return example_from_schema(schema, document=document)


def example_from_schema(schema: Any, depth: int = 0, document: dict | None = None) -> Any:
    """Synthesize an example value from a JSON schema node.

    Objects keep their required properties plus the first optional ones,
    arrays get a single item, and recursion stops after a few levels.
    """
    if depth > MAX_SCHEMA_DEPTH:
        return {}
    try:
        return _synthesize(schema, depth, document)
    except MalformedSchemaNode:
        return PLACEHOLDER


def _synthesize(schema: Any, depth: int, document: dict | None) -> Any:
    if not isinstance(schema, dict):
        raise MalformedSchemaNode(f"schema node is {type(schema).__name__}, not an object")
    if "$ref" in schema:
        schema = resolve_ref(schema["$ref"], document)

    if schema.get("example") is not None:
        return schema["example"]

    schema_type = schema.get("type")

    if schema_type == "object" or "properties" in schema:
        props = schema.get("properties") or {}
        required = schema.get("required") or []
        if not isinstance(props, dict) or not isinstance(required, list):
            raise MalformedSchemaNode("object schema with malformed properties")
        optional = [k for k in props if k not in required][:MAX_OPTIONAL_KEYS]
        keys = [*required, *optional][:MAX_OBJECT_KEYS]
        return {
            key: example_from_schema(props[key], depth + 1, document)
            for key in keys
            if isinstance(key, str) and key in props
        }

    if schema_type == "array":
        if "items" not in schema:
            return ["item"]
        return [example_from_schema(schema["items"], depth + 1, document)]

    if schema_type == "string":
        fmt = schema.get("format")
        if fmt is not None and not isinstance(fmt, str):
            raise MalformedSchemaNode("format must be a string")
        if fmt in STRING_FORMATS:
            return STRING_FORMATS[fmt]
        enum = schema.get("enum")
        if enum is not None:
            if not isinstance(enum, list) or not enum:
                raise MalformedSchemaNode("enum must be a non-empty list")
            return enum[0]
        return PLACEHOLDER

    if schema_type in ("integer", "number"):
        minimum = schema.get("minimum")
        if isinstance(minimum, (int, float)) and not isinstance(minimum, bool):
            return minimum
        return 1 if schema_type == "integer" else 1.0

    if schema_type == "boolean":
        return True

    return PLACEHOLDER


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False)
