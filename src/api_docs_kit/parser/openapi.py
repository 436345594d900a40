"""OpenAPI document loading and traversal.

Documents are JSON; they are kept as plain dicts and walked path item by
path item. Every key of a path item except the shared ``parameters`` list
is treated as an operation.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from api_docs_kit.errors import MalformedSchemaNode, SpecFileNotFound

from .base import DEFAULT_ACCESS_LEVEL, Operation, Param

SHARED_PARAMETERS_KEY = "parameters"


def load_document(file_path: Path) -> dict:
    """Read and parse an OpenAPI JSON document."""
    if not file_path.is_file():
        raise SpecFileNotFound(f"File not found: {file_path}")
    doc = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(doc, dict):
        raise ValueError(f"{file_path}: expected a JSON object at the top level")
    return doc


def dump_document(doc: dict, file_path: Path) -> None:
    """Write a document back as 2-space indented JSON."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(json.dumps(doc, indent=2, ensure_ascii=False), encoding="utf-8")


def iter_operation_nodes(doc: dict) -> Iterator[tuple[str, str, dict, list]]:
    """Yield ``(path, method, operation_node, shared_parameters)`` for every operation."""
    paths = doc.get("paths") or {}
    if not isinstance(paths, dict):
        return

    for path, item in paths.items():
        if not isinstance(item, dict):
            continue
        shared = item.get(SHARED_PARAMETERS_KEY) or []
        if not isinstance(shared, list):
            shared = []

        for method, node in item.items():
            if method == SHARED_PARAMETERS_KEY or not isinstance(node, dict):
                continue
            yield path, method, node, shared


def parse_operation(
    path: str, method: str, node: dict, shared: list | None = None, document: dict | None = None
) -> Operation:
    """Build the read model for one operation node.

    Path-level shared parameters come first, followed by the operation's own.
    Parameters given as local ``$ref`` pointers are looked up in *document*.
    """
    own = node.get("parameters") or []
    if not isinstance(own, list):
        own = []

    tags = node.get("tags") or []
    operation_id = node.get("operationId")

    return Operation(
        path=path,
        method=method,
        operation_id=operation_id if isinstance(operation_id, str) and operation_id else None,
        tags=[t for t in tags if isinstance(t, str)] if isinstance(tags, list) else [],
        parameters=_parse_parameters([*(shared or []), *own], document),
        access_level=str(node.get("x-access-level") or DEFAULT_ACCESS_LEVEL),
    )


def parse_operations(doc: dict) -> list[Operation]:
    """Parse every operation of a document into read models."""
    return [parse_operation(*entry, document=doc) for entry in iter_operation_nodes(doc)]


def resolve_ref(ref: Any, document: dict | None) -> dict:
    """Follow a local ``#/...`` JSON pointer inside the loaded document."""
    if not isinstance(ref, str) or not ref.startswith("#/") or document is None:
        raise MalformedSchemaNode(f"cannot resolve $ref {ref!r}")
    node: Any = document
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            raise MalformedSchemaNode(f"dangling $ref {ref!r}")
        node = node[part]
    if not isinstance(node, dict):
        raise MalformedSchemaNode(f"$ref {ref!r} does not point at an object")
    return node


def _parse_parameters(params: list, document: dict | None = None) -> list[Param]:
    result = []
    for p in params:
        if isinstance(p, dict) and "$ref" in p:
            try:
                p = resolve_ref(p["$ref"], document)
            except MalformedSchemaNode:
                continue
        if not isinstance(p, dict) or not isinstance(p.get("name"), str):
            continue
        schema = p.get("schema")
        if isinstance(schema, dict) and "$ref" in schema:
            try:
                schema = resolve_ref(schema["$ref"], document)
            except MalformedSchemaNode:
                schema = {}
        if not isinstance(schema, dict):
            schema = {}
        param_type = schema.get("type")

        result.append(
            Param(
                name=p["name"],
                location=str(p.get("in", "query")),
                required=bool(p.get("required", False)),
                example=p.get("example"),
                param_type=param_type if isinstance(param_type, str) else None,
                schema_example=schema.get("example"),
            )
        )
    return result
