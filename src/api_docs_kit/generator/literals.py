"""Render JSON-like example values as source literals of other languages."""

import json
from typing import Any

from pydantic import BaseModel


class LiteralStyle(BaseModel):
    """How one language spells maps, lists, booleans and null."""

    true: str = "true"
    false: str = "false"
    null: str = "null"
    map_open: str = "{"
    map_close: str = "}"
    pair: str = "{key}: {value}"
    list_open: str = "["
    list_close: str = "]"
    step: str = "  "
    trailing_comma: bool = False


JSON_LITERAL = LiteralStyle()
PYTHON_LITERAL = LiteralStyle(true="True", false="False", null="None", step="    ")
GO_LITERAL = LiteralStyle(
    null="nil",
    map_open="map[string]interface{}{",
    list_open="[]interface{}{",
    list_close="}",
    step="    ",
    trailing_comma=True,
)
RUBY_LITERAL = LiteralStyle(null="nil", pair="{key} => {value}")
PHP_LITERAL = LiteralStyle(map_open="[", map_close="]", pair="{key} => {value}", step="    ")
JAVA_LITERAL = LiteralStyle(
    map_open="Map.of(",
    map_close=")",
    pair="{key}, {value}",
    list_open="List.of(",
    list_close=")",
    step="    ",
)
CSHARP_LITERAL = LiteralStyle(
    map_open="new Dictionary<string, object> {",
    pair="[{key}] = {value}",
    list_open="new object[] {",
    list_close="}",
    step="    ",
)


def render_literal(value: Any, style: LiteralStyle, indent: str = "") -> str:
    """Render *value*; nested lines are indented relative to *indent*."""
    if value is None:
        return style.null
    if isinstance(value, bool):
        return style.true if value else style.false
    if isinstance(value, (str, int, float)):
        return json.dumps(value, ensure_ascii=False)

    inner = indent + style.step
    if isinstance(value, dict):
        items = [
            style.pair.format(key=json.dumps(str(k), ensure_ascii=False), value=render_literal(v, style, inner))
            for k, v in value.items()
        ]
        return _wrap(items, style.map_open, style.map_close, style, indent)
    if isinstance(value, (list, tuple)):
        items = [render_literal(v, style, inner) for v in value]
        return _wrap(items, style.list_open, style.list_close, style, indent)
    return json.dumps(str(value), ensure_ascii=False)


def _wrap(items: list[str], open_: str, close: str, style: LiteralStyle, indent: str) -> str:
    if not items:
        return open_ + close
    inner = indent + style.step
    body = (",\n" + inner).join(items)
    tail = "," if style.trailing_comma else ""
    return f"{open_}\n{inner}{body}{tail}\n{indent}{close}"
