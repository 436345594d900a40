"""Identifier conventions used when rendering SDK calls."""

import re

DEFAULT_API_CLASS = "DefaultApi"
DEFAULT_METHOD = "execute"


def api_class_name(tags: list[str]) -> str:
    """``["Widget Templates"]`` -> ``WidgetTemplatesApi``."""
    if tags:
        return re.sub(r"\s+", "", tags[0]) + "Api"
    return DEFAULT_API_CLASS


def snake_case(name: str) -> str:
    """``getAllWidgets`` -> ``get_all_widgets``."""
    return re.sub(r"^_", "", re.sub(r"([A-Z])", r"_\1", name).lower())


def pascal_case(name: str) -> str:
    """``getAllWidgets`` -> ``GetAllWidgets``."""
    return name[:1].upper() + name[1:]


def camel_case(name: str) -> str:
    """Operation ids are already camelCase."""
    return name


def camelize(name: str) -> str:
    """``widget_id`` / ``widget-id`` -> ``widgetId``."""
    return re.sub(r"[-_]([a-z])", lambda m: m.group(1).upper(), name)
