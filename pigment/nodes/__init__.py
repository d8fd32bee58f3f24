""
"Grid component graph primitives and utilities."
""

from .base import (
    Component,
    ComponentId,
    ComponentKind,
    Port,
    PortId,
    PortRef,
    PortRole,
    PortSide,
)
from .builtin import (
    ComponentTemplate,
    ToolbarItem,
    component_label,
    get_component_template,
    get_component_templates,
    get_toolbar_items,
)
from .graph import ComponentGraph, Connection
from .resolver import ConnectionResolver

__all__ = [
    "Component",
    "ComponentGraph",
    "ComponentId",
    "ComponentKind",
    "ComponentTemplate",
    "Connection",
    "ConnectionResolver",
    "Port",
    "PortId",
    "PortRef",
    "PortRole",
    "PortSide",
    "ToolbarItem",
    "component_label",
    "get_component_template",
    "get_component_templates",
    "get_toolbar_items",
]
