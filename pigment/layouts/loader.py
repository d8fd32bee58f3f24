from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from pigment.colors import Color, GradientMode
from pigment.nodes import (
    Component,
    ComponentGraph,
    ComponentKind,
    ConnectionResolver,
    PortRef,
)

logger = logging.getLogger(__name__)


class LayoutLoader:
    """
    Convert a grid to and from a plain ``dict`` layout.

    Components are keyed by a layout-local id and ports by their index on
    the component, so a layout can be loaded into any session.
    """

    VERSION = 1

    def export_layout(self, graph: ComponentGraph) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "version": self.VERSION,
            "components": [],
            "connections": [],
        }

        for component in graph.components():
            entry: Dict[str, Any] = {
                "id": str(component.id),
                "kind": component.kind.value,
                "title": component.title,
                "position": list(component.position),
            }
            if component.color is not None:
                entry["color"] = str(component.color)
            if component.mode is not None:
                entry["mode"] = component.mode.value
            data["components"].append(entry)

        for connection in graph.connections():
            source_index = _port_index(graph, connection.source)
            target_index = _port_index(graph, connection.target)
            if source_index is None or target_index is None:
                continue
            data["connections"].append(
                {
                    "source": str(connection.source.component_id),
                    "source_port": source_index,
                    "target": str(connection.target.component_id),
                    "target_port": target_index,
                }
            )

        return data

    def import_layout(
        self, graph: ComponentGraph, payload: Dict[str, Any]
    ) -> Tuple[Component, ...]:
        graph.clear()

        created: Dict[str, Component] = {}
        components_data: Iterable[Dict[str, Any]] = payload.get("components", [])
        for entry in components_data:
            if not isinstance(entry, dict):
                continue
            local_id = entry.get("id")
            kind_value = entry.get("kind")
            if not local_id or not kind_value:
                continue

            try:
                kind = ComponentKind(str(kind_value))
                color = Color.parse(entry["color"]) if entry.get("color") else None
            except ValueError as exc:
                logger.warning("Skipping layout component %r: %s", local_id, exc)
                continue

            mode = entry.get("mode")
            position = entry.get("position")
            if not _is_position(position):
                position = None

            created[str(local_id)] = graph.add_component(
                kind,
                color=color,
                mode=GradientMode.from_value(mode) if mode else None,
                title=entry.get("title") or None,
                position=position,
            )

        resolver = ConnectionResolver(graph)
        connections_data: Iterable[Dict[str, Any]] = payload.get("connections", [])
        for entry in connections_data:
            if not isinstance(entry, dict):
                continue
            source = _lookup_port(created, entry.get("source"), entry.get("source_port"))
            target = _lookup_port(created, entry.get("target"), entry.get("target_port"))
            if source is None or target is None:
                logger.debug("Skipping layout connection with unknown endpoint: %r", entry)
                continue

            connection = resolver.resolve(source, target)
            if connection is not None:
                graph.add_connection(connection)

        return tuple(created.values())


def _port_index(graph: ComponentGraph, ref: PortRef) -> Optional[int]:
    component = graph.get_component(ref.component_id)
    if component is None:
        return None
    for index, port in enumerate(component.ports):
        if port.id == ref.port_id:
            return index
    return None


def _is_position(value: Any) -> bool:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return False
    return all(
        isinstance(item, (int, float)) and not isinstance(item, bool) for item in value
    )


def _lookup_port(
    created: Dict[str, Component], local_id: Any, index: Any
) -> Optional[PortRef]:
    component = created.get(str(local_id))
    if component is None or not isinstance(index, int):
        return None
    if not 0 <= index < len(component.ports):
        return None
    return component.ports[index].ref
