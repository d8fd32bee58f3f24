from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pigment.colors import Color, GradientMode

from .base import Component, ComponentId, ComponentKind, Port, PortId, PortRef
from .builtin import get_component_template


@dataclass(frozen=True)
class Connection:
    """
    A directed link: ``source`` supplies the color that ``target`` receives.
    """

    source: PortRef
    target: PortRef

    def touches(self, component_id: ComponentId) -> bool:
        return component_id in (self.source.component_id, self.target.component_id)


class ComponentGraph:
    """
    In-memory store of grid components and the connections between their
    ports. Holds no evaluation logic.
    """

    def __init__(self) -> None:
        self._components: Dict[ComponentId, Component] = {}
        self._connections: List[Connection] = []
        self._component_ids = itertools.count(1)
        self._port_ids = itertools.count(1)

    def add_component(
        self,
        kind: ComponentKind,
        *,
        color: Optional[Color] = None,
        mode: Optional[GradientMode] = None,
        title: Optional[str] = None,
        position: Optional[Tuple[float, float]] = None,
    ) -> Component:
        template = get_component_template(kind)
        component = template.instantiate(
            ComponentId(next(self._component_ids)),
            lambda: PortId(next(self._port_ids)),
            color=color,
            mode=mode,
            title=title,
        )
        if position is not None:
            component.position = (float(position[0]), float(position[1]))
        self._components[component.id] = component
        return component

    def remove_component(self, component_id: ComponentId) -> bool:
        if self._components.pop(component_id, None) is None:
            return False
        self._connections = [
            connection
            for connection in self._connections
            if not connection.touches(component_id)
        ]
        return True

    def get_component(self, component_id: ComponentId) -> Optional[Component]:
        return self._components.get(component_id)

    def get_port(self, ref: PortRef) -> Optional[Port]:
        component = self._components.get(ref.component_id)
        if component is None:
            return None
        return component.get_port(ref.port_id)

    def components(self) -> Tuple[Component, ...]:
        return tuple(self._components.values())

    def components_of_kind(self, kind: ComponentKind) -> Tuple[Component, ...]:
        return tuple(
            component
            for component in self._components.values()
            if component.kind is kind
        )

    def set_component_position(self, component_id: ComponentId, x: float, y: float) -> None:
        component = self._components.get(component_id)
        if component is not None:
            component.position = (float(x), float(y))

    def add_connection(self, connection: Connection) -> None:
        """
        Store an already-validated connection. Use ``ConnectionResolver`` to
        validate user-selected ports first.
        """

        self._connections.append(connection)

    def remove_connection(self, connection: Connection) -> bool:
        remaining = [existing for existing in self._connections if existing != connection]
        removed = len(remaining) != len(self._connections)
        self._connections = remaining
        return removed

    def has_connection(self, source: PortRef, target: PortRef) -> bool:
        return Connection(source, target) in self._connections

    def connections(self) -> Tuple[Connection, ...]:
        return tuple(self._connections)

    def connections_from(
        self, component_id: ComponentId, port_id: Optional[PortId] = None
    ) -> Tuple[Connection, ...]:
        return tuple(
            connection
            for connection in self._connections
            if connection.source.component_id == component_id
            and (port_id is None or connection.source.port_id == port_id)
        )

    def connections_to(
        self, component_id: ComponentId, port_id: Optional[PortId] = None
    ) -> Tuple[Connection, ...]:
        return tuple(
            connection
            for connection in self._connections
            if connection.target.component_id == component_id
            and (port_id is None or connection.target.port_id == port_id)
        )

    def incoming_connection(self, ref: PortRef) -> Optional[Connection]:
        for connection in self._connections:
            if connection.target == ref:
                return connection
        return None

    def is_source(self, ref: PortRef) -> bool:
        return any(connection.source == ref for connection in self._connections)

    def is_target(self, ref: PortRef) -> bool:
        return self.incoming_connection(ref) is not None

    def is_empty(self) -> bool:
        return not self._components

    def clear(self) -> None:
        self._components.clear()
        self._connections.clear()
