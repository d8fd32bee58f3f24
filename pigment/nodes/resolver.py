from __future__ import annotations

import logging
from typing import Optional, Tuple

from .base import ComponentKind, Port, PortRef, PortRole
from .graph import ComponentGraph, Connection

logger = logging.getLogger(__name__)

_FAN_OUT_KINDS = (ComponentKind.ADDER, ComponentKind.GRADIENTOR)


class ConnectionResolver:
    """
    Decide whether two user-selected ports may be linked and in which
    direction. Selection order only matters for flex-to-flex links.
    """

    def __init__(self, graph: ComponentGraph) -> None:
        self._graph = graph

    def resolve(self, first: PortRef, second: PortRef) -> Optional[Connection]:
        connection, reason = self.can_connect(first, second)
        if connection is None:
            logger.debug("Rejected link %s -> %s: %s", first, second, reason)
        return connection

    def can_connect(
        self, first: PortRef, second: PortRef
    ) -> Tuple[Optional[Connection], Optional[str]]:
        if first.component_id == second.component_id:
            return None, "Cannot connect a component to itself."

        first_port = self._graph.get_port(first)
        second_port = self._graph.get_port(second)
        if first_port is None or second_port is None:
            return None, "One of the ports does not exist."

        oriented = self._orient(first_port, second_port)
        if oriented is None:
            return None, (
                f"Cannot link {first_port.role.name.lower()} to "
                f"{second_port.role.name.lower()}."
            )
        source, target = oriented

        if self._graph.has_connection(source.ref, target.ref):
            return None, "Connection already exists."
        if self._graph.is_target(target.ref):
            return None, "Target port already has an incoming connection."
        if not self._can_send(source):
            return None, "Source port already feeds another port."

        return Connection(source.ref, target.ref), None

    def _orient(self, first: Port, second: Port) -> Optional[Tuple[Port, Port]]:
        roles = (first.role, second.role)
        if roles in ((PortRole.OUTPUT, PortRole.INPUT), (PortRole.OUTPUT, PortRole.FLEX)):
            return first, second
        if roles in ((PortRole.INPUT, PortRole.OUTPUT), (PortRole.FLEX, PortRole.OUTPUT)):
            return second, first
        if roles == (PortRole.FLEX, PortRole.INPUT):
            return first, second
        if roles == (PortRole.INPUT, PortRole.FLEX):
            return second, first
        if roles == (PortRole.FLEX, PortRole.FLEX):
            return first, second
        return None

    def _can_send(self, source: Port) -> bool:
        if source.role is PortRole.OUTPUT:
            component = self._graph.get_component(source.component_id)
            if component is not None and component.kind in _FAN_OUT_KINDS:
                return True
        return not self._graph.is_source(source.ref)
