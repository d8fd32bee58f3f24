from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, NewType, Optional, Tuple

from pigment.colors import Color, GradientMode

ComponentId = NewType("ComponentId", int)
PortId = NewType("PortId", int)


class ComponentKind(Enum):
    FACTORY = "factory"
    ADDER = "adder"
    GRADIENTOR = "gradientor"
    STORAGE = "storage"


class PortRole(Enum):
    INPUT = auto()
    OUTPUT = auto()
    FLEX = auto()


class PortSide(Enum):
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class PortRef:
    """
    Addresses a single port by its owning component and its own id.
    """

    component_id: ComponentId
    port_id: PortId


@dataclass
class Port:
    """
    A connection point owned by exactly one component.
    """

    id: PortId
    component_id: ComponentId
    role: PortRole
    title: str = ""
    side: PortSide = PortSide.RIGHT

    @property
    def ref(self) -> PortRef:
        return PortRef(self.component_id, self.id)


@dataclass
class Component:
    """
    A node on the factory grid. Only the payload matching ``kind`` is used:
    ``color`` for factories, ``mode`` for gradientors and ``storage_slots``
    for storage containers.
    """

    id: ComponentId
    kind: ComponentKind
    title: str
    ports: List[Port] = field(default_factory=list)
    color: Optional[Color] = None
    mode: Optional[GradientMode] = None
    storage_slots: Dict[PortId, Optional[Color]] = field(default_factory=dict)
    position: Tuple[float, float] = (0.0, 0.0)

    def get_port(self, port_id: PortId) -> Optional[Port]:
        for port in self.ports:
            if port.id == port_id:
                return port
        return None

    def ports_with_role(self, role: PortRole) -> List[Port]:
        return [port for port in self.ports if port.role == role]
