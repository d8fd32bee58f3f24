from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from pigment.colors import Color, GradientMode
from pigment.colors.color import BLUE, RED, YELLOW

from .base import Component, ComponentId, ComponentKind, Port, PortId, PortRole, PortSide


@dataclass(frozen=True)
class ComponentTemplate:
    """
    Describes how to instantiate a grid component with its ports.
    """

    kind: ComponentKind
    title: str
    description: str
    ports: Sequence[Tuple[str, PortRole, PortSide]] = field(default_factory=list)

    def instantiate(
        self,
        component_id: ComponentId,
        next_port_id: Callable[[], PortId],
        *,
        color: Optional[Color] = None,
        mode: Optional[GradientMode] = None,
        title: Optional[str] = None,
    ) -> Component:
        component = Component(
            id=component_id,
            kind=self.kind,
            title=self.title,
            ports=[
                Port(
                    id=next_port_id(),
                    component_id=component_id,
                    role=role,
                    title=port_title,
                    side=side,
                )
                for port_title, role, side in self.ports
            ],
        )
        if self.kind is ComponentKind.FACTORY:
            component.color = color
        elif self.kind is ComponentKind.GRADIENTOR:
            component.mode = mode or GradientMode.BRIGHTEN
        elif self.kind is ComponentKind.STORAGE:
            component.storage_slots = {port.id: None for port in component.ports}
        component.title = title or component_label(component)
        return component


_TEMPLATES: List[ComponentTemplate] = [
    ComponentTemplate(
        kind=ComponentKind.FACTORY,
        title="Factory",
        description="Outputs carry base color",
        ports=[
            (f"Output {index + 1}", PortRole.OUTPUT, PortSide.RIGHT)
            for index in range(4)
        ],
    ),
    ComponentTemplate(
        kind=ComponentKind.ADDER,
        title="Adder",
        description="Mixes two input colors into one output.",
        ports=[
            ("Input A", PortRole.INPUT, PortSide.LEFT),
            ("Input B", PortRole.INPUT, PortSide.LEFT),
            ("Mixed Output", PortRole.OUTPUT, PortSide.RIGHT),
        ],
    ),
    ComponentTemplate(
        kind=ComponentKind.GRADIENTOR,
        title="Gradientor",
        description="Brightens or darkens the incoming color.",
        ports=[
            ("Color In", PortRole.INPUT, PortSide.LEFT),
            ("Adjusted Out", PortRole.OUTPUT, PortSide.RIGHT),
        ],
    ),
    ComponentTemplate(
        kind=ComponentKind.STORAGE,
        title="Storage",
        description="Store or forward",
        ports=[
            (f"Port {index + 1}", PortRole.FLEX, PortSide.LEFT if index < 3 else PortSide.RIGHT)
            for index in range(6)
        ],
    ),
]

_TEMPLATE_MAP: Dict[ComponentKind, ComponentTemplate] = {
    template.kind: template for template in _TEMPLATES
}

_FACTORY_NAMES: Dict[Color, str] = {
    RED: "Red Factory",
    YELLOW: "Yellow Factory",
    BLUE: "Blue Factory",
}


def get_component_templates() -> Iterable[ComponentTemplate]:
    return tuple(_TEMPLATES)


def get_component_template(kind: ComponentKind) -> ComponentTemplate:
    """
    Look up the template for a component kind.
    """

    return _TEMPLATE_MAP[kind]


def component_label(component: Component) -> str:
    if component.kind is ComponentKind.FACTORY:
        if component.color is None:
            return "Factory"
        return _FACTORY_NAMES.get(component.color, "Mixed Factory")
    if component.kind is ComponentKind.ADDER:
        return "Adder (mix 2 → 1)"
    if component.kind is ComponentKind.GRADIENTOR:
        return "Darkener" if component.mode is GradientMode.DARKEN else "Brightener"
    if component.kind is ComponentKind.STORAGE:
        return "Storage Container"
    return "Component"


@dataclass(frozen=True)
class ToolbarItem:
    """
    One add-to-grid button. ``color`` keeps the ``"r,g,b"`` form the view
    layer stores on the button.
    """

    label: str
    kind: ComponentKind
    color: Optional[str] = None
    mode: Optional[str] = None

    def options(self) -> Dict[str, object]:
        options: Dict[str, object] = {}
        if self.color is not None:
            options["color"] = Color.parse(self.color)
        if self.mode is not None:
            options["mode"] = GradientMode.from_value(self.mode)
        return options


_TOOLBAR: Tuple[ToolbarItem, ...] = (
    ToolbarItem("Red", ComponentKind.FACTORY, color="255,0,0"),
    ToolbarItem("Yellow", ComponentKind.FACTORY, color="255,255,0"),
    ToolbarItem("Blue", ComponentKind.FACTORY, color="0,0,255"),
    ToolbarItem("Adder", ComponentKind.ADDER),
    ToolbarItem("Brighten", ComponentKind.GRADIENTOR, mode="lighten"),
    ToolbarItem("Darken", ComponentKind.GRADIENTOR, mode="darken"),
    ToolbarItem("Storage", ComponentKind.STORAGE),
)


def get_toolbar_items() -> Tuple[ToolbarItem, ...]:
    return _TOOLBAR
