from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from pigment.colors import Color, GradientMode, adjust_color, mix_colors
from pigment.nodes import (
    Component,
    ComponentGraph,
    ComponentId,
    ComponentKind,
    PortId,
    PortRef,
    PortRole,
)

from .settings import EngineSettings

logger = logging.getLogger(__name__)

PortColors = Dict[PortRef, Optional[Color]]
HeldSlots = Dict[ComponentId, Dict[PortId, Optional[Color]]]


@dataclass(frozen=True)
class ColorSnapshot:
    """
    Result of one propagation run, shaped for the view layer.
    """

    port_colors: PortColors = field(default_factory=dict)
    port_highlights: PortColors = field(default_factory=dict)
    component_colors: Dict[ComponentId, Optional[Color]] = field(default_factory=dict)
    storage_warnings: Dict[ComponentId, bool] = field(default_factory=dict)
    storage_inventory: Dict[ComponentId, Tuple[Tuple[str, Optional[Color]], ...]] = field(
        default_factory=dict
    )
    rounds: int = 0
    converged: bool = True

    def has_color(self, ref: PortRef) -> bool:
        return self.port_highlights.get(ref) is not None


class PropagationEngine:
    """
    Evaluate the color at every port by repeated full passes over the graph
    until a pass changes nothing or the round budget runs out.

    Storage containers are the only stateful components. Their slots are
    updated on a working copy and written back once the run finishes.
    """

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self._settings = settings or EngineSettings()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def run(self, graph: ComponentGraph) -> ColorSnapshot:
        components = graph.components()
        incoming: Dict[PortRef, PortRef] = {
            connection.target: connection.source for connection in graph.connections()
        }
        held: HeldSlots = {
            component.id: dict(component.storage_slots)
            for component in components
            if component.kind is ComponentKind.STORAGE
        }
        outputs: PortColors = {}

        rounds = 0
        changed = True
        while changed and rounds < self._settings.max_rounds:
            changed = False
            rounds += 1
            for component in components:
                if self._evaluate(component, incoming, outputs, held):
                    changed = True

        converged = not changed
        if not converged:
            logger.warning(
                "Color propagation did not settle within %d rounds; using the last pass.",
                rounds,
            )

        for component in components:
            if component.id in held:
                component.storage_slots = held[component.id]

        return self._build_snapshot(graph, incoming, outputs, rounds, converged)

    def _evaluate(
        self,
        component: Component,
        incoming: Dict[PortRef, PortRef],
        outputs: PortColors,
        held: HeldSlots,
    ) -> bool:
        kind = component.kind
        if kind is ComponentKind.FACTORY:
            return self._emit_all(component, outputs, component.color)

        if kind is ComponentKind.ADDER:
            inputs = [
                _inbound_color(port.ref, incoming, outputs)
                for port in component.ports_with_role(PortRole.INPUT)
            ]
            mixed: Optional[Color] = None
            if len(inputs) >= 2 and inputs[0] is not None and inputs[1] is not None:
                mixed = mix_colors(inputs[0], inputs[1])
            return self._emit_all(component, outputs, mixed)

        if kind is ComponentKind.GRADIENTOR:
            input_ports = component.ports_with_role(PortRole.INPUT)
            inbound = (
                _inbound_color(input_ports[0].ref, incoming, outputs)
                if input_ports
                else None
            )
            mode = component.mode or GradientMode.BRIGHTEN
            adjusted = adjust_color(inbound, mode, self._factor_for(mode))
            return self._emit_all(component, outputs, adjusted)

        if kind is ComponentKind.STORAGE:
            return self._evaluate_storage(component, incoming, outputs, held[component.id])

        logger.debug("No evaluator for component kind %s", kind)
        return False

    def _evaluate_storage(
        self,
        component: Component,
        incoming: Dict[PortRef, PortRef],
        outputs: PortColors,
        slots: Dict[PortId, Optional[Color]],
    ) -> bool:
        changed = False
        flex_ports = component.ports_with_role(PortRole.FLEX)

        for port in flex_ports:
            if port.ref not in incoming:
                continue
            inbound = _inbound_color(port.ref, incoming, outputs)
            if slots.get(port.id) != inbound:
                slots[port.id] = inbound
                changed = True

        for port in flex_ports:
            if _set_output(outputs, port.ref, slots.get(port.id)):
                changed = True

        return changed

    def _emit_all(
        self, component: Component, outputs: PortColors, color: Optional[Color]
    ) -> bool:
        changed = False
        for port in component.ports_with_role(PortRole.OUTPUT):
            if _set_output(outputs, port.ref, color):
                changed = True
        return changed

    def _factor_for(self, mode: GradientMode) -> float:
        if mode is GradientMode.DARKEN:
            return self._settings.darken_factor
        return self._settings.brighten_factor

    def _build_snapshot(
        self,
        graph: ComponentGraph,
        incoming: Dict[PortRef, PortRef],
        outputs: PortColors,
        rounds: int,
        converged: bool,
    ) -> ColorSnapshot:
        port_colors: PortColors = {}
        port_highlights: PortColors = {}
        component_colors: Dict[ComponentId, Optional[Color]] = {}
        storage_warnings: Dict[ComponentId, bool] = {}
        storage_inventory: Dict[ComponentId, Tuple[Tuple[str, Optional[Color]], ...]] = {}

        for component in graph.components():
            is_storage = component.kind is ComponentKind.STORAGE

            for port in component.ports:
                ref = port.ref
                emitted = outputs.get(ref)
                if port.role is not PortRole.INPUT:
                    port_colors[ref] = emitted
                stored = component.storage_slots.get(port.id) if is_storage else None
                port_highlights[ref] = (
                    stored or _inbound_color(ref, incoming, outputs) or emitted
                )

            component_colors[component.id] = _display_color(component, outputs)

            if is_storage:
                has_inbound = bool(graph.connections_to(component.id))
                has_outbound = bool(graph.connections_from(component.id))
                storage_warnings[component.id] = not (has_inbound and has_outbound)
                storage_inventory[component.id] = tuple(
                    (port.title, component.storage_slots.get(port.id))
                    for port in component.ports_with_role(PortRole.FLEX)
                )

        return ColorSnapshot(
            port_colors=port_colors,
            port_highlights=port_highlights,
            component_colors=component_colors,
            storage_warnings=storage_warnings,
            storage_inventory=storage_inventory,
            rounds=rounds,
            converged=converged,
        )


def _set_output(outputs: PortColors, ref: PortRef, color: Optional[Color]) -> bool:
    if outputs.get(ref) == color:
        return False
    outputs[ref] = color
    return True


def _inbound_color(
    ref: PortRef, incoming: Dict[PortRef, PortRef], outputs: PortColors
) -> Optional[Color]:
    source = incoming.get(ref)
    if source is None:
        return None
    return outputs.get(source)


def _display_color(component: Component, outputs: PortColors) -> Optional[Color]:
    if component.kind is ComponentKind.FACTORY:
        return component.color
    if component.kind in (ComponentKind.ADDER, ComponentKind.GRADIENTOR):
        output_ports = component.ports_with_role(PortRole.OUTPUT)
        return outputs.get(output_ports[0].ref) if output_ports else None
    if component.kind is ComponentKind.STORAGE:
        for port in component.ports:
            stored = component.storage_slots.get(port.id)
            if stored is not None:
                return stored
    return None
