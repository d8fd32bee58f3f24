from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Union

from PySide6.QtCore import QObject, Signal

from pigment.colors import Color, GradientMode
from pigment.engine import ColorSnapshot, EngineSettings, PropagationEngine
from pigment.layouts import LayoutLoader, LayoutPreset
from pigment.nodes import (
    Component,
    ComponentGraph,
    ComponentId,
    ComponentKind,
    Connection,
    ConnectionResolver,
    PortRef,
    ToolbarItem,
)

logger = logging.getLogger(__name__)


class GridSession(QObject):
    """
    Own one factory grid and keep its colors current.

    Every topology change triggers a full recompute; the resulting
    ``ColorSnapshot`` replaces the previous one in a single assignment and is
    announced through ``colors_changed``.
    """

    component_added = Signal(object)
    component_removed = Signal(object)
    connections_changed = Signal()
    colors_changed = Signal(object)
    convergence_failed = Signal(int)
    selection_changed = Signal(object)

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._graph = ComponentGraph()
        self._resolver = ConnectionResolver(self._graph)
        self._engine = PropagationEngine(settings or EngineSettings.from_env())
        self._layouts = LayoutLoader()
        self._snapshot = ColorSnapshot()
        self._selected_port: Optional[PortRef] = None

    @property
    def graph(self) -> ComponentGraph:
        return self._graph

    @property
    def snapshot(self) -> ColorSnapshot:
        return self._snapshot

    @property
    def selected_port(self) -> Optional[PortRef]:
        return self._selected_port

    def create_component(
        self,
        kind: Union[ComponentKind, str],
        *,
        color: Union[Color, str, None] = None,
        mode: Union[GradientMode, str, None] = None,
        title: Optional[str] = None,
        position: Optional[Tuple[float, float]] = None,
    ) -> Optional[Component]:
        resolved_kind = _coerce_kind(kind)
        if resolved_kind is None:
            logger.warning("Unknown component kind %r", kind)
            return None

        if isinstance(color, str):
            color = Color.parse(color)
        component = self._graph.add_component(
            resolved_kind,
            color=color,
            mode=GradientMode.from_value(mode) if mode is not None else None,
            title=title,
            position=position,
        )
        logger.debug("Added %s component %s", resolved_kind.value, component.id)
        self.component_added.emit(component)
        self.recompute()
        return component

    def add_from_toolbar(self, item: ToolbarItem, **extra: Any) -> Optional[Component]:
        options: Dict[str, Any] = item.options()
        options.update(extra)
        return self.create_component(item.kind, **options)

    def delete_component(self, component_id: ComponentId) -> bool:
        component = self._graph.get_component(component_id)
        if component is None:
            return False

        if self._selected_port is not None and self._selected_port.component_id == component_id:
            self.clear_selection()

        self._graph.remove_component(component_id)
        logger.debug("Removed component %s", component_id)
        self.component_removed.emit(component)
        self.connections_changed.emit()
        self.recompute()
        return True

    def try_connect(self, first: PortRef, second: PortRef) -> Optional[Connection]:
        connection = self._resolver.resolve(first, second)
        if connection is None:
            return None

        self._graph.add_connection(connection)
        self.connections_changed.emit()
        self.recompute()
        return connection

    def disconnect(self, connection: Connection) -> bool:
        if not self._graph.remove_connection(connection):
            return False
        self.connections_changed.emit()
        self.recompute()
        return True

    def click_port(self, ref: PortRef) -> Optional[Connection]:
        """
        Two-click linking: the first click selects a port, the second tries
        to link it with the first. Either way the selection is cleared after
        the second click.
        """

        if self._selected_port is None:
            if self._graph.get_port(ref) is None:
                return None
            self._selected_port = ref
            self.selection_changed.emit(ref)
            return None

        first = self._selected_port
        self.clear_selection()
        if first.component_id == ref.component_id:
            return None
        return self.try_connect(first, ref)

    def clear_selection(self) -> None:
        if self._selected_port is None:
            return
        self._selected_port = None
        self.selection_changed.emit(None)

    def move_component(self, component_id: ComponentId, x: float, y: float) -> None:
        # Position has no bearing on colors.
        self._graph.set_component_position(component_id, x, y)

    def recompute(self) -> ColorSnapshot:
        snapshot = self._engine.run(self._graph)
        self._snapshot = snapshot
        if not snapshot.converged:
            self.convergence_failed.emit(snapshot.rounds)
        self.colors_changed.emit(snapshot)
        return snapshot

    def reset_grid(self) -> None:
        self.clear_selection()
        removed = self._graph.components()
        self._graph.clear()
        for component in removed:
            self.component_removed.emit(component)
        self.connections_changed.emit()
        self.recompute()

    def load_preset(self, preset: LayoutPreset) -> Tuple[Component, ...]:
        return self.import_layout(preset.payload)

    def import_layout(self, payload: Dict[str, Any]) -> Tuple[Component, ...]:
        self.clear_selection()
        removed = self._graph.components()
        created = self._layouts.import_layout(self._graph, payload)
        for component in removed:
            self.component_removed.emit(component)
        for component in created:
            self.component_added.emit(component)
        self.connections_changed.emit()
        self.recompute()
        return created

    def export_layout(self) -> Dict[str, Any]:
        return self._layouts.export_layout(self._graph)


def _coerce_kind(kind: Union[ComponentKind, str]) -> Optional[ComponentKind]:
    if isinstance(kind, ComponentKind):
        return kind
    try:
        return ComponentKind(str(kind).strip().lower())
    except ValueError:
        return None
