from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class LayoutPreset:
    id: str
    name: str
    description: str
    payload: Dict[str, object]


_PRIMARY_MIXER = LayoutPreset(
    id="primary-mixer",
    name="Primary Mixer",
    description="Mix red and blue into purple, store it, and brighten the stored color.",
    payload={
        "version": 1,
        "components": [
            {"id": "red", "kind": "factory", "color": "255,0,0", "position": (40, 40)},
            {"id": "blue", "kind": "factory", "color": "0,0,255", "position": (40, 260)},
            {"id": "adder", "kind": "adder", "position": (300, 150)},
            {"id": "store", "kind": "storage", "position": (540, 150)},
            {"id": "bright", "kind": "gradientor", "mode": "brighten", "position": (780, 150)},
        ],
        "connections": [
            {"source": "red", "source_port": 0, "target": "adder", "target_port": 0},
            {"source": "blue", "source_port": 0, "target": "adder", "target_port": 1},
            {"source": "adder", "source_port": 2, "target": "store", "target_port": 0},
            {"source": "store", "source_port": 0, "target": "bright", "target_port": 0},
        ],
    },
)

_SHADE_LADDER = LayoutPreset(
    id="shade-ladder",
    name="Shade Ladder",
    description="Darken yellow twice and keep the result in storage.",
    payload={
        "version": 1,
        "components": [
            {"id": "yellow", "kind": "factory", "color": "255,255,0", "position": (40, 120)},
            {"id": "dark_1", "kind": "gradientor", "mode": "darken", "position": (280, 120)},
            {"id": "dark_2", "kind": "gradientor", "mode": "darken", "position": (520, 120)},
            {"id": "store", "kind": "storage", "position": (760, 120)},
        ],
        "connections": [
            {"source": "yellow", "source_port": 0, "target": "dark_1", "target_port": 0},
            {"source": "dark_1", "source_port": 1, "target": "dark_2", "target_port": 0},
            {"source": "dark_2", "source_port": 1, "target": "store", "target_port": 0},
        ],
    },
)


def get_presets() -> Tuple[LayoutPreset, ...]:
    return (_PRIMARY_MIXER, _SHADE_LADDER)
