"""
Phase Wheel Layout — positions of the ADM phases on the circular diagram.

The ring phases sit on a circle at fixed angles (one table entry per ring
position, -90° to 234° in 36° steps). The cross-cutting Requirements
Management phase is drawn at the literal center. All functions here are
pure and deterministic: same inputs, bit-identical coordinates.

Usage:
    from adm_guide.services import wheel_service

    wheel = wheel_service.build_wheel(radius=140, center=(180, 180))
    node = wheel_service.hit_test(wheel_service.wheel_nodes(), 180, 40)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from adm_guide.services import catalog_service
from adm_guide.services.catalog_service import Phase

DEFAULT_RADIUS = 140.0
DEFAULT_CENTER = (180.0, 180.0)

RING_NODE_RADIUS = 26.0
CENTER_NODE_RADIUS = 42.0
CENTER_COLOR = "#00BCD4"


@dataclass(frozen=True)
class WheelSlot:
    phase_id: str
    label: str
    angle: float
    color: str


# Ring positions in cycle order. Both Phase C variants are labelled "C".
WHEEL_SLOTS: tuple[WheelSlot, ...] = (
    WheelSlot("preliminary", "P", -90, "#1A2B48"),
    WheelSlot("phase-a", "A", -54, "#1E3A5F"),
    WheelSlot("phase-b", "B", -18, "#2563EB"),
    WheelSlot("phase-c-is", "C", 18, "#3B82F6"),
    WheelSlot("phase-c-app", "C", 54, "#0EA5E9"),
    WheelSlot("phase-d", "D", 90, "#00BCD4"),
    WheelSlot("phase-e", "E", 126, "#14B8A6"),
    WheelSlot("phase-f", "F", 162, "#10B981"),
    WheelSlot("phase-g", "G", 198, "#D4AF37"),
    WheelSlot("phase-h", "H", 234, "#F59E0B"),
)
_SLOTS_BY_ID = {slot.phase_id: slot for slot in WHEEL_SLOTS}


@dataclass(frozen=True)
class WheelNode:
    phase_id: str
    label: str
    x: float
    y: float
    angle: float | None
    color: str
    node_radius: float

    def to_dict(self) -> dict:
        return {
            "phase_id": self.phase_id,
            "label": self.label,
            "x": self.x,
            "y": self.y,
            "angle": self.angle,
            "color": self.color,
            "node_radius": self.node_radius,
        }


def layout(
    phases: Sequence[Phase],
    radius: float = DEFAULT_RADIUS,
    center: tuple[float, float] = DEFAULT_CENTER,
) -> list[WheelNode]:
    """Place each ring phase on the circle.

    The i-th phase takes the i-th angle of WHEEL_SLOTS; label and color
    come from the slot registered for that phase id, falling back to the
    phase code and the slot color at that position.

    Raises:
        ValueError: If there are more phases than ring positions.
    """
    if len(phases) > len(WHEEL_SLOTS):
        raise ValueError(
            f"Wheel has {len(WHEEL_SLOTS)} ring positions, got {len(phases)} phases"
        )
    cx, cy = center
    nodes = []
    for position, phase in enumerate(phases):
        angle = WHEEL_SLOTS[position].angle
        slot = _SLOTS_BY_ID.get(phase.id, WHEEL_SLOTS[position])
        rad = math.radians(angle)
        nodes.append(WheelNode(
            phase_id=phase.id,
            label=slot.label if phase.id in _SLOTS_BY_ID else phase.code,
            x=cx + radius * math.cos(rad),
            y=cy + radius * math.sin(rad),
            angle=angle,
            color=slot.color,
            node_radius=RING_NODE_RADIUS,
        ))
    return nodes


def center_node(phase: Phase, center: tuple[float, float] = DEFAULT_CENTER) -> WheelNode:
    cx, cy = center
    return WheelNode(
        phase_id=phase.id,
        label=phase.name,
        x=cx,
        y=cy,
        angle=None,
        color=CENTER_COLOR,
        node_radius=CENTER_NODE_RADIUS,
    )


def wheel_nodes(
    radius: float = DEFAULT_RADIUS,
    center: tuple[float, float] = DEFAULT_CENTER,
) -> list[WheelNode]:
    """Ring nodes for every catalog phase but the last, then the center node."""
    phases = catalog_service.get_all_phases()
    return [*layout(phases[:-1], radius, center), center_node(phases[-1], center)]


def build_wheel(
    radius: float = DEFAULT_RADIUS,
    center: tuple[float, float] = DEFAULT_CENTER,
) -> dict:
    nodes = wheel_nodes(radius, center)
    return {
        "radius": radius,
        "center": {"x": center[0], "y": center[1]},
        "ring": [n.to_dict() for n in nodes[:-1]],
        "center_node": nodes[-1].to_dict(),
    }


def hit_test(nodes: Sequence[WheelNode], x: float, y: float) -> WheelNode | None:
    """Return the node whose circle contains (x, y), nearest center first."""
    best = None
    best_dist = math.inf
    for node in nodes:
        dist = math.hypot(x - node.x, y - node.y)
        if dist <= node.node_radius and dist < best_dist:
            best, best_dist = node, dist
    return best


def phase_detail(phase_id: str) -> dict | None:
    """Hover panel for a phase, or None for an unknown id."""
    phase = catalog_service.get_phase_by_id(phase_id)
    if phase is None:
        return None
    slot = _SLOTS_BY_ID.get(phase_id)
    return {
        "id": phase.id,
        "code": phase.code,
        "name": phase.name,
        "full_name": phase.full_name,
        "description": phase.description,
        "color": slot.color if slot else CENTER_COLOR,
        "step_count": len(phase.steps),
        "deliverable_count": len(phase.deliverables),
        "artifact_count": len(phase.artifacts),
    }
