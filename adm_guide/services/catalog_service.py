"""
Phase Catalog — the authoritative, ordered, read-only list of ADM phases.

The catalog is built once at import time from adm_guide.data.adm_phases
and never mutated afterwards. Every record is a frozen dataclass and every
sequence is a tuple, so handing a Phase to a caller can never affect a
later lookup.

Lookups never raise: an unknown id or code resolves to None and the
caller (blueprint layer) decides how to present "not found".

Functions:
    - get_phase_by_id:         Phase for an id, or None
    - get_phase_by_code:       First Phase carrying a display code, or None
    - get_all_phases:          All phases in canonical order
    - get_phase_navigation:    {prev, next} neighbours by catalog position
    - get_phase_index:         Canonical position of a phase id, or None
    - get_step / iter_steps:   Catalog-wide step lookup
    - total_step_count:        Sum of all phases' step counts
    - list_all_deliverables:   Flattened deliverables annotated with phase
    - list_all_artifacts:      Flattened artifacts annotated with phase
    - group_artifacts_by_type: Artifacts split into catalog / matrix / diagram
    - catalog_stats:           Totals for the landing page
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from adm_guide.data.adm_phases import ADM_PHASES

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════════════════
# Enums & Data Classes
# ═════════════════════════════════════════════════════════════════════════════


class ArtifactType(str, Enum):
    CATALOG = "catalog"
    MATRIX = "matrix"
    DIAGRAM = "diagram"


@dataclass(frozen=True)
class Step:
    """One ordered action within a phase."""
    id: str
    name: str
    description: str
    tips: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "tips": list(self.tips),
        }


@dataclass(frozen=True)
class Deliverable:
    """A named output document, flagged required or optional."""
    id: str
    name: str
    description: str
    required: bool
    template: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "required": self.required,
            "template": self.template,
        }


@dataclass(frozen=True)
class Artifact:
    """A catalog, matrix or diagram produced during a phase."""
    id: str
    name: str
    type: ArtifactType
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class Phase:
    id: str
    code: str
    name: str
    full_name: str
    description: str
    objectives: tuple[str, ...]
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    steps: tuple[Step, ...]
    deliverables: tuple[Deliverable, ...]
    artifacts: tuple[Artifact, ...]
    key_questions: tuple[str, ...]
    stakeholder_focus: tuple[str, ...]
    tips: tuple[str, ...]

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def to_summary(self) -> dict:
        """Compact form used for lists and prev/next links."""
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "full_name": self.full_name,
            "description": self.description,
            "step_count": len(self.steps),
            "deliverable_count": len(self.deliverables),
            "artifact_count": len(self.artifacts),
        }

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "full_name": self.full_name,
            "description": self.description,
            "objectives": list(self.objectives),
            "inputs": list(self.inputs),
            "outputs": list(self.outputs),
            "steps": [s.to_dict() for s in self.steps],
            "deliverables": [d.to_dict() for d in self.deliverables],
            "artifacts": [a.to_dict() for a in self.artifacts],
            "key_questions": list(self.key_questions),
            "stakeholder_focus": list(self.stakeholder_focus),
            "tips": list(self.tips),
        }


# ═════════════════════════════════════════════════════════════════════════════
# Catalog loading
# ═════════════════════════════════════════════════════════════════════════════


def _unique_ids(records, scope: str) -> None:
    seen: set[str] = set()
    for rec in records:
        if rec.id in seen:
            raise ValueError(f"Duplicate id {rec.id!r} in {scope}")
        seen.add(rec.id)


def _build_phase(data: dict) -> Phase:
    steps = tuple(
        Step(
            id=s["id"],
            name=s["name"],
            description=s["description"],
            tips=tuple(s.get("tips", ())),
        )
        for s in data["steps"]
    )
    deliverables = tuple(
        Deliverable(
            id=d["id"],
            name=d["name"],
            description=d["description"],
            required=bool(d["required"]),
            template=d.get("template"),
        )
        for d in data["deliverables"]
    )
    artifacts = tuple(
        Artifact(
            id=a["id"],
            name=a["name"],
            type=ArtifactType(a["type"]),
            description=a["description"],
        )
        for a in data["artifacts"]
    )
    phase = Phase(
        id=data["id"],
        code=data["code"],
        name=data["name"],
        full_name=data["full_name"],
        description=data["description"],
        objectives=tuple(data["objectives"]),
        inputs=tuple(data["inputs"]),
        outputs=tuple(data["outputs"]),
        steps=steps,
        deliverables=deliverables,
        artifacts=artifacts,
        key_questions=tuple(data["key_questions"]),
        stakeholder_focus=tuple(data["stakeholder_focus"]),
        tips=tuple(data["tips"]),
    )
    if not phase.steps:
        raise ValueError(f"Phase {phase.id!r} has no steps")
    _unique_ids(phase.steps, f"{phase.id}.steps")
    _unique_ids(phase.deliverables, f"{phase.id}.deliverables")
    _unique_ids(phase.artifacts, f"{phase.id}.artifacts")
    return phase


def load_catalog(records: list[dict]) -> tuple[Phase, ...]:
    """Build and validate an immutable phase sequence from raw records.

    Raises:
        ValueError: On an empty phase step list or any duplicate id
                    (phase ids, ids within a phase, or step ids across
                    the whole catalog).
    """
    phases = tuple(_build_phase(r) for r in records)
    _unique_ids(phases, "catalog")
    _unique_ids([s for p in phases for s in p.steps], "catalog steps")
    return phases


_PHASES: tuple[Phase, ...] = load_catalog(ADM_PHASES)
_INDEX_BY_ID: dict[str, int] = {p.id: i for i, p in enumerate(_PHASES)}
_STEPS_BY_ID: dict[str, tuple[Phase, Step]] = {
    s.id: (p, s) for p in _PHASES for s in p.steps
}
logger.debug("ADM catalog loaded: %d phases, %d steps", len(_PHASES), len(_STEPS_BY_ID))


# ═════════════════════════════════════════════════════════════════════════════
# Lookups
# ═════════════════════════════════════════════════════════════════════════════


def get_phase_by_id(phase_id: str) -> Phase | None:
    for phase in _PHASES:
        if phase.id == phase_id:
            return phase
    return None


def get_phase_by_code(code: str) -> Phase | None:
    """Return the first phase whose display code matches, or None.

    Codes are unique by convention only ("C-IS" / "C-App"); a later
    phase sharing a code with an earlier one is unreachable here.
    """
    for phase in _PHASES:
        if phase.code == code:
            return phase
    return None


def get_all_phases() -> tuple[Phase, ...]:
    return _PHASES


def get_phase_index(phase_id: str) -> int | None:
    return _INDEX_BY_ID.get(phase_id)


def get_phase_navigation(phase_id: str) -> dict[str, Phase | None]:
    """Return the catalog neighbours of a phase.

    Both entries are None for an unknown id. Pure function of catalog
    position; wizard state plays no part.
    """
    index = _INDEX_BY_ID.get(phase_id)
    if index is None:
        return {"prev": None, "next": None}
    return {
        "prev": _PHASES[index - 1] if index > 0 else None,
        "next": _PHASES[index + 1] if index < len(_PHASES) - 1 else None,
    }


def iter_steps() -> Iterator[tuple[Phase, Step]]:
    """Yield (phase, step) pairs in traversal order."""
    for phase in _PHASES:
        for step in phase.steps:
            yield phase, step


def get_step(step_id: str) -> Step | None:
    found = _STEPS_BY_ID.get(step_id)
    return found[1] if found else None


def total_step_count() -> int:
    return len(_STEPS_BY_ID)


# ═════════════════════════════════════════════════════════════════════════════
# Flattened views (artifacts & deliverables pages)
# ═════════════════════════════════════════════════════════════════════════════


def _phase_ref(phase: Phase) -> dict:
    return {"phase_id": phase.id, "phase_code": phase.code, "phase_name": phase.name}


def list_all_deliverables(required: bool | None = None) -> list[dict]:
    """Every deliverable in catalog order, annotated with its owning phase."""
    items = []
    for phase in _PHASES:
        for d in phase.deliverables:
            if required is not None and d.required is not required:
                continue
            items.append({**d.to_dict(), **_phase_ref(phase)})
    return items


def list_all_artifacts(artifact_type: ArtifactType | str | None = None) -> list[dict]:
    """Every artifact in catalog order, optionally filtered by type.

    Raises:
        ValueError: If artifact_type is not a valid ArtifactType value.
    """
    wanted = ArtifactType(artifact_type) if artifact_type is not None else None
    items = []
    for phase in _PHASES:
        for a in phase.artifacts:
            if wanted is not None and a.type is not wanted:
                continue
            items.append({**a.to_dict(), **_phase_ref(phase)})
    return items


def group_artifacts_by_type() -> dict[str, list[dict]]:
    groups: dict[str, list[dict]] = {t.value: [] for t in ArtifactType}
    for item in list_all_artifacts():
        groups[item["type"]].append(item)
    return groups


def catalog_stats() -> dict:
    return {
        "phases": len(_PHASES),
        "steps": total_step_count(),
        "deliverables": sum(len(p.deliverables) for p in _PHASES),
        "artifacts": sum(len(p.artifacts) for p in _PHASES),
    }
