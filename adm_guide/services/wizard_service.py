"""
Wizard Navigation Service — guided walkthrough of the ADM phases.

Two layers live here:

1. **Pure commands** over an immutable WizardState. Each command takes a
   state (and optionally a phase sequence, defaulting to the catalog)
   and returns a new state. No Flask, no database.

       advance / retreat           one edge along the flattened
                                   (phase, step) path; no-op at the ends
       jump_to_phase / jump_to_step
                                   teleport; out-of-range index raises
                                   ValidationError, state untouched
       toggle_step_complete        add/remove a step id (involution)
       is_complete / progress_fraction / is_at_start / is_at_end

2. **Session persistence**: WizardSession rows hold one state each.
   Service functions load the row, apply a pure command, write the
   result back and commit. db.session.commit() happens only here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Sequence

from adm_guide.core.exceptions import NotFoundError, ValidationError
from adm_guide.models import db
from adm_guide.models.wizard import WizardSession
from adm_guide.services import catalog_service
from adm_guide.services.catalog_service import Phase

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════════════════
# State
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class WizardState:
    """Learner position plus completed step ids. Initial state is (0, 0, {})."""
    current_phase_index: int = 0
    current_step_index: int = 0
    completed_steps: frozenset[str] = field(default_factory=frozenset)


def _phases(phases: Sequence[Phase] | None) -> Sequence[Phase]:
    return catalog_service.get_all_phases() if phases is None else phases


# ═════════════════════════════════════════════════════════════════════════════
# Pure commands
# ═════════════════════════════════════════════════════════════════════════════


def is_at_start(state: WizardState) -> bool:
    return state.current_phase_index == 0 and state.current_step_index == 0


def is_at_end(state: WizardState, phases: Sequence[Phase] | None = None) -> bool:
    phases = _phases(phases)
    last_phase = len(phases) - 1
    return (
        state.current_phase_index == last_phase
        and state.current_step_index == phases[last_phase].step_count - 1
    )


def advance(state: WizardState, phases: Sequence[Phase] | None = None) -> WizardState:
    """Move one step forward, rolling over into the next phase.

    The last step of the last phase is terminal: advancing from it
    returns the state unchanged.
    """
    phases = _phases(phases)
    step_count = phases[state.current_phase_index].step_count
    if state.current_step_index < step_count - 1:
        return replace(state, current_step_index=state.current_step_index + 1)
    if state.current_phase_index < len(phases) - 1:
        return replace(
            state,
            current_phase_index=state.current_phase_index + 1,
            current_step_index=0,
        )
    return state


def retreat(state: WizardState, phases: Sequence[Phase] | None = None) -> WizardState:
    """Move one step back, landing on the last step of the previous phase
    when leaving the first step of a phase. No-op at the initial state."""
    phases = _phases(phases)
    if state.current_step_index > 0:
        return replace(state, current_step_index=state.current_step_index - 1)
    if state.current_phase_index > 0:
        prev_index = state.current_phase_index - 1
        return replace(
            state,
            current_phase_index=prev_index,
            current_step_index=phases[prev_index].step_count - 1,
        )
    return state


def jump_to_phase(
    state: WizardState, index: int, phases: Sequence[Phase] | None = None
) -> WizardState:
    """Jump to the first step of phase `index`.

    Out-of-range indexes are rejected, never clamped.

    Raises:
        ValidationError: If index is not in [0, phase count).
    """
    phases = _phases(phases)
    if not 0 <= index < len(phases):
        raise ValidationError(
            f"Phase index {index} is out of range.",
            details={"index": index, "max": len(phases) - 1},
        )
    return replace(state, current_phase_index=index, current_step_index=0)


def jump_to_step(
    state: WizardState, index: int, phases: Sequence[Phase] | None = None
) -> WizardState:
    """Jump to step `index` within the current phase.

    Raises:
        ValidationError: If index is not in [0, current phase step count).
    """
    phases = _phases(phases)
    step_count = phases[state.current_phase_index].step_count
    if not 0 <= index < step_count:
        raise ValidationError(
            f"Step index {index} is out of range.",
            details={"index": index, "max": step_count - 1},
        )
    return replace(state, current_step_index=index)


def toggle_step_complete(state: WizardState, step_id: str) -> WizardState:
    """Flip completion of any step, current or not."""
    if step_id in state.completed_steps:
        return replace(state, completed_steps=state.completed_steps - {step_id})
    return replace(state, completed_steps=state.completed_steps | {step_id})


def is_complete(state: WizardState, step_id: str) -> bool:
    return step_id in state.completed_steps


def progress_fraction(state: WizardState, phases: Sequence[Phase] | None = None) -> float:
    """Completed steps over all steps in the catalog, in [0, 1].

    Decreases when a step is un-toggled. Ids that belong to no phase are
    not counted.
    """
    phases = _phases(phases)
    known = {s.id for p in phases for s in p.steps}
    if not known:
        return 0.0
    return len(state.completed_steps & known) / len(known)


# ═════════════════════════════════════════════════════════════════════════════
# View
# ═════════════════════════════════════════════════════════════════════════════


def describe_state(state: WizardState, phases: Sequence[Phase] | None = None) -> dict:
    """Everything the wizard page renders for a given state."""
    phases = _phases(phases)
    phase = phases[state.current_phase_index]
    step = phase.steps[state.current_step_index]

    phase_rows = []
    for index, p in enumerate(phases):
        if index == state.current_phase_index:
            status = "current"
        elif index < state.current_phase_index:
            status = "visited"
        else:
            status = "upcoming"
        phase_rows.append({
            "index": index,
            "id": p.id,
            "code": p.code,
            "name": p.name,
            "status": status,
            "completed_steps": sum(1 for s in p.steps if s.id in state.completed_steps),
            "total_steps": p.step_count,
        })

    return {
        "current_phase_index": state.current_phase_index,
        "current_step_index": state.current_step_index,
        "current_phase": {
            **phase.to_summary(),
            "objectives": list(phase.objectives),
            "key_questions": list(phase.key_questions),
            "tips": list(phase.tips),
        },
        "current_step": {**step.to_dict(), "completed": step.id in state.completed_steps},
        "step_number": state.current_step_index + 1,
        "step_count": phase.step_count,
        "at_start": is_at_start(state),
        "at_end": is_at_end(state, phases),
        "phases": phase_rows,
        "steps": [
            {
                "index": index,
                "id": s.id,
                "name": s.name,
                "completed": s.id in state.completed_steps,
                "current": index == state.current_step_index,
            }
            for index, s in enumerate(phase.steps)
        ],
        "completed_steps": sorted(state.completed_steps),
        "progress": progress_fraction(state, phases),
    }


# ═════════════════════════════════════════════════════════════════════════════
# Session persistence
# ═════════════════════════════════════════════════════════════════════════════


def _get_row(session_id: str) -> WizardSession:
    row = db.session.get(WizardSession, session_id)
    if row is None:
        raise NotFoundError(resource="WizardSession", resource_id=session_id)
    return row


def _to_state(row: WizardSession) -> WizardState:
    return WizardState(
        current_phase_index=row.current_phase_index,
        current_step_index=row.current_step_index,
        completed_steps=frozenset(row.completed_steps or []),
    )


def _serialize(row: WizardSession, state: WizardState) -> dict:
    return {
        "id": row.id,
        "created_at": row.created_at.isoformat() if row.created_at else None,
        "updated_at": row.updated_at.isoformat() if row.updated_at else None,
        **describe_state(state),
    }


def _mutate(session_id: str, command: Callable[[WizardState], WizardState]) -> dict:
    row = _get_row(session_id)
    state = command(_to_state(row))
    row.current_phase_index = state.current_phase_index
    row.current_step_index = state.current_step_index
    row.completed_steps = sorted(state.completed_steps)
    db.session.commit()
    return _serialize(row, state)


def create_session() -> dict:
    """Start a new wizard session at the first step of the first phase."""
    row = WizardSession(current_phase_index=0, current_step_index=0, completed_steps=[])
    db.session.add(row)
    db.session.commit()
    logger.info("Wizard session created", extra={"session_id": row.id})
    return _serialize(row, WizardState())


def get_session(session_id: str) -> dict:
    row = _get_row(session_id)
    return _serialize(row, _to_state(row))


def delete_session(session_id: str) -> None:
    row = _get_row(session_id)
    db.session.delete(row)
    db.session.commit()
    logger.info("Wizard session deleted", extra={"session_id": session_id})


def advance_session(session_id: str) -> dict:
    return _mutate(session_id, advance)


def retreat_session(session_id: str) -> dict:
    return _mutate(session_id, retreat)


def jump_session_to_phase(session_id: str, index: int) -> dict:
    return _mutate(session_id, lambda s: jump_to_phase(s, index))


def jump_session_to_step(session_id: str, index: int) -> dict:
    return _mutate(session_id, lambda s: jump_to_step(s, index))


def toggle_session_step(session_id: str, step_id: str) -> dict:
    """Toggle completion of a catalog step for a session.

    Raises:
        ValidationError: If step_id belongs to no phase in the catalog.
        NotFoundError: If the session does not exist.
    """
    if catalog_service.get_step(step_id) is None:
        raise ValidationError(f"Unknown step id {step_id!r}.", details={"step_id": step_id})
    return _mutate(session_id, lambda s: toggle_step_complete(s, step_id))
