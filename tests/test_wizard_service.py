"""
Tests for the Wizard Navigation service.

Covers:
  - advance / retreat: rollover between phases, no-op at both ends
  - jump_to_phase / jump_to_step: reset of step index, out-of-range rejected
  - toggle_step_complete: involution, independent of position
  - progress_fraction and describe_state
  - session persistence: create / get / mutate / delete
"""

import pytest

from adm_guide.core.exceptions import NotFoundError, ValidationError
from adm_guide.services import catalog_service, wizard_service
from adm_guide.services.wizard_service import WizardState


PHASES = catalog_service.get_all_phases()
TOTAL_STEPS = sum(p.step_count for p in PHASES)


# ── Pure commands ────────────────────────────────────────────────────────────


@pytest.mark.unit
class TestAdvanceRetreat:
    def test_initial_state(self):
        s = WizardState()
        assert (s.current_phase_index, s.current_step_index) == (0, 0)
        assert s.completed_steps == frozenset()
        assert wizard_service.is_at_start(s)

    def test_retreat_from_initial_state_is_noop(self):
        s = WizardState()
        assert wizard_service.retreat(s) == s

    def test_advance_within_phase(self):
        s = wizard_service.advance(WizardState())
        assert (s.current_phase_index, s.current_step_index) == (0, 1)

    def test_advance_rolls_over_to_next_phase(self):
        last_step = PHASES[0].step_count - 1
        s = WizardState(current_phase_index=0, current_step_index=last_step)
        s = wizard_service.advance(s)
        assert (s.current_phase_index, s.current_step_index) == (1, 0)

    def test_retreat_lands_on_last_step_of_previous_phase(self):
        s = wizard_service.retreat(WizardState(current_phase_index=1, current_step_index=0))
        assert s.current_phase_index == 0
        assert s.current_step_index == PHASES[0].step_count - 1

    def test_advance_total_minus_one_times_reaches_end(self):
        s = WizardState()
        for _ in range(TOTAL_STEPS - 1):
            assert not wizard_service.is_at_end(s)
            s = wizard_service.advance(s)
        assert wizard_service.is_at_end(s)
        assert s.current_phase_index == len(PHASES) - 1
        assert s.current_step_index == PHASES[-1].step_count - 1

    def test_advance_at_end_is_noop(self):
        end = WizardState(
            current_phase_index=len(PHASES) - 1,
            current_step_index=PHASES[-1].step_count - 1,
        )
        assert wizard_service.advance(end) == end

    def test_advance_then_retreat_round_trips(self):
        s = WizardState(current_phase_index=3, current_step_index=PHASES[3].step_count - 1)
        assert wizard_service.retreat(wizard_service.advance(s)) == s

    def test_round_trip_holds_along_whole_path(self):
        """retreat(advance(s)) == s for every state before the terminal one."""
        s = WizardState()
        visited = 0
        while not wizard_service.is_at_end(s):
            nxt = wizard_service.advance(s)
            assert nxt != s
            assert wizard_service.retreat(nxt) == s
            s = nxt
            visited += 1
        assert visited == TOTAL_STEPS - 1

    def test_navigation_keeps_completed_steps(self):
        s = WizardState(completed_steps=frozenset({"p1"}))
        assert wizard_service.advance(s).completed_steps == {"p1"}
        assert wizard_service.retreat(wizard_service.advance(s)).completed_steps == {"p1"}


@pytest.mark.unit
class TestJumps:
    def test_jump_to_phase_resets_step(self):
        s = WizardState(current_phase_index=0, current_step_index=3)
        s = wizard_service.jump_to_phase(s, 1)
        assert (s.current_phase_index, s.current_step_index) == (1, 0)

    def test_jump_to_phase_out_of_range_rejected(self):
        s = WizardState(current_phase_index=2, current_step_index=1)
        with pytest.raises(ValidationError) as exc:
            wizard_service.jump_to_phase(s, len(PHASES))
        assert exc.value.details == {"index": len(PHASES), "max": len(PHASES) - 1}
        assert (s.current_phase_index, s.current_step_index) == (2, 1)

    def test_jump_to_phase_negative_rejected(self):
        with pytest.raises(ValidationError):
            wizard_service.jump_to_phase(WizardState(), -1)

    def test_jump_to_step_within_phase(self):
        s = wizard_service.jump_to_step(WizardState(current_phase_index=1), 4)
        assert (s.current_phase_index, s.current_step_index) == (1, 4)

    def test_jump_to_step_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            wizard_service.jump_to_step(WizardState(), PHASES[0].step_count)


@pytest.mark.unit
class TestCompletion:
    def test_toggle_marks_step_complete(self):
        s = wizard_service.toggle_step_complete(WizardState(), "a3")
        assert wizard_service.is_complete(s, "a3")

    def test_toggle_twice_is_identity(self):
        s = WizardState(completed_steps=frozenset({"p2"}))
        once = wizard_service.toggle_step_complete(s, "b1")
        assert wizard_service.toggle_step_complete(once, "b1") == s

    def test_toggle_does_not_move_position(self):
        s = WizardState(current_phase_index=2, current_step_index=2)
        toggled = wizard_service.toggle_step_complete(s, "rm1")
        assert (toggled.current_phase_index, toggled.current_step_index) == (2, 2)

    def test_progress_fraction(self):
        s = WizardState(completed_steps=frozenset({"p1", "p2"}))
        assert wizard_service.progress_fraction(s) == pytest.approx(2 / TOTAL_STEPS)
        assert wizard_service.progress_fraction(WizardState()) == 0.0

    def test_progress_ignores_unknown_ids(self):
        s = WizardState(completed_steps=frozenset({"ghost"}))
        assert wizard_service.progress_fraction(s) == 0.0

    def test_progress_decreases_on_untoggle(self):
        s = wizard_service.toggle_step_complete(WizardState(), "p1")
        before = wizard_service.progress_fraction(s)
        after = wizard_service.progress_fraction(wizard_service.toggle_step_complete(s, "p1"))
        assert after < before


@pytest.mark.unit
class TestDescribeState:
    def test_statuses(self):
        view = wizard_service.describe_state(WizardState(current_phase_index=2))
        statuses = [p["status"] for p in view["phases"]]
        assert statuses[:3] == ["visited", "visited", "current"]
        assert set(statuses[3:]) == {"upcoming"}

    def test_current_step_and_counts(self):
        s = WizardState(current_phase_index=1, current_step_index=1, completed_steps=frozenset({"a2"}))
        view = wizard_service.describe_state(s)
        assert view["current_phase"]["id"] == "phase-a"
        assert view["current_step"]["id"] == "a2"
        assert view["current_step"]["completed"] is True
        assert view["step_number"] == 2
        assert view["step_count"] == PHASES[1].step_count
        assert view["phases"][1]["completed_steps"] == 1
        assert view["steps"][1]["current"] is True

    def test_start_and_end_flags(self):
        view = wizard_service.describe_state(WizardState())
        assert view["at_start"] is True
        assert view["at_end"] is False


# ── Session persistence ──────────────────────────────────────────────────────


@pytest.mark.integration
class TestSessions:
    def test_create_session_starts_at_origin(self):
        data = wizard_service.create_session()
        assert data["id"]
        assert data["current_phase_index"] == 0
        assert data["current_step_index"] == 0
        assert data["completed_steps"] == []

    def test_mutations_persist(self):
        sid = wizard_service.create_session()["id"]
        wizard_service.advance_session(sid)
        wizard_service.toggle_session_step(sid, "p1")
        data = wizard_service.get_session(sid)
        assert data["current_step_index"] == 1
        assert data["completed_steps"] == ["p1"]

    def test_jump_out_of_range_leaves_row_unchanged(self):
        sid = wizard_service.create_session()["id"]
        wizard_service.jump_session_to_phase(sid, 3)
        with pytest.raises(ValidationError):
            wizard_service.jump_session_to_phase(sid, 99)
        assert wizard_service.get_session(sid)["current_phase_index"] == 3

    def test_toggle_unknown_step_rejected(self):
        sid = wizard_service.create_session()["id"]
        with pytest.raises(ValidationError):
            wizard_service.toggle_session_step(sid, "zz9")

    def test_missing_session_raises_not_found(self):
        with pytest.raises(NotFoundError):
            wizard_service.get_session("missing")

    def test_delete_session(self):
        sid = wizard_service.create_session()["id"]
        wizard_service.delete_session(sid)
        with pytest.raises(NotFoundError):
            wizard_service.get_session(sid)
