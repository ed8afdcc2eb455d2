"""
Tests — Wizard API.

Covers:
    - Session create / get / delete
    - advance / retreat including no-op at the ends
    - jump-phase / jump-step: body validation and out-of-range rejection
    - step completion toggle
"""

import pytest

pytestmark = pytest.mark.integration


def _url(sid, action=""):
    base = f"/api/v1/wizard/sessions/{sid}"
    return f"{base}/{action}" if action else base


class TestSessions:
    def test_create_session(self, wizard_session):
        assert wizard_session["current_phase_index"] == 0
        assert wizard_session["current_step_index"] == 0
        assert wizard_session["at_start"] is True
        assert wizard_session["current_phase"]["id"] == "preliminary"
        assert wizard_session["progress"] == 0.0

    def test_get_session(self, client, wizard_session):
        res = client.get(_url(wizard_session["id"]))
        assert res.status_code == 200
        assert res.get_json()["id"] == wizard_session["id"]

    def test_get_missing_session_404(self, client):
        res = client.get(_url("missing"))
        assert res.status_code == 404
        assert res.get_json()["code"] == "ERR_NOT_FOUND"

    def test_delete_session(self, client, wizard_session):
        assert client.delete(_url(wizard_session["id"])).status_code == 204
        assert client.get(_url(wizard_session["id"])).status_code == 404


class TestNavigation:
    def test_advance(self, client, wizard_session):
        res = client.post(_url(wizard_session["id"], "advance"))
        assert res.status_code == 200
        data = res.get_json()
        assert data["current_step_index"] == 1
        assert data["step_number"] == 2

    def test_retreat_at_start_is_noop(self, client, wizard_session):
        data = client.post(_url(wizard_session["id"], "retreat")).get_json()
        assert (data["current_phase_index"], data["current_step_index"]) == (0, 0)

    def test_advance_at_end_is_noop(self, client, wizard_session):
        sid = wizard_session["id"]
        data = client.post(_url(sid, "jump-phase"), json={"index": 10}).get_json()
        last = data["step_count"] - 1
        client.post(_url(sid, "jump-step"), json={"index": last})
        data = client.post(_url(sid, "advance")).get_json()
        assert data["at_end"] is True
        assert (data["current_phase_index"], data["current_step_index"]) == (10, last)


class TestJumps:
    def test_jump_phase_resets_step(self, client, wizard_session):
        sid = wizard_session["id"]
        client.post(_url(sid, "advance"))
        client.post(_url(sid, "advance"))
        data = client.post(_url(sid, "jump-phase"), json={"index": 1}).get_json()
        assert (data["current_phase_index"], data["current_step_index"]) == (1, 0)

    def test_jump_phase_out_of_range_422(self, client, wizard_session):
        sid = wizard_session["id"]
        client.post(_url(sid, "jump-phase"), json={"index": 2})
        res = client.post(_url(sid, "jump-phase"), json={"index": 11})
        assert res.status_code == 422
        body = res.get_json()
        assert body["code"] == "ERR_VALIDATION_CONSTRAINT"
        assert body["details"] == {"index": 11, "max": 10}
        assert client.get(_url(sid)).get_json()["current_phase_index"] == 2

    def test_jump_missing_index_400(self, client, wizard_session):
        res = client.post(_url(wizard_session["id"], "jump-phase"), json={})
        assert res.status_code == 400
        assert res.get_json()["code"] == "ERR_VALIDATION_REQUIRED"

    def test_jump_non_integer_index_400(self, client, wizard_session):
        for bad in ("2", 1.5, True):
            res = client.post(_url(wizard_session["id"], "jump-step"), json={"index": bad})
            assert res.status_code == 400
            assert res.get_json()["code"] == "ERR_VALIDATION_INVALID"

    def test_jump_body_not_an_object_400(self, client, wizard_session):
        for body in ("index", [1], 3):
            res = client.post(_url(wizard_session["id"], "jump-phase"), json=body)
            assert res.status_code == 400
            assert res.get_json()["code"] == "ERR_VALIDATION_INVALID"

    def test_jump_step_out_of_range_422(self, client, wizard_session):
        res = client.post(_url(wizard_session["id"], "jump-step"), json={"index": 50})
        assert res.status_code == 422

    def test_non_json_body_415(self, client, wizard_session):
        res = client.post(
            _url(wizard_session["id"], "jump-step"),
            data="index=1",
            content_type="text/plain",
        )
        assert res.status_code == 415


class TestToggle:
    def test_toggle_twice(self, client, wizard_session):
        url = _url(wizard_session["id"], "steps/p1/toggle")
        data = client.post(url).get_json()
        assert data["completed_steps"] == ["p1"]
        assert data["current_step"]["completed"] is True
        assert data["progress"] > 0
        data = client.post(url).get_json()
        assert data["completed_steps"] == []

    def test_toggle_step_outside_current_phase(self, client, wizard_session):
        data = client.post(_url(wizard_session["id"], "steps/h3/toggle")).get_json()
        assert data["completed_steps"] == ["h3"]
        assert data["current_phase_index"] == 0

    def test_toggle_unknown_step_422(self, client, wizard_session):
        res = client.post(_url(wizard_session["id"], "steps/zz9/toggle"))
        assert res.status_code == 422
