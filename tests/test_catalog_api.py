"""
Tests — Phase Catalog API.

Covers:
    - GET /phases, /phases/<id>, /phases/<id>/navigation, /phases/by-code/<code>
    - GET /artifacts (type filter, groups) and /deliverables (required filter)
    - GET /summary
    - 404 body shape for unknown phases
"""

import pytest

pytestmark = pytest.mark.integration


class TestPhases:
    def test_list_phases(self, client):
        res = client.get("/api/v1/phases")
        assert res.status_code == 200
        data = res.get_json()
        assert data["total"] == 11
        assert data["items"][0]["id"] == "preliminary"
        assert data["items"][-1]["id"] == "requirements-management"
        assert "steps" not in data["items"][0]
        assert data["items"][0]["step_count"] > 0

    def test_get_phase_includes_navigation(self, client):
        res = client.get("/api/v1/phases/phase-a")
        assert res.status_code == 200
        data = res.get_json()
        assert data["code"] == "A"
        assert data["index"] == 1
        assert data["navigation"]["prev"]["id"] == "preliminary"
        assert data["navigation"]["next"]["id"] == "phase-b"
        assert data["steps"][0]["id"] == "a1"

    def test_get_unknown_phase_404(self, client):
        res = client.get("/api/v1/phases/phase-z")
        assert res.status_code == 404
        assert res.get_json()["code"] == "ERR_NOT_FOUND"

    def test_navigation_edges(self, client):
        first = client.get("/api/v1/phases/preliminary/navigation").get_json()
        last = client.get("/api/v1/phases/requirements-management/navigation").get_json()
        assert first["prev"] is None
        assert last["next"] is None

    def test_by_code(self, client):
        res = client.get("/api/v1/phases/by-code/C-IS")
        assert res.status_code == 200
        assert res.get_json()["id"] == "phase-c-is"

    def test_by_unknown_code_404(self, client):
        assert client.get("/api/v1/phases/by-code/Z").status_code == 404


class TestFlattened:
    def test_artifacts_grouped(self, client):
        data = client.get("/api/v1/artifacts").get_json()
        assert set(data["groups"]) == {"catalog", "matrix", "diagram"}
        assert data["total"] == sum(len(v) for v in data["groups"].values())

    def test_artifacts_type_filter(self, client):
        data = client.get("/api/v1/artifacts?type=diagram").get_json()
        assert data["total"] > 0
        assert all(a["type"] == "diagram" for a in data["items"])
        assert data["groups"]["catalog"] == []

    def test_artifacts_invalid_type_400(self, client):
        res = client.get("/api/v1/artifacts?type=spreadsheet")
        assert res.status_code == 400
        assert res.get_json()["code"] == "ERR_VALIDATION_INVALID"

    def test_deliverables_required_filter(self, client):
        data = client.get("/api/v1/deliverables?required=false").get_json()
        assert data["total"] > 0
        assert all(d["required"] is False for d in data["items"])

    def test_summary(self, client):
        data = client.get("/api/v1/summary").get_json()
        assert data["phases"] == 11
        assert data["steps"] > data["phases"]


class TestAppLevel:
    def test_unknown_route_json_404(self, client):
        res = client.get("/api/v1/nothing-here")
        assert res.status_code == 404
        assert res.get_json()["path"] == "/api/v1/nothing-here"

    def test_request_id_header(self, client):
        res = client.get("/api/v1/phases", headers={"X-Request-ID": "abc123"})
        assert res.headers["X-Request-ID"] == "abc123"
        assert "X-Request-Duration-Ms" in res.headers

    def test_method_not_allowed(self, client):
        assert client.delete("/api/v1/phases").status_code == 405
