"""
Tests — Stakeholder API.

Covers:
    - Stakeholder CRUD + level filters
    - Concern add / remove
    - Influence/interest matrix
    - seed-stakeholders CLI command
"""

import pytest

pytestmark = pytest.mark.integration

BASE = "/api/v1/stakeholders"


def _create(client, **kw):
    payload = {"name": "Sam Lee", "role": "Programme Manager"}
    payload.update(kw)
    res = client.post(BASE, json=payload)
    assert res.status_code == 201
    return res.get_json()


class TestStakeholderCRUD:
    def test_create(self, stakeholder):
        assert stakeholder["name"] == "Dana Ruiz"
        assert stakeholder["influence"] == "high"
        assert stakeholder["concerns"] == ["Standards compliance"]

    def test_create_missing_role_422(self, client):
        res = client.post(BASE, json={"name": "No Role"})
        assert res.status_code == 422
        body = res.get_json()
        assert body["code"] == "ERR_VALIDATION_CONSTRAINT"
        assert body["details"] == {"role": "required"}

    def test_create_invalid_level_422(self, client):
        res = client.post(BASE, json={"name": "A", "role": "B", "interest": "HIGH"})
        assert res.status_code == 422

    def test_body_not_an_object_400(self, client, stakeholder):
        requests = [
            ("post", BASE, ["Sam", "Lead"]),
            ("post", BASE, "Sam"),
            ("put", f"{BASE}/{stakeholder['id']}", ["x"]),
            ("post", f"{BASE}/{stakeholder['id']}/concerns", ["Budget"]),
        ]
        for method, url, body in requests:
            res = getattr(client, method)(url, json=body)
            assert res.status_code == 400, url
            assert res.get_json()["code"] == "ERR_VALIDATION_INVALID"
        assert client.get(BASE).get_json()["total"] == 1

    def test_list(self, client, stakeholder):
        _create(client)
        data = client.get(BASE).get_json()
        assert data["total"] == 2
        assert data["items"][0]["id"] == stakeholder["id"]

    def test_list_filter(self, client, stakeholder):
        _create(client, influence="low")
        data = client.get(f"{BASE}?influence=low").get_json()
        assert [s["name"] for s in data["items"]] == ["Sam Lee"]

    def test_list_invalid_filter_422(self, client):
        assert client.get(f"{BASE}?influence=huge").status_code == 422

    def test_get(self, client, stakeholder):
        res = client.get(f"{BASE}/{stakeholder['id']}")
        assert res.status_code == 200
        assert res.get_json()["role"] == "Head of Enterprise Architecture"

    def test_get_missing_404(self, client):
        assert client.get(f"{BASE}/missing").status_code == 404

    def test_update(self, client, stakeholder):
        res = client.put(f"{BASE}/{stakeholder['id']}", json={"interest": "low", "notes": "Busy"})
        assert res.status_code == 200
        data = res.get_json()
        assert data["interest"] == "low"
        assert data["notes"] == "Busy"
        assert data["name"] == "Dana Ruiz"

    def test_delete(self, client, stakeholder):
        assert client.delete(f"{BASE}/{stakeholder['id']}").status_code == 204
        assert client.get(f"{BASE}/{stakeholder['id']}").status_code == 404


class TestConcerns:
    def test_add_concern(self, client, stakeholder):
        res = client.post(f"{BASE}/{stakeholder['id']}/concerns", json={"concern": "Budget"})
        assert res.status_code == 201
        assert res.get_json()["concerns"] == ["Standards compliance", "Budget"]

    def test_add_blank_concern_422(self, client, stakeholder):
        res = client.post(f"{BASE}/{stakeholder['id']}/concerns", json={"concern": " "})
        assert res.status_code == 422

    def test_remove_concern(self, client, stakeholder):
        res = client.delete(f"{BASE}/{stakeholder['id']}/concerns/0")
        assert res.status_code == 200
        assert res.get_json()["concerns"] == []

    def test_remove_concern_out_of_range_422(self, client, stakeholder):
        res = client.delete(f"{BASE}/{stakeholder['id']}/concerns/5")
        assert res.status_code == 422


class TestMatrix:
    def test_matrix(self, client, stakeholder):
        _create(client, name="Low High", influence="low", interest="high")
        _create(client, name="Medium", influence="medium", interest="high")
        data = client.get(f"{BASE}/matrix").get_json()
        q = data["quadrants"]
        assert [s["name"] for s in q["high_high"]["stakeholders"]] == ["Dana Ruiz"]
        assert [s["name"] for s in q["low_high"]["stakeholders"]] == ["Low High"]
        assert data["total"] == 3
        assert data["unclassified"] == 1

    def test_matrix_empty_registry(self, client):
        data = client.get(f"{BASE}/matrix").get_json()
        assert data["total"] == 0
        assert all(v["stakeholders"] == [] for v in data["quadrants"].values())


class TestSeedCommand:
    def test_seed_stakeholders_cli(self, app, client):
        result = app.test_cli_runner().invoke(args=["seed-stakeholders"])
        assert result.exit_code == 0
        data = client.get(BASE).get_json()
        assert data["total"] == 1
        assert data["items"][0]["name"] == "Example: CIO"
