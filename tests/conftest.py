"""
Shared pytest fixtures for the ADM Study Guide test suite.

Provides:
    - app: Flask application (session-scoped)
    - _setup_db: Database table creation/teardown (session-scoped)
    - session: Per-test DB cleanup w/ rollback + recreate (autouse)
    - client: Flask test client (function-scoped)
    - stakeholder: Pre-created Stakeholder via the API
    - wizard_session: Pre-created wizard session via the API
"""

import pytest

from adm_guide import create_app
from adm_guide.models import db as _db


# ── App & DB fixtures ────────────────────────────────────────────────────


@pytest.fixture(scope="session")
def app():
    """Create the Flask application once per test session."""
    application = create_app("testing")
    return application


@pytest.fixture(scope="session")
def _setup_db(app):
    """Create all tables at session start, drop at end."""
    with app.app_context():
        _db.create_all()
    yield
    with app.app_context():
        _db.drop_all()


@pytest.fixture(autouse=True)
def session(app, _setup_db):
    """Per-test: open app context, rollback after test, recreate tables."""
    with app.app_context():
        yield
        _db.session.rollback()
        _db.drop_all()
        _db.create_all()


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


# ── Convenience fixtures ─────────────────────────────────────────────────


@pytest.fixture()
def stakeholder(client):
    """Create and return a high/high stakeholder via the API."""
    res = client.post(
        "/api/v1/stakeholders",
        json={
            "name": "Dana Ruiz",
            "role": "Head of Enterprise Architecture",
            "organization": "Group IT",
            "concerns": ["Standards compliance"],
            "influence": "high",
            "interest": "high",
        },
    )
    assert res.status_code == 201
    return res.get_json()


@pytest.fixture()
def wizard_session(client):
    """Create and return a fresh wizard session via the API."""
    res = client.post("/api/v1/wizard/sessions")
    assert res.status_code == 201
    return res.get_json()
