"""
Wizard Blueprint.

Routes for the guided ADM walkthrough. Each wizard session stores one
learner's position and completed steps; every route returns the full
session view so the UI can re-render from a single response.
All business logic is delegated to wizard_service.

Endpoints:
  Sessions:     POST   /wizard/sessions
                GET    /wizard/sessions/<sid>
                DELETE /wizard/sessions/<sid>
  Navigation:   POST   /wizard/sessions/<sid>/advance
                POST   /wizard/sessions/<sid>/retreat
                POST   /wizard/sessions/<sid>/jump-phase   { "index": int }
                POST   /wizard/sessions/<sid>/jump-step    { "index": int }
  Completion:   POST   /wizard/sessions/<sid>/steps/<step_id>/toggle

Out-of-range jump indexes are rejected with 422; state is unchanged.
"""

import logging

from flask import Blueprint, jsonify, request

from adm_guide.services import wizard_service
from adm_guide.utils.errors import E, api_error, register_error_handlers

logger = logging.getLogger(__name__)

wizard_bp = Blueprint("wizard", __name__, url_prefix="/api/v1/wizard")
register_error_handlers(wizard_bp)


def _index_from_body() -> tuple[int | None, tuple | None]:
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return None, api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")
    if "index" not in data:
        return None, api_error(E.VALIDATION_REQUIRED, "index is required")
    index = data["index"]
    if isinstance(index, bool) or not isinstance(index, int):
        return None, api_error(E.VALIDATION_INVALID, "index must be an integer")
    return index, None


@wizard_bp.route("/sessions", methods=["POST"])
def create_session():
    """Start a new session at the first step of the first phase (201)."""
    return jsonify(wizard_service.create_session()), 201


@wizard_bp.route("/sessions/<session_id>", methods=["GET"])
def get_session(session_id: str):
    return jsonify(wizard_service.get_session(session_id)), 200


@wizard_bp.route("/sessions/<session_id>", methods=["DELETE"])
def delete_session(session_id: str):
    wizard_service.delete_session(session_id)
    return "", 204


@wizard_bp.route("/sessions/<session_id>/advance", methods=["POST"])
def advance(session_id: str):
    """Next step; no-op on the last step of the last phase."""
    return jsonify(wizard_service.advance_session(session_id)), 200


@wizard_bp.route("/sessions/<session_id>/retreat", methods=["POST"])
def retreat(session_id: str):
    """Previous step; no-op on the first step of the first phase."""
    return jsonify(wizard_service.retreat_session(session_id)), 200


@wizard_bp.route("/sessions/<session_id>/jump-phase", methods=["POST"])
def jump_phase(session_id: str):
    """Jump to a phase by catalog index; step resets to 0.

    Body: { "index": int }
    """
    index, err = _index_from_body()
    if err:
        return err
    return jsonify(wizard_service.jump_session_to_phase(session_id, index)), 200


@wizard_bp.route("/sessions/<session_id>/jump-step", methods=["POST"])
def jump_step(session_id: str):
    """Jump to a step within the current phase.

    Body: { "index": int }
    """
    index, err = _index_from_body()
    if err:
        return err
    return jsonify(wizard_service.jump_session_to_step(session_id, index)), 200


@wizard_bp.route("/sessions/<session_id>/steps/<step_id>/toggle", methods=["POST"])
def toggle_step(session_id: str, step_id: str):
    """Mark a step complete, or un-mark it if already complete."""
    return jsonify(wizard_service.toggle_session_step(session_id, step_id)), 200
