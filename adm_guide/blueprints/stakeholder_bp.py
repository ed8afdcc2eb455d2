"""
Stakeholder Registry Blueprint.

Routes for stakeholder CRUD, concern editing and the influence/interest
quadrant matrix. All business logic is delegated to stakeholder_service.

Endpoints:
  Stakeholder:   GET/POST          /stakeholders
                 GET/PUT/DELETE    /stakeholders/<id>
  Concerns:      POST              /stakeholders/<id>/concerns
                 DELETE            /stakeholders/<id>/concerns/<position>
  Matrix:        GET               /stakeholders/matrix
"""

import logging

from flask import Blueprint, jsonify, request

from adm_guide.services import stakeholder_service
from adm_guide.utils.errors import E, api_error, register_error_handlers

logger = logging.getLogger(__name__)

stakeholder_bp = Blueprint("stakeholder", __name__, url_prefix="/api/v1/stakeholders")
register_error_handlers(stakeholder_bp)


def _json_object():
    """Request body as a dict, or None when it is JSON but not an object."""
    data = request.get_json(silent=True) or {}
    return data if isinstance(data, dict) else None


def _not_an_object():
    return api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")


# ═════════════════════════════════════════════════════════════════════════════
# Stakeholder CRUD
# ═════════════════════════════════════════════════════════════════════════════


@stakeholder_bp.route("", methods=["GET"])
def list_stakeholders():
    """List stakeholders in creation order.

    Query params: influence?, interest?
    Returns: { "items": [...], "total": int }
    """
    items = stakeholder_service.list_stakeholders(
        influence=request.args.get("influence"),
        interest=request.args.get("interest"),
    )
    return jsonify({"items": items, "total": len(items)}), 200


@stakeholder_bp.route("", methods=["POST"])
def create_stakeholder():
    """Create a stakeholder.

    Body: { "name": str, "role": str, "organization"?: str,
            "concerns"?: [str], "influence"?: str, "interest"?: str,
            "phase"?: str, "notes"?: str }
    Returns: Created Stakeholder dict (201).
    """
    data = _json_object()
    if data is None:
        return _not_an_object()
    return jsonify(stakeholder_service.create_stakeholder(data)), 201


@stakeholder_bp.route("/matrix", methods=["GET"])
def get_matrix():
    """Return the influence/interest quadrants.

    Returns: { "quadrants": { high_high, high_low, low_high, low_low },
               "total": int, "unclassified": int }
    """
    return jsonify(stakeholder_service.get_stakeholder_matrix()), 200


@stakeholder_bp.route("/<stakeholder_id>", methods=["GET"])
def get_stakeholder(stakeholder_id: str):
    return jsonify(stakeholder_service.get_stakeholder(stakeholder_id)), 200


@stakeholder_bp.route("/<stakeholder_id>", methods=["PUT"])
def update_stakeholder(stakeholder_id: str):
    """Update the supplied fields of a stakeholder."""
    data = _json_object()
    if data is None:
        return _not_an_object()
    return jsonify(stakeholder_service.update_stakeholder(stakeholder_id, data)), 200


@stakeholder_bp.route("/<stakeholder_id>", methods=["DELETE"])
def delete_stakeholder(stakeholder_id: str):
    stakeholder_service.delete_stakeholder(stakeholder_id)
    return "", 204


# ═════════════════════════════════════════════════════════════════════════════
# Concerns
# ═════════════════════════════════════════════════════════════════════════════


@stakeholder_bp.route("/<stakeholder_id>/concerns", methods=["POST"])
def add_concern(stakeholder_id: str):
    """Append a concern.

    Body: { "concern": str }
    """
    data = _json_object()
    if data is None:
        return _not_an_object()
    s = stakeholder_service.add_concern(stakeholder_id, data.get("concern"))
    return jsonify(s), 201


@stakeholder_bp.route("/<stakeholder_id>/concerns/<int:position>", methods=["DELETE"])
def remove_concern(stakeholder_id: str, position: int):
    """Remove the concern at a 0-based position."""
    return jsonify(stakeholder_service.remove_concern(stakeholder_id, position)), 200
