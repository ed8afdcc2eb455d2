"""
Phase Catalog Blueprint.

Read-only routes over the static ADM phase catalog. All lookups are
delegated to catalog_service; an absent phase becomes a 404 here.

Endpoints:
  Phases:         GET /phases
                  GET /phases/<id>
                  GET /phases/<id>/navigation
                  GET /phases/by-code/<code>
  Flattened:      GET /artifacts      (?type=catalog|matrix|diagram)
                  GET /deliverables   (?required=true|false)
  Summary:        GET /summary
"""

import logging

from flask import Blueprint, jsonify, request

from adm_guide.core.exceptions import NotFoundError
from adm_guide.services import catalog_service
from adm_guide.utils.errors import E, api_error, register_error_handlers

logger = logging.getLogger(__name__)

catalog_bp = Blueprint("catalog", __name__, url_prefix="/api/v1")
register_error_handlers(catalog_bp)


def _phase_or_404(phase_id: str):
    phase = catalog_service.get_phase_by_id(phase_id)
    if phase is None:
        raise NotFoundError(resource="Phase", resource_id=phase_id)
    return phase


def _navigation(phase_id: str) -> dict:
    nav = catalog_service.get_phase_navigation(phase_id)
    return {
        "prev": nav["prev"].to_summary() if nav["prev"] else None,
        "next": nav["next"].to_summary() if nav["next"] else None,
    }


@catalog_bp.route("/phases", methods=["GET"])
def list_phases():
    """All phases in canonical order (summary form).

    Returns: { "items": [...], "total": int }
    """
    items = [p.to_summary() for p in catalog_service.get_all_phases()]
    return jsonify({"items": items, "total": len(items)}), 200


@catalog_bp.route("/phases/<phase_id>", methods=["GET"])
def get_phase(phase_id: str):
    """Full phase record plus prev/next links."""
    phase = _phase_or_404(phase_id)
    return jsonify({
        **phase.to_dict(),
        "index": catalog_service.get_phase_index(phase_id),
        "navigation": _navigation(phase_id),
    }), 200


@catalog_bp.route("/phases/<phase_id>/navigation", methods=["GET"])
def get_phase_navigation(phase_id: str):
    _phase_or_404(phase_id)
    return jsonify(_navigation(phase_id)), 200


@catalog_bp.route("/phases/by-code/<code>", methods=["GET"])
def get_phase_by_code(code: str):
    phase = catalog_service.get_phase_by_code(code)
    if phase is None:
        raise NotFoundError(resource="Phase", resource_id=code)
    return jsonify(phase.to_dict()), 200


@catalog_bp.route("/artifacts", methods=["GET"])
def list_artifacts():
    """Artifacts across all phases, grouped by type.

    Query params: type? (catalog | matrix | diagram)
    Returns: { "items": [...], "total": int, "groups": {type: [...]} }
    """
    artifact_type = request.args.get("type")
    try:
        items = catalog_service.list_all_artifacts(artifact_type)
    except ValueError:
        valid = ", ".join(t.value for t in catalog_service.ArtifactType)
        return api_error(E.VALIDATION_INVALID, f"type must be one of: {valid}")
    groups: dict[str, list] = {t.value: [] for t in catalog_service.ArtifactType}
    for item in items:
        groups[item["type"]].append(item)
    return jsonify({"items": items, "total": len(items), "groups": groups}), 200


@catalog_bp.route("/deliverables", methods=["GET"])
def list_deliverables():
    """Deliverables across all phases.

    Query params: required? (true | false)
    """
    raw = request.args.get("required")
    required = None
    if raw is not None:
        required = raw.lower() in ("true", "1", "yes")
    items = catalog_service.list_all_deliverables(required=required)
    return jsonify({"items": items, "total": len(items)}), 200


@catalog_bp.route("/summary", methods=["GET"])
def summary():
    return jsonify(catalog_service.catalog_stats()), 200
