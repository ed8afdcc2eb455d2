"""
Phase Wheel Blueprint.

Geometry and hover detail for the circular ADM diagram.

Endpoints:
  Layout:   GET /wheel                 (?radius=&cx=&cy=)
  Detail:   GET /wheel/phases/<id>
  Hit test: GET /wheel/hit?x=&y=       (?radius=&cx=&cy=)

Layout defaults come from WHEEL_RADIUS / WHEEL_CENTER_X / WHEEL_CENTER_Y.
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from adm_guide.core.exceptions import NotFoundError
from adm_guide.services import wheel_service
from adm_guide.utils.errors import E, api_error, register_error_handlers

logger = logging.getLogger(__name__)

wheel_bp = Blueprint("wheel", __name__, url_prefix="/api/v1/wheel")
register_error_handlers(wheel_bp)


def _geometry() -> tuple[float | None, tuple[float, float] | None]:
    """Read radius and center from the query string, config as fallback."""
    cfg = current_app.config
    radius = request.args.get("radius", cfg["WHEEL_RADIUS"], type=float)
    cx = request.args.get("cx", cfg["WHEEL_CENTER_X"], type=float)
    cy = request.args.get("cy", cfg["WHEEL_CENTER_Y"], type=float)
    if radius is None or radius <= 0:
        return None, None
    return radius, (cx, cy)


@wheel_bp.route("", methods=["GET"])
def get_wheel():
    """Ring node coordinates plus the center node."""
    radius, center = _geometry()
    if radius is None:
        return api_error(E.VALIDATION_INVALID, "radius must be a positive number")
    return jsonify(wheel_service.build_wheel(radius, center)), 200


@wheel_bp.route("/phases/<phase_id>", methods=["GET"])
def get_phase_detail(phase_id: str):
    """Hover panel for one phase."""
    detail = wheel_service.phase_detail(phase_id)
    if detail is None:
        raise NotFoundError(resource="Phase", resource_id=phase_id)
    return jsonify(detail), 200


@wheel_bp.route("/hit", methods=["GET"])
def hit():
    """Which phase (if any) is under the point (x, y).

    Returns: { "phase": detail | null, "node": node | null }
    """
    x = request.args.get("x", type=float)
    y = request.args.get("y", type=float)
    if x is None or y is None:
        return api_error(E.VALIDATION_REQUIRED, "x and y are required numbers")
    radius, center = _geometry()
    if radius is None:
        return api_error(E.VALIDATION_INVALID, "radius must be a positive number")
    node = wheel_service.hit_test(wheel_service.wheel_nodes(radius, center), x, y)
    if node is None:
        return jsonify({"phase": None, "node": None}), 200
    return jsonify({
        "phase": wheel_service.phase_detail(node.phase_id),
        "node": node.to_dict(),
    }), 200
