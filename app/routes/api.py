"""
JSON endpoints of the fixture table application.

Endpoints:
    GET  /api/health         - Health check
    GET  /filter?view=<id>   - Active filters and visible rows of a view
    POST /filter             - Save a view's active filters, or reset all
                               saved filters with {"value": ""}
"""

import logging

from flask import Blueprint, Response, current_app, g, jsonify, request

from app.auth import require_bearer
from app.catalog import get_view_spec
from app.models import active_filters_for, filtered_rows, reset_saved_filters, save_filters

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _view_payload(view_id: str, active: list[str]) -> dict:
    spec = get_view_spec(view_id)
    table = filtered_rows(spec, active, current_app.config.get("APPLY_FILTERS", True))
    return {
        "view": view_id,
        "active": active,
        "rows": table["rows"],
        "total": table["total"],
    }


@api_bp.route("/api/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint."""
    return jsonify({"status": "healthy"}), 200


@api_bp.route("/filter", methods=["GET"])
@require_bearer
def get_filter() -> tuple[Response, int]:
    """
    Return the active filters and visible rows of a view.

    Query Parameters:
        view: View id (assets, loggers, shipments).
    """
    view_id = request.args.get("view", "")
    spec = get_view_spec(view_id)
    if spec is None:
        return jsonify({"error": f"Unknown view: {view_id!r}"}), 404

    active = active_filters_for(g.username, spec)
    return jsonify(_view_payload(view_id, active)), 200


@api_bp.route("/filter", methods=["POST"])
@require_bearer
def post_filter() -> tuple[Response, int]:
    """
    Save filters for a view or reset every saved filter.

    Request Body:
        {"view": "<id>", "value": ["Label", ...]}  - save
        {"value": ""}                              - reset to defaults
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "value" not in data:
        return jsonify({"error": "Request body must be a JSON object with 'value'"}), 400

    value = data["value"]
    if value == "":
        removed = reset_saved_filters(g.username)
        logger.info("POST /filter - reset %d saved filter(s) for %s", removed, g.username)
        return jsonify({"reset": True, "removed": removed}), 200

    if not isinstance(value, list) or not all(isinstance(label, str) for label in value):
        return jsonify({"error": "'value' must be a list of labels or an empty string"}), 400

    view_id = data.get("view", "")
    spec = get_view_spec(view_id)
    if spec is None:
        return jsonify({"error": f"Unknown view: {view_id!r}"}), 404

    active = save_filters(g.username, spec, value)
    logger.info("POST /filter - %s saved %s for %s", g.username, active, view_id)
    return jsonify(_view_payload(view_id, active)), 200
