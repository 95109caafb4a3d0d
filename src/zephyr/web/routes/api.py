from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from zephyr import __version__
from zephyr.render import render_css

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/compile", methods=["OPTIONS"])
def compile_preflight():
    """Handle CORS preflight for compilation."""
    return "", 204


def _classes_from(data) -> list[str] | None:
    classes = data.get("classes")
    if isinstance(classes, str):
        return classes.split()
    if isinstance(classes, list) and all(isinstance(c, str) for c in classes):
        return classes
    return None


@api_bp.route("/compile", methods=["POST"])
def compile_classes():
    """Compile a batch of classes via JSON API."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "classes" not in data:
        return jsonify({"error": "classes required"}), 400
    classes = _classes_from(data)
    if classes is None:
        return jsonify({"error": "classes must be a string or a list of strings"}), 400
    minify = data.get("minify", False)
    if not isinstance(minify, bool):
        return jsonify({"error": "minify must be a boolean"}), 400

    engine = current_app.extensions["engine"]
    stylesheet = engine.generate(classes)
    payload = stylesheet.to_dict()
    payload["css"] = render_css(stylesheet, minify=minify)
    return jsonify(payload)


@api_bp.route("/health")
def health():
    """Liveness check."""
    return jsonify({"status": "ok", "version": __version__})
