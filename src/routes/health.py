from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    provider = current_app.extensions["health_provider"]
    snapshot = provider.get_health()
    return jsonify(snapshot.model_dump()), 200
