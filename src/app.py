from flask import Flask, jsonify, request
from loguru import logger
from werkzeug.exceptions import HTTPException

from observability.request_context import start_request, end_request
from routes.health import health_bp
from routes.upload import upload_bp
from services.health import HealthProvider
from services.upload import UploadService

API_PREFIX = "/api/v1"


def create_app(settings, health_provider=None, upload_service=None):
    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["DEBUG"] = settings.is_development

    app.extensions["health_provider"] = health_provider or HealthProvider()
    app.extensions["upload_service"] = upload_service or UploadService()

    app.register_blueprint(health_bp, url_prefix=API_PREFIX)
    app.register_blueprint(upload_bp, url_prefix=API_PREFIX)

    @app.route("/")
    def index():
        return "Hello, World!"

    @app.before_request
    def _before():
        start_request()
        # parse JSON bodies up front so a malformed one is rejected before dispatch
        if request.is_json and request.content_length:
            request.get_json()

    @app.after_request
    def _after(response):
        return end_request(response)

    @app.errorhandler(HTTPException)
    def _http_error(exc):
        return jsonify({"message": exc.description}), exc.code

    @app.errorhandler(Exception)
    def _unhandled_error(exc):
        logger.opt(exception=exc).error("Unhandled exception on {} {}", request.method, request.path)
        return jsonify({"message": "Internal server error"}), 500

    return app
