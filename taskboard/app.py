import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from taskboard.errors import ValidationFailure


def create_app(config_object="taskboard.config.Config", **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)
    app.json.sort_keys = False
    app.logger.setLevel(getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO))

    prefix = app.config["TASKS_URL_PREFIX"]

    # Core extensions
    CORS(app, resources={rf"{prefix}/*": {"origins": app.config["CORS_ORIGINS"]}})

    # Task store lifecycle (shared or per-request)
    from taskboard.utils.store import init_app as init_store

    init_store(app)

    # Register blueprints
    from taskboard.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix=prefix)

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="Taskboard API"), 200

    @app.errorhandler(ValidationFailure)
    def validation_failed(exc):
        app.logger.info("Rejected request: %s (%d violations)", exc.message, len(exc.violations))
        return jsonify(exc.to_dict()), 400

    @app.errorhandler(404)
    def not_found(_):
        return jsonify(error="Not Found"), 404

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jsonify(error="Method Not Allowed"), 405

    @app.errorhandler(Exception)
    def server_error(exc):
        if isinstance(exc, HTTPException):
            return jsonify(error=exc.name), exc.code
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify(error="Internal Server Error"), 500

    app.logger.info(
        "Taskboard ready prefix=%s store_mode=%s", prefix, app.config["TASK_STORE_MODE"]
    )
    return app


# Instantiate app for 'flask --app taskboard.app run'
app = create_app()


if __name__ == "__main__":
    # Direct run support: python -m taskboard.app
    app.run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
    )
