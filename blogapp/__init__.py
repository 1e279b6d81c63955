# blogapp/__init__.py
import time

import cloudinary
import structlog
from flask import Flask, g, request
from werkzeug.exceptions import HTTPException

from blogapp.auth.decorators import load_current_user
from blogapp.config import Config
from blogapp.errors import GENERIC_ERROR_MESSAGE, AppError
from blogapp.extensions import cors, db, migrate, mongo
from blogapp.routes import register_routes
from blogapp.seed import seed_command
from blogapp.utils.log import configure_logging
from blogapp.utils.result import Result, error_response

logger = structlog.get_logger(__name__)


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        result = Result.from_error(error)
        return error_response(result.message, result.status_code, result.errors)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return error_response(error.description or error.name, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        db.session.rollback()
        logger.exception("unhandled_exception", path=request.path)
        return error_response(GENERIC_ERROR_MESSAGE, 500)


def create_app(config_object=Config, mongo_client=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.url_map.strict_slashes = False

    configure_logging(app.config["LOG_LEVEL"], app.config["LOG_JSON"])

    cloudinary.config(
        cloud_name=app.config["CLOUDINARY_CLOUD_NAME"],
        api_key=app.config["CLOUDINARY_API_KEY"],
        api_secret=app.config["CLOUDINARY_API_SECRET"],
    )

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    mongo.init_app(app, client=mongo_client)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"],
    )

    register_routes(app)
    register_error_handlers(app)
    app.cli.add_command(seed_command)

    @app.before_request
    def before_request():
        g.request_started = time.perf_counter()
        load_current_user()

    @app.after_request
    def after_request(response):
        started = getattr(g, "request_started", None)
        user = getattr(g, "current_user", None)
        logger.info(
            "request_completed",
            method=request.method,
            path=request.path,
            status=response.status_code,
            user_id=user.id if user else None,
            duration_ms=round((time.perf_counter() - started) * 1000, 2) if started else None,
        )
        return response

    return app
