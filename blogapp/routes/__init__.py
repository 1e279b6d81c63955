# blogapp/routes/__init__.py
from flask import Flask, request

from blogapp.errors import ValidationError
from blogapp.schemas import MAX_ID, parse_payload


def parse_body(model):
    """Parse the JSON body into ``model``; shape errors raise ValidationError."""
    data = request.get_json(silent=True)
    if data is not None and not isinstance(data, dict):
        raise ValidationError(["Request body must be a JSON object"])
    return parse_payload(model, data)


def arg_int(name, default=None, minimum=None, maximum=MAX_ID):
    """Integer query arg; non-numeric values fall back to ``default``."""
    value = request.args.get(name, default, type=int)
    if value is None:
        return None
    if (minimum is not None and value < minimum) or value > maximum:
        raise ValidationError([f"{name} is out of range"])
    return value


def arg_bool(name, default):
    value = request.args.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def register_routes(app: Flask):
    """
    Register every blueprint under its URL prefix.
    Called from blogapp.create_app().
    """
    # imported here to avoid circular imports while the app initialises
    from .auth import auth_bp
    from .blog_routes import blog_bp
    from .category_routes import category_bp
    from .admin_routes import admin_bp
    from .user_routes import user_bp
    from .upload_routes import upload_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(blog_bp, url_prefix="/blogs")
    app.register_blueprint(category_bp, url_prefix="/categories")
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(user_bp, url_prefix="/users")
    app.register_blueprint(upload_bp, url_prefix="/media")
