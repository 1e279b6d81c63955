# blogapp/routes/auth.py
from flask import Blueprint

from blogapp.handlers import auth_handlers
from blogapp.routes import parse_body
from blogapp.schemas import LoginRequest, RegisterRequest
from blogapp.utils.result import to_response

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    payload = parse_body(RegisterRequest)
    return to_response(auth_handlers.register(payload))


@auth_bp.route("/login", methods=["POST"])
def login():
    payload = parse_body(LoginRequest)
    return to_response(auth_handlers.login(payload))
