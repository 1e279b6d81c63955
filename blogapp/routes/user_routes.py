# blogapp/routes/user_routes.py
from flask import Blueprint, g

from blogapp.auth.decorators import login_required
from blogapp.handlers import user_handlers
from blogapp.routes import parse_body
from blogapp.schemas import UpdateProfileRequest
from blogapp.utils.result import to_response

user_bp = Blueprint("users", __name__)


@user_bp.route("/me", methods=["GET"])
@login_required
def me():
    return to_response(user_handlers.get_profile(g.current_user))


@user_bp.route("/me", methods=["PUT"])
@login_required
def update_me():
    payload = parse_body(UpdateProfileRequest)
    return to_response(user_handlers.update_profile(g.current_user, payload))
