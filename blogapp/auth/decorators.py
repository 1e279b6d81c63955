# blogapp/auth/decorators.py
from functools import wraps

from flask import g, request

from blogapp.auth.current_user import CurrentUser
from blogapp.auth.tokens import decode_token
from blogapp.errors import AuthError
from blogapp.utils.result import error_response


def load_current_user():
    """Resolve ``g.current_user`` from the Authorization header.

    A missing header gives an anonymous caller. A bad token also gives an
    anonymous caller, and the reason is kept on ``g.auth_error`` so protected
    routes can report it.
    """
    g.current_user = CurrentUser.anonymous()
    g.auth_error = None

    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return

    token = auth_header[len("Bearer "):].strip()
    try:
        g.current_user = CurrentUser.from_claims(decode_token(token))
    except AuthError as e:
        g.auth_error = e


def login_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        user = getattr(g, "current_user", None)
        if user is None or not user.is_authenticated:
            error = getattr(g, "auth_error", None) or AuthError(AuthError.UNAUTHORIZED)
            return error_response(error.message, 401)
        return f(*args, **kwargs)
    return decorated


def admin_required(f):
    @wraps(f)
    @login_required
    def decorated(*args, **kwargs):
        if not g.current_user.is_admin:
            return error_response("Admin role required", 400)
        return f(*args, **kwargs)
    return decorated
