# blogapp/auth/policy.py
"""
Ownership and role rules for mutating operations.

Every check raises ``AuthError``; an anonymous caller always fails with
UNAUTHORIZED before any ownership rule is looked at.
"""
from blogapp.errors import AuthError


def require_authenticated(caller):
    if caller is None or not caller.is_authenticated:
        raise AuthError(AuthError.UNAUTHORIZED)


def require_admin(caller):
    require_authenticated(caller)
    if not caller.is_admin:
        raise AuthError(AuthError.FORBIDDEN, "Admin role required")


def ensure_can_update_blog(caller, blog):
    require_authenticated(caller)
    if caller.id != blog.user_id:
        raise AuthError(AuthError.FORBIDDEN, "You are not authorized to update this blog")


def ensure_can_delete_blog(caller, blog):
    require_authenticated(caller)
    if caller.id != blog.user_id and not caller.is_admin:
        raise AuthError(AuthError.FORBIDDEN, "You are not authorized to delete this blog")
