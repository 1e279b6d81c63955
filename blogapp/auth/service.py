# blogapp/auth/service.py
import structlog

from blogapp.auth.tokens import hash_password, issue_token, verify_password
from blogapp.errors import AuthError
from blogapp.models import Role, User
from blogapp.models.user import utcnow
from blogapp.repositories import users as user_repo

logger = structlog.get_logger(__name__)


def authenticate(email, password):
    """Return ``(token, user_id, roles)`` for valid credentials.

    Unknown email, inactive account and wrong password raise the same error.
    """
    user = user_repo.get_by_email(email)
    if user is None or not user.is_active or not verify_password(password, user.password_hash):
        logger.info("login_rejected")
        raise AuthError(AuthError.INVALID_CREDENTIALS)

    user.last_login_at = utcnow()
    user_repo.update(user)

    roles = user.role_names
    token = issue_token(user.id, user.email, roles)
    logger.info("login_succeeded", user_id=user.id, roles=roles)
    return token, user.id, roles


def register(username, email, password, first_name=None, last_name=None):
    """Create a user with the default "User" role. Uniqueness is checked by the caller."""
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        first_name=first_name,
        last_name=last_name,
        is_active=True,
    )
    default_role = user_repo.get_role_by_name(Role.USER)
    if default_role is not None:
        user.assign_role(default_role)
    else:
        logger.warning("default_role_missing", role=Role.USER)

    user_repo.create(user)
    logger.info("user_registered", user_id=user.id, username=username)
    return user.id
