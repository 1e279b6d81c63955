# blogapp/handlers/auth_handlers.py
from blogapp.auth import service as auth_service
from blogapp.errors import DomainError, NotFoundError
from blogapp.handlers import handler
from blogapp.repositories import users as user_repo
from blogapp.utils.validators import validate_login, validate_register


@handler
def register(payload):
    validate_register(payload)

    # one combined message so callers cannot tell which field collided
    if user_repo.exists(payload.email, payload.username):
        raise DomainError("User with this email or username already exists")

    user_id = auth_service.register(
        payload.username,
        payload.email,
        payload.password,
        payload.first_name,
        payload.last_name,
    )
    user = user_repo.get_by_id(user_id)
    if user is None:
        raise DomainError("Failed to create user")
    return user.to_dict()


@handler
def login(payload):
    validate_login(payload)
    token, user_id, roles = auth_service.authenticate(payload.email, payload.password)

    user = user_repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")

    user_dto = user.to_dict()
    user_dto["roles"] = roles
    return {"token": token, "user": user_dto}
