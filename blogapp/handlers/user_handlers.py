# blogapp/handlers/user_handlers.py
from blogapp.auth.policy import require_authenticated
from blogapp.errors import NotFoundError
from blogapp.handlers import handler
from blogapp.repositories import users as user_repo


def _load_caller(caller):
    require_authenticated(caller)
    user = user_repo.get_by_id(caller.id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@handler
def get_profile(caller):
    return _load_caller(caller).to_dict()


@handler
def update_profile(caller, payload):
    user = _load_caller(caller)
    user.first_name = payload.first_name
    user.last_name = payload.last_name
    user.profile_image_url = payload.profile_image_url
    user_repo.update(user)
    return user.to_dict()
