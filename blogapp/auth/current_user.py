# blogapp/auth/current_user.py
from dataclasses import dataclass, field
from typing import List, Optional

from blogapp.errors import AuthError
from blogapp.models import Role


@dataclass(frozen=True)
class CurrentUser:
    """Identity of the caller, built once per request from the validated token."""

    id: Optional[int] = None
    email: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    is_authenticated: bool = False

    @property
    def is_admin(self):
        return Role.ADMIN in self.roles

    @classmethod
    def anonymous(cls):
        return cls()

    @classmethod
    def from_claims(cls, claims):
        try:
            user_id = int(claims["sub"])
        except (KeyError, TypeError, ValueError) as e:
            raise AuthError(AuthError.INVALID_TOKEN) from e
        roles = claims.get("roles") or []
        if isinstance(roles, str):
            roles = [roles]
        return cls(
            id=user_id,
            email=claims.get("email"),
            roles=list(roles),
            is_authenticated=True,
        )
