# blogapp/auth/tokens.py
import uuid
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

from blogapp.errors import AuthError

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "exp", "iat", "iss", "aud", "jti"]


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, digest):
    if not digest:
        return False
    return check_password_hash(digest, password)


def issue_token(user_id, email, roles, now=None):
    config = current_app.config
    now = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "roles": list(roles),
        "jti": str(uuid.uuid4()),
        "iss": config["JWT_ISSUER"],
        "aud": config["JWT_AUDIENCE"],
        "iat": now,
        "exp": now + timedelta(minutes=config["JWT_EXPIRATION_MINUTES"]),
    }
    return jwt.encode(payload, config["JWT_SECRET_KEY"], algorithm=ALGORITHM)


def decode_token(token):
    """Validate signature, issuer, audience and expiry (no leeway).

    Any failure raises ``AuthError(INVALID_TOKEN)``.
    """
    config = current_app.config
    try:
        return jwt.decode(
            token,
            config["JWT_SECRET_KEY"],
            algorithms=[ALGORITHM],
            audience=config["JWT_AUDIENCE"],
            issuer=config["JWT_ISSUER"],
            leeway=0,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthError(AuthError.INVALID_TOKEN, "Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthError(AuthError.INVALID_TOKEN) from e
