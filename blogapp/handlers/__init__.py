# blogapp/handlers/__init__.py
"""
Request handlers.

Each handler takes the caller identity and an already-parsed command/query
value, and returns a ``Result``. The ``handler`` decorator is the single
place where errors become failed envelopes.
"""
from functools import wraps

import structlog

from blogapp.errors import GENERIC_ERROR_MESSAGE, AppError, ErrorKind
from blogapp.extensions import db
from blogapp.utils.result import Result

logger = structlog.get_logger(__name__)


def handler(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return Result.success(f(*args, **kwargs))
        except AppError as e:
            db.session.rollback()
            logger.info("handler_failed", handler=f.__name__, kind=e.kind.value, error=e.message)
            return Result.from_error(e)
        except Exception:
            db.session.rollback()
            logger.exception("handler_crashed", handler=f.__name__)
            return Result.failure(GENERIC_ERROR_MESSAGE, kind=ErrorKind.INTERNAL)
    return wrapper
