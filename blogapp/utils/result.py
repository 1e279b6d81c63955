# blogapp/utils/result.py
from dataclasses import dataclass, field
from typing import Any, List, Optional

from flask import jsonify

from blogapp.errors import STATUS_BY_KIND, ErrorKind


@dataclass
class Result:
    """Uniform success/failure envelope returned by every handler."""

    is_success: bool
    data: Any = None
    message: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, data=None):
        return cls(is_success=True, data=data)

    @classmethod
    def failure(cls, message, errors=None, kind=ErrorKind.DOMAIN):
        return cls(
            is_success=False,
            message=message,
            errors=list(errors) if errors else [message],
            kind=kind,
        )

    @classmethod
    def from_error(cls, error):
        return cls.failure(error.message, error.errors, error.kind)

    @property
    def status_code(self):
        if self.is_success:
            return 200
        return STATUS_BY_KIND.get(self.kind, 400)

    def body(self):
        return {"message": self.message, "errors": self.errors}


def error_response(message, status, errors=None):
    return jsonify({"message": message, "errors": errors or [message]}), status


def to_response(result, status=200):
    """Render a handler Result as a Flask response tuple."""
    if not result.is_success:
        return jsonify(result.body()), result.status_code
    if status == 204:
        return "", 204
    return jsonify(result.data), status
