# blogapp/utils/validators.py
import re

from email_validator import EmailNotValidError, validate_email

from blogapp.errors import ValidationError

TITLE_MAX = 200
CONTENT_MIN = 50
SUMMARY_MAX = 500
TAGS_MAX = 10

USERNAME_MIN = 3
USERNAME_MAX = 50
PASSWORD_MIN = 6

CATEGORY_NAME_MAX = 100
CATEGORY_DESCRIPTION_MAX = 500


def _raise_if(errors):
    if errors:
        raise ValidationError(errors)


def blog_errors(payload):
    """All broken blog rules, in a stable order; empty when valid."""
    errors = []
    title = (payload.title or "").strip()
    if not title:
        errors.append("Title is required")
    elif len(payload.title) > TITLE_MAX:
        errors.append(f"Title cannot exceed {TITLE_MAX} characters")

    content = payload.content or ""
    if not content.strip():
        errors.append("Content is required")
    elif len(content) < CONTENT_MIN:
        errors.append(f"Content must be at least {CONTENT_MIN} characters")

    if payload.summary and len(payload.summary) > SUMMARY_MAX:
        errors.append(f"Summary cannot exceed {SUMMARY_MAX} characters")

    if len(payload.tags) > TAGS_MAX:
        errors.append(f"Maximum {TAGS_MAX} tags allowed")
    return errors


def validate_blog(payload):
    _raise_if(blog_errors(payload))


def validate_register(payload):
    errors = []
    username = payload.username or ""
    if not username.strip():
        errors.append("Username is required")
    elif len(username) < USERNAME_MIN:
        errors.append(f"Username must be at least {USERNAME_MIN} characters")
    elif len(username) > USERNAME_MAX:
        errors.append(f"Username cannot exceed {USERNAME_MAX} characters")

    if not payload.email:
        errors.append("Email is required")
    else:
        try:
            validate_email(payload.email, check_deliverability=False)
        except EmailNotValidError:
            errors.append("Invalid email format")

    password = payload.password or ""
    if not password:
        errors.append("Password is required")
    else:
        if len(password) < PASSWORD_MIN:
            errors.append(f"Password must be at least {PASSWORD_MIN} characters")
        if not re.search(r"[A-Z]", password):
            errors.append("Password must contain at least one uppercase letter")
        if not re.search(r"[a-z]", password):
            errors.append("Password must contain at least one lowercase letter")
        if not re.search(r"[0-9]", password):
            errors.append("Password must contain at least one number")
    _raise_if(errors)


def validate_login(payload):
    errors = []
    if not payload.email:
        errors.append("Email is required")
    if not payload.password:
        errors.append("Password is required")
    _raise_if(errors)


def validate_category(payload):
    errors = []
    name = (payload.name or "").strip()
    if not name:
        errors.append("Category name is required")
    elif len(name) > CATEGORY_NAME_MAX:
        errors.append(f"Category name cannot exceed {CATEGORY_NAME_MAX} characters")
    if payload.description and len(payload.description) > CATEGORY_DESCRIPTION_MAX:
        errors.append(f"Description cannot exceed {CATEGORY_DESCRIPTION_MAX} characters")
    _raise_if(errors)
