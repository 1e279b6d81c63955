# blogapp/handlers/category_handlers.py
import structlog

from blogapp.auth.policy import require_admin, require_authenticated
from blogapp.errors import DomainError, NotFoundError
from blogapp.handlers import handler
from blogapp.models import Category
from blogapp.repositories import categories as category_repo
from blogapp.utils.slug import generate_slug
from blogapp.utils.validators import validate_category

logger = structlog.get_logger(__name__)

DUPLICATE_NAME = "A category with this name already exists"
DUPLICATE_SLUG = "A category with this slug already exists"


@handler
def list_categories(active_only=True):
    categories = category_repo.list_active() if active_only else category_repo.list_all()
    return [c.to_dict() for c in categories]


@handler
def create_category(caller, payload):
    require_authenticated(caller)
    validate_category(payload)

    name = payload.name.strip()
    if category_repo.exists_by_name(name):
        raise DomainError(DUPLICATE_NAME)

    slug = generate_slug(name)
    if category_repo.get_by_slug(slug) is not None:
        raise DomainError(DUPLICATE_SLUG)

    category = Category(
        name=name,
        description=payload.description,
        slug=slug,
        created_by_user_id=caller.id,
        is_active=True,
    )
    category_repo.create(category)
    logger.info("category_created", category_id=category.id, slug=slug, user_id=caller.id)
    return category.to_dict()


@handler
def update_category(caller, category_id, payload):
    require_admin(caller)
    validate_category(payload)

    category = category_repo.get_by_id(category_id)
    if category is None:
        raise NotFoundError("Category not found")

    name = payload.name.strip()
    if category_repo.exists_by_name(name, exclude_id=category.id):
        raise DomainError(DUPLICATE_NAME)

    slug = generate_slug(name)
    existing = category_repo.get_by_slug(slug)
    if existing is not None and existing.id != category.id:
        raise DomainError(DUPLICATE_SLUG)

    category.name = name
    category.slug = slug
    category.description = payload.description
    if payload.is_active is not None:
        category.is_active = payload.is_active
    category_repo.update(category)
    logger.info("category_updated", category_id=category.id, is_active=category.is_active)
    return category.to_dict()
