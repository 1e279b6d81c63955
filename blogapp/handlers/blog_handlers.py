# blogapp/handlers/blog_handlers.py
import math
from dataclasses import dataclass
from typing import Optional

import structlog
from flask import current_app

from blogapp.auth.policy import (
    ensure_can_delete_blog,
    ensure_can_update_blog,
    require_admin,
    require_authenticated,
)
from blogapp.errors import NotFoundError
from blogapp.handlers import handler
from blogapp.models import Blog, MediaItem
from blogapp.models.blog import utcnow
from blogapp.repositories import blogs as blog_repo
from blogapp.repositories import categories as category_repo
from blogapp.repositories import users as user_repo
from blogapp.utils.validators import validate_blog

logger = structlog.get_logger(__name__)


@dataclass
class BlogListQuery:
    page_number: int = 1
    page_size: int = 10
    user_id: Optional[int] = None
    category_id: Optional[int] = None
    search_term: Optional[str] = None
    published_only: bool = True


def clamp_paging(page_number, page_size):
    max_size = current_app.config.get("MAX_PAGE_SIZE", 50)
    default_size = current_app.config.get("DEFAULT_PAGE_SIZE", 10)
    page_number = max(page_number or 1, 1)
    page_size = page_size or default_size
    return page_number, min(max(page_size, 1), max_size)


def _media_items(payload):
    return [MediaItem(**item.model_dump()) for item in payload.media_items]


def _get_or_404(blog_id):
    blog = blog_repo.get_by_id(blog_id)
    if blog is None:
        raise NotFoundError("Blog not found")
    return blog


def _resolve_listing(query):
    """Pick exactly one listing strategy; the first matching filter wins."""
    page, size = query.page_number, query.page_size

    if query.search_term and query.search_term.strip():
        blogs = blog_repo.search(query.search_term.strip(), page, size)
        # approximation: size of the returned page, not the full match count
        total = len(blogs)
    elif query.user_id is not None:
        blogs = blog_repo.list_by_user(query.user_id, page, size)
        total = blog_repo.user_blogs_count(query.user_id)
    elif query.category_id is not None:
        blogs = blog_repo.list_by_category(query.category_id, page, size)
        total = blog_repo.category_blogs_count(query.category_id)
    elif query.published_only:
        blogs = blog_repo.list_published(page, size)
        total = blog_repo.total_count()
    else:
        blogs = blog_repo.list_all(page, size)
        total = blog_repo.total_count()
    return blogs, total


def _listing_dto(blogs, total, query):
    return {
        "blogs": [b.to_dto() for b in blogs],
        "totalCount": total,
        "pageNumber": query.page_number,
        "pageSize": query.page_size,
        "totalPages": math.ceil(total / query.page_size) if query.page_size else 0,
    }


@handler
def list_blogs(query):
    blogs, total = _resolve_listing(query)
    return _listing_dto(blogs, total, query)


@handler
def list_my_blogs(caller, page_number, page_size):
    require_authenticated(caller)
    query = BlogListQuery(
        page_number=page_number,
        page_size=page_size,
        user_id=caller.id,
        published_only=False,
    )
    blogs, total = _resolve_listing(query)
    return _listing_dto(blogs, total, query)


@handler
def get_blog(blog_id):
    blog = _get_or_404(blog_id)

    # every successful read counts, the owner's included
    blog_repo.increment_view_count(blog.id)
    blog.view_count += 1
    return blog.to_dto()


@handler
def create_blog(caller, payload):
    validate_blog(payload)
    require_authenticated(caller)

    user = user_repo.get_by_id(caller.id)
    if user is None:
        raise NotFoundError("User not found")

    category_name = None
    if payload.category_id is not None:
        category = category_repo.get_by_id(payload.category_id)
        if category is None:
            raise NotFoundError("Category not found")
        category_name = category.name

    blog = Blog(
        user_id=user.id,
        username=user.username,
        category_id=payload.category_id,
        category_name=category_name,
        title=payload.title,
        content=payload.content,
        summary=payload.summary,
        tags=list(payload.tags),
        media_items=_media_items(payload),
    )
    blog.set_published(payload.is_published, now=blog.created_at)

    blog_repo.create(blog)
    logger.info("blog_created", blog_id=blog.id, user_id=user.id, published=blog.is_published)
    return blog.to_dto()


@handler
def update_blog(caller, blog_id, payload):
    validate_blog(payload)
    require_authenticated(caller)

    blog = _get_or_404(blog_id)
    ensure_can_update_blog(caller, blog)

    now = utcnow()
    blog.title = payload.title
    blog.content = payload.content
    blog.summary = payload.summary
    blog.tags = list(payload.tags)
    blog.media_items = _media_items(payload)
    blog.updated_at = now
    blog.set_published(payload.is_published, now=now)

    blog_repo.update(blog)
    logger.info("blog_updated", blog_id=blog.id, user_id=caller.id, published=blog.is_published)
    return blog.to_dto()


@handler
def delete_blog(caller, blog_id):
    require_authenticated(caller)
    blog = _get_or_404(blog_id)
    ensure_can_delete_blog(caller, blog)

    blog_repo.delete(blog.id)
    logger.info("blog_deleted", blog_id=blog.id, user_id=caller.id, admin=caller.is_admin)
    return True


@handler
def admin_delete_blog(caller, blog_id):
    # role check happens before the document store is touched
    require_admin(caller)
    blog = _get_or_404(blog_id)

    blog_repo.delete(blog.id)
    logger.info("blog_moderated", blog_id=blog.id, admin_id=caller.id)
    return True
