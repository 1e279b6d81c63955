# blogapp/models/__init__.py
"""
Relational models (SQLAlchemy) and the blog document schema (pydantic).
"""
from .user import User, Role, UserRole
from .category import Category
from .blog import Blog, MediaItem, MediaType

__all__ = ["User", "Role", "UserRole", "Category", "Blog", "MediaItem", "MediaType"]
