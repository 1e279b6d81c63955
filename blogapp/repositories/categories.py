# blogapp/repositories/categories.py
from sqlalchemy import func

from blogapp.extensions import db
from blogapp.models import Category


def get_by_id(category_id):
    return db.session.get(Category, category_id)


def get_by_slug(slug):
    return Category.query.filter_by(slug=slug).first()


def list_all():
    return Category.query.order_by(Category.name).all()


def list_active():
    return Category.query.filter_by(is_active=True).order_by(Category.name).all()


def exists_by_name(name, exclude_id=None):
    """Case-insensitive name check, optionally ignoring one category (for renames)."""
    query = Category.query.filter(func.lower(Category.name) == name.lower())
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    return db.session.query(query.exists()).scalar()


def create(category):
    db.session.add(category)
    db.session.commit()
    return category


def update(category):
    db.session.add(category)
    db.session.commit()
    return category


def delete(category_id):
    category = get_by_id(category_id)
    if category is not None:
        db.session.delete(category)
        db.session.commit()
