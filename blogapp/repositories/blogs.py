"""Blog documents in MongoDB.

Listings are 1-based pages sorted newest first. The view counter is only
ever touched through ``increment_view_count`` so concurrent readers never
lose an increment.
"""
import re

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING

from blogapp.extensions import mongo
from blogapp.models import Blog

BLOG_COLLECTION = "blogs"


def _collection():
    return mongo.collection(BLOG_COLLECTION)


def _object_id(blog_id):
    try:
        return ObjectId(blog_id)
    except (InvalidId, TypeError):
        return None


def get_by_id(blog_id):
    oid = _object_id(blog_id)
    if oid is None:
        return None
    doc = _collection().find_one({"_id": oid})
    return Blog.from_document(doc) if doc else None


def create(blog):
    result = _collection().insert_one(blog.to_document())
    blog.id = str(result.inserted_id)
    return blog


def update(blog):
    _collection().replace_one({"_id": ObjectId(blog.id)}, blog.to_document())
    return blog


def delete(blog_id):
    oid = _object_id(blog_id)
    if oid is not None:
        _collection().delete_one({"_id": oid})


def _page(query, page_number, page_size, sort_field="created_at"):
    cursor = (
        _collection().find(query)
        .sort(sort_field, DESCENDING)
        .skip((page_number - 1) * page_size)
        .limit(page_size)
    )
    return [Blog.from_document(doc) for doc in cursor]


def list_all(page_number, page_size):
    return _page({}, page_number, page_size)


def list_by_user(user_id, page_number, page_size):
    return _page({"user_id": user_id}, page_number, page_size)


def list_by_category(category_id, page_number, page_size):
    return _page({"category_id": category_id}, page_number, page_size)


def list_published(page_number, page_size):
    return _page({"is_published": True}, page_number, page_size, "published_at")


def search(term, page_number, page_size):
    pattern = {"$regex": re.escape(term), "$options": "i"}
    query = {
        "$or": [
            {"title": pattern},
            {"content": pattern},
            {"tags": term},
        ]
    }
    return _page(query, page_number, page_size)


def total_count():
    return _collection().count_documents({})


def user_blogs_count(user_id):
    return _collection().count_documents({"user_id": user_id})


def category_blogs_count(category_id):
    return _collection().count_documents({"category_id": category_id})


def increment_view_count(blog_id):
    oid = _object_id(blog_id)
    if oid is None:
        return False
    result = _collection().update_one({"_id": oid}, {"$inc": {"view_count": 1}})
    return result.matched_count == 1
