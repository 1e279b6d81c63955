# blogapp/routes/admin_routes.py
from flask import Blueprint, g

from blogapp.auth.decorators import admin_required
from blogapp.handlers import blog_handlers, category_handlers
from blogapp.routes import parse_body
from blogapp.schemas import UpdateCategoryRequest
from blogapp.utils.result import to_response

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/blogs/<string:blog_id>", methods=["DELETE"])
@admin_required
def delete_blog(blog_id):
    return to_response(blog_handlers.admin_delete_blog(g.current_user, blog_id), status=204)


@admin_bp.route("/categories/<int(max=2147483647):category_id>", methods=["PUT"])
@admin_required
def update_category(category_id):
    payload = parse_body(UpdateCategoryRequest)
    return to_response(category_handlers.update_category(g.current_user, category_id, payload))
