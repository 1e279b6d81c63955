# blogapp/routes/blog_routes.py
from flask import Blueprint, g, request

from blogapp.auth.decorators import login_required
from blogapp.handlers import blog_handlers
from blogapp.handlers.blog_handlers import BlogListQuery, clamp_paging
from blogapp.routes import arg_int, parse_body
from blogapp.schemas import BlogPayload
from blogapp.utils.result import to_response

blog_bp = Blueprint("blogs", __name__)


def _paging():
    return clamp_paging(
        arg_int("pageNumber", 1),
        request.args.get("pageSize", None, type=int),
    )


# Public listing (published posts unless filtered by user or category)
@blog_bp.route("/", methods=["GET"])
def get_blogs():
    page_number, page_size = _paging()
    query = BlogListQuery(
        page_number=page_number,
        page_size=page_size,
        user_id=arg_int("userId", minimum=1),
        category_id=arg_int("categoryId", minimum=1),
        search_term=request.args.get("searchTerm", type=str),
        published_only=True,
    )
    return to_response(blog_handlers.list_blogs(query))


@blog_bp.route("/my-blogs", methods=["GET"])
@login_required
def get_my_blogs():
    page_number, page_size = _paging()
    return to_response(blog_handlers.list_my_blogs(g.current_user, page_number, page_size))


# Detail; bumps the view counter
@blog_bp.route("/<string:blog_id>", methods=["GET"])
def get_blog(blog_id):
    return to_response(blog_handlers.get_blog(blog_id))


@blog_bp.route("/", methods=["POST"])
@login_required
def create_blog():
    payload = parse_body(BlogPayload)
    return to_response(blog_handlers.create_blog(g.current_user, payload), status=201)


@blog_bp.route("/<string:blog_id>", methods=["PUT"])
@login_required
def update_blog(blog_id):
    payload = parse_body(BlogPayload)
    return to_response(blog_handlers.update_blog(g.current_user, blog_id, payload))


@blog_bp.route("/<string:blog_id>", methods=["DELETE"])
@login_required
def delete_blog(blog_id):
    return to_response(blog_handlers.delete_blog(g.current_user, blog_id), status=204)
