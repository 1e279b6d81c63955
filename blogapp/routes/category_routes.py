# blogapp/routes/category_routes.py
from flask import Blueprint, g

from blogapp.auth.decorators import login_required
from blogapp.handlers import category_handlers
from blogapp.routes import arg_bool, parse_body
from blogapp.schemas import CreateCategoryRequest
from blogapp.utils.result import to_response

category_bp = Blueprint("categories", __name__)


@category_bp.route("/", methods=["GET"])
def get_categories():
    active_only = arg_bool("activeOnly", True)
    return to_response(category_handlers.list_categories(active_only))


@category_bp.route("/", methods=["POST"])
@login_required
def create_category():
    payload = parse_body(CreateCategoryRequest)
    return to_response(category_handlers.create_category(g.current_user, payload), status=201)
