# blogapp/routes/upload_routes.py
from flask import Blueprint, g, request

from blogapp.auth.decorators import login_required
from blogapp.handlers import media_handlers
from blogapp.utils.result import error_response, to_response

upload_bp = Blueprint("upload", __name__)


@upload_bp.route("/upload", methods=["POST"])
@login_required
def upload_media():
    if "file" not in request.files:
        return error_response("No 'file' part in the request", 400)

    result = media_handlers.upload_media(
        g.current_user,
        request.files["file"],
        caption=request.form.get("caption"),
        order=request.form.get("order", 0, type=int),
    )
    return to_response(result, status=201)
