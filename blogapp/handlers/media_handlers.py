# blogapp/handlers/media_handlers.py
import cloudinary.uploader
import structlog
from flask import current_app

from blogapp.auth.policy import require_authenticated
from blogapp.errors import DomainError, ValidationError
from blogapp.handlers import handler
from blogapp.models import MediaType

logger = structlog.get_logger(__name__)

ALLOWED_EXTENSIONS = {
    MediaType.IMAGE: {"jpeg", "jpg", "png", "webp", "gif"},
    MediaType.VIDEO: {"mp4", "webm", "mov"},
}


def detect_media_type(filename, mimetype):
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    for media_type, extensions in ALLOWED_EXTENSIONS.items():
        prefix = "image/" if media_type == MediaType.IMAGE else "video/"
        if extension in extensions and (mimetype or "").startswith(prefix):
            return media_type
    return None


def _file_size(file):
    file.seek(0, 2)
    size = file.tell()
    file.seek(0)
    return size


@handler
def upload_media(caller, file, caption=None, order=0):
    require_authenticated(caller)

    media_type = detect_media_type(file.filename or "", file.mimetype)
    if media_type is None:
        raise ValidationError([f"File type not allowed: {file.filename}"])

    max_bytes = current_app.config["MEDIA_MAX_BYTES"]
    if _file_size(file) > max_bytes:
        raise ValidationError([f"File cannot exceed {max_bytes} bytes"])

    result = cloudinary.uploader.upload(
        file,
        folder=current_app.config["MEDIA_FOLDER"],
        resource_type=media_type.value.lower(),
    )
    url = result.get("secure_url")
    if not url:
        raise DomainError("Upload did not return a URL")

    logger.info("media_uploaded", user_id=caller.id, public_id=result.get("public_id"), type=media_type.value)
    return {"url": url, "type": media_type.value, "caption": caption, "order": order}
