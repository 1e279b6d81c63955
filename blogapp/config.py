# blogapp/config.py
import os


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # Relational store (users, roles, categories)
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///blogapp.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Document store (blogs)
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "blogapp")

    # Bearer tokens
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "supersecret-change-me-at-least-32-bytes")
    JWT_ISSUER = os.environ.get("JWT_ISSUER", "BlogApplication")
    JWT_AUDIENCE = os.environ.get("JWT_AUDIENCE", "BlogApplicationUsers")
    JWT_EXPIRATION_MINUTES = int(os.environ.get("JWT_EXPIRATION_MINUTES", "60"))

    CORS_ORIGINS = os.environ.get(
        "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")

    # Media uploads
    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")
    MEDIA_FOLDER = os.environ.get("MEDIA_FOLDER", "blog_media")
    MEDIA_MAX_BYTES = int(os.environ.get("MEDIA_MAX_BYTES", str(10 * 1024 * 1024)))

    # `flask seed` admin account
    ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@blogapp.com")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "Admin@123")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_JSON = _env_bool("LOG_JSON", True)

    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 50


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MONGO_DB_NAME = "blogapp_test"
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length-for-hs256"
    JWT_EXPIRATION_MINUTES = 5
    LOG_JSON = False
    LOG_LEVEL = "WARNING"
