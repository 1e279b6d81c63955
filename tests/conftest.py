import mongomock
import pytest

from blogapp import create_app
from blogapp.config import TestingConfig
from blogapp.extensions import db
from blogapp.seed import seed_admin_user, seed_roles

VALID_PASSWORD = "Password123"
LONG_CONTENT = "This is a test blog content with enough characters to pass validation."


@pytest.fixture
def app():
    app = create_app(TestingConfig, mongo_client=mongomock.MongoClient())
    with app.app_context():
        db.create_all()
        seed_roles()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, username, email, password=VALID_PASSWORD, **extra):
    body = {"username": username, "email": email, "password": password, **extra}
    return client.post("/auth/register", json=body)


def login(client, email, password=VALID_PASSWORD):
    return client.post("/auth/login", json={"email": email, "password": password})


def create_blog(client, token, **overrides):
    body = {
        "title": "Test Blog",
        "content": LONG_CONTENT,
        "summary": "Test summary",
        "tags": ["test", "blog"],
        "isPublished": True,
    }
    body.update(overrides)
    return client.post("/blogs", json=body, headers=auth_headers(token))


@pytest.fixture
def alice_token(client):
    register(client, "alice", "alice@example.com")
    return login(client, "alice@example.com").get_json()["token"]


@pytest.fixture
def bob_token(client):
    register(client, "bob", "bob@example.com")
    return login(client, "bob@example.com").get_json()["token"]


@pytest.fixture
def admin_token(app, client):
    seed_admin_user(password="Admin@123")
    return login(client, app.config["ADMIN_EMAIL"], "Admin@123").get_json()["token"]
