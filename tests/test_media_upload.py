import io

import cloudinary.uploader
import pytest

from blogapp.handlers.media_handlers import detect_media_type
from blogapp.models import MediaType

from tests.conftest import auth_headers


@pytest.fixture
def fake_upload(monkeypatch):
    calls = []

    def upload(file, **options):
        calls.append(options)
        return {"secure_url": "https://res.cloudinary.com/demo/x", "public_id": "blog_media/x"}

    monkeypatch.setattr(cloudinary.uploader, "upload", upload)
    return calls


def _post(client, token, filename, content_type, data=b"bytes", **form):
    body = {"file": (io.BytesIO(data), filename, content_type), **form}
    return client.post(
        "/media/upload",
        data=body,
        content_type="multipart/form-data",
        headers=auth_headers(token),
    )


def test_upload_image(client, alice_token, fake_upload):
    resp = _post(client, alice_token, "cover.png", "image/png", caption="Cover", order="2")
    assert resp.status_code == 201
    assert resp.get_json() == {
        "url": "https://res.cloudinary.com/demo/x",
        "type": "Image",
        "caption": "Cover",
        "order": 2,
    }
    assert fake_upload[0]["resource_type"] == "image"


def test_upload_video(client, alice_token, fake_upload):
    resp = _post(client, alice_token, "clip.mp4", "video/mp4")
    assert resp.status_code == 201
    assert resp.get_json()["type"] == "Video"
    assert fake_upload[0]["resource_type"] == "video"


def test_upload_rejects_other_types(client, alice_token, fake_upload):
    resp = _post(client, alice_token, "notes.txt", "text/plain")
    assert resp.status_code == 400
    assert fake_upload == []


def test_upload_rejects_large_files(app, client, alice_token, fake_upload):
    app.config["MEDIA_MAX_BYTES"] = 4
    resp = _post(client, alice_token, "cover.png", "image/png", data=b"12345")
    assert resp.status_code == 400
    assert fake_upload == []


def test_upload_requires_file_and_token(client, alice_token):
    assert client.post("/media/upload", headers=auth_headers(alice_token)).status_code == 400
    assert client.post("/media/upload").status_code == 401


@pytest.mark.parametrize(
    "filename,mimetype,expected",
    [
        ("a.JPG", "image/jpeg", MediaType.IMAGE),
        ("a.webm", "video/webm", MediaType.VIDEO),
        ("a.png", "video/mp4", None),
        ("noextension", "image/png", None),
    ],
)
def test_detect_media_type(filename, mimetype, expected):
    assert detect_media_type(filename, mimetype) == expected
