from blogapp.models import Category
from blogapp.repositories import categories as category_repo

from tests.conftest import auth_headers


def test_create_category_generates_slug(client, alice_token):
    resp = client.post(
        "/categories",
        json={"name": "Tech & News", "description": "Daily tech"},
        headers=auth_headers(alice_token),
    )
    assert resp.status_code == 201
    data = resp.get_json()
    assert data["slug"] == "tech-and-news"
    assert data["isActive"] is True
    assert data["createdByUserId"] > 0


def test_duplicate_name_is_rejected_regardless_of_case(client, alice_token, bob_token):
    client.post("/categories", json={"name": "Tech & News"}, headers=auth_headers(alice_token))
    resp = client.post("/categories", json={"name": "tech & news"}, headers=auth_headers(bob_token))
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "A category with this name already exists"
    assert Category.query.count() == 1


def test_slug_collision_is_a_domain_failure(client, alice_token):
    client.post("/categories", json={"name": "Data & AI"}, headers=auth_headers(alice_token))
    resp = client.post("/categories", json={"name": "Data and AI"}, headers=auth_headers(alice_token))
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "A category with this slug already exists"


def test_create_category_requires_token(client):
    resp = client.post("/categories", json={"name": "Anything"})
    assert resp.status_code == 401


def test_create_category_requires_name(client, alice_token):
    resp = client.post("/categories", json={"name": "  "}, headers=auth_headers(alice_token))
    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Category name is required"]


def test_list_categories_sorted_and_filtered(client, alice_token, admin_token):
    headers = auth_headers(alice_token)
    for name in ["Python", "Go", "Rust"]:
        client.post("/categories", json={"name": name}, headers=headers)

    names = [c["name"] for c in client.get("/categories").get_json()]
    assert names == ["Go", "Python", "Rust"]

    rust = category_repo.get_by_slug("rust")
    resp = client.put(
        f"/admin/categories/{rust.id}",
        json={"name": "Rust", "isActive": False},
        headers=auth_headers(admin_token),
    )
    assert resp.status_code == 200
    assert resp.get_json()["isActive"] is False

    active = [c["name"] for c in client.get("/categories?activeOnly=true").get_json()]
    everything = [c["name"] for c in client.get("/categories?activeOnly=false").get_json()]
    assert active == ["Go", "Python"]
    assert everything == ["Go", "Python", "Rust"]


def test_admin_rename_checks_other_names(client, alice_token, admin_token):
    headers = auth_headers(alice_token)
    go = client.post("/categories", json={"name": "Go"}, headers=headers).get_json()
    client.post("/categories", json={"name": "Python"}, headers=headers)

    admin = auth_headers(admin_token)
    clash = client.put(f"/admin/categories/{go['id']}", json={"name": "PYTHON"}, headers=admin)
    assert clash.status_code == 400

    # renaming to its own name (different case) is allowed
    same = client.put(f"/admin/categories/{go['id']}", json={"name": "GO"}, headers=admin)
    assert same.status_code == 200
    assert same.get_json()["slug"] == "go"

    renamed = client.put(f"/admin/categories/{go['id']}", json={"name": "Golang"}, headers=admin)
    assert renamed.get_json()["slug"] == "golang"


def test_category_update_is_admin_only(client, alice_token):
    go = client.post("/categories", json={"name": "Go"}, headers=auth_headers(alice_token)).get_json()
    resp = client.put(f"/admin/categories/{go['id']}", json={"name": "Go"}, headers=auth_headers(alice_token))
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Admin role required"


def test_update_missing_category(client, admin_token):
    resp = client.put("/admin/categories/404", json={"name": "Nope"}, headers=auth_headers(admin_token))
    assert resp.status_code == 404


def test_exists_by_name_with_exclusion(app):
    category = category_repo.create(Category(name="Music", slug="music", created_by_user_id=1))
    assert category_repo.exists_by_name("MUSIC")
    assert not category_repo.exists_by_name("music", exclude_id=category.id)
    assert not category_repo.exists_by_name("Film")


def test_rename_keeps_active_flag(client, alice_token, admin_token):
    go = client.post("/categories", json={"name": "Go"}, headers=auth_headers(alice_token)).get_json()
    admin = auth_headers(admin_token)
    client.put(f"/admin/categories/{go['id']}", json={"name": "Go", "isActive": False}, headers=admin)

    resp = client.put(f"/admin/categories/{go['id']}", json={"name": "Golang"}, headers=admin)
    assert resp.status_code == 200
    assert resp.get_json()["isActive"] is False
    assert resp.get_json()["slug"] == "golang"


def test_update_out_of_range_category_id(client, admin_token):
    resp = client.put(f"/admin/categories/{10**30}", json={"name": "Nope"}, headers=auth_headers(admin_token))
    assert resp.status_code == 404
