from blogapp.models import Role, User
from blogapp.repositories import users as user_repo
from blogapp.seed import seed_admin_user, seed_roles


def test_seed_roles_is_idempotent(app):
    # the app fixture already seeded
    assert seed_roles() == []
    assert sorted(r.name for r in Role.query.all()) == ["Admin", "User"]


def test_seed_admin_user_has_both_roles(app):
    admin = seed_admin_user()
    assert admin.email == app.config["ADMIN_EMAIL"]
    assert sorted(admin.role_names) == ["Admin", "User"]
    assert seed_admin_user() is None
    assert User.query.count() == 1


def test_seed_cli_command(app):
    result = app.test_cli_runner().invoke(args=["seed"])
    assert result.exit_code == 0
    assert "admin created: admin@blogapp.com" in result.output
    assert user_repo.get_by_email("admin@blogapp.com") is not None
