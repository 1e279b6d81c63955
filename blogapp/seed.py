# blogapp/seed.py
import click
import structlog
from flask import current_app
from flask.cli import with_appcontext

from blogapp.auth.tokens import hash_password
from blogapp.extensions import db
from blogapp.models import Role, User
from blogapp.repositories import users as user_repo

logger = structlog.get_logger(__name__)

DEFAULT_ROLES = {
    Role.USER: "Regular user who can create and manage own blogs",
    Role.ADMIN: "Administrator with full moderation rights",
}


def seed_roles():
    """Create the default roles if they are missing. Idempotent."""
    created = []
    for name, description in DEFAULT_ROLES.items():
        if user_repo.get_role_by_name(name) is None:
            user_repo.create_role(name, description)
            created.append(name)
    if created:
        logger.info("roles_seeded", roles=created)
    return created


def seed_admin_user(username=None, email=None, password=None):
    """Create the admin account holding both roles, unless that email exists."""
    config = current_app.config
    email = email or config["ADMIN_EMAIL"]
    if user_repo.get_by_email(email) is not None:
        return None

    seed_roles()
    admin = User(
        username=username or config["ADMIN_USERNAME"],
        email=email,
        password_hash=hash_password(password or config["ADMIN_PASSWORD"]),
        first_name="System",
        last_name="Administrator",
        is_active=True,
    )
    for role_name in (Role.ADMIN, Role.USER):
        admin.assign_role(user_repo.get_role_by_name(role_name))
    user_repo.create(admin)
    logger.info("admin_seeded", user_id=admin.id, email=email)
    return admin


@click.command("seed")
@with_appcontext
@click.option("--create-tables", is_flag=True, help="Run db.create_all() first (no migrations).")
def seed_command(create_tables):
    """Seed the default roles and the admin account."""
    if create_tables:
        db.create_all()
    roles = seed_roles()
    admin = seed_admin_user()
    click.echo(f"roles created: {', '.join(roles) or 'none'}")
    click.echo(f"admin created: {admin.email if admin else 'already present'}")
