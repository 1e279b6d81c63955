# blogapp/repositories/users.py
from sqlalchemy import or_

from blogapp.extensions import db
from blogapp.models import Role, User


def get_by_id(user_id):
    return db.session.get(User, user_id)


def get_by_email(email):
    return User.query.filter_by(email=email).first()


def get_by_username(username):
    return User.query.filter_by(username=username).first()


def exists(email, username):
    """True when either the email or the username is already taken."""
    query = User.query.filter(or_(User.email == email, User.username == username))
    return db.session.query(query.exists()).scalar()


def create(user):
    db.session.add(user)
    db.session.commit()
    return user


def update(user):
    db.session.add(user)
    db.session.commit()
    return user


def delete(user_id):
    user = get_by_id(user_id)
    if user is not None:
        db.session.delete(user)
        db.session.commit()


def get_role_by_name(name):
    return Role.query.filter_by(name=name).first()


def create_role(name, description=""):
    role = Role(name=name, description=description)
    db.session.add(role)
    db.session.commit()
    return role
