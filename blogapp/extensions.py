# blogapp/extensions.py
from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from pymongo import MongoClient

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


class MongoStore:
    """Holds the MongoClient for the blog document store.

    A single client per application; pymongo pools connections internally.
    Tests hand in their own client (mongomock) through ``init_app``.
    """

    def __init__(self):
        self.client = None
        self.db = None

    def init_app(self, app, client=None):
        if client is None:
            client = MongoClient(app.config["MONGO_URI"], tz_aware=False)
        self.client = client
        self.db = client[app.config["MONGO_DB_NAME"]]
        app.extensions["mongo"] = self

    def collection(self, name):
        if self.db is None:
            raise RuntimeError("MongoStore is not initialised; call init_app first")
        return self.db[name]


mongo = MongoStore()
