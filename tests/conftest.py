import pytest

from app import create_app
from config import TestConfig
from extensions import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    def _register(name="Ada Lovelace", email="ada@example.com", password="engine"):
        return client.post(
            "/register",
            data={"name": name, "email": email, "password": password},
        )

    return _register
