import mongomock
import pytest

from app import create_app
from config import TestingConfig
from models.password import Password
from models.users import User
from tests.helpers import TEACHER_PASSWORD
from utils.db import mongo


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    mongo.db = mongomock.MongoClient()["AttendanceSystemTest"]
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def seeded(app):
    Password.set_password(TEACHER_PASSWORD)
    User.create("CS101")
    User.create("CS102")
    return app


@pytest.fixture
def open_session(seeded, client):
    resp = client.post("/authenticateTeacher", json={"password": TEACHER_PASSWORD})
    assert resp.status_code == 200
    return client
