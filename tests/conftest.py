import pytest
from flask import has_app_context
from werkzeug.security import generate_password_hash

from civic import create_app
from civic.config import TestConfig
from civic.extensions import db
from civic.models import Role, User


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    """Create an account and return its id."""
    def _create(email, role, zone, password, name):
        user = User(
            name=name or email.split('@')[0],
            email=email,
            password_hash=generate_password_hash(password, method=TestConfig.PASSWORD_HASH_METHOD),
            role=role,
            zone=zone,
        )
        db.session.add(user)
        db.session.commit()
        return user.id

    def _make_user(email, role=Role.CITIZEN, zone=None, password='testpass', name=None):
        if has_app_context():
            return _create(email, role, zone, password, name)
        with app.app_context():
            return _create(email, role, zone, password, name)
    return _make_user


@pytest.fixture()
def login(client):
    def _login(email, password='testpass'):
        r = client.post('/api/auth/login', json={'email': email, 'password': password})
        assert r.status_code == 200, r.get_json()
        return r
    return _login
