import pytest
from werkzeug.security import generate_password_hash

from course_manager import create_app
from course_manager.config import TestConfig
from course_manager.extensions import db
from course_manager.services import create_user

TEST_EMAIL = 'ada@example.com'
TEST_PASSWORD = 'correct-horse-1'


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def user(app):
    with app.app_context():
        hashed = generate_password_hash(TEST_PASSWORD, method=app.config['PASSWORD_HASH_METHOD'])
        create_user('Ada', 'Lovelace', 'Analytical School', TEST_EMAIL, hashed)
    return {'email': TEST_EMAIL, 'password': TEST_PASSWORD}


@pytest.fixture()
def auth_client(client, user):
    r = client.post('/login', data={'email': user['email'], 'password': user['password']})
    assert r.status_code == 302
    return client


def course_form(**overrides):
    data = {
        'action': 'create',
        'name': 'Algebra',
        'start_date': '2024-01-10',
        'start_time': '09:00',
        'end_date': '2024-01-10',
        'end_time': '10:00',
        'status': 'active',
    }
    data.update(overrides)
    return data
