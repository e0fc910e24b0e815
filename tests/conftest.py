from datetime import datetime, timedelta, timezone

import pytest
from flask import Flask
from flask_bcrypt import Bcrypt

from bloodcloud import create_app
from bloodcloud.models import MessageStore, Role, SessionStore
from bloodcloud.services import AuthService, ContactService, CredentialTable


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, role, username, password):
    response = client.post(f'/api/{role}/login', json={
        'username': username,
        'password': password
    })
    assert response.status_code == 200
    return response.get_json()['sessionToken']


@pytest.fixture
def admin_token(client):
    return _login(client, 'admin', 'admin', 'admin-pass')


@pytest.fixture
def staff_token(client):
    return _login(client, 'staff', 'ann', 'staff-pass')


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def hasher():
    hash_app = Flask(__name__)
    hash_app.config['BCRYPT_LOG_ROUNDS'] = 4
    hash_app.config['BCRYPT_HANDLE_LONG_PASSWORDS'] = True
    return Bcrypt(hash_app)


@pytest.fixture
def auth_service(hasher):
    return AuthService(SessionStore(), {
        Role.ADMIN: CredentialTable(hasher, [('admin', 'secret')]),
        Role.STAFF: CredentialTable(hasher, [('ann', 'pw1'), ('bob', 'pw2')]),
    })


class StepClock:
    """Clock that advances one second per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def contact_service(clock):
    return ContactService(MessageStore(), clock=clock)
