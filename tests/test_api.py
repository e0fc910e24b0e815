import re

import pytest

from tests.conftest import bearer

CONTACT = {
    'name': 'Ann',
    'email': 'a@x.com',
    'subject': 'Hi',
    'message': 'Hello there, testing.'
}


def test_ping_and_health(client):
    assert client.get('/api/ping').get_json() == {'message': 'ping'}
    assert client.get('/api/health').get_json() == {'status': 'ok'}


def test_contact_roundtrip(client, admin_token):
    response = client.post('/api/contact', json=CONTACT)
    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert re.fullmatch(r'\d{10}', body['id'])
    message_id = body['id']

    listing = client.get('/api/admin/messages', headers=bearer(admin_token)).get_json()
    assert [(m['id'], m['read']) for m in listing['messages']] == [(message_id, False)]
    assert listing['unreadCount'] == 1

    full = client.get(f'/api/admin/messages/{message_id}', headers=bearer(admin_token))
    assert full.status_code == 200
    message = full.get_json()['message']
    assert message['message'] == 'Hello there, testing.'
    assert message['read'] is True

    listing = client.get('/api/admin/messages', headers=bearer(admin_token)).get_json()
    assert listing['messages'][0]['read'] is True


def test_contact_accepts_form_encoding(client):
    response = client.post('/api/contact', data=CONTACT)
    assert response.status_code == 200


def test_contact_blank_field(client, admin_token):
    response = client.post('/api/contact', json=dict(CONTACT, subject='   '))
    assert response.status_code == 400
    body = response.get_json()
    assert body['error'] == 'All fields are required'
    assert 'subject' in body['fields']
    listing = client.get('/api/admin/messages', headers=bearer(admin_token)).get_json()
    assert listing['messages'] == []


def test_contact_missing_body(client):
    assert client.post('/api/contact').status_code == 400
    assert client.post('/api/contact', json=['not', 'an', 'object']).status_code == 400


def test_newsletter(client, admin_token):
    assert client.post('/api/newsletter', json={'email': 'a@x.com'}).status_code == 200
    duplicate = client.post('/api/newsletter', json={'email': ' a@x.com '})
    assert duplicate.status_code == 409
    assert duplicate.get_json() == {'error': 'Email already subscribed'}
    assert client.post('/api/newsletter', json={}).status_code == 400

    subs = client.get('/api/admin/newsletter', headers=bearer(admin_token)).get_json()
    assert [s['email'] for s in subs['subscriptions']] == ['a@x.com']


def test_admin_login(client):
    response = client.post('/api/admin/login', json={
        'username': 'admin', 'password': 'admin-pass'
    })
    body = response.get_json()
    assert body['success'] is True
    assert body['userType'] == 'admin'
    assert body['sessionToken']


def test_login_failures(client):
    assert client.post('/api/admin/login', json={'username': 'admin'}).status_code == 400
    wrong = client.post('/api/admin/login', json={'username': 'admin', 'password': 'x'})
    assert wrong.status_code == 401
    assert wrong.get_json() == {'error': 'Invalid credentials'}
    staff_as_admin = client.post('/api/admin/login', json={
        'username': 'ann', 'password': 'staff-pass'
    })
    assert staff_as_admin.status_code == 401


def test_staff_login(client):
    response = client.post('/api/staff/login', json={
        'username': 'bob', 'password': 'staff-pass-2'
    })
    assert response.status_code == 200
    assert response.get_json()['userType'] == 'staff'


def test_verify(client, staff_token):
    response = client.post('/api/verify', json={'sessionToken': staff_token})
    assert response.status_code == 200
    assert response.get_json() == {
        'success': True,
        'valid': True,
        'message': 'Session is valid',
        'username': 'ann',
        'userType': 'staff'
    }


def test_verify_role_scoped(client, admin_token, staff_token):
    assert client.post('/api/staff/verify', json={'sessionToken': admin_token}).status_code == 403
    assert client.post('/api/admin/verify', json={'sessionToken': staff_token}).status_code == 403
    assert client.post('/api/admin/verify', json={'sessionToken': admin_token}).status_code == 200
    assert client.post('/api/verify', json={
        'sessionToken': admin_token, 'userType': 'staff'
    }).status_code == 403
    assert client.post('/api/verify', json={
        'sessionToken': admin_token, 'userType': 'owner'
    }).status_code == 400


def test_verify_invalid_token(client):
    response = client.post('/api/verify', json={'sessionToken': 'nope'})
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Invalid or expired session'}
    assert client.post('/api/verify', json={}).status_code == 401


def test_logout_revokes_and_is_idempotent(client, admin_token):
    for path in ('/api/logout', '/api/admin/logout', '/api/logout'):
        response = client.post(path, json={'sessionToken': admin_token})
        assert response.get_json()['success'] is True
    assert client.post('/api/logout', json={'sessionToken': 'never-issued'}).status_code == 200
    assert client.post('/api/logout').status_code == 200
    assert client.post('/api/verify', json={'sessionToken': admin_token}).status_code == 401
    assert client.get('/api/admin/messages', headers=bearer(admin_token)).status_code == 401


def test_reads_require_a_session(client):
    assert client.get('/api/admin/messages').status_code == 401
    assert client.get('/api/admin/newsletter').status_code == 401
    assert client.get('/api/admin/messages', headers=bearer('bogus')).status_code == 401


def test_staff_reads_messages_but_not_subscriptions(client, staff_token):
    message_id = client.post('/api/contact', json=CONTACT).get_json()['id']
    headers = {'X-Session-Token': staff_token}
    assert client.get('/api/admin/messages', headers=headers).status_code == 200
    assert client.get(f'/api/admin/messages/{message_id}', headers=headers).status_code == 200
    assert client.get('/api/admin/newsletter', headers=headers).status_code == 403


def test_unknown_message(client, admin_token):
    response = client.get('/api/admin/messages/1234567890', headers=bearer(admin_token))
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Message not found'}


def test_mark_read_endpoint(client, admin_token):
    message_id = client.post('/api/contact', json=CONTACT).get_json()['id']
    response = client.post(f'/api/admin/messages/{message_id}/read', headers=bearer(admin_token))
    assert response.get_json() == {'success': True}
    listing = client.get('/api/admin/messages', headers=bearer(admin_token)).get_json()
    assert listing['unreadCount'] == 0


def test_unknown_route_is_json(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_apps_do_not_share_state(app, client):
    from bloodcloud import create_app
    client.post('/api/newsletter', json={'email': 'a@x.com'})
    other = create_app('testing').test_client()
    assert other.post('/api/newsletter', json={'email': 'a@x.com'}).status_code == 200


@pytest.mark.parametrize('path,username', [
    ('/api/admin/login', 'admin'),
    ('/api/staff/login', 'ann'),
    ('/api/staff/login', 'nobody'),
])
def test_long_password_login_is_401(client, path, username):
    response = client.post(path, json={'username': username, 'password': 'x' * 100})
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Invalid credentials'}


@pytest.mark.parametrize('field', ['name', 'email', 'subject', 'message'])
@pytest.mark.parametrize('value', [False, 0, [], {}])
def test_contact_non_text_field_is_400(client, admin_token, field, value):
    response = client.post('/api/contact', json=dict(CONTACT, **{field: value}))
    assert response.status_code == 400
    assert field in response.get_json()['fields']
    listing = client.get('/api/admin/messages', headers=bearer(admin_token)).get_json()
    assert listing['messages'] == []


@pytest.mark.parametrize('value', [False, 0, [], {}])
def test_newsletter_non_text_email_is_400(client, value):
    assert client.post('/api/newsletter', json={'email': value}).status_code == 400


def test_non_text_login_fields_are_400(client):
    response = client.post('/api/admin/login', json={'username': 'admin', 'password': 0})
    assert response.status_code == 400
