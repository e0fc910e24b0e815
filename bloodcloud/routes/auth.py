"""Admin and staff session endpoints."""

from flask import Blueprint, jsonify
from bloodcloud.errors import ValidationError
from bloodcloud.forms.auth import LoginForm
from bloodcloud.models import Role
from bloodcloud.services import get_auth_service
from bloodcloud.utils.request import get_payload, get_session_token

auth_bp = Blueprint('auth', __name__)


def _login(role):
    form = LoginForm(formdata=get_payload())
    if not form.validate():
        raise ValidationError('Username and password are required', fields=form.errors)
    
    identity = get_auth_service().login(role, form.username.data, form.password.data)
    return jsonify({
        'success': True,
        'sessionToken': identity.token,
        'userType': identity.role.value,
        'message': 'Login successful'
    })


def _logout():
    get_auth_service().logout(get_session_token(get_payload()))
    return jsonify({'success': True, 'message': 'Logout successful'})


def _verify(role=None):
    identity = get_auth_service().verify(get_session_token(get_payload()), role)
    return jsonify({
        'success': True,
        'valid': True,
        'message': 'Session is valid',
        **identity.to_dict()
    })


@auth_bp.route('/admin/login', methods=['POST'])
def admin_login():
    return _login(Role.ADMIN)


@auth_bp.route('/staff/login', methods=['POST'])
def staff_login():
    return _login(Role.STAFF)


@auth_bp.route('/logout', methods=['POST'])
@auth_bp.route('/admin/logout', methods=['POST'])
@auth_bp.route('/staff/logout', methods=['POST'])
def logout():
    """Revoke a session token. Always succeeds."""
    return _logout()


@auth_bp.route('/verify', methods=['POST'])
def verify():
    """Verify any session; ``userType`` in the body demands a role."""
    user_type = get_payload().get('userType')
    if not user_type:
        return _verify()
    try:
        role = Role(user_type)
    except ValueError:
        raise ValidationError('Unknown user type', fields={'userType': ['Unknown user type']})
    return _verify(role)


@auth_bp.route('/admin/verify', methods=['POST'])
def admin_verify():
    return _verify(Role.ADMIN)


@auth_bp.route('/staff/verify', methods=['POST'])
def staff_verify():
    return _verify(Role.STAFF)
