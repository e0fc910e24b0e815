"""Authentication forms."""

from wtforms import PasswordField, StringField
from wtforms.validators import DataRequired
from .base import ApiForm, to_text


class LoginForm(ApiForm):
    """Admin or staff login."""
    username = StringField('Username', filters=[to_text], validators=[
        DataRequired(message='Username is required')
    ])
    password = PasswordField('Password', filters=[to_text], validators=[
        DataRequired(message='Password is required')
    ])
