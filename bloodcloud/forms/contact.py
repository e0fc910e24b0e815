"""Contact and newsletter forms."""

from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired
from .base import ApiForm, strip_text


class ContactForm(ApiForm):
    """Contact form submission."""
    name = StringField('Name', filters=[strip_text], validators=[
        DataRequired(message='Name is required')
    ])
    email = StringField('Email', filters=[strip_text], validators=[
        DataRequired(message='Email is required')
    ])
    subject = StringField('Subject', filters=[strip_text], validators=[
        DataRequired(message='Subject is required')
    ])
    message = TextAreaField('Message', filters=[strip_text], validators=[
        DataRequired(message='Message is required')
    ])


class NewsletterForm(ApiForm):
    email = StringField('Email', filters=[strip_text], validators=[
        DataRequired(message='Email is required')
    ])
