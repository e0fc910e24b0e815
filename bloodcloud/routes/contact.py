"""Public contact form and newsletter endpoints."""

from flask import Blueprint, jsonify
from bloodcloud.errors import ValidationError
from bloodcloud.forms.contact import ContactForm, NewsletterForm
from bloodcloud.services import get_contact_service
from bloodcloud.utils.request import get_payload

contact_bp = Blueprint('contact', __name__)


@contact_bp.route('/contact', methods=['POST'])
def submit_contact():
    """Store a contact form message."""
    form = ContactForm(formdata=get_payload())
    if not form.validate():
        raise ValidationError('All fields are required', fields=form.errors)
    
    message_id = get_contact_service().submit_contact(
        name=form.name.data,
        email=form.email.data,
        subject=form.subject.data,
        message=form.message.data
    )
    return jsonify({
        'success': True,
        'message': 'Contact form submitted successfully',
        'id': message_id
    })


@contact_bp.route('/newsletter', methods=['POST'])
def subscribe_newsletter():
    """Subscribe an email address to the newsletter."""
    form = NewsletterForm(formdata=get_payload())
    if not form.validate():
        raise ValidationError('Email is required', fields=form.errors)
    
    get_contact_service().subscribe_newsletter(form.email.data)
    return jsonify({
        'success': True,
        'message': 'Successfully subscribed to newsletter'
    })
