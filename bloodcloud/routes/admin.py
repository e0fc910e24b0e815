"""Message and subscription reading for signed-in admin and staff."""

from flask import Blueprint, jsonify
from flask_login import login_required
from bloodcloud.services import get_contact_service
from bloodcloud.utils.decorators import admin_required, reader_required

admin_bp = Blueprint('admin', __name__)


# --- Contact Messages ---
@admin_bp.route('/messages')
@login_required
@reader_required
def messages():
    """Message summaries, newest first."""
    service = get_contact_service()
    return jsonify({
        'messages': service.list_messages(),
        'unreadCount': service.unread_count()
    })


@admin_bp.route('/messages/<message_id>')
@login_required
@reader_required
def view_message(message_id):
    """Full message. Viewing marks it read."""
    message = get_contact_service().view_message(message_id)
    return jsonify({'message': message.to_dict()})


@admin_bp.route('/messages/<message_id>/read', methods=['POST'])
@login_required
@reader_required
def mark_message_read(message_id):
    """Mark message as read."""
    get_contact_service().mark_read(message_id)
    return jsonify({'success': True})


# --- Newsletter ---
@admin_bp.route('/newsletter')
@login_required
@admin_required
def newsletter():
    """Newsletter subscriptions, newest first."""
    return jsonify({'subscriptions': get_contact_service().list_subscriptions()})
