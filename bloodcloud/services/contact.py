"""Contact form and newsletter handling."""

import logging
from datetime import datetime, timezone
from bloodcloud.errors import DuplicateSubscription, NotFound, ValidationError

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ('name', 'email', 'subject', 'message')


def clean_text(value):
    if not isinstance(value, str):
        return ''
    return value.strip()


def utcnow():
    return datetime.now(timezone.utc)


class ContactService:
    """Accepts submissions and serves them back to signed-in readers."""

    def __init__(self, message_store, clock=utcnow):
        self.store = message_store
        self._clock = clock

    def submit_contact(self, name, email, subject, message):
        """Store a contact message and return its 10-digit id."""
        values = dict(zip(CONTACT_FIELDS, map(clean_text, (name, email, subject, message))))
        missing = [field for field in CONTACT_FIELDS if not values[field]]
        if missing:
            raise ValidationError(fields={
                field: [f'{field.capitalize()} is required'] for field in missing
            })
        # Email format is not checked here; the front end validates it.
        record = self.store.add_message(timestamp=self._clock(), **values)
        logger.info('Contact message %s received', record.id)
        return record.id

    def subscribe_newsletter(self, email):
        email = clean_text(email)
        if not email:
            raise ValidationError('Email is required', fields={'email': ['Email is required']})
        try:
            record = self.store.add_subscription(email, self._clock())
        except DuplicateSubscription:
            logger.info('Duplicate newsletter subscription for %r', email)
            raise
        logger.info('Newsletter subscription %s added', record.id)
        return record

    def list_messages(self):
        """Summaries, newest first, without message bodies."""
        return [record.to_summary() for record in self.store.messages()]

    def view_message(self, message_id):
        """Return the full message and mark it read.

        This is a mutating read: opening a message is what flags it as
        seen. Viewing an already read message leaves the flag alone.
        """
        record = self.store.mark_read(message_id)
        if record is None:
            raise NotFound('Message not found')
        return record

    def mark_read(self, message_id):
        self.view_message(message_id)

    def unread_count(self):
        return self.store.count_unread()

    def list_subscriptions(self):
        return [record.to_dict() for record in self.store.subscriptions()]
