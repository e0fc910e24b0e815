"""Contact messages, newsletter subscriptions and their in-memory store."""

import threading
from dataclasses import dataclass
from datetime import datetime
from bloodcloud.errors import DuplicateSubscription
from bloodcloud.utils.ids import generate_id


@dataclass
class ContactMessage:
    """Contact form submission."""
    id: str
    name: str
    email: str
    subject: str
    message: str
    timestamp: datetime
    read: bool = False

    def to_summary(self):
        """Listing view, without the message body."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'timestamp': self.timestamp.isoformat(),
            'read': self.read
        }

    def to_dict(self):
        data = self.to_summary()
        data['message'] = self.message
        return data

    def __repr__(self):
        return f'<ContactMessage {self.id} {self.subject}>'


@dataclass
class NewsletterSubscription:
    id: str
    email: str
    timestamp: datetime

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'timestamp': self.timestamp.isoformat()
        }

    def __repr__(self):
        return f'<NewsletterSubscription {self.email}>'


def _newest_first(records):
    return sorted(records, key=lambda record: record.timestamp, reverse=True)


class MessageStore:
    """Process-wide collection of contact messages and subscriptions.

    Messages and subscriptions draw ids from one space; an id is never
    handed out twice by the same store.
    """

    def __init__(self, id_factory=generate_id):
        self._id_factory = id_factory
        self._messages = []
        self._subscriptions = []
        self._issued_ids = set()
        self._lock = threading.Lock()

    def _next_id(self):
        new_id = self._id_factory()
        while new_id in self._issued_ids:
            new_id = self._id_factory()
        self._issued_ids.add(new_id)
        return new_id

    def add_message(self, name, email, subject, message, timestamp):
        with self._lock:
            record = ContactMessage(
                id=self._next_id(),
                name=name,
                email=email,
                subject=subject,
                message=message,
                timestamp=timestamp
            )
            self._messages.append(record)
            return record

    def add_subscription(self, email, timestamp):
        """Store a subscription; the email must not already be subscribed."""
        with self._lock:
            if any(sub.email == email for sub in self._subscriptions):
                raise DuplicateSubscription()
            record = NewsletterSubscription(
                id=self._next_id(),
                email=email,
                timestamp=timestamp
            )
            self._subscriptions.append(record)
            return record

    def mark_read(self, message_id):
        """Flag a message as read and return it, or None if unknown."""
        with self._lock:
            for record in self._messages:
                if record.id == message_id:
                    record.read = True
                    return record
        return None

    def messages(self):
        with self._lock:
            return _newest_first(self._messages)

    def subscriptions(self):
        with self._lock:
            return _newest_first(self._subscriptions)

    def count_unread(self):
        with self._lock:
            return sum(1 for record in self._messages if not record.read)
