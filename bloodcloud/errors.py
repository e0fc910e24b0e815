"""Error taxonomy and JSON error handlers."""

import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class BloodCloudError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(BloodCloudError):
    """A required field is missing or blank."""
    status_code = 400
    message = 'All fields are required'

    def __init__(self, message=None, fields=None):
        super().__init__(message)
        self.fields = fields or {}

    def to_dict(self):
        payload = super().to_dict()
        if self.fields:
            payload['fields'] = self.fields
        return payload


class InvalidCredentials(BloodCloudError):
    status_code = 401
    message = 'Invalid credentials'


class InvalidOrExpiredSession(BloodCloudError):
    status_code = 401
    message = 'Invalid or expired session'


class RoleMismatch(BloodCloudError):
    """The session is valid but belongs to the wrong role."""
    status_code = 403
    message = 'Access denied for this account type'


class NotFound(BloodCloudError):
    status_code = 404
    message = 'Not found'


class DuplicateSubscription(BloodCloudError):
    status_code = 409
    message = 'Email already subscribed'


def register_error_handlers(app):
    """Render every error as ``{"error": ...}`` JSON."""

    @app.errorhandler(BloodCloudError)
    def domain_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.name}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        logger.exception('Unhandled error: %s', error)
        return jsonify({'error': 'Internal server error'}), 500
