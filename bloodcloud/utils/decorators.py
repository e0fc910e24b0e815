"""Role-based access decorators."""

from functools import wraps
from flask_login import current_user
from bloodcloud.errors import InvalidOrExpiredSession, RoleMismatch
from bloodcloud.models import Role


def role_required(*roles):
    """Decorator to require a session of one of ``roles``."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not current_user.is_authenticated:
                raise InvalidOrExpiredSession()
            if current_user.role not in roles:
                raise RoleMismatch()
            return f(*args, **kwargs)
        return decorated_function
    return decorator


admin_required = role_required(Role.ADMIN)
reader_required = role_required(Role.ADMIN, Role.STAFF)
