"""Identifier and session token generation."""

import secrets
import time

ID_MIN = 1000000000
ID_SPAN = 9000000000

_BASE36 = '0123456789abcdefghijklmnopqrstuvwxyz'


def generate_id():
    """Return a random 10-digit numeric string."""
    return str(ID_MIN + secrets.randbelow(ID_SPAN))


def to_base36(number):
    if number == 0:
        return '0'
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return ''.join(reversed(digits))


def generate_session_token():
    """Random component followed by the current time in base 36."""
    return secrets.token_hex(16) + to_base36(int(time.time() * 1000))
