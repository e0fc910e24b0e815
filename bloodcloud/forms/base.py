"""Base form and input filters for the JSON API."""

from flask_wtf import FlaskForm


def strip_text(value):
    """Trim submitted text; anything that is not a string counts as missing."""
    if not isinstance(value, str):
        return None
    return value.strip()


def to_text(value):
    """Like strip_text but without trimming, for secrets."""
    if not isinstance(value, str):
        return None
    return value


class ApiForm(FlaskForm):
    """JSON API form. Callers pass ``formdata`` explicitly."""

    class Meta:
        csrf = False
