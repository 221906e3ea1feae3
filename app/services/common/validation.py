"""Input checks shared by nominations and voting events."""

from datetime import datetime

from app.errors import ValidationError
from settings import TITLE_MIN_LENGTH


def validate_window(title: str, start_date: datetime, end_date: datetime) -> str:
    """Check title length and date ordering; return the stripped title."""
    title = (title or "").strip()
    if len(title) < TITLE_MIN_LENGTH:
        raise ValidationError(f"The title must be at least {TITLE_MIN_LENGTH} characters.")
    if start_date is None or end_date is None:
        raise ValidationError("Start and end dates are required.")
    if end_date <= start_date:
        raise ValidationError("The end date must be a date after the start date.")
    return title
