from datetime import date, datetime

from pydantic import BaseModel

DATE_FORMAT = "%Y-%m-%d"


class FieldError(BaseModel):
    """A single failed check on an entity field."""

    field: str
    message: str


def format_date(day: date) -> str:
    '''Render a day as YYYY-MM-DD.'''
    return day.strftime(DATE_FORMAT)


def is_valid_date(value: str) -> bool:
    '''Check that value is a real calendar day written as YYYY-MM-DD.'''
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return len(value) == 10


def require_text(errors: list[FieldError], field: str, value: str) -> None:
    '''Append an error when a text field is blank.'''
    if not value.strip():
        errors.append(FieldError(field=field, message=f"{field} is required"))
