'''
Event model for the Events module.
'''
from pydantic import BaseModel

from utils import FieldError, is_valid_date, require_text


class Event(BaseModel):

    id : int = 0
    title : str = ""
    description : str = ""
    date : str = ""
    location : str = ""


def validate_event(event: Event) -> list[FieldError]:
    '''Check that an event has a title and a YYYY-MM-DD date.'''
    errors: list[FieldError] = []
    require_text(errors, "title", event.title)
    if not event.date:
        errors.append(FieldError(field="date", message="date is required"))
    elif not is_valid_date(event.date):
        errors.append(FieldError(field="date", message="date must be formatted as YYYY-MM-DD"))
    return errors
