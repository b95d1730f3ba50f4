from pydantic import BaseModel

from utils import FieldError


class Order(BaseModel):
    """A user's order for an event. ``date`` is stamped when the order is stored."""

    id : int = 0
    user_id : int = 0
    event_id : int = 0
    quantity : int = 1
    date : str = ""


def validate_order(order: Order) -> list[FieldError]:
    errors: list[FieldError] = []
    if order.user_id <= 0:
        errors.append(FieldError(field="user_id", message="user_id must be a positive integer"))
    if order.event_id <= 0:
        errors.append(FieldError(field="event_id", message="event_id must be a positive integer"))
    if order.quantity < 1:
        errors.append(FieldError(field="quantity", message="quantity must be at least 1"))
    return errors
