"""Tests for the entity models and their validation functions.

Each entity gets a happy-path check and at least one failing payload. When a
new model is introduced, add tests for its validation function here.
"""

from pathlib import Path
import sys

import pytest
from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Events.event import Event, validate_event  # noqa: E402
from Orders.order import Order, validate_order  # noqa: E402
from Users.user import User, validate_user  # noqa: E402
from utils import is_valid_date  # noqa: E402


def _fields(errors) -> set[str]:
    return {error.field for error in errors}


def test_user_email_is_normalized_to_lowercase() -> None:
    user = User(name="Ada", email="  Ada.Lovelace@Example.COM ")

    assert user.email == "ada.lovelace@example.com"
    assert validate_user(user) == []


def test_user_defaults_missing_fields() -> None:
    user = User.model_validate({})

    assert user.id == 0
    assert user.name == ""
    assert user.status == "active"


def test_user_requires_name_and_email() -> None:
    errors = validate_user(User())

    assert _fields(errors) == {"name", "email"}


def test_user_rejects_malformed_email() -> None:
    errors = validate_user(User(name="Ada", email="invalid-email"))

    assert len(errors) == 1
    assert errors[0].field == "email"
    assert "Invalid email address format" in errors[0].message


def test_user_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        User(name="Ada", email="ada@example.com", status="banned")


def test_event_accepts_valid_payload() -> None:
    event = Event(title="Concert", description="Live music", date="2024-07-01")

    assert validate_event(event) == []


def test_event_requires_title_and_date() -> None:
    errors = validate_event(Event(title="   "))

    assert _fields(errors) == {"title", "date"}


@pytest.mark.parametrize("value", ["2024-13-01", "2024-02-30", "2024-1-5", "tomorrow"])
def test_event_rejects_malformed_dates(value: str) -> None:
    errors = validate_event(Event(title="Concert", date=value))

    assert _fields(errors) == {"date"}
    assert not is_valid_date(value)


def test_order_accepts_valid_payload() -> None:
    assert validate_order(Order(user_id=1, event_id=2, quantity=3)) == []


def test_order_rejects_missing_references_and_quantity() -> None:
    errors = validate_order(Order(user_id=0, event_id=-1, quantity=0))

    assert _fields(errors) == {"user_id", "event_id", "quantity"}


def test_order_rejects_wrongly_typed_fields() -> None:
    with pytest.raises(ValidationError):
        Order.model_validate({"user_id": "someone", "event_id": 1})
