"""User model and its validation rules."""
from email.utils import parseaddr
from typing import Literal

from pydantic import BaseModel, field_validator

from utils import FieldError, require_text


class User(BaseModel):
    """Application user with contact info."""

    id: int = 0
    name: str = ""
    surname: str = ""
    email: str = ""
    phone_number: str = ""
    status: Literal["active", "inactive"] = "active"

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, value: str) -> str:
        """
        Normalize the email to lowercase.

        Args:
            value: Input email string.

        Returns:
            Stripped, lowercased email string.
        """
        return value.strip().lower()


def is_valid_email(value: str) -> bool:
    parsed = parseaddr(value)[1]
    return "@" in parsed and parsed == value


def validate_user(user: User) -> list[FieldError]:
    """
    Check the fields a stored user must carry.

    Args:
        user: Decoded user payload.

    Returns:
        One FieldError per failed check, empty when the user is valid.
    """
    errors: list[FieldError] = []
    require_text(errors, "name", user.name)
    require_text(errors, "email", user.email)
    if user.email and not is_valid_email(user.email):
        errors.append(FieldError(field="email", message="Invalid email address format."))
    return errors
