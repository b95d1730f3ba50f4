"""Business rules for users."""
import logging

from errors import ConflictError, InvalidPayloadError
from Users.repository import UserRepository
from Users.user import User, validate_user

logger = logging.getLogger(__name__)


class UserUsecase:
    """Orchestrates validation and storage of users."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def create_user(self, user: User) -> User:
        """
        Validate and store a new user.

        Raises:
            InvalidPayloadError: if a required field is missing or malformed.
            ConflictError: if the email is already registered.
        """
        errors = validate_user(user)
        if errors:
            raise InvalidPayloadError(errors, data=user)
        if self.repository.find_by_email(user.email) is not None:
            logger.warning("User already exists", extra={"email": user.email})
            raise ConflictError(f"User with email {user.email} already exists")
        created = self.repository.create(user)
        logger.info("User created", extra={"user_id": created.id})
        return created

    def list_users(self) -> list[User]:
        return self.repository.list()

    def get_user(self, user_id: int) -> User:
        return self.repository.get(user_id)

    def update_user(self, user: User) -> User:
        errors = validate_user(user)
        if errors:
            raise InvalidPayloadError(errors, data=user)
        owner = self.repository.find_by_email(user.email)
        if owner is not None and owner.id != user.id:
            raise ConflictError(f"User with email {user.email} already exists")
        updated = self.repository.update(user)
        logger.info("User updated", extra={"user_id": updated.id})
        return updated

    def delete_user(self, user_id: int) -> bool:
        deleted = self.repository.delete(user_id)
        logger.info("User deleted", extra={"user_id": user_id})
        return deleted
