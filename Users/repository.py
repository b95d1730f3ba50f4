from typing import Optional

from Database.store import InMemoryStore
from Users.user import User


class UserRepository(InMemoryStore[User]):
    """In-memory user table."""

    entity_name = "user"

    def find_by_email(self, email: str) -> Optional[User]:
        '''Return the user registered with email, if any.'''
        wanted = email.strip().lower()
        for user in self.list():
            if user.email == wanted:
                return user
        return None
