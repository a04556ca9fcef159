"""Repository helpers for user lookups."""

from typing import Optional

from snapshare.db_accessor import TableAccessor
from snapshare.models.user import User


class UserRepo(TableAccessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User record type."""
        super().__init__(User)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user by id."""
        return self.find(id=user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user owning an email address."""
        return self.find(email=email)
