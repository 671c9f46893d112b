"""
Business logic for users.

``UserService`` wraps a ``UserStore`` and applies the rules of the
API: identifiers must be present, emails must be unique and missing
users are reported as such.  Every lookup that precedes a mutation
runs under the store lock, so two requests cannot both pass the email
check and then both write.
"""

import logging
import uuid
from typing import List, Optional

from ..core.errors import EmailConflictError, MissingIdentifierError, UserNotFoundError
from ..core.store import User, UserStore
from ..schemas.user import UserCreate, UserEmailUpdate, UserRead, UserReplace

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing users held in a ``UserStore``."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    @staticmethod
    def _require_id(user_id: str) -> str:
        if not user_id or not user_id.strip():
            raise MissingIdentifierError()
        return user_id

    def _get_or_raise(self, user_id: str) -> User:
        user = self.store.get(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            raise UserNotFoundError()
        return user

    def _ensure_email_available(self, email: str, exclude_id: Optional[str] = None) -> None:
        """Raise ``EmailConflictError`` if another user holds ``email``.

        The user identified by ``exclude_id`` may keep its own email.
        """
        owner = self.store.find_by_email(email)
        if owner is not None and owner.id != exclude_id:
            logger.info("Rejected email %s: already used by user %s", email, owner.id)
            raise EmailConflictError()

    async def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        return [UserRead.model_validate(user) for user in self.store.list()]

    async def get_user(self, user_id: str) -> UserRead:
        self._require_id(user_id)
        return UserRead.model_validate(self._get_or_raise(user_id))

    async def create_user(self, data: UserCreate) -> UserRead:
        """Create a user with a freshly generated id.

        ``data.email`` is already normalized by the schema.  Raises
        ``EmailConflictError`` if the email is taken.
        """
        with self.store.lock:
            self._ensure_email_available(data.email)
            user = User(id=str(uuid.uuid4()), name=data.name, email=data.email)
            self.store.add(user)
            result = UserRead.model_validate(user)
        logger.info("Created user %s <%s>", result.id, result.email)
        return result

    async def delete_user(self, user_id: str) -> UserRead:
        """Remove a user and return the removed record."""
        self._require_id(user_id)
        with self.store.lock:
            user = self.store.remove(self._get_or_raise(user_id))
        logger.info("Deleted user %s", user_id)
        return UserRead.model_validate(user)

    async def replace_user(self, user_id: str, data: UserReplace) -> UserRead:
        """Overwrite both ``name`` and ``email`` of an existing user.

        The email conflict check runs before the existence check, so an
        unknown id with a taken email yields a conflict.  Nothing is
        created when the id is unknown.
        """
        self._require_id(user_id)
        with self.store.lock:
            self._ensure_email_available(data.email, exclude_id=user_id)
            user = self.store.update(
                self._get_or_raise(user_id), name=data.name, email=data.email
            )
            result = UserRead.model_validate(user)
        logger.info("Replaced user %s", user_id)
        return result

    async def update_user_email(self, user_id: str, data: UserEmailUpdate) -> UserRead:
        """Change only the email of an existing user."""
        self._require_id(user_id)
        with self.store.lock:
            self._ensure_email_available(data.email, exclude_id=user_id)
            user = self.store.update(self._get_or_raise(user_id), email=data.email)
            result = UserRead.model_validate(user)
        logger.info("Updated email of user %s", user_id)
        return result
