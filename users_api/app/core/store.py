"""
In-memory record store for users.

The store keeps ``User`` records in a dict keyed by id plus a
secondary index from email to id, so every lookup is a dict access.
Nothing is persisted: a store lives exactly as long as the application
that owns it (see the lifespan in ``main``).

The store itself does not enforce business rules.  Callers that need
check-then-mutate sequences to be atomic hold ``store.lock`` around
them; the individual methods take the same (re-entrant) lock.
"""

import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


@dataclass
class User:
    """A stored user record.  ``id`` never changes after creation."""

    id: str
    name: str
    email: str


class UserStore:
    """Process-local collection of users, ordered by insertion."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._ids_by_email: Dict[str, str] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self.list())

    def list(self) -> List[User]:
        with self.lock:
            return list(self._users.values())

    def get(self, user_id: str) -> Optional[User]:
        with self.lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        with self.lock:
            user_id = self._ids_by_email.get(email)
            return self._users.get(user_id) if user_id is not None else None

    def add(self, user: User) -> None:
        """Insert ``user``.

        Raises ``ValueError`` when its id or email is already stored;
        callers are expected to have checked both beforehand.
        """
        with self.lock:
            if user.id in self._users:
                raise ValueError(f"duplicate user id {user.id!r}")
            if user.email in self._ids_by_email:
                raise ValueError(f"duplicate email {user.email!r}")
            self._users[user.id] = user
            self._ids_by_email[user.email] = user.id

    def remove(self, user: User) -> User:
        """Remove the record with ``user.id`` and return it.

        Raises ``KeyError`` if no such record is stored.
        """
        with self.lock:
            removed = self._users.pop(user.id)
            self._ids_by_email.pop(removed.email, None)
            return removed

    def update(
        self, user: User, name: Optional[str] = None, email: Optional[str] = None
    ) -> User:
        """Overwrite ``name`` and/or ``email`` of a stored record in place."""
        with self.lock:
            stored = self._users[user.id]
            if email is not None and email != stored.email:
                owner = self._ids_by_email.get(email)
                if owner is not None and owner != stored.id:
                    raise ValueError(f"duplicate email {email!r}")
                self._ids_by_email.pop(stored.email, None)
                stored.email = email
                self._ids_by_email[email] = stored.id
            if name is not None:
                stored.name = name
            return stored

    def clear(self) -> None:
        with self.lock:
            self._users.clear()
            self._ids_by_email.clear()
