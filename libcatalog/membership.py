import logging
from typing import Dict, List, Optional, Union

from libcatalog.errors import NotBorrowedByUserError, NothingBorrowedError, UserNotFoundError
from libcatalog.user import Role, User


logger = logging.getLogger(__name__)


class Membership:
    """Registry of users keyed by their numeric ID."""

    def __init__(self) -> None:
        self.users: Dict[int, User] = {}
        self._next_id = 1

    def register(self, name: str, role: Union[Role, str]) -> int:
        """Store a new user under the next sequential ID and return that ID."""
        user = User(self._next_id, name, Role.parse(role))
        self._next_id += 1
        self.users[user.user_id] = user
        logger.info("Registered %s %r with ID %d", user.label, user.name, user.user_id)
        return user.user_id

    def find(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get(self, user_id: int) -> User:
        user = self.find(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def record_borrow(self, user_id: int, identifier: str) -> None:
        self.get(user_id).borrowed.append(identifier)

    def check_return(self, user_id: int, identifier: str) -> User:
        """Raise the error ``record_return`` would raise, without changing anything."""
        user = self.get(user_id)
        if not user.borrowed:
            raise NothingBorrowedError(user_id)
        if identifier not in user.borrowed:
            raise NotBorrowedByUserError(user_id, identifier)
        return user

    def record_return(self, user_id: int, identifier: str) -> None:
        user = self.check_return(user_id, identifier)
        # duplicates should not exist, drop every occurrence anyway
        user.borrowed = [held for held in user.borrowed if held != identifier]

    def holder_of(self, identifier: str) -> Optional[User]:
        for user in self.users.values():
            if user.holds(identifier):
                return user
        return None

    def list_all(self) -> List[User]:
        return list(self.users.values())

    def __len__(self) -> int:
        return len(self.users)
