"""Borrow and return orchestration.

Both operations validate every precondition before touching any state, then
update the catalog and the membership together. That keeps the lending
invariant: a book is unavailable exactly when one user's borrowed list holds
its identifier.
"""

import logging
from typing import Optional

from libcatalog.catalog import Catalog
from libcatalog.errors import (
    AlreadyBorrowedError,
    LibraryError,
    NeverBorrowedError,
    NotBorrowedByUserError,
    NothingBorrowedError,
)
from libcatalog.membership import Membership
from libcatalog.results import OperationResult
from libcatalog.user import User


logger = logging.getLogger(__name__)


class LendingService:
    """Applies borrow/return requests to a Catalog and a Membership."""

    def __init__(self, catalog: Catalog, membership: Membership, strict_returns: bool = False) -> None:
        self.catalog = catalog
        self.membership = membership
        self.strict_returns = strict_returns

    def borrow(self, user_id: int, identifier: str) -> OperationResult:
        identifier = identifier.strip()
        try:
            user = self.membership.get(user_id)
            book = self.catalog.get(identifier)
            if not book.available:
                raise AlreadyBorrowedError(book.title)
        except LibraryError as e:
            logger.info("Borrow rejected (user=%s, identifier=%s): %s", user_id, identifier, e.code.value)
            return OperationResult.fail(e.code, e.message)

        self.catalog.mark_borrowed(identifier)
        self.membership.record_borrow(user.user_id, identifier)
        logger.info("User %d borrowed %s", user.user_id, identifier)
        return OperationResult.ok(f'{user.name} borrowed "{book.title}".', user_name=user.name, title=book.title)

    def return_book(self, user_id: int, identifier: str) -> OperationResult:
        identifier = identifier.strip()
        try:
            user = self.membership.get(user_id)
            book = self.catalog.get(identifier)
            if book.available:
                raise NeverBorrowedError(book.title)
            holder = self._resolve_holder(user, identifier)
        except LibraryError as e:
            logger.info("Return rejected (user=%s, identifier=%s): %s", user_id, identifier, e.code.value)
            return OperationResult.fail(e.code, e.message)

        self.catalog.mark_available(identifier)
        if holder is not None:
            self.membership.record_return(holder.user_id, identifier)
        logger.info("User %d returned %s", user.user_id, identifier)
        return OperationResult.ok(f'{user.name} returned "{book.title}".', user_name=user.name, title=book.title)

    def _resolve_holder(self, user: User, identifier: str) -> Optional[User]:
        """Pick whose borrowed list loses ``identifier`` on return.

        The requester normally holds the book. Otherwise strict mode refuses
        the return, and permissive mode clears it from the actual holder.
        """
        try:
            return self.membership.check_return(user.user_id, identifier)
        except (NothingBorrowedError, NotBorrowedByUserError):
            if self.strict_returns:
                raise
        holder = self.membership.holder_of(identifier)
        if holder is None:
            logger.error("Book %s is marked borrowed but no user holds it", identifier)
        else:
            logger.warning(
                "User %d is returning %s on behalf of user %d", user.user_id, identifier, holder.user_id
            )
        return holder
