import logging
from typing import Any, Dict, List, Union

from libcatalog.catalog import Catalog
from libcatalog.errors import LibraryError
from libcatalog.lending import LendingService
from libcatalog.membership import Membership
from libcatalog.results import OperationResult
from libcatalog.user import Role


logger = logging.getLogger(__name__)


class Library:
    """Command interface over the catalog, the membership and the lending service.

    Every operation either returns plain data or an ``OperationResult``; core
    exceptions are converted here and never reach the caller.
    """

    def __init__(
        self,
        unique_identifiers: bool = True,
        strict_returns: bool = False,
        search_ignore_case: bool = False,
    ) -> None:
        self.catalog = Catalog(unique_identifiers=unique_identifiers)
        self.membership = Membership()
        self.lending = LendingService(self.catalog, self.membership, strict_returns=strict_returns)
        self.search_ignore_case = search_ignore_case

    @classmethod
    def from_settings(cls, settings: Any) -> "Library":
        return cls(
            unique_identifiers=settings.unique_identifiers,
            strict_returns=settings.strict_returns,
            search_ignore_case=settings.search_ignore_case,
        )

    # ------------------------- Commands ------------------------- #
    def add_book(self, title: str, author: str, identifier: str) -> OperationResult:
        try:
            book = self.catalog.add_book(title, author, identifier)
        except LibraryError as e:
            logger.info("Add rejected for %s: %s", identifier, e.code.value)
            return OperationResult.fail(e.code, e.message)
        return OperationResult.ok("Book added successfully!", title=book.title)

    def register_user(self, name: str, role: Union[Role, str]) -> int:
        return self.membership.register(name, role)

    def borrow(self, user_id: int, identifier: str) -> OperationResult:
        return self.lending.borrow(user_id, identifier)

    def return_book(self, user_id: int, identifier: str) -> OperationResult:
        return self.lending.return_book(user_id, identifier)

    # ------------------------- Queries ------------------------- #
    def search(self, query: str) -> List[Dict[str, Any]]:
        return [book.to_dict() for book in self.catalog.search(query, ignore_case=self.search_ignore_case)]

    def list_books(self) -> List[Dict[str, Any]]:
        return [book.to_dict() for book in self.catalog.list_all()]

    def list_users(self) -> List[Dict[str, Any]]:
        return [user.to_dict() for user in self.membership.list_all()]

    def get_statistics(self) -> Dict[str, Any]:
        books = self.catalog.list_all()
        borrowed = sum(1 for book in books if not book.available)
        return {
            "total_books": len(books),
            "available_books": len(books) - borrowed,
            "borrowed_books": borrowed,
            "unique_authors": len({book.author for book in books}),
            "total_users": len(self.membership),
        }

    def check_invariant(self) -> List[str]:
        """Describe every book whose availability disagrees with the borrowed lists."""
        problems: List[str] = []
        seen = set()
        for book in self.catalog.list_all():
            if book.identifier in seen:
                continue
            seen.add(book.identifier)
            holders = [user for user in self.membership.list_all() if user.holds(book.identifier)]
            if book.available and holders:
                names = ", ".join(str(user.user_id) for user in holders)
                problems.append(f"{book.identifier} is available but held by user(s) {names}")
            elif not book.available and len(holders) != 1:
                problems.append(f"{book.identifier} is borrowed but held by {len(holders)} user(s)")
        return problems
