import logging
from typing import List, Optional

from libcatalog.book import Book
from libcatalog.errors import BookNotFoundError, DuplicateIdentifierError


logger = logging.getLogger(__name__)


class Catalog:
    """Owns the books of the library in insertion order."""

    def __init__(self, unique_identifiers: bool = True) -> None:
        self.unique_identifiers = unique_identifiers
        self.books: List[Book] = []

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str, identifier: str) -> Book:
        """Append a new, available book. Rejects duplicate identifiers when uniqueness is on."""
        book = Book(title=title, author=author, identifier=identifier)
        if self.find_by_identifier(book.identifier) is not None:
            if self.unique_identifiers:
                raise DuplicateIdentifierError(book.identifier)
            logger.warning("Identifier %s is already catalogued; the new entry will be shadowed", book.identifier)
        self.books.append(book)
        logger.info("Added book %r (%s)", book.title, book.identifier)
        return book

    def find_by_identifier(self, identifier: str) -> Optional[Book]:
        # stored identifiers are stripped, see Book
        identifier = identifier.strip()
        for book in self.books:
            if book.identifier == identifier:
                return book
        return None

    def get(self, identifier: str) -> Book:
        book = self.find_by_identifier(identifier)
        if book is None:
            raise BookNotFoundError(identifier)
        return book

    def mark_borrowed(self, identifier: str) -> Book:
        book = self.get(identifier)
        book.available = False
        return book

    def mark_available(self, identifier: str) -> Book:
        book = self.get(identifier)
        book.available = True
        return book

    def search(self, query: str, ignore_case: bool = False) -> List[Book]:
        """Books whose title or author contains ``query``, in catalog order."""
        return [book for book in self.books if book.matches(query, ignore_case=ignore_case)]

    def list_all(self) -> List[Book]:
        return list(self.books)

    def __len__(self) -> int:
        return len(self.books)
