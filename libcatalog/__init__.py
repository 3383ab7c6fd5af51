"""Library Catalog - Core Package

This package contains the in-memory catalog core:
- Book and user records (book.py, user.py)
- Catalog of books (catalog.py)
- Membership registry (membership.py)
- Borrow/return orchestration (lending.py)
- Command interface used by the CLI (library.py)
"""

from libcatalog.book import Book
from libcatalog.catalog import Catalog
from libcatalog.errors import LibraryError
from libcatalog.lending import LendingService
from libcatalog.library import Library
from libcatalog.membership import Membership
from libcatalog.results import ErrorCode, OperationResult
from libcatalog.user import Role, User

__all__ = [
    "Book",
    "Catalog",
    "ErrorCode",
    "LendingService",
    "Library",
    "LibraryError",
    "Membership",
    "OperationResult",
    "Role",
    "User",
]
