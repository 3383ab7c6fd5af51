"""Exceptions raised inside the catalog core.

Catalog and Membership raise these; the lending layer turns them into failed
``OperationResult`` values so none of them reach the presentation layer.
"""

from __future__ import annotations

from libcatalog.results import ErrorCode


class LibraryError(Exception):
    """Base exception for catalog and membership errors."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundError(LibraryError, LookupError):
    """Referenced user ID has no matching registration."""

    code = ErrorCode.USER_NOT_FOUND

    def __init__(self, user_id: int) -> None:
        super().__init__("Error: User not found.")
        self.user_id = user_id


class BookNotFoundError(LibraryError, LookupError):
    """Referenced identifier has no matching catalog entry."""

    code = ErrorCode.BOOK_NOT_FOUND

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Error: Book with ISBN {identifier} not found.")
        self.identifier = identifier


class AlreadyBorrowedError(LibraryError):
    code = ErrorCode.ALREADY_BORROWED

    def __init__(self, title: str) -> None:
        super().__init__(f'Error: Book "{title}" is already borrowed.')
        self.title = title


class NeverBorrowedError(LibraryError):
    code = ErrorCode.NEVER_BORROWED

    def __init__(self, title: str) -> None:
        super().__init__(f'Error: Book "{title}" was never borrowed.')
        self.title = title


class NothingBorrowedError(LibraryError):
    """The user has no borrowed books at all."""

    code = ErrorCode.NOTHING_BORROWED

    def __init__(self, user_id: int) -> None:
        super().__init__("Error: No borrowed books to return.")
        self.user_id = user_id


class NotBorrowedByUserError(LibraryError):
    """The identifier is not among the user's borrowed books."""

    code = ErrorCode.NOT_BORROWED_BY_USER

    def __init__(self, user_id: int, identifier: str) -> None:
        super().__init__(f"Error: Book with ISBN {identifier} not found in borrowed books.")
        self.user_id = user_id
        self.identifier = identifier


class DuplicateIdentifierError(LibraryError, ValueError):
    code = ErrorCode.DUPLICATE_IDENTIFIER

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Error: Book with ISBN {identifier} already exists.")
        self.identifier = identifier
