from __future__ import annotations


class Book:
    """Represents a single book item in the catalog."""

    def __init__(self, title: str, author: str, identifier: str, available: bool = True) -> None:
        self.title = title.strip()
        self.author = author.strip()
        self._identifier = identifier.strip()
        self.available = available

    @property
    def identifier(self) -> str:
        return self._identifier

    def matches(self, query: str, ignore_case: bool = False) -> bool:
        """True when ``query`` is a substring of the title or the author."""
        title, author = self.title, self.author
        if ignore_case:
            query, title, author = query.lower(), title.lower(), author.lower()
        return query in title or query in author

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ISBN: {self.identifier})"

    def __repr__(self) -> str:
        return f"Book(title={self.title!r}, author={self.author!r}, identifier={self.identifier!r}, available={self.available!r})"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "identifier": self.identifier,
            "available": self.available,
        }
