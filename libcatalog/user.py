from __future__ import annotations

from enum import Enum
from typing import List, Union


class Role(Enum):
    """User roles. They only change how a user is labelled."""
    STUDENT = "Student"
    FACULTY = "Faculty"

    @classmethod
    def parse(cls, value: Union["Role", str]) -> "Role":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for role in cls:
            if role.value.lower() == text or role.name.lower() == text:
                return role
        raise ValueError(f"Unknown role: {value!r}. Use Student or Faculty.")


class User:
    """A registered library user and the identifiers they currently hold."""

    def __init__(self, user_id: int, name: str, role: Role) -> None:
        self._user_id = user_id
        self.name = name.strip()
        self.role = role
        self.borrowed: List[str] = []

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def label(self) -> str:
        return self.role.value

    def holds(self, identifier: str) -> bool:
        return identifier in self.borrowed

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.label} - Name: {self.name}, ID: {self.user_id}"

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "role": self.role.value,
            "borrowed_identifiers": list(self.borrowed),
        }
