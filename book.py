from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from member import Member

UNKNOWN_ISBN = "Unknown"


class BookStatus(Enum):
    AVAILABLE = "Available"
    BORROWED = "Borrowed"


class Book:
    """A single book in the library catalog."""

    def __init__(self, title: str, author: str, isbn: str | None = None) -> None:
        self.title = title
        self.author = author
        self.isbn = isbn if isbn and isbn.strip() else UNKNOWN_ISBN
        self.status = BookStatus.AVAILABLE
        self.borrower: Member | None = None

    @property
    def is_available(self) -> bool:
        return self.status is BookStatus.AVAILABLE

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn}) - {self.status.value}"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Book(title={self.title!r}, isbn={self.isbn!r}, status={self.status.name})"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "status": self.status.value,
            "borrower": self.borrower.name if self.borrower else None,
        }
