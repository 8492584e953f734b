from __future__ import annotations

import logging
from typing import List

from book import Book, BookStatus
from exceptions import BookUnavailableError

logger = logging.getLogger(__name__)


class Member:
    """A library member and the books they currently hold."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.borrowed_books: List[Book] = []

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Member(name={self.name!r}, borrowed={len(self.borrowed_books)})"

    def borrow_book(self, book: Book) -> None:
        """Borrow an available book.

        Raises BookUnavailableError, leaving every record untouched, when the
        book is already out.
        """
        if book.status is not BookStatus.AVAILABLE:
            logger.warning(f"Borrow rejected: '{book.title}' is held by {book.borrower}")
            raise BookUnavailableError(book)

        book.status = BookStatus.BORROWED
        book.borrower = self
        self.borrowed_books.append(book)
        logger.info(f"'{book.title}' borrowed by {self.name}")

    def return_book(self, book: Book) -> bool:
        """Give a book back. Returns False (and does nothing) unless this member holds it."""
        if book.status is not BookStatus.BORROWED or book.borrower is not self:
            logger.debug(f"Ignoring return of '{book.title}' by {self.name}")
            return False

        book.status = BookStatus.AVAILABLE
        book.borrower = None
        self.borrowed_books.remove(book)
        logger.info(f"'{book.title}' returned by {self.name}")
        return True

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "borrowed_books": [b.title for b in self.borrowed_books],
        }
