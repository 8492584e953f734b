import logging
from typing import Optional

from book import Book
from library import Library

logger = logging.getLogger(__name__)


class LibraryFacade:
    """Borrow and return by member name and book title instead of object references.

    Lookups are linear and the first match wins. A lookup that finds nothing
    turns the call into a no-op.
    """

    def __init__(self, library: Library) -> None:
        self.library = library

    def borrow_book(self, member_name: str, book_title: str) -> Optional[Book]:
        member = self.library.find_member(member_name)
        book = self.library.find_book(book_title)
        if member is None or book is None:
            logger.debug(f"Borrow skipped: member={member_name!r} book={book_title!r} not found")
            return None

        member.borrow_book(book)
        return book

    def return_book(self, member_name: str, book_title: str) -> bool:
        member = self.library.find_member(member_name)
        book = self.library.find_book(book_title)
        if member is None or book is None:
            logger.debug(f"Return skipped: member={member_name!r} book={book_title!r} not found")
            return False

        return member.return_book(book)
