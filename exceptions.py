class LibraryError(Exception):
    """Base exception for library desk errors."""


class BookUnavailableError(LibraryError):
    """Raised when a member tries to borrow a book that is already borrowed."""

    def __init__(self, book) -> None:
        self.book = book
        super().__init__(f"{book.title} is not available for borrowing. Come back later!")
