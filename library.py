import logging
from typing import Any, Dict, List, Optional

from book import Book, BookStatus
from member import Member

logger = logging.getLogger(__name__)


class Library:
    """Holds the catalog and the member roll for one library desk."""

    def __init__(self) -> None:
        self.books: List[Book] = []
        self.members: List[Member] = []

    # ------------------------- Books ------------------------- #
    def add_book(self, book: Book) -> None:
        """Add a pre-constructed Book. Duplicate titles and ISBNs are allowed."""
        self.books.append(book)
        logger.info(f"Book added: {book}")

    def add_new_book(self, title: str, author: str, isbn: Optional[str] = None) -> Book:
        """Build a book from raw field input and add it."""
        if not title or not title.strip() or not author or not author.strip():
            raise ValueError("No new book entered.")

        book = Book(title.strip(), author.strip(), isbn.strip() if isbn else None)
        self.add_book(book)
        return book

    def remove_book(self, book: Book) -> bool:
        """Remove a book from the catalog. Borrowed books stay put and False is returned."""
        if book.status is BookStatus.BORROWED:
            logger.warning(f"Refusing to remove borrowed book '{book.title}'")
            return False

        for i, item in enumerate(self.books):
            if item is book:
                del self.books[i]
                logger.info(f"Book removed: {book}")
                return True
        return False

    def find_book(self, title: str) -> Optional[Book]:
        for book in self.books:
            if book.title == title:
                return book
        return None

    def find_books(self, title: str) -> List[Book]:
        """Every copy with this exact title, in catalog order."""
        return [b for b in self.books if b.title == title]

    def available_books(self) -> List[Book]:
        return [b for b in self.books if b.is_available]

    # ------------------------- Members ------------------------- #
    def add_member(self, member: Member) -> None:
        self.members.append(member)
        logger.info(f"Member added: {member.name}")

    def add_new_member(self, name: str) -> Member:
        if not name or not name.strip():
            raise ValueError("No new name entered.")

        member = Member(name.strip())
        self.add_member(member)
        return member

    def remove_member(self, member: Member) -> bool:
        """Remove a member. Members still holding books are kept and False is returned."""
        if member.borrowed_books:
            logger.warning(
                f"Refusing to remove {member.name}: {len(member.borrowed_books)} book(s) still borrowed"
            )
            return False

        for i, item in enumerate(self.members):
            if item is member:
                del self.members[i]
                logger.info(f"Member removed: {member.name}")
                return True
        return False

    def find_member(self, name: str) -> Optional[Member]:
        for member in self.members:
            if member.name == name:
                return member
        return None

    # ------------------------- Reports ------------------------- #
    def borrowing_summary(self) -> str:
        """One block per member: the name, then each borrowed title indented, or N/A."""
        lines: List[str] = []
        for member in self.members:
            lines.append(f"{member.name}:")
            if member.borrowed_books:
                lines.extend(f"\t{book.title}" for book in member.borrowed_books)
            else:
                lines.append("\tN/A")
        return "".join(f"{line}\n" for line in lines)

    def get_statistics(self) -> Dict[str, Any]:
        borrowed = sum(1 for b in self.books if b.status is BookStatus.BORROWED)
        return {
            "total_books": len(self.books),
            "available_books": len(self.books) - borrowed,
            "borrowed_books": borrowed,
            "total_members": len(self.members),
        }
